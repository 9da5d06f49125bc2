from unittest import TestCase, main

from numpy import array

from tilemerge.core.errors import InvalidDirectionError
from tilemerge.core.gamemove import Direction, has_any_move, legal_directions, legal_directions_mask


class TestDirection(TestCase):
    def test_parse(self):
        """
        Test that members, values and names are all accepted.
        """
        self.assertIs(Direction.parse(Direction.DOWN), Direction.DOWN)
        self.assertIs(Direction.parse(2), Direction.RIGHT)
        self.assertIs(Direction.parse(' Up '), Direction.UP)
        self.assertIs(Direction.parse('left'), Direction.LEFT)

    def test_parse_unknown(self):
        with self.assertRaises(InvalidDirectionError):
            Direction.parse('diagonal')
        with self.assertRaises(InvalidDirectionError):
            Direction.parse(7)


class TestGameMove(TestCase):
    def test_legal_directions(self):
        """
        Test if legal directions are correctly identified.
        """
        grid = array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        self.assertEqual(legal_directions_mask(grid), (False, True, True, True))
        self.assertEqual(set(legal_directions(grid)), {Direction.UP, Direction.RIGHT, Direction.DOWN})

    def test_merge_only_direction(self):
        """
        A full row with one pair can move horizontally but not vertically.
        """
        grid = array([[2, 2, 4, 8], [4, 8, 16, 32], [8, 16, 32, 64], [16, 32, 64, 128]])
        self.assertEqual(legal_directions_mask(grid), (True, False, True, False))

    def test_has_any_move(self):
        self.assertTrue(has_any_move(array([[0] * 4] * 4)))
        self.assertFalse(has_any_move(array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])))
        self.assertTrue(has_any_move(array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 4]])))


if __name__ == '__main__':
    main()
