"""
Tests for the line reducer and the rotation-based board transform.
"""

from unittest import TestCase, main

import numpy as np

from game2048.core.gamemove import (
    Direction,
    apply_move,
    illegal_directions,
    legal_directions,
    merge_line,
    rotate_board,
    slide_and_merge,
)

generator = np.random.default_rng(42)


def generate_random_board() -> np.ndarray:
    """Generate a random 2048 game board."""
    board = np.zeros((4, 4), dtype=np.int64)
    num_tiles = generator.integers(1, 17)
    tile_values = generator.choice([2, 4, 8, 16, 32, 64, 128, 256, 512, 1024, 2048], size=num_tiles)
    indices = generator.choice(16, size=num_tiles, replace=False)
    board.flat[indices] = tile_values
    return board


class TestMergeLine(TestCase):
    """Test sliding and merging of a single line."""

    def assertLine(self, line, expected, expected_score):
        merged, score = merge_line(line)
        np.testing.assert_array_equal(merged, np.array(expected))
        self.assertEqual(score, expected_score)

    def test_merge_then_keep(self):
        """Pair merges and the next tile slides next to it."""
        self.assertLine([2, 2, 4, 0], [4, 4, 0, 0], 4)

    def test_slide_only(self):
        """Lone tile slides to the start without score."""
        self.assertLine([0, 0, 0, 2], [2, 0, 0, 0], 0)

    def test_no_cascade(self):
        """Four equal tiles give two merges, never a cascade into 8."""
        self.assertLine([2, 2, 2, 2], [4, 4, 0, 0], 8)

    def test_merge_across_gap(self):
        """Empty cells between equal tiles do not prevent the merge."""
        self.assertLine([4, 0, 0, 4], [8, 0, 0, 0], 8)

    def test_two_pairs(self):
        """Score sums both merges."""
        self.assertLine([4, 4, 8, 8], [8, 16, 0, 0], 24)

    def test_three_equal(self):
        """The first two of three equal tiles merge."""
        self.assertLine([0, 2, 2, 2], [4, 2, 0, 0], 4)

    def test_empty_line(self):
        """Empty line stays empty."""
        self.assertLine([0, 0, 0, 0], [0, 0, 0, 0], 0)

    def test_blocked_line(self):
        """Packed distinct tiles do not move."""
        self.assertLine([2, 4, 8, 16], [2, 4, 8, 16], 0)

    def test_wrong_length(self):
        with self.assertRaises(ValueError):
            merge_line([2, 2, 4])


class TestRotation(TestCase):
    def test_single_rotation(self):
        """One turn maps old[i][j] to new[j][3 - i]."""
        board = np.arange(16, dtype=np.int64).reshape(4, 4)
        rotated = rotate_board(board)

        for i in range(4):
            for j in range(4):
                self.assertEqual(rotated[j, 3 - i], board[i, j])

    def test_four_rotations_identity(self):
        """Four quarter turns give back the original board."""
        for _ in range(50):
            board = generate_random_board()
            result = board
            for _ in range(4):
                result = rotate_board(result)
            np.testing.assert_array_equal(result, board)

    def test_rotation_returns_copy(self):
        """Rotated board never shares memory with its input."""
        board = generate_random_board()
        self.assertFalse(np.shares_memory(rotate_board(board, 0), board))


class TestSlideAndMerge(TestCase):
    def test_score_accumulation_multiple_merges(self):
        """Score correctly sums across rows."""
        board = np.array([[2, 2, 0, 0], [4, 4, 0, 0], [8, 8, 0, 0], [16, 16, 0, 0]])
        result = slide_and_merge(board)

        # ##>: 4 + 8 + 16 + 32 = 60.
        self.assertEqual(result.score, 60)
        self.assertTrue(result.changed)

    def test_unchanged_rows(self):
        """Left-packed rows report no change."""
        board = np.array([[2, 4, 0, 0], [8, 0, 0, 0], [0, 0, 0, 0], [2, 4, 8, 16]])
        result = slide_and_merge(board)

        np.testing.assert_array_equal(result.board, board)
        self.assertEqual(result.score, 0)
        self.assertFalse(result.changed)


class TestApplyMove(TestCase):
    """Test each direction on a known board."""

    def setUp(self):
        self.board = np.array([[2, 0, 0, 2], [0, 0, 0, 0], [0, 4, 0, 0], [0, 4, 0, 0]])

    def test_left(self):
        result = apply_move(self.board, Direction.LEFT)
        expected = np.array([[4, 0, 0, 0], [0, 0, 0, 0], [4, 0, 0, 0], [4, 0, 0, 0]])

        np.testing.assert_array_equal(result.board, expected)
        self.assertEqual(result.score, 4)
        self.assertTrue(result.changed)

    def test_right(self):
        result = apply_move(self.board, Direction.RIGHT)
        expected = np.array([[0, 0, 0, 4], [0, 0, 0, 0], [0, 0, 0, 4], [0, 0, 0, 4]])

        np.testing.assert_array_equal(result.board, expected)
        self.assertEqual(result.score, 4)

    def test_up(self):
        result = apply_move(self.board, Direction.UP)
        expected = np.array([[2, 8, 0, 2], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

        np.testing.assert_array_equal(result.board, expected)
        self.assertEqual(result.score, 8)

    def test_down(self):
        result = apply_move(self.board, Direction.DOWN)
        expected = np.array([[0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [2, 8, 0, 2]])

        np.testing.assert_array_equal(result.board, expected)
        self.assertEqual(result.score, 8)

    def test_down_merges_from_bottom(self):
        """Three equal tiles moving down merge the two lowest."""
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0]])
        result = apply_move(board, Direction.DOWN)

        np.testing.assert_array_equal(result.board[:, 0], np.array([0, 0, 2, 4]))

    def test_string_direction(self):
        """Direction values are accepted as plain strings."""
        result = apply_move(self.board, 'left')
        self.assertEqual(result.score, 4)

    def test_input_not_mutated(self):
        original = self.board.copy()
        apply_move(self.board, Direction.UP)
        np.testing.assert_array_equal(self.board, original)

    def test_slide_without_merge_changes(self):
        """A slide with no merge still counts as a change."""
        board = np.array([[0, 2, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        result = apply_move(board, Direction.LEFT)

        self.assertTrue(result.changed)
        self.assertEqual(result.score, 0)

    def test_blocked_direction(self):
        """Tiles already against the edge do not move."""
        board = np.array([[2, 0, 0, 0], [4, 0, 0, 0], [8, 0, 0, 0], [16, 0, 0, 0]])
        result = apply_move(board, Direction.LEFT)

        np.testing.assert_array_equal(result.board, board)
        self.assertFalse(result.changed)
        self.assertEqual(result.score, 0)

    def test_sum_preserved_plus_score(self):
        """Tile sum grows by exactly the score gained, in every direction."""
        for _ in range(100):
            board = generate_random_board()
            for direction in Direction:
                result = apply_move(board, direction)
                self.assertEqual(int(result.board.sum()), int(board.sum()) + result.score)

    def test_unknown_direction(self):
        with self.assertRaises(ValueError):
            apply_move(self.board, 'diagonal')

    def test_invalid_board(self):
        with self.assertRaises(ValueError):
            apply_move(np.array([[2, 3, 0, 0]] * 4), Direction.LEFT)


class TestLegalDirections(TestCase):
    def test_legal_and_illegal(self):
        """Stacked pair on the left edge: everything but left is legal."""
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])

        self.assertEqual(legal_directions(board), [Direction.UP, Direction.DOWN, Direction.RIGHT])
        self.assertEqual(illegal_directions(board), [Direction.LEFT])

    def test_terminal_board(self):
        """No direction is legal on a terminal board."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])

        self.assertEqual(legal_directions(board), [])
        self.assertEqual(set(illegal_directions(board)), set(Direction))


if __name__ == '__main__':
    main()
