"""
Tests for the session configuration.
"""

from unittest import TestCase, main

from game2048.utils.config import GameConfiguration


class TestGameConfiguration(TestCase):
    def test_defaults(self):
        config = GameConfiguration()

        self.assertEqual(config.size, 4)
        self.assertEqual(config.target_tile, 2048)
        self.assertEqual(config.initial_tiles, 2)
        self.assertEqual(config.history_depth, 10)
        self.assertTrue(config.record_unchanged_moves)
        self.assertEqual(config.record_prefix, 'move')

    def test_invalid_values(self):
        """Each invalid setting is rejected."""
        for kwargs in (
            {'size': 5},
            {'target_tile': 1000},
            {'target_tile': 1},
            {'initial_tiles': 0},
            {'initial_tiles': 17},
            {'history_depth': 0},
        ):
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    GameConfiguration(**kwargs)


if __name__ == '__main__':
    main()
