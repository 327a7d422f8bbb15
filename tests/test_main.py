import unittest
from unittest import mock

from connect4 import config
from connect4 import main as main_mod


class TestMain(unittest.TestCase):
    def setUp(self):
        for name in ("USE_COLOR", "CLEAR_SCREEN"):
            p = mock.patch.object(config, name, getattr(config, name))
            p.start()
            self.addCleanup(p.stop)

    def test_options_build_the_game(self):
        with mock.patch.object(main_mod, "run_game") as run:
            main_mod.main([
                "--width", "8", "--height", "5",
                "--p1-color", "green", "--p2-color", "blue",
                "--no-color", "--no-clear",
            ])
        state = run.call_args.args[0]
        self.assertEqual((state.board.cols, state.board.rows), (8, 5))
        self.assertEqual((state.player(1).attrs, state.player(2).attrs), ("green", "blue"))
        self.assertFalse(config.USE_COLOR)
        self.assertFalse(config.CLEAR_SCREEN)

    def test_missing_colours_are_prompted(self):
        with mock.patch.object(main_mod, "run_game") as run, \
                mock.patch.object(main_mod, "ask_colors", return_value=("cyan", "red")) as ask:
            main_mod.main(["--p1-color", "cyan"])
        ask.assert_called_once_with(p1="cyan", p2=None)
        state = run.call_args.args[0]
        self.assertEqual(state.player(2).attrs, "red")
        self.assertEqual((state.board.cols, state.board.rows), (7, 6))

    def test_bad_dimensions_exit(self):
        with mock.patch.object(main_mod, "run_game"), mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit):
                main_mod.main(["--width", "0"])

    def test_unknown_colour_exits(self):
        with mock.patch("sys.stderr"):
            with self.assertRaises(SystemExit):
                main_mod.main(["--p1-color", "purple"])


if __name__ == "__main__":
    unittest.main()
