import contextlib
import io
import logging
import unittest
from unittest import mock

from ecdemo import cli


class Tests(unittest.TestCase):
    def run_main(self, argv):
        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cli.main(argv)
        return out.getvalue()

    def test_exchange_defaults(self):
        output = self.run_main(["--defaults", "exchange"]).splitlines()

        self.assertTrue(output[0].startswith("Points of the curve: (0,6),(0,11),"))
        self.assertEqual(output[1], "Public key of B: dBG=5(5,1)=(9,16)")
        self.assertEqual(output[2], "Public key of A: dAG=3(5,1)=(10,6)")
        self.assertEqual(output[3], "Shared secret computed by A: 3*(9,16)=(3,16)")
        self.assertEqual(output[4], "Shared secret computed by B: 5*(10,6)=(3,16)")
        self.assertEqual(output[5], "M=8")
        self.assertEqual(output[6], "h=2=17//8")
        self.assertEqual(output[7], "Encoded message Qm=(10,6)")
        self.assertEqual(
            output[8], "Ciphertext and public key sent from A to B: {(5,16),(10,6)}"
        )

    def test_exchange_arguments(self):
        output = self.run_main(
            [
                "exchange",
                "--p", "23", "--a", "1", "--b", "1",
                "--gx", "3", "--gy", "10",
                "--da", "4", "--db", "6",
                "--message", "2",
            ]
        )
        self.assertIn("M=2", output)
        self.assertIn("h=11=23//2", output)

    def test_points(self):
        output = self.run_main(["points", "--p", "23", "--a", "1", "--b", "1"])
        self.assertIn("y^2 = x^3 + 1x + 1 (mod 23)", output)
        self.assertIn("(0,1),(0,22)", output)

    def test_points_prompts_for_missing_values(self):
        answers = iter(["17", "two", "2", "2"])
        args = cli.build_parser().parse_args(["points"])

        out = io.StringIO()
        with contextlib.redirect_stdout(out):
            cli.points(args, prompt=lambda text: next(answers))

        self.assertEqual((args.p, args.a, args.b), (17, 2, 2))
        self.assertIn("Please enter an integer.", out.getvalue())
        self.assertIn("Points of the curve (18):", out.getvalue())

    def test_error_exit_status(self):
        err = io.StringIO()
        with contextlib.redirect_stderr(err), contextlib.redirect_stdout(io.StringIO()):
            with self.assertRaises(SystemExit) as cm:
                cli.main(["--defaults", "exchange", "--message", "7"])

        self.assertEqual(cm.exception.code, 1)
        self.assertIn("No curve point found for message 7", err.getvalue())

    def test_base_point_is_reduced(self):
        output = self.run_main(
            [
                "exchange",
                "--p", "17", "--a", "2", "--b", "2",
                "--gx", "22", "--gy", "18",
                "--da", "1", "--db", "5",
                "--message", "5",
            ]
        )
        self.assertIn("Public key of A: dAG=1(5,1)=(5,1)", output)
        self.assertIn("Public key of B: dBG=5(5,1)=(9,16)", output)

    def test_closed_input_exit_status(self):
        err = io.StringIO()
        with mock.patch("sys.stdin", io.StringIO("")):
            with contextlib.redirect_stderr(err), contextlib.redirect_stdout(io.StringIO()):
                with self.assertRaises(SystemExit) as cm:
                    cli.main(["points"])

        self.assertEqual(cm.exception.code, 1)
        self.assertIn("input ended before all values were given", err.getvalue())

    def test_verbose_logs_steps(self):
        with self.assertLogs("ecdemo", level=logging.DEBUG) as logs:
            self.run_main(["--defaults", "-v", "exchange"])

        self.assertTrue(any("shared secret: (3,16)" in line for line in logs.output))

    def test_no_command_prints_help(self):
        output = self.run_main([])
        self.assertIn("usage: ecdemo", output)


if __name__ == "__main__":
    unittest.main()
