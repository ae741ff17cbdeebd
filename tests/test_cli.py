import contextlib
import io
import json
import unittest

import cp_auth
from cpauth.group import default_parameters


class TestCommandLine(unittest.TestCase):
    def _run(self, argv: list) -> tuple:
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = cp_auth.main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_keygen(self) -> None:
        code, out, _ = self._run(["keygen"])
        self.assertEqual(code, 0)
        payload = json.loads(out)
        params = default_parameters()
        secret = int(payload["secret"], 16)
        self.assertEqual(int(payload["y1"], 16), pow(params.alpha, secret, params.p))
        self.assertEqual(int(payload["y2"], 16), pow(params.beta, secret, params.p))

    def test_demo_with_password(self) -> None:
        code, out, _ = self._run(["demo", "bob", "--password", "hunter2"])
        self.assertEqual(code, 0)
        payload = json.loads(out)
        self.assertEqual(payload["user"], "bob")
        self.assertTrue(payload["session_id"])

    def test_demo_rejects_bad_secret(self) -> None:
        code, _, err = self._run(["demo", "--secret", "0"])
        self.assertEqual(code, 1)
        self.assertIn("InvalidParameters", err)

    def test_demo_rejects_malformed_secret(self) -> None:
        code, _, err = self._run(["demo", "--secret", "not-hex"])
        self.assertEqual(code, 1)
        self.assertIn("hex", err)

    def test_serve_options(self) -> None:
        namespace = cp_auth.parse_args(["serve", "--port", "8080", "--ttl", "30"])
        self.assertEqual((namespace.port, namespace.ttl), (8080, 30.0))

    def test_password_and_secret_are_exclusive(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                cp_auth.parse_args(["login", "alice", "--password", "a", "--secret", "01"])


if __name__ == "__main__":
    unittest.main()
