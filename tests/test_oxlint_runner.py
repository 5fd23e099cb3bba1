import tempfile
import unittest
from pathlib import Path
from unittest import mock

from tools.core_cmd import CmdResult
from tools.oxlint.runner import EMPTY_OXLINT_OUTPUT, OXLINT_OUTPUT_NAME, oxlint_command, run_oxlint


def _result(code: int, stdout: str = "") -> CmdResult:
    return CmdResult(exit_code=code, elapsed_seconds=0.0, command_str="oxlint", stdout=stdout, stderr="")


class TestRunOxlint(unittest.TestCase):
    def test_command_flags(self) -> None:
        self.assertEqual(["npx", "oxlint", "--format", "json"], oxlint_command())
        self.assertEqual("--type-aware", oxlint_command(type_aware=True)[-1])

    def test_non_zero_exit_still_writes_stdout(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            repo = Path(td)
            payload = '{"diagnostics":[{"code":"eslint(no-var)"}]}'
            with mock.patch("tools.oxlint.runner.run_cmd", return_value=_result(1, payload)) as run:
                out = run_oxlint(repo, type_aware=True)
            self.assertEqual(repo / OXLINT_OUTPUT_NAME, out)
            self.assertEqual(payload, out.read_text(encoding="utf-8"))
        self.assertIn("--type-aware", run.call_args[0][0])
        self.assertEqual(repo, run.call_args.kwargs["cwd"])

    def test_empty_stdout_becomes_empty_diagnostics(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with mock.patch("tools.oxlint.runner.run_cmd", return_value=_result(0, "  \n")):
                out = run_oxlint(Path(td))
            self.assertEqual(EMPTY_OXLINT_OUTPUT, out.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
