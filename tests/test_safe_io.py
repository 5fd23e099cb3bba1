import unittest
from pathlib import Path
import tempfile


from tools.io import read_json, read_text_stripped, write_json, write_text


class TestSafeIO(unittest.TestCase):
    def test_write_json_is_atomic_and_cleans_temp(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_dir = Path(td) / "out"
            out_path = out_dir / "report.json"

            payload = {"a": 1, "b": True, "c": None, "nested": {"x": "y"}}
            write_json(out_path, payload)

            # File written and readable
            self.assertTrue(out_path.exists())
            self.assertEqual(payload, read_json(out_path))
            self.assertTrue(out_path.read_text(encoding="utf-8").endswith("\n"))

            # No temp files left behind on success
            self.assertEqual([], [p.name for p in out_dir.iterdir() if p.name.endswith(".tmp")])

    def test_write_json_failure_keeps_previous_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out_path = Path(td) / "report.json"
            write_json(out_path, {"ok": 1})

            with self.assertRaises(TypeError):
                write_json(out_path, {"bad": object()})

            self.assertEqual({"ok": 1}, read_json(out_path))
            self.assertEqual(["report.json"], sorted(p.name for p in Path(td).iterdir()))

    def test_text_helpers(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            p = Path(td) / "nested" / "out.txt"
            write_text(p, "  hello \n\n")
            self.assertEqual("hello", read_text_stripped(p))

            write_text(p, "\n")
            self.assertEqual("", read_text_stripped(p))


if __name__ == "__main__":
    unittest.main()
