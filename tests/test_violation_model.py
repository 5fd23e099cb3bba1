import unittest

from lint_parity.domain.report import ComparisonReport
from lint_parity.domain.violation import Violation


class TestViolation(unittest.TestCase):
    def test_identity_is_the_four_tuple(self) -> None:
        a = Violation("src/a.ts", 1, 2, "no-console")
        b = Violation("src/a.ts", 1, 2, "no-console")
        self.assertEqual(a, b)
        self.assertEqual(1, len({a, b}))
        self.assertNotEqual(a, Violation("src/a.ts", 1, 3, "no-console"))

    def test_location_key_and_describe(self) -> None:
        v = Violation("src/a.ts", 12, 5, "react/jsx-key")
        self.assertEqual("12:5:react/jsx-key", v.location_key())
        self.assertEqual("src/a.ts:12:5  react/jsx-key", v.describe())

    def test_from_dict_validates(self) -> None:
        v = Violation.from_dict({"file_path": "a.ts", "line": "3", "column": 4, "rule_id": "eqeqeq"})
        self.assertEqual(Violation("a.ts", 3, 4, "eqeqeq"), v)
        self.assertEqual({"file_path": "a.ts", "line": 3, "column": 4, "rule_id": "eqeqeq"}, v.to_dict())

        with self.assertRaises(TypeError):
            Violation.from_dict(["a.ts"])  # type: ignore[arg-type]
        for bad in [
            {"file_path": "a.ts", "line": 1, "column": 1},
            {"file_path": "", "line": 1, "column": 1, "rule_id": "x"},
            {"file_path": "a.ts", "line": True, "column": 1, "rule_id": "x"},
            {"file_path": "a.ts", "line": "one", "column": 1, "rule_id": "x"},
            {"file_path": "a.ts", "line": 0, "column": 1, "rule_id": "x"},
            {"file_path": "a.ts", "line": 1, "column": -2, "rule_id": "x"},
        ]:
            with self.subTest(bad=bad):
                with self.assertRaises(ValueError):
                    Violation.from_dict(bad)


class TestComparisonReport(unittest.TestCase):
    def _report(self, **kw) -> ComparisonReport:
        base = dict(
            eslint_total=4,
            oxlint_total=3,
            only_in_eslint=(Violation("a.ts", 1, 1, "no-var"),),
            only_in_oxlint=(),
            matched_count=3,
            unsupported_rules=("x/y",),
            ported_rules_count=3,
        )
        base.update(kw)
        return ComparisonReport(**base)

    def test_ratios(self) -> None:
        r = self._report()
        self.assertAlmostEqual(0.75, r.match_ratio)
        self.assertEqual(4, r.total_rules)
        self.assertAlmostEqual(0.75, r.ported_ratio)

    def test_ratios_are_none_for_empty_denominators(self) -> None:
        r = self._report(eslint_total=0, matched_count=0, only_in_eslint=(), unsupported_rules=(), ported_rules_count=0)
        self.assertIsNone(r.match_ratio)
        self.assertIsNone(r.ported_ratio)

    def test_to_dict(self) -> None:
        d = self._report().to_dict()
        self.assertEqual(4, d["eslint_total"])
        self.assertEqual([{"file_path": "a.ts", "line": 1, "column": 1, "rule_id": "no-var"}], d["only_in_eslint"])
        self.assertEqual(["x/y"], d["unsupported_rules"])
        self.assertEqual(0.75, d["match_ratio"])


if __name__ == "__main__":
    unittest.main()
