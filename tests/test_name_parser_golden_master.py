"""
Golden Master Test Suite for Turkish Name Parsing

This test captures the current behavior of the name_parser module so that changes
to the normalization pipeline don't silently alter the public API output.

Behavior covered:
- Dotted/dotless I casing in both directions
- Vowel heuristic rejection (no vowels, only vowels, single letters)
- Doubled initial letter correction
- Role assignment for two, three and more chunks, including repeated middle names
"""

import sys
import pickle
from pathlib import Path
from typing import Dict, Tuple
import pytest

# Add the parent directory to path to import turkish_names
sys.path.insert(0, str(Path(__file__).parent.parent))

from turkish_names.name_parser import NameParser, parse_turkish_name


class GoldenMasterTester:
    """Captures and validates name_parser behavior."""

    def __init__(self):
        self.golden_file = Path(__file__).parent / "golden_master_turkish_names.pkl"

    def capture_golden_master(self, test_cases: list[str]) -> Dict[str, Tuple[bool, str]]:
        """Capture the current behavior as golden master."""
        results = {}
        for test_case in test_cases:
            try:
                results[test_case] = parse_turkish_name(test_case)
            except Exception as e:
                results[test_case] = (False, f"Exception: {str(e)}")
        return results

    def save_golden_master(self, results: Dict[str, Tuple[bool, str]]) -> None:
        """Save golden master results to disk."""
        with open(self.golden_file, "wb") as f:
            pickle.dump(results, f)

    def load_golden_master(self) -> Dict[str, Tuple[bool, str]]:
        """Load golden master results from disk."""
        if not self.golden_file.exists():
            return {}
        with open(self.golden_file, "rb") as f:
            return pickle.load(f)

    def validate_against_golden_master(
        self, current_results: Dict[str, Tuple[bool, str]], golden_results: Dict[str, Tuple[bool, str]]
    ) -> None:
        """Validate current results match golden master."""
        mismatches = []

        for test_case, golden_result in golden_results.items():
            if test_case not in current_results:
                mismatches.append(f"Missing test case: {test_case}")
                continue

            current_result = current_results[test_case]
            if current_result != golden_result:
                mismatches.append(
                    f"Mismatch for '{test_case}':\n" f"  Golden:  {golden_result}\n" f"  Current: {current_result}"
                )

        if mismatches:
            raise AssertionError(
                f"Golden master validation failed with {len(mismatches)} mismatches:\n"
                + "\n".join(mismatches[:10])  # Show first 10 mismatches
            )


# Test cases with expected outcomes from name_parser.py
TURKISH_NAME_TEST_CASES = [
    ("John Doe", (True, "John Doe")),
    ("Cem Ünalan", (True, "Cem Ünalan")),
    ("CEM ÜNALAN", (True, "Cem Ünalan")),
    ("cem ünalan", (True, "Cem Ünalan")),
    ("Cem Cem Ünalan", (True, "Cem Ünalan")),
    ("Cem sdf Ünalan", (True, "Cem Ünalan")),
    ("İLHAN IRMAK", (True, "İlhan Irmak")),
    ("İlhan Irmak", (True, "İlhan Irmak")),
    ("KAZIM KOÇ", (True, "Kazım Koç")),
    ("ŞULE ÇAĞLAR", (True, "Şule Çağlar")),
    ("Ahmet Can Yücel", (True, "Ahmet Can Yücel")),
    ("Ahmet Can Yücel Doğan", (True, "Ahmet Can Yücel Doğan")),
    ("Ömer Faruk Öztürk Koç Aslan", (True, "Ömer Faruk Öztürk Koç Aslan")),
    # Typing noise
    ("aahmet yücel", (True, "Ahmet Yücel")),
    ("Ahmet3 Yücel!", (True, "Ahmet Yücel")),
    ("<b>Ahmet</b> Yücel", (True, "Ahmet Yücel")),
    ("  Ahmet   Yücel ", (True, "Ahmet Yücel")),
    ("Ahmet, Yücel.", (True, "Ahmet Yücel")),
    # Case-insensitive I rule reads a typed "i" as dotless
    ("Ali Kaya", (True, "Alı Kaya")),
    # Unparseable input
    ("", (False, "needs at least 2 valid name tokens")),
    ("A.", (False, "needs at least 2 valid name tokens")),
    ("Cem", (False, "needs at least 2 valid name tokens")),
    ("sdf ghj", (False, "needs at least 2 valid name tokens")),
    ("123 456", (False, "needs at least 2 valid name tokens")),
]

TEST_CASES = [name for name, expected in TURKISH_NAME_TEST_CASES]


@pytest.fixture(scope="session")
def golden_master_tester():
    """Create and return a golden master tester instance."""
    return GoldenMasterTester()


def test_turkish_names_with_expected_results():
    """Test names with their expected exact outputs."""
    passed = 0
    failed = 0

    for input_name, expected in TURKISH_NAME_TEST_CASES:
        result = parse_turkish_name(input_name)
        if result == expected:
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{input_name}': expected {expected}, got {result}")

    assert failed == 0, f"Turkish name tests: {failed} failures out of {len(TURKISH_NAME_TEST_CASES)} tests"
    print(f"Turkish name tests: {passed} passed, {failed} failed")


def test_facade_agrees_with_module_function():
    """The chaining parser and the module-level helper must produce the same output."""
    parser = NameParser()
    for input_name, (success, formatted) in TURKISH_NAME_TEST_CASES:
        parser.parse(input_name)
        assert parser.is_valid() is success, f"For '{input_name}': expected valid={success}"
        if success:
            assert str(parser) == formatted


def test_capture_or_validate_golden_master(golden_master_tester):
    """
    Main test that either captures golden master (if none exists)
    or validates current behavior against existing golden master.
    """
    golden_results = golden_master_tester.load_golden_master()
    current_results = golden_master_tester.capture_golden_master(TEST_CASES)

    if not golden_results:
        # First run - capture golden master
        golden_master_tester.save_golden_master(current_results)
        print(f"Captured golden master with {len(current_results)} test cases")
    else:
        # Subsequent runs - validate against golden master
        golden_master_tester.validate_against_golden_master(current_results, golden_results)
        print(f"Validated {len(current_results)} test cases against golden master")


if __name__ == "__main__":
    # Run directly to capture golden master
    tester = GoldenMasterTester()
    results = tester.capture_golden_master(TEST_CASES)
    tester.save_golden_master(results)
    print(f"Captured golden master with {len(results)} test cases")

    for test_case, result in list(results.items())[:10]:
        print(f"  {test_case} -> {result}")
