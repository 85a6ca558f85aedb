"""
Golden Master Test Suite for the gender matching pipeline

Pins the current behaviour of the default tables, the default match list and the two
regex rule tables, so that any refactoring which changes a classification shows up here.

Key behaviour captured:
- Strict by default: looseness 1 only accepts names found in exactly one table
- Ties and near-ties in the weighted lookup
- v2 rules: first match wins
- v1 rules: every rule runs, the last match wins (rule order matters)
- The classic example names from the module documentation

Tests that need a real double metaphone are skipped when fuzzy is not installed.
"""

import sys
from pathlib import Path
from typing import Dict, List, Tuple
import pytest

# Add the parent directory to path to import genderfromname
sys.path.insert(0, str(Path(__file__).parent.parent))

from genderfromname.gender_names import (
    Gender,
    GenderDetector,
    InvalidInputError,
    either_weight,
    either_weight_metaphone,
    one_only,
    one_only_metaphone,
    v1_rules,
    v2_rules,
)

F, M, U = Gender.FEMALE, Gender.MALE, Gender.UNKNOWN


class GoldenMasterTester:
    """Captures and validates gender_names behaviour without a phonetic encoder."""

    def __init__(self):
        self.detector = GenderDetector(encoder=None)

    def capture(self, cases: List[Tuple[str, int]]) -> Dict[Tuple[str, int], Gender]:
        return {(name, looseness): self.detector.resolve(name, looseness) for name, looseness in cases}

    def validate(self, expected: Dict[Tuple[str, int], Gender]) -> None:
        current = self.capture(list(expected))
        mismatches = [
            f"Mismatch for {case}: expected {golden.value}, got {current[case].value}"
            for case, golden in expected.items()
            if current[case] is not golden
        ]
        if mismatches:
            raise AssertionError(
                f"Golden master validation failed with {len(mismatches)} mismatches:\n" + "\n".join(mismatches[:10])
            )


# The classic example names from the module documentation
EXAMPLE_NAMES = ["Josephine", "Michael", "Dondi", "Jonny", "Pascal", "Velvet", "Eamon", "FLKMLKSJN"]

STRICT_RESULTS = {(name, 1): (F if name == "Josephine" else U) for name in EXAMPLE_NAMES}

LOOSE_RESULTS = {
    ("Josephine", 9): F,
    ("Michael", 9): M,
    ("Dondi", 9): M,  # v1_rules without an encoder
    ("Jonny", 9): M,  # v2_rules without an encoder
    ("Pascal", 9): M,
    ("Velvet", 9): F,
    ("Eamon", 9): U,
    ("FLKMLKSJN", 9): U,
}

# Default tables: (name, looseness) -> result
TABLE_RESULTS = {
    ("Michael", 2): M,  # F 0.027 vs M 3.409
    ("Jessica", 1): U,  # in both tables
    ("Jessica", 2): F,
    ("Christina", 2): F,
    ("Angel", 2): M,  # F 0.091 vs M 0.140
    ("Sarah", 2): F,
    ("Tricia", 1): F,
    ("Kim", 1): F,
    ("Walter", 1): M,
    ("Danny", 1): M,
    ("Rosalind", 9): F,  # v2_rules
    ("Krishna", 9): M,  # v2_rules, v1 alone would say female
    ("Ellie", 9): F,  # v2_rules, v1 alone would say male
    ("Pasquale", 9): M,  # v1_rules
}

# v1_rules alone. Order-sensitive: several names match rules of both genders.
V1_RESULTS = {
    "velvet": F,
    "heather": F,
    "ruth": F,
    "barry": M,
    "larry": M,
    "clive": M,
    "steve": M,
    "carolyn": F,
    "vivian": F,
    "stanley": M,
    "gregory": M,
    "leroy": M,
    "abigail": F,
    "jill": F,
    "janet": F,
    "duane": M,
    "fleur": F,
    "lance": M,
    "margaret": F,
    "clyde": M,
    "blake": M,
    "carol": F,
    "pam": F,
    "leann": F,
    "sarah": F,
    "megan": F,
    "frances": F,
    "ethel": F,
    "george": M,
    "delores": F,
    "anthony": M,
    "kim": F,
    "bradley": M,
    "agnes": F,
    "alexis": F,
    "wallace": M,
    "mildred": F,
    "ira": M,
    "iris": F,
    "randy": M,
    "beatriz": F,
    "jerome": M,
    "danny": M,
    "dondi": M,
    "pete": M,
    "angel": F,
    "allison": F,
    "eileen": F,
    "mary": F,
    "pascal": F,
    "jonny": F,
    "michael": U,
    "eamon": U,
    "john": U,
    "flkmlksjn": U,
}

V2_RESULTS = {
    "jon": M,
    "john": M,
    "tom": M,
    "thomas": M,
    "toby": M,
    "franklin": M,
    "billy": M,
    "hansel": M,
    "ronald": M,
    "rosalind": F,
    "roz": F,
    "walter": M,
    "krishna": M,
    "tricia": F,
    "trish": F,
    "pascal": M,
    "pasqual": M,
    "ellie": F,
    "anfernee": M,
    "velvet": U,
    "michael": U,
    "pasquale": U,
}


@pytest.fixture(scope="session")
def golden_master_tester():
    """Create and return a golden master tester instance."""
    return GoldenMasterTester()


def test_strict_matching_of_example_names(golden_master_tester):
    golden_master_tester.validate(STRICT_RESULTS)


def test_loose_matching_of_example_names(golden_master_tester):
    golden_master_tester.validate(LOOSE_RESULTS)


def test_default_table_results(golden_master_tester):
    golden_master_tester.validate(TABLE_RESULTS)


def test_empty_name_is_rejected(golden_master_tester):
    with pytest.raises(InvalidInputError):
        golden_master_tester.detector.resolve("", 1)


def test_v1_rules_golden_results():
    failed = [name for name, expected in V1_RESULTS.items() if v1_rules(name, {}, {}) is not expected]
    assert not failed, f"v1_rules changed for: {failed}"


def test_v2_rules_golden_results():
    failed = [name for name, expected in V2_RESULTS.items() if v2_rules(name, {}, {}) is not expected]
    assert not failed, f"v2_rules changed for: {failed}"


def test_each_strategy_alone(golden_master_tester):
    """Each strategy on its own classifies one example name and passes on the next one."""
    detector = GenderDetector(encoder=None)

    def eamon_hack(name, females, males, encoder):
        return Gender.MALE if name.startswith("eamon") else Gender.UNKNOWN

    cases = [
        (one_only, "Josephine", F, "Michael"),
        (either_weight, "Michael", M, "Dondi"),
        (v2_rules, "Pascal", M, "Velvet"),
        (v1_rules, "Velvet", F, "Eamon"),
        (eamon_hack, "Eamon", M, "FLKMLKSJN"),
    ]
    for strategy, positive, expected, negative in cases:
        detector.match_list = [strategy]
        assert detector.resolve(positive) is expected, f"{strategy.__name__}: {positive}"
        assert detector.resolve(negative) is U, f"{strategy.__name__}: {negative}"


# ════════════════════════════════════════════════════════════════════════════════
# DOUBLE METAPHONE (needs fuzzy)
# ════════════════════════════════════════════════════════════════════════════════


@pytest.fixture(scope="module")
def metaphone_detector():
    pytest.importorskip("fuzzy")
    detector = GenderDetector()
    assert detector.encoder is not None
    return detector


def test_default_match_list_has_all_six_strategies(metaphone_detector):
    assert len(metaphone_detector.match_list) == 6


def test_metaphone_strategies_on_example_names(metaphone_detector):
    # dondi => dante => TNT, male table only
    assert metaphone_detector.resolve("Dondi", 3) is M
    # jonny => jenna / john => JN, both tables
    assert metaphone_detector.resolve("Jonny", 3) is U
    assert metaphone_detector.resolve("Jonny", 4) is M


def test_loose_matching_with_metaphones(metaphone_detector):
    for (name, looseness), expected in LOOSE_RESULTS.items():
        assert metaphone_detector.resolve(name, looseness) is expected, name


def test_each_metaphone_strategy_alone(metaphone_detector):
    """Each metaphone strategy on its own classifies one example name and passes on the next one."""
    detector = GenderDetector(encoder=metaphone_detector.encoder)

    cases = [
        (one_only_metaphone, "Dondi", M, "Jonny"),
        (either_weight_metaphone, "Jonny", M, "Pascal"),
    ]
    for strategy, positive, expected, negative in cases:
        detector.match_list = [strategy]
        assert detector.resolve(positive) is expected, f"{strategy.__name__}: {positive}"
        assert detector.resolve(negative) is U, f"{strategy.__name__}: {negative}"
