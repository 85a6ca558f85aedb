"""
Unit tests for the gender_names matching pipeline.

Tables here are tiny and hand-made, and the phonetic encoder is a toy that strips vowels,
'h' and 'y' and collapses repeated letters, so "jonny", "john", "juan" and "jenna" all
encode to "JN". None of these tests need the fuzzy library.
"""

import sys
import logging
import re
from pathlib import Path
import pytest

# Add the parent directory to path to import genderfromname
sys.path.insert(0, str(Path(__file__).parent.parent))

from genderfromname import gender_names
from genderfromname.gender_names import (
    ConfigurationError,
    Gender,
    GenderConfig,
    GenderDetector,
    InvalidInputError,
    MatchTrace,
    either_weight,
    either_weight_metaphone,
    format_trace,
    load_name_table,
    one_only,
    one_only_metaphone,
    v1_rules,
    v2_rules,
    without_phonetic,
)
from genderfromname.gender_names_data import V1_RULES


def toy_encoder(name):
    stripped = re.sub(r"[aeiouyh]", "", name.lower())
    return re.sub(r"(.)\1+", r"\1", stripped).upper()


FEMALES = {"jenna": 0.19, "joanna": 0.12, "jenny": 0.10, "mary": 1.0, "pat": 0.3}
MALES = {"john": 1.63, "juan": 0.31, "johnny": 0.13, "pat": 0.3, "dante": 0.02}

TABLE_STRATEGIES = [one_only, either_weight, one_only_metaphone, either_weight_metaphone]


class CountingStrategy:
    """Strategy stub that records how often it was called."""

    def __init__(self, result, name):
        self.result = result
        self.__name__ = name
        self.calls = 0

    def __call__(self, name, females, males, encoder):
        self.calls += 1
        return self.result


@pytest.fixture
def detector():
    return GenderDetector(females=FEMALES, males=MALES, encoder=toy_encoder)


# ════════════════════════════════════════════════════════════════════════════════
# STRATEGIES
# ════════════════════════════════════════════════════════════════════════════════


def test_table_strategies_with_empty_tables_are_unknown():
    for strategy in TABLE_STRATEGIES:
        for name in ("josephine", "jonny", "pat", "mary"):
            result = strategy(name, {}, {}, toy_encoder)
            assert result is Gender.UNKNOWN, f"{strategy.__name__}({name!r}) gave {result}"


def test_one_only_requires_exclusive_presence():
    assert one_only("mary", FEMALES, MALES) is Gender.FEMALE
    assert one_only("john", FEMALES, MALES) is Gender.MALE
    assert one_only("pat", FEMALES, MALES) is Gender.UNKNOWN
    assert one_only("nobody", FEMALES, MALES) is Gender.UNKNOWN


def test_one_only_treats_zero_weight_as_absent():
    assert one_only("sam", {"sam": 0.0}, {"sam": 0.4}) is Gender.MALE
    assert one_only("sam", {"sam": 0.0}, {"sam": 0}) is Gender.UNKNOWN


def test_either_weight_prefers_heavier_table():
    assert either_weight("mary", FEMALES, MALES) is Gender.FEMALE
    assert either_weight("john", FEMALES, MALES) is Gender.MALE
    assert either_weight("sam", {"sam": 0.5}, {"sam": 0.2}) is Gender.FEMALE
    assert either_weight("nobody", FEMALES, MALES) is Gender.UNKNOWN


def test_either_weight_tie_goes_to_male():
    assert either_weight("pat", FEMALES, MALES) is Gender.MALE
    assert either_weight("sam", {"sam": 2.0}, {"sam": 2.0}) is Gender.MALE


def test_either_weight_accepts_string_weights():
    assert either_weight("sam", {"sam": "0.5"}, {"sam": "0.25"}) is Gender.FEMALE


def test_one_only_metaphone_stops_at_first_hit_per_table():
    # "marie" -> MR, only "mary" shares it
    assert one_only_metaphone("marie", FEMALES, MALES, toy_encoder) is Gender.FEMALE
    # "jonny" -> JN is in both tables
    assert one_only_metaphone("jonny", FEMALES, MALES, toy_encoder) is Gender.UNKNOWN
    # "donte" -> DNT, only "dante"
    assert one_only_metaphone("donte", FEMALES, MALES, toy_encoder) is Gender.MALE


def test_one_only_metaphone_notes_highest_weight_entry():
    traces = []
    detector = GenderDetector(females=FEMALES, males=MALES, encoder=toy_encoder, trace_sink=traces.append)
    detector.match_list = [one_only_metaphone]

    assert detector.resolve("Jonny") is Gender.UNKNOWN

    notes = traces[0].steps[0].notes
    assert notes == ("F: jonny => jenna => JN: 0.190000", "M: jonny => john => JN: 1.630000")


def test_either_weight_metaphone_sums_all_matches():
    # F: 0.19 + 0.12 + 0.10, M: 1.63 + 0.31 + 0.13
    assert either_weight_metaphone("jonny", FEMALES, MALES, toy_encoder) is Gender.MALE

    females = {"jenna": 0.5, "jenny": 0.5}
    males = {"john": 0.9}
    assert either_weight_metaphone("jonny", females, males, toy_encoder) is Gender.FEMALE


def test_either_weight_metaphone_tie_goes_to_male():
    assert either_weight_metaphone("jonny", {"jenna": 0.5}, {"john": 0.5}, toy_encoder) is Gender.MALE


def test_metaphone_strategies_see_changes_to_plain_tables():
    def initial(name):
        return name[0].upper()

    females = {"anna": 1.0}
    males = {"bob": 1.0}
    assert one_only_metaphone("amy", females, males, initial) is Gender.FEMALE
    assert either_weight_metaphone("amy", females, males, initial) is Gender.FEMALE

    males["adam"] = 5.0
    assert one_only_metaphone("amy", females, males, initial) is Gender.UNKNOWN
    assert either_weight_metaphone("amy", females, males, initial) is Gender.MALE


def test_metaphone_strategies_without_encoder_are_unknown():
    assert one_only_metaphone("marie", FEMALES, MALES, None) is Gender.UNKNOWN
    assert either_weight_metaphone("jonny", FEMALES, MALES, None) is Gender.UNKNOWN


def test_metaphone_strategies_ignore_empty_codes():
    # All vowels encode to ""
    assert either_weight_metaphone("aya", FEMALES, MALES, toy_encoder) is Gender.UNKNOWN


def test_v2_rules_first_match_wins():
    cases = [
        ("johnny", Gender.MALE),
        ("rosalind", Gender.FEMALE),
        ("tricia", Gender.FEMALE),
        ("pascal", Gender.MALE),
        ("pasqual", Gender.MALE),
        ("pasquale", Gender.UNKNOWN),  # anchored at both ends
        ("ellie", Gender.FEMALE),
        ("eamon", Gender.UNKNOWN),
    ]
    for name, expected in cases:
        assert v2_rules(name, {}, {}) is expected, f"v2_rules({name!r})"


def test_v1_rules_last_match_wins():
    # "danny" first matches the a/e/i/y-ending rule (female), later rules say male
    first_match = next(gender for pattern, gender in V1_RULES if re.search(pattern, "danny"))
    assert first_match == "female"
    assert v1_rules("danny", {}, {}) is Gender.MALE

    # "jerome" likewise
    assert v1_rules("jerome", {}, {}) is Gender.MALE


def test_v1_rules_are_case_insensitive():
    assert v1_rules("VELVET", {}, {}) is Gender.FEMALE


# ════════════════════════════════════════════════════════════════════════════════
# RESOLVER
# ════════════════════════════════════════════════════════════════════════════════


def test_resolve_never_runs_more_than_looseness_strategies(detector):
    strategies = [CountingStrategy(Gender.UNKNOWN, f"miss_{i}") for i in range(4)]
    detector.match_list = strategies

    assert detector.resolve("anyone", 2) is Gender.UNKNOWN
    assert [s.calls for s in strategies] == [1, 1, 0, 0]


def test_resolve_stops_at_first_decisive_result(detector):
    strategies = [
        CountingStrategy(Gender.UNKNOWN, "miss"),
        CountingStrategy(Gender.FEMALE, "hit"),
        CountingStrategy(Gender.MALE, "never"),
    ]
    detector.match_list = strategies

    assert detector.resolve("anyone", 9) is Gender.FEMALE
    assert [s.calls for s in strategies] == [1, 1, 0]


def test_resolve_looseness_beyond_list_length(detector):
    strategies = [CountingStrategy(Gender.UNKNOWN, "miss")]
    detector.match_list = strategies

    assert detector.resolve("anyone", 100) is Gender.UNKNOWN
    assert strategies[0].calls == 1


def test_resolve_lowercases_and_strips(detector):
    seen = []

    def spy(name, females, males, encoder):
        seen.append(name)
        return Gender.UNKNOWN

    detector.match_list = [spy]
    detector.resolve("  MaRy ")
    assert seen == ["mary"]


def test_resolve_default_looseness_is_strict(detector):
    assert detector.resolve("Pat") is Gender.UNKNOWN
    assert detector.resolve("Pat", 2) is Gender.MALE
    assert detector.resolve("Mary") is Gender.FEMALE


def test_resolve_uses_configured_default_looseness():
    config = GenderConfig.create_default().with_default_looseness(2)
    detector = GenderDetector(config=config, females=FEMALES, males=MALES, encoder=None)
    assert detector.resolve("Pat") is Gender.MALE


def test_resolve_rejects_empty_names(detector):
    for bad_name in ("", "   ", None):
        with pytest.raises(InvalidInputError):
            detector.resolve(bad_name)


def test_resolve_rejects_bad_looseness(detector):
    for bad_looseness in (0, -1, "2", 1.5, True):
        with pytest.raises(InvalidInputError):
            detector.resolve("mary", bad_looseness)


def test_invalid_input_is_a_value_error(detector):
    with pytest.raises(ValueError):
        detector.resolve("")


def test_resolve_is_idempotent(detector):
    first = [detector.resolve(name, 9) for name in ("Jonny", "Pat", "Velvet", "Eamon")]
    second = [detector.resolve(name, 9) for name in ("Jonny", "Pat", "Velvet", "Eamon")]
    assert first == second


def test_custom_strategies_may_return_legacy_codes(detector):
    def eamon_hack(name, females, males, encoder):
        if name.startswith("eamon"):
            return "m"
        return None

    detector.match_list.append(eamon_hack)
    assert detector.resolve("Eamon", 9) is Gender.MALE
    assert detector.resolve("FLKMLKSJN", 9) is Gender.UNKNOWN


def test_custom_strategy_with_unrecognised_result(detector):
    detector.match_list = [lambda name, females, males, encoder: 42]
    with pytest.raises(ConfigurationError):
        detector.resolve("mary")


def test_match_list_rejects_non_callables(detector):
    with pytest.raises(ConfigurationError):
        detector.set_match_list([one_only, "either_weight"])
    assert detector.match_list[0] is one_only


def test_gender_compares_to_plain_strings():
    assert Gender.MALE == "male"
    assert Gender.FEMALE.short == "f"
    assert Gender.UNKNOWN.short == ""
    assert not Gender.UNKNOWN.is_decisive


# ════════════════════════════════════════════════════════════════════════════════
# CONFIGURATION
# ════════════════════════════════════════════════════════════════════════════════


def test_default_match_list_depends_on_encoder():
    with_encoder = GenderDetector(encoder=toy_encoder)
    without_encoder = GenderDetector(encoder=None)

    assert [s.__name__ for s in with_encoder.match_list] == [
        "one_only",
        "either_weight",
        "one_only_metaphone",
        "either_weight_metaphone",
        "v2_rules",
        "v1_rules",
    ]
    assert [s.__name__ for s in without_encoder.match_list] == ["one_only", "either_weight", "v2_rules", "v1_rules"]


def test_without_phonetic_filters_a_list(detector):
    filtered = without_phonetic(detector.match_list)
    assert one_only_metaphone not in filtered
    assert either_weight_metaphone not in filtered
    assert len(filtered) == 4


def test_initialize_with_one_table_keeps_current_tables(detector):
    before = detector.tables

    with pytest.raises(ConfigurationError):
        detector.initialize(females={"ann": 1.0})
    with pytest.raises(ConfigurationError):
        detector.initialize(males={"bob": 1.0})

    assert detector.tables is before
    assert detector.resolve("Mary") is Gender.FEMALE


def test_initialize_replaces_both_tables(detector):
    detector.initialize({"josephine": 2.1}, {"dondi": 4.5})

    assert detector.resolve("Josephine") is Gender.FEMALE
    assert detector.resolve("Dondi") is Gender.MALE
    assert detector.resolve("Mary") is Gender.UNKNOWN


def test_initialize_without_arguments_restores_defaults(detector):
    detector.initialize()
    assert detector.resolve("Josephine") is Gender.FEMALE
    assert "michael" in detector.tables.males


def test_initialize_rejects_non_mappings(detector):
    with pytest.raises(ConfigurationError):
        detector.initialize(["mary"], {"john": 1.0})


def test_initialize_takes_a_snapshot(detector):
    females = {"ann": 1.0}
    detector.initialize(females, {"bob": 1.0})
    females["zed"] = 1.0

    assert "zed" not in detector.tables.females
    with pytest.raises(TypeError):
        detector.tables.females["zed"] = 1.0


def test_initialize_warns_about_suspicious_entries(detector, caplog):
    with caplog.at_level(logging.WARNING):
        detector.initialize({"Ann": 1.0, "bea": 0.0}, {"bob": 1.0})

    assert "2 entries in the female table" in caplog.text
    assert "male table" not in caplog.text.replace("female table", "")


def test_load_name_table(tmp_path):
    path = tmp_path / "females.csv"
    path.write_text("name,weight\nJosephine ,2.1\nmary,1.5\n", encoding="utf-8")

    assert load_name_table(path) == {"josephine": 2.1, "mary": 1.5}


def test_load_name_table_rejects_bad_rows(tmp_path):
    bad_weight = tmp_path / "bad_weight.csv"
    bad_weight.write_text("name,weight\nmary,lots\n", encoding="utf-8")
    with pytest.raises(ConfigurationError, match="line 2"):
        load_name_table(bad_weight)

    bad_header = tmp_path / "bad_header.csv"
    bad_header.write_text("first,score\nmary,1.0\n", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_name_table(bad_header)


def test_load_name_table_rejects_duplicate_names(tmp_path):
    path = tmp_path / "duplicates.csv"
    path.write_text("name,weight\nMary,1.0\nmary ,2.0\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="line 3: duplicate name 'mary'"):
        load_name_table(path)


# ════════════════════════════════════════════════════════════════════════════════
# PHONETIC INDEX AND TRACING
# ════════════════════════════════════════════════════════════════════════════════


def test_phonetic_index_is_built_once_per_table():
    calls = []

    def counting_encoder(name):
        calls.append(name)
        return toy_encoder(name)

    detector = GenderDetector(females=FEMALES, males=MALES, encoder=counting_encoder)
    assert detector.get_cache_info().index_built is False

    detector.resolve("Jonny", 4)
    after_first = len(calls)
    detector.resolve("Jonny", 4)

    # Only the two lookups of the input name itself on the second call
    assert len(calls) == after_first + 2

    info = detector.get_cache_info()
    assert info.encoder_available and info.index_built
    assert (info.female_entries, info.male_entries) == (len(FEMALES), len(MALES))


def test_cache_info_without_encoder():
    detector = GenderDetector(encoder=None)
    assert detector.build_phonetic_index() is False
    assert detector.get_cache_info().encoder_available is False


def test_trace_sink_receives_every_step():
    traces = []
    detector = GenderDetector(females=FEMALES, males=MALES, encoder=toy_encoder, trace_sink=traces.append)

    assert detector.resolve("Pat", 2) is Gender.MALE

    trace = traces[0]
    assert isinstance(trace, MatchTrace)
    assert trace.name == "pat"
    assert [step.strategy for step in trace.steps] == ["one_only", "either_weight"]
    assert trace.steps[1].notes == ("F: 0.3, M: 0.3",)
    assert trace.result is Gender.MALE


def test_format_trace_matches_legacy_layout():
    traces = []
    detector = GenderDetector(females=FEMALES, males=MALES, encoder=toy_encoder, trace_sink=traces.append)
    detector.resolve("Mary")

    assert format_trace(traces[0]) == 'Matching "mary":\n\tone_only...\n\t==> HIT (f)'


def test_debug_config_logs_trace(caplog):
    config = GenderConfig.create_default().with_debug()
    detector = GenderDetector(config=config, females=FEMALES, males=MALES, encoder=None)

    with caplog.at_level(logging.DEBUG):
        detector.resolve("Pat", 9)

    assert 'Matching "pat":' in caplog.text
    assert "==> HIT (m)" in caplog.text


def test_debug_config_logs_each_note_once(caplog):
    config = GenderConfig.create_default().with_debug()
    detector = GenderDetector(config=config, females=FEMALES, males=MALES, encoder=toy_encoder)
    detector.match_list = [one_only_metaphone]

    with caplog.at_level(logging.DEBUG):
        detector.resolve("Jonny")

    assert caplog.text.count("F: jonny => jenna => JN: 0.190000") == 1


def test_notes_are_skipped_without_a_trace(caplog):
    with caplog.at_level(logging.DEBUG):
        assert either_weight_metaphone("jonny", FEMALES, MALES, toy_encoder) is Gender.MALE

    assert "=>" not in caplog.text


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL API
# ════════════════════════════════════════════════════════════════════════════════


def test_module_level_functions(monkeypatch):
    monkeypatch.setattr(gender_names, "_global_detector", GenderDetector(encoder=None))

    assert gender_names.gender("Josephine") is Gender.FEMALE
    assert gender_names.gender("Michael") is Gender.UNKNOWN

    gender_names.gender_init({"michael": 1.0}, {"josephine": 1.0})
    assert gender_names.gender("Michael") is Gender.FEMALE

    gender_names.set_match_list([v2_rules])
    assert gender_names.get_match_list() == [v2_rules]
    assert gender_names.gender("Pascal") is Gender.MALE

    assert gender_names.get_cache_info()["encoder_available"] is False
