"""
Gender From First Name Module

This module guesses the gender most often associated with an American first name. It returns
`Gender.MALE`, `Gender.FEMALE` or `Gender.UNKNOWN`; it is a best-effort heuristic, not a model,
and it will be wrong for plenty of real people.

## Overview

The core functionality is provided by the `GenderDetector` class, which walks a **strategy
cascade** (the match list) from strictest to loosest:

1. **one_only**: name present in exactly one of the female/male tables
2. **either_weight**: name present in either table, heavier weight wins
3. **one_only_metaphone**: phonetic code found in exactly one table
4. **either_weight_metaphone**: summed weights of all phonetic matches per table
5. **v2_rules**: Orwant's v0.20 prefix rules, first match wins
6. **v1_rules**: Pakin's awk heuristics, every rule runs and the last match wins

The caller picks a **looseness**: how many strategies may be tried before giving up. The
default of 1 only accepts names found in exactly one table.

## Architecture

### Service Separation
- **NameTables**: Immutable female/male weighted name tables, always replaced as a pair
- **PhoneticIndexService**: Cached phonetic codes of every table entry, sorted by weight
- **GenderDetector**: Holds configuration, tables, encoder and the match list

### Phonetic Encoding
The metaphone strategies need an encoder: any callable `encode(name) -> Optional[str]`.
By default the detector probes once for the `fuzzy` library's double metaphone. When it is
missing, the metaphone strategies are left out of the default match list instead of
returning Unknown on every call.

## Usage Examples

```python
from genderfromname.gender_names import gender

gender("Josephine")      # Gender.FEMALE
gender("Michael")        # Gender.UNKNOWN (in both tables)
gender("Michael", 2)     # Gender.MALE
gender("Pascal", 9)      # Gender.MALE (v2 rule)

# Custom tables and match list on a dedicated detector
from genderfromname.gender_names import GenderDetector, v2_rules, v1_rules

detector = GenderDetector(females={"josephine": 2.1}, males={"dondi": 4.5}, encoder=None)
detector.match_list = [v2_rules, v1_rules]
detector.resolve("Velvet", 9)  # Gender.FEMALE
```

## Custom Strategies

A strategy is any callable `(name, females, males, encoder) -> Gender`. `name` is already
lowercased. Returning `None`, `""`, `"m"`/`"f"` or `"male"`/`"female"` is accepted too.

```python
def eamon_hack(name, females, males, encoder):
    return Gender.MALE if name.startswith("eamon") else Gender.UNKNOWN

detector.match_list.append(eamon_hack)
```

## Thread Safety

`resolve` snapshots the match list, tables and encoder at call start and never mutates
them, so concurrent calls are safe. Reconfiguration (`initialize`, match list changes) is a
setup-time operation and is not synchronised against concurrent `resolve` calls.
"""

from __future__ import annotations
import contextvars
import csv
import logging
import re
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass, replace
from functools import lru_cache
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from genderfromname.gender_names_data import FEMALE_NAMES, MALE_NAMES, V1_RULES, V2_RULES


# ════════════════════════════════════════════════════════════════════════════════
# RESULT AND ERROR TYPES
# ════════════════════════════════════════════════════════════════════════════════


class Gender(str, Enum):
    """Three-valued classification result. UNKNOWN is an answer, not a failure."""

    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"

    @property
    def short(self) -> str:
        """Legacy one-letter code: 'm', 'f' or '' for unknown."""
        return _SHORT_CODES[self.value]

    @property
    def is_decisive(self) -> bool:
        return self is not Gender.UNKNOWN

    @classmethod
    def from_value(cls, value: Any) -> "Gender":
        """Normalize a strategy return value to a Gender."""
        if isinstance(value, Gender):
            return value
        if value is None or value is False or value == "":
            return cls.UNKNOWN
        if isinstance(value, str):
            lowered = value.lower()
            if lowered in ("m", "male"):
                return cls.MALE
            if lowered in ("f", "female"):
                return cls.FEMALE
            if lowered == "unknown":
                return cls.UNKNOWN
        raise ConfigurationError(f"Strategy returned an unrecognised gender: {value!r}")


_SHORT_CODES = {"male": "m", "female": "f", "unknown": ""}


class GenderFromNameError(Exception):
    """Base class for errors raised by this module."""


class InvalidInputError(GenderFromNameError, ValueError):
    """Empty or missing name, or an invalid looseness."""


class ConfigurationError(GenderFromNameError, ValueError):
    """Inconsistent tables, strategies or table files."""


WeightedNameTable = Mapping[str, float]
PhoneticEncoder = Callable[[str], Optional[str]]
MatchStrategy = Callable[[str, WeightedNameTable, WeightedNameTable, Optional[PhoneticEncoder]], Any]


# ════════════════════════════════════════════════════════════════════════════════
# IMMUTABLE CONFIGURATION DATA
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class GenderConfig:
    """Immutable detector configuration."""

    # Log a legacy-format trace block for every resolve call
    debug: bool

    # Looseness used when resolve() is called without one
    default_looseness: int

    @classmethod
    def create_default(cls) -> "GenderConfig":
        return cls(debug=False, default_looseness=1)

    def with_debug(self, debug: bool = True) -> "GenderConfig":
        return replace(self, debug=debug)

    def with_default_looseness(self, looseness: int) -> "GenderConfig":
        return replace(self, default_looseness=looseness)


@dataclass(frozen=True)
class NameTables:
    """The paired female/male weighted name tables."""

    females: WeightedNameTable
    males: WeightedNameTable

    @classmethod
    def default(cls) -> "NameTables":
        """SSA 1980s tables shipped with the package."""
        return cls(females=FEMALE_NAMES, males=MALE_NAMES)

    @classmethod
    def from_mappings(cls, females: WeightedNameTable, males: WeightedNameTable) -> "NameTables":
        """Read-only snapshots of caller-supplied tables. Weights are expected to be positive."""
        return cls(females=_snapshot_table("female", females), males=_snapshot_table("male", males))


def _snapshot_table(label: str, table: WeightedNameTable) -> WeightedNameTable:
    if not isinstance(table, Mapping):
        raise ConfigurationError(f"The {label} table must be a mapping, got {type(table).__name__}")

    snapshot = dict(table)

    # Not enforced, but almost always a mistake worth hearing about
    suspicious = [
        name
        for name, weight in snapshot.items()
        if not isinstance(name, str) or name != name.lower() or not _is_positive(weight)
    ]
    if suspicious:
        logging.warning(
            f"{len(suspicious)} entries in the {label} table are not lowercase or have a non-positive weight"
        )

    return MappingProxyType(snapshot)


def _is_positive(weight: Any) -> bool:
    try:
        return float(weight) > 0
    except (TypeError, ValueError):
        return False


def load_name_table(path: Union[str, Path]) -> Dict[str, float]:
    """
    Load a weighted name table from a CSV file with `name` and `weight` columns.

    Names are stripped and lowercased. Pass the result (one per gender) to `initialize()`.
    """
    table: Dict[str, float] = {}
    path = Path(path)

    with path.open(encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        if reader.fieldnames is None or not {"name", "weight"} <= set(reader.fieldnames):
            raise ConfigurationError(f"{path} needs 'name' and 'weight' columns")

        for row in reader:
            name = (row["name"] or "").strip().lower()
            try:
                weight = float(row["weight"])
            except (TypeError, ValueError) as e:
                raise ConfigurationError(f"{path}, line {reader.line_num}: bad weight {row['weight']!r}") from e
            if not name:
                raise ConfigurationError(f"{path}, line {reader.line_num}: empty name")
            if name in table:
                raise ConfigurationError(f"{path}, line {reader.line_num}: duplicate name {name!r}")
            table[name] = weight

    return table


# ════════════════════════════════════════════════════════════════════════════════
# DIAGNOSTIC TRACING
# ════════════════════════════════════════════════════════════════════════════════


@dataclass(frozen=True)
class MatchStep:
    """One strategy evaluated during a resolve call."""

    strategy: str
    notes: Tuple[str, ...]
    result: Gender


@dataclass(frozen=True)
class MatchTrace:
    """Everything a resolve call looked at, in order."""

    name: str
    looseness: int
    steps: Tuple[MatchStep, ...]
    result: Gender


TraceSink = Callable[[MatchTrace], None]

_active_notes: contextvars.ContextVar[Optional[List[str]]] = contextvars.ContextVar("_active_notes", default=None)


def note(message: str) -> None:
    """Record a diagnostic note for the strategy currently running."""
    notes = _active_notes.get()
    if notes is not None:
        notes.append(message)


def tracing_active() -> bool:
    """True while a resolve call is collecting notes. Lets strategies skip building messages."""
    return _active_notes.get() is not None


def strategy_name(strategy: MatchStrategy) -> str:
    return getattr(strategy, "__name__", None) or repr(strategy)


def format_trace(trace: MatchTrace) -> str:
    """Render a trace in the legacy debug block format."""
    lines = [f'Matching "{trace.name}":']
    for step in trace.steps:
        lines.append(f"\t{step.strategy}...")
        lines.extend(f"\t{line}" for line in step.notes)
        if step.result.is_decisive:
            lines.append(f"\t==> HIT ({step.result.short})")
    return "\n".join(lines)


# ════════════════════════════════════════════════════════════════════════════════
# PHONETIC ENCODING
# ════════════════════════════════════════════════════════════════════════════════


class DoubleMetaphoneEncoder:
    """Primary double metaphone code of a name, computed by the fuzzy library."""

    def __init__(self):
        from fuzzy import DMetaphone

        self._dmeta = DMetaphone()

    def __call__(self, name: str) -> Optional[str]:
        try:
            primary = self._dmeta(name)[0]
        except UnicodeEncodeError:
            # DMetaphone only handles ASCII
            logging.debug(f"No metaphone for {name!r}")
            return None
        if primary is None:
            return None
        return primary.decode("ascii") if isinstance(primary, bytes) else primary


@lru_cache(maxsize=None)
def load_default_encoder() -> Optional[PhoneticEncoder]:
    """Probe once for the double metaphone encoder. Returns None when fuzzy is not installed."""
    try:
        return DoubleMetaphoneEncoder()
    except ImportError:
        logging.warning("fuzzy is not installed: metaphone matching is disabled")
        return None


@dataclass(frozen=True)
class IndexedName:
    name: str
    code: str
    weight: float


@dataclass(frozen=True)
class PhoneticCacheInfo:
    """Immutable phonetic index information structure."""

    encoder_available: bool
    index_built: bool
    female_entries: int
    male_entries: int


class PhoneticIndexService:
    """
    Phonetic codes of table entries, ordered by descending weight.

    Only read-only snapshots (MappingProxyType) are cached, keyed by the identity of the table
    and the encoder, so replacing either one gives a fresh index. Any other mapping may still
    change, so it is indexed afresh on every call.
    """

    def __init__(self, max_tables: int = 8):
        self._max_tables = max_tables
        self._indexes: "OrderedDict[Tuple[int, int], Tuple[Any, Any, Tuple[IndexedName, ...]]]" = OrderedDict()
        self._lock = threading.Lock()

    def entries(self, table: WeightedNameTable, encoder: PhoneticEncoder) -> Tuple[IndexedName, ...]:
        if not isinstance(table, MappingProxyType):
            return self._build(table, encoder)

        key = (id(table), id(encoder))
        with self._lock:
            cached = self._indexes.get(key)
            if cached is not None and cached[0] is table and cached[1] is encoder:
                self._indexes.move_to_end(key)
                return cached[2]

            index = self._build(table, encoder)
            self._indexes[key] = (table, encoder, index)
            while len(self._indexes) > self._max_tables:
                self._indexes.popitem(last=False)
            return index

    def is_indexed(self, table: WeightedNameTable, encoder: PhoneticEncoder) -> bool:
        with self._lock:
            cached = self._indexes.get((id(table), id(encoder)))
            return cached is not None and cached[0] is table and cached[1] is encoder

    def clear(self) -> None:
        with self._lock:
            self._indexes.clear()

    def _build(self, table: WeightedNameTable, encoder: PhoneticEncoder) -> Tuple[IndexedName, ...]:
        start_time = time.perf_counter()

        # sorted() is stable, so equal weights keep the table's own order
        weighted = ((name, _to_weight(weight)) for name, weight in table.items())
        ranked = sorted(weighted, key=lambda x: x[1], reverse=True)
        index: List[IndexedName] = []
        for name, weight in ranked:
            code = encoder(name)
            if code:
                index.append(IndexedName(name=name, code=code, weight=weight))

        logging.debug(f"Built phonetic index for {len(index)} names in {time.perf_counter() - start_time:.3f}s")
        return tuple(index)


_phonetic_index = PhoneticIndexService()


def _to_weight(weight: Any) -> float:
    return float(weight) if weight else 0.0


def _weight(table: WeightedNameTable, name: str) -> float:
    return _to_weight(table.get(name))


# ════════════════════════════════════════════════════════════════════════════════
# MATCH STRATEGIES
# ════════════════════════════════════════════════════════════════════════════════

_V2_RULES_COMPILED = tuple((re.compile(pattern, re.IGNORECASE), Gender(gender)) for pattern, gender in V2_RULES)
_V1_RULES_COMPILED = tuple((re.compile(pattern, re.IGNORECASE), Gender(gender)) for pattern, gender in V1_RULES)


def _exclusive(female_hit: float, male_hit: float) -> Gender:
    if female_hit and not male_hit:
        return Gender.FEMALE
    if male_hit and not female_hit:
        return Gender.MALE
    return Gender.UNKNOWN


def _heavier(female_hit: float, male_hit: float) -> Gender:
    if not female_hit and not male_hit:
        return Gender.UNKNOWN
    # Ties go to male. Long-standing behaviour, kept on purpose.
    return Gender.FEMALE if female_hit > male_hit else Gender.MALE


def one_only(
    name: str, females: WeightedNameTable, males: WeightedNameTable, encoder: Optional[PhoneticEncoder] = None
) -> Gender:
    """Decisive only if the name is in exactly one of the two tables."""
    return _exclusive(_weight(females, name), _weight(males, name))


def either_weight(
    name: str, females: WeightedNameTable, males: WeightedNameTable, encoder: Optional[PhoneticEncoder] = None
) -> Gender:
    """Decisive if the name is in either table; the heavier weight wins."""
    female_hit = _weight(females, name)
    male_hit = _weight(males, name)

    gender = _heavier(female_hit, male_hit)
    if gender.is_decisive:
        note(f"F: {female_hit}, M: {male_hit}")

    return gender


def one_only_metaphone(
    name: str, females: WeightedNameTable, males: WeightedNameTable, encoder: Optional[PhoneticEncoder] = None
) -> Gender:
    """
    Decisive only if the name's phonetic code appears in exactly one table.

    Each table is scanned from its heaviest entry down and the scan stops at the first
    entry with the same code.
    """
    if encoder is None:
        return Gender.UNKNOWN

    code = encoder(name)
    if not code:
        return Gender.UNKNOWN

    tracing = tracing_active()
    hits = []
    for label, table in (("F", females), ("M", males)):
        hit = 0.0
        for entry in _phonetic_index.entries(table, encoder):
            if entry.code == code:
                hit = entry.weight
                if tracing:
                    note(f"{label}: {name} => {entry.name} => {code}: {entry.weight:f}")
                break
        hits.append(hit)

    return _exclusive(hits[0], hits[1])


def either_weight_metaphone(
    name: str, females: WeightedNameTable, males: WeightedNameTable, encoder: Optional[PhoneticEncoder] = None
) -> Gender:
    """Sum the weights of every entry sharing the name's phonetic code; the heavier table wins."""
    if encoder is None:
        return Gender.UNKNOWN

    code = encoder(name)
    if not code:
        return Gender.UNKNOWN

    tracing = tracing_active()
    hits = []
    for label, table in (("F", females), ("M", males)):
        total = 0.0
        for entry in _phonetic_index.entries(table, encoder):
            if entry.code == code:
                total += entry.weight
                if tracing:
                    note(f"{label}: {name} => {entry.name} => {code}: {entry.weight:f}")
        hits.append(total)

    return _heavier(hits[0], hits[1])


def v2_rules(
    name: str, females: WeightedNameTable, males: WeightedNameTable, encoder: Optional[PhoneticEncoder] = None
) -> Gender:
    """Orwant's v0.20 rules. The first matching rule decides."""
    for pattern, gender in _V2_RULES_COMPILED:
        if pattern.search(name):
            return gender
    return Gender.UNKNOWN


def v1_rules(
    name: str, females: WeightedNameTable, males: WeightedNameTable, encoder: Optional[PhoneticEncoder] = None
) -> Gender:
    """
    The v0.10 awk heuristics.

    Every rule runs, in order, and each match overwrites the result: the last matching rule
    decides. Do not turn this into an early return; later rules are exceptions to earlier ones.
    """
    gender = Gender.UNKNOWN
    for pattern, rule_gender in _V1_RULES_COMPILED:
        if pattern.search(name):
            gender = rule_gender
    return gender


DEFAULT_MATCH_LIST: Tuple[MatchStrategy, ...] = (
    one_only,
    either_weight,
    one_only_metaphone,
    either_weight_metaphone,
    v2_rules,
    v1_rules,
)

PHONETIC_STRATEGIES = frozenset({one_only_metaphone, either_weight_metaphone})


def without_phonetic(strategies: Iterable[MatchStrategy]) -> List[MatchStrategy]:
    """Drop the strategies that need a phonetic encoder."""
    return [s for s in strategies if s not in PHONETIC_STRATEGIES]


# ════════════════════════════════════════════════════════════════════════════════
# MAIN GENDER DETECTOR CLASS
# ════════════════════════════════════════════════════════════════════════════════

# Sentinel: probe for the default encoder
_DEFAULT_ENCODER: Any = object()


class GenderDetector:
    """Main gender guessing service."""

    def __init__(
        self,
        config: Optional[GenderConfig] = None,
        females: Optional[WeightedNameTable] = None,
        males: Optional[WeightedNameTable] = None,
        encoder: Optional[PhoneticEncoder] = _DEFAULT_ENCODER,
        trace_sink: Optional[TraceSink] = None,
    ):
        self._config = config or GenderConfig.create_default()
        self._encoder: Optional[PhoneticEncoder] = load_default_encoder() if encoder is _DEFAULT_ENCODER else encoder
        self._trace_sink = trace_sink
        self._tables = NameTables.default()
        self.initialize(females, males)
        self._match_list: List[MatchStrategy] = self.default_match_list()

    # Configuration
    @property
    def config(self) -> GenderConfig:
        return self._config

    @property
    def tables(self) -> NameTables:
        return self._tables

    @property
    def encoder(self) -> Optional[PhoneticEncoder]:
        return self._encoder

    @property
    def match_list(self) -> List[MatchStrategy]:
        """The live, mutable match list: reorder, extend or filter it between calls."""
        return self._match_list

    @match_list.setter
    def match_list(self, strategies: Iterable[MatchStrategy]) -> None:
        self.set_match_list(strategies)

    def set_match_list(self, strategies: Iterable[MatchStrategy]) -> None:
        strategies = list(strategies)
        for strategy in strategies:
            if not callable(strategy):
                raise ConfigurationError(f"Match list entries must be callable, got {strategy!r}")
        self._match_list = strategies

    def default_match_list(self) -> List[MatchStrategy]:
        """The six built-in strategies, minus the metaphone ones when there is no encoder."""
        if self._encoder is None:
            return without_phonetic(DEFAULT_MATCH_LIST)
        return list(DEFAULT_MATCH_LIST)

    def initialize(
        self, females: Optional[WeightedNameTable] = None, males: Optional[WeightedNameTable] = None
    ) -> None:
        """
        Replace the name tables.

        Without arguments the default SSA tables are restored. Both tables must be given
        together; supplying only one raises ConfigurationError and keeps the current pair.
        """
        if females is None and males is None:
            self._tables = NameTables.default()
            return
        if females is None:
            raise ConfigurationError("Male table supplied, but not female!")
        if males is None:
            raise ConfigurationError("Female table supplied, but not male!")

        self._tables = NameTables.from_mappings(females, males)

    # Public API methods
    def get_cache_info(self) -> PhoneticCacheInfo:
        tables = self._tables
        encoder = self._encoder
        if encoder is None:
            return PhoneticCacheInfo(False, False, 0, 0)

        index_built = _phonetic_index.is_indexed(tables.females, encoder) and _phonetic_index.is_indexed(
            tables.males, encoder
        )
        return PhoneticCacheInfo(
            encoder_available=True,
            index_built=index_built,
            female_entries=len(_phonetic_index.entries(tables.females, encoder)) if index_built else 0,
            male_entries=len(_phonetic_index.entries(tables.males, encoder)) if index_built else 0,
        )

    def build_phonetic_index(self) -> bool:
        """Index both tables now instead of on the first metaphone lookup."""
        if self._encoder is None:
            return False
        _phonetic_index.entries(self._tables.females, self._encoder)
        _phonetic_index.entries(self._tables.males, self._encoder)
        return True

    def resolve(self, name: Optional[str], looseness: Optional[int] = None) -> Gender:
        """
        Main API method: guess the gender for a first name.

        Tries up to `looseness` strategies of the match list in order and returns the first
        decisive result, or Gender.UNKNOWN.
        """
        if looseness is None:
            looseness = self._config.default_looseness
        if isinstance(looseness, bool) or not isinstance(looseness, int) or looseness < 1:
            raise InvalidInputError(f"Looseness must be a positive integer, got {looseness!r}")
        if not isinstance(name, str) or not name.strip():
            raise InvalidInputError("No name specified")

        key = name.strip().lower()

        # Snapshot so reconfiguration between calls never affects a call in flight
        strategies = tuple(self._match_list[:looseness])
        tables = self._tables
        encoder = self._encoder
        tracing = self._config.debug or self._trace_sink is not None

        steps: List[MatchStep] = []
        gender = Gender.UNKNOWN
        for strategy in strategies:
            if tracing:
                notes: List[str] = []
                token = _active_notes.set(notes)
                try:
                    gender = Gender.from_value(strategy(key, tables.females, tables.males, encoder))
                finally:
                    _active_notes.reset(token)
                steps.append(MatchStep(strategy=strategy_name(strategy), notes=tuple(notes), result=gender))
            else:
                gender = Gender.from_value(strategy(key, tables.females, tables.males, encoder))

            if gender.is_decisive:
                break

        if tracing:
            self._emit_trace(MatchTrace(name=key, looseness=looseness, steps=tuple(steps), result=gender))

        return gender

    def _emit_trace(self, trace: MatchTrace) -> None:
        if self._config.debug:
            logging.debug(format_trace(trace))
        if self._trace_sink is not None:
            self._trace_sink(trace)


def run_performance_test() -> None:
    """Classify the classic example names at full looseness and report timings."""
    detector = GenderDetector(config=GenderConfig.create_default().with_debug())

    names = ["Josephine", "Michael", "Dondi", "Jonny", "Pascal", "Velvet", "Eamon", "FLKMLKSJN"]
    looseness = len(detector.match_list)

    start = time.perf_counter()
    detector.build_phonetic_index()
    print(f"Phonetic index ready in {time.perf_counter() - start:.3f}s")

    for name in names:
        result = detector.resolve(name, looseness)
        print(f"{name}: {result.value}")

    batch = names * 125
    start = time.perf_counter()
    for name in batch:
        detector.resolve(name, looseness)
    elapsed = time.perf_counter() - start

    print(f"\n{len(batch)} names in {elapsed:.3f}s")
    print(f"Rate: {len(batch) / elapsed:.0f} names/second")
    print(f"Time per name: {elapsed / len(batch) * 1_000_000:.1f} microseconds")


# ════════════════════════════════════════════════════════════════════════════════
# MODULE-LEVEL CONVENIENCE FUNCTIONS
# ════════════════════════════════════════════════════════════════════════════════

# Global detector instance for module-level functions
_global_detector: Optional[GenderDetector] = None


def _get_global_detector() -> GenderDetector:
    """Get or create the global detector instance."""
    global _global_detector
    if _global_detector is None:
        _global_detector = GenderDetector()
    return _global_detector


def gender(name: str, looseness: int = 1) -> Gender:
    """
    Module-level convenience function for gender guessing.

    Args:
        name: First name
        looseness: Number of match list strategies that may be tried

    Returns:
        Gender.MALE, Gender.FEMALE or Gender.UNKNOWN
    """
    return _get_global_detector().resolve(name, looseness)


def gender_init(females: Optional[WeightedNameTable] = None, males: Optional[WeightedNameTable] = None) -> None:
    """Replace the global tables; without arguments restore the defaults."""
    _get_global_detector().initialize(females, males)


def get_match_list() -> List[MatchStrategy]:
    """The global detector's live match list."""
    return _get_global_detector().match_list


def set_match_list(strategies: Iterable[MatchStrategy]) -> None:
    _get_global_detector().set_match_list(strategies)


def get_cache_info() -> Dict[str, Union[bool, int]]:
    """Get phonetic index information as a dictionary."""
    cache_info = _get_global_detector().get_cache_info()
    return {
        "encoder_available": cache_info.encoder_available,
        "index_built": cache_info.index_built,
        "female_entries": cache_info.female_entries,
        "male_entries": cache_info.male_entries,
    }


# CLI entry point
if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(message)s")
    run_performance_test()
