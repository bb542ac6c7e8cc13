# chandas/models/meter.py

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional, Tuple, Dict, Any

from .prosody import LinePattern, Weight


@dataclass(frozen=True)
class MeterTemplate:
    """A named syllabic meter (vrtta) and its accepted pada patterns"""

    name: str
    syllable_count: int
    canonical_patterns: FrozenSet[Tuple[Weight, ...]]
    gana_formula: Optional[str] = None

    @classmethod
    def from_strings(cls, name: str, syllable_count: int, patterns, gana_formula: Optional[str] = None) -> "MeterTemplate":
        """Build a template from compact 'LGLG...' pattern strings"""
        canonical = frozenset(LinePattern.from_string(pattern).weights for pattern in patterns)
        return cls(
            name=name,
            syllable_count=syllable_count,
            canonical_patterns=canonical,
            gana_formula=gana_formula
        )

    def matches(self, line: LinePattern) -> bool:
        """Exact comparison of a pada against the accepted patterns"""
        return tuple(line.weights[:self.syllable_count]) in self.canonical_patterns

    def pattern_strings(self) -> Tuple[str, ...]:
        return tuple(sorted("".join(w.value for w in pattern) for pattern in self.canonical_patterns))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "name": self.name,
            "syllable_count": self.syllable_count,
            "patterns": list(self.pattern_strings()),
            "gana_formula": self.gana_formula
        }


class MatchKind(Enum):
    """Outcome categories of meter classification"""
    IDENTIFIED = "identified"
    IRREGULAR = "irregular"
    UNKNOWN_LENGTH = "unknown_length"
    UNKNOWN_PATTERN = "unknown_pattern"
    EMPTY = "empty"


@dataclass(frozen=True)
class MatchResult:
    """Base class of all classification outcomes"""

    kind = None

    @property
    def is_identified(self) -> bool:
        return self.kind is MatchKind.IDENTIFIED

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {"kind": self.kind.value}


@dataclass(frozen=True)
class Identified(MatchResult):
    name: str
    kind = MatchKind.IDENTIFIED

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name}


@dataclass(frozen=True)
class Irregular(MatchResult):
    first_line_count: int
    kind = MatchKind.IRREGULAR

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "first_line_count": self.first_line_count}


@dataclass(frozen=True)
class UnknownLength(MatchResult):
    count: int
    kind = MatchKind.UNKNOWN_LENGTH

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count}


@dataclass(frozen=True)
class UnknownPattern(MatchResult):
    count: int
    observed_prefix: Tuple[Weight, ...]
    kind = MatchKind.UNKNOWN_PATTERN

    @property
    def prefix(self) -> str:
        """Observed prefix in compact notation"""
        return "".join(weight.value for weight in self.observed_prefix)

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind.value, "count": self.count, "observed_prefix": self.prefix}


@dataclass(frozen=True)
class Empty(MatchResult):
    kind = MatchKind.EMPTY
