# chandas/models/prosody.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any, Tuple


class Weight(Enum):
    """Syllable weight: laghu (light) or guru (heavy)"""
    LAGHU = "L"
    GURU = "G"

    @property
    def matra(self) -> int:
        """Duration in matras (laghu = 1, guru = 2)"""
        return 2 if self is Weight.GURU else 1

    @classmethod
    def from_symbol(cls, symbol: str) -> "Weight":
        """Parse an 'L' or 'G' token"""
        return cls(symbol.strip().upper())


class WeightRule(Enum):
    """Rule that made a syllable guru"""
    LONG_VOWEL = "long_vowel"
    ANUSVARA_VISARGA = "anusvara_visarga"
    CONJUNCT = "conjunct"


@dataclass(frozen=True)
class Syllable:
    """One scanned syllable (akshara)"""

    text: str
    vowel: str
    weight: Weight
    rule: Optional[WeightRule] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "text": self.text,
            "vowel": self.vowel,
            "weight": self.weight.value,
            "rule": self.rule.value if self.rule else None
        }


@dataclass(frozen=True)
class LinePattern:
    """Ordered weights of a single pada"""

    weights: Tuple[Weight, ...] = ()

    def __len__(self) -> int:
        return len(self.weights)

    def __iter__(self):
        return iter(self.weights)

    def __getitem__(self, index):
        return self.weights[index]

    @classmethod
    def from_string(cls, pattern: str) -> "LinePattern":
        """Build from 'L G L' or 'LGL' notation"""
        return cls(tuple(Weight.from_symbol(symbol) for symbol in pattern if not symbol.isspace()))

    @property
    def compact(self) -> str:
        """Weights without separators, e.g. 'LGLG'"""
        return "".join(weight.value for weight in self.weights)

    @property
    def matra_count(self) -> int:
        return sum(weight.matra for weight in self.weights)

    def render(self) -> str:
        """Space separated 'L'/'G' tokens"""
        return " ".join(weight.value for weight in self.weights)


@dataclass(frozen=True)
class VersePattern:
    """Ordered line patterns of a verse, one per non-empty input line"""

    lines: Tuple[LinePattern, ...] = ()

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)

    def __getitem__(self, index):
        return self.lines[index]

    @property
    def first_line(self) -> LinePattern:
        return self.lines[0] if self.lines else LinePattern()
