# chandas/models/analysis.py

from dataclasses import dataclass, field
from typing import List, Dict, Any

from .meter import MatchResult
from .prosody import LinePattern, Syllable


@dataclass
class LineScansion:
    """Scansion of a single pada"""

    text: str
    syllables: List[Syllable]
    pattern: LinePattern
    ganas: List[str] = field(default_factory=list)

    @property
    def syllable_count(self) -> int:
        return len(self.pattern)

    @property
    def matra_count(self) -> int:
        return self.pattern.matra_count

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "text": self.text,
            "pattern": self.pattern.render(),
            "syllable_count": self.syllable_count,
            "matra_count": self.matra_count,
            "ganas": self.ganas,
            "syllables": [syllable.to_dict() for syllable in self.syllables]
        }


@dataclass
class VerseAnalysis:
    """Result of analysing a whole verse"""

    text: str
    lines: List[LineScansion]
    pattern: str
    result: MatchResult
    meter_name: str

    @property
    def is_identified(self) -> bool:
        return self.result.is_identified

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "text": self.text,
            "pattern": self.pattern,
            "meter_name": self.meter_name,
            "result": self.result.to_dict(),
            "lines": [line.to_dict() for line in self.lines]
        }
