# chandas/models/script.py

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Dict, Any


class CharClass(Enum):
    """Prosodic category of a single Devanagari character"""
    INDEPENDENT_VOWEL = "independent_vowel"
    DEPENDENT_VOWEL_MARK = "dependent_vowel_mark"
    CONSONANT = "consonant"
    HALANT = "halant"
    ANUSVARA_OR_VISARGA = "anusvara_or_visarga"
    OTHER = "other"


class VowelLength(Enum):
    """Intrinsic length of a vowel"""
    SHORT = "short"
    LONG = "long"


@dataclass(frozen=True)
class ScriptChar:
    """A single character tagged with its class (and length, for vowels)"""

    char: str
    char_class: CharClass
    length: Optional[VowelLength] = None

    @property
    def is_vowel(self) -> bool:
        return self.char_class in (CharClass.INDEPENDENT_VOWEL, CharClass.DEPENDENT_VOWEL_MARK)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "char": self.char,
            "codepoint": f"U+{ord(self.char):04X}",
            "class": self.char_class.value,
            "length": self.length.value if self.length else None
        }
