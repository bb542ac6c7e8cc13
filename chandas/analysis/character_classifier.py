# chandas/analysis/character_classifier.py

from typing import Optional

from chandas.models.script import CharClass, VowelLength, ScriptChar

# --- Devanagari codepoint ranges (inclusive) ---
DEVANAGARI_RANGE = (0x0900, 0x097F)
INDEPENDENT_VOWEL_RANGE = (0x0905, 0x0914)
VOWEL_MARK_RANGE = (0x093E, 0x094C)
CONSONANT_RANGES = (
    (0x0915, 0x0939),
    (0x0958, 0x0961),  # nukta forms
    (0x0978, 0x097F),
)

HALANT = "\u094d"
ANUSVARA = "\u0902"
VISARGA = "\u0903"
DANDA = "\u0964"
DOUBLE_DANDA = "\u0965"
INHERENT_VOWEL = "अ"

# Short and long vowels interleave inside the vowel ranges, so shortness is a value set
SHORT_VOWELS = frozenset([
    "अ",
    "इ",
    "उ",
    "ऋ",
    "ऌ",
    "\u093f",  # i
    "\u0941",  # u
    "\u0943",  # vocalic r
    "\u0962",  # vocalic l
])


def _in_range(char: str, bounds) -> bool:
    if not char:
        return False
    low, high = bounds
    return low <= ord(char[0]) <= high


def is_devanagari(char: str) -> bool:
    return _in_range(char, DEVANAGARI_RANGE)


def is_independent_vowel(char: str) -> bool:
    return _in_range(char, INDEPENDENT_VOWEL_RANGE)


def is_vowel_mark(char: str) -> bool:
    return _in_range(char, VOWEL_MARK_RANGE)


def is_consonant(char: str) -> bool:
    return any(_in_range(char, bounds) for bounds in CONSONANT_RANGES)


def is_halant(char: str) -> bool:
    return char == HALANT


def is_anusvara_or_visarga(char: str) -> bool:
    return char in (ANUSVARA, VISARGA) if char else False


def is_short_vowel(char: str) -> bool:
    return char in SHORT_VOWELS


def is_long_vowel(char: str) -> bool:
    """True for any independent vowel or vowel mark outside the short set"""
    return (is_independent_vowel(char) or is_vowel_mark(char)) and not is_short_vowel(char)


def classify(char: str) -> CharClass:
    """
    Classify a single character.

    Total and pure: anything outside the recognized ranges is OTHER.

    Args:
        char: A single character (only the first codepoint is inspected)

    Returns:
        The CharClass of the character
    """
    if is_consonant(char):
        return CharClass.CONSONANT
    if is_independent_vowel(char):
        return CharClass.INDEPENDENT_VOWEL
    if is_vowel_mark(char):
        return CharClass.DEPENDENT_VOWEL_MARK
    if is_halant(char):
        return CharClass.HALANT
    if is_anusvara_or_visarga(char):
        return CharClass.ANUSVARA_OR_VISARGA
    return CharClass.OTHER


def vowel_length(char: str) -> Optional[VowelLength]:
    """Intrinsic length of a vowel or vowel mark, None for non-vowels"""
    if not (is_independent_vowel(char) or is_vowel_mark(char)):
        return None
    return VowelLength.SHORT if is_short_vowel(char) else VowelLength.LONG


class CharacterClassifier:
    """Classification oracle handed to the syllable scanner"""

    def classify(self, char: str) -> CharClass:
        return classify(char)

    def vowel_length(self, char: str) -> Optional[VowelLength]:
        return vowel_length(char)

    def describe(self, char: str) -> ScriptChar:
        """Tag a character with its class and, for vowels, its length"""
        return ScriptChar(char=char, char_class=classify(char), length=vowel_length(char))
