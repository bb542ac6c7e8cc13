# chandas/analysis/syllable_scanner.py

import re
import logging
from typing import List, Optional, Iterable

from chandas.models.script import CharClass, VowelLength
from chandas.models.prosody import Weight, WeightRule, Syllable, LinePattern, VersePattern
from chandas.analysis.character_classifier import CharacterClassifier, INHERENT_VOWEL

logger = logging.getLogger(__name__)

# Whitespace, the ASCII bar and the two dandas carry no syllabic content
_NON_SYLLABIC = re.compile(r"[\s|।॥]")


def clean_line(line: str) -> str:
    """Remove whitespace and pada punctuation from a line"""
    return _NON_SYLLABIC.sub("", line or "")


def split_verse(text: str) -> List[str]:
    """Split raw verse text on newlines into trimmed, non-empty lines"""
    if not text:
        return []
    return [line.strip() for line in text.split("\n") if line.strip()]


class SyllableScanner:
    """
    Scans a line of Devanagari into syllables and assigns each a weight.

    Single left-to-right pass without backtracking. A syllable is a consonant
    with its vowel mark (or the inherent short a), or an independent vowel.
    Weight rules, applied in order:

    A. guru if the vowel is long
    B. guru if an anusvara or visarga follows (the mark is consumed)
    C. a laghu becomes guru if a conjunct follows: consonant + consonant,
       or halant + consonant

    Characters that cannot start a syllable are skipped one at a time.
    """

    def __init__(self, classifier: Optional[CharacterClassifier] = None):
        self.classifier = classifier or CharacterClassifier()

    def scan(self, line: str) -> LinePattern:
        """Weights of a single line"""
        return LinePattern(tuple(syllable.weight for syllable in self.scan_syllables(line)))

    def scan_verse(self, lines: Iterable[str]) -> VersePattern:
        """Scan every line independently, keeping input order"""
        return VersePattern(tuple(self.scan(line) for line in lines))

    def scan_syllables(self, line: str) -> List[Syllable]:
        """
        Segment a line into weighted syllables.

        Args:
            line: A pada in Devanagari; other characters are ignored

        Returns:
            Syllables in scan order
        """
        text = clean_line(line)
        length = len(text)
        syllables: List[Syllable] = []
        i = 0

        while i < length:
            start = i
            char_class = self.classifier.classify(text[i])

            if char_class is CharClass.CONSONANT:
                i += 1
                if i < length and self.classifier.classify(text[i]) is CharClass.DEPENDENT_VOWEL_MARK:
                    vowel = text[i]
                    i += 1
                else:
                    vowel = INHERENT_VOWEL
            elif char_class is CharClass.INDEPENDENT_VOWEL:
                vowel = text[i]
                i += 1
            else:
                # halant without a consonant, orphan marks, non-script characters
                i += 1
                continue

            weight = Weight.LAGHU
            rule = None

            # Rule A
            if self.classifier.vowel_length(vowel) is VowelLength.LONG:
                weight = Weight.GURU
                rule = WeightRule.LONG_VOWEL

            # Rule B
            if i < length and self.classifier.classify(text[i]) is CharClass.ANUSVARA_OR_VISARGA:
                if weight is Weight.LAGHU:
                    weight = Weight.GURU
                    rule = WeightRule.ANUSVARA_VISARGA
                i += 1

            # Rule C, only when something follows
            if i < length and weight is Weight.LAGHU and self._conjunct_follows(text, i):
                weight = Weight.GURU
                rule = WeightRule.CONJUNCT

            syllables.append(Syllable(text=text[start:i], vowel=vowel, weight=weight, rule=rule))

        logger.debug(f"Scanned {len(syllables)} syllables from '{line}'")
        return syllables

    def _conjunct_follows(self, text: str, position: int) -> bool:
        """Peek at text[position] and text[position + 1] without consuming"""
        if position + 1 >= len(text):
            return False

        following = self.classifier.classify(text[position])
        after = self.classifier.classify(text[position + 1])
        if after is not CharClass.CONSONANT:
            return False
        return following in (CharClass.CONSONANT, CharClass.HALANT)
