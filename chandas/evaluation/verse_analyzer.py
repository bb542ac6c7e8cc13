# chandas/evaluation/verse_analyzer.py

import logging
from typing import Optional

from chandas.models.analysis import LineScansion, VerseAnalysis
from chandas.models.prosody import LinePattern, VersePattern
from chandas.analysis.syllable_scanner import SyllableScanner, split_verse
from chandas.analysis.gana import to_ganas
from chandas.evaluation.meter_classifier import MeterClassifier
from chandas.evaluation.pattern_format import render_pattern
from chandas.evaluation.messages import meter_label


class VerseAnalyzer:
    """
    Runs the full scansion pipeline on raw verse text.

    Lines are trimmed and empty lines dropped; each remaining line is scanned
    on its own, the patterns are joined into the pattern string and the verse
    is classified against the meter registry.
    """

    def __init__(self, scanner: Optional[SyllableScanner] = None,
                 classifier: Optional[MeterClassifier] = None,
                 show_ganas: bool = True):
        self.scanner = scanner or SyllableScanner()
        self.classifier = classifier or MeterClassifier()
        self.show_ganas = show_ganas
        self.logger = logging.getLogger(__name__)

    def analyze(self, text: str) -> VerseAnalysis:
        """
        Analyze a verse.

        Args:
            text: Newline separated padas in Devanagari

        Returns:
            VerseAnalysis with per-line scansion, pattern string and meter
        """
        lines = []
        for line in split_verse(text):
            syllables = self.scanner.scan_syllables(line)
            pattern = LinePattern(tuple(syllable.weight for syllable in syllables))
            lines.append(LineScansion(
                text=line,
                syllables=syllables,
                pattern=pattern,
                ganas=to_ganas(pattern.weights) if self.show_ganas else []
            ))

        verse = VersePattern(tuple(line.pattern for line in lines))
        result = self.classifier.classify(verse)
        label = meter_label(result)

        self.logger.debug(f"Analyzed {len(lines)} lines: {label}")

        return VerseAnalysis(
            text=text or "",
            lines=lines,
            pattern=render_pattern(verse),
            result=result,
            meter_name=label
        )

    def get_pattern(self, text: str) -> str:
        """Pattern string only, e.g. 'L G L G | G L G L'"""
        return render_pattern(self.scanner.scan_verse(split_verse(text)))

    def get_meter_name(self, text: str) -> str:
        """Meter name or fallback message only"""
        return meter_label(self.classifier.classify(self.scanner.scan_verse(split_verse(text))))
