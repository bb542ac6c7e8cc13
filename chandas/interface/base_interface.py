# chandas/interface/base_interface.py

import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

from chandas.models.analysis import VerseAnalysis
from chandas.evaluation.verse_analyzer import VerseAnalyzer

OUTPUT_FORMATS = ("text", "json")


class BaseInterface(ABC):
    """Base interface class for running verse analysis."""

    def __init__(self, analyzer: Optional[VerseAnalyzer] = None, output_format: str = "text"):
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unknown output format: {output_format}")

        self.analyzer = analyzer or VerseAnalyzer()
        self.output_format = output_format
        self.logger = logging.getLogger(self.__class__.__name__)

    def format_analysis(self, analysis: VerseAnalysis) -> str:
        """Render an analysis in the configured output format."""
        if self.output_format == "json":
            return json.dumps(analysis.to_dict(), ensure_ascii=False, indent=2)
        return format_text(analysis)

    @abstractmethod
    def run(self) -> None:
        """Analyse verses until the input is exhausted or the user interrupts."""
        pass

    @abstractmethod
    def is_completed(self) -> bool:
        """True once every verse of the input has been analysed."""
        pass

    def cleanup(self) -> None:
        """Release streams or files held by the interface."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.cleanup()


def format_text(analysis: VerseAnalysis) -> str:
    """Human readable scansion report"""
    output = [
        f"Pattern: {analysis.pattern}",
        f"Meter:   {analysis.meter_name}",
    ]

    for index, line in enumerate(analysis.lines, 1):
        output.append(f"  {index}. {line.text}")
        details = f"{line.syllable_count} syllables, {line.matra_count} matras"
        if line.ganas:
            details = f"{' '.join(line.ganas)}; {details}"
        output.append(f"     {line.pattern.render() or '-'}  ({details})")

    return "\n".join(output)
