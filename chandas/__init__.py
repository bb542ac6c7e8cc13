"""
Chandas
=======

Scansion of Devanagari verse into laghu / guru syllables and
identification of classical Sanskrit meters.

    >>> from chandas import get_pattern, get_meter_name
    >>> get_pattern("का")
    'G'
"""

__version__ = "1.0.0"

from .models import (
    CharClass, VowelLength, Weight, Syllable, LinePattern, VersePattern,
    MeterTemplate, MatchResult, Identified, Irregular, UnknownLength, UnknownPattern, Empty,
    VerseAnalysis
)
from .analysis import CharacterClassifier, SyllableScanner
from .data import MeterRegistry, MeterDataError, DEFAULT_REGISTRY
from .evaluation import MeterClassifier, VerseAnalyzer, render_pattern, parse_pattern, meter_label

_default_analyzer = VerseAnalyzer()


def analyze(text: str) -> VerseAnalysis:
    """Full analysis of a verse with the default meter table"""
    return _default_analyzer.analyze(text)


def get_pattern(text: str) -> str:
    """Pattern string, lines joined with ' | '"""
    return _default_analyzer.get_pattern(text)


def get_meter_name(text: str) -> str:
    """Meter name or fallback message"""
    return _default_analyzer.get_meter_name(text)


__all__ = [
    'CharClass',
    'VowelLength',
    'Weight',
    'Syllable',
    'LinePattern',
    'VersePattern',
    'MeterTemplate',
    'MatchResult',
    'Identified',
    'Irregular',
    'UnknownLength',
    'UnknownPattern',
    'Empty',
    'VerseAnalysis',
    'CharacterClassifier',
    'SyllableScanner',
    'MeterRegistry',
    'MeterDataError',
    'DEFAULT_REGISTRY',
    'MeterClassifier',
    'VerseAnalyzer',
    'render_pattern',
    'parse_pattern',
    'meter_label',
    'analyze',
    'get_pattern',
    'get_meter_name'
]
