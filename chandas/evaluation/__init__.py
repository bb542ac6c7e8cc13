from .meter_classifier import MeterClassifier
from .pattern_format import render_pattern, parse_pattern, LINE_SEPARATOR
from .messages import meter_label
from .verse_analyzer import VerseAnalyzer

__all__ = [
    'MeterClassifier',
    'render_pattern',
    'parse_pattern',
    'LINE_SEPARATOR',
    'meter_label',
    'VerseAnalyzer'
]
