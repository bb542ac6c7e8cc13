# chandas/models/__init__.py

from .script import CharClass, VowelLength, ScriptChar
from .prosody import Weight, WeightRule, Syllable, LinePattern, VersePattern
from .meter import (
    MeterTemplate, MatchKind, MatchResult,
    Identified, Irregular, UnknownLength, UnknownPattern, Empty
)
from .analysis import LineScansion, VerseAnalysis

__all__ = [
    'CharClass',
    'VowelLength',
    'ScriptChar',
    'Weight',
    'WeightRule',
    'Syllable',
    'LinePattern',
    'VersePattern',
    'MeterTemplate',
    'MatchKind',
    'MatchResult',
    'Identified',
    'Irregular',
    'UnknownLength',
    'UnknownPattern',
    'Empty',
    'LineScansion',
    'VerseAnalysis'
]
