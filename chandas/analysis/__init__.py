from .character_classifier import CharacterClassifier, classify
from .syllable_scanner import SyllableScanner, clean_line, split_verse
from .gana import to_ganas, gana_formula

__all__ = [
    'CharacterClassifier',
    'classify',
    'SyllableScanner',
    'clean_line',
    'split_verse',
    'to_ganas',
    'gana_formula'
]
