# chandas/analysis/gana.py

from typing import Dict, List, Sequence

from chandas.models.prosody import Weight

# The eight trisyllabic feet (yamataraajabhaanasalagaam)
GANAS: Dict[str, str] = {
    "LGG": "ya",
    "GGG": "ma",
    "GGL": "ta",
    "GLG": "ra",
    "LGL": "ja",
    "GLL": "bha",
    "LLL": "na",
    "LLG": "sa",
}

# Remainder syllables that do not fill a foot
SINGLE = {
    "L": "la",
    "G": "ga",
}


def to_ganas(weights: Sequence[Weight]) -> List[str]:
    """
    Break a weight sequence into ganas.

    Groups of three are named by foot; one or two trailing syllables are
    named individually as la / ga.

    Example:
        GGL GGL LGL G G -> ['ta', 'ta', 'ja', 'ga', 'ga']
    """
    symbols = "".join(weight.value for weight in weights)
    full = len(symbols) - len(symbols) % 3

    ganas = [GANAS[symbols[i:i + 3]] for i in range(0, full, 3)]
    ganas.extend(SINGLE[symbol] for symbol in symbols[full:])
    return ganas


def gana_formula(weights: Sequence[Weight]) -> str:
    """Space separated gana names, e.g. 'ta ta ja ga ga'"""
    return " ".join(to_ganas(weights))
