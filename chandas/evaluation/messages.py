# chandas/evaluation/messages.py

from chandas.models.meter import (
    MatchResult, Identified, Irregular, UnknownLength, UnknownPattern, Empty
)

# Wording is relied upon by consumers of the meter name; treat as a versioned contract
EMPTY_MESSAGE = "No recognizable meter structure."
IRREGULAR_MESSAGE = "Irregular ({n} syllables in first line, varying others)"
UNKNOWN_LENGTH_MESSAGE = "Unknown {n}-syllable meter."
UNKNOWN_PATTERN_MESSAGE = "Candidate {n}-syllable meter (No exact match found: {prefix}...)."


def meter_label(result: MatchResult) -> str:
    """Display string for a classification result"""
    if isinstance(result, Identified):
        return result.name
    if isinstance(result, Irregular):
        return IRREGULAR_MESSAGE.format(n=result.first_line_count)
    if isinstance(result, UnknownLength):
        return UNKNOWN_LENGTH_MESSAGE.format(n=result.count)
    if isinstance(result, UnknownPattern):
        return UNKNOWN_PATTERN_MESSAGE.format(n=result.count, prefix=result.prefix)
    if isinstance(result, Empty):
        return EMPTY_MESSAGE
    raise TypeError(f"Unsupported match result: {result!r}")
