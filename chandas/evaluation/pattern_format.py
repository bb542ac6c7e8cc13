# chandas/evaluation/pattern_format.py

from chandas.models.prosody import LinePattern, VersePattern

# Downstream consumers split on this exact separator and then on single spaces
LINE_SEPARATOR = " | "


def render_pattern(verse: VersePattern) -> str:
    """'L G L | G G' style rendering of a verse"""
    return LINE_SEPARATOR.join(line.render() for line in verse.lines)


def parse_pattern(pattern: str) -> VersePattern:
    """Inverse of render_pattern"""
    if pattern is None:
        return VersePattern()

    lines = []
    for chunk in pattern.split(LINE_SEPARATOR):
        tokens = [token for token in chunk.split(" ") if token]
        lines.append(LinePattern.from_string("".join(tokens)))
    return VersePattern(tuple(lines))
