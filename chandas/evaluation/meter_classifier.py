# chandas/evaluation/meter_classifier.py

import logging
from typing import Optional

from chandas.models.prosody import VersePattern
from chandas.models.meter import (
    MatchResult, Identified, Irregular, UnknownLength, UnknownPattern, Empty
)
from chandas.data.meter_registry import MeterRegistry, DEFAULT_REGISTRY

logger = logging.getLogger(__name__)

# Longest excerpt of an unmatched pattern kept for display
PREFIX_LIMIT = 15


class MeterClassifier:
    """Matches a scanned verse against the meter registry"""

    def __init__(self, registry: Optional[MeterRegistry] = None, prefix_limit: int = PREFIX_LIMIT):
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.prefix_limit = max(0, min(prefix_limit, PREFIX_LIMIT))

    def classify(self, verse: VersePattern) -> MatchResult:
        """
        Identify the meter of a verse from its first pada.

        Every pada must have as many syllables as the first; the first pada is
        then compared exactly against the templates of that length, the
        earliest declared template winning.

        Args:
            verse: Scanned verse

        Returns:
            Identified, Irregular, UnknownLength, UnknownPattern or Empty
        """
        first_line = verse.first_line
        first_count = len(first_line)

        if first_count == 0:
            return Empty()

        if any(len(line) != first_count for line in verse.lines[1:]):
            logger.debug(f"Irregular verse: first line has {first_count} syllables")
            return Irregular(first_count)

        candidates = self.registry.candidates(first_count)
        if not candidates:
            return UnknownLength(first_count)

        for template in candidates:
            if template.matches(first_line):
                logger.debug(f"Matched {template.name}")
                return Identified(template.name)

        return UnknownPattern(first_count, tuple(first_line.weights[:self.prefix_limit]))
