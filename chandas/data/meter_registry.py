# chandas/data/meter_registry.py

import re
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

import yaml

from chandas.models.meter import MeterTemplate

logger = logging.getLogger(__name__)

_PATTERN_RE = re.compile(r"^[LG]+$")


class MeterDataError(Exception):
    """Raised when meter template data is missing or malformed"""
    pass


# Declaration order is the tie-break order for classification.
# Classical gana variants ship separately in config/extra_meters.yaml.
DEFAULT_TEMPLATES: Tuple[MeterTemplate, ...] = (
    # 8 syllables
    MeterTemplate.from_strings(
        "अनुष्टुप् (Anuṣṭubh)", 8,
        ["LGLGLGLG", "GLGLGLGL", "LLGLGLGG", "GGLGLGLG"]
    ),
    MeterTemplate.from_strings("गायत्री (Gāyatrī)", 8, ["LGLGLGLG"]),

    # 11 syllables
    MeterTemplate.from_strings("इन्द्रवज्रा (Indravajrā)", 11, ["GGLGGLGGLGG"], "ta ta ja ga ga"),
    MeterTemplate.from_strings("उपेन्द्रवज्रा (Upendravajrā)", 11, ["LGLGGLGGLGG"], "ja ta ja ga ga"),
    MeterTemplate.from_strings("शालिनी (Śālinī)", 11, ["GGLGLGGLGGL"], "ma ta ta ga ga"),

    # 12 syllables
    MeterTemplate.from_strings("वंशस्थ (Vaṃśastha)", 12, ["LGLGGLGLGLGG"], "ja ta ja ra"),
    MeterTemplate.from_strings("भुजङ्गप्रयात (Bhujaṅgaprayāta)", 12, ["LGGLGGLGGLGG"], "ya ya ya ya"),
    MeterTemplate.from_strings("द्रुतविलम्बित (Drutavilambita)", 12, ["LLLGLLGLLGLG"], "na bha bha ra"),

    # 14 syllables
    MeterTemplate.from_strings("वसन्ततिलका (Vasantatilakā)", 14, ["GGLGLGLGLGGGLG"]),

    # 17 syllables; the stored pattern is one symbol short, so no pada matches it
    MeterTemplate.from_strings("मन्दाक्रान्ता (Mandākrāntā)", 17, ["GGGLGLLLLLLGGLGG"]),
)


class MeterRegistry:
    """
    Immutable catalogue of meter templates indexed by syllable count.

    Candidate lookup by syllable count is a single dict access; templates
    within a count keep their declaration order.
    """

    def __init__(self, templates: Iterable[MeterTemplate] = DEFAULT_TEMPLATES):
        self._templates: Tuple[MeterTemplate, ...] = tuple(templates)

        by_count: Dict[int, List[MeterTemplate]] = {}
        by_name: Dict[str, MeterTemplate] = {}
        for template in self._templates:
            by_count.setdefault(template.syllable_count, []).append(template)
            by_name.setdefault(template.name, template)

        self._by_count: Dict[int, Tuple[MeterTemplate, ...]] = {
            count: tuple(group) for count, group in by_count.items()
        }
        self._by_name = by_name

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self):
        return iter(self._templates)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name

    def candidates(self, syllable_count: int) -> Tuple[MeterTemplate, ...]:
        """Templates with the given syllables per pada, in declaration order"""
        return self._by_count.get(syllable_count, ())

    def syllable_counts(self) -> List[int]:
        return sorted(self._by_count)

    def get_meter(self, name: str) -> Optional[MeterTemplate]:
        """
        Look up a template by its exact name.

        Args:
            name: Template name, e.g. "गायत्री (Gāyatrī)"

        Returns:
            MeterTemplate or None if not registered
        """
        return self._by_name.get(name)

    def get_all_meters(self) -> List[MeterTemplate]:
        return list(self._templates)

    def validate_meter(self, name: str) -> bool:
        return name in self._by_name

    def search_meters(self, query: str) -> List[MeterTemplate]:
        """Case-insensitive substring search over template names"""
        query_lower = query.lower()
        return [template for template in self._templates if query_lower in template.name.lower()]

    def extend(self, templates: Iterable[MeterTemplate]) -> "MeterRegistry":
        """New registry with extra templates appended after the current ones"""
        return MeterRegistry(self._templates + tuple(templates))

    @classmethod
    def from_yaml(cls, meter_file: Union[str, Path], include_defaults: bool = True) -> "MeterRegistry":
        """Registry built from a YAML meter file, optionally on top of the defaults"""
        custom = load_templates(meter_file)
        base = DEFAULT_TEMPLATES if include_defaults else ()
        return cls(base + tuple(custom))


def load_templates(meter_file: Union[str, Path]) -> List[MeterTemplate]:
    """
    Load meter templates from a YAML file.

    Expected layout:

        meters:
          - name: "मालिनी (Mālinī)"
            syllables: 15
            patterns: ["LLLLLLGGGLGGLGG"]
            ganas: "na na ma ya ya"

    Args:
        meter_file: Path to the YAML file

    Returns:
        Templates in file order

    Raises:
        MeterDataError: If the file cannot be read or an entry is invalid
    """
    meter_path = Path(meter_file)

    if not meter_path.exists():
        raise MeterDataError(f"Meter file not found: {meter_path}")

    try:
        with open(meter_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise MeterDataError(f"Invalid YAML in {meter_path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        raise MeterDataError(f"Error reading meter file {meter_path}: {e}")

    if isinstance(data, dict):
        entries = data.get("meters", [])
    elif isinstance(data, list):
        entries = data
    else:
        raise MeterDataError("Meter file must contain a mapping or a list")

    if not isinstance(entries, list):
        raise MeterDataError("'meters' must be a list")

    templates = [_parse_entry(entry, index) for index, entry in enumerate(entries, 1)]
    logger.info(f"Loaded {len(templates)} meter templates from {meter_path}")
    return templates


def _parse_entry(entry, index: int) -> MeterTemplate:
    """Validate one YAML entry and turn it into a template"""
    if not isinstance(entry, dict):
        raise MeterDataError(f"Meter entry {index} must be a mapping")

    name = entry.get("name")
    if not name or not isinstance(name, str):
        raise MeterDataError(f"Meter entry {index} is missing a name")

    syllables = entry.get("syllables")
    if not isinstance(syllables, int) or isinstance(syllables, bool) or syllables <= 0:
        raise MeterDataError(f"Meter '{name}' needs a positive integer 'syllables'")

    patterns = entry.get("patterns")
    if isinstance(patterns, str):
        patterns = [patterns]
    if not patterns or not isinstance(patterns, list):
        raise MeterDataError(f"Meter '{name}' needs at least one pattern")

    cleaned = []
    for pattern in patterns:
        compact = re.sub(r"\s+", "", str(pattern)).upper()
        if not _PATTERN_RE.match(compact):
            raise MeterDataError(f"Meter '{name}': pattern must contain only 'L' and 'G': {pattern}")
        if len(compact) != syllables:
            raise MeterDataError(
                f"Meter '{name}': pattern {compact} has {len(compact)} syllables, expected {syllables}"
            )
        cleaned.append(compact)

    return MeterTemplate.from_strings(name, syllables, cleaned, entry.get("ganas"))


DEFAULT_REGISTRY = MeterRegistry()
