# tests/conftest.py
import pytest
import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from chandas.analysis.character_classifier import CharacterClassifier
from chandas.analysis.syllable_scanner import SyllableScanner
from chandas.data.meter_registry import MeterRegistry
from chandas.evaluation.meter_classifier import MeterClassifier
from chandas.evaluation.verse_analyzer import VerseAnalyzer


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')")


# Syllables whose weight does not depend on their neighbours: a consonant with
# a short mark is always laghu before another such syllable, and one with a
# long mark is always guru.
LAGHU_SYLLABLE = "कि"
GURU_SYLLABLE = "का"


def build_line(pattern: str) -> str:
    """Devanagari line that scans to the given compact L/G pattern"""
    return "".join(GURU_SYLLABLE if symbol == "G" else LAGHU_SYLLABLE for symbol in pattern)


@pytest.fixture(scope="session")
def project_root_path():
    """Return the project root path"""
    return Path(__file__).parent.parent


@pytest.fixture
def line_builder():
    """Factory turning 'LGLG' into a Devanagari line with that scansion"""
    return build_line


@pytest.fixture
def classifier():
    return CharacterClassifier()


@pytest.fixture
def scanner():
    return SyllableScanner()


@pytest.fixture
def registry():
    return MeterRegistry()


@pytest.fixture
def meter_classifier(registry):
    return MeterClassifier(registry)


@pytest.fixture
def analyzer():
    return VerseAnalyzer()


@pytest.fixture
def anushtubh_verse():
    """Two padas scanning to L G L G L G L G"""
    return "ककाककाककाकका\nकका कका कका कका"


@pytest.fixture
def meters_yaml(tmp_path):
    """A custom meter file with two extra templates"""
    path = tmp_path / "meters.yaml"
    path.write_text(
        "meters:\n"
        "  - name: \"मालिनी (Mālinī)\"\n"
        "    syllables: 15\n"
        "    patterns: [\"LLLLLLGGGLGGLGG\"]\n"
        "    ganas: \"na na ma ya ya\"\n"
        "  - name: \"Test Eight\"\n"
        "    syllables: 8\n"
        "    patterns: [\"L L L L L L L L\"]\n",
        encoding="utf-8"
    )
    return path
