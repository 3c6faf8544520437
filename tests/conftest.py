from __future__ import annotations

import sys
from pathlib import Path

# Add src directory to path immediately on import - MUST be before any other imports
_src_dir = Path(__file__).resolve().parents[1] / "src"
_src_str = str(_src_dir)
if _src_str not in sys.path:
    sys.path.insert(0, _src_str)

import pytest

from interview_eval.config.lexicon import CueLexicon
from interview_eval.config.loader import ConfigLoader, get_config
from interview_eval.models.evaluation import SentimentResult
from interview_eval.pipeline.evaluator import AnswerEvaluator
from interview_eval.scoring.completeness import no_bonus


class StubProvider:
    """Deterministic lexical provider for tests."""

    def __init__(self, verbs: list[str] | None = None, sentiment: SentimentResult | None = None):
        self.verbs = verbs if verbs is not None else ["have"]
        self.sentiment = sentiment or SentimentResult(score=2, comparative=0.0, positive=["strong"])
        self.calls = 0

    def analyze(self, text: str) -> SentimentResult:
        self.calls += 1
        return self.sentiment

    def verbs_of(self, text: str) -> list[str]:
        return list(self.verbs)


class FailingProvider:
    """Provider whose every call raises."""

    def analyze(self, text: str) -> SentimentResult:
        raise RuntimeError("sentiment backend unavailable")

    def verbs_of(self, text: str) -> list[str]:
        raise RuntimeError("tagger corpus missing")


@pytest.fixture
def config() -> ConfigLoader:
    return get_config()


@pytest.fixture
def lexicon(config: ConfigLoader) -> CueLexicon:
    return config.lexicon()


@pytest.fixture
def stub_provider() -> StubProvider:
    return StubProvider()


@pytest.fixture
def make_provider():
    """Factory for stub providers with custom verbs or sentiment."""
    return StubProvider


@pytest.fixture
def failing_provider() -> FailingProvider:
    return FailingProvider()


@pytest.fixture
def evaluator(config: ConfigLoader, stub_provider: StubProvider) -> AnswerEvaluator:
    """Evaluator with a stub provider and no completeness bonus."""
    return AnswerEvaluator.from_config(config, provider=stub_provider, bonus_source=no_bonus)


def pytest_configure(config: pytest.Config) -> None:
    """Ensure src directory is on sys.path so tests can import modules."""
    src_str = str(Path(__file__).resolve().parents[1] / "src")
    if src_str not in sys.path:
        sys.path.insert(0, src_str)
