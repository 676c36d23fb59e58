"""Score persistence adapters.

Two collaborators live outside the simulation:

* a ``HighScoreStore`` keeping the single-player best tally, which must never
    decrease;
* a ``ScoreSink`` receiving finished single-player scores for a leaderboard.

The JSON store follows the load-with-default / save-with-stable-formatting
approach: a missing or malformed file reads as no high score.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Protocol

from grid_tron.constants import HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore(Protocol):
    def load(self) -> int: ...

    def save(self, score: int) -> None: ...


class ScoreSink(Protocol):
    def submit_score(self, user_id: str, display_name: str, score: int) -> None: ...


class InMemoryHighScoreStore:
    """Process-local high score."""

    def __init__(self, score: int = 0) -> None:
        self._score = score

    def load(self) -> int:
        return self._score

    def save(self, score: int) -> None:
        self._score = max(self._score, score)


def load_json(path: Path, default: Any) -> Any:
    """Load JSON data, returning ``default`` when missing or malformed."""
    if not path.exists():
        return default
    try:
        with path.open("r", encoding="utf-8") as handle:
            return json.load(handle)
    except (json.JSONDecodeError, OSError):
        logger.warning("Could not read %s, using defaults", path)
        return default


def save_json(path: Path, payload: Any) -> None:
    """Save JSON data with deterministic formatting."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, sort_keys=True)


class JsonHighScoreStore:
    """High score kept under a fixed key in a JSON file.

    Other keys in the file are preserved. Saving a lower score is a no-op.
    """

    def __init__(self, path: Path | str, key: str = HIGH_SCORE_KEY) -> None:
        self.path = Path(path)
        self.key = key

    def _read(self) -> dict:
        data = load_json(self.path, {})
        return data if isinstance(data, dict) else {}

    def load(self) -> int:
        try:
            return max(0, int(self._read().get(self.key, 0)))
        except (TypeError, ValueError):
            return 0

    def save(self, score: int) -> None:
        if score <= self.load():
            return
        data = self._read()
        data[self.key] = score
        save_json(self.path, data)
        logger.info("New high score %d saved to %s", score, self.path)


@dataclass(frozen=True)
class SubmittedScore:
    user_id: str
    display_name: str
    score: int


@dataclass
class InMemoryScoreSink:
    """Records submissions; stands in for the leaderboard service."""

    submissions: List[SubmittedScore] = field(default_factory=list)

    def submit_score(self, user_id: str, display_name: str, score: int) -> None:
        logger.info("Submitting score for %s (%s): %d", display_name, user_id, score)
        self.submissions.append(SubmittedScore(user_id, display_name, score))
