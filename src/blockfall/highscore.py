"""JSON file persistence for the best score, kept outside the engine."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Union

LOGGER = logging.getLogger(__name__)

ENV_VAR = "BLOCKFALL_HIGHSCORE"
DEFAULT_FILENAME = ".blockfall_highscore.json"


def default_path() -> Path:
    override = os.environ.get(ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / DEFAULT_FILENAME


class HighScoreStore:
    """Read and update the persisted high score."""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path) if path is not None else default_path()

    def load(self) -> int:
        """Return the stored high score, ``0`` if nothing was saved yet.

        Raises:
            ValueError: If the file exists but does not hold a score.
        """

        if not self.path.exists():
            return 0
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            return int(data["high_score"])
        except (ValueError, KeyError, TypeError) as exc:
            LOGGER.error("Unreadable high score file %s", self.path)
            raise ValueError(f"Invalid high score file: {self.path}") from exc

    def submit(self, score: int) -> bool:
        """Persist ``score`` if it beats the stored one; return whether it did."""

        if score <= self.load():
            return False
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps({"high_score": score}), encoding="utf-8")
        LOGGER.info("New high score %d saved to %s", score, self.path)
        return True
