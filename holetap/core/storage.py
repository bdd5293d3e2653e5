from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional, Protocol

import yaml

log = logging.getLogger(__name__)

# resolves inside a source checkout; launchers pass --best-file
DEFAULT_PATH = Path(__file__).resolve().parents[2] / "runtime" / "best_score.yaml"


class BestScore(Protocol):
    def load_best(self) -> int:
        ...

    def save_best(self, score: int) -> None:
        ...


class BestScoreStore:
    """
    Keeps the single best score in a small YAML file:

        best: 420

    A missing or unreadable file counts as 0. Write failures are logged and
    dropped so that ending a round never fails.
    """

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path is not None else DEFAULT_PATH

    def load_best(self) -> int:
        if not self.path.exists():
            return 0
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            best = int(data.get("best", 0))
        except (OSError, yaml.YAMLError, AttributeError, TypeError, ValueError) as exc:
            log.warning("Ignoring unreadable best score file %s: %s", self.path, exc)
            return 0
        return max(0, best)

    def save_best(self, score: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump({"best": int(score)}, f)
        except OSError as exc:
            log.error("Could not save best score to %s: %s", self.path, exc)


class MemoryBestScore:
    """In-process store for tests and throwaway sessions."""

    def __init__(self, best: int = 0):
        self.best = best
        self.saves = 0

    def load_best(self) -> int:
        return self.best

    def save_best(self, score: int) -> None:
        self.best = score
        self.saves += 1
