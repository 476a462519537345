# scores.py
from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Union
import json
import logging

logger = logging.getLogger(__name__)

NUMBER_HIGH_SCORES = 10
MAX_NAME_LENGTH = 10
DEFAULT_PLAYER = "default"

FORMAT = "%Y/%m/%d %H:%M:%S"
DISPLAY_FORMAT = "%Y/%m/%d"

PathLike = Union[str, Path]


def _now() -> datetime:
    return datetime.now(timezone.utc).replace(microsecond=0)


@dataclass
class Score:
    player: str = DEFAULT_PLAYER
    score: int = 0
    timestamp: datetime = field(default_factory=_now)

    def __post_init__(self):
        self.player = self.player[:MAX_NAME_LENGTH]

    def to_dict(self) -> dict:
        return {
            "player": self.player,
            "score": self.score,
            "timestamp": self.timestamp.strftime(FORMAT),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Score":
        timestamp = datetime.strptime(data["timestamp"], FORMAT).replace(tzinfo=timezone.utc)
        return cls(player=str(data["player"]), score=int(data["score"]), timestamp=timestamp)


def parse_scores(path: PathLike) -> List[Score]:
    """
    Read the high-score table. Never fails: a missing or unreadable file
    gives the default table. Always returns NUMBER_HIGH_SCORES entries.
    """
    scores: List[Score] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            scores = [Score.from_dict(item) for item in json.load(f)]
    except FileNotFoundError:
        logger.info("No score file at %s, starting a fresh table", path)
    except (OSError, ValueError, TypeError, KeyError) as e:
        logger.warning("Ignoring unreadable score file %s: %s", path, e)
        scores = []

    scores.sort(key=lambda s: s.score, reverse=True)
    del scores[NUMBER_HIGH_SCORES:]
    scores.extend(Score() for _ in range(NUMBER_HIGH_SCORES - len(scores)))
    return scores


def check_score(score: int, scores: List[Score]) -> Optional[int]:
    """
    Binary search the descending table for the first entry lower than score.
    Returns that rank, or None if the score does not make the table.
    """
    low, high = 0, len(scores) - 1
    while low <= high:
        middle = (low + high) // 2
        if scores[middle].score >= score:
            low = middle + 1
        else:
            high = middle - 1
    if low < len(scores):
        return low
    return None


def update_scores(rank: int, score: Score, scores: List[Score]) -> None:
    """Drop the lowest entry and insert score at rank."""
    if 0 <= rank < len(scores):
        scores.pop()
        scores.insert(rank, score)


def write_scores(path: PathLike, scores: List[Score]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump([s.to_dict() for s in scores], f, indent=2)


def record_score(scores: List[Score], player: str, score: int, path: PathLike) -> Optional[int]:
    """Insert a finished game's score if it ranks, and persist the table."""
    rank = check_score(score, scores)
    if rank is None:
        return None
    update_scores(rank, Score(player=player, score=score), scores)
    write_scores(path, scores)
    logger.info("High score %d for %s at rank %d", score, player, rank + 1)
    return rank


def format_scores(scores: List[Score]) -> List[str]:
    return [
        f"{rank + 1:2}. {s.score:3} {s.player:{MAX_NAME_LENGTH}} {s.timestamp.strftime(DISPLAY_FORMAT)}"
        for rank, s in enumerate(scores[:NUMBER_HIGH_SCORES])
    ]


class NameEntry:
    """
    Name typed in by the player after a ranking round, committed to the
    table once confirmed.
    """

    def __init__(self, score: int, rank: int):
        self.score = score
        self.rank = rank
        self.name = ""

    def type_char(self, char: str) -> bool:
        """Append a letter, digit, "-" or "_"; anything else, or a full buffer, is ignored."""
        if len(char) != 1 or not (char.isalnum() or char in "-_"):
            return False
        if len(self.name) >= MAX_NAME_LENGTH:
            return False
        self.name += char
        return True

    def backspace(self) -> None:
        self.name = self.name[:-1]

    def commit(self, scores: List[Score], path: PathLike, default: str = DEFAULT_PLAYER) -> Optional[int]:
        return record_score(scores, self.name or default, self.score, path)
