"""Persistent score records kept in a plain text file."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

NAME_LIMIT = 19
DELETE_NAME_LIMIT = 49
DEFAULT_SCORE_FILE = "rezultati.txt"


@dataclass
class PlayerScore:
    """A player's name and number of wins."""

    name: str
    score: int = 0


def sort_scores(scores: Iterable[PlayerScore]) -> list[PlayerScore]:
    """Return the scores ordered from most to fewest wins."""
    return sorted(scores, key=lambda entry: entry.score, reverse=True)


def format_scores(scores: Iterable[PlayerScore]) -> str:
    """Return the ranked score table as text."""
    lines = ["\n\t=== REZULTATI ===\n"]
    for rank, entry in enumerate(sort_scores(scores), start=1):
        lines.append(f"{rank:2d}. Igrac: {entry.name:<20s} | Pobjede: {entry.score}\n")
    return "".join(lines)


def _record(name: str, score: int) -> str:
    return f"-{name} {score}\n"


class ScoreBook:
    """A score file with one ``-name score`` record per line."""

    def __init__(self, path: str | os.PathLike[str] = DEFAULT_SCORE_FILE) -> None:
        self.path = Path(path)

    def _lines(self) -> list[str]:
        with self.path.open("r", encoding="utf-8") as handle:
            return handle.readlines()

    def read_scores(self) -> list[PlayerScore]:
        """Return every well-formed record in file order; none if the file is missing."""
        try:
            lines = self._lines()
        except FileNotFoundError:
            return []
        scores = []
        for line in lines:
            if not line.startswith("-"):
                continue
            parts = line[1:].split()
            if len(parts) < 2:
                continue
            try:
                score = int(parts[1])
            except ValueError:
                continue
            scores.append(PlayerScore(parts[0][:NAME_LIMIT], score))
        return scores

    def is_name_available(self, name: str) -> bool:
        """Return False if a record already uses ``name``."""
        try:
            lines = self._lines()
        except FileNotFoundError:
            return True
        for line in lines:
            if line.startswith("-"):
                parts = line[1:].split()
                if parts and parts[0][:NAME_LIMIT] == name:
                    return False
        return True

    def append(self, scores: Iterable[PlayerScore]) -> None:
        """Append a record for each score."""
        with self.path.open("a", encoding="utf-8") as handle:
            handle.writelines(_record(entry.name, entry.score) for entry in scores)

    def add(self, name: str, score: int) -> bool:
        """Add a record unless the name is taken; return whether it was added."""
        with self.path.open("a", encoding="utf-8") as handle:
            if not self.is_name_available(name):
                return False
            handle.write(_record(name, score))
        return True

    def _rewrite(self, lines: Iterable[str]) -> None:
        fd, temp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.writelines(lines)
            os.replace(temp_name, self.path)
        except BaseException:
            if os.path.exists(temp_name):
                os.unlink(temp_name)
            raise

    def update(self, name: str, new_score: int) -> bool:
        """Replace every record whose text contains ``name``; return whether any did.

        Raises FileNotFoundError if the score file does not exist.
        """
        lines = self._lines()
        changed = False
        result = []
        for line in lines:
            if line.startswith("-") and name in line[1:]:
                result.append(_record(name, new_score))
                changed = True
            else:
                result.append(line)
        if changed:
            self._rewrite(result)
        return changed

    def delete(self, name: str) -> bool:
        """Remove every record for exactly ``name``; return whether any was removed.

        Raises FileNotFoundError if the score file does not exist.
        """
        lines = self._lines()
        kept = []
        deleted = False
        for line in lines:
            if line.startswith("-"):
                parts = line[1:].split()
                if len(parts) >= 2 and parts[0][:DELETE_NAME_LIMIT] == name:
                    try:
                        int(parts[1])
                    except ValueError:
                        pass
                    else:
                        deleted = True
                        continue
            kept.append(line)
        if deleted:
            self._rewrite(kept)
        return deleted