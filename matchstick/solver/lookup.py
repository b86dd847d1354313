"""
Solution Lookup Module - Precomputed answers keyed by puzzle.

The lookup file is a JSON document:

    {
        "version": 1,
        "entries": {
            "5+7=2|1|1": [{"equation": "9-7=2", "moves": [...], "flipped": false}],
            ...
        }
    }

Entries are produced by running the exhaustive strategy (see
tools/precompute_lookup.py), so a hit returns exactly what the search
would. The file is loaded once, on first use, behind a lock; afterwards
lookups only read.
"""

import json
import logging
import threading
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from ..oracle import normalize_equation
from .solution import Solution

logger = logging.getLogger(__name__)

LOOKUP_VERSION = 1
DEFAULT_LOOKUP_PATH = Path("lookup.json")


class LookupFileError(Exception):
    """Raised when a lookup file cannot be read or has the wrong format."""


def make_key(equation: str, max_moves: int, allow_flip: bool) -> str:
    """
    Build the cache key for a puzzle.

    Args:
        equation: Puzzle equation (normalized here)
        max_moves: Move budget
        allow_flip: Whether flipped readings are included

    Returns:
        Key string "<equation>|<max_moves>|<0 or 1>"
    """
    return f"{normalize_equation(equation)}|{max_moves}|{int(allow_flip)}"


class SolutionLookup:
    """
    Read-mostly cache of solved puzzles backed by a JSON file.

    Attributes:
        path: Location of the lookup file (None for a purely in-memory cache)
    """

    def __init__(self, path: Optional[Union[str, Path]] = DEFAULT_LOOKUP_PATH):
        self.path = Path(path) if path is not None else None
        self._entries: Dict[str, List[Solution]] = {}
        self._loaded = False
        self._lock = threading.Lock()

    def _ensure_loaded(self) -> None:
        """Load the file on first use; every later call returns immediately."""
        if self._loaded:
            return

        with self._lock:
            if self._loaded:
                return
            if self.path is not None and self.path.exists():
                self._entries.update(self._read(self.path))
                logger.info(f"Lookup loaded: {len(self._entries)} entries from {self.path}")
            else:
                logger.debug(f"Lookup file not found: {self.path}, starting empty")
            self._loaded = True

    @staticmethod
    def _read(path: Path) -> Dict[str, List[Solution]]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            raise LookupFileError(f"Failed to read lookup file {path}: {e}") from e

        if not isinstance(data, dict) or data.get("version") != LOOKUP_VERSION:
            raise LookupFileError(f"Unsupported lookup file format: {path}")

        try:
            return {
                key: [Solution.from_dict(item) for item in items]
                for key, items in data.get("entries", {}).items()
            }
        except (KeyError, TypeError, ValueError) as e:
            raise LookupFileError(f"Malformed entry in lookup file {path}: {e}") from e

    def lookup(self, equation: str, max_moves: int, allow_flip: bool) -> Optional[List[Solution]]:
        """
        Find the precomputed solutions for a puzzle.

        Args:
            equation: Puzzle equation
            max_moves: Move budget
            allow_flip: Whether flipped readings are included

        Returns:
            Copy of the cached solution list, or None if not cached
        """
        self._ensure_loaded()
        solutions = self._entries.get(make_key(equation, max_moves, allow_flip))
        if solutions is None:
            return None
        return list(solutions)

    def add(self, equation: str, max_moves: int, allow_flip: bool,
            solutions: Iterable[Solution]) -> None:
        """
        Store the solutions for a puzzle.

        Only meant for building a lookup file; do not call while other
        threads are reading.
        """
        self._ensure_loaded()
        self._entries[make_key(equation, max_moves, allow_flip)] = list(solutions)

    def save(self, path: Optional[Union[str, Path]] = None) -> Path:
        """
        Write all entries to disk.

        Args:
            path: Target file (defaults to self.path)

        Returns:
            Path written
        """
        self._ensure_loaded()
        target = Path(path) if path is not None else self.path
        if target is None:
            raise ValueError("No path given for an in-memory lookup")

        data = {
            "version": LOOKUP_VERSION,
            "entries": {
                key: [solution.to_dict() for solution in solutions]
                for key, solutions in sorted(self._entries.items())
            },
        }
        target.parent.mkdir(parents=True, exist_ok=True)
        with open(target, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
        logger.info(f"Lookup saved: {len(self._entries)} entries to {target}")
        return target

    def __len__(self) -> int:
        self._ensure_loaded()
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        self._ensure_loaded()
        return key in self._entries
