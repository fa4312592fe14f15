# src/wordef/core/cache.py
"""
CacheStore - one JSON file per resolved word.

Records are write-once: the raw payload of the first successful fetch is
kept forever, a second write for the same word is rejected.

Words that cannot be a file name in the cache directory (empty, leading
".", containing a path separator) are never stored: `has` is False,
`read` is a miss and `write` fails with IOFailure.
"""

import os
from logging import getLogger
from pathlib import Path

from wordef.core.errors import AlreadyExists, IOFailure, NotFound

logger = getLogger(__name__)

SUFFIX = ".json"


def is_storable(word: str) -> bool:
    return bool(word) and not word.startswith(".") and "/" not in word and os.sep not in word


class CacheStore:
    """Stores raw dictionary payloads under a directory."""
    
    def __init__(self, root: Path):
        self.root = Path(root)
    
    @classmethod
    def open(cls, root: Path) -> "CacheStore":
        """Create the cache directory if needed and return a store for it."""
        root = Path(root)
        try:
            root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise IOFailure(str(root), f"cannot create cache directory: {e}") from e
        return cls(root)
    
    def _path(self, word: str) -> Path:
        return self.root / f"{word}{SUFFIX}"
    
    def has(self, word: str) -> bool:
        return is_storable(word) and self._path(word).is_file()
    
    def read(self, word: str) -> bytes:
        if not is_storable(word):
            raise NotFound(word, "word cannot be cached")
        
        path = self._path(word)
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFound(word, "no cached record") from e
        except OSError as e:
            raise IOFailure(word, f"cannot read {path}: {e}") from e
    
    def write(self, word: str, raw: bytes) -> None:
        if not is_storable(word):
            raise IOFailure(word, "word cannot be used as a cache file name")
        
        path = self._path(word)
        try:
            f = path.open("xb")
        except FileExistsError as e:
            raise AlreadyExists(word, "record already saved") from e
        except OSError as e:
            raise IOFailure(word, f"cannot create {path}: {e}") from e
        
        try:
            with f:
                f.write(raw)
        except OSError as e:
            # Never leave a truncated record behind
            path.unlink(missing_ok=True)
            raise IOFailure(word, f"cannot write {path}: {e}") from e
        
        logger.debug("cached %s (%d bytes)", word, len(raw))
    
    def list_words(self) -> list[str]:
        """
        Words with a record, in directory order.

        Only top-level *.json files named after a storable word count;
        callers sort if they need to.
        """
        try:
            words = [
                entry.name[: -len(SUFFIX)]
                for entry in self.root.iterdir()
                if entry.name.endswith(SUFFIX) and entry.is_file()
            ]
        except OSError as e:
            raise IOFailure(str(self.root), f"cannot list cache directory: {e}") from e
        
        return [word for word in words if is_storable(word)]
