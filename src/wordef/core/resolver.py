# src/wordef/core/resolver.py
"""
WordResolver - cache first, then the remote dictionary.

    resolve("Serendipity")
      -> key "serendipity"
      -> cached record?  parse stored bytes (corrupt record is an error, no refetch)
      -> NotFound: fetch, parse, save (save failures are only logged)
      -> first entry
"""

from logging import getLogger

from wordef.core.cache import CacheStore
from wordef.core.dictionary import DictionaryClient
from wordef.core.entry import WordEntry, parse_entries
from wordef.core.errors import AlreadyExists, IOFailure, NotFound

logger = getLogger(__name__)


def normalize_word(word: str) -> str:
    """Cache key and query form of a word: trimmed, lower-case."""
    key = word.strip().lower()
    if not key:
        raise ValueError("Word must not be empty")
    return key


class WordResolver:
    def __init__(self, store: CacheStore, client: DictionaryClient):
        self.store = store
        self.client = client
    
    def resolve(self, word: str) -> WordEntry:
        key = normalize_word(word)
        
        try:
            raw = self.store.read(key)
        except NotFound:
            logger.debug("cache miss: %s", key)
        else:
            logger.debug("cache hit: %s", key)
            return parse_entries(raw, key, stage="cache")[0]
        
        raw = self.client.fetch(key)
        entries = parse_entries(raw, key, stage="fetch")
        
        try:
            self.store.write(key, raw)
        except (AlreadyExists, IOFailure) as e:
            logger.warning("could not cache '%s': %s", key, e)
        
        return entries[0]
