# src/wordef/core/index.py
"""Listing of the words resolved so far."""

from wordef.core.cache import CacheStore


class CacheIndex:
    def __init__(self, store: CacheStore):
        self.store = store
    
    def all_words(self) -> list[str]:
        return self.store.list_words()
