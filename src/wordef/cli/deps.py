"""
Wiring of settings into the core components.
"""

from wordef.core.cache import CacheStore
from wordef.core.config import Settings
from wordef.core.dictionary import DictionaryClient
from wordef.core.index import CacheIndex
from wordef.core.resolver import WordResolver


def get_settings() -> Settings:
    return Settings()


def get_store(settings: Settings) -> CacheStore:
    return CacheStore.open(settings.cache_dir)


def get_client(settings: Settings) -> DictionaryClient:
    return DictionaryClient(base_url=settings.api_url)


def get_resolver(settings: Settings) -> WordResolver:
    return WordResolver(get_store(settings), get_client(settings))


def get_index(settings: Settings) -> CacheIndex:
    return CacheIndex(get_store(settings))
