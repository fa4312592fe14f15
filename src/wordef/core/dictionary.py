# src/wordef/core/dictionary.py
"""
HTTP client for the remote dictionary.
"""

from logging import getLogger
from urllib.parse import quote

import httpx

from wordef.core.errors import NetworkFailure, ReadFailure

logger = getLogger(__name__)

BASE_URL = "https://api.dictionaryapi.dev/api/v2/entries/en"


class DictionaryClient:
    def __init__(self, base_url: str = BASE_URL, http: httpx.Client | None = None):
        self.base_url = base_url.rstrip("/")
        self._owns_http = http is None
        self.http = http or httpx.Client()
    
    def url_for(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"
    
    def fetch(self, word: str) -> bytes:
        """
        GET the raw payload for a word.

        The status code is not interpreted: an error body from the service
        is returned like any other and rejected later by the parser.
        """
        url = self.url_for(word)
        logger.debug("GET %s", url)
        
        try:
            with self.http.stream("GET", url) as r:
                try:
                    return r.read()
                except httpx.HTTPError as e:
                    raise ReadFailure(word, f"incomplete response body: {e}") from e
        except httpx.HTTPError as e:
            raise NetworkFailure(word, f"request to {url} failed: {e}") from e
    
    def close(self) -> None:
        if self._owns_http:
            self.http.close()
    
    def __enter__(self) -> "DictionaryClient":
        return self
    
    def __exit__(self, *exc) -> None:
        self.close()
