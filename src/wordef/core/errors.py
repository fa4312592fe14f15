# src/wordef/core/errors.py
"""
Errors raised by the resolution subsystem.

Every error names the word and the stage that failed, so a caller can
tell "not in the dictionary" apart from "the lookup broke".
"""


class WordefError(Exception):
    stage = "lookup"

    def __init__(self, word: str, message: str):
        self.word = word
        self.message = message
        super().__init__(f"{self.stage} failed for '{word}': {message}")


class NotFound(WordefError):
    """No cache record for the word. Internal to the resolver."""
    stage = "cache"


class AlreadyExists(WordefError):
    """A record for the word is already stored; it is never overwritten."""
    stage = "cache"


class IOFailure(WordefError):
    stage = "cache"


class NetworkFailure(WordefError):
    stage = "fetch"


class ReadFailure(WordefError):
    stage = "fetch"


class ParseFailure(WordefError):
    def __init__(self, word: str, message: str, stage: str = "parse"):
        self.stage = stage
        super().__init__(word, message)
