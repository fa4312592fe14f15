# src/wordef/core/entry.py
"""
WordEntry - the parsed dictionary payload for one headword.

The remote source (and the cache, which stores its bytes verbatim)
returns a JSON array of entries, e.g.

    [{"word": "serendipity", "phonetic": "/ˌsɛɹ.ənˈdɪp.ɪ.ti/",
      "meanings": [{"partOfSpeech": "noun", "definitions": [...]}]}]
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from wordef.core.errors import ParseFailure


class Phonetic(BaseModel):
    text: str = ""
    audio: str | None = None


class Definition(BaseModel):
    definition: str
    example: str | None = None
    synonyms: list[Any] = Field(default_factory=list)
    antonyms: list[Any] = Field(default_factory=list)


class Meaning(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    part_of_speech: str = Field(alias="partOfSpeech")
    definitions: list[Definition] = Field(default_factory=list)


class WordEntry(BaseModel):
    word: str
    phonetic: str = ""
    phonetics: list[Phonetic] = Field(default_factory=list)
    origin: str = ""
    meanings: list[Meaning] = Field(default_factory=list)

    @property
    def has_definitions(self) -> bool:
        """An entry without meanings parsed fine but is not a usable result."""
        return bool(self.meanings)


_ENTRIES = TypeAdapter(list[WordEntry])


def parse_entries(raw: bytes, word: str, stage: str = "parse") -> list[WordEntry]:
    """
    Decode a raw payload into its entries.

    Raises ParseFailure for invalid JSON, a body that is not an array
    (the remote answers unknown words with an error object), an empty
    array, or entries of the wrong shape.
    """
    try:
        entries = _ENTRIES.validate_json(raw)
    except ValidationError as e:
        raise ParseFailure(word, f"malformed payload ({e.error_count()} errors): {e.errors()[0]['msg']}", stage) from e
    
    if not entries:
        raise ParseFailure(word, "payload contains no entries", stage)
    
    return entries
