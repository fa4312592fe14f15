"""Tests for the dictionary HTTP client, against httpx.MockTransport."""

import httpx
import pytest

from wordef.core.dictionary import BASE_URL, DictionaryClient
from wordef.core.errors import NetworkFailure, ReadFailure


class BrokenStream(httpx.SyncByteStream):
    def __iter__(self):
        yield b'[{"word": '
        raise httpx.ReadError("connection reset")


def make_client(handler) -> DictionaryClient:
    return DictionaryClient(http=httpx.Client(transport=httpx.MockTransport(handler)))


def test_fetch_returns_body():
    seen = []
    
    def handler(request):
        seen.append(request)
        return httpx.Response(200, content=b'[{"word": "cat"}]')
    
    with make_client(handler) as client:
        assert client.fetch("cat") == b'[{"word": "cat"}]'
    
    assert len(seen) == 1
    assert seen[0].method == "GET"
    assert str(seen[0].url) == f"{BASE_URL}/cat"


def test_fetch_returns_error_body_as_is():
    body = b'{"title": "No Definitions Found"}'
    client = make_client(lambda request: httpx.Response(404, content=body))
    
    assert client.fetch("xyzzynotaword") == body


def test_word_is_quoted():
    seen = []
    
    def handler(request):
        seen.append(request)
        return httpx.Response(200, content=b"[]")
    
    client = DictionaryClient(
        base_url="http://dict.test/entries/",
        http=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    client.fetch("ice cream")
    
    assert seen[0].url.raw_path == b"/entries/ice%20cream"


def test_transport_error_is_network_failure():
    def handler(request):
        raise httpx.ConnectError("no route to host")
    
    with pytest.raises(NetworkFailure) as exc:
        make_client(handler).fetch("cat")
    
    assert exc.value.word == "cat"
    assert exc.value.stage == "fetch"
    assert isinstance(exc.value.__cause__, httpx.ConnectError)


def test_broken_body_is_read_failure():
    client = make_client(lambda request: httpx.Response(200, stream=BrokenStream()))
    
    with pytest.raises(ReadFailure):
        client.fetch("cat")


def test_close_leaves_injected_client_open():
    http = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
    
    with DictionaryClient(http=http):
        pass
    
    assert not http.is_closed
    http.close()
