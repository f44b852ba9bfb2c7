import httpx
import pytest

from simplehttp import client
from simplehttp.config.settings import Settings, get_settings
from simplehttp.exceptions import HttpExecutionError, TransportNotAvailableError
from simplehttp.transport.httpx_transport import HttpxHttp
from simplehttp.transport.registry import create_http
from simplehttp.transport.requests_transport import RequestsHttp


@pytest.fixture(autouse=True)
def _fresh_default_http():
    client.reset_http()
    yield
    client.reset_http()


def test_module_functions_delegate_to_swapped_transport():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, text=f"{request.method} done")

    client.set_http(HttpxHttp(httpx.Client(transport=httpx.MockTransport(handler)), settings=Settings()))

    assert client.get("http://x/y", {"a": "1"}) == "GET done"
    assert client.post("http://x/y", '{"a":1}') == "POST done"
    assert client.post("http://x/y", params={"a": "1", "b": "2"}) == "POST done"

    assert [str(r.url) for r in seen] == ["http://x/y?a=1", "http://x/y", "http://x/y?a=1&b=2"]
    assert seen[1].headers["Content-Type"] == "application/json"


def test_module_functions_wrap_transport_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    client.set_http(HttpxHttp(httpx.Client(transport=httpx.MockTransport(handler)), settings=Settings()))

    with pytest.raises(HttpExecutionError):
        client.get("http://x/y")
    with pytest.raises(HttpExecutionError):
        client.post("http://x/y", params={"a": "1"}, encode=True)


def test_default_http_is_built_once_from_settings():
    first = client.get_http()
    assert client.get_http() is first
    assert first.timeout_seconds == get_settings().http.timeout_seconds


def test_create_http_by_name():
    settings = Settings()
    assert isinstance(create_http("httpx", settings), HttpxHttp)
    assert isinstance(create_http("Requests", settings), RequestsHttp)
    assert isinstance(create_http(settings=Settings(http={"transport": "requests"})), RequestsHttp)


def test_create_http_rejects_unknown_transport():
    with pytest.raises(TransportNotAvailableError, match="curl"):
        create_http("curl", Settings())
