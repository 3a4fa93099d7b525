import json

import httpx
import pytest

from scriptsh.core.config import ShellConfig
from scriptsh.web.fetch import fetch


def echo_transport(seen: list) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = json.loads(request.content) if request.content else None
        return httpx.Response(200, json={"method": request.method, "body": body})

    return httpx.MockTransport(handler)


@pytest.mark.anyio
async def test_fetch_returns_response(capsys) -> None:  # type: ignore[no-untyped-def]
    seen: list = []
    response = await fetch("https://example.test/status", transport=echo_transport(seen))

    assert response.status_code == 200
    assert response.json() == {"method": "GET", "body": None}
    assert str(seen[0].url) == "https://example.test/status"
    assert capsys.readouterr().out == "$ fetch https://example.test/status\n"


@pytest.mark.anyio
async def test_fetch_passes_request_options(capsys) -> None:  # type: ignore[no-untyped-def]
    seen: list = []
    response = await fetch(
        "https://example.test/items",
        "POST",
        json={"name": "x"},
        headers={"X-Token": "t"},
        transport=echo_transport(seen),
    )

    assert response.json() == {"method": "POST", "body": {"name": "x"}}
    assert seen[0].headers["X-Token"] == "t"
    out = capsys.readouterr().out
    assert out.startswith("$ fetch https://example.test/items")
    assert "POST" in out


@pytest.mark.anyio
async def test_fetch_is_silent_when_not_verbose(capsys) -> None:  # type: ignore[no-untyped-def]
    ShellConfig.default().verbose = False

    await fetch("https://example.test/", transport=echo_transport([]))

    assert capsys.readouterr().out == ""
