"""HTTP requests from scripts."""

from __future__ import annotations

from typing import Any, Optional

import httpx

from ..core.config import config
from ..util.color import colorize, console
from ..util.log import Log

log = Log.create({"service": "fetch"})

DEFAULT_TIMEOUT_SECONDS = 30


async def fetch(
    url: str,
    method: str = "GET",
    *,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    **kwargs: Any,
) -> httpx.Response:
    """Send one request and return the fully read response.

    Extra keyword arguments (``headers``, ``json``, ``content``, ``params``,
    ``timeout``, ...) go straight to ``httpx.AsyncClient.request``. In verbose
    mode the request is echoed as ``$ fetch <url>``, followed by the options
    when there are any.
    """
    if config().verbose:
        line = colorize(f"fetch {url}")
        if kwargs or method != "GET":
            console.print("$", line, {"method": method, **kwargs}, soft_wrap=True)
        else:
            console.print("$", line, soft_wrap=True)

    kwargs.setdefault("timeout", DEFAULT_TIMEOUT_SECONDS)
    log.debug("fetching", {"url": url, "method": method})
    async with httpx.AsyncClient(transport=transport, follow_redirects=True) as client:
        response = await client.request(method, url, **kwargs)
    log.debug("fetched", {"url": url, "status": response.status_code})
    return response
