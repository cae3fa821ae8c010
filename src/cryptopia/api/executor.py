"""aiohttp-backed request executor."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import aiohttp

from .errors import (
    HttpStatusError,
    RemoteApiError,
    ResponseDecodeError,
    TransportError,
    map_error_message,
)
from .protocol import RequestDescriptor

logger = logging.getLogger(__name__)


def _error_code(value: Any) -> int | str:
    """Integral codes as int, anything else verbatim as text."""
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and value.strip().lstrip("-").isdigit():
        return int(value)
    return str(value)


class AiohttpExecutor:
    """Performs one HTTP call per request and normalizes the outcome."""

    def __init__(self, *, proxy_url: str | None = None):
        self.proxy_url = proxy_url
        self.session: aiohttp.ClientSession | None = None

    async def _ensure_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            connector = aiohttp.TCPConnector()
            self.session = aiohttp.ClientSession(connector=connector)
        return self.session

    async def execute(self, request: RequestDescriptor) -> Any:
        """Issue the request and decode the response.

        Args:
            request: Fully built request description

        Returns:
            Decoded JSON body

        Raises:
            TransportError: Connection failure or timeout
            HttpStatusError: Status outside [200, 300)
            ResponseDecodeError: Body is not valid or expected JSON
            RemoteApiError: Body carries an ``error_code``
        """
        caller = "AiohttpExecutor.execute()"
        description = request.description
        session = await self._ensure_session()
        logger.debug("Sending %s", description)

        try:
            async with session.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                params=request.query,
                data=request.body,
                timeout=aiohttp.ClientTimeout(total=request.timeout),
                proxy=self.proxy_url,
            ) as resp:
                status = resp.status
                charset = resp.charset or "utf-8"
                raw = await resp.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(
                f"{caller} failed {description}: {exc!r}",
                description=description,
                cause=exc,
            ) from exc

        logger.debug("HTTP %s from %s", status, request.url)

        if status < 200 or status >= 300:
            raise HttpStatusError(
                status,
                f"{caller} HTTP status code {status} returned from {description}",
                description=description,
            )

        try:
            text = raw.decode(charset)
            data = json.loads(text)
        except (UnicodeDecodeError, LookupError, ValueError) as exc:
            text = raw.decode("utf-8", errors="replace")
            if request.form:
                message = f"Could not parse response from server: {text}"
            else:
                message = f"{caller} could not parse response from {description}\nResponse: {text}"
            raise ResponseDecodeError(message, body=text, description=description, cause=exc) from exc

        if not request.form and not isinstance(data, dict):
            raise ResponseDecodeError(
                f"{caller} could not parse response from {description}\nResponse: {text}",
                body=text,
                description=description,
            )

        if isinstance(data, dict) and "error_code" in data:
            code = _error_code(data["error_code"])
            raise RemoteApiError(code, map_error_message(code), description=description)

        return data

    async def close(self) -> None:
        """Close the HTTP session."""
        if self.session:
            await self.session.close()
            self.session = None

    async def __aenter__(self) -> "AiohttpExecutor":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
