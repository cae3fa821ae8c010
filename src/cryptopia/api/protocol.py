"""Request types and the executor protocol."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

DEFAULT_HOSTNAME = "www.cryptopia.co.nz"
DEFAULT_TIMEOUT_MS = 20000
DEFAULT_USER_AGENT = "cryptopia-python-api-client"


@dataclass(frozen=True, slots=True)
class Credentials:
    """API identity. The secret is the base64-encoded signing key."""

    key: str | None = None
    secret: str | None = field(default=None, repr=False)

    @property
    def complete(self) -> bool:
        return bool(self.key) and bool(self.secret)


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable connection settings shared by the signer and executor."""

    hostname: str = DEFAULT_HOSTNAME
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    user_agent: str = DEFAULT_USER_AGENT
    public_api_path: str = "api"
    private_api_path: str = "api"

    @property
    def server(self) -> str:
        return f"https://{self.hostname}"

    @property
    def timeout(self) -> float:
        """Timeout in seconds."""
        return self.timeout_ms / 1000

    def public_url(self, method: str) -> str:
        return f"{self.server}/{self.public_api_path}/{method}"

    def private_url(self, method: str) -> str:
        return f"{self.server}/{self.private_api_path}/{method}"


@dataclass(frozen=True, slots=True)
class SignaturePayload:
    """Authentication material for one private request."""

    url: str
    nonce: int
    digest: str
    signature: str
    header: str
    body: str

    @property
    def content_length(self) -> int:
        return len(self.body.encode("utf-8"))


@dataclass(frozen=True, slots=True)
class RequestDescriptor:
    """One outbound HTTP call.

    ``form`` marks a private call whose body is sent as a raw JSON string and
    whose response is decoded by hand; public calls send ``query`` and expect a
    JSON object back.
    """

    url: str
    method: str
    api_method: str
    params: Mapping[str, Any]
    timeout: float
    headers: Mapping[str, str] = field(default_factory=dict)
    body: str | None = None
    query: Mapping[str, str] | None = None
    form: bool = False

    @property
    def description(self) -> str:
        params = json.dumps(dict(self.params), default=str)
        if self.form:
            return f"{self.method} request to url {self.url} with method {self.api_method} and params {params}"
        return f"{self.method} request to url {self.url} with parameters {params}"


class RequestExecutor(Protocol):
    """Anything that can perform a described request."""

    async def execute(self, request: RequestDescriptor) -> Any:
        """Perform the request once.

        Args:
            request: Fully built request description

        Returns:
            Decoded JSON body

        Raises:
            CryptopiaError: On any transport, HTTP or application failure
        """
        ...

    async def close(self) -> None:
        """Release transport resources."""
        ...
