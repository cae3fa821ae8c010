"""Base client with the public and private request pipelines."""

from __future__ import annotations

import logging
from typing import Any

from .errors import PublicApiError
from .executor import AiohttpExecutor
from .protocol import ClientConfig, Credentials, RequestDescriptor, RequestExecutor
from .signer import RequestSigner, ensure_params

logger = logging.getLogger(__name__)


class ProxyConfig:
    """HTTP proxy configuration."""

    def __init__(self, url: str | None = None, username: str | None = None, password: str | None = None):
        self.url = url
        self.username = username
        self.password = password

    @property
    def proxy_url(self) -> str | None:
        if not self.url:
            return None
        if self.username and self.password:
            protocol = self.url.split("://")[0] if "://" in self.url else "http"
            rest = self.url.split("://")[1] if "://" in self.url else self.url
            return f"{protocol}://{self.username}:{self.password}@{rest}"
        return self.url


class BaseApiClient:
    """Signs and executes requests against one exchange host."""

    def __init__(
        self,
        credentials: Credentials,
        config: ClientConfig,
        *,
        proxy: ProxyConfig | None = None,
        executor: RequestExecutor | None = None,
    ):
        """Initialize the client.

        Args:
            credentials: API key and base64 secret (may be empty for public use)
            config: Host, timeout and user agent
            proxy: Proxy configuration
            executor: Transport override; defaults to an aiohttp executor
        """
        self.credentials = credentials
        self.config = config
        self.proxy = proxy or ProxyConfig()
        self.signer = RequestSigner(credentials, config)
        self.executor = executor or AiohttpExecutor(proxy_url=self.proxy.proxy_url)

    async def private_request(self, method: str, params: Any) -> Any:
        """Signed POST to a private endpoint.

        Credentials and params are checked before anything is sent.
        """
        payload = self.signer.sign(method, params)
        request = RequestDescriptor(
            url=payload.url,
            method="POST",
            api_method=method,
            params=params,
            timeout=self.config.timeout,
            headers=self.signer.headers(payload),
            body=payload.body,
            form=True,
        )
        return await self.executor.execute(request)

    async def public_request(self, method: str, params: Any) -> Any:
        """GET a public endpoint and unwrap its ``{Error, Data}`` envelope."""
        params = ensure_params(params, "BaseApiClient.public_request()")
        request = RequestDescriptor(
            url=self.config.public_url(method),
            method="GET",
            api_method=method,
            params=params,
            timeout=self.config.timeout,
            headers={"User-Agent": self.config.user_agent},
            query={key: str(value) for key, value in params.items()},
        )
        resp = await self.executor.execute(request)
        if resp.get("Error"):
            raise PublicApiError(str(resp["Error"]), description=request.description)
        return resp.get("Data")

    async def close(self) -> None:
        """Close connections."""
        await self.executor.close()

    async def __aenter__(self) -> "BaseApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()
