"""Request signing for private Cryptopia endpoints."""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import json
import time
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

from .errors import InvalidCredentialsError, InvalidParameterError, MissingCredentialsError
from .protocol import ClientConfig, Credentials, SignaturePayload

# Characters encodeURIComponent leaves alone on top of quote()'s own set.
_URI_COMPONENT_SAFE = "!*'()"


def canonical_json(params: Mapping[str, Any]) -> str:
    """Serialize params compactly, preserving insertion order.

    Raises:
        InvalidParameterError: If a value is not JSON serializable
    """
    try:
        return json.dumps(dict(params), separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise InvalidParameterError(f"params are not JSON serializable: {exc}", cause=exc) from exc


def content_digest(body: str) -> str:
    """Base64 MD5 of the serialized parameters."""
    return base64.b64encode(hashlib.md5(body.encode("utf-8")).digest()).decode()


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def ensure_params(params: Any, caller: str) -> Mapping[str, Any]:
    """Reject anything that is not a key-value mapping."""
    if not isinstance(params, Mapping):
        raise InvalidParameterError(
            f"{caller} second parameter {params!r} must be a mapping. "
            "If no params then pass an empty dict {}"
        )
    return params


class RequestSigner:
    """Builds the ``Authorization`` header for private requests."""

    def __init__(self, credentials: Credentials, config: ClientConfig):
        self.credentials = credentials
        self.config = config

    def _secret_bytes(self) -> bytes:
        try:
            return base64.b64decode(self.credentials.secret)
        except (binascii.Error, ValueError) as exc:
            raise InvalidCredentialsError("API secret must be base64 encoded", cause=exc) from exc

    def sign(self, method: str, params: Any, *, nonce: int | None = None) -> SignaturePayload:
        """Sign a private request.

        Args:
            method: API method path segment (e.g. 'GetBalance')
            params: Request parameters
            nonce: Override for the Unix-seconds nonce

        Returns:
            SignaturePayload with the header value and serialized body

        Raises:
            MissingCredentialsError: If key or secret is absent
            InvalidParameterError: If params is not a mapping
            InvalidCredentialsError: If the secret is not valid base64
        """
        caller = "RequestSigner.sign()"
        if not self.credentials.complete:
            raise MissingCredentialsError(f"{caller} must provide key and secret to make this API request.")
        params = ensure_params(params, caller)

        body = canonical_json(params)
        digest = content_digest(body)
        if nonce is None:
            nonce = int(time.time())
        url = self.config.private_url(method)

        key = self.credentials.key
        source = f"{key}POST{encode_uri_component(url).lower()}{nonce}{digest}"
        signature = base64.b64encode(
            hmac.new(self._secret_bytes(), source.encode("utf-8"), hashlib.sha256).digest()
        ).decode()

        return SignaturePayload(
            url=url,
            nonce=nonce,
            digest=digest,
            signature=signature,
            header=f"amx {key}:{signature}:{nonce}",
            body=body,
        )

    def headers(self, payload: SignaturePayload) -> dict[str, str]:
        return {
            "Authorization": payload.header,
            "Content-Type": "application/json; charset=utf-8",
            "Content-Length": str(payload.content_length),
            "User-Agent": self.config.user_agent,
        }
