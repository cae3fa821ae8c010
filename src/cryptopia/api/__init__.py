"""Cryptopia HTTP API: signing, execution and endpoint client."""

from .protocol import ClientConfig, Credentials, RequestDescriptor, RequestExecutor, SignaturePayload
from .errors import (
    ERROR_CODES,
    CryptopiaError,
    HttpStatusError,
    InvalidCredentialsError,
    InvalidParameterError,
    MissingCredentialsError,
    PublicApiError,
    RemoteApiError,
    ResponseDecodeError,
    TransportError,
    map_error_message,
)
from .signer import RequestSigner, canonical_json, content_digest
from .executor import AiohttpExecutor
from .base import BaseApiClient, ProxyConfig
from .client import CryptopiaClient
from .factory import create_client, create_client_from_settings

__all__ = [
    "ClientConfig",
    "Credentials",
    "RequestDescriptor",
    "RequestExecutor",
    "SignaturePayload",
    "ERROR_CODES",
    "CryptopiaError",
    "HttpStatusError",
    "InvalidCredentialsError",
    "InvalidParameterError",
    "MissingCredentialsError",
    "PublicApiError",
    "RemoteApiError",
    "ResponseDecodeError",
    "TransportError",
    "map_error_message",
    "RequestSigner",
    "canonical_json",
    "content_digest",
    "AiohttpExecutor",
    "BaseApiClient",
    "ProxyConfig",
    "CryptopiaClient",
    "create_client",
    "create_client_from_settings",
]
