"""Tests for private request signing."""

import base64
import hashlib
import hmac
from decimal import Decimal
from types import MappingProxyType
from unittest.mock import patch

import pytest

from cryptopia.api.errors import InvalidCredentialsError, InvalidParameterError, MissingCredentialsError
from cryptopia.api.protocol import ClientConfig, Credentials
from cryptopia.api.signer import (
    RequestSigner,
    canonical_json,
    content_digest,
    encode_uri_component,
)

NONCE = 1700000000


def make_signer(key, secret, **config):
    return RequestSigner(Credentials(key, secret), ClientConfig(**config))


class TestCanonicalJson:
    """Tests for parameter serialization."""

    def test_compact_and_ordered(self):
        assert canonical_json({"symbol": "btc_usd", "order_id": 5}) == '{"symbol":"btc_usd","order_id":5}'

    def test_insertion_order_preserved(self):
        assert canonical_json({"b": 1, "a": 2}) == '{"b":1,"a":2}'

    def test_empty(self):
        assert canonical_json({}) == "{}"

    def test_non_ascii_not_escaped(self):
        assert canonical_json({"note": "café"}) == '{"note":"café"}'

    def test_read_only_mapping(self):
        params = MappingProxyType({"symbol": "btc_usd", "order_id": 5})

        assert canonical_json(params) == '{"symbol":"btc_usd","order_id":5}'

    def test_unserializable_value_rejected(self):
        with pytest.raises(InvalidParameterError) as exc_info:
            canonical_json({"amount": Decimal("0.5")})

        assert isinstance(exc_info.value.cause, TypeError)

    def test_digest_stable_for_identical_params(self):
        first = content_digest(canonical_json({"symbol": "btc_usd", "type": "buy"}))
        second = content_digest(canonical_json({"symbol": "btc_usd", "type": "buy"}))
        assert first == second

    def test_digest_is_base64_md5(self):
        expected = base64.b64encode(hashlib.md5(b"{}").digest()).decode()
        assert content_digest("{}") == expected


class TestEncodeUriComponent:
    """Tests for URL component encoding."""

    def test_reserved_characters_encoded(self):
        assert encode_uri_component("https://a.b/c?d=e") == "https%3A%2F%2Fa.b%2Fc%3Fd%3De"

    def test_unreserved_marks_kept(self):
        assert encode_uri_component("-_.!~*'()") == "-_.!~*'()"

    def test_space_encoded(self):
        assert encode_uri_component("a b") == "a%20b"


class TestRequestSigner:
    """Tests for RequestSigner.sign."""

    def test_signature_matches_reference(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret)

        payload = signer.sign("GetBalance", {}, nonce=NONCE)

        digest = base64.b64encode(hashlib.md5(b"{}").digest()).decode()
        source = f"{api_key}POSThttps%3a%2f%2fwww.cryptopia.co.nz%2fapi%2fgetbalance{NONCE}{digest}"
        expected = base64.b64encode(
            hmac.new(base64.b64decode(api_secret), source.encode(), hashlib.sha256).digest()
        ).decode()

        assert payload.url == "https://www.cryptopia.co.nz/api/GetBalance"
        assert payload.digest == digest
        assert payload.signature == expected
        assert payload.header == f"amx {api_key}:{expected}:{NONCE}"
        assert payload.nonce == NONCE
        assert payload.body == "{}"

    def test_deterministic_for_fixed_nonce(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret)
        params = {"symbol": "btc_usd", "order_id": 42}

        assert signer.sign("cancel_order", params, nonce=NONCE) == signer.sign("cancel_order", params, nonce=NONCE)

    def test_nonce_from_wall_clock_truncated(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret)

        with patch("cryptopia.api.signer.time.time", return_value=1700000000.987):
            payload = signer.sign("GetBalance", {})

        assert payload.nonce == 1700000000
        assert payload.header.endswith(":1700000000")

    @pytest.mark.parametrize(
        "change",
        [
            {"key": "other_key"},
            {"secret": base64.b64encode(b"another_secret").decode()},
            {"method": "GetOpenOrders"},
            {"params": {"symbol": "ltc_usd"}},
            {"hostname": "api.example.com"},
        ],
    )
    def test_any_input_change_changes_signature(self, api_key, api_secret, change):
        base = {
            "key": api_key,
            "secret": api_secret,
            "method": "GetBalance",
            "params": {"symbol": "btc_usd"},
            "hostname": "www.cryptopia.co.nz",
        }
        changed = {**base, **change}

        def signature(args):
            signer = make_signer(args["key"], args["secret"], hostname=args["hostname"])
            return signer.sign(args["method"], args["params"], nonce=NONCE).signature

        assert signature(base) != signature(changed)

    def test_content_length_counts_bytes(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret)

        payload = signer.sign("trade", {"note": "café"}, nonce=NONCE)

        assert payload.content_length == len('{"note":"café"}'.encode("utf-8"))

    @pytest.mark.parametrize("key,secret", [(None, "c2VjcmV0"), ("key", None), (None, None), ("", "")])
    def test_missing_credentials(self, key, secret):
        signer = make_signer(key, secret)

        with pytest.raises(MissingCredentialsError):
            signer.sign("GetBalance", {})

    def test_credentials_checked_before_params(self):
        signer = make_signer(None, None)

        with pytest.raises(MissingCredentialsError):
            signer.sign("GetBalance", "not a mapping")

    @pytest.mark.parametrize("params", ["symbol=btc_usd", None, ["btc_usd"], 42])
    def test_non_mapping_params_rejected(self, api_key, api_secret, params):
        signer = make_signer(api_key, api_secret)

        with pytest.raises(InvalidParameterError):
            signer.sign("GetBalance", params)

    def test_read_only_mapping_signs_like_dict(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret)
        params = {"symbol": "btc_usd", "type": "buy"}

        proxied = signer.sign("trade", MappingProxyType(params), nonce=NONCE)

        assert proxied == signer.sign("trade", params, nonce=NONCE)

    def test_unserializable_params_rejected(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret)

        with pytest.raises(InvalidParameterError):
            signer.sign("trade", {"symbol": "btc_usd", "amount": Decimal("1.5")})

    def test_invalid_secret(self, api_key):
        signer = make_signer(api_key, "abc")

        with pytest.raises(InvalidCredentialsError):
            signer.sign("GetBalance", {})

    def test_headers(self, api_key, api_secret):
        signer = make_signer(api_key, api_secret, user_agent="test-agent")
        payload = signer.sign("GetBalance", {}, nonce=NONCE)

        headers = signer.headers(payload)

        assert headers["Authorization"] == payload.header
        assert headers["Content-Type"] == "application/json; charset=utf-8"
        assert headers["Content-Length"] == "2"
        assert headers["User-Agent"] == "test-agent"
