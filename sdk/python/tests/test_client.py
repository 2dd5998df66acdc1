"""Tests for the ledger node API client."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests

from ocs01_sdk.client import LedgerClient
from ocs01_sdk.exceptions import ApiError, MalformedResponse, TransportError


def _response(payload=None, status_code=200, text=None):
    response = MagicMock()
    response.status_code = status_code
    response.text = text if text is not None else str(payload)
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@pytest.fixture()
def client():
    client = LedgerClient("http://node.test/", timeout=5)
    client.session.request = MagicMock()
    yield client
    client.close()


def _respond(client, *args, **kwargs):
    client.session.request.return_value = _response(*args, **kwargs)


class TestGetBalance:
    """Test balance and nonce lookup."""

    def test_parses_account(self, client):
        _respond(client, {"balance_raw": "1500000", "nonce": 3})
        account = client.get_balance("octA")
        assert account.balance_raw == 1_500_000
        assert account.nonce == 3
        assert str(account.balance) == "1.5"
        client.session.request.assert_called_once_with(
            "GET", "http://node.test/balance/octA", json=None, timeout=5
        )

    def test_http_error_raises_transport_error(self, client):
        _respond(client, None, status_code=404, text="no such account")
        with pytest.raises(TransportError) as exc_info:
            client.get_balance("octA")
        assert exc_info.value.body == "no such account"
        assert exc_info.value.status_code == 404
        assert exc_info.value.endpoint == "/balance/octA"
        assert "no such account" in exc_info.value.message

    def test_missing_field_raises_malformed(self, client):
        _respond(client, {"balance": "1"})
        with pytest.raises(MalformedResponse):
            client.get_balance("octA")

    def test_bad_nonce_raises_malformed(self, client):
        _respond(client, {"balance_raw": "1", "nonce": "three"})
        with pytest.raises(MalformedResponse):
            client.get_balance("octA")

    def test_invalid_json_raises_malformed(self, client):
        _respond(client, ValueError("Expecting value"), text="<html>")
        with pytest.raises(MalformedResponse) as exc_info:
            client.get_balance("octA")
        assert exc_info.value.body == "<html>"

    def test_connection_error_raises_transport_error(self, client):
        client.session.request.side_effect = requests.ConnectionError("refused")
        with pytest.raises(TransportError):
            client.get_balance("octA")

    def test_errors_are_api_errors(self, client):
        _respond(client, None, status_code=500, text="boom")
        with pytest.raises(ApiError):
            client.get_balance("octA")


class TestCallView:
    """Test view call result normalization."""

    @pytest.mark.parametrize(
        "result,expected",
        [
            (42, "42"),
            (1.5, "1.5"),
            (True, "true"),
            (False, "false"),
            (None, "null"),
            ("hello", "hello"),
            ({"a": 1, "b": [2]}, '{"a":1,"b":[2]}'),
            ([1, 2], "[1,2]"),
            ({"name": "café"}, '{"name":"café"}'),
            (["日本", "ü"], '["日本","ü"]'),
            (1e16, "1e16"),
            (2.5e20, "2.5e20"),
            (1e-7, "1e-7"),
            (1.5e-5, "0.000015"),
            (-1e-5, "-0.00001"),
            (0.0001, "0.0001"),
            (42.0, "42.0"),
        ],
    )
    def test_result_normalization(self, client, result, expected):
        _respond(client, {"status": "success", "result": result})
        view = client.call_view("octC", "get", [], "octA")
        assert view.to_display_string() == expected
        assert str(view) == expected

    def test_non_success_status_is_no_result(self, client):
        _respond(client, {"status": "error", "result": "ignored"})
        assert client.call_view("octC", "get", [], "octA") is None

    def test_missing_status_is_no_result(self, client):
        _respond(client, {"result": 1})
        assert client.call_view("octC", "get", [], "octA") is None

    def test_request_body(self, client):
        _respond(client, {"status": "success", "result": "x"})
        client.call_view("octC", "balanceOf", ["octB"], "octA")
        client.session.request.assert_called_once_with(
            "POST",
            "http://node.test/contract/call-view",
            json={
                "contract": "octC",
                "method": "balanceOf",
                "params": ["octB"],
                "caller": "octA",
            },
            timeout=5,
        )


class TestSubmitTransaction:
    """Test contract call submission."""

    def _submit(self, client):
        return client.submit_transaction(
            contract="octC",
            method="set",
            params=["1"],
            caller="octA",
            nonce=8,
            timestamp=1700000000.5,
            signature="c2ln",
            public_key="cHVi",
        )

    def test_returns_hash(self, client):
        _respond(client, {"tx_hash": "abc123"})
        assert self._submit(client) == "abc123"
        _, kwargs = client.session.request.call_args
        assert kwargs["json"] == {
            "contract": "octC",
            "method": "set",
            "params": ["1"],
            "caller": "octA",
            "nonce": 8,
            "timestamp": 1700000000.5,
            "signature": "c2ln",
            "public_key": "cHVi",
        }

    def test_missing_hash_is_empty(self, client):
        _respond(client, {"status": "queued"})
        assert self._submit(client) == ""

    def test_rejection_raises(self, client):
        _respond(client, None, status_code=400, text="invalid nonce")
        with pytest.raises(TransportError, match="invalid nonce"):
            self._submit(client)


class TestGetTransaction:
    """Test transaction status lookup."""

    def test_confirmed(self, client):
        _respond(client, {"status": "confirmed"})
        status = client.get_transaction("abc")
        assert status.is_confirmed
        assert status.tx_hash == "abc"

    @pytest.mark.parametrize("value", ["pending", "Confirmed", "weird", None])
    def test_anything_else_is_not_confirmed(self, client, value):
        _respond(client, {"status": value})
        assert not client.get_transaction("abc").is_confirmed

    def test_non_object_body_raises(self, client):
        _respond(client, ["confirmed"])
        with pytest.raises(MalformedResponse):
            client.get_transaction("abc")
