"""Shared fixtures for the OCS01 client tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from ocs01_sdk.client import LedgerClient
from ocs01_sdk.crypto import Signer
from ocs01_sdk.models import Account, ContractInterface

WALLET_ADDRESS = "octWalletAddress111"
CONTRACT_ADDRESS = "octContractAddress222"

INTERFACE = {
    "contract": CONTRACT_ADDRESS,
    "methods": [
        {"name": "getGreeting", "label": "read greeting", "type": "view", "params": []},
        {
            "name": "setGreeting",
            "label": "set greeting",
            "type": "call",
            "params": [{"name": "text", "type": "string", "example": "hello"}],
        },
        {
            "name": "transfer",
            "label": "transfer tokens",
            "type": "call",
            "params": [
                {"name": "to", "type": "address"},
                {"name": "amount", "type": "number", "max": 1000},
            ],
        },
        {"name": "multi", "label": "batch op", "type": "batch", "params": []},
    ],
}


class FakeClock:
    """Manual clock; sleep() advances it instead of blocking."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture()
def signer() -> Signer:
    return Signer.from_seed(bytes(range(32)))


@pytest.fixture()
def interface() -> ContractInterface:
    return ContractInterface.from_dict(INTERFACE)


@pytest.fixture()
def fake_client() -> MagicMock:
    client = MagicMock(spec=LedgerClient)
    client.get_balance.return_value = Account(
        address=WALLET_ADDRESS, balance_raw=1_500_000, nonce=7
    )
    return client


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()
