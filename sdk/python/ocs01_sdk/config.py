"""
Wallet and contract interface loading
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .client import DEFAULT_TIMEOUT
from .exceptions import ConfigError
from .models import ContractInterface

logger = logging.getLogger(__name__)

DEFAULT_WALLET_PATH = "wallet.json"
DEFAULT_INTERFACE_PATH = "exec_interface.json"


@dataclass(frozen=True)
class WalletConfig:
    """Wallet credentials and the node they talk to"""
    private_key: str
    address: str
    rpc_url: str

    def __repr__(self) -> str:
        return f"WalletConfig(address={self.address!r}, rpc_url={self.rpc_url!r})"


def get_wallet_path() -> Path:
    """Get the wallet path from environment or default."""
    return Path(os.environ.get("OCS01_WALLET", DEFAULT_WALLET_PATH))


def get_interface_path() -> Path:
    """Get the interface path from environment or default."""
    return Path(os.environ.get("OCS01_INTERFACE", DEFAULT_INTERFACE_PATH))


def get_http_timeout() -> float:
    """Get the HTTP timeout from environment or default."""
    value = os.environ.get("OCS01_HTTP_TIMEOUT")
    if value is None:
        return DEFAULT_TIMEOUT
    try:
        return float(value)
    except ValueError as exc:
        raise ConfigError(f"OCS01_HTTP_TIMEOUT is not a number: {value!r}") from exc


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read {path}: {exc}") from exc
    except ValueError as exc:
        raise ConfigError(f"{path} is not valid JSON: {exc}") from exc


def load_wallet(path: Optional[Union[str, Path]] = None) -> WalletConfig:
    """
    Load wallet credentials.

    The file holds ``priv`` (base64 private key), ``addr`` and ``rpc``.
    ``OCS01_RPC`` overrides the node URL.

    Raises:
        ConfigError: If the file is missing or incomplete
    """
    path = Path(path) if path is not None else get_wallet_path()
    data = _read_json(path)
    try:
        wallet = WalletConfig(
            private_key=data["priv"],
            address=data["addr"],
            rpc_url=os.environ.get("OCS01_RPC", data["rpc"]),
        )
    except (KeyError, TypeError) as exc:
        raise ConfigError(f"{path} is missing field {exc}") from exc
    logger.debug("loaded wallet %s from %s", wallet.address, path)
    return wallet


def load_interface(path: Optional[Union[str, Path]] = None) -> ContractInterface:
    """
    Load a contract interface description.

    Raises:
        ConfigError: If the file is missing or malformed
    """
    path = Path(path) if path is not None else get_interface_path()
    data = _read_json(path)
    try:
        interface = ContractInterface.from_dict(data)
    except (KeyError, TypeError, AttributeError) as exc:
        raise ConfigError(f"{path} is not a valid interface: {exc!r}") from exc
    logger.debug("loaded %d methods for %s", len(interface.methods), interface.contract)
    return interface
