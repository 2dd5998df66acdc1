"""
OCS01 Python client

Interactive client for OCS01 ledger smart contracts.

Features:
- Ledger node API client
- Ed25519 transaction signing
- Nonce-aware contract call submission
- Confirmation polling
- Schema-driven method dispatch
"""

__version__ = "0.1.0"

from .builder import TransactionBuilder
from .client import LedgerClient
from .crypto import Signer, canonical_payload
from .dispatcher import MethodDispatcher
from .exceptions import (
    ApiError,
    ConfigError,
    MalformedResponse,
    OCS01Error,
    SigningError,
    TransportError,
    UnsupportedMethodKind,
)
from .models import (
    Account,
    ContractInterface,
    DispatchResult,
    MethodDescriptor,
    MethodKind,
    ParameterDescriptor,
    PollState,
    Transaction,
    TransactionStatus,
    ViewResult,
)
from .poller import ConfirmationPoller, PollSession
from .utils import Utils

__all__ = [
    "TransactionBuilder",
    "LedgerClient",
    "Signer",
    "canonical_payload",
    "MethodDispatcher",
    "ApiError",
    "ConfigError",
    "MalformedResponse",
    "OCS01Error",
    "SigningError",
    "TransportError",
    "UnsupportedMethodKind",
    "Account",
    "ContractInterface",
    "DispatchResult",
    "MethodDescriptor",
    "MethodKind",
    "ParameterDescriptor",
    "PollState",
    "Transaction",
    "TransactionStatus",
    "ViewResult",
    "ConfirmationPoller",
    "PollSession",
    "Utils",
]
