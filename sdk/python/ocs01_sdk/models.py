"""
Data models for the OCS01 contract client
"""

import json
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

# Balances are reported in micro-units
BALANCE_SCALE = Decimal(1_000_000)

# Operation-unit tag for contract invocations
OU_CONTRACT_CALL = 1

CONFIRMED_STATUS = "confirmed"


@dataclass
class Account:
    """Account balance and sequence number"""
    address: str
    balance_raw: int
    nonce: int

    @property
    def balance(self) -> Decimal:
        """Balance in whole coins"""
        return Decimal(self.balance_raw) / BALANCE_SCALE

    @property
    def next_nonce(self) -> int:
        return self.nonce + 1


class MethodKind(Enum):
    """How a contract method is invoked"""
    VIEW = "view"
    CALL = "call"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> "MethodKind":
        if value == cls.VIEW.value:
            return cls.VIEW
        if value == cls.CALL.value:
            return cls.CALL
        return cls.UNKNOWN


@dataclass(frozen=True)
class ParameterDescriptor:
    """Contract method parameter"""
    name: str
    type: str = "string"
    example: Optional[str] = None
    max: Optional[int] = None

    @property
    def prompt(self) -> str:
        """
        Operator prompt for this parameter.

        ``example`` and ``max`` are hints only; nothing enforces them.
        """
        text = self.name
        if self.example is not None:
            text += f" (e.g. {self.example})"
        if self.max is not None:
            text += f" (max: {self.max})"
        return text + ": "

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ParameterDescriptor":
        example = data.get("example")
        return cls(
            name=data["name"],
            type=data.get("type", "string"),
            example=None if example is None else str(example),
            max=data.get("max"),
        )


@dataclass(frozen=True)
class MethodDescriptor:
    """Contract method as declared by the interface file"""
    name: str
    label: str
    kind: MethodKind
    raw_kind: str
    params: Tuple[ParameterDescriptor, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MethodDescriptor":
        raw_kind = data["type"]
        return cls(
            name=data["name"],
            label=data.get("label", data["name"]),
            kind=MethodKind.parse(raw_kind),
            raw_kind=raw_kind,
            params=tuple(ParameterDescriptor.from_dict(p) for p in data.get("params", [])),
        )


@dataclass(frozen=True)
class ContractInterface:
    """Callable surface of one contract"""
    contract: str
    methods: Tuple[MethodDescriptor, ...]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ContractInterface":
        return cls(
            contract=data["contract"],
            methods=tuple(MethodDescriptor.from_dict(m) for m in data["methods"]),
        )


@dataclass
class Transaction:
    """Contract call transaction"""
    from_address: str
    to_address: str
    nonce: int
    timestamp: float
    amount: str = "0"
    ou: int = OU_CONTRACT_CALL
    signature: Optional[str] = None
    public_key: Optional[str] = None

    def signing_fields(self) -> Dict[str, Any]:
        """The six fields covered by the signature, in signing order"""
        return {
            "from": self.from_address,
            "to_": self.to_address,
            "amount": self.amount,
            "nonce": self.nonce,
            "ou": str(self.ou),
            "timestamp": self.timestamp,
        }


@dataclass
class TransactionStatus:
    """Remote status of a submitted transaction"""
    tx_hash: str
    status: str

    @property
    def is_confirmed(self) -> bool:
        return self.status == CONFIRMED_STATUS


def _format_float(value: float) -> str:
    """
    Shortest round-trip float text in the node's notation.

    Scientific form only below 1e-5 or from 1e16 up, with a bare exponent
    (1e16, 1e-7).
    """
    text = repr(value)
    if "e" not in text:
        return text
    mantissa, exp_text = text.split("e")
    exp = int(exp_text)
    if exp == -5:
        sign = "-" if mantissa.startswith("-") else ""
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{sign}0.0000{digits}"
    return f"{mantissa}e{exp}"


class ViewResult:
    """
    Result of a view call.

    The contract runtime is untyped from our side, so the JSON value is
    wrapped in one of a closed set of variants that know how to render
    themselves.
    """

    def to_display_string(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return self.to_display_string()

    @staticmethod
    def from_json(value: Any) -> "ViewResult":
        # bool is an int subclass, check it first
        if isinstance(value, bool):
            return BoolResult(value)
        if value is None:
            return NullResult()
        if isinstance(value, str):
            return StrResult(value)
        if isinstance(value, (int, float)):
            return NumResult(value)
        return OtherResult(json.dumps(value, separators=(",", ":"), ensure_ascii=False))


@dataclass(frozen=True)
class StrResult(ViewResult):
    value: str

    def to_display_string(self) -> str:
        return self.value


@dataclass(frozen=True)
class NumResult(ViewResult):
    value: float

    def to_display_string(self) -> str:
        if isinstance(self.value, float):
            return _format_float(self.value)
        return str(self.value)


@dataclass(frozen=True)
class BoolResult(ViewResult):
    value: bool

    def to_display_string(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class NullResult(ViewResult):

    def to_display_string(self) -> str:
        return "null"


@dataclass(frozen=True)
class OtherResult(ViewResult):
    raw: str

    def to_display_string(self) -> str:
        return self.raw


class PollState(Enum):
    """Confirmation poller states"""
    WAITING = "waiting"
    CONFIRMED = "confirmed"
    TIMED_OUT = "timeout"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not PollState.WAITING


@dataclass
class DispatchResult:
    """Outcome of dispatching one contract method"""
    method: str
    kind: MethodKind
    output: Optional[str] = None
    tx_hash: Optional[str] = None
    outcome: Optional[PollState] = None
    error: Optional[str] = None
    params: List[str] = field(default_factory=list)
