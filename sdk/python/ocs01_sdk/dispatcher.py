"""
Generic contract method dispatch
"""

import logging
from typing import Callable, Optional, Sequence

from .builder import TransactionBuilder
from .client import LedgerClient
from .exceptions import ApiError, UnsupportedMethodKind
from .models import (
    ContractInterface,
    DispatchResult,
    MethodDescriptor,
    MethodKind,
    PollState,
)
from .poller import ConfirmationPoller

logger = logging.getLogger(__name__)

CONFIRMATION_TIMEOUT = 100
NO_RESULT = "none"


class MethodDispatcher:
    """
    Invokes any method of a contract interface.

    Nothing here knows about individual methods; routing depends only on
    the declared method kind.
    """

    def __init__(
        self,
        interface: ContractInterface,
        caller: str,
        client: LedgerClient,
        builder: TransactionBuilder,
        poller: ConfirmationPoller
    ):
        self.interface = interface
        self.caller = caller
        self.client = client
        self.builder = builder
        self.poller = poller

    def dispatch(
        self,
        method: MethodDescriptor,
        params: Sequence[str],
        confirm: Optional[Callable[[str], bool]] = None
    ) -> DispatchResult:
        """
        Invoke a method with operator supplied values.

        Args:
            method: Method to invoke
            params: One value per declared parameter, in order
            confirm: Called with the tx hash of a call; return True to
                wait for confirmation

        Returns:
            DispatchResult describing what happened

        Raises:
            UnsupportedMethodKind: If the method kind is neither view nor call
            ApiError: If the view call or the submission fails
        """
        if method.kind is MethodKind.UNKNOWN:
            raise UnsupportedMethodKind(method.name, method.raw_kind)
        if len(params) != len(method.params):
            raise ValueError(
                f"{method.name} takes {len(method.params)} parameters, got {len(params)}"
            )

        values = [str(p) for p in params]
        if method.kind is MethodKind.VIEW:
            return self._view(method, values)
        if method.kind is MethodKind.CALL:
            return self._call(method, values, confirm)
        raise UnsupportedMethodKind(method.name, method.raw_kind)

    def _view(self, method: MethodDescriptor, params: list) -> DispatchResult:
        result = self.client.call_view(self.interface.contract, method.name, params, self.caller)
        output = result.to_display_string() if result is not None else ""
        return DispatchResult(
            method=method.name,
            kind=method.kind,
            output=output or NO_RESULT,
            params=params,
        )

    def _call(
        self,
        method: MethodDescriptor,
        params: list,
        confirm: Optional[Callable[[str], bool]]
    ) -> DispatchResult:
        tx_hash = self.builder.build_and_submit(
            self.caller, self.interface.contract, method.name, params
        )
        result = DispatchResult(
            method=method.name,
            kind=method.kind,
            tx_hash=tx_hash,
            params=params,
        )
        if confirm is None or not confirm(tx_hash):
            return result

        # the hash is already in the result, a failed wait must not lose it
        try:
            result.outcome = self.poller.poll(tx_hash, CONFIRMATION_TIMEOUT)
        except ApiError as exc:
            logger.warning("polling tx %s failed: %s", tx_hash, exc)
            result.outcome = PollState.FAILED
            result.error = str(exc)
        return result
