"""
Transaction confirmation polling
"""

import logging
import time
from typing import Callable, Optional

from .client import LedgerClient
from .exceptions import ApiError
from .models import PollState

logger = logging.getLogger(__name__)

POLL_INTERVAL = 5.0
DEFAULT_TIMEOUT = 100.0


class PollSession:
    """
    One confirmation wait, advanced one check at a time.

    States: WAITING -> CONFIRMED | TIMED_OUT | FAILED. Terminal states
    never change.
    """

    def __init__(
        self,
        client: LedgerClient,
        tx_hash: str,
        timeout: float,
        clock: Callable[[], float] = time.monotonic
    ):
        self.client = client
        self.tx_hash = tx_hash
        self.timeout = timeout
        self.state = PollState.WAITING
        self.checks = 0
        self._clock = clock
        self._started = clock()

    @property
    def elapsed(self) -> float:
        return self._clock() - self._started

    def advance(self) -> PollState:
        """
        Run one transition.

        Returns:
            State after the transition

        Raises:
            ApiError: If the status lookup fails (state becomes FAILED)
        """
        if self.state.is_terminal:
            return self.state

        if self.elapsed > self.timeout:
            self.state = PollState.TIMED_OUT
            logger.info("tx %s not confirmed after %d checks", self.tx_hash, self.checks)
            return self.state

        self.checks += 1
        try:
            status = self.client.get_transaction(self.tx_hash)
        except ApiError:
            self.state = PollState.FAILED
            raise

        if status.is_confirmed:
            self.state = PollState.CONFIRMED
            logger.info("tx %s confirmed after %d checks", self.tx_hash, self.checks)
        else:
            logger.debug("tx %s status %r", self.tx_hash, status.status)
        return self.state


class ConfirmationPoller:
    """
    Waits for a transaction to be confirmed.

    Example:
        >>> poller = ConfirmationPoller(client, on_tick=lambda s: print(".", end=""))
        >>> poller.poll(tx_hash, timeout=100)
        <PollState.CONFIRMED: 'confirmed'>
    """

    def __init__(
        self,
        client: LedgerClient,
        interval: float = POLL_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        on_tick: Optional[Callable[[PollSession], None]] = None
    ):
        self.client = client
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self.on_tick = on_tick

    def start(self, tx_hash: str, timeout: float = DEFAULT_TIMEOUT) -> PollSession:
        return PollSession(self.client, tx_hash, timeout, clock=self._clock)

    def poll(self, tx_hash: str, timeout: float = DEFAULT_TIMEOUT) -> PollState:
        """
        Check status every interval until confirmed or timed out.

        Args:
            tx_hash: Transaction hash
            timeout: Give up after this many seconds

        Returns:
            PollState.CONFIRMED or PollState.TIMED_OUT

        Raises:
            ApiError: If a status lookup fails
        """
        session = self.start(tx_hash, timeout)
        while session.advance() is PollState.WAITING:
            if self.on_tick is not None:
                self.on_tick(session)
            self._sleep(self.interval)
        return session.state
