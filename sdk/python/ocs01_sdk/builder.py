"""
Contract call transaction builder
"""

import logging
import time
from typing import Callable, List

from .client import LedgerClient
from .crypto import Signer
from .models import Transaction

logger = logging.getLogger(__name__)


class TransactionBuilder:
    """
    Builds, signs and submits contract call transactions.

    The nonce is read from the node on every call. Overlapping calls for
    the same account are not coordinated.
    """

    def __init__(
        self,
        client: LedgerClient,
        signer: Signer,
        clock: Callable[[], float] = time.time
    ):
        self.client = client
        self.signer = signer
        self._clock = clock

    def build(self, from_address: str, contract: str) -> Transaction:
        """
        Build and sign a contract call for the account's next nonce.

        Args:
            from_address: Caller address
            contract: Contract address

        Returns:
            Signed Transaction object
        """
        account = self.client.get_balance(from_address)
        # sampled once: the submitted timestamp must match the signed one
        timestamp = self._clock()

        tx = Transaction(
            from_address=from_address,
            to_address=contract,
            nonce=account.next_nonce,
            timestamp=timestamp,
        )
        tx.signature = self.signer.sign_b64(tx.signing_fields())
        tx.public_key = self.signer.public_key_b64
        return tx

    def build_and_submit(
        self,
        from_address: str,
        contract: str,
        method: str,
        params: List[str]
    ) -> str:
        """
        Build, sign and submit a contract call.

        Args:
            from_address: Caller address
            contract: Contract address
            method: Contract method name
            params: Parameter values in declared order

        Returns:
            Transaction hash, possibly empty
        """
        tx = self.build(from_address, contract)
        tx_hash = self.client.submit_transaction(
            contract=contract,
            method=method,
            params=params,
            caller=from_address,
            nonce=tx.nonce,
            timestamp=tx.timestamp,
            signature=tx.signature,
            public_key=tx.public_key,
        )
        logger.info("submitted %s on %s with nonce %d: tx %r", method, contract, tx.nonce, tx_hash)
        return tx_hash
