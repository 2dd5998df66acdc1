"""
Ledger node API client
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from .exceptions import MalformedResponse, TransportError
from .models import Account, TransactionStatus, ViewResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 100


class LedgerClient:
    """
    Client for the ledger node's HTTP API.

    Example:
        >>> client = LedgerClient("http://localhost:8080")
        >>> account = client.get_balance(address)
        >>> print(f"Nonce: {account.nonce}")
    """

    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT):
        """
        Initialize the client.

        Args:
            base_url: Node URL
            timeout: Request timeout in seconds (default: 100)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
        self.session.headers.update({
            'Content-Type': 'application/json',
        })

    def _request(self, method: str, endpoint: str, data: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{endpoint}"
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(
                method,
                url,
                json=data,
                timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise TransportError(f"api error: {exc}", endpoint=endpoint) from exc

        if response.status_code >= 400:
            raise TransportError(
                f"api error: {response.text}",
                endpoint=endpoint,
                status_code=response.status_code,
                body=response.text,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponse(
                f"api error: invalid JSON response: {exc}",
                endpoint=endpoint,
                status_code=response.status_code,
                body=response.text,
            ) from exc

    def _get(self, endpoint: str) -> Dict[str, Any]:
        """Make GET request"""
        return self._expect_object(endpoint, self._request("GET", endpoint))

    def _post(self, endpoint: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Make POST request"""
        return self._expect_object(endpoint, self._request("POST", endpoint, data))

    @staticmethod
    def _expect_object(endpoint: str, payload: Any) -> Dict[str, Any]:
        if not isinstance(payload, dict):
            raise MalformedResponse(
                f"api error: expected a JSON object, got {type(payload).__name__}",
                endpoint=endpoint,
            )
        return payload

    def get_balance(self, address: str) -> Account:
        """
        Get balance and nonce for an address.

        Args:
            address: Account address

        Returns:
            Account snapshot

        Raises:
            ApiError: On transport failure or unexpected body
        """
        endpoint = f'/balance/{address}'
        data = self._get(endpoint)
        try:
            balance_raw = int(data['balance_raw'])
            nonce = data['nonce']
        except (KeyError, TypeError, ValueError) as exc:
            raise MalformedResponse(
                f"api error: bad balance response: {data}",
                endpoint=endpoint,
            ) from exc
        if isinstance(nonce, bool) or not isinstance(nonce, int) or nonce < 0:
            raise MalformedResponse(
                f"api error: bad nonce in balance response: {nonce!r}",
                endpoint=endpoint,
            )
        return Account(address=address, balance_raw=balance_raw, nonce=nonce)

    def call_view(
        self,
        contract: str,
        method: str,
        params: List[str],
        caller: str
    ) -> Optional[ViewResult]:
        """
        Invoke a read-only contract method.

        Args:
            contract: Contract address
            method: Method name
            params: Parameter values in declared order
            caller: Caller address

        Returns:
            Wrapped result, or None when the node did not report success
        """
        data = self._post('/contract/call-view', {
            'contract': contract,
            'method': method,
            'params': list(params),
            'caller': caller,
        })
        if data.get('status') != 'success':
            logger.debug("view %s returned status %r", method, data.get('status'))
            return None
        return ViewResult.from_json(data.get('result'))

    def submit_transaction(
        self,
        contract: str,
        method: str,
        params: List[str],
        caller: str,
        nonce: int,
        timestamp: float,
        signature: str,
        public_key: str
    ) -> str:
        """
        Submit a signed contract call.

        Returns:
            Transaction hash (empty string if the node sent none)
        """
        data = self._post('/call-contract', {
            'contract': contract,
            'method': method,
            'params': list(params),
            'caller': caller,
            'nonce': nonce,
            'timestamp': timestamp,
            'signature': signature,
            'public_key': public_key,
        })
        tx_hash = data.get('tx_hash')
        return tx_hash if isinstance(tx_hash, str) else ""

    def get_transaction(self, tx_hash: str) -> TransactionStatus:
        """
        Get transaction status.

        Args:
            tx_hash: Transaction hash

        Returns:
            TransactionStatus object
        """
        data = self._get(f'/tx/{tx_hash}')
        status = data.get('status')
        return TransactionStatus(tx_hash=tx_hash, status=status if isinstance(status, str) else "")

    def close(self):
        """Close the session"""
        self.session.close()

    def __enter__(self):
        """Context manager entry"""
        return self

    def __exit__(self, *args):
        """Context manager exit"""
        self.close()
