"""
Exception hierarchy for the OCS01 contract client
"""

from typing import Optional


class OCS01Error(Exception):
    """Base exception for all client errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ApiError(OCS01Error):
    """
    Raised when a remote node call fails.

    The response body (or the parse failure detail) is kept verbatim in
    ``body`` so the operator sees exactly what the node said.
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code
        self.body = body


class TransportError(ApiError):
    """Network failure or an error-class HTTP status"""
    pass


class MalformedResponse(ApiError):
    """Response body does not match the expected shape"""
    pass


class SigningError(OCS01Error):
    """Malformed private key material"""
    pass


class UnsupportedMethodKind(OCS01Error):
    """Interface declares a method type that is neither view nor call"""

    def __init__(self, method: str, kind: str):
        super().__init__(f"unknown method type: {kind!r} (method {method})")
        self.method = method
        self.kind = kind


class ConfigError(OCS01Error):
    """Wallet or interface file is missing or malformed"""
    pass
