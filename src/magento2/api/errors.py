"""
Exceptions raised by the Magento2 client.

Every failure aborts the current operation and reaches the caller.
Errors that stem from an HTTP response carry the status code and the
raw body as separate attributes.
"""

from typing import Optional


class Magento2Error(Exception):
    """Base exception for all client errors."""
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(Magento2Error):
    """Store configuration is incomplete."""
    pass


class TransportError(Magento2Error):
    """The request never produced an HTTP response (DNS, connect, timeout)."""
    def __init__(self, message: str, method: str = None, url: str = None):
        super().__init__(message)
        self.method = method
        self.url = url


class RemoteError(Magento2Error):
    """Magento answered with a status code >= 400."""
    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body

    def __str__(self):
        return f"{self.message} (status {self.status_code})"


class ResponseDecodeError(Magento2Error):
    """A successful response did not contain the expected JSON."""
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class EmptyResultError(Magento2Error):
    """An estimate endpoint returned a valid but empty list."""
    pass


class NoCarrierAvailable(EmptyResultError):
    """No shipping carrier can deliver to the given address."""
    pass


class NoPaymentMethodAvailable(EmptyResultError):
    """The cart offers no payment method."""
    pass


class OrderCreationError(Magento2Error):
    """Order placement answered with something other than an order id."""
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthenticationError(Magento2Error):
    """Username/password exchange did not yield a token."""
    pass
