"""
Custom domain exceptions for consistent error handling.

Request errors are HTTPExceptions rendered by the handler in main.py as
``{"error": ..., "message": ...}``. Verification errors are plain exceptions
raised by the PayPal service; the generate route collapses them into one
403 response but each keeps its own ``code`` for the logs.
"""
from fastapi import HTTPException, status


# ── Request errors ──────────────────────────────────────────────────

class DomainError(HTTPException):
    """Base class for errors that map straight to an HTTP response."""
    def __init__(self, error: str, message: str | None = None,
                 status_code: int = status.HTTP_400_BAD_REQUEST, headers: dict | None = None):
        super().__init__(status_code=status_code, detail=message or error, headers=headers)
        self.error = error
        self.message = message

    def to_body(self) -> dict:
        body = {"error": self.error}
        if self.message:
            body["message"] = self.message
        return body


class PaymentRequiredError(DomainError):
    """Request arrived without a PayPal order id (403)."""
    def __init__(self, message: str = "Missing PayPal orderId"):
        super().__init__("Payment required", message, status_code=status.HTTP_403_FORBIDDEN)


class PromptRequiredError(DomainError):
    """Request arrived without a prompt (400)."""
    def __init__(self):
        super().__init__("Prompt required", status_code=status.HTTP_400_BAD_REQUEST)


class PaymentVerificationFailedError(DomainError):
    """Coarse rejection sent to the client for any verification failure (403)."""
    def __init__(self, message: str):
        super().__init__("Payment verification failed", message, status_code=status.HTTP_403_FORBIDDEN)


class InvalidRequestBodyError(DomainError):
    """Body is not a JSON object of strings (400)."""
    def __init__(self, message: str | None = None):
        super().__init__("Invalid request body", message, status_code=status.HTTP_400_BAD_REQUEST)


class PayloadTooLargeError(DomainError):
    """Body exceeds MAX_BODY_BYTES (413)."""
    def __init__(self, limit: int):
        super().__init__(
            "Payload too large",
            f"Request body exceeds {limit} bytes",
            status_code=413,
        )


# ── Verification errors ─────────────────────────────────────────────

class PaymentVerificationError(Exception):
    """Base class for everything that can go wrong while checking an order."""
    code = "verification_error"
    default_message = "Payment verification failed"

    def __init__(self, message: str | None = None, details: dict | None = None):
        self.message = message or self.default_message
        self.details = details or {}
        super().__init__(self.message)


class UpstreamUnreachableError(PaymentVerificationError):
    """The PayPal API could not be reached (timeout, DNS, refused connection)."""
    code = "upstream_unreachable"
    default_message = "PayPal is unreachable"


class UpstreamAuthError(PaymentVerificationError):
    """PayPal rejected the client-credentials exchange."""
    code = "upstream_auth"
    default_message = "Failed to get PayPal access token"


class OrderNotFoundError(PaymentVerificationError):
    """Order fetch returned a non-success status."""
    code = "order_not_found"
    default_message = "Order not found in PayPal"


class PaymentIncompleteError(PaymentVerificationError):
    """Order status is not COMPLETED."""
    code = "payment_incomplete"
    default_message = "Payment not completed"


class AmountMismatchError(PaymentVerificationError):
    """First purchase unit does not carry the expected price."""
    code = "amount_mismatch"
    default_message = "Incorrect payment amount"
