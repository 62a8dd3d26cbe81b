"""Reviews gateway factory.

Provides get_gateway() / set_gateway() to swap implementations:
- HttpReviewsGateway against the Reviews API (default)
- FakeReviewsGateway for development and testing
"""

from storefront.gateway.http_adapter import HttpReviewsGateway
from storefront.gateway.port import ReviewsGateway

_current_gateway: ReviewsGateway | None = None


def get_gateway() -> ReviewsGateway:
    """Return the current reviews gateway. Defaults to the HTTP gateway."""
    global _current_gateway
    if _current_gateway is None:
        _current_gateway = HttpReviewsGateway.from_env()
    return _current_gateway


def set_gateway(gateway: ReviewsGateway) -> None:
    """Override the active reviews gateway (useful for tests)."""
    global _current_gateway
    _current_gateway = gateway


def reset_gateway() -> None:
    """Reset to default gateway."""
    global _current_gateway
    _current_gateway = None
