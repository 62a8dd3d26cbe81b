"""Cart state and the cart sidebar visibility rule.

The cart lives client-side in a JSON ``cart`` cookie; the server only reads
it to render the menu count and the sidebar.
"""

import json
import re

import structlog
from pydantic import BaseModel, Field
from pydantic import ValidationError as SchemaError

logger = structlog.get_logger(__name__)

CART_COOKIE = "cart"

# Paths that never show the sidebar, either exactly or as a prefix
_HIDDEN_PATHS = {"/", "/cart", "/checkout", "/sign-in", "/sign-up"}
_HIDDEN_PREFIXES = ("/order", "/account", "/admin")

_MOBILE_AGENT = re.compile(r"Mobi|Android|iPhone|iPad|iPod|Windows Phone", re.IGNORECASE)


class CartItem(BaseModel):
    product: str
    name: str = ""
    slug: str = ""
    image: str = ""
    price: float = 0.0
    quantity: int = Field(default=1, ge=1)


class Cart(BaseModel):
    items: list[CartItem] = Field(default_factory=list)

    @property
    def item_count(self) -> int:
        return sum(item.quantity for item in self.items)

    @property
    def items_price(self) -> float:
        return round(sum(item.price * item.quantity for item in self.items), 2)


def read_cart(raw: str | None) -> Cart:
    """Parse the cart cookie. A missing or malformed cookie is an empty cart."""
    if not raw:
        return Cart()
    try:
        return Cart.model_validate(json.loads(raw))
    except (ValueError, SchemaError) as exc:
        logger.warning("Ignoring malformed cart cookie", error=str(exc))
        return Cart()


def device_type(user_agent: str | None) -> str:
    """Classify a request as "mobile" or "desktop" from its User-Agent."""
    if user_agent and _MOBILE_AGENT.search(user_agent):
        return "mobile"
    return "desktop"


def is_cart_sidebar_open(cart: Cart, path: str, device: str) -> bool:
    if not cart.items or device != "desktop":
        return False
    if path in _HIDDEN_PATHS:
        return False
    return not path.startswith(_HIDDEN_PREFIXES)
