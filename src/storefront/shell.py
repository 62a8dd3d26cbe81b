"""Page shell shared by every storefront page.

Wraps page content in the providers layout: a two-pane layout with the cart
sidebar when it is open, a plain container otherwise, and always the toast
host. The header menu shows the sign-in link and the cart button.
"""

from pathlib import Path

from fastapi import Request
from fastapi.templating import Jinja2Templates

from storefront.cart import CART_COOKIE, device_type, is_cart_sidebar_open, read_cart
from storefront.toast import Toaster

TEMPLATES_DIR = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def shell_context(request: Request, toaster: Toaster) -> dict:
    """Template variables the base layout needs."""
    cart = read_cart(request.cookies.get(CART_COOKIE))
    device = device_type(request.headers.get("user-agent"))
    return {
        "cart": cart,
        "device_type": device,
        "is_cart_sidebar_open": is_cart_sidebar_open(cart, request.url.path, device),
        "toasts": toaster.drain(),
    }


def render_page(
    request: Request,
    name: str,
    context: dict | None = None,
    toaster: Toaster | None = None,
    status_code: int = 200,
):
    """Render `name` inside the shell, draining pending toasts into the toast host."""
    page_context = dict(context or {})
    page_context.update(shell_context(request, toaster or Toaster()))
    return templates.TemplateResponse(request, name, page_context, status_code=status_code)
