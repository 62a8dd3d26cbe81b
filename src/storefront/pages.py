"""Server-rendered storefront pages.

Page handlers are plain functions so they run in the threadpool: the review
list reaches the Reviews API over HTTP, which may be this same server.
"""

from typing import Annotated

from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse
from markupsafe import Markup
from protean.exceptions import ObjectNotFoundError

from catalogue.product.queries import (
    get_all_categories,
    get_product_by_slug,
    get_products_by_tag,
    get_products_for_card,
    get_related_products_by_category,
)
from storefront.review_list import ReviewList
from storefront.shell import render_page
from storefront.toast import Toaster

page_router = APIRouter(tags=["pages"], default_response_class=HTMLResponse)

# Home page card rows: (title, tag)
HOME_CARDS = [
    ("New Arrivals", "new-arrival"),
    ("Featured Products", "featured"),
    ("Best Sellers", "best-seller"),
]


def current_user(request: Request) -> tuple[str | None, str | None]:
    """The signed-in user carried by the request, as (id, name)."""
    return request.cookies.get("user_id"), request.cookies.get("user_name")


@page_router.get("/")
def home(request: Request):
    context = {
        "categories": get_all_categories(),
        "cards": [{"title": title, "items": get_products_for_card(tag=tag)} for title, tag in HOME_CARDS],
        "todays_deals": get_products_by_tag(tag="todays-deal"),
    }
    return render_page(request, "home.html", context)


def _load_island(request: Request, product: dict, toaster: Toaster, reviews_page: int = 1) -> ReviewList:
    """Build the review list as it stands after loading reviews up to `reviews_page`."""
    user_id, user_name = current_user(request)
    island = ReviewList(product=product, user_id=user_id, user_name=user_name, toaster=toaster)
    # The server render is the island's first visibility
    island.on_visible()
    while island.page <= reviews_page and island.can_load_more:
        cursor = island.page
        island.load_more()
        if island.page == cursor:
            break
    return island


def _render_product(request: Request, product: dict, island: ReviewList, toaster: Toaster, status_code: int = 200):
    related = get_related_products_by_category(category=product["category"], product_id=product["id"])
    context = {
        "product": product,
        "related": related,
        "review_list": Markup(island.render()),
    }
    return render_page(request, "product.html", context, toaster=toaster, status_code=status_code)


@page_router.get("/product/{slug}")
def product_page(request: Request, slug: str, reviews_page: int = 1, write_review: bool = False):
    try:
        product = get_product_by_slug(slug)
    except ObjectNotFoundError:
        return render_page(request, "not_found.html", {"slug": slug}, status_code=404)

    toaster = Toaster()
    island = _load_island(request, product, toaster, reviews_page=reviews_page)
    if write_review:
        island.open_form()
    return _render_product(request, product, island, toaster)


@page_router.post("/product/{slug}/review")
def submit_review(
    request: Request,
    slug: str,
    title: Annotated[str, Form()] = "",
    comment: Annotated[str, Form()] = "",
    rating: Annotated[int, Form()] = 0,
):
    try:
        product = get_product_by_slug(slug)
    except ObjectNotFoundError:
        return render_page(request, "not_found.html", {"slug": slug}, status_code=404)

    toaster = Toaster()
    island = _load_island(request, product, toaster)
    if not island.open_form():
        return _render_product(request, product, island, toaster, status_code=401)

    island.form.set_value("title", title)
    island.form.set_value("comment", comment)
    island.form.set_value("rating", rating)
    if island.submit():
        return _render_product(request, product, island, toaster)
    return _render_product(request, product, island, toaster, status_code=400)
