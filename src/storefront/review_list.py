"""Review list island for the product page.

Holds the state the product page keeps for its reviews: the loaded reviews,
a cursor on the next page to fetch, the number of pages the last response
reported, and the review form. Every data call goes through a
ReviewsGateway; failures are logged and turned into error toasts, and a
failed call never changes the loaded state.

State Machine (pagination cursor):
    page = 2, total_pages = 0        (nothing loaded yet)
    on_visible  → reviews = page 1, total_pages = N
    load_more   → reviews += page `page`, page += 1   while page <= total_pages
    submit (ok) → reviews = page 1, page = 2
"""

import structlog

from storefront.exceptions import DataAccessError
from storefront.forms import ReviewForm
from storefront.gateway import get_gateway
from storefront.gateway.port import ReviewsGateway
from storefront.toast import Toaster

logger = structlog.get_logger(__name__)


class ReviewList:
    def __init__(
        self,
        product: dict,
        user_id: str | None = None,
        user_name: str | None = None,
        gateway: ReviewsGateway | None = None,
        toaster: Toaster | None = None,
    ) -> None:
        self.product = product
        self.user_id = user_id
        self.user_name = user_name
        self.gateway = gateway or get_gateway()
        self.toaster = toaster or Toaster()

        self.reviews: list[dict] = []
        self.page = 2
        self.total_pages = 0
        self.loading = False
        self.seen = False

        self.form = ReviewForm()
        self.is_form_open = False

    @property
    def product_id(self) -> str:
        return str(self.product["id"])

    @property
    def path(self) -> str:
        return f"/product/{self.product['slug']}"

    @property
    def can_load_more(self) -> bool:
        """Whether the "See more reviews" action is shown."""
        return self.page <= self.total_pages

    # -------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------
    def on_visible(self) -> None:
        """Load the first page the first time the list scrolls into view."""
        if self.seen:
            return
        self.seen = True

        self.loading = True
        try:
            result = self.gateway.get_reviews(self.product_id, page=1)
        except DataAccessError as exc:
            logger.error("Initial reviews load failed", product_id=self.product_id, error=str(exc))
            self.toaster.error("Failed to load initial reviews")
            return
        finally:
            self.loading = False

        self.reviews = list(result.data)
        self.total_pages = result.total_pages

    def load_more(self) -> None:
        """Append the next page. Does nothing until a page count is known or once it is exhausted."""
        if self.total_pages == 0 or self.page > self.total_pages:
            return

        self.loading = True
        try:
            result = self.gateway.get_reviews(self.product_id, page=self.page)
        except DataAccessError as exc:
            logger.error("Loading more reviews failed", product_id=self.product_id, page=self.page, error=str(exc))
            self.toaster.error("Failed to load more reviews")
            return
        finally:
            self.loading = False

        self.reviews = [*self.reviews, *result.data]
        self.total_pages = result.total_pages
        self.page = self.page + 1

    def reload(self) -> None:
        """Replace the list with a fresh first page and rewind the cursor."""
        try:
            result = self.gateway.get_reviews(self.product_id, page=1)
        except DataAccessError as exc:
            logger.error("Reloading reviews failed", product_id=self.product_id, error=str(exc))
            self.toaster.error("Error in fetching reviews")
            return

        self.reviews = list(result.data)
        self.total_pages = result.total_pages
        self.page = 2

    # -------------------------------------------------------------------
    # Review form
    # -------------------------------------------------------------------
    def open_form(self) -> bool:
        """Open the review form, pre-filled with the user's existing review if there is one.

        Anonymous visitors get no form; the island shows a sign-in link instead.
        """
        if not self.user_id:
            return False

        self.form.reset()
        self.form.set_value("product", self.product_id)
        self.form.set_value("user", self.user_id)
        self.form.set_value("user_name", self.user_name)
        self.form.set_value("is_verified_purchase", True)

        try:
            review = self.gateway.get_review_by_product_id(self.product_id, self.user_id)
        except DataAccessError as exc:
            logger.error("Fetching existing review failed", product_id=self.product_id, error=str(exc))
            self.toaster.error("Failed to load existing review")
            review = None

        if review:
            self.form.set_value("title", review["title"])
            self.form.set_value("comment", review["comment"])
            self.form.set_value("rating", review["rating"])

        self.is_form_open = True
        return True

    def close_form(self) -> None:
        self.is_form_open = False

    def submit(self) -> bool:
        """Validate and send the form. Returns True when the review was stored."""
        review_input = self.form.validate()
        if review_input is None:
            return False

        self.form.is_submitting = True
        try:
            data = review_input.model_dump(by_alias=True)
            result = self.gateway.create_update_review(data=data, path=self.path)
            if not result.success:
                raise DataAccessError(result.message)
        except DataAccessError as exc:
            logger.error("Review submission failed", product_id=self.product_id, error=str(exc))
            self.toaster.error(exc.message or "Review submission failed")
            return False
        finally:
            self.form.is_submitting = False

        self.is_form_open = False
        self.reload()
        self.toaster.success(result.message)
        return True

    # -------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------
    def render(self) -> str:
        from storefront.shell import templates

        return templates.get_template("review_list.html").render(island=self, product=self.product)
