"""Storefront load test scenarios.

Two stateful SequentialTaskSet journeys: a shopper browsing the home page,
a product page and its reviews, and a reviewer writing and then revising a
review. Steps execute in order; each depends on the previous step
succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import HOME_TAGS, product_data, review_data, unique_user_id
from loadtests.helpers.state import ProductState, ReviewerState


def _create_product(client):
    """Create a published product and return its JSON payload, or None."""
    payload = product_data()
    with client.post("/products", json=payload, catch_response=True, name="POST /products") as resp:
        if resp.status_code != 201:
            resp.failure(f"Create product failed: {resp.status_code}")
            return None
        return {**payload, "id": resp.json()["productId"]}


class ShopperBrowsingJourney(SequentialTaskSet):
    """Home -> Product Cards -> Product Page -> Reviews -> Related.

    Read-only. Models the traffic most storefront visitors produce.
    """

    def on_start(self):
        self.state = ProductState()

    @task
    def seed_product(self):
        product = _create_product(self.client)
        if product is None:
            self.interrupt()
            return
        self.state.product_id = product["id"]
        self.state.slug = product["slug"]
        self.state.category = product["category"]

    @task
    def home_page(self):
        self.client.get("/", name="GET /")

    @task
    def product_cards(self):
        self.client.get("/products/cards", params={"tag": random.choice(HOME_TAGS)}, name="GET /products/cards")

    @task
    def product_page(self):
        with self.client.get(
            f"/product/{self.state.slug}",
            catch_response=True,
            name="GET /product/{slug}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Product page failed: {resp.status_code}")

    @task
    def review_page(self):
        self.client.get(
            "/reviews",
            params={"product_id": self.state.product_id, "page": 1},
            name="GET /reviews",
        )

    @task
    def related_products(self):
        self.client.get(
            "/products/related",
            params={"category": self.state.category, "product_id": self.state.product_id},
            name="GET /products/related",
        )

    @task
    def done(self):
        self.interrupt()


class ReviewWriterJourney(SequentialTaskSet):
    """Create Product -> Write Review -> Fetch Own Review -> Revise Review -> Reload.

    Generates ReviewSubmitted and ReviewUpdated events, which the catalogue
    turns into rating aggregate updates.
    """

    def on_start(self):
        self.state = ReviewerState(user_id=unique_user_id())

    @task
    def seed_product(self):
        product = _create_product(self.client)
        if product is None:
            self.interrupt()
            return
        self.state.product_id = product["id"]
        self.state.slug = product["slug"]

    @task
    def write_review(self):
        self._submit("Review created successfully", name="POST /reviews (create)")

    @task
    def my_review(self):
        self.client.get(
            "/reviews/mine",
            params={"product_id": self.state.product_id, "user_id": self.state.user_id},
            name="GET /reviews/mine",
        )

    @task
    def revise_review(self):
        self._submit("Review updated successfully", name="POST /reviews (update)")

    @task
    def reload_reviews(self):
        with self.client.get(
            "/reviews",
            params={"product_id": self.state.product_id, "page": 1},
            catch_response=True,
            name="GET /reviews",
        ) as resp:
            if resp.status_code == 200:
                self.state.total_pages = resp.json()["totalPages"]
            else:
                resp.failure(f"Reload failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()

    def _submit(self, expected_message, name):
        body = {
            "data": review_data(self.state.product_id, self.state.user_id),
            "path": f"/product/{self.state.slug}",
        }
        with self.client.post("/reviews", json=body, catch_response=True, name=name) as resp:
            if resp.status_code != 200 or resp.json().get("message") != expected_message:
                resp.failure(f"Review submission failed: {resp.status_code} {resp.text[:200]}")
                return
            self.state.reviews_written += 1


class StorefrontUser(HttpUser):
    """Mostly browsing, with one review written for every few visits."""

    wait_time = between(0.5, 3.0)
    tasks = {
        ShopperBrowsingJourney: 4,
        ReviewWriterJourney: 1,
    }
