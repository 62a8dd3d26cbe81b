"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the domain's validation rules
(url-safe slugs, ratings from 1 to 5, non-blank titles and comments) and
match the exact field names expected by the API's Pydantic request schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ["T-Shirts", "Jeans", "Wrist Watches", "Shoes"]
HOME_TAGS = ["new-arrival", "featured", "best-seller", "todays-deal"]


def unique_user_id() -> str:
    """Generate unique user IDs like 'user-lt-a1b2c3d4'."""
    return f"user-lt-{uuid.uuid4().hex[:8]}"


def product_data() -> dict:
    """Generate CreateProductRequest payload matching schema field names."""
    word = fake.word().lower()
    price = round(random.uniform(9.99, 299.99), 2)
    return {
        "name": f"{word.capitalize()} {fake.word().capitalize()}"[:255],
        "slug": f"{word}-{uuid.uuid4().hex[:6]}"[:200],
        "category": random.choice(CATEGORIES),
        "brand": fake.company()[:100],
        "description": fake.paragraph(nb_sentences=3),
        "tags": random.sample(HOME_TAGS, k=random.randint(1, 2)),
        "images": [f"/images/{uuid.uuid4().hex[:8]}.jpg"],
        "price": price,
        "listPrice": round(price * 1.2, 2),
        "countInStock": random.randint(0, 100),
        "isPublished": True,
    }


def review_data(product_id: str, user_id: str, rating: int | None = None) -> dict:
    """Generate a CreateUpdateReviewRequest `data` payload."""
    return {
        "product": product_id,
        "user": user_id,
        "userName": fake.name()[:100],
        "isVerifiedPurchase": random.random() < 0.7,
        "title": fake.sentence(nb_words=4)[:200],
        "comment": fake.paragraph(nb_sentences=2),
        "rating": rating or random.randint(1, 5),
    }
