"""Seed the catalogue with sample products and the reviews store with reviews.

Creates a small published catalogue spread across the home page sections
(new-arrival, featured, best-seller, todays-deal), records some sales so
related products have a ranking, and writes a few reviews per product.

Prerequisites:
    1. Infrastructure running and schemas created: python src/manage.py setup-db
    2. PROTEAN_ENV=production so both domains use PostgreSQL

Usage:
    python scripts/seed_catalogue.py
    python scripts/seed_catalogue.py --reviews-per-product 12
"""

import argparse
import json
import random
import sys
import time

# Add src/ to path so we can import domain modules
sys.path.insert(0, "src")

SAMPLE_PRODUCTS = [
    ("Nike Mens Slim-fit Long-Sleeve T-Shirt", "T-Shirts", "Nike", ["new-arrival", "featured"], 21.8),
    ("Jerzees Long-Sleeve Heavyweight Blend T-Shirt", "T-Shirts", "Jerzees", ["featured"], 23.78),
    ("Jeans Relaxed Fit Straight Leg", "Jeans", "Levi's", ["best-seller"], 59.99),
    ("Seiko Automatic Dress Watch", "Wrist Watches", "Seiko", ["todays-deal", "featured"], 245.0),
    ("Skechers Walking Shoe", "Shoes", "Skechers", ["best-seller", "todays-deal"], 54.95),
    ("Casio Digital Sport Watch", "Wrist Watches", "Casio", ["new-arrival", "todays-deal"], 18.6),
]

REVIEW_TITLES = ["Great value", "Runs small", "Exactly as pictured", "Would buy again", "Not for me"]


def _slugify(name):
    return "-".join(name.lower().replace("'", "").split())


def main():
    parser = argparse.ArgumentParser(description="Seed the storefront with sample data")
    parser.add_argument("--reviews-per-product", type=int, default=5, help="Reviews per product (default: 5)")
    args = parser.parse_args()

    from catalogue.domain import catalogue
    from catalogue.product.creation import CreateProduct
    from catalogue.product.sales import RecordProductSale
    from protean.exceptions import ValidationError
    from reviews.domain import reviews
    from reviews.review.upsert import CreateUpdateReview

    catalogue.init()
    reviews.init()

    print(f"\n{'='*60}")
    print("  Storefront Seed")
    print(f"{'='*60}")
    print(f"  Products:             {len(SAMPLE_PRODUCTS):,}")
    print(f"  Reviews per product:  {args.reviews_per_product:,}")
    print(f"{'='*60}\n")

    start = time.monotonic()
    product_ids = []

    with catalogue.domain_context():
        for name, category, brand, tags, price in SAMPLE_PRODUCTS:
            slug = _slugify(name)
            try:
                product_id = catalogue.process(
                    CreateProduct(
                        name=name,
                        slug=slug,
                        category=category,
                        brand=brand,
                        description=f"{brand} {category.lower()} in the storefront sample catalogue.",
                        tags=json.dumps(tags),
                        images=json.dumps([f"/images/{slug}-1.jpg", f"/images/{slug}-2.jpg"]),
                        price=price,
                        list_price=round(price * 1.15, 2),
                        count_in_stock=random.randint(0, 80),
                        is_published=True,
                    ),
                    asynchronous=False,
                )
            except ValidationError as exc:
                print(f"  [SKIP] {slug}: {exc.messages}")
                continue

            catalogue.process(
                RecordProductSale(product_id=product_id, quantity=random.randint(1, 50)),
                asynchronous=False,
            )
            product_ids.append(product_id)
            print(f"  [{time.strftime('%H:%M:%S')}] Created {slug}")

    with reviews.domain_context():
        for product_id in product_ids:
            for i in range(args.reviews_per_product):
                reviews.process(
                    CreateUpdateReview(
                        product_id=product_id,
                        user_id=f"seed-user-{i + 1}",
                        user_name=f"Seed User {i + 1}",
                        rating=random.randint(1, 5),
                        title=random.choice(REVIEW_TITLES),
                        comment="Sample review written by the seed script.",
                        is_verified_purchase=random.random() < 0.7,
                    ),
                    asynchronous=False,
                )

    elapsed = time.monotonic() - start
    print(f"\n{'='*60}")
    print("  Seed Complete")
    print(f"{'='*60}")
    print(f"  Total time:   {elapsed:.1f}s")
    print(f"  Products:     {len(product_ids):,}")
    print(f"  Reviews:      {len(product_ids) * args.reviews_per_product:,}")
    print(f"{'='*60}")
    print("\n  Rating aggregates update once the catalogue engine consumes")
    print("  the review events: python src/server.py --domain catalogue\n")


if __name__ == "__main__":
    main()
