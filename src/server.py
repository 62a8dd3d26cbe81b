"""Protean Engine runner for the storefront domains.

Starts Engine workers that process events asynchronously:
- OutboxProcessor: polls outbox table, publishes events to Redis Streams
- StreamSubscriptions: reads Redis Streams, invokes event handlers

The catalogue engine is the one that keeps product ratings current from
review events.

Usage:
    python src/server.py                    # Run both domain engines
    python src/server.py --domain reviews   # Run only reviews engine
    python src/server.py --domain catalogue # Run only catalogue engine
"""

import argparse
import asyncio

from protean.server.engine import Engine


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name == "catalogue":
        from catalogue.domain import catalogue

        catalogue.init()
        return catalogue
    elif name == "reviews":
        from reviews.domain import reviews

        reviews.init()
        return reviews
    else:
        raise ValueError(f"Unknown domain: {name}")


async def run(domain_names):
    engines = []
    for name in domain_names:
        domain = _get_domain(name)
        engines.append(Engine(domain))

    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Storefront Engine runner")
    parser.add_argument(
        "--domain",
        choices=["catalogue", "reviews"],
        help="Run a single domain engine (default: run all)",
    )
    args = parser.parse_args()

    domain_names = [args.domain] if args.domain else ["catalogue", "reviews"]

    asyncio.run(run(domain_names))


if __name__ == "__main__":
    main()
