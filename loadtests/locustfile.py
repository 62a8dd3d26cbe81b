"""Storefront Load Testing: Locust entry point.

Discovers all user classes from the scenarios package.

Usage:
    # Web UI:
    locust -f loadtests/locustfile.py --host http://localhost:8000

    # Headless (CI mode):
    locust -f loadtests/locustfile.py StorefrontUser --headless \
           -u 50 -r 5 -t 300s --csv=results/loadtest
"""

import logging
import time

from locust import events

# Import all user classes so Locust discovers them
from loadtests.helpers.response import extract_error_detail
from loadtests.scenarios.storefront import StorefrontUser  # noqa: F401

logger = logging.getLogger("loadtest")


@events.request.add_listener
def on_request(request_type, name, response, exception, **_kw):
    """Log error details for every failed request.

    Fires globally for all scenarios, no per-task wiring needed.
    Extracts the API error body so you see "Title is required"
    instead of just "422".
    """
    if exception:
        logger.error("[EXCEPTION] %s %s: %s", request_type, name, exception)
    elif response is not None and response.status_code >= 400:
        detail = extract_error_detail(response)
        logger.error("[%s] %s %s: %s", response.status_code, request_type, name, detail)


@events.test_start.add_listener
def on_test_start(environment, **_kwargs):
    """Log a marker when load test begins."""
    print(f"\n[LOADTEST] Started at {time.strftime('%H:%M:%S')}")
    print(f"[LOADTEST] Target host: {environment.host}")
    print()


@events.test_stop.add_listener
def on_test_stop(**_kwargs):
    print(f"\n[LOADTEST] Stopped at {time.strftime('%H:%M:%S')}\n")
