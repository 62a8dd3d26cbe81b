"""Storefront FastAPI application.

Multi-domain web server: the Catalogue and Reviews APIs plus the
server-rendered storefront pages. Each request is wrapped in the correct
domain context based on URL prefix.

Usage:
    uvicorn src.app:app --host 0.0.0.0 --port 8000 --reload
"""

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Domains are initialized at module level so uvicorn workers share them.
# PROTEAN_ENV controls which config overlay is applied:
#   - "test"       → event_processing = "sync"  (handlers fire in UoW)
#   - "production" → event_processing = "async" (handlers fire via Engine)
from catalogue.domain import catalogue  # noqa: E402
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from protean.integrations.fastapi import register_exception_handlers
from reviews.domain import reviews  # noqa: E402

catalogue.init()
reviews.init()

# ---------------------------------------------------------------------------
# Route-to-domain mapping
# ---------------------------------------------------------------------------
# "/product" covers both the /products API and the /product/{slug} pages
_ROUTE_DOMAIN_MAP = {
    "/product": catalogue,
    "/reviews": reviews,
}


def _resolve_domain(path: str):
    """Return the domain for the given request path, or None."""
    if path == "/":
        return catalogue
    for prefix, domain in _ROUTE_DOMAIN_MAP.items():
        if path.startswith(prefix):
            return domain
    return None


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront",
    description="E-commerce storefront with Catalogue & Reviews domains with server-rendered pages",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the correct Protean domain context for each request."""
    domain = _resolve_domain(request.url.path)
    if domain is not None:
        with domain.domain_context():
            response = await call_next(request)
        return response
    # No domain match, pass through (health check, docs, etc.)
    return await call_next(request)


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from catalogue.api import product_router  # noqa: E402
from reviews.api import review_router  # noqa: E402
from storefront.pages import page_router  # noqa: E402

app.include_router(product_router)
app.include_router(review_router)
app.include_router(page_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domains": {
                "catalogue": {"name": catalogue.name},
                "reviews": {"name": reviews.name},
            },
        }
    )
