"""Storefront FastAPI application.

Serves the menu, the cart and the checkout form of one storefront session
over JSON. Each request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.api import cart_router, checkout_router, menu_router
from storefront.config import load_settings
from storefront.domain import storefront
from storefront.session import build_session
from storefront.utils.logging import add_context, clear_context, configure_logging

# ---------------------------------------------------------------------------
# Domain and session initialization
# ---------------------------------------------------------------------------
settings = load_settings()
configure_logging()
storefront.init()
session = build_session(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await app.state.session.aclose()


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Food-ordering storefront: menu, cart and checkout",
    lifespan=lifespan,
)
app.state.session = session

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and bind request log context."""
    clear_context()
    add_context(method=request.method, path=request.url.path, origin=settings.origin)
    with storefront.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
app.include_router(menu_router)
app.include_router(cart_router)
app.include_router(checkout_router)


# ---------------------------------------------------------------------------
# Health / root
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(
        content={
            "status": "ok",
            "domain": storefront.name,
            "origin": settings.origin,
        }
    )
