"""Storefront API package."""

from storefront.api.routes import cart_router, checkout_router, menu_router

__all__ = ["menu_router", "cart_router", "checkout_router"]
