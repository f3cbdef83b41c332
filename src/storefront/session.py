"""Storefront session: the cart, checkout form and services for one origin.

A session is built once by the hosting shell and passed to the HTTP routes
and CLI commands; nothing reaches the cart through module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.cart.reducer import UnknownActionPolicy
from storefront.cart.state import initial_cart_state
from storefront.cart.store import CartStore
from storefront.catalog.service import MenuCatalog
from storefront.checkout.form import CheckoutForm
from storefront.checkout.orchestrator import CheckoutOrchestrator
from storefront.config import Settings, load_settings
from storefront.remote import RemoteDatabase, RemoteService, create_database
from storefront.storage import DurableStore, create_store


@dataclass
class StorefrontSession:
    settings: Settings
    cart: CartStore
    form: CheckoutForm
    checkout: CheckoutOrchestrator
    catalog: MenuCatalog
    remote: RemoteService

    async def aclose(self) -> None:
        await self.remote.aclose()


def build_session(
    settings: Settings | None = None,
    storage: DurableStore | None = None,
    database: RemoteDatabase | None = None,
) -> StorefrontSession:
    """Wire a session from settings; ``storage`` and ``database`` override the configured adapters."""
    settings = settings or load_settings()
    cart = CartStore(
        storage if storage is not None else create_store(settings),
        key=settings.cart_key,
        default_state=initial_cart_state(settings.seed_demo_item),
        unknown_policy=UnknownActionPolicy(settings.unknown_action),
    )
    remote = RemoteService(database if database is not None else create_database(settings))
    form = CheckoutForm()
    return StorefrontSession(
        settings=settings,
        cart=cart,
        form=form,
        checkout=CheckoutOrchestrator(cart, form, remote, orders_path=settings.orders_path),
        catalog=MenuCatalog(remote, path=settings.menu_path),
        remote=remote,
    )
