"""Storefront bounded context: menu browsing, shopping cart and checkout.

The cart is client-side session state driven by a pure transition function;
menu items and order records are validated as domain value objects before
they cross the boundary to the remote catalog/order database.
"""

import structlog
from protean.domain import Domain

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
