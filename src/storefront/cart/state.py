"""Cart state: the lines in the cart, their derived totals and overlay flags.

State objects are immutable: the reducer builds a new ``CartState`` for every
transition. The JSON shape produced by ``to_dict`` is what the durable store
persists under the cart key.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any

DEMO_LINE = {"id": "1", "name": "Sushi and Veggies", "unitPrice": 16.99, "quantity": 1}


def round_money(amount: float) -> float:
    """Round to cents for display; collapses negative zero to ``0.0``."""
    return round(amount, 2) + 0.0


def _decimal(amount: float) -> Decimal:
    return Decimal(repr(amount))


def add_money(total: float, unit_price: float, quantity: int) -> float:
    """Return ``total + unit_price * quantity`` computed in decimal.

    Prices are added as the decimals they are written as, so repeated
    increments and decrements never accumulate binary floating point error.
    """
    return float(_decimal(total) + _decimal(unit_price) * quantity) + 0.0


@dataclass(frozen=True)
class CartLine:
    """One product in the cart together with its quantity."""

    id: str
    name: str
    unit_price: float
    quantity: int = 1

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("Cart line id must not be empty")
        if self.unit_price <= 0:
            raise ValueError(f"Cart line {self.id!r} must have a positive unit price")
        if self.quantity < 1:
            raise ValueError(f"Cart line {self.id!r} must have a quantity of at least 1")

    @property
    def subtotal(self) -> float:
        return round_money(add_money(0.0, self.unit_price, self.quantity))

    def with_quantity(self, quantity: int) -> CartLine:
        return replace(self, quantity=quantity)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "unitPrice": self.unit_price,
            "quantity": self.quantity,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartLine:
        # Snapshots from the earlier cart shape stored the price as "amount"
        price = data["unitPrice"] if "unitPrice" in data else data["amount"]
        return cls(
            id=str(data["id"]),
            name=str(data.get("name", "")),
            unit_price=float(price),
            quantity=int(data.get("quantity", 1)),
        )


@dataclass(frozen=True)
class CartState:
    """Canonical cart state.

    ``total_amount`` and ``total_item_count`` are maintained by the reducer as
    each transition touches ``items``; they are never set independently.
    """

    items: tuple[CartLine, ...] = field(default_factory=tuple)
    total_amount: float = 0.0
    total_item_count: int = 0
    is_cart_open: bool = False
    is_checkout_open: bool = False
    is_order_placed: bool = False

    def find(self, line_id: str) -> CartLine | None:
        return next((line for line in self.items if line.id == line_id), None)

    @property
    def is_empty(self) -> bool:
        return not self.items

    def computed_total_amount(self) -> float:
        """Total recomputed from scratch over ``items``."""
        return float(sum((_decimal(line.unit_price) * line.quantity for line in self.items), Decimal(0))) + 0.0

    def computed_item_count(self) -> int:
        return sum(line.quantity for line in self.items)

    def totals_consistent(self) -> bool:
        """Whether the maintained totals match the lines they summarise."""
        return (
            math.isclose(self.total_amount, self.computed_total_amount(), rel_tol=1e-12, abs_tol=1e-9)
            and self.total_item_count == self.computed_item_count()
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "items": [line.to_dict() for line in self.items],
            "totalAmount": self.total_amount,
            "totalItemCount": self.total_item_count,
            "isCartOpen": self.is_cart_open,
            "isCheckoutOpen": self.is_checkout_open,
            "isOrderPlaced": self.is_order_placed,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartState:
        """Rebuild a state from its persisted shape.

        Accepts snapshots written by the earlier cart shape, which used
        ``totalItemsNumber`` and had no checkout flag. Raises ``ValueError``,
        ``KeyError`` or ``TypeError`` for snapshots that are not a valid state.
        """
        items = tuple(CartLine.from_dict(item) for item in data.get("items") or [])
        if "totalItemCount" in data:
            item_count = data["totalItemCount"]
        else:
            item_count = data.get("totalItemsNumber", 0)

        state = cls(
            items=items,
            total_amount=float(data.get("totalAmount", 0)),
            total_item_count=int(item_count),
            is_cart_open=bool(data.get("isCartOpen", False)),
            is_checkout_open=bool(data.get("isCheckoutOpen", False)),
            is_order_placed=bool(data.get("isOrderPlaced", False)),
        )
        if not state.totals_consistent():
            raise ValueError("Cart totals do not match cart items")
        if state.is_order_placed and state.items:
            raise ValueError("A placed order cannot leave items in the cart")
        return state


def initial_cart_state(seed_demo_item: bool = False) -> CartState:
    """Default state for a session without a persisted snapshot."""
    if not seed_demo_item:
        return CartState()
    line = CartLine.from_dict(DEMO_LINE)
    return CartState(
        items=(line,),
        total_amount=add_money(0.0, line.unit_price, line.quantity),
        total_item_count=line.quantity,
    )
