"""Cart actions: the messages accepted by the cart reducer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CartActionType(Enum):
    ADD_ITEM = "ADD_ITEM"
    REMOVE_ITEM = "REMOVE_ITEM"
    OPEN_CART = "OPEN_CART"
    CLOSE_CART = "CLOSE_CART"
    TOGGLE_CHECKOUT = "TOGGLE_CHECKOUT"
    ORDER_PLACED = "ORDER_PLACED"


@dataclass(frozen=True)
class CartAction:
    """A request to transition the cart.

    ``type`` is kept as a plain string so that unrecognised actions can reach
    the reducer and be handled by its fallback policy.
    """

    type: str
    payload: dict[str, Any] = field(default_factory=dict)
    is_increment: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CartAction:
        """Parse the wire shape ``{"type", "payload", "isIncrement"}``.

        The increment flag is honoured both at the top level and inside the
        payload.
        """
        payload = dict(data.get("payload") or {})
        nested_increment = payload.pop("isIncrement", False)
        is_increment = bool(data.get("isIncrement") or nested_increment)
        return cls(type=str(data.get("type", "")), payload=payload, is_increment=is_increment)

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "payload": dict(self.payload), "isIncrement": self.is_increment}


def add_item(item_id, name: str, unit_price: float, quantity: int = 1) -> CartAction:
    return CartAction(
        type=CartActionType.ADD_ITEM.value,
        payload={"id": str(item_id), "name": name, "unitPrice": unit_price, "quantity": quantity},
    )


def increment_item(item_id, name: str | None = None, unit_price: float | None = None) -> CartAction:
    """Add exactly one unit of ``item_id``, as the cart's "+" control does."""
    payload: dict[str, Any] = {"id": str(item_id)}
    if name is not None:
        payload["name"] = name
    if unit_price is not None:
        payload["unitPrice"] = unit_price
    return CartAction(type=CartActionType.ADD_ITEM.value, payload=payload, is_increment=True)


def remove_item(item_id) -> CartAction:
    return CartAction(type=CartActionType.REMOVE_ITEM.value, payload={"id": str(item_id)})


def open_cart() -> CartAction:
    return CartAction(type=CartActionType.OPEN_CART.value)


def close_cart() -> CartAction:
    return CartAction(type=CartActionType.CLOSE_CART.value)


def toggle_checkout() -> CartAction:
    return CartAction(type=CartActionType.TOGGLE_CHECKOUT.value)


def order_placed() -> CartAction:
    return CartAction(type=CartActionType.ORDER_PLACED.value)
