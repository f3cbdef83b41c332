"""Pydantic request/response schemas for the Storefront API.

These are external contracts, separate from the cart state and form
objects they are built from.
"""

from typing import Any

from pydantic import BaseModel, Field

from storefront.cart.state import CartState
from storefront.checkout.form import CheckoutForm


# ---------------------------------------------------------------------------
# Menu
# ---------------------------------------------------------------------------
class MenuItemSchema(BaseModel):
    id: str
    name: str
    price: float = Field(ge=0)
    description: str = ""


# ---------------------------------------------------------------------------
# Cart
# ---------------------------------------------------------------------------
class CartActionRequest(BaseModel):
    type: str
    payload: dict[str, Any] = Field(default_factory=dict)
    is_increment: bool = Field(default=False, alias="isIncrement")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "type": "ADD_ITEM",
                    "payload": {"id": "1", "name": "Sushi", "unitPrice": 16.99, "quantity": 2},
                    "isIncrement": False,
                }
            ]
        }
    }


class CartLineSchema(BaseModel):
    id: str
    name: str
    unit_price: float
    quantity: int = Field(ge=1)


class CartStateResponse(BaseModel):
    items: list[CartLineSchema]
    total_amount: float
    total_item_count: int
    is_cart_open: bool
    is_checkout_open: bool
    is_order_placed: bool

    @classmethod
    def from_state(cls, state: CartState) -> "CartStateResponse":
        return cls(
            items=[
                CartLineSchema(id=line.id, name=line.name, unit_price=line.unit_price, quantity=line.quantity)
                for line in state.items
            ],
            total_amount=state.total_amount,
            total_item_count=state.total_item_count,
            is_cart_open=state.is_cart_open,
            is_checkout_open=state.is_checkout_open,
            is_order_placed=state.is_order_placed,
        )


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------
class FieldValueRequest(BaseModel):
    value: str


class CheckoutFormResponse(BaseModel):
    values: dict[str, str]
    errors: dict[str, str | None]
    touched: dict[str, bool]
    submittable: bool

    @classmethod
    def from_form(cls, form: CheckoutForm) -> "CheckoutFormResponse":
        return cls(
            values=form.values,
            errors=form.errors,
            touched=form.touched,
            submittable=form.is_submittable,
        )


class SubmissionResponse(BaseModel):
    status: str
    message: str
    order_id: str | None = None
    form: CheckoutFormResponse
    cart: CartStateResponse
