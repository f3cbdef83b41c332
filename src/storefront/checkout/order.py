"""Order record: what the storefront sends to the orders path on checkout."""

import json
from datetime import UTC, datetime

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Integer, String, Text

from storefront.cart.state import CartState
from storefront.domain import storefront


@storefront.value_object
class OrderRecord:
    """Customer details plus a snapshot of the cart at submission time.

    Prices and quantities are copied from the cart, so the record is
    unaffected by anything that happens to the cart afterwards.
    """

    name = String(required=True, max_length=255)
    email = String(required=True, max_length=254)
    address = String(required=True, max_length=1000)
    phone = String(required=True, max_length=50)
    items = Text(required=True)  # JSON: list of {id, name, unitPrice, quantity}
    total_amount = Float(required=True, min_value=0.0)
    total_item_count = Integer(required=True, min_value=0)
    order_date = DateTime(required=True)

    @invariant.post
    def order_must_have_items(self):
        if not json.loads(self.items or "[]"):
            raise ValidationError({"items": ["An order must contain at least one item"]})

    @classmethod
    def from_checkout(cls, values: dict[str, str], cart: CartState, placed_at: datetime | None = None) -> "OrderRecord":
        return cls(
            name=values["name"].strip(),
            email=values["email"].strip(),
            address=values["address"].strip(),
            phone=values["phone"].strip(),
            items=json.dumps([line.to_dict() for line in cart.items]),
            total_amount=cart.total_amount,
            total_item_count=cart.total_item_count,
            order_date=placed_at or datetime.now(UTC),
        )

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "address": self.address,
            "phone": self.phone,
            "items": json.loads(self.items),
            "totalAmount": self.total_amount,
            "totalItemCount": self.total_item_count,
            "orderDate": self.order_date.isoformat(),
        }
