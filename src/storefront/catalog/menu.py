"""Menu items served by the remote catalog."""

from protean.fields import Float, String, Text

from storefront.domain import storefront

DEMO_MENU = [
    {"name": "Sushi", "description": "Finest fish and veggies", "price": 22.99},
    {"name": "Schnitzel", "description": "A german specialty!", "price": 16.5},
    {"name": "Barbecue Burger", "description": "American, raw, meaty", "price": 12.99},
    {"name": "Green Bowl", "description": "Healthy...and green...", "price": 18.99},
]


@storefront.value_object
class MenuItem:
    """A dish on the menu as published by the remote catalog.

    The catalog stores dishes as a mapping keyed by a generated id; the key
    becomes ``item_id`` here.
    """

    item_id = String(required=True, max_length=255)
    name = String(required=True, max_length=255)
    price = Float(required=True, min_value=0.0)
    description = Text()

    @classmethod
    def from_record(cls, key, record: dict) -> "MenuItem":
        return cls(
            item_id=str(key),
            name=record.get("name"),
            price=record.get("price"),
            description=record.get("description") or "",
        )

    def to_payload(self) -> dict:
        return {
            "id": self.item_id,
            "name": self.name,
            "price": self.price,
            "description": self.description or "",
        }
