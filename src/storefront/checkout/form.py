"""Checkout form: field values, validation errors and touched flags.

Validation runs in two strengths. Every change runs a light pass: emptiness
is always checked, but the email pattern is only enforced once the field has
been blurred at least once. Blurring a field marks it touched and runs the
strict pass. An email typed but never blurred therefore shows no error, while
the same value is an error straight after the first blur and stays strictly
validated on every later keystroke.
"""

from __future__ import annotations

import re
from enum import Enum


class FieldRule(Enum):
    TEXT = "text"
    EMAIL = "email"
    NUMBER = "number"


CHECKOUT_RULES: dict[str, FieldRule] = {
    "name": FieldRule.TEXT,
    "email": FieldRule.EMAIL,
    "address": FieldRule.TEXT,
    "phone": FieldRule.NUMBER,
}

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NUMBER_PATTERN = re.compile(r"^\s*[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?\s*$")

INVALID_EMAIL = "Invalid email address"
NOT_A_NUMBER = "Value must be a number"


def required_message(field: str) -> str:
    return f"{field} is required."


class CheckoutForm:
    def __init__(self, rules: dict[str, FieldRule] | None = None) -> None:
        self._rules = dict(rules or CHECKOUT_RULES)
        self._values: dict[str, str] = {}
        self._errors: dict[str, str | None] = {}
        self._touched: dict[str, bool] = {}
        self.reset()

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._rules)

    @property
    def values(self) -> dict[str, str]:
        return dict(self._values)

    @property
    def errors(self) -> dict[str, str | None]:
        return dict(self._errors)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._touched)

    def update_value(self, field: str, raw_value: str) -> None:
        """Record a change to ``field`` and run the light validation pass."""
        self._check_field(field)
        value = "" if raw_value is None else str(raw_value)
        self._values[field] = value
        self._validate(field, value, strict=False)

    def mark_touched(self, field: str) -> None:
        """Record that ``field`` lost focus and run the strict validation pass."""
        self._check_field(field)
        self._touched[field] = True
        self._validate(field, self._values[field], strict=True)

    def touch_all(self) -> None:
        for field in self._rules:
            self.mark_touched(field)

    def reset(self) -> None:
        self._values = {field: "" for field in self._rules}
        self._errors = {}
        self._touched = {}

    @property
    def is_complete(self) -> bool:
        return all(value.strip() for value in self._values.values())

    @property
    def has_errors(self) -> bool:
        return any(self._errors.values())

    @property
    def is_submittable(self) -> bool:
        """Every field filled in and no field carrying an error."""
        return self.is_complete and not self.has_errors

    def _check_field(self, field: str) -> None:
        if field not in self._rules:
            raise KeyError(f"Unknown checkout field: {field!r}")

    def _validate(self, field: str, value: str, strict: bool) -> None:
        if value.strip() == "":
            self._errors[field] = required_message(field)
            return

        rule = self._rules[field]
        if rule is FieldRule.EMAIL:
            enforce = strict or self._touched.get(field, False)
            self._errors[field] = INVALID_EMAIL if enforce and not EMAIL_PATTERN.match(value) else None
        elif rule is FieldRule.NUMBER:
            self._errors[field] = None if NUMBER_PATTERN.match(value) else NOT_A_NUMBER
        else:
            self._errors[field] = None
