"""
Product Model
=============

Domain model representing a sellable product.
"""
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from salesapp.domain.exceptions import ValidationError

NAME_MAX_LENGTH = 150
CODE_MAX_LENGTH = 50

CENTS = Decimal("0.01")


def to_money(value: Union[Decimal, int, float, str]) -> Decimal:
    """Convert a numeric value to a Decimal rounded to cents."""
    try:
        return Decimal(str(value)).quantize(CENTS)
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid monetary value: {value!r}")


@dataclass
class Product:
    """
    Product domain model.

    ``code`` is unique and compared case-sensitively.
    ``value`` is the current unit price; orders copy it at creation time.
    """
    name: str
    code: str
    value: Decimal
    id: Optional[int] = None

    def __post_init__(self) -> None:
        self.rename(self.name)
        self.change_code(self.code)
        self.change_value(self.value)

    def rename(self, new_name: str) -> None:
        """Update product name."""
        if not new_name or not new_name.strip():
            raise ValidationError("Name cannot be empty")
        if len(new_name.strip()) > NAME_MAX_LENGTH:
            raise ValidationError(f"Name cannot exceed {NAME_MAX_LENGTH} characters")
        self.name = new_name.strip()

    def change_code(self, new_code: str) -> None:
        """Update product code."""
        if not new_code or not new_code.strip():
            raise ValidationError("Code cannot be empty")
        if len(new_code.strip()) > CODE_MAX_LENGTH:
            raise ValidationError(f"Code cannot exceed {CODE_MAX_LENGTH} characters")
        self.code = new_code.strip()

    def change_value(self, new_value: Union[Decimal, int, float, str]) -> None:
        """Update unit price. Existing orders are not affected."""
        money = to_money(new_value)
        if money < 0:
            raise ValidationError("Value cannot be negative")
        self.value = money
