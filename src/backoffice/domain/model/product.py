"""Product aggregate, owned by the catalog.

The ledger only ever reads products: it copies the current price into a
purchase line at creation time and never looks at it again.
"""

from __future__ import annotations

from dataclasses import dataclass

from backoffice.domain.exceptions import ValidationError
from backoffice.domain.model.value_objects import Money


@dataclass
class Product:
    """A product in the catalog.

    Mutable: the price changes over time and products get retired.
    Only active products can be purchased.
    """

    id: str
    name: str
    price: Money
    is_active: bool = True

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Existing purchases are unaffected; their lines hold their own copy.
        """
        if new_price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        self.price = new_price

    def deactivate(self) -> None:
        self.is_active = False

    def activate(self) -> None:
        self.is_active = True
