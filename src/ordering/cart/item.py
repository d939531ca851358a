"""Cart item value object."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from shared.money import to_decimal


class Item(BaseModel):
    """A priced item. Immutable once built.

    Only ``price`` takes part in pricing; ``title`` is descriptive.
    """

    model_config = ConfigDict(frozen=True)

    price: Decimal = Field(ge=0)
    title: str | None = Field(default=None, max_length=255)

    @field_validator("price", mode="before")
    @classmethod
    def _coerce_price(cls, value):
        if isinstance(value, float):
            return to_decimal(value)
        return value

    def get_price(self) -> Decimal:
        return self.price
