# app/domain/schemas.py
from pydantic import BaseModel, ConfigDict, field_serializer
from decimal import Decimal


class ProductView(BaseModel):
    """Niezmienny snapshot produktu zwracany przez API (response)."""

    id: int
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @field_serializer("price", when_used="json")
    def _price_as_number(self, price: Decimal | None) -> float | None:
        return None if price is None else float(price)


class HealthOut(BaseModel):
    status: str
    database: str
