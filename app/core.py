from datetime import datetime, timezone

from pydantic import BaseModel, Field, StrictInt, field_validator

from .models import Product


class ProductIn(BaseModel):
    username: str = Field(min_length=1)
    name: str = Field(min_length=1)
    category: str = Field(min_length=1)
    price: StrictInt
    description: str = Field(min_length=1)

    @field_validator("price")
    @classmethod
    def _price_required(cls, v: int) -> int:
        # a zero price counts as missing
        if v == 0:
            raise ValueError("price is required")
        return v


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _make_product(p: ProductIn, created_at: datetime) -> Product:
    return Product(
        username=p.username,
        name=p.name,
        category=p.category,
        price=p.price,
        description=p.description,
        created_at=created_at,
    )
