# app/models.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A registered product. Immutable once stored."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    name: str
    category: str
    price: int
    description: str
    created_at: datetime = Field(alias="createdAt")
