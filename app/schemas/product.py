from decimal import Decimal
from pydantic import BaseModel, Field


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)
    size: str | None = None
    color: str | None = None

    price: Decimal = Field(
        ...,
        gt=0,
        lt=100_000_000,
        description="Price must be positive and below 100 million"
    )

    category_id: int
    brand_id: int


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    size: str | None = None
    color: str | None = None
    price: Decimal | None = Field(None, gt=0, lt=100_000_000)
    category_id: int | None = None
    brand_id: int | None = None


class ProductResponse(BaseModel):
    id: int
    name: str
    size: str | None
    color: str | None
    price: Decimal
    category_id: int
    brand_id: int

    class Config:
        from_attributes = True
