# schemas/sale.py

from pydantic import BaseModel
from datetime import datetime
from typing import List
from decimal import Decimal

from app.models.payment_method import PaymentMethod


class SaleItemCreate(BaseModel):
    product_id: int
    quantity: int
    unit_price: Decimal


class SaleCreate(BaseModel):
    customer_id: int
    employee_id: int
    sale_date: datetime
    # Checked by the sale service so the error can list the valid codes
    payment_method: str | None = None
    discount: Decimal | None = None
    items: List[SaleItemCreate] = []


class SaleItemResponse(BaseModel):
    id: int
    sale_id: int
    product_id: int
    quantity: int
    unit_price: Decimal

    class Config:
        from_attributes = True


class SaleResponse(BaseModel):
    id: int
    customer_id: int
    employee_id: int
    sale_date: datetime
    discount: Decimal | None
    payment_method: PaymentMethod
    total_value: Decimal
    items: List[SaleItemResponse]

    class Config:
        from_attributes = True


class PaymentMethodResponse(BaseModel):
    code: str
    description: str
