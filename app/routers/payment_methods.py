# app/routers/payment_methods.py

from fastapi import APIRouter

from app.models.payment_method import PaymentMethod
from app.schemas.sale import PaymentMethodResponse

router = APIRouter(prefix="/payment-methods", tags=["Payment Methods"])


@router.get("", response_model=list[PaymentMethodResponse])
def list_payment_methods():
    return [
        PaymentMethodResponse(code=method.value, description=method.description)
        for method in PaymentMethod
    ]
