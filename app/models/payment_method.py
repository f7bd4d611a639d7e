# app/models/payment_method.py

import enum


class PaymentMethod(str, enum.Enum):
    CREDIT_CARD = "CREDIT_CARD"
    BANK_SLIP = "BANK_SLIP"
    PIX = "PIX"

    @property
    def description(self) -> str:
        return PAYMENT_METHOD_DESCRIPTIONS[self]

    @classmethod
    def codes(cls) -> list[str]:
        return [method.value for method in cls]


PAYMENT_METHOD_DESCRIPTIONS = {
    PaymentMethod.CREDIT_CARD: "Cartão de Crédito",
    PaymentMethod.BANK_SLIP: "Boleto",
    PaymentMethod.PIX: "PIX",
}
