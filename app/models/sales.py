# models/sales.py

from sqlalchemy import CheckConstraint, Column, DateTime, Enum, ForeignKey, Index, Integer, Numeric
from sqlalchemy.orm import relationship

from app.database import Base
from app.models.payment_method import PaymentMethod
from app.services.totals import calculate_total_value


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False, index=True)

    sale_date = Column(DateTime(timezone=True), nullable=False, index=True)

    discount = Column(Numeric(10, 2), nullable=True)

    payment_method = Column(
        Enum(PaymentMethod, name="payment_method", native_enum=False, length=20),
        nullable=False,
    )

    items = relationship(
        "SaleItem",
        back_populates="sale",
        cascade="all, delete-orphan",
        order_by="SaleItem.id",
    )

    customer = relationship("Customer", back_populates="sales")
    employee = relationship("Employee", back_populates="sales")

    __table_args__ = (
        Index("ix_sales_customer_sale_date", "customer_id", "sale_date"),
        CheckConstraint("discount IS NULL OR discount >= 0", name="ck_sale_discount_non_negative"),
    )

    @property
    def total_value(self):
        # Never stored: always derived from the persisted items
        return calculate_total_value(self.items, self.discount)
