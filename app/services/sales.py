# =========================================================
# SALE SERVICE
#
# Creates, replaces and deletes a sale together with its items
# as one unit of work.
#
# - Every rule is checked before the first write
# - A failed write rolls the whole session back
# - total_value is never accepted from the caller
# =========================================================

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from app.core.config import settings
from app.core.exceptions import InvalidArgumentError, NotFoundError, PersistenceError
from app.database import get_db
from app.models.customers import Customer
from app.models.employees import Employee
from app.models.payment_method import PaymentMethod
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.models.sales import Sale
from app.schemas.sale import SaleCreate
from app.services.totals import MAX_AMOUNT, calculate_subtotal, to_money

logger = logging.getLogger(__name__)


@dataclass
class ValidatedSale:
    customer_id: int
    employee_id: int
    sale_date: datetime
    payment_method: PaymentMethod
    discount: Decimal | None
    items: list[SaleItem]


def as_utc(value: datetime) -> datetime:
    """Naive timestamps are taken to be UTC already."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def checked_amount(value, label: str) -> Decimal:
    amount = Decimal(str(value))
    if abs(amount) >= MAX_AMOUNT:
        raise InvalidArgumentError(f"{label} must be below {MAX_AMOUNT}")
    return to_money(amount)


def parse_payment_method(value: str | None) -> PaymentMethod:
    if value is None or not value.strip():
        raise InvalidArgumentError("Payment method is required")

    try:
        return PaymentMethod(value.strip().upper())
    except ValueError:
        raise InvalidArgumentError(
            f"Invalid payment method: {value}. "
            f"Valid values: {', '.join(PaymentMethod.codes())}"
        )


class SaleService:
    def __init__(self, db: Session, require_items: bool | None = None):
        self.db = db
        if require_items is None:
            require_items = settings.SALE_REQUIRES_ITEMS
        self.require_items = require_items

    # -----------------------------------------------------
    # READS
    # -----------------------------------------------------
    def _sales_query(self):
        return self.db.query(Sale).options(selectinload(Sale.items))

    def get_sale(self, sale_id: int) -> Sale:
        sale = self._sales_query().filter(Sale.id == sale_id).first()

        if not sale:
            raise NotFoundError(f"Sale not found with id: {sale_id}")

        return sale

    def list_sales(self) -> list[Sale]:
        return self._sales_query().order_by(Sale.id).all()

    def list_sales_by_customer(self, customer_id: int) -> list[Sale]:
        return (
            self._sales_query()
            .filter(Sale.customer_id == customer_id)
            .order_by(Sale.id)
            .all()
        )

    def list_sales_by_employee(self, employee_id: int) -> list[Sale]:
        return (
            self._sales_query()
            .filter(Sale.employee_id == employee_id)
            .order_by(Sale.id)
            .all()
        )

    def list_sales_by_date_range(self, start_date: datetime, end_date: datetime) -> list[Sale]:
        start_date = as_utc(start_date)
        end_date = as_utc(end_date)

        if start_date > end_date:
            raise InvalidArgumentError("Start date must not be after end date")

        return (
            self._sales_query()
            .filter(Sale.sale_date.between(start_date, end_date))
            .order_by(Sale.sale_date, Sale.id)
            .all()
        )

    def list_sale_items(self, sale_id: int) -> list[SaleItem]:
        self.get_sale(sale_id)

        return (
            self.db.query(SaleItem)
            .filter(SaleItem.sale_id == sale_id)
            .order_by(SaleItem.id)
            .all()
        )

    # -----------------------------------------------------
    # VALIDATION
    # -----------------------------------------------------
    def validate(self, sale_data: SaleCreate) -> ValidatedSale:
        """
        Check a sale payload in a fixed order and stop at the first problem:

        payment method, sale date, item presence, each item (product,
        quantity, unit price), customer, employee, then the discount
        against the items subtotal.
        """
        try:
            return self._validate(sale_data)
        except (InvalidArgumentError, NotFoundError) as exc:
            logger.warning(f"Sale rejected: {exc.message}")
            raise

    def _validate(self, sale_data: SaleCreate) -> ValidatedSale:
        payment_method = parse_payment_method(sale_data.payment_method)

        sale_date = as_utc(sale_data.sale_date)
        if sale_date > datetime.now(timezone.utc):
            raise InvalidArgumentError("Sale date cannot be in the future")

        if self.require_items and not sale_data.items:
            raise InvalidArgumentError("Sale must contain at least one item")

        items = []
        for item in sale_data.items:
            product = self.db.get(Product, item.product_id)
            if not product:
                raise NotFoundError(f"Product not found with id: {item.product_id}")

            if item.quantity < 1:
                raise InvalidArgumentError(
                    f"Quantity must be at least 1 (product {item.product_id})"
                )

            unit_price = checked_amount(item.unit_price, "Unit price")
            if unit_price <= 0:
                raise InvalidArgumentError(
                    f"Unit price must be a positive value (product {item.product_id})"
                )

            items.append(
                SaleItem(
                    product_id=product.id,
                    quantity=item.quantity,
                    unit_price=unit_price,
                )
            )

        if not self.db.get(Customer, sale_data.customer_id):
            raise NotFoundError(f"Customer not found with id: {sale_data.customer_id}")

        if not self.db.get(Employee, sale_data.employee_id):
            raise NotFoundError(f"Employee not found with id: {sale_data.employee_id}")

        discount = None
        if sale_data.discount is not None:
            discount = checked_amount(sale_data.discount, "Discount")

            if discount < 0:
                raise InvalidArgumentError("Discount cannot be negative")

            subtotal = calculate_subtotal(items)
            if discount > subtotal:
                raise InvalidArgumentError(
                    f"Discount exceeds total: discount {discount} is greater than "
                    f"the items subtotal {subtotal}"
                )

        return ValidatedSale(
            customer_id=sale_data.customer_id,
            employee_id=sale_data.employee_id,
            sale_date=sale_date,
            payment_method=payment_method,
            discount=discount,
            items=items,
        )

    # -----------------------------------------------------
    # WRITES
    # -----------------------------------------------------
    def create_sale(self, sale_data: SaleCreate) -> Sale:
        validated = self.validate(sale_data)

        try:
            sale = Sale(
                customer_id=validated.customer_id,
                employee_id=validated.employee_id,
                sale_date=validated.sale_date,
                payment_method=validated.payment_method,
                discount=validated.discount,
            )
            sale.items = validated.items

            self.db.add(sale)
            self.db.commit()

        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to create sale")
            raise PersistenceError("Unable to complete sale")

        self.db.refresh(sale)

        logger.info(
            f"Sale {sale.id} created: {len(sale.items)} item(s), "
            f"total {sale.total_value}"
        )

        return sale

    def update_sale(self, sale_id: int, sale_data: SaleCreate) -> Sale:
        sale = self.get_sale(sale_id)
        validated = self.validate(sale_data)

        try:
            # Full replace: drop every existing item before inserting the new set
            sale.items.clear()
            self.db.flush()

            sale.customer_id = validated.customer_id
            sale.employee_id = validated.employee_id
            sale.sale_date = validated.sale_date
            sale.payment_method = validated.payment_method
            sale.discount = validated.discount
            sale.items.extend(validated.items)

            self.db.commit()

        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to update sale {sale_id}")
            raise PersistenceError("Unable to update sale")

        self.db.refresh(sale)

        logger.info(
            f"Sale {sale.id} updated: {len(sale.items)} item(s), "
            f"total {sale.total_value}"
        )

        return sale

    def delete_sale(self, sale_id: int) -> None:
        sale = self.get_sale(sale_id)

        try:
            sale.items.clear()
            self.db.flush()

            self.db.delete(sale)
            self.db.commit()

        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Failed to delete sale {sale_id}")
            raise PersistenceError("Unable to delete sale")

        logger.info(f"Sale {sale_id} deleted")


def get_sale_service(db: Session = Depends(get_db)) -> SaleService:
    return SaleService(db)
