# Importing every model registers it on Base.metadata and lets
# string-based relationships resolve.

from app.models.brands import Brand
from app.models.categories import Category
from app.models.customers import Customer
from app.models.employees import Employee
from app.models.payment_method import PaymentMethod
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.models.sales import Sale
from app.models.suppliers import Supplier

__all__ = [
    "Brand",
    "Category",
    "Customer",
    "Employee",
    "PaymentMethod",
    "Product",
    "Sale",
    "SaleItem",
    "Supplier",
]
