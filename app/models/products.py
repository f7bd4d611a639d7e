# app/models/products.py

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, Numeric, ForeignKey
from sqlalchemy.orm import relationship

from app.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    size = Column(String, nullable=True)
    color = Column(String, nullable=True)
    price = Column(Numeric(10, 2), nullable=False)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)
    brand_id = Column(Integer, ForeignKey("brands.id"), nullable=False, index=True)

    category = relationship("Category", back_populates="products")
    brand = relationship("Brand", back_populates="products")

    __table_args__ = (
        Index("ix_products_category_brand", "category_id", "brand_id"),
        CheckConstraint("price > 0", name="ck_product_price_positive"),
    )
