# app/models/customers.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from app.database import Base


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    cpf = Column(String(14), unique=True, index=True, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=False)

    sales = relationship("Sale", back_populates="customer")
