# app/models/suppliers.py

from sqlalchemy import Column, Integer, String

from app.database import Base


class Supplier(Base):
    __tablename__ = "suppliers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    cnpj = Column(String(18), unique=True, index=True, nullable=False)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
