# app/routers/customers.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.customers import Customer
from app.models.sales import Sale
from app.schemas.customer import CustomerCreate, CustomerUpdate, CustomerResponse

router = APIRouter(prefix="/customers", tags=["Customers"])


def _get_customer_or_404(db: Session, customer_id: int) -> Customer:
    customer = db.query(Customer).filter(Customer.id == customer_id).first()

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer not found with id: {customer_id}",
        )

    return customer


def _ensure_unique_cpf(db: Session, cpf: str, customer_id: int | None = None):
    query = db.query(Customer).filter(Customer.cpf == cpf)
    if customer_id is not None:
        query = query.filter(Customer.id != customer_id)

    if query.first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Customer with this CPF already exists",
        )


@router.post("", response_model=CustomerResponse, status_code=status.HTTP_201_CREATED)
def create_customer(customer_data: CustomerCreate, db: Session = Depends(get_db)):
    _ensure_unique_cpf(db, customer_data.cpf)

    customer = Customer(**customer_data.model_dump())

    db.add(customer)
    db.commit()
    db.refresh(customer)

    return customer


@router.get("", response_model=list[CustomerResponse])
def list_customers(db: Session = Depends(get_db)):
    return db.query(Customer).order_by(Customer.id).all()


@router.get("/cpf/{cpf}", response_model=CustomerResponse)
def get_customer_by_cpf(cpf: str, db: Session = Depends(get_db)):
    customer = db.query(Customer).filter(Customer.cpf == cpf).first()

    if not customer:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Customer not found with CPF: {cpf}",
        )

    return customer


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(customer_id: int, db: Session = Depends(get_db)):
    return _get_customer_or_404(db, customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(
    customer_id: int,
    customer_data: CustomerUpdate,
    db: Session = Depends(get_db),
):
    customer = _get_customer_or_404(db, customer_id)

    if customer_data.cpf is not None:
        _ensure_unique_cpf(db, customer_data.cpf, customer_id)

    for field, value in customer_data.model_dump(exclude_unset=True).items():
        setattr(customer, field, value)

    db.commit()
    db.refresh(customer)

    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(customer_id: int, db: Session = Depends(get_db)):
    customer = _get_customer_or_404(db, customer_id)

    if db.query(Sale).filter(Sale.customer_id == customer.id).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Customer has registered sales",
        )

    db.delete(customer)
    db.commit()

    return None
