# app/routers/suppliers.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.suppliers import Supplier
from app.schemas.supplier import SupplierCreate, SupplierUpdate, SupplierResponse

router = APIRouter(prefix="/suppliers", tags=["Suppliers"])


def _get_supplier_or_404(db: Session, supplier_id: int) -> Supplier:
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first()

    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Supplier not found with id: {supplier_id}",
        )

    return supplier


def _ensure_unique_cnpj(db: Session, cnpj: str, supplier_id: int | None = None):
    query = db.query(Supplier).filter(Supplier.cnpj == cnpj)
    if supplier_id is not None:
        query = query.filter(Supplier.id != supplier_id)

    if query.first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Supplier with this CNPJ already exists",
        )


@router.post("", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED)
def create_supplier(supplier_data: SupplierCreate, db: Session = Depends(get_db)):
    _ensure_unique_cnpj(db, supplier_data.cnpj)

    supplier = Supplier(**supplier_data.model_dump())

    db.add(supplier)
    db.commit()
    db.refresh(supplier)

    return supplier


@router.get("", response_model=list[SupplierResponse])
def list_suppliers(db: Session = Depends(get_db)):
    return db.query(Supplier).order_by(Supplier.id).all()


@router.get("/cnpj/{cnpj:path}", response_model=SupplierResponse)
def get_supplier_by_cnpj(cnpj: str, db: Session = Depends(get_db)):
    supplier = db.query(Supplier).filter(Supplier.cnpj == cnpj).first()

    if not supplier:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Supplier not found with CNPJ: {cnpj}",
        )

    return supplier


@router.get("/{supplier_id}", response_model=SupplierResponse)
def get_supplier(supplier_id: int, db: Session = Depends(get_db)):
    return _get_supplier_or_404(db, supplier_id)


@router.put("/{supplier_id}", response_model=SupplierResponse)
def update_supplier(
    supplier_id: int,
    supplier_data: SupplierUpdate,
    db: Session = Depends(get_db),
):
    supplier = _get_supplier_or_404(db, supplier_id)

    if supplier_data.cnpj is not None:
        _ensure_unique_cnpj(db, supplier_data.cnpj, supplier_id)

    for field, value in supplier_data.model_dump(exclude_unset=True).items():
        setattr(supplier, field, value)

    db.commit()
    db.refresh(supplier)

    return supplier


@router.delete("/{supplier_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_supplier(supplier_id: int, db: Session = Depends(get_db)):
    supplier = _get_supplier_or_404(db, supplier_id)

    db.delete(supplier)
    db.commit()

    return None
