# app/routers/brands.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.brands import Brand
from app.models.products import Product
from app.schemas.brand import BrandCreate, BrandUpdate, BrandResponse

router = APIRouter(prefix="/brands", tags=["Brands"])


def _get_brand_or_404(db: Session, brand_id: int) -> Brand:
    brand = db.query(Brand).filter(Brand.id == brand_id).first()

    if not brand:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Brand not found with id: {brand_id}",
        )

    return brand


def _ensure_unique_name(db: Session, name: str, brand_id: int | None = None):
    query = db.query(Brand).filter(Brand.name == name)
    if brand_id is not None:
        query = query.filter(Brand.id != brand_id)

    if query.first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Brand with this name already exists",
        )


@router.post("", response_model=BrandResponse, status_code=status.HTTP_201_CREATED)
def create_brand(brand_data: BrandCreate, db: Session = Depends(get_db)):
    _ensure_unique_name(db, brand_data.name)

    brand = Brand(**brand_data.model_dump())

    db.add(brand)
    db.commit()
    db.refresh(brand)

    return brand


@router.get("", response_model=list[BrandResponse])
def list_brands(db: Session = Depends(get_db)):
    return db.query(Brand).order_by(Brand.name).all()


@router.get("/{brand_id}", response_model=BrandResponse)
def get_brand(brand_id: int, db: Session = Depends(get_db)):
    return _get_brand_or_404(db, brand_id)


@router.put("/{brand_id}", response_model=BrandResponse)
def update_brand(
    brand_id: int,
    brand_data: BrandUpdate,
    db: Session = Depends(get_db),
):
    brand = _get_brand_or_404(db, brand_id)

    if brand_data.name is not None:
        _ensure_unique_name(db, brand_data.name, brand_id)

    for field, value in brand_data.model_dump(exclude_unset=True).items():
        setattr(brand, field, value)

    db.commit()
    db.refresh(brand)

    return brand


@router.delete("/{brand_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_brand(brand_id: int, db: Session = Depends(get_db)):
    brand = _get_brand_or_404(db, brand_id)

    if db.query(Product).filter(Product.brand_id == brand.id).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Brand still has products",
        )

    db.delete(brand)
    db.commit()

    return None
