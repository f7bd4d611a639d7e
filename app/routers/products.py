# app/routers/products.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.brands import Brand
from app.models.categories import Category
from app.models.products import Product
from app.models.sale_items import SaleItem
from app.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)

router = APIRouter(
    prefix="/products",
    tags=["Products"],
)


def _get_product_or_404(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()

    if not product:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Product not found with id: {product_id}",
        )

    return product


def _ensure_category_and_brand(db: Session, category_id: int, brand_id: int):
    if not db.query(Category).filter(Category.id == category_id).first():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Category not found with id: {category_id}",
        )

    if not db.query(Brand).filter(Brand.id == brand_id).first():
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Brand not found with id: {brand_id}",
        )


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    db: Session = Depends(get_db),
):
    _ensure_category_and_brand(db, product_data.category_id, product_data.brand_id)

    product = Product(
        name=product_data.name,
        size=product_data.size,
        color=product_data.color,
        price=product_data.price,
        category_id=product_data.category_id,
        brand_id=product_data.brand_id,
    )

    db.add(product)
    db.commit()
    db.refresh(product)

    return product


@router.get("", response_model=list[ProductResponse])
def list_products(db: Session = Depends(get_db)):
    return db.query(Product).order_by(Product.id).all()


@router.get("/category/{category_id}", response_model=list[ProductResponse])
def list_products_by_category(category_id: int, db: Session = Depends(get_db)):
    return (
        db.query(Product)
        .filter(Product.category_id == category_id)
        .order_by(Product.id)
        .all()
    )


@router.get("/brand/{brand_id}", response_model=list[ProductResponse])
def list_products_by_brand(brand_id: int, db: Session = Depends(get_db)):
    return (
        db.query(Product)
        .filter(Product.brand_id == brand_id)
        .order_by(Product.id)
        .all()
    )


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return _get_product_or_404(db, product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: int,
    product_data: ProductUpdate,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    new_category_id = product_data.category_id if product_data.category_id is not None else product.category_id
    new_brand_id = product_data.brand_id if product_data.brand_id is not None else product.brand_id

    _ensure_category_and_brand(db, new_category_id, new_brand_id)

    if product_data.name is not None:
        product.name = product_data.name

    if product_data.size is not None:
        product.size = product_data.size

    if product_data.color is not None:
        product.color = product_data.color

    if product_data.price is not None:
        product.price = product_data.price

    product.category_id = new_category_id
    product.brand_id = new_brand_id

    db.commit()
    db.refresh(product)

    return product


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: int,
    db: Session = Depends(get_db),
):
    product = _get_product_or_404(db, product_id)

    # Sold products stay: sale items keep pointing at them
    if db.query(SaleItem).filter(SaleItem.product_id == product.id).first():
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Product is referenced by existing sales",
        )

    db.delete(product)
    db.commit()

    return None
