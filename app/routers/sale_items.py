# =========================================================
# SALE ITEMS ROUTER (READ ONLY)
#
# Items are written only through /sales, which keeps the
# item set and the sale total consistent.
# =========================================================

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.sale_items import SaleItem
from app.schemas.sale import SaleItemResponse
from app.services.sales import SaleService, get_sale_service

router = APIRouter(prefix="/sale-items", tags=["Sale Items"])


@router.get("", response_model=list[SaleItemResponse])
def list_sale_items(db: Session = Depends(get_db)):
    return db.query(SaleItem).order_by(SaleItem.id).all()


@router.get("/sale/{sale_id}", response_model=list[SaleItemResponse])
def list_sale_items_by_sale(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
):
    return service.list_sale_items(sale_id)


@router.get("/product/{product_id}", response_model=list[SaleItemResponse])
def list_sale_items_by_product(product_id: int, db: Session = Depends(get_db)):
    return (
        db.query(SaleItem)
        .filter(SaleItem.product_id == product_id)
        .order_by(SaleItem.id)
        .all()
    )


@router.get("/{item_id}", response_model=SaleItemResponse)
def get_sale_item(item_id: int, db: Session = Depends(get_db)):
    item = db.query(SaleItem).filter(SaleItem.id == item_id).first()

    if not item:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Sale item not found with id: {item_id}",
        )

    return item
