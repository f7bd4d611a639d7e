# =========================================================
# SALES ROUTER
#
# Thin HTTP layer over SaleService:
# - Writes are rate limited
# - total_value in every response is computed from the items
# =========================================================

from datetime import datetime

from fastapi import APIRouter, Depends, Query, Request, status

from app.core.config import settings
from app.core.rate_limiter import limiter
from app.schemas.sale import SaleCreate, SaleItemResponse, SaleResponse
from app.services.sales import SaleService, get_sale_service

router = APIRouter(prefix="/sales", tags=["Sales"])


# =========================================================
# LIST / READ
# =========================================================
@router.get("", response_model=list[SaleResponse])
def list_sales(service: SaleService = Depends(get_sale_service)):
    return service.list_sales()


@router.get("/date-range", response_model=list[SaleResponse])
def list_sales_by_date_range(
    start_date: datetime = Query(..., description="Inclusive lower bound (ISO 8601)"),
    end_date: datetime = Query(..., description="Inclusive upper bound (ISO 8601)"),
    service: SaleService = Depends(get_sale_service),
):
    return service.list_sales_by_date_range(start_date, end_date)


@router.get("/customer/{customer_id}", response_model=list[SaleResponse])
def list_sales_by_customer(
    customer_id: int,
    service: SaleService = Depends(get_sale_service),
):
    return service.list_sales_by_customer(customer_id)


@router.get("/employee/{employee_id}", response_model=list[SaleResponse])
def list_sales_by_employee(
    employee_id: int,
    service: SaleService = Depends(get_sale_service),
):
    return service.list_sales_by_employee(employee_id)


@router.get("/{sale_id}", response_model=SaleResponse)
def get_sale(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
):
    return service.get_sale(sale_id)


@router.get("/{sale_id}/items", response_model=list[SaleItemResponse])
def list_sale_items(
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
):
    return service.list_sale_items(sale_id)


# =========================================================
# CREATE / UPDATE / DELETE
# =========================================================
@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.SALES_WRITE_RATE_LIMIT)
def create_sale(
    request: Request,
    sale_data: SaleCreate,
    service: SaleService = Depends(get_sale_service),
):
    return service.create_sale(sale_data)


@router.put("/{sale_id}", response_model=SaleResponse)
@limiter.limit(settings.SALES_WRITE_RATE_LIMIT)
def update_sale(
    request: Request,
    sale_id: int,
    sale_data: SaleCreate,
    service: SaleService = Depends(get_sale_service),
):
    return service.update_sale(sale_id, sale_data)


@router.delete("/{sale_id}", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit(settings.SALES_WRITE_RATE_LIMIT)
def delete_sale(
    request: Request,
    sale_id: int,
    service: SaleService = Depends(get_sale_service),
):
    service.delete_sale(sale_id)

    return None
