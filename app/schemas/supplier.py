from pydantic import BaseModel, EmailStr, Field


class SupplierCreate(BaseModel):
    name: str = Field(..., min_length=1)
    cnpj: str = Field(..., min_length=14, max_length=18, description="Company taxpayer id (CNPJ)")
    phone: str | None = None
    email: EmailStr | None = None


class SupplierUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    cnpj: str | None = Field(None, min_length=14, max_length=18)
    phone: str | None = None
    email: EmailStr | None = None


class SupplierResponse(BaseModel):
    id: int
    name: str
    cnpj: str
    phone: str | None
    email: str | None

    class Config:
        from_attributes = True
