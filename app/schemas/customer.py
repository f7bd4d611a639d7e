from pydantic import BaseModel, EmailStr, Field


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1)
    cpf: str = Field(..., min_length=11, max_length=14, description="Individual taxpayer id (CPF)")
    phone: str | None = None
    email: EmailStr


class CustomerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    cpf: str | None = Field(None, min_length=11, max_length=14)
    phone: str | None = None
    email: EmailStr | None = None


class CustomerResponse(BaseModel):
    id: int
    name: str
    cpf: str
    phone: str | None
    email: str

    class Config:
        from_attributes = True
