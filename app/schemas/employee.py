from datetime import date
from pydantic import BaseModel, EmailStr, Field


class EmployeeCreate(BaseModel):
    name: str = Field(..., min_length=1)
    role: str | None = None
    email: EmailStr | None = None
    hire_date: date | None = None


class EmployeeUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    role: str | None = None
    email: EmailStr | None = None
    hire_date: date | None = None


class EmployeeResponse(BaseModel):
    id: int
    name: str
    role: str | None
    email: str | None
    hire_date: date | None

    class Config:
        from_attributes = True
