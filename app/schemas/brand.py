from pydantic import BaseModel, Field


class BrandCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Brand name, unique")
    country: str | None = None
    description: str | None = None


class BrandUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    country: str | None = None
    description: str | None = None


class BrandResponse(BaseModel):
    id: int
    name: str
    country: str | None
    description: str | None

    class Config:
        from_attributes = True
