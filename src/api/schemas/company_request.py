"""Request schemas for Company settings API"""

from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class CompanySettingsRequestSchema(BaseModel):
    """
    Request schema for PATCH /companies/{company_id}/settings

    Omitted fields are left unchanged.
    """

    name: Optional[str] = Field(default=None, min_length=1, description="Company name")
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    gst_number: Optional[str] = Field(default=None, description="GST registration number")
    gst_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="GST rate as a percentage (e.g., 18.00)"
    )
    enable_discount: Optional[bool] = None
    default_discount_rate: Optional[Decimal] = Field(
        default=None,
        ge=0,
        le=100,
        description="Default discount as a percentage"
    )

    @field_validator("name", "gst_rate", "enable_discount", "default_discount_rate")
    @classmethod
    def reject_null(cls, v, info):
        """Omit a field to keep it; these columns cannot be cleared"""
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v

    class Config:
        json_schema_extra = {
            "example": {
                "gst_number": "27AAACS1234A1Z5",
                "gst_rate": "18.00"
            }
        }
