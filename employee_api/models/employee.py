from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Employee(BaseModel):
    """Employee data holder. Every attribute may be unset until assigned."""
    model_config = ConfigDict(from_attributes=True, validate_assignment=True)

    id: Optional[int] = Field(None, description="Database generated identifier")
    name: Optional[str] = Field(None, description="Full name")
    email: Optional[str] = Field(None, description="Contact email address")
    job_title: Optional[str] = Field(None, description="Job title")
    phone: Optional[str] = Field(None, description="Contact phone number")
    image_url: Optional[str] = Field(None, description="Profile image URL")
    employee_code: Optional[str] = Field(None, description="Unique employee code")
