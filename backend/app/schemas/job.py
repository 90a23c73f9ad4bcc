"""
Job Schemas
"""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List
from decimal import Decimal


class JobBase(BaseModel):
    """Job base schema"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1)
    salary: Optional[int] = Field(default=None, ge=0)
    equity: Optional[Decimal] = Field(default=None, ge=0, le=1)


class JobCreate(JobBase):
    """Job creation schema"""
    title: str = Field(min_length=1)
    company_handle: str = Field(alias="companyHandle", min_length=1, max_length=25)


class JobUpdate(JobBase):
    """Job update schema (companyHandle and id are not updatable)"""

    @field_validator("title")
    @classmethod
    def title_not_null(cls, v):
        if v is None:
            raise ValueError("title may not be null")
        return v


class JobFilter(BaseModel):
    """Job listing query string"""
    model_config = ConfigDict(extra="forbid")

    title: Optional[str] = Field(default=None, min_length=1)
    min_salary: Optional[int] = Field(default=None, alias="minSalary", ge=0)
    has_equity: Optional[bool] = Field(default=None, alias="hasEquity")

    @field_validator("has_equity", mode="before")
    @classmethod
    def only_literal_true(cls, v):
        # Query strings: "true" enables the filter, anything else disables it
        if isinstance(v, str):
            return v == "true"
        return v


class JobResponse(BaseModel):
    """Job response schema"""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str = Field(alias="companyHandle")


class JobDetailResponse(BaseModel):
    job: JobResponse


class JobListResponse(BaseModel):
    """Job list response schema"""
    jobs: List[JobResponse]


class JobDeletedResponse(BaseModel):
    deleted: int
