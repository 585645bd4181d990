"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
The API speaks camelCase (numEmployees, companyHandle, firstName...); fields
are snake_case with camelCase aliases. Request bodies reject unknown keys.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


class RequestModel(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    def to_record(self) -> dict:
        """All fields, keyed by API name."""
        return self.model_dump(by_alias=True)

    def to_changes(self) -> dict:
        """Only the fields the client sent, keyed by API name."""
        return self.model_dump(by_alias=True, exclude_unset=True)


class ResponseModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def reject_null(value):
    """Optional on PATCH means "may be omitted", not "may be null"."""
    if value is None:
        raise ValueError("may not be null")
    return value


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(RequestModel):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)

class RegisterRequest(RequestModel):
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5, max_length=20)
    first_name: str = Field(..., min_length=1, max_length=30, alias="firstName")
    last_name: str = Field(..., min_length=1, max_length=30, alias="lastName")
    email: EmailStr

class TokenResponse(ResponseModel):
    token: str


# ============================================================
# USER SCHEMAS
# ============================================================

class UserCreate(RegisterRequest):
    is_admin: bool = Field(False, alias="isAdmin")

class UserUpdate(RequestModel):
    first_name: Optional[str] = Field(None, min_length=1, max_length=30, alias="firstName")
    last_name: Optional[str] = Field(None, min_length=1, max_length=30, alias="lastName")
    password: Optional[str] = Field(None, min_length=5, max_length=20)
    email: Optional[EmailStr] = None

    @field_validator("first_name", "last_name", "password", "email")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)

class UserResponse(ResponseModel):
    username: str
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    is_admin: bool = Field(..., alias="isAdmin")

class UserDetailResponse(UserResponse):
    jobs: List[int] = []

class UserEnvelope(ResponseModel):
    user: UserResponse

class UserDetailEnvelope(ResponseModel):
    user: UserDetailResponse

class UserTokenResponse(ResponseModel):
    user: UserResponse
    token: str

class UserListResponse(ResponseModel):
    users: List[UserResponse]

class AppliedResponse(ResponseModel):
    applied: int


# ============================================================
# COMPANY SCHEMAS
# ============================================================

class CompanyCreate(RequestModel):
    handle: str = Field(..., min_length=1, max_length=25)
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, max_length=2048, alias="logoUrl")

class CompanyUpdate(RequestModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, ge=0, alias="numEmployees")
    logo_url: Optional[str] = Field(None, max_length=2048, alias="logoUrl")

    @field_validator("name")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)

class CompanyResponse(ResponseModel):
    handle: str
    name: str
    description: Optional[str] = None
    num_employees: Optional[int] = Field(None, alias="numEmployees")
    logo_url: Optional[str] = Field(None, alias="logoUrl")

class CompanyJob(ResponseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None

class CompanyDetailResponse(CompanyResponse):
    jobs: List[CompanyJob] = []

class CompanyEnvelope(ResponseModel):
    company: CompanyResponse

class CompanyDetailEnvelope(ResponseModel):
    company: CompanyDetailResponse

class CompanyListResponse(ResponseModel):
    companies: List[CompanyResponse]


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(RequestModel):
    title: str = Field(..., min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)
    company_handle: str = Field(..., min_length=1, max_length=25, alias="companyHandle")

class JobUpdate(RequestModel):
    title: Optional[str] = Field(None, min_length=1)
    salary: Optional[int] = Field(None, ge=0)
    equity: Optional[Decimal] = Field(None, ge=0, le=1)

    @field_validator("title")
    @classmethod
    def check_not_null(cls, value):
        return reject_null(value)

class JobResponse(ResponseModel):
    id: int
    title: str
    salary: Optional[int] = None
    equity: Optional[Decimal] = None
    company_handle: str = Field(..., alias="companyHandle")

class JobEnvelope(ResponseModel):
    job: JobResponse

class JobListResponse(ResponseModel):
    jobs: List[JobResponse]


# ============================================================
# GENERIC SCHEMAS
# ============================================================

class DeletedResponse(ResponseModel):
    deleted: str
