"""
Company Routes

POST /companies - Create company (admin only)
GET /companies - List companies, optional filters name/minEmployees/maxEmployees
GET /companies/{handle} - Get company with its jobs
PATCH /companies/{handle} - Partial update (admin only)
DELETE /companies/{handle} - Delete company (admin only)
"""

from fastapi import APIRouter, Depends, Query
from typing import Optional

from app.core.auth import ensure_admin
from app.models import company as company_model
from app.schemas.schemas import (
    CompanyCreate, CompanyUpdate, CompanyEnvelope, CompanyDetailEnvelope,
    CompanyListResponse, DeletedResponse
)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", response_model=CompanyEnvelope, status_code=201)
async def create_company(data: CompanyCreate, admin: dict = Depends(ensure_admin)):
    """Create a company. Duplicate handles are rejected."""
    company = company_model.create(data.to_record())
    return {"company": company}


@router.get("", response_model=CompanyListResponse)
async def list_companies(
    name: Optional[str] = Query(None, description="Case-insensitive substring of the name"),
    min_employees: Optional[int] = Query(None, ge=0, alias="minEmployees"),
    max_employees: Optional[int] = Query(None, ge=0, alias="maxEmployees"),
):
    """List all companies, or only those matching the filters."""
    if name is None and min_employees is None and max_employees is None:
        companies = company_model.find_all()
    else:
        companies = company_model.find_by_criteria(
            name=name, min_employees=min_employees, max_employees=max_employees
        )
    return {"companies": companies}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
async def get_company(handle: str):
    """Get a company and the jobs it posted."""
    return {"company": company_model.get(handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
async def update_company(handle: str, data: CompanyUpdate, admin: dict = Depends(ensure_admin)):
    """Update the given fields of a company. The handle cannot change."""
    company = company_model.update(handle, data.to_changes())
    return {"company": company}


@router.delete("/{handle}", response_model=DeletedResponse)
async def delete_company(handle: str, admin: dict = Depends(ensure_admin)):
    """Delete a company. Cascades to its jobs."""
    company_model.remove(handle)
    return {"deleted": handle}
