"""
Job Routes

POST /jobs - Create job posting (admin only)
GET /jobs - List jobs, optional filters title/minSalary/hasEquity
GET /jobs/{job_id} - Get job details
PATCH /jobs/{job_id} - Partial update (admin only)
DELETE /jobs/{job_id} - Delete job (admin only)
"""

from fastapi import APIRouter, Depends, Query
from typing import Literal, Optional

from app.core.auth import ensure_admin
from app.models import job as job_model
from app.schemas.schemas import (
    JobCreate, JobUpdate, JobEnvelope, JobListResponse, DeletedResponse
)

router = APIRouter(prefix="/jobs", tags=["Jobs"])


@router.post("", response_model=JobEnvelope, status_code=201)
async def create_job(job: JobCreate, admin: dict = Depends(ensure_admin)):
    """Create a job posting for an existing company."""
    return {"job": job_model.create(job.to_record())}


@router.get("", response_model=JobListResponse)
async def list_jobs(
    title: Optional[str] = Query(None, description="Case-insensitive substring of the title"),
    min_salary: Optional[int] = Query(None, ge=0, alias="minSalary"),
    has_equity: Optional[Literal["true", "false"]] = Query(
        None, alias="hasEquity", description="true: equity > 0, false: no equity"
    ),
):
    """
    List all jobs, or only those matching the filters.

    hasEquity accepts only "true" or "false"; it is mapped to a bool here so
    the data layer only sees True, False or None.
    """
    equity = None if has_equity is None else has_equity == "true"
    if title is None and min_salary is None and equity is None:
        jobs = job_model.find_all()
    else:
        jobs = job_model.find_by_criteria(title=title, min_salary=min_salary, has_equity=equity)
    return {"jobs": jobs}


@router.get("/{job_id}", response_model=JobEnvelope)
async def get_job(job_id: int):
    """Get details of a specific job."""
    return {"job": job_model.get(job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
async def update_job(job_id: int, update: JobUpdate, admin: dict = Depends(ensure_admin)):
    """Update title, salary or equity. The id and company cannot change."""
    return {"job": job_model.update(job_id, update.to_changes())}


@router.delete("/{job_id}", response_model=DeletedResponse)
async def delete_job(job_id: int, admin: dict = Depends(ensure_admin)):
    """Delete a job posting. Cascades to applications."""
    job_model.remove(job_id)
    return {"deleted": str(job_id)}
