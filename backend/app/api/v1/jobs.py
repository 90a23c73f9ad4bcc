"""
Job API Routes
"""
from fastapi import APIRouter, Depends, Request, status
from pydantic import ValidationError

from app.api.error_handlers import validation_messages
from app.core.errors import BadRequestError
from app.dependencies import get_job_repository, require_admin
from app.repositories.job_repository import JobRepository
from app.schemas.job import (
    JobCreate,
    JobUpdate,
    JobFilter,
    JobDetailResponse,
    JobListResponse,
    JobDeletedResponse,
)

router = APIRouter()


@router.get("", response_model=JobListResponse)
async def list_jobs(
    request: Request,
    repo: JobRepository = Depends(get_job_repository),
):
    """
    Job listing

    Optional filters in the query string:
    - title: case-insensitive, partial match
    - minSalary: jobs paying at least this much
    - hasEquity: "true" for jobs with non-zero equity

    Authorization required: none
    """
    if not request.query_params:
        return {"jobs": await repo.find_all()}

    try:
        query = JobFilter.model_validate(dict(request.query_params))
    except ValidationError as e:
        raise BadRequestError(validation_messages(e.errors())) from None

    filters = query.model_dump(by_alias=True, exclude_unset=True)
    return {"jobs": await repo.find_all(filters)}


@router.post("", response_model=JobDetailResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    body: JobCreate,
    _admin: dict = Depends(require_admin),
    repo: JobRepository = Depends(get_job_repository),
):
    """
    Job creation

    Authorization required: admin
    """
    job = await repo.create(
        title=body.title,
        company_handle=body.company_handle,
        salary=body.salary,
        equity=body.equity,
    )
    return {"job": job}


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(
    job_id: int,
    repo: JobRepository = Depends(get_job_repository),
):
    """
    Job detail

    Authorization required: none
    """
    return {"job": await repo.get(job_id)}


@router.patch("/{job_id}", response_model=JobDetailResponse)
async def update_job(
    job_id: int,
    body: JobUpdate,
    _admin: dict = Depends(require_admin),
    repo: JobRepository = Depends(get_job_repository),
):
    """
    Partial job update: title, salary and equity

    Authorization required: admin
    """
    data = body.model_dump(by_alias=True, exclude_unset=True)
    return {"job": await repo.update(job_id, data)}


@router.delete("/{job_id}", response_model=JobDeletedResponse)
async def delete_job(
    job_id: int,
    _admin: dict = Depends(require_admin),
    repo: JobRepository = Depends(get_job_repository),
):
    """
    Job deletion

    Authorization required: admin
    """
    await repo.remove(job_id)
    return {"deleted": job_id}
