from typing import Annotated

from fastapi import APIRouter, Query, status

from repositories import jobs
from schemas.commons import AdminUser, DBConnection, JobId
from schemas.job import (
    JobCreateRequest,
    JobDeleteResponse,
    JobDetailResponse,
    JobListResponse,
    JobResponse,
    JobSearchQuery,
    JobUpdateRequest,
)

router = APIRouter(
    prefix="/jobs",
    tags=["JOBS"],
)


@router.post("", response_model=JobResponse, status_code=status.HTTP_201_CREATED)
async def create_job(_: AdminUser, job: JobCreateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 추가 (관리자)"""
    new_job = await jobs.create(conn, job.model_dump(by_alias=True))
    return JobResponse(job=new_job)


@router.get("", response_model=JobListResponse)
async def get_jobs(conn: DBConnection, query: Annotated[JobSearchQuery, Query()]) -> JobListResponse:
    """
    채용공고 목록 조회
    - minSalary: 최소 연봉
    - hasEquity: true 면 equity > 0 인 공고만
    - title: 제목 부분 일치 (대소문자 무시)
    """
    result = await jobs.find_all(conn, **query.model_dump(exclude_none=True))
    return JobListResponse(jobs=result)


@router.get("/{job_id}", response_model=JobDetailResponse)
async def get_job(job_id: JobId, conn: DBConnection) -> JobDetailResponse:
    """채용공고 상세 조회 (회사 정보 포함)"""
    job = await jobs.get(conn, job_id)
    return JobDetailResponse(job=job)


@router.patch("/{job_id}", response_model=JobResponse)
async def update_job(
        _: AdminUser, job_id: JobId, update_data: JobUpdateRequest, conn: DBConnection) -> JobResponse:
    """채용공고 수정 (관리자, id/companyHandle 은 변경 불가)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    job = await jobs.update(conn, job_id, update_fields)
    return JobResponse(job=job)


@router.delete("/{job_id}", response_model=JobDeleteResponse)
async def delete_job(_: AdminUser, job_id: JobId, conn: DBConnection) -> JobDeleteResponse:
    """채용공고 삭제 (관리자)"""
    await jobs.remove(conn, job_id)
    return JobDeleteResponse(deleted=job_id)
