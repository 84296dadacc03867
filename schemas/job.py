from typing import Annotated

from pydantic import Field

from schemas.commons import CamelModel, CamelRequest, Equity, Handle, JobId, Salary, SearchText, Title
from schemas.company import Company


class Job(CamelModel):
    id: JobId
    title: Title
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobListItem(Job):
    """목록 조회용 (회사 이름 포함)"""
    company_name: str | None = None


class JobDetail(CamelModel):
    """상세 조회용 (company_handle 대신 회사 정보 포함)"""
    id: JobId
    title: Title
    salary: Salary | None = None
    equity: Equity | None = None
    company: Company | None = None


class JobCreateRequest(CamelRequest):
    title: Title
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobUpdateRequest(CamelRequest):
    """id, company_handle 은 수정 불가, title 은 명시적 null 불가"""
    title: Title = None
    salary: Salary | None = None
    equity: Equity | None = None


class JobSearchQuery(CamelRequest):
    min_salary: Salary | None = None
    has_equity: Annotated[
        bool | None,
        Field(description=(
            "true 이면 equity > 0 인 공고만, false/미입력이면 전체. "
            "불리언 값(true/false/1/0/yes/no/on/off)만 허용하고 그 외 값은 422"
        ))
    ] = None
    title: Annotated[
        SearchText | None,
        Field(description="공고 제목에 포함된 검색어 (대소문자 무시)")
    ] = None


class JobResponse(CamelModel):
    job: Job


class JobDetailResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: list[JobListItem]


class JobDeleteResponse(CamelModel):
    deleted: JobId
