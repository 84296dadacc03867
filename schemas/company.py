from typing import Annotated

from pydantic import Field

from schemas.commons import (
    CamelModel, CamelRequest, Count, Equity, Handle, JobId, LogoUrl, Name, Salary, SearchText, Title)


class CompanyJob(CamelModel):
    """회사 상세에 포함되는 채용공고"""
    id: JobId
    title: Title
    salary: Salary | None = None
    equity: Equity | None = None


class Company(CamelModel):
    handle: Handle
    name: Name
    description: str
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyDetail(Company):
    jobs: list[CompanyJob] = []


class CompanyCreateRequest(CamelRequest):
    handle: Handle
    name: Name
    description: str
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None


class CompanyUpdateRequest(CamelRequest):
    """handle 은 수정 불가, NOT NULL 컬럼은 명시적 null 불가"""
    name: Name = None
    description: str = None
    num_employees: Count | None = None
    logo_url: LogoUrl | None = None


class CompanySearchQuery(CamelRequest):
    min_employees: Count | None = None
    max_employees: Count | None = None
    name_like: Annotated[
        SearchText | None,
        Field(description="회사 이름에 포함된 검색어 (대소문자 무시)")
    ] = None


class CompanyResponse(CamelModel):
    company: Company


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[Company]


class CompanyDeleteResponse(CamelModel):
    deleted: Handle
