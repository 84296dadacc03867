from typing import Annotated

from fastapi import APIRouter, Query, status

from repositories import companies
from schemas.commons import AdminUser, DBConnection, Handle
from schemas.company import (
    CompanyCreateRequest,
    CompanyDeleteResponse,
    CompanyDetailResponse,
    CompanyListResponse,
    CompanyResponse,
    CompanySearchQuery,
    CompanyUpdateRequest,
)

router = APIRouter(
    prefix="/companies",
    tags=["COMPANIES"],
)


@router.post("", response_model=CompanyResponse, status_code=status.HTTP_201_CREATED)
async def create_company(_: AdminUser, company: CompanyCreateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 추가 (관리자)"""
    new_company = await companies.create(conn, company.model_dump(by_alias=True))
    return CompanyResponse(company=new_company)


@router.get("", response_model=CompanyListResponse)
async def get_companies(
        conn: DBConnection, query: Annotated[CompanySearchQuery, Query()]) -> CompanyListResponse:
    """
    회사 목록 조회
    - minEmployees / maxEmployees: 직원 수 범위 (min > max 이면 400)
    - nameLike: 이름 부분 일치 (대소문자 무시)
    - 그 외 검색 조건은 422
    """
    result = await companies.find_all(conn, **query.model_dump(exclude_none=True))
    return CompanyListResponse(companies=result)


@router.get("/{handle}", response_model=CompanyDetailResponse)
async def get_company(handle: Handle, conn: DBConnection) -> CompanyDetailResponse:
    """회사 상세 조회 (채용공고 포함)"""
    company = await companies.get(conn, handle)
    return CompanyDetailResponse(company=company)


@router.patch("/{handle}", response_model=CompanyResponse)
async def update_company(
        _: AdminUser, handle: Handle, update_data: CompanyUpdateRequest, conn: DBConnection) -> CompanyResponse:
    """회사 정보 수정 (관리자)"""
    update_fields = update_data.model_dump(exclude_unset=True, by_alias=True)
    company = await companies.update(conn, handle, update_fields)
    return CompanyResponse(company=company)


@router.delete("/{handle}", response_model=CompanyDeleteResponse)
async def delete_company(_: AdminUser, handle: Handle, conn: DBConnection) -> CompanyDeleteResponse:
    """회사 삭제 (관리자)"""
    await companies.remove(conn, handle)
    return CompanyDeleteResponse(deleted=handle)
