from decimal import Decimal
from typing import Annotated

from fastapi import Depends
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncConnection

from utils.auth import ensure_admin, ensure_correct_user_or_admin
from utils.database import get_connection

DBConnection = Annotated[AsyncConnection, Depends(get_connection)]
AdminUser = Annotated[dict, Depends(ensure_admin)]
CorrectUserOrAdmin = Annotated[dict, Depends(ensure_correct_user_or_admin)]

Handle = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25, pattern=r"^[a-z0-9-]+$"),
    Field(description="회사 handle", examples=["anderson-arias-morrow"]),
]

Username = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25),
    Field(description="사용자 이름", examples=["testuser"]),
]

JobId = Annotated[int, Field(ge=1, description="채용공고 ID")]

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Title = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
SearchText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=50)]
LogoUrl = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500, pattern=r"^https?://")]

Count = Annotated[int, Field(ge=0)]
Salary = Annotated[int, Field(ge=0)]
Equity = Annotated[Decimal, Field(ge=0, le=1)]


class CamelModel(BaseModel):
    """API 필드는 camelCase, 파이썬 속성은 snake_case"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')
