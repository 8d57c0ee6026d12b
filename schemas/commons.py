from decimal import Decimal
from typing import Annotated

import asyncpg
from fastapi import Depends, Path
from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from utils.database import get_connection


class CamelModel(BaseModel):
    """JSON은 camelCase, 파이썬 속성은 snake_case"""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


Handle = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=1,
        max_length=25,
        pattern=r"^[a-z0-9-]+$",
    ),
    Field(description="회사 식별자", examples=["acme-corp"]),
]

Username = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=25),
]

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Text = Annotated[str, StringConstraints(min_length=1)]
Url = Annotated[str, StringConstraints(max_length=500, pattern=r"^https?://")]

# PostgreSQL INTEGER 범위
INT32_MAX = 2**31 - 1

Count = Annotated[int, Field(ge=0, le=INT32_MAX)]
Salary = Annotated[int, Field(ge=0, le=INT32_MAX)]
Equity = Annotated[Decimal, Field(ge=0, le=1, description="0 ~ 1 사이 지분율")]

JobId = Annotated[int, Field(ge=1, le=INT32_MAX, description="채용공고 ID")]
JobIdPath = Annotated[int, Path(ge=1, le=INT32_MAX, description="채용공고 ID")]

DBConnection = Annotated[asyncpg.Connection, Depends(get_connection)]
