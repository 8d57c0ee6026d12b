from pydantic import ConfigDict, model_validator

from schemas.commons import CamelModel, Handle, Name, Text, Url, Count, JobId, Salary, Equity


class CompanyCreateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    handle: Handle
    name: Name
    description: Text
    num_employees: Count | None = None
    logo_url: Url | None = None


class CompanyUpdateRequest(CamelModel):
    """handle은 수정 불가"""
    model_config = ConfigDict(extra='forbid')

    name: Name | None = None
    description: Text | None = None
    num_employees: Count | None = None
    logo_url: Url | None = None

    @model_validator(mode='after')
    def check_not_null_fields(self):
        for field in ("name", "description"):
            if field in self.model_fields_set and getattr(self, field) is None:
                raise ValueError(f"{field}은 null로 설정할 수 없습니다.")
        return self


class CompanyFilterParams(CamelModel):
    """GET /companies 검색 조건 (알 수 없는 파라미터는 400)"""
    model_config = ConfigDict(extra='forbid')

    name: Name | None = None
    min_employees: Count | None = None
    max_employees: Count | None = None

    @model_validator(mode='after')
    def check_employee_range(self):
        if (self.min_employees is not None and self.max_employees is not None
                and self.min_employees > self.max_employees):
            raise ValueError("minEmployees는 maxEmployees보다 클 수 없습니다.")
        return self


class CompanyJobItem(CamelModel):
    id: JobId
    title: str
    salary: Salary | None = None
    equity: Equity | None = None


class Company(CamelModel):
    handle: Handle
    name: str
    description: str
    num_employees: Count | None = None
    logo_url: str | None = None


class CompanyDetail(Company):
    jobs: list[CompanyJobItem] = []


class CompanyResponse(CamelModel):
    company: Company


class CompanyDetailResponse(CamelModel):
    company: CompanyDetail


class CompanyListResponse(CamelModel):
    companies: list[Company]


class CompanyDeleteResponse(CamelModel):
    deleted: str
