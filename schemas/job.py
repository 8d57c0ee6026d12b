from pydantic import ConfigDict, model_validator

from schemas.commons import CamelModel, Handle, Name, JobId, Salary, Equity
from schemas.company import Company


class JobCreateRequest(CamelModel):
    model_config = ConfigDict(extra='forbid')

    title: Name
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: Handle


class JobUpdateRequest(CamelModel):
    """id, companyHandle은 수정 불가"""
    model_config = ConfigDict(extra='forbid')

    title: Name | None = None
    salary: Salary | None = None
    equity: Equity | None = None

    @model_validator(mode='after')
    def check_title_not_null(self):
        if "title" in self.model_fields_set and self.title is None:
            raise ValueError("title은 null로 설정할 수 없습니다.")
        return self


class JobFilterParams(CamelModel):
    """GET /jobs 검색 조건 (알 수 없는 파라미터는 400)"""
    model_config = ConfigDict(extra='forbid')

    title: Name | None = None
    min_salary: Salary | None = None
    has_equity: bool | None = None


class Job(CamelModel):
    id: JobId
    title: str
    salary: Salary | None = None
    equity: Equity | None = None
    company_handle: str


class JobDetail(CamelModel):
    id: JobId
    title: str
    salary: Salary | None = None
    equity: Equity | None = None
    company: Company


class JobResponse(CamelModel):
    job: Job


class JobDetailResponse(CamelModel):
    job: JobDetail


class JobListResponse(CamelModel):
    jobs: list[Job]


class JobDeleteResponse(CamelModel):
    deleted: int
