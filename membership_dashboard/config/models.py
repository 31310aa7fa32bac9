from typing import Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_API_BASE_URL = "http://localhost:8000/api"


class ApiConfig(BaseModel):
    base_url: str = DEFAULT_API_BASE_URL
    plans_path: str = "/membership-plans"

    @field_validator("base_url")
    @classmethod
    def _http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return value.rstrip("/")

class StatsConfig(BaseModel):
    memo_key: Literal["identity", "structural"] = "structural"

class PaginationConfig(BaseModel):
    per_page: int = Field(default=10, ge=1)

class LoggingConfig(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

class DashboardConfig(BaseModel):
    api: ApiConfig = ApiConfig()
    stats: StatsConfig = StatsConfig()
    pagination: PaginationConfig = PaginationConfig()
    logging: LoggingConfig = LoggingConfig()
