"""
配置文件 - 项目配置管理
"""
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import BaseModel, Field, field_validator
from typing import Optional


class CatAPISettings(BaseModel):
    base_url: str = "http://thecatapi.com/api"
    api_key: Optional[str] = None
    timeout: float = 10.0
    user_agent: str = "catapi-client/1.0"

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_is_unset(cls, v):
        # CAT_API__API_KEY= in .env means "no key"
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Settings(BaseSettings):
    """项目配置"""

    # 基础配置
    PROJECT_NAME: str = Field(default="Cat API Client")
    VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")

    # 分组配置：通过 CAT_API__API_KEY 等嵌套环境变量覆盖
    cat_api: CatAPISettings = Field(default_factory=CatAPISettings)

    # pydantic-settings v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="allow",
        env_nested_delimiter="__",
    )


settings = Settings()
