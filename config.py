from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    secret_key: str = "secret-dev"
    password_pepper: str = "pepper-dev"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24
    bcrypt_work_factor: int = 12

    database_url: str = "postgresql://localhost:5432/jobly"
    db_pool_min_size: int = 5
    db_pool_max_size: int = 20

    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    @property
    def sqlalchemy_url(self) -> str:
        """asyncpg DSN를 SQLAlchemy async 드라이버 URL로 변환"""
        return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)


settings = Settings()
