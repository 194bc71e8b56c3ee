# realestate_api/core/config.py
from __future__ import annotations
from typing import Annotated, Optional, List, Literal
from urllib.parse import quote_plus
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from pydantic import Field, field_validator
from starlette.middleware.cors import CORSMiddleware


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    # --- App ---
    app_name: str = Field("Real Estate API", alias="APP_NAME")
    app_version: str = Field("1.0", alias="APP_VERSION")
    api_prefix: str = Field("/api/realestate", alias="API_PREFIX")

    # --- Database ---
    database_url: Optional[str] = Field(None, alias="DATABASE_URL")  # full URL override
    db_user: str = Field("realestate", alias="DB_USER")
    db_password: str = Field("realestatepw", alias="DB_PASSWORD")
    db_host: str = Field("127.0.0.1", alias="DB_HOST")
    db_port: int = Field(5432, alias="DB_PORT")
    db_name: str = Field("baseDeDatosIni", alias="DB_NAME")

    # --- Seeding / reports ---
    seed_on_startup: bool = Field(True, alias="SEED_ON_STARTUP")
    price_currency: str = Field("COP", alias="PRICE_CURRENCY")

    # --- Logging ---
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_format: Literal["standard", "json"] = Field("standard", alias="LOG_FORMAT")

    # --- CORS ---
    # Comma-separated in .env or leave default list
    allowed_origins: Annotated[List[str], NoDecode] = Field(
        [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ],
        alias="ALLOWED_ORIGINS",
    )

    @field_validator("allowed_origins", mode="before")
    @classmethod
    def _parse_origins(cls, v):
        # Accept "a,b,c" or JSON array; pass lists through.
        if v is None:
            return []
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    @property
    def sqlalchemy_url(self) -> str:
        if self.database_url:
            return self.database_url
        return (
            "postgresql+psycopg2://"
            f"{self.db_user}:{quote_plus(self.db_password)}@"
            f"{self.db_host}:{self.db_port}/{self.db_name}"
        )


settings = Settings()


def configure_cors(app, origins: Optional[List[str]] = None):
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins if origins is not None else settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
