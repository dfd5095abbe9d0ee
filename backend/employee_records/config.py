"""Application settings and configuration helpers."""
from functools import lru_cache
import os
from typing import Literal

from pydantic import BaseModel, Field
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").strip().lower() in {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Runtime configuration loaded from environment variables."""

    database_url: str = Field(
        default="sqlite+aiosqlite:///./employee_records.db", alias="DATABASE_URL"
    )
    list_strategy: Literal["server", "composed"] = Field(
        default="server", alias="EMPLOYEE_LIST_STRATEGY"
    )
    # Name of a stored procedure to call for listing, e.g. "dbo.GetAllEmployee".
    # Empty means the equivalent windowed SELECT is issued instead.
    list_procedure: str = Field(default="", alias="EMPLOYEE_LIST_PROCEDURE")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=False, alias="LOG_JSON")
    sql_echo: bool = Field(default=False, alias="SQL_ECHO")

    model_config = {
        "populate_by_name": True,
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance."""

    defaults = Settings.model_fields
    return Settings(
        database_url=os.getenv("DATABASE_URL", defaults["database_url"].default),
        list_strategy=os.getenv("EMPLOYEE_LIST_STRATEGY", defaults["list_strategy"].default),
        list_procedure=os.getenv("EMPLOYEE_LIST_PROCEDURE", defaults["list_procedure"].default),
        log_level=os.getenv("LOG_LEVEL", defaults["log_level"].default),
        log_json=_env_flag("LOG_JSON"),
        sql_echo=_env_flag("SQL_ECHO"),
    )
