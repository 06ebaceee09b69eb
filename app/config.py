# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
from dotenv import load_dotenv

load_dotenv()  # Load from .env file in project root

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
# API Settings
_API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:8080")
_API_TIMEOUT = int(os.getenv("API_TIMEOUT", "30"))
_API_TOKEN = os.getenv("API_TOKEN", "")
_API_VERIFY_SSL = os.getenv("API_VERIFY_SSL", "false").lower() in ("true", "1", "yes")

# Localization
_DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "ar")

# Crew import
_CREW_EXCEL_MAX_ROWS = int(os.getenv("CREW_EXCEL_MAX_ROWS", "500"))

# Logging
_LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
_LOG_TO_FILE = os.getenv("LOG_TO_FILE", "true").lower() in ("true", "1", "yes")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "MTCIT Maritime Transactions"
    APP_TITLE_AR: str = "معاملات الوحدات البحرية"
    VERSION: str = "1.0.0"

    # HTTP API Backend Settings
    # Reads from .env file (API_BASE_URL, API_TIMEOUT, API_TOKEN, API_VERIFY_SSL)
    API_BASE_URL: str = _API_BASE_URL
    API_TIMEOUT: int = _API_TIMEOUT
    API_TOKEN: str = _API_TOKEN
    API_VERIFY_SSL: bool = _API_VERIFY_SSL

    # Language used by tr() until set_language() is called
    DEFAULT_LANGUAGE: str = _DEFAULT_LANGUAGE

    # Crew Excel upload
    CREW_EXCEL_MAX_ROWS: int = _CREW_EXCEL_MAX_ROWS
    CREW_EXCEL_MAX_SIZE_MB: int = 5

    # Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    LOGS_DIR: Path = PROJECT_ROOT / "logs"

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL  # console handler level
    LOG_TO_FILE: bool = _LOG_TO_FILE


class PersonTypes:
    """Applicant types selected on the first step of every transaction."""

    INDIVIDUAL = "individual"
    COMPANY = "company"

    # Labels returned by the person-type lookup
    INDIVIDUAL_AR = "فرد"
    COMPANY_AR = "شركة"

    @classmethod
    def all_types(cls):
        return [cls.INDIVIDUAL, cls.COMPANY]

    @classmethod
    def is_company(cls, value) -> bool:
        if not value:
            return False
        return value.strip().lower() in (cls.COMPANY, cls.COMPANY_AR)

    @classmethod
    def is_individual(cls, value) -> bool:
        if not value:
            return False
        return value.strip().lower() in (cls.INDIVIDUAL, cls.INDIVIDUAL_AR)
