# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()  # Load from .env file in project root


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

# Logging
_LOGS_DIR = Path(os.getenv("LOGS_DIR", str(_PROJECT_ROOT / "logs")))
_LOG_TO_FILE = _env_flag("LOG_TO_FILE", "true")

# Form validation behaviour
_VALIDATE_ON_MOUNT = _env_flag("FORM_VALIDATE_ON_MOUNT", "false")
_VALIDATE_ON_CHANGE = _env_flag("FORM_VALIDATE_ON_CHANGE", "true")


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "CRM Forms"
    APP_TITLE: str = "CRM Organization & Contact Wizards"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "CRM"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    LOGS_DIR: Path = _LOGS_DIR

    # Logging
    LOG_FILE: str = "crmforms.log"
    LOG_PATH: Path = LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_TO_FILE: bool = _LOG_TO_FILE

    # Validation
    # Validate a step as soon as it is shown, before any user interaction
    VALIDATE_ON_MOUNT: bool = _VALIDATE_ON_MOUNT
    # True: validate on every change, False: validate when a field loses focus
    VALIDATE_ON_CHANGE: bool = _VALIDATE_ON_CHANGE
    GENERIC_VALIDATION_MESSAGE: str = "Validation failed"
    GENERAL_ERROR_KEY: str = "general"
    REQUIRED_MESSAGE: str = "{label} is required"

    # UI Settings
    WINDOW_MIN_WIDTH: int = 720
    WINDOW_MIN_HEIGHT: int = 560
