# -*- coding: utf-8 -*-


from pathlib import Path
from dataclasses import dataclass
import os

from dotenv import load_dotenv

# ============================================================================
# Load .env file for local environment configuration
# ============================================================================
load_dotenv()

# ============================================================================
# Read settings from environment variables (from .env or system)
# ============================================================================
_PROJECT_ROOT = Path(__file__).parent.parent

# Storage Settings
_DATA_DIR = Path(os.getenv("SA_WIZARD_DATA_DIR", str(_PROJECT_ROOT / "data")))
_LOGS_DIR = Path(os.getenv("SA_WIZARD_LOGS_DIR", str(_PROJECT_ROOT / "logs")))

# Wizard Behaviour
_PROGRESS_POLICY = os.getenv("SA_WIZARD_PROGRESS_POLICY", "fixed").lower()
_DOUBLE_ACTIVATION = os.getenv("SA_WIZARD_DOUBLE_ACTIVATION", "true").lower() in ("true", "1", "yes")

# Logging
_LOG_LEVEL = os.getenv("SA_WIZARD_LOG_LEVEL", "INFO").upper()


# Progress policies
class ProgressPolicy:
    FIXED = "fixed"    # completed flags / TOTAL_STEPS (bug-compatible)
    ACTIVE = "active"  # completed active sections / active sections

    ALL = (FIXED, ACTIVE)


@dataclass
class Config:
    """Application configuration."""

    # Application Info
    APP_NAME: str = "Self-Assessment Wizard"
    APP_TITLE: str = "Self-Assessment Questionnaire"
    VERSION: str = "1.0.0"
    ORGANIZATION: str = "Self-Assessment"

    # Paths
    PROJECT_ROOT: Path = _PROJECT_ROOT
    DATA_DIR: Path = _DATA_DIR
    LOGS_DIR: Path = _LOGS_DIR

    # Persisted State
    # One record for the whole answer snapshot, overwritten on every change
    FORM_DATA_FILE: str = "form_data.json"
    FORM_DATA_SCHEMA_VERSION: int = 2
    # Retired onboarding-progress record, migrated then deleted on load
    LEGACY_ONBOARDING_FILE: str = "onboarding_data.json"

    # Progress
    # Fixed denominator for calculate_progress() under the "fixed" policy
    TOTAL_STEPS: int = 14
    PROGRESS_POLICY: str = _PROGRESS_POLICY if _PROGRESS_POLICY in ProgressPolicy.ALL else ProgressPolicy.FIXED

    # Navigation
    # Two "Next" activations inside the window force advancement
    DOUBLE_ACTIVATION_FORCE_ADVANCE: bool = _DOUBLE_ACTIVATION
    DOUBLE_ACTIVATION_WINDOW_MS: int = 300

    # Logging
    LOG_FILE: str = "app.log"
    LOG_PATH: Path = _LOGS_DIR / LOG_FILE
    LOG_MAX_BYTES: int = 5 * 1024 * 1024  # 5MB
    LOG_BACKUP_COUNT: int = 3
    LOG_LEVEL: str = _LOG_LEVEL  # Console level; the file always gets DEBUG

    # UI Settings
    WINDOW_MIN_WIDTH: int = 960
    WINDOW_MIN_HEIGHT: int = 720
    FONT_FAMILY: str = "Segoe UI"
    FONT_SIZE: int = 10

    # Branding Colors
    PRIMARY_COLOR: str = "#104B8D"
    PRIMARY_LIGHT: str = "#5EA1DB"
    BACKGROUND_COLOR: str = "#F5F7FF"
    BORDER_COLOR: str = "#DEE2E6"
    TEXT_COLOR: str = "#212529"
    INPUT_BG: str = "#FFFFFF"
    INPUT_FOCUS: str = "#5EA1DB"
    SUCCESS_COLOR: str = "#27AE60"
    WARNING_COLOR: str = "#F39C12"
    ERROR_COLOR: str = "#E74C3C"

    # Date Formats
    DATE_FORMAT: str = "%Y-%m-%d"

    @classmethod
    def form_data_path(cls) -> Path:
        """Location of the persisted answer snapshot."""
        return cls.DATA_DIR / cls.FORM_DATA_FILE

    @classmethod
    def legacy_onboarding_path(cls) -> Path:
        """Location of the retired onboarding-progress record."""
        return cls.DATA_DIR / cls.LEGACY_ONBOARDING_FILE


# Controlled vocabularies used by the detail sections
class Vocabularies:
    # Value, Label
    ACCOUNTING_METHODS = [
        ("cash", "Cash basis"),
        ("traditional", "Traditional accounting"),
    ]

    ASSET_TYPES = [
        ("shares", "Shares"),
        ("property", "Residential property"),
        ("crypto", "Cryptoassets"),
        ("business", "Business assets"),
        ("other", "Other"),
    ]

    FOREIGN_INCOME_TYPES = [
        ("savings", "Savings interest"),
        ("dividends", "Dividends"),
        ("employment", "Employment"),
        ("property", "Property"),
        ("other", "Other"),
    ]

    INVESTMENT_SCHEMES = [
        ("EIS", "Enterprise Investment Scheme (EIS)"),
        ("SEIS", "Seed Enterprise Investment Scheme (SEIS)"),
        ("VCT", "Venture Capital Trust (VCT)"),
        ("SITR", "Social Investment Tax Relief (SITR)"),
    ]

    OTHER_INCOME_TYPES = [
        ("dividends", "UK dividends"),
        ("interest", "UK savings interest"),
        ("benefits", "Taxable state benefits"),
        ("other", "Other"),
    ]
