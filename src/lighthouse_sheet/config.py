"""Configuration parsing and validation for the Lighthouse-to-spreadsheet reporter."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError

DEFAULT_SERVICE_ACCOUNT_FILE = "~/.lighthouse-to-spreadsheet/service-account.json"


class Settings(BaseSettings):
    """Values read from the process environment and an optional ``.env`` file."""

    LIGHTHOUSE_RESULT_PATH: Optional[str] = None
    SPREADSHEET_ID: Optional[str] = None
    SHEET_NAME: Optional[str] = None
    PROJECT_NAME: Optional[str] = None
    SERVICE_ACCOUNT_FILE: str = DEFAULT_SERVICE_ACCOUNT_FILE
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


@dataclass(frozen=True)
class Config:
    """Validated runtime settings used by a single reporting run."""

    lighthouse_result_path: Path
    spreadsheet_id: str
    sheet_name: str
    project_name: str
    service_account_file: Path
    log_level: str


def _pick(flag_value: Optional[str], setting_value: Optional[str]) -> str:
    """Prefer a non-blank command-line value over the environment value."""
    for value in (flag_value, setting_value):
        if value is not None and value.strip():
            return value.strip()
    return ""


def load_config(
    lighthouse_result: Optional[str] = None,
    spreadsheet_id: Optional[str] = None,
    sheet_name: Optional[str] = None,
    project_name: Optional[str] = None,
    service_account: Optional[str] = None,
    log_level: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Config:
    """Build and validate application configuration.

    Command-line values take precedence over environment variables, which in
    turn take precedence over the ``.env`` file.

    Args:
        lighthouse_result: Path to the Lighthouse JSON report.
        spreadsheet_id: Target Google spreadsheet id.
        sheet_name: Target sub-sheet name.
        project_name: Project label; defaults to the current directory name.
        service_account: Path to the service-account key file.
        log_level: Logging level name.
        settings: Pre-loaded settings; read from the environment when omitted.

    Returns:
        A validated ``Config`` instance.

    Raises:
        ConfigurationError: If the report path, spreadsheet id or sheet name
            is missing.
    """
    settings = settings if settings is not None else Settings()

    report_path = _pick(lighthouse_result, settings.LIGHTHOUSE_RESULT_PATH)
    if not report_path:
        raise ConfigurationError(
            "Missing Lighthouse report path. "
            "Pass --lighthouse-result or set 'LIGHTHOUSE_RESULT_PATH'."
        )

    resolved_spreadsheet_id = _pick(spreadsheet_id, settings.SPREADSHEET_ID)
    if not resolved_spreadsheet_id:
        raise ConfigurationError(
            "Missing spreadsheet id. Pass --spreadsheet-id or set 'SPREADSHEET_ID'."
        )

    resolved_sheet_name = _pick(sheet_name, settings.SHEET_NAME)
    if not resolved_sheet_name:
        raise ConfigurationError("Missing sheet name. Pass --sheet-name or set 'SHEET_NAME'.")

    resolved_project = _pick(project_name, settings.PROJECT_NAME) or Path.cwd().name
    key_file = _pick(service_account, settings.SERVICE_ACCOUNT_FILE) or DEFAULT_SERVICE_ACCOUNT_FILE

    return Config(
        lighthouse_result_path=Path(report_path),
        spreadsheet_id=resolved_spreadsheet_id,
        sheet_name=resolved_sheet_name,
        project_name=resolved_project,
        service_account_file=Path(key_file).expanduser(),
        log_level=(_pick(log_level, settings.LOG_LEVEL) or "INFO").upper(),
    )
