"""Custom exception types for the Lighthouse-to-spreadsheet reporter."""


class LighthouseSheetError(Exception):
    """Base exception for all recoverable reporter errors."""


class ConfigurationError(LighthouseSheetError):
    """Raised when runtime configuration values are missing or invalid."""


class AuthenticationError(LighthouseSheetError):
    """Raised when Google service-account credentials are unavailable or invalid."""


class ParseError(LighthouseSheetError):
    """Raised when a Lighthouse report is malformed or lacks a required field."""


class RepoQueryError(LighthouseSheetError):
    """Raised when a single git query fails."""


class SheetsApiError(LighthouseSheetError):
    """Raised when a Google Sheets API request fails or returns an unexpected response."""


class AppendError(LighthouseSheetError):
    """Raised when the header probe or a row append against the sheet fails."""
