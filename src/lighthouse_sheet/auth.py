"""Google service-account authentication for the Sheets API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

import google.auth.exceptions
from google.auth.transport.requests import AuthorizedSession, Request
from google.oauth2 import service_account

from .errors import AuthenticationError

logger = logging.getLogger(__name__)

SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


def load_credentials(path: Union[str, Path]) -> service_account.Credentials:
    """Load and eagerly refresh service-account credentials.

    The refresh acquires an access token up front so a bad key or a revoked
    account fails before any report parsing happens.

    Raises:
        AuthenticationError: If the key file is missing, malformed, or the
            token request is rejected.
    """
    key_path = Path(path).expanduser()
    if not key_path.is_file():
        raise AuthenticationError(
            f"Service-account key file not found at '{key_path}'. "
            "Set 'SERVICE_ACCOUNT_FILE' or pass --service-account."
        )

    try:
        credentials = service_account.Credentials.from_service_account_file(
            str(key_path), scopes=SCOPES
        )
    except (ValueError, OSError) as exc:
        raise AuthenticationError(f"Invalid service-account key file '{key_path}': {exc}") from exc

    try:
        credentials.refresh(Request())
    except google.auth.exceptions.GoogleAuthError as exc:
        raise AuthenticationError(f"Failed to obtain Google access token: {exc}") from exc

    logger.debug(
        "Loaded service-account credentials",
        extra={"service_account_email": credentials.service_account_email},
    )
    return credentials


def build_session(path: Union[str, Path]) -> AuthorizedSession:
    """Return a ``requests`` session that attaches the service-account token."""
    return AuthorizedSession(load_credentials(path))
