"""Google Sheets REST API client for reading and appending cell values."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence
from urllib.parse import quote

import requests

from .errors import SheetsApiError


class SheetsClient:
    """Small, typed client for the Sheets API v4 ``values`` endpoints.

    The client sends requests through a caller-supplied session, normally a
    ``google.auth.transport.requests.AuthorizedSession``, and does not retry.
    """

    _BASE_URL = "https://sheets.googleapis.com/v4/spreadsheets"
    _VALUE_INPUT_OPTION = "RAW"
    _INSERT_DATA_OPTION = "INSERT_ROWS"

    def __init__(
        self,
        session: requests.Session,
        timeout_seconds: Optional[float] = None,
    ) -> None:
        """Initialize a Sheets API client.

        Args:
            session: Authenticated HTTP session.
            timeout_seconds: Optional per-request timeout; ``None`` waits
                indefinitely.
        """
        self._session = session
        self._timeout_seconds = timeout_seconds

    def _build_url(self, spreadsheet_id: str, range_ref: str, suffix: str = "") -> str:
        """Build a ``values`` URL with the A1 range quoted as one path segment."""
        return (
            f"{self._BASE_URL}/{quote(spreadsheet_id, safe='')}"
            f"/values/{quote(range_ref, safe='')}{suffix}"
        )

    def _request_json(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """Execute a request and decode its JSON object payload.

        Raises:
            SheetsApiError: If the request fails in transport, returns
                HTTP >= 400, or does not return a JSON object.
        """
        try:
            response = self._session.request(
                method,
                url,
                params=params,
                json=body,
                timeout=self._timeout_seconds,
            )
        except requests.RequestException as exc:
            raise SheetsApiError(f"Google Sheets request failed: {method} {url}") from exc

        if response.status_code >= 400:
            raise SheetsApiError(
                "Google Sheets API request failed: "
                f"{method} {url} returned {response.status_code} - {response.text}"
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise SheetsApiError(f"Google Sheets API returned invalid JSON: {method} {url}") from exc

        if not isinstance(payload, dict):
            raise SheetsApiError(f"Google Sheets API returned unexpected payload shape: {method} {url}")

        return payload

    def get_values(self, spreadsheet_id: str, range_ref: str) -> List[List[Any]]:
        """Read the rows of ``range_ref``; an empty range yields ``[]``."""
        payload = self._request_json("GET", self._build_url(spreadsheet_id, range_ref))
        return list(payload.get("values") or [])

    def append_values(
        self,
        spreadsheet_id: str,
        range_ref: str,
        rows: Sequence[Sequence[Any]],
    ) -> Dict[str, Any]:
        """Append ``rows`` after the table found in ``range_ref``.

        Values are stored as given (``RAW``) and always inserted as new rows
        so existing cells are never overwritten.
        """
        params = {
            "valueInputOption": self._VALUE_INPUT_OPTION,
            "insertDataOption": self._INSERT_DATA_OPTION,
        }
        body = {
            "range": range_ref,
            "majorDimension": "ROWS",
            "values": [list(row) for row in rows],
        }
        return self._request_json(
            "POST",
            self._build_url(spreadsheet_id, range_ref, ":append"),
            params=params,
            body=body,
        )
