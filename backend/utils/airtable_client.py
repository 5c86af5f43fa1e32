"""
Airtable metadata API client.
Creates and lists tables in a single base using a personal access token.
"""
from typing import Any, Dict, List, Optional

import requests

from utils.config import AIRTABLE_API_URL, AIRTABLE_BASE_ID


class ApiError(Exception):
    """Base class for failures talking to Airtable."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details


class MissingCredentialsError(ApiError):
    pass


class NetworkError(ApiError):
    pass


class UpstreamApiError(ApiError):
    def __init__(self, message: str, status_code: int, details: Optional[Any] = None):
        super().__init__(message, details)
        self.status_code = status_code

    @property
    def status_message(self) -> str:
        """Generic status line, ignoring any message Airtable sent back."""
        return _status_message(self.status_code)


class MalformedResponseError(ApiError):
    pass


def _response_body(resp: requests.Response) -> Optional[Any]:
    """Decoded JSON body, or None if the body is empty or not JSON."""
    try:
        return resp.json()
    except ValueError:
        return None


def _upstream_error_message(body: Optional[Any], status_code: int) -> str:
    """Pull body.error.message when present; otherwise a generic status message."""
    error = body.get('error') if isinstance(body, dict) else None
    message = error.get('message') if isinstance(error, dict) else None
    if isinstance(message, str) and message:
        return message
    return _status_message(status_code)


def _status_message(status_code: int) -> str:
    return f"Request failed with status code {status_code}"


class AirtableClient:
    def __init__(
        self,
        token: Optional[str],
        base_id: str = AIRTABLE_BASE_ID,
        api_url: str = AIRTABLE_API_URL,
    ):
        self.token = token
        self.base_id = base_id
        self.api_url = api_url.rstrip('/')

    @property
    def tables_url(self) -> str:
        return f"{self.api_url}/meta/bases/{self.base_id}/tables"

    def _headers(self, json_body: bool = False) -> Dict[str, str]:
        if not self.token:
            raise MissingCredentialsError('AIRTABLE_PAT is not configured')
        headers = {'Authorization': f"Bearer {self.token}"}
        if json_body:
            headers['Content-Type'] = 'application/json'
        return headers

    def _request(self, method: str, **kwargs) -> Dict[str, Any]:
        try:
            resp = requests.request(method, self.tables_url, **kwargs)
        except requests.RequestException as e:
            raise NetworkError(str(e) or e.__class__.__name__) from e

        body = _response_body(resp)
        if not resp.ok:
            # Non-JSON error pages (e.g. a gateway's HTML 502) are relayed as raw text
            raise UpstreamApiError(
                _upstream_error_message(body, resp.status_code),
                status_code=resp.status_code,
                details=body if body is not None else (resp.text or None),
            )
        if not isinstance(body, dict):
            raise MalformedResponseError('Airtable returned a non-object response body', details=body)
        return body

    def create_table(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a table from `schema` in the configured base.

        Returns:
            Dict with id, name and field_count of the created table.

        Raises:
            ApiError (or a subclass) on any failure.
        """
        body = self._request('POST', json=schema, headers=self._headers(json_body=True))

        table_id = body.get('id')
        if not table_id:
            raise MalformedResponseError('Airtable response is missing the table id', details=body)
        fields = body.get('fields')
        return {
            'id': table_id,
            'name': body.get('name'),
            'field_count': len(fields) if isinstance(fields, list) else 0,
        }

    def list_tables(self) -> List[str]:
        """Names of the tables in the configured base, in upstream order."""
        body = self._request('GET', headers=self._headers())

        tables = body.get('tables')
        if not isinstance(tables, list):
            raise MalformedResponseError('Airtable response is missing the tables list', details=body)
        return [t['name'] for t in tables if isinstance(t, dict) and t.get('name')]
