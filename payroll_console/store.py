import logging
from urllib.parse import quote

import requests
from pydantic import ValidationError

from payroll_console.exceptions import NetworkError
from payroll_console.models import EmployeeRecord, StoredEmployeeRecord

logger = logging.getLogger(__name__)


class RecordStoreClient:
    """
    Thin client for the employee REST API.

    Every call is a single request: no batching, no retry. Any failure is
    raised as NetworkError regardless of the status code.
    """

    def __init__(self, base_url, timeout=10, session=None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()

    def _url(self, emp_id=None):
        if emp_id is None:
            return self.base_url
        return f"{self.base_url}/{quote(str(emp_id), safe='')}"

    def _request(self, method, url, json=None):
        logger.debug("%s %s", method, url)
        try:
            response = self.session.request(method, url, json=json, timeout=self.timeout)
            response.raise_for_status()
        except requests.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.warning("%s %s failed with status %s", method, url, status)
            raise NetworkError(f"{method} {url} returned {status}", status_code=status) from e
        except requests.RequestException as e:
            logger.warning("%s %s failed: %s", method, url, e)
            raise NetworkError(f"{method} {url} failed: {e}") from e
        return response

    def list(self):
        """All employee records, in the order the backend returns them."""
        response = self._request('GET', self._url())
        try:
            data = response.json()
        except ValueError as e:
            raise NetworkError("Employee list is not valid JSON") from e

        if not isinstance(data, list):
            raise NetworkError("Employee list is not a JSON array")

        records = []
        for item in data:
            try:
                StoredEmployeeRecord.model_validate(item)
            except ValidationError as e:
                logger.warning("Rejected employee payload: %s", e)
                raise NetworkError("Malformed employee record in list response") from e
            records.append(item)
        return records

    def create(self, record):
        payload = EmployeeRecord.model_validate(record).to_payload()
        self._request('POST', self._url(), json=payload)

    def update(self, emp_id, record):
        payload = EmployeeRecord.model_validate(record).to_payload()
        payload['emp_id'] = str(emp_id)
        self._request('PUT', self._url(emp_id), json=payload)

    def delete(self, emp_id):
        self._request('DELETE', self._url(emp_id))
