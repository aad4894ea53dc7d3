"""ApiHelper — logged HTTP verbs over a Playwright APIRequestContext."""

import logging
from typing import Any, Dict, Optional

from e2e.errors import StatusMismatch

Headers = Optional[Dict[str, str]]


class ApiHelper:
    """HTTP helper for test data setup, validation, and backend checks."""

    def __init__(self, request, logger: Optional[logging.Logger] = None):
        self.request = request
        self._logger = logger or logging.getLogger(__name__)

    async def get(self, url: str, headers: Headers = None):
        self._logger.info(f"GET request to: {url}")
        return await self.request.get(url, headers=headers)

    async def post(self, url: str, data: Any = None, headers: Headers = None):
        self._logger.info(f"POST request to: {url}")
        return await self.request.post(url, data=data, headers=headers)

    async def put(self, url: str, data: Any = None, headers: Headers = None):
        self._logger.info(f"PUT request to: {url}")
        return await self.request.put(url, data=data, headers=headers)

    async def delete(self, url: str, headers: Headers = None):
        self._logger.info(f"DELETE request to: {url}")
        return await self.request.delete(url, headers=headers)

    def validate_status(self, response, expected_status: int):
        status = response.status
        if status != expected_status:
            self._logger.error(f"Expected status {expected_status} but got {status}")
            raise StatusMismatch(expected_status, status, url=getattr(response, "url", None))
        self._logger.debug(f"Response status validated: {status}")

    async def parse_json(self, response) -> Any:
        return await response.json()
