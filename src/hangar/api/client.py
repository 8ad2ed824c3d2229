"""
HTTP client for the CI server API.

Wraps httpx with bearer authentication, API call logging and
clean error messages.
"""

import time
from typing import Any, Dict, Optional

import httpx

from hangar.constants import DEFAULT_HEADERS, DEFAULT_REQUEST_TIMEOUT
from hangar.logging import get_logger, log_api_call
from hangar.utils.target_store import Target
from hangar.utils.url import construct_api_url


class ApiError(Exception):
    """The server rejected a request or could not be reached"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def extract_error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an error response"""
    error_msg = response.text
    try:
        error_data = response.json()
    except ValueError:
        return error_msg

    if isinstance(error_data, dict):
        for key in ("message", "error", "reason"):
            if error_data.get(key):
                return str(error_data[key])
        errors = error_data.get("errors")
        if isinstance(errors, list) and errors:
            return "; ".join(str(e) for e in errors)
    return error_msg


class ApiClient:
    """Authenticated client bound to a single target"""

    def __init__(
        self,
        target: Target,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.target = target
        self.timeout = timeout
        self.transport = transport
        self.logger = get_logger(f"hangar.client.{self.__class__.__name__}")

    def build_headers(self, headers: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        result = dict(DEFAULT_HEADERS)
        if self.target.token:
            result["Authorization"] = f"Bearer {self.target.token}"
        if headers:
            result.update(headers)
        return result

    def make_http_request(
        self,
        path: str,
        method: str = "GET",
        json_body: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """
        Send a request to the target and return the successful response.

        Raises:
            ApiError: On transport failures and non-2xx responses
        """
        url = construct_api_url(self.target.api_url, path)
        method_upper = method.upper()
        start_time = time.time()

        self.logger.debug(f"Starting {method_upper} request to {url}")

        try:
            with httpx.Client(
                timeout=self.timeout,
                verify=not self.target.insecure,
                transport=self.transport,
            ) as client:
                response = client.request(
                    method_upper,
                    url,
                    headers=self.build_headers(headers),
                    json=json_body,
                )
        except httpx.HTTPError as e:
            log_api_call(
                method=method_upper,
                url=url,
                duration=time.time() - start_time,
                error=str(e),
            )
            raise ApiError(f"Request to {url} failed: {e}") from e

        duration = time.time() - start_time

        if response.is_success:
            log_api_call(
                method=method_upper,
                url=url,
                status_code=response.status_code,
                duration=duration,
            )
            return response

        clean_error = f"{response.status_code} - {extract_error_message(response)}"
        log_api_call(
            method=method_upper,
            url=url,
            status_code=response.status_code,
            duration=duration,
            error=clean_error,
        )
        raise ApiError(clean_error, status_code=response.status_code)
