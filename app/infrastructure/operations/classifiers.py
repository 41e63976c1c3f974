"""Error classifiers for HTTP exceptions.

Converts ``requests`` exceptions raised while talking to the GitHub API into
standardized OperationResult objects.

Usage:
    from infrastructure.operations.classifiers import classify_http_error

    try:
        response = requests.post(url, json=payload, timeout=60)
        response.raise_for_status()
    except requests.RequestException as exc:
        return classify_http_error(exc)
"""

from typing import Optional

import requests

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER = 60


def _retry_after(response: requests.Response) -> int:
    header_value = response.headers.get("Retry-After")
    if header_value:
        try:
            return int(header_value)
        except (ValueError, TypeError):
            pass  # Use default if header is malformed
    return DEFAULT_RETRY_AFTER


def classify_http_error(exc: Exception) -> OperationResult:
    """Classify an HTTP exception into an OperationResult.

    Status Code Mapping:
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401: Bad credentials → UNAUTHORIZED
    - 403: Forbidden → PERMANENT_ERROR
    - 404: Not found → NOT_FOUND
    - 5xx: Server error → TRANSIENT_ERROR
    - Other 4xx: Client error → PERMANENT_ERROR
    - No response (connection error, timeout) → TRANSIENT_ERROR

    Args:
        exc: Exception raised by ``requests``

    Returns:
        OperationResult with status, message, error_code and retry_after
    """
    response: Optional[requests.Response] = getattr(exc, "response", None)

    if response is None:
        return OperationResult.transient_error(
            f"Connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    status_code = response.status_code

    if status_code == 429:
        return OperationResult.error(
            OperationStatus.TRANSIENT_ERROR,
            "GitHub API rate limited",
            error_code="RATE_LIMITED",
            retry_after=_retry_after(response),
        )

    if status_code == 401:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            "GitHub API authentication failed",
            error_code="UNAUTHORIZED",
        )

    if status_code == 403:
        return OperationResult.permanent_error(
            "GitHub API authorization denied",
            error_code="FORBIDDEN",
        )

    if status_code == 404:
        return OperationResult.error(
            OperationStatus.NOT_FOUND,
            "GitHub resource not found",
            error_code="NOT_FOUND",
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"GitHub API server error ({status_code})",
            error_code="SERVER_ERROR",
        )

    if 400 <= status_code < 500:
        return OperationResult.permanent_error(
            f"GitHub API client error ({status_code}): {str(exc)}",
            error_code="HTTP_ERROR",
        )

    return OperationResult.permanent_error(
        f"GitHub API error: {str(exc)}",
        error_code="UNKNOWN_ERROR",
    )
