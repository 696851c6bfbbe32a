"""Validation of HTTP responses returned by the Sling instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Collection, Optional

import httpx

from slingdeploy.modules.bundlesupport.domain.constants import BODY_EXCERPT_LENGTH
from slingdeploy.modules.bundlesupport.util.exceptions import (
    ResponseErrorKind,
    UnexpectedResponseError,
)

BodyPredicate = Callable[[str], bool]


@dataclass(frozen=True)
class ResponseOutcome:
    """Status code actually received plus the validation error, if any."""

    status_code: int
    error: Optional[UnexpectedResponseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> int:
        if self.error is not None:
            raise self.error
        return self.status_code


def excerpt(text: str, limit: int = BODY_EXCERPT_LENGTH) -> str:
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


def response_url(response: httpx.Response) -> Optional[str]:
    try:
        return str(response.request.url)
    except RuntimeError:
        # response was built without a request
        return None


def check_response(
    response: httpx.Response,
    allowed_status_codes: Collection[int],
    expected_content_type: Optional[str] = None,
    body_predicate: Optional[BodyPredicate] = None,
) -> ResponseOutcome:
    """Validate ``response`` without raising.

    The body is read completely and the response closed whatever the result,
    so callers must not read it again. A failing ``body_predicate`` wins over
    the status code check, which in turn wins over the content type check.
    """
    url = response_url(response)
    status = response.status_code
    try:
        response.read()
        if body_predicate is not None:
            content = response.text
            if not body_predicate(content):
                return ResponseOutcome(
                    status,
                    UnexpectedResponseError(
                        ResponseErrorKind.UNEXPECTED_CONTENT,
                        f"Unexpected response content returned from {url}: {excerpt(content)}",
                        url=url,
                        status_code=status,
                        reason_phrase=response.reason_phrase,
                        body_excerpt=excerpt(content),
                    ),
                )
        if status not in allowed_status_codes:
            return ResponseOutcome(
                status,
                UnexpectedResponseError(
                    ResponseErrorKind.UNEXPECTED_STATUS,
                    f"Unexpected response code {status}: {response.reason_phrase} from {url}",
                    url=url,
                    status_code=status,
                    reason_phrase=response.reason_phrase,
                ),
            )
        if expected_content_type is not None:
            actual = _media_type(response.headers.get("content-type"))
            if actual != expected_content_type.lower():
                return ResponseOutcome(
                    status,
                    UnexpectedResponseError(
                        ResponseErrorKind.UNEXPECTED_CONTENT_TYPE,
                        f"Unexpected content type returned from {url}, "
                        f"expected {expected_content_type} but was {actual}",
                        url=url,
                        status_code=status,
                        reason_phrase=response.reason_phrase,
                        content_type=actual,
                    ),
                )
    finally:
        response.close()
    return ResponseOutcome(status)


def validate_response(
    response: httpx.Response,
    allowed_status_codes: Collection[int],
    expected_content_type: Optional[str] = None,
    body_predicate: Optional[BodyPredicate] = None,
) -> int:
    """Return the received status code or raise :class:`UnexpectedResponseError`."""
    outcome = check_response(
        response,
        allowed_status_codes,
        expected_content_type=expected_content_type,
        body_predicate=body_predicate,
    )
    return outcome.raise_for_error()


def read_successful_body(response: httpx.Response) -> str:
    """Return the body text, raising for any status code of 300 or above."""
    url = response_url(response)
    try:
        response.read()
        if response.status_code >= 300:
            raise UnexpectedResponseError(
                ResponseErrorKind.UNEXPECTED_STATUS,
                f"Unexpected response code {response.status_code}: "
                f"{response.reason_phrase} from {url}",
                url=url,
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                body_excerpt=excerpt(response.text),
            )
        return response.text
    finally:
        response.close()


def _media_type(header_value: Optional[str]) -> Optional[str]:
    if header_value is None:
        return None
    return header_value.split(";", 1)[0].strip().lower()
