from typing import Any, Optional


class SearchError(Exception):
    code = "SEARCH_ERROR"
    message = "Search failed"

    def __init__(self, message: str | None = None, details=None):
        self.message = message or self.message
        self.details = details
        super().__init__(self.message)


class TransportError(SearchError):
    code = "TRANSPORT_ERROR"
    message = "The request to the search service failed"


class ConnectionFailedError(TransportError):
    code = "CONNECTION_FAILED"
    message = "Could not reach the search service"


class HTTPStatusError(TransportError):
    code = "HTTP_STATUS"
    message = "The search service answered with an unexpected status"

    def __init__(
        self,
        status_code: int,
        message: str | None = None,
        details=None,
        api_error: Optional[Any] = None,
    ):
        self.status_code = status_code
        self.api_error = api_error
        super().__init__(message, details)


class MalformedResponseError(TransportError):
    code = "MALFORMED_RESPONSE"
    message = "The search service returned a body that is not JSON"


class DecodeError(SearchError):
    code = "DECODE_ERROR"
    message = "The search response does not have the expected shape"
