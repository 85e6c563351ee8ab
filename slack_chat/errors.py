from typing import Any, Optional


class SlackError(Exception):
    """
    Base class for errors raised by `SlackClient`.
    """

    pass


class SlackTransportError(SlackError):
    """
    Exception raised if the HTTP call to Slack failed.

    This covers connection, timeout and TLS errors, non-2xx responses and
    response bodies which are not a JSON object. The underlying exception is
    available as `__cause__`.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        retry_after: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        """HTTP status of the response, if one was received."""

        self.retry_after = retry_after
        """
        Seconds to wait before retrying, from the `Retry-After` header.

        Slack sets this on HTTP 429 (rate limited) responses. The client does not
        retry by itself.
        """


class SlackApiError(SlackError):
    """
    Exception raised if Slack reported `"ok": false` for a request.

    See https://api.slack.com/web#evaluating_responses.
    """

    def __init__(self, error: str, response: dict[str, Any]) -> None:
        super().__init__(error)
        self.error = error
        """Slack's error code, eg. `channel_not_found`."""

        self.response = response
        """The full response body."""
