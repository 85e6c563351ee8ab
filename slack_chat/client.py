from getpass import getpass
import logging
import os
from typing import Any, Optional, Self

import requests

from .chat import ChatPostMessageArguments, ChatResponse
from .errors import SlackApiError, SlackTransportError

logger = logging.getLogger(__name__)


class SlackClient:
    """
    Client for Slack's `chat.*` Web API methods.

    The client holds nothing but its token and settings, so a single instance
    can be shared between threads. Each method makes exactly one HTTP request
    and never retries.

    See https://api.slack.com/web.
    """

    def __init__(
        self,
        token: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        base_url: str = "https://slack.com/api",
    ) -> None:
        """
        :param token: Bot or user token (`xoxb-...`). Not validated until Slack sees it.
        :param session: Session to send requests with. Defaults to `requests.post`.
        :param timeout: Timeout in seconds applied to every request
        :param base_url: Root URL of the Web API
        """
        self.token = token
        self.session = session
        self.timeout = timeout
        self.base_url = base_url.rstrip("/")

    def post_message(self, arguments: ChatPostMessageArguments) -> ChatResponse:
        """
        Post a message to a Slack channel.

        See https://api.slack.com/methods/chat.postMessage.

        :raise SlackApiError: If Slack rejected the message
        :raise SlackTransportError: If the request failed
        """
        return self._call("chat.postMessage", json=arguments.to_payload())

    def post_message_text(self, channel: str, text: str) -> ChatResponse:
        """
        Post a plain text message to a Slack channel.

        :param channel: Channel ID, available from the bottom of a channel's "About" dialog
        :param text: Message text using Slack's "mrkdwn" format
        """
        return self.post_message(ChatPostMessageArguments(channel=channel, text=text))

    def delete(self, channel: str, ts: str) -> ChatResponse:
        """
        Delete a message.

        See https://api.slack.com/methods/chat.delete.

        :param channel: ID of the channel containing the message
        :param ts: Timestamp of the message, as returned when it was posted
        """
        return self._call("chat.delete", data={"channel": channel, "ts": ts})

    def _call(self, method: str, **body: Any) -> ChatResponse:
        url = f"{self.base_url}/{method}"
        post = self.session.post if self.session is not None else requests.post

        logger.debug("Calling Slack API method %s", method)
        try:
            rsp = post(
                url,
                headers={"Authorization": f"Bearer {self.token}"},
                timeout=self.timeout,
                **body,
            )
            rsp.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            retry_after = None
            if e.response is not None:
                retry_after = _parse_retry_after(e.response.headers.get("Retry-After"))
            logger.warning("Slack API method %s failed with HTTP %s", method, status_code)
            raise SlackTransportError(
                f"{method} failed: {e}",
                status_code=status_code,
                retry_after=retry_after,
            ) from e
        except requests.RequestException as e:
            logger.warning("Slack API method %s failed: %s", method, e)
            raise SlackTransportError(f"{method} failed: {e}") from e

        try:
            result = rsp.json()
        except ValueError as e:
            raise SlackTransportError(
                f"{method} returned invalid JSON", status_code=rsp.status_code
            ) from e

        if not isinstance(result, dict):
            raise SlackTransportError(
                f"{method} returned unexpected response: {result!r}",
                status_code=rsp.status_code,
            )

        if not result.get("ok"):
            error = result.get("error", "unknown_error")
            logger.warning("Slack API method %s returned error %s", method, error)
            raise SlackApiError(error, result)

        try:
            return ChatResponse.from_json(result)
        except ValueError as e:
            raise SlackTransportError(
                f"{method} returned unexpected response: {e}",
                status_code=rsp.status_code,
            ) from e

    @classmethod
    def init(cls, **kwargs: Any) -> Self:
        """
        Initialize an authenticated SlackClient.

        This will read from the `SLACK_TOKEN` env var if set, or prompt otherwise.
        Other keyword arguments are passed to the constructor.

        Note that the prompt blocks reading from stdin when `SLACK_TOKEN` is
        unset, so unattended processes should set the variable or call the
        constructor directly.
        """
        token = os.environ.get("SLACK_TOKEN")

        if not token:
            token = getpass("Slack API token: ")

        return cls(token, **kwargs)


def _parse_retry_after(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None
