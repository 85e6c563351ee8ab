from .chat import (
    ChatPostMessageArguments,
    ChatPostMessageAttachment,
    ChatPostMessageField,
    ChatResponse,
)
from .client import SlackClient
from .errors import SlackApiError, SlackError, SlackTransportError

__all__ = [
    "ChatPostMessageArguments",
    "ChatPostMessageAttachment",
    "ChatPostMessageField",
    "ChatResponse",
    "SlackApiError",
    "SlackClient",
    "SlackError",
    "SlackTransportError",
]
