from dataclasses import dataclass, fields, is_dataclass
from typing import Any, Optional


def _to_payload(value: Any) -> Any:
    """
    Convert an arguments dataclass to its JSON form.

    Fields set to `None` are left out rather than sent as `null`. Only the
    dataclasses' own fields are filtered: dicts supplied by the caller, such as
    `blocks` and `metadata`, are passed through unchanged.
    """
    if is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _to_payload(getattr(value, f.name))
            for f in fields(value)
            if getattr(value, f.name) is not None
        }
    if isinstance(value, (list, tuple)):
        return [_to_payload(v) for v in value]
    return value


@dataclass(frozen=True)
class ChatPostMessageField:
    """
    A field shown in a table inside an attachment.

    See https://api.slack.com/reference/messaging/attachments#field_objects.
    """

    title: str
    value: str
    short: bool = False
    """Whether the field is short enough to be displayed next to other fields."""


@dataclass(frozen=True)
class ChatPostMessageAttachment:
    """
    A legacy secondary attachment.

    See https://api.slack.com/reference/messaging/attachments.
    """

    fallback: Optional[str] = None
    color: Optional[str] = None
    pretext: Optional[str] = None
    author_name: Optional[str] = None
    author_link: Optional[str] = None
    author_icon: Optional[str] = None
    title: Optional[str] = None
    title_link: Optional[str] = None
    text: Optional[str] = None
    fields: Optional[list[ChatPostMessageField]] = None
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    footer: Optional[str] = None
    footer_icon: Optional[str] = None
    ts: Optional[int] = None
    """Unix timestamp shown in the attachment footer."""


@dataclass(frozen=True)
class ChatPostMessageArguments:
    """
    Arguments for the `chat.postMessage` API method.

    Only `channel` is required. One of `text`, `blocks` or `attachments` is
    usually needed as well, but that is left to Slack to check.

    See https://api.slack.com/methods/chat.postMessage#args.
    """

    channel: str
    """Channel, private group or IM channel to send the message to. An ID or a name."""

    text: Optional[str] = None
    """
    Text of the message, using Slack's "mrkdwn" format.

    When `blocks` are provided this is used as the fallback for notifications.
    """

    blocks: Optional[list[dict[str, Any]]] = None
    """Block Kit blocks. See https://api.slack.com/block-kit."""

    attachments: Optional[list[ChatPostMessageAttachment]] = None

    icon_emoji: Optional[str] = None
    """Emoji to use as the icon for this message. Overrides `icon_url`."""

    icon_url: Optional[str] = None

    link_names: Optional[bool] = None
    """Find and link user groups."""

    metadata: Optional[dict[str, Any]] = None
    """Object with `event_type` and `event_payload` fields."""

    mrkdwn: Optional[bool] = None
    """Set to `False` to disable Slack markup parsing."""

    parse: Optional[str] = None

    reply_broadcast: Optional[bool] = None
    """
    Whether a threaded reply is also shown in the channel.

    Only used together with `thread_ts`.
    """

    thread_ts: Optional[str] = None
    """`ts` of the parent message, to post this message as a reply."""

    username: Optional[str] = None
    """Bot's user name."""

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON request body, without any absent fields."""
        return _to_payload(self)


@dataclass
class ChatResponse:
    """
    Successful response from a `chat.*` method.

    The commonly used fields are exposed as attributes. Anything else Slack
    returned can be read from `data`.
    """

    ok: bool

    channel: Optional[str]
    """ID of the channel the message was posted to or deleted from."""

    ts: Optional[str]
    """Timestamp identifying the message within the channel."""

    message: Optional[dict[str, Any]]
    """The posted message, as returned by `chat.postMessage`."""

    data: dict[str, Any]
    """The full response body."""

    @classmethod
    def from_json(cls, body: dict[str, Any]) -> "ChatResponse":
        """
        Build a response from a decoded JSON body.

        :raise ValueError: If `message` is present but is not an object
        """
        message = body.get("message")
        if message is not None and not isinstance(message, dict):
            raise ValueError(f"Expected `message` to be an object, got {message!r}")

        ts = body.get("ts")
        if ts is None and message:
            ts = message.get("ts")

        return cls(
            ok=bool(body.get("ok")),
            channel=body.get("channel"),
            ts=ts,
            message=message,
            data=body,
        )

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)
