import pytest

from slack_chat import (
    ChatPostMessageArguments,
    ChatPostMessageAttachment,
    ChatPostMessageField,
    ChatResponse,
)


def test_payload_omits_absent_fields():
    args = ChatPostMessageArguments(channel="C123", text="hello")
    assert args.to_payload() == {"channel": "C123", "text": "hello"}


def test_payload_with_channel_only():
    assert ChatPostMessageArguments(channel="C123").to_payload() == {
        "channel": "C123"
    }


def test_payload_includes_false_values():
    args = ChatPostMessageArguments(channel="C123", text="x", mrkdwn=False)
    assert args.to_payload()["mrkdwn"] is False


def test_payload_serializes_nested_attachments():
    args = ChatPostMessageArguments(
        channel="C123",
        attachments=[
            ChatPostMessageAttachment(
                color="#36a64f",
                title="Build",
                fields=[ChatPostMessageField(title="Status", value="passed")],
                ts=1700000000,
            )
        ],
        thread_ts="1700000000.000100",
    )
    assert args.to_payload() == {
        "channel": "C123",
        "attachments": [
            {
                "color": "#36a64f",
                "title": "Build",
                "fields": [{"title": "Status", "value": "passed", "short": False}],
                "ts": 1700000000,
            }
        ],
        "thread_ts": "1700000000.000100",
    }


def test_payload_forwards_blocks_and_metadata():
    blocks = [{"type": "section", "text": {"type": "mrkdwn", "text": "*hi*"}}]
    metadata = {"event_type": "deploy", "event_payload": {"rollback_of": None}}
    args = ChatPostMessageArguments(channel="C1", blocks=blocks, metadata=metadata)

    payload = args.to_payload()

    assert payload["blocks"] == blocks
    # Nulls inside caller-supplied values are kept
    assert payload["metadata"] == {
        "event_type": "deploy",
        "event_payload": {"rollback_of": None},
    }


def test_payload_omits_absent_fields_in_tuple_of_attachments():
    args = ChatPostMessageArguments(
        channel="C1",
        attachments=(
            ChatPostMessageAttachment(
                text="a", fields=(ChatPostMessageField(title="k", value="v"),)
            ),
        ),
    )

    assert args.to_payload()["attachments"] == [
        {"text": "a", "fields": [{"title": "k", "value": "v", "short": False}]}
    ]


def test_arguments_are_immutable():
    args = ChatPostMessageArguments(channel="C123")
    with pytest.raises(AttributeError):
        args.text = "changed"  # type: ignore[misc]


def test_response_reads_top_level_ts():
    rsp = ChatResponse.from_json({"ok": True, "channel": "C1", "ts": "123.456"})
    assert rsp.ok
    assert rsp.channel == "C1"
    assert rsp.ts == "123.456"
    assert rsp.message is None


def test_response_falls_back_to_message_ts():
    rsp = ChatResponse.from_json({"ok": True, "message": {"ts": "1.2", "text": "x"}})
    assert rsp.ts == "1.2"
    assert rsp.message == {"ts": "1.2", "text": "x"}


def test_response_rejects_non_object_message():
    with pytest.raises(ValueError):
        ChatResponse.from_json({"ok": True, "message": "not an object"})


def test_response_exposes_raw_body():
    body = {"ok": True, "ts": "1.2", "warning": "missing_charset"}
    rsp = ChatResponse.from_json(body)
    assert rsp["warning"] == "missing_charset"
    assert rsp.get("response_metadata") is None
    assert rsp.data == body
