"""Unit tests for functional transforms of error state."""

from __future__ import annotations

import traceback

from lib_throw.exceptions import PaymentException, SecretException


def test_map_message_keeps_kind_and_context() -> None:
    error = PaymentException("declined").with_context(user=1)
    mapped = error.map_message(lambda message: f"Payment error: {message}")
    assert type(mapped) is PaymentException
    assert str(mapped) == "Payment error: declined"
    assert mapped.message == "Payment error: declined"
    assert str(error) == "declined"
    assert dict(mapped.context) == {"user": 1}


def test_map_context_can_remove_keys() -> None:
    error = SecretException("leak").with_context(password="hunter2", user="ann")
    cleaned = error.map_context(lambda context: {key: value for key, value in context.items() if key != "password"})
    assert dict(cleaned.context) == {"user": "ann"}
    assert "password" in error.context


def test_map_metadata_and_tags() -> None:
    error = PaymentException("declined").with_metadata(raw="x" * 10).with_tags(["payment"])
    mapped = error.map_metadata(lambda metadata: {"raw_length": len(metadata["raw"])}).map_tags(
        lambda tags: [*tags, "redacted"]
    )
    assert dict(mapped.metadata) == {"raw_length": 10}
    assert mapped.tags == ("payment", "redacted")


def test_notes_are_standard_exception_notes() -> None:
    error = PaymentException("declined").with_note("retry in 5 minutes")
    assert error.notes == ["retry in 5 minutes"]
    assert error.__notes__ == ["retry in 5 minutes"]
    rendered = "".join(traceback.format_exception(error))
    assert "retry in 5 minutes" in rendered


def test_with_note_does_not_mutate_the_original() -> None:
    original = PaymentException("declined").with_note("first")
    extended = original.with_note("second")
    assert original.notes == ["first"]
    assert extended.notes == ["first", "second"]


def test_map_notes() -> None:
    error = PaymentException("declined").with_note("a").with_note("b")
    assert error.map_notes(lambda notes: [note.upper() for note in notes]).notes == ["A", "B"]


def test_transform_groups_several_steps() -> None:
    error = PaymentException("declined").with_context(card="4242")
    result = error.transform(
        lambda current: current.map_message(str.upper).with_tags(["normalised"]).map_context(lambda _: {})
    )
    assert str(result) == "DECLINED"
    assert result.tags == ("normalised",)
    assert dict(result.context) == {}
