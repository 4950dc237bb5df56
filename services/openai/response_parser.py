"""Helpers to parse Chat Completions output into a verdict."""

from typing import Any

from models.classification import ClassificationVerdict

AFFIRMATIVE_ANSWER = "YES"
NEGATIVE_ANSWER = "no"


def extract_message_text(response: Any) -> str:
    """Return the stripped content of the first choice's message."""
    choices = getattr(response, "choices", None) or []
    if not choices:
        raise RuntimeError("Chat Completions response contained no choices.")
    message = getattr(choices[0], "message", None)
    content = getattr(message, "content", None) if message is not None else None
    if content is None:
        raise RuntimeError("Chat Completions response contained no message content.")
    return content.strip()


def parse_verdict(text: str) -> ClassificationVerdict:
    """Map classifier text onto a verdict.

    Only an exact `YES` counts as affirmative.
    """
    answer = (text or "").strip()
    if answer == AFFIRMATIVE_ANSWER:
        return ClassificationVerdict.AFFIRMATIVE
    if answer.lower() == NEGATIVE_ANSWER:
        return ClassificationVerdict.NEGATIVE
    return ClassificationVerdict.UNKNOWN
