from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ClassificationVerdict(str, Enum):
    """Outcome of lexically inspecting the classifier's free-text answer."""

    AFFIRMATIVE = "affirmative"
    NEGATIVE = "negative"
    UNKNOWN = "unknown"


class OutcomeStatus(str, Enum):
    """Result category of a single trigger invocation."""

    APPROVED = "approved"
    NOT_APPROVED = "not_approved"
    SKIPPED_MISSING_INPUT = "skipped_missing_input"
    FETCH_FAILURE = "fetch_failure"
    INFERENCE_FAILURE = "inference_failure"
    PERSISTENCE_FAILURE = "persistence_failure"


_OK_STATUSES = {
    OutcomeStatus.APPROVED,
    OutcomeStatus.NOT_APPROVED,
    OutcomeStatus.SKIPPED_MISSING_INPUT,
}


@dataclass
class TriggerOutcome:
    """What happened while processing one newly created artwork record.

    Attributes:
        artwork_id: Identifier of the record that fired the trigger.
        status: Category of the outcome.
        verdict: Raw classification text, when the classifier answered.
        error: Error message for failure categories.
    """

    artwork_id: str
    status: OutcomeStatus
    verdict: Optional[str] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status in _OK_STATUSES

    def to_ack(self) -> Dict[str, Any]:
        """Acknowledgment body returned to the trigger infrastructure."""
        return {"ok": True, "artwork_id": self.artwork_id, "status": self.status.value}
