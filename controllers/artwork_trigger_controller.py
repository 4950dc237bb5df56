"""Controller reacting to newly created artwork records."""

import logging
from typing import Any, Dict, Mapping, Optional

from dal.artwork_dal import ArtworkDAL
from models.classification import ClassificationVerdict, OutcomeStatus, TriggerOutcome
from services.openai.art_classifier import ArtClassifier
from services.openai.response_parser import parse_verdict
from services.storage.blob_fetcher import BlobFetcher


class ArtworkTriggerController:
    """Run the fetch, classify and update pipeline for one created record.

    Failures never escape `process`: each is logged and reported as a
    `TriggerOutcome` so the trigger is always acknowledged.
    """

    def __init__(self, fetcher: BlobFetcher, classifier: ArtClassifier, artwork_dal: ArtworkDAL) -> None:
        self.fetcher = fetcher
        self.classifier = classifier
        self.artwork_dal = artwork_dal

    async def process(self, artwork_id: str, payload: Optional[Mapping[str, Any]]) -> TriggerOutcome:
        """Classify the image of a created record and approve it when it is art.

        Args:
            artwork_id: Identifier of the created record.
            payload: The record's data as written by the external producer.

        Returns:
            The outcome of this invocation.
        """
        image_url = (payload or {}).get("imageUrl")
        if not image_url:
            logging.error("No imageUrl found in the newly added artwork entry %s.", artwork_id)
            return TriggerOutcome(artwork_id, OutcomeStatus.SKIPPED_MISSING_INPUT)

        logging.info("Processing artwork ID: %s, Image URL: %s", artwork_id, image_url)

        try:
            b64_image = await self.fetcher.fetch_base64(image_url)
        except Exception as exc:
            return self._failed(artwork_id, OutcomeStatus.FETCH_FAILURE, exc)

        try:
            answer = await self.classifier.classify(b64_image)
        except Exception as exc:
            return self._failed(artwork_id, OutcomeStatus.INFERENCE_FAILURE, exc)

        logging.info("OpenAI classification for artwork ID %s: %s", artwork_id, answer)

        if parse_verdict(answer) is not ClassificationVerdict.AFFIRMATIVE:
            return TriggerOutcome(artwork_id, OutcomeStatus.NOT_APPROVED, verdict=answer)

        try:
            await self.artwork_dal.set_detect_art(artwork_id)
        except Exception as exc:
            return self._failed(artwork_id, OutcomeStatus.PERSISTENCE_FAILURE, exc, verdict=answer)

        logging.info("artwork ID: %s has been approved", artwork_id)
        return TriggerOutcome(artwork_id, OutcomeStatus.APPROVED, verdict=answer)

    async def handle(self, artwork_id: str, payload: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Process a trigger and return the acknowledgment for the caller."""
        outcome = await self.process(artwork_id, payload)
        return outcome.to_ack()

    @staticmethod
    def _failed(
        artwork_id: str, status: OutcomeStatus, exc: Exception, verdict: Optional[str] = None
    ) -> TriggerOutcome:
        logging.error("Error processing artwork %s (%s): %s", artwork_id, status.value, exc)
        return TriggerOutcome(artwork_id, status, verdict=verdict, error=str(exc))
