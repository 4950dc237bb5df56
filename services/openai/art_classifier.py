"""Description: Art screening of stored images using OpenAI's Chat Completions API."""

import json
import logging
from typing import Any, Dict, List, Optional

import httpx
from openai import APIConnectionError, APIStatusError, AsyncOpenAI

from services.openai.art_prompts import build_messages
from services.openai.response_parser import extract_message_text
from utils.config import DEFAULT_MODEL

MAX_TOKENS = 150
# A failed call is fatal for the invocation; the SDK must not retry it.
MAX_RETRIES = 0


def create_openai_client(api_key: str, http_client: Optional[httpx.AsyncClient] = None) -> AsyncOpenAI:
    """Build the async OpenAI client used for art screening."""
    return AsyncOpenAI(api_key=api_key, max_retries=MAX_RETRIES, http_client=http_client)


def describe_response_body(response: httpx.Response) -> str:
    """Return the full error response body, pretty-printed when it is JSON."""
    try:
        return json.dumps(response.json(), indent=2)
    except ValueError:
        return response.text


class ArtClassifier:
    """Ask a vision model whether an image is art."""

    def __init__(self, client: AsyncOpenAI, model: Optional[str] = None) -> None:
        """Initialize the ArtClassifier with an OpenAI async client."""
        if client is None:
            raise ValueError("OpenAI client must be provided.")
        self.client = client
        self.model = model or DEFAULT_MODEL

    async def classify(self, b64_image: str) -> str:
        """Return the model's trimmed answer for a base64-encoded image."""
        response = await self._create_completion(build_messages(b64_image))
        answer = extract_message_text(response)
        logging.info("OpenAI response: %s", answer)
        return answer

    async def _create_completion(self, messages: List[Dict[str, Any]]) -> Any:
        """Send the multimodal request to the Chat Completions API."""
        try:
            return await self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                max_tokens=MAX_TOKENS,
            )
        except APIStatusError as exc:
            logging.error("Error calling OpenAI API:")
            logging.error("Status Code: %s", exc.status_code)
            logging.error("Response Body: %s", describe_response_body(exc.response))
            raise
        except APIConnectionError as exc:
            logging.error("Error calling OpenAI API - No response received: %s", exc)
            raise
        except Exception as exc:
            logging.error("Error during OpenAI Chat Completions call: %s", exc)
            raise

# end of ArtClassifier
