"""Prompt and message builders for the art screening request."""

from typing import Any, Dict, List

ART_INSTRUCTION = "Is this image art or not? Only use the word 'YES' or 'No'"


def to_image_data_url(b64_image: str) -> str:
    """Wrap base64 image text in a PNG data URL suitable for vision input."""
    if not b64_image:
        raise ValueError("Image payload must be a non-empty base64 string.")
    return f"data:image/png;base64,{b64_image}"


def build_messages(b64_image: str) -> List[Dict[str, Any]]:
    """Build the single user message carrying the instruction and the image."""
    return [
        {
            "role": "user",
            "content": [
                {"type": "text", "text": ART_INSTRUCTION},
                {"type": "image_url", "image_url": {"url": to_image_data_url(b64_image)}},
            ],
        }
    ]
