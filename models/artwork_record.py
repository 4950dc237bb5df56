from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class ArtworkRecord:
    """In-memory representation of a row in the ARTWORK table.

    Attributes:
        id: Primary key assigned by the persistence layer.
        image_url: Storage locator for the submitted image.
        detect_art: True once the classifier approved the image; None until then.
        created_at: Unix timestamp (seconds) when the row was inserted.
    """

    id: Optional[str]
    image_url: Optional[str] = None
    detect_art: Optional[bool] = None
    created_at: Optional[int] = None

    def to_payload(self) -> Dict[str, Any]:
        """Return the record in its external (camelCase) shape."""
        payload: Dict[str, Any] = {"id": self.id, "imageUrl": self.image_url}
        if self.detect_art is not None:
            payload["detectArt"] = self.detect_art
        return payload
