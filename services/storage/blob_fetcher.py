"""Fetch stored images referenced by a storage locator and base64-encode them.

Locators follow the download-URL shape `.../o/<url-encoded-path>?<query>`.
Objects are read from a local content root with `aiofiles`.
"""

from __future__ import annotations

import base64
import logging
import re
from pathlib import Path
from urllib.parse import unquote

import aiofiles

PATH_MARKER = "/o/"
QUERY_MARKER = "?"
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def extract_storage_path(locator: str) -> str:
    """Return the URL-decoded object path embedded in a storage locator.

    Args:
        locator: Download URL such as `https://x/o/images%2Fcat.png?alt=media`.

    Returns:
        The decoded path between `/o/` and the first `?`, e.g. `images/cat.png`.

    Raises:
        ValueError: If the locator has no `/o/` segment, the path is empty, or
            the path is not valid percent-encoded UTF-8.
    """
    if not locator or PATH_MARKER not in locator:
        raise ValueError(f"Locator does not contain a '{PATH_MARKER}' path segment: {locator!r}")
    encoded = locator.split(PATH_MARKER, 1)[1].split(QUERY_MARKER, 1)[0]
    if MALFORMED_ESCAPE.search(encoded):
        raise ValueError(f"Locator has a malformed percent-escape: {locator!r}")
    try:
        path = unquote(encoded, errors="strict")
    except UnicodeDecodeError as exc:
        raise ValueError(f"Locator path is not valid UTF-8: {locator!r}") from exc
    if not path:
        raise ValueError(f"Locator has an empty object path: {locator!r}")
    return path


class BlobFetcher:
    """Download objects from the content store rooted at `storage_dir`."""

    def __init__(self, storage_dir: Path | str) -> None:
        self.root = Path(storage_dir).expanduser().resolve()

    def resolve(self, object_path: str) -> Path:
        """Map an object path onto the content root, refusing escapes."""
        candidate = (self.root / object_path.lstrip("/")).resolve()
        if candidate != self.root and self.root not in candidate.parents:
            raise ValueError(f"Object path escapes the content store: {object_path!r}")
        return candidate

    async def download(self, object_path: str) -> bytes:
        """Return the raw bytes stored at `object_path`."""
        target = self.resolve(object_path)
        if not target.is_file():
            raise FileNotFoundError(f"No object stored at {object_path!r}")
        async with aiofiles.open(target, "rb") as f:
            return await f.read()

    async def fetch_base64(self, locator: str) -> str:
        """Download the object a locator points to and return it as base64 text."""
        try:
            object_path = extract_storage_path(locator)
            logging.info("Fetching file from storage path: %s", object_path)
            data = await self.download(object_path)
        except Exception as exc:
            logging.error("Error fetching and converting image to Base64: %s", exc)
            raise
        return base64.b64encode(data).decode("ascii")
