"""Shared pytest fixtures: temporary database, content store and OpenAI fakes."""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from dal.artwork_dal import ArtworkDAL
from services.storage.blob_fetcher import BlobFetcher
from utils.database_init import AsyncDatabaseInitializer

CAT_BYTES = b"\x89PNG\r\n\x1a\nfake-cat-pixels"
CAT_URL = "https://x/o/images%2Fcat.png?alt=media&token=abc"


def chat_response(content):
    """Build an object shaped like a Chat Completions response."""
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def db_initializer(tmp_path: Path) -> AsyncDatabaseInitializer:
    return AsyncDatabaseInitializer(tmp_path / "db")


@pytest.fixture
def artwork_dal(db_initializer) -> ArtworkDAL:
    return ArtworkDAL(db_initializer)


@pytest.fixture
def storage_dir(tmp_path: Path) -> Path:
    """Content store holding `images/cat.png`."""
    root = tmp_path / "storage"
    (root / "images").mkdir(parents=True)
    (root / "images" / "cat.png").write_bytes(CAT_BYTES)
    return root


@pytest.fixture
def blob_fetcher(storage_dir: Path) -> BlobFetcher:
    return BlobFetcher(storage_dir)


@pytest.fixture
def openai_client():
    """MagicMock standing in for AsyncOpenAI; answers YES by default."""
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=chat_response("YES"))
    return client
