import inspect
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from controllers.artwork_trigger_controller import ArtworkTriggerController
from dal.artwork_dal import ArtworkDAL
from routes.artwork_trigger_route import router as artwork_router
from services.openai.art_classifier import ArtClassifier, create_openai_client
from services.storage.blob_fetcher import BlobFetcher
from utils.config import load_settings
from utils.database_init import AsyncDatabaseInitializer

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan manager to initialize, once per process:
      - the settings (OpenAI key, database and storage locations)
      - the SQLite database at DATABASE_DIR/app.db
      - the OpenAI async client
      - the trigger controller wired with those dependencies
    and attach them to `app.state`.
    """
    settings = load_settings()

    db_initializer = AsyncDatabaseInitializer(settings.database_dir)
    await db_initializer.ensure_database()
    app.state.db_initializer = db_initializer

    try:
        openai_client = create_openai_client(settings.openai_api_key)
    except Exception as exc:
        raise RuntimeError("Failed to initialize OpenAI Async client") from exc

    app.state.openai_client = openai_client
    app.state.trigger_controller = ArtworkTriggerController(
        fetcher=BlobFetcher(settings.storage_dir),
        classifier=ArtClassifier(openai_client, model=settings.openai_model),
        artwork_dal=ArtworkDAL(db_initializer),
    )

    try:
        yield
    finally:
        # Gracefully close the OpenAI client if it exposes a close/aclose method.
        client = getattr(app.state, "openai_client", None)
        if client is not None:
            aclose = getattr(client, "aclose", None) or getattr(client, "close", None)
            if aclose is not None:
                try:
                    if inspect.iscoroutinefunction(aclose):
                        await aclose()
                    else:
                        result = aclose()
                        if inspect.isawaitable(result):
                            await result
                except Exception as exc:
                    logging.warning("Error while closing the OpenAI client: %s", exc)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application instance.
    """
    app = FastAPI(lifespan=lifespan)

    @app.get("/health")
    async def health(request: Request):
        """
        Simple health check that verifies DB initializer and OpenAI client presence.
        """
        has_db = hasattr(request.app.state, "db_initializer")
        has_openai = (
            hasattr(request.app.state, "openai_client")
            and request.app.state.openai_client is not None
        )
        return {"ok": True, "db_initialized": has_db, "openai_available": has_openai}

    app.include_router(artwork_router)

    return app


app = create_app()
