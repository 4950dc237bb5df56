"""FastAPI routes for artwork record triggers."""

from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Request

from dal.artwork_dal import ArtworkDAL

router = APIRouter(tags=["artwork"])


def _get_trigger_controller(request: Request):
    """Retrieve the shared trigger controller from the app state."""
    controller = getattr(request.app.state, "trigger_controller", None)
    if controller is None:
        raise HTTPException(status_code=500, detail="Trigger controller not initialized.")
    return controller


async def _read_payload(request: Request) -> Dict[str, Any]:
    """Return the JSON object body, or an empty dict for anything else."""
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


@router.post("/triggers/artwork/{artwork_id}", summary="Handle a created artwork record")
async def artwork_created(request: Request, artwork_id: str):
    """Screen the image of a newly created artwork record.

    The trigger is always acknowledged with 200 so the caller never retries.
    """
    controller = _get_trigger_controller(request)
    payload = await _read_payload(request)
    return await controller.handle(artwork_id, payload)


@router.get("/artwork/{artwork_id}")
async def get_artwork(request: Request, artwork_id: str):
    """Return the stored artwork record in its external shape."""
    db_initializer = getattr(request.app.state, "db_initializer", None)
    if db_initializer is None:
        raise HTTPException(status_code=500, detail="Database not initialized.")
    record = await ArtworkDAL(db_initializer).get_artwork_by_id(artwork_id)
    if record is None:
        raise HTTPException(status_code=404, detail="Artwork not found")
    return record.to_payload()
