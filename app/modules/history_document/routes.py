import json

from fastapi import APIRouter, Depends, Request
from app.config import settings
from app.core.exceptions import InvalidInputError
from app.modules.history_document.store import JsonDocumentStore

router = APIRouter(prefix="/history", tags=["history-document"])


def get_history_store() -> JsonDocumentStore:
    return JsonDocumentStore(settings.history_file_path)


@router.get("")
async def read_history_document(store: JsonDocumentStore = Depends(get_history_store)):
    """Whole history document ([] if nothing was saved yet)"""
    return store.read()


@router.post("")
async def write_history_document(
    request: Request,
    store: JsonDocumentStore = Depends(get_history_store)
):
    """Overwrite the history document with the request body"""
    try:
        data = json.loads(await request.body())
    except ValueError:
        raise InvalidInputError("Request body must be valid JSON")
    store.write(data)
    return {"success": True, "message": "History data updated successfully"}
