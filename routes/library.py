from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict, List

from dependencies import get_content_store, get_current_user, verify_admin_access
from errors import DocumentNotFound
from models import LIBRARY_COLLECTION
from schemas.common import CreatedResponse, MessageResponse
from schemas.content import IdListRequest, LibraryEntry, LibraryUpdate

router = APIRouter(prefix="/api", dependencies=[Depends(get_current_user)], tags=["Library"])


@router.get("/library", response_model=List[Dict[str, Any]])
def get_library(store=Depends(get_content_store)):
    return store.list_documents(LIBRARY_COLLECTION)


@router.post(
    "/addLibrary",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    dependencies=[Depends(verify_admin_access)],
)
def add_library(entry: LibraryEntry, store=Depends(get_content_store)):
    doc_id = store.add(LIBRARY_COLLECTION, entry.model_dump(by_alias=True))
    return {"message": "Code entry added successfully", "id": doc_id}


@router.put("/updateLibrary", response_model=CreatedResponse, dependencies=[Depends(verify_admin_access)])
def update_library(entry: LibraryUpdate, store=Depends(get_content_store)):
    try:
        store.update(LIBRARY_COLLECTION, entry.id, entry.model_dump(by_alias=True, exclude={"id"}))
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail="Document not found")
    return {"message": "Code entry updated successfully", "id": entry.id}


@router.delete("/library/delete", response_model=MessageResponse, dependencies=[Depends(verify_admin_access)])
def delete_library(request: IdListRequest, store=Depends(get_content_store)):
    store.delete_many(LIBRARY_COLLECTION, request.id)
    return {"message": f"Deleted {len(request.id)} library items successfully"}
