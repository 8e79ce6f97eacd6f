from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict, List

from dependencies import get_content_store, get_current_user, verify_admin_access
from errors import DocumentNotFound
from models import EXAMPLE_COLLECTION
from schemas.common import CreatedResponse, MessageResponse
from schemas.content import ExampleEntry, ExampleUpdate, IdListRequest

router = APIRouter(prefix="/api", dependencies=[Depends(get_current_user)], tags=["Examples"])


@router.get("/example", response_model=List[Dict[str, Any]])
def get_examples(store=Depends(get_content_store)):
    return store.list_documents(EXAMPLE_COLLECTION)


@router.post(
    "/addExample",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    dependencies=[Depends(verify_admin_access)],
)
def add_example(entry: ExampleEntry, store=Depends(get_content_store)):
    doc_id = store.add(EXAMPLE_COLLECTION, entry.model_dump())
    return {"message": "Example entry added successfully", "id": doc_id}


@router.put("/updateExample", response_model=CreatedResponse, dependencies=[Depends(verify_admin_access)])
def update_example(entry: ExampleUpdate, store=Depends(get_content_store)):
    try:
        store.update(EXAMPLE_COLLECTION, entry.id, entry.model_dump(exclude={"id"}))
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail="Document not found")
    return {"message": "Example data updated successfully", "id": entry.id}


@router.delete("/deleteExample", response_model=MessageResponse, dependencies=[Depends(verify_admin_access)])
def delete_examples(request: IdListRequest, store=Depends(get_content_store)):
    store.delete_many(EXAMPLE_COLLECTION, request.id)
    return {"message": f"Deleted {len(request.id)} example items successfully"}
