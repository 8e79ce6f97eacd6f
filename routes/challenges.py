from fastapi import APIRouter, Depends, HTTPException, status
from typing import Any, Dict, List

from dependencies import get_content_store, get_current_user, verify_admin_access
from errors import DocumentNotFound
from models import CHALLENGE_COLLECTION
from schemas.challenges import ChallengeCreate, ChallengeUpdate
from schemas.common import CreatedResponse, MessageResponse
from schemas.content import IdListRequest

router = APIRouter(prefix="/api", dependencies=[Depends(get_current_user)], tags=["Challenges"])


@router.get("/challenges", response_model=List[Dict[str, Any]])
def get_challenges(store=Depends(get_content_store)):
    return store.list_documents(CHALLENGE_COLLECTION)


@router.post(
    "/addChallenges",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
    dependencies=[Depends(verify_admin_access)],
)
def add_challenges(challenge: ChallengeCreate, store=Depends(get_content_store)):
    doc_id = store.add(CHALLENGE_COLLECTION, challenge.to_document())
    return {"message": "Challenges added successfully", "id": doc_id}


@router.put("/updateChallenges", response_model=CreatedResponse, dependencies=[Depends(verify_admin_access)])
def update_challenges(challenge: ChallengeUpdate, store=Depends(get_content_store)):
    try:
        store.update(CHALLENGE_COLLECTION, challenge.id, challenge.to_document())
    except DocumentNotFound:
        raise HTTPException(status_code=404, detail="Document not found")
    return {"message": "Challenges data updated successfully", "id": challenge.id}


@router.delete("/deleteChallenges", response_model=MessageResponse, dependencies=[Depends(verify_admin_access)])
def delete_challenges(request: IdListRequest, store=Depends(get_content_store)):
    store.delete_many(CHALLENGE_COLLECTION, request.id)
    return {"message": f"Deleted {len(request.id)} challenge items successfully"}
