from fastapi import APIRouter, Depends, HTTPException

from dependencies import get_content_store, get_current_user, get_progress_store
from errors import ChallengeNotSolved, ProgressNotFound
from models import CHALLENGE_COLLECTION, CurrentUser, ProgressRecord
from schemas.common import MessageResponse
from schemas.progress import CompletionRequest, ProgressResponse, RetryRequest

router = APIRouter(prefix="/api", tags=["Progress"])


def ensure_challenge_exists(store, challenge_id: str):
    if not store.exists(CHALLENGE_COLLECTION, challenge_id):
        raise HTTPException(status_code=404, detail="Challenge not found")


@router.post("/completeChallenge", response_model=MessageResponse)
def complete_challenge(
    request: CompletionRequest,
    user: CurrentUser = Depends(get_current_user),
    content_store=Depends(get_content_store),
    progress_store=Depends(get_progress_store),
):
    ensure_challenge_exists(content_store, request.challenge_id)

    awarded = progress_store.complete_challenge(
        user.uid, request.challenge_id, request.points, request.answers, request.score
    )
    if not awarded:
        return {"message": "Challenge already completed, no points awarded"}
    return {"message": "Challenge completed and user progress updated"}


@router.get("/userProgress", response_model=ProgressResponse)
def get_user_progress(
    user: CurrentUser = Depends(get_current_user),
    progress_store=Depends(get_progress_store),
):
    record = progress_store.get_progress(user.uid) or ProgressRecord(account_id=user.uid)
    return record.to_document()


@router.post("/recordRetry", response_model=MessageResponse)
def record_retry(
    request: RetryRequest,
    user: CurrentUser = Depends(get_current_user),
    content_store=Depends(get_content_store),
    progress_store=Depends(get_progress_store),
):
    ensure_challenge_exists(content_store, request.challenge_id)

    try:
        progress_store.record_retry(user.uid, request.challenge_id, request.answers, request.score)
    except ProgressNotFound:
        raise HTTPException(status_code=400, detail="User progress not found")
    except ChallengeNotSolved:
        raise HTTPException(status_code=400, detail="Challenge not completed yet")

    return {"message": "Retry recorded"}
