import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from google.auth.exceptions import GoogleAuthError

from firebase_app import get_firebase_app, get_firestore_client
from helpers.content import FirestoreContentStore
from helpers.directory import FirebaseDirectory
from helpers.progress import FirestoreProgressStore
from models import CurrentUser
from security import bearer_token, resolve_project_id, verify_token

logger = logging.getLogger(__name__)


def get_project_id(request: Request) -> str:
    return request.app.state.project_id


def get_current_user(
    authorization: str | None = Header(None),
    project_id: str = Depends(get_project_id),
) -> CurrentUser:
    token = bearer_token(authorization)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No token provided")

    try:
        return verify_token(token, project_id)
    except (ValueError, GoogleAuthError) as e:
        logger.warning("User token verification error: %s", e)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token")


def verify_admin_access(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not user.admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Unauthorized: Admin access required",
        )
    return user


@asynccontextmanager
async def lifespan(app: FastAPI):
    firebase_app = get_firebase_app()
    # Refuse to serve when tokens cannot be pinned to a project
    app.state.project_id = resolve_project_id(firebase_app)
    db = get_firestore_client(firebase_app)
    app.state.directory = FirebaseDirectory(firebase_app)
    app.state.progress_store = FirestoreProgressStore(db)
    app.state.content_store = FirestoreContentStore(db)
    logger.info("Firebase backend ready (project %s)", app.state.project_id)
    yield
    db.close()


def get_directory(request: Request):
    return request.app.state.directory


def get_progress_store(request: Request):
    return request.app.state.progress_store


def get_content_store(request: Request):
    return request.app.state.content_store
