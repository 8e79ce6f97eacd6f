import cachecontrol
import requests as http
from google.auth.transport import requests
from google.oauth2 import id_token

from firebase_app import FIREBASE_PROJECT_ID
from models import CurrentUser

ISSUER_PREFIX = "https://securetoken.google.com/"

# Google's signing certs are served with Cache-Control headers; honour them
_request = requests.Request(session=cachecontrol.CacheControl(http.Session()))


def resolve_project_id(firebase_app=None) -> str:
    """
    The project ID tokens must be issued for: FIREBASE_PROJECT_ID, else the
    project of the initialized Firebase app.
    """
    project_id = FIREBASE_PROJECT_ID or getattr(firebase_app, "project_id", None)
    if not project_id:
        raise RuntimeError(
            "Firebase project ID could not be determined; set FIREBASE_PROJECT_ID"
        )
    return project_id


def verify_token(token: str, project_id: str) -> CurrentUser:
    """
    Verifies a Firebase ID token and returns the caller it identifies.

    Raises ValueError (or google.auth.exceptions.GoogleAuthError) when the
    token is malformed, expired, or issued for another project.
    """
    if not project_id:
        raise ValueError("No Firebase project to verify against")

    claims = id_token.verify_firebase_token(token, _request, audience=project_id)
    if not claims:
        raise ValueError("Token could not be decoded")
    if claims.get("aud") != project_id:
        raise ValueError(f"Token audience {claims.get('aud')!r} is not {project_id!r}")
    if claims.get("iss") != ISSUER_PREFIX + project_id:
        raise ValueError(f"Token issuer {claims.get('iss')!r} is not for {project_id!r}")
    if not claims.get("sub"):
        raise ValueError("Token has no subject")

    return CurrentUser(
        uid=claims["sub"],
        email=claims.get("email"),
        admin=claims.get("admin") is True,
    )


def bearer_token(authorization: str | None) -> str | None:
    if not authorization or not authorization.startswith("Bearer "):
        return None
    token = authorization[len("Bearer "):].strip()
    return token or None
