import firebase_admin
from dotenv import load_dotenv
from firebase_admin import credentials, firestore
import os


def load_environment():
    # Production takes its settings from the real environment only
    if os.getenv("ENVIRONMENT") != "production":
        load_dotenv()


load_environment()


# Path to a service-account JSON file; application default credentials when unset
FIREBASE_CREDENTIALS = os.getenv("FIREBASE_CREDENTIALS")
FIREBASE_PROJECT_ID = os.getenv("FIREBASE_PROJECT_ID")


def get_firebase_app():
    try:
        return firebase_admin.get_app()
    except ValueError:
        pass

    if FIREBASE_CREDENTIALS:
        cred = credentials.Certificate(FIREBASE_CREDENTIALS)
    else:
        cred = credentials.ApplicationDefault()

    options = {"projectId": FIREBASE_PROJECT_ID} if FIREBASE_PROJECT_ID else None
    return firebase_admin.initialize_app(cred, options)


def get_firestore_client(app=None):
    return firestore.client(app=app or get_firebase_app())
