import logging
from typing import Any, Dict, List

from firebase_admin import firestore

from errors import DocumentNotFound

logger = logging.getLogger(__name__)


class FirestoreContentStore:
    """Plain document CRUD over the library, example and challenge collections."""

    def __init__(self, db):
        self.db = db

    def list_documents(self, collection: str) -> List[Dict[str, Any]]:
        return [{"id": doc.id, **doc.to_dict()} for doc in self.db.collection(collection).stream()]

    def exists(self, collection: str, document_id: str) -> bool:
        return self.db.collection(collection).document(document_id).get().exists

    def add(self, collection: str, data: Dict[str, Any]) -> str:
        _, ref = self.db.collection(collection).add({**data, "createdAt": firestore.SERVER_TIMESTAMP})
        logger.info("Added %s/%s", collection, ref.id)
        return ref.id

    def update(self, collection: str, document_id: str, data: Dict[str, Any]) -> None:
        ref = self.db.collection(collection).document(document_id)
        if not ref.get().exists:
            raise DocumentNotFound(collection, document_id)
        ref.update({**data, "updatedAt": firestore.SERVER_TIMESTAMP})
        logger.info("Updated %s/%s", collection, document_id)

    def delete_many(self, collection: str, document_ids: List[str]) -> None:
        batch = self.db.batch()
        for document_id in document_ids:
            batch.delete(self.db.collection(collection).document(document_id))
        batch.commit()
        logger.info("Deleted %d documents from %s", len(document_ids), collection)
