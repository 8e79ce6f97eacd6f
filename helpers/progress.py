import copy
import logging
from typing import Any, Dict, List, Optional

from firebase_admin import firestore

from errors import ChallengeNotSolved, ProgressNotFound
from models import PROGRESS_COLLECTION, ProgressRecord

logger = logging.getLogger(__name__)


def apply_completion(
    record: Optional[ProgressRecord],
    account_id: str,
    challenge_id: str,
    points: int,
    answers: List[Any],
    score: float,
) -> Optional[ProgressRecord]:
    """
    Returns the record after completing challenge_id, or None when the
    challenge was already solved. Points are awarded once per challenge id.
    """
    updated = copy.deepcopy(record) if record else ProgressRecord(account_id=account_id)
    if challenge_id in updated.solved_challenge_ids:
        return None

    updated.points += points
    updated.solved_challenge_ids.append(challenge_id)
    updated.last_attempts[challenge_id] = {"answers": answers, "score": score}
    return updated


def apply_retry(
    record: Optional[ProgressRecord],
    challenge_id: str,
    answers: List[Any],
    score: float,
) -> ProgressRecord:
    """Counts another attempt at an already solved challenge. Points never change."""
    if record is None:
        raise ProgressNotFound()
    if challenge_id not in record.solved_challenge_ids:
        raise ChallengeNotSolved(challenge_id)

    updated = copy.deepcopy(record)
    updated.retry_counts[challenge_id] = updated.retry_counts.get(challenge_id, 0) + 1
    updated.last_attempts[challenge_id] = {"answers": answers, "score": score}
    return updated


class FirestoreProgressStore:
    """userProgress documents, keyed by account uid."""

    def __init__(self, db):
        self.db = db
        self.collection = db.collection(PROGRESS_COLLECTION)

    def get_progress(self, account_id: str) -> Optional[ProgressRecord]:
        snapshot = self.collection.document(account_id).get()
        if not snapshot.exists:
            return None
        return ProgressRecord.from_document(account_id, snapshot.to_dict())

    def complete_challenge(
        self, account_id: str, challenge_id: str, points: int, answers: List[Any], score: float
    ) -> bool:
        ref = self.collection.document(account_id)

        @firestore.transactional
        def complete(transaction) -> bool:
            snapshot = ref.get(transaction=transaction)
            record = ProgressRecord.from_document(account_id, snapshot.to_dict()) if snapshot.exists else None
            updated = apply_completion(record, account_id, challenge_id, points, answers, score)
            if updated is None:
                return False
            transaction.set(ref, self._document(updated))
            return True

        awarded = complete(self.db.transaction())
        if awarded:
            logger.info("Awarded %d points to %s for challenge %s", points, account_id, challenge_id)
        return awarded

    def record_retry(self, account_id: str, challenge_id: str, answers: List[Any], score: float) -> None:
        ref = self.collection.document(account_id)

        @firestore.transactional
        def retry(transaction) -> None:
            snapshot = ref.get(transaction=transaction)
            record = ProgressRecord.from_document(account_id, snapshot.to_dict()) if snapshot.exists else None
            transaction.set(ref, self._document(apply_retry(record, challenge_id, answers, score)))

        retry(self.db.transaction())

    @staticmethod
    def _document(record: ProgressRecord) -> Dict[str, Any]:
        document = record.to_document()
        document["updatedAt"] = firestore.SERVER_TIMESTAMP
        return document
