"""In-memory stand-ins for the Firebase-backed collaborators."""

import copy
from typing import Dict, List, Optional

from errors import DocumentNotFound
from helpers.progress import apply_completion, apply_retry
from models import Account, DirectoryPage, ProgressRecord


class FakeDirectory:
    def __init__(self, accounts: Optional[List[Account]] = None, fail: bool = False):
        self.accounts = list(accounts or [])
        self.fail = fail
        self.page_requests = []

    def list_page(self, page_size: int, page_token: Optional[str] = None) -> DirectoryPage:
        self.page_requests.append((page_size, page_token))
        if self.fail:
            raise RuntimeError("directory unavailable")
        start = int(page_token or 0)
        end = start + page_size
        next_token = str(end) if end < len(self.accounts) else None
        return DirectoryPage(accounts=self.accounts[start:end], next_token=next_token)

    def _find(self, uid: str) -> Account:
        return next(account for account in self.accounts if account.uid == uid)

    def set_disabled(self, uids, disabled):
        for uid in uids:
            self._find(uid).disabled = disabled

    def set_admin(self, uids, admin):
        for uid in uids:
            self._find(uid).admin = admin

    def delete(self, uids):
        self.accounts = [account for account in self.accounts if account.uid not in uids]


class FakeProgressStore:
    def __init__(self, points: Optional[Dict[str, int]] = None, failing=()):
        self.records: Dict[str, ProgressRecord] = {
            uid: ProgressRecord(account_id=uid, points=value) for uid, value in (points or {}).items()
        }
        self.failing = set(failing)
        # Raw Firestore-shaped documents, read the way the real store reads them
        self.documents: Dict[str, dict] = {}

    def get_progress(self, account_id):
        if account_id in self.failing:
            raise RuntimeError(f"permission denied for {account_id}")
        if account_id in self.documents:
            return ProgressRecord.from_document(account_id, self.documents[account_id])
        record = self.records.get(account_id)
        return copy.deepcopy(record) if record else None

    def complete_challenge(self, account_id, challenge_id, points, answers, score):
        updated = apply_completion(self.records.get(account_id), account_id, challenge_id, points, answers, score)
        if updated is None:
            return False
        self.records[account_id] = updated
        return True

    def record_retry(self, account_id, challenge_id, answers, score):
        self.records[account_id] = apply_retry(self.records.get(account_id), challenge_id, answers, score)


class FakeContentStore:
    def __init__(self):
        self.collections: Dict[str, Dict[str, dict]] = {}
        self.counter = 0

    def list_documents(self, collection):
        return [{"id": doc_id, **data} for doc_id, data in self.collections.get(collection, {}).items()]

    def exists(self, collection, document_id):
        return document_id in self.collections.get(collection, {})

    def add(self, collection, data):
        self.counter += 1
        doc_id = f"doc-{self.counter}"
        self.collections.setdefault(collection, {})[doc_id] = dict(data)
        return doc_id

    def update(self, collection, document_id, data):
        if not self.exists(collection, document_id):
            raise DocumentNotFound(collection, document_id)
        self.collections[collection][document_id].update(data)

    def delete_many(self, collection, document_ids):
        for document_id in document_ids:
            self.collections.get(collection, {}).pop(document_id, None)
