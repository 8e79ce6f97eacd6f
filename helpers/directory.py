import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional

from firebase_admin import auth

from models import Account, DirectoryPage

logger = logging.getLogger(__name__)

# Firebase caps list_users at 1000 accounts per page
MAX_PAGE_SIZE = 1000
MAX_WORKERS = 8


def fan_out(fn: Callable, items: Iterable, max_workers: int = MAX_WORKERS) -> list:
    """
    Runs fn over items on a bounded thread pool and returns the results in
    input order. The first exception raised by any call propagates.
    """
    items = list(items)
    if not items:
        return []
    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as pool:
        return list(pool.map(fn, items))


def account_from_record(record) -> Account:
    claims = record.custom_claims or {}
    return Account(
        uid=record.uid,
        display_name=record.display_name,
        email=record.email,
        disabled=bool(record.disabled),
        photo_url=record.photo_url,
        admin=claims.get("admin") is True,
    )


def list_all_accounts(directory, page_size: int = MAX_PAGE_SIZE) -> List[Account]:
    """Drain every page of the directory. Pages are fetched one after another."""
    accounts: List[Account] = []
    token = None
    while True:
        page = directory.list_page(page_size, token)
        accounts.extend(page.accounts)
        token = page.next_token
        if not token:
            return accounts


class FirebaseDirectory:
    """Account directory backed by Firebase Authentication."""

    def __init__(self, app=None):
        self.app = app

    def list_page(self, page_size: int, page_token: Optional[str] = None) -> DirectoryPage:
        page = auth.list_users(
            page_token=page_token,
            max_results=min(page_size, MAX_PAGE_SIZE),
            app=self.app,
        )
        return DirectoryPage(
            accounts=[account_from_record(record) for record in page.users],
            next_token=page.next_page_token or None,
        )

    def set_disabled(self, uids: List[str], disabled: bool) -> None:
        logger.info("Setting disabled=%s on %d accounts", disabled, len(uids))
        fan_out(lambda uid: auth.update_user(uid, disabled=disabled, app=self.app), uids)

    def set_admin(self, uids: List[str], admin: bool) -> None:
        logger.info("Setting admin=%s on %d accounts", admin, len(uids))
        fan_out(lambda uid: auth.set_custom_user_claims(uid, {"admin": admin}, app=self.app), uids)

    def delete(self, uids: List[str]) -> None:
        logger.info("Deleting %d accounts", len(uids))
        fan_out(lambda uid: auth.delete_user(uid, app=self.app), uids)
