import logging
from typing import List, Tuple

from errors import AggregationFailure
from helpers.directory import MAX_PAGE_SIZE, fan_out, list_all_accounts
from models import ANONYMOUS, Account, Leaderboard, LeaderboardEntry

logger = logging.getLogger(__name__)

LEADERBOARD_SIZE = 10


def rank_accounts(scored: List[Tuple[Account, int]]) -> List[LeaderboardEntry]:
    """
    Orders accounts by points (high first), then by display name, and numbers
    them from 1. Equal points never share a rank.
    """
    named = [(account.uid, account.display_name or ANONYMOUS, points) for account, points in scored]
    named.sort(key=lambda item: (-item[2], item[1]))
    return [
        LeaderboardEntry(rank=i + 1, uid=uid, display_name=name, points=points)
        for i, (uid, name, points) in enumerate(named)
    ]


def build_leaderboard(
    caller_id: str,
    directory,
    progress_store,
    size: int = LEADERBOARD_SIZE,
    page_size: int = MAX_PAGE_SIZE,
) -> Leaderboard:
    """
    Computes the top `size` accounts and the caller's own rank.

    Every account in the directory is ranked, including those without a
    progress record (0 points). A caller the directory did not return gets
    rank total + 1. Any failing collaborator call raises AggregationFailure;
    no partial leaderboard is produced.
    """
    try:
        accounts = list_all_accounts(directory, page_size)
        records = fan_out(lambda account: progress_store.get_progress(account.uid), accounts)
    except Exception as e:
        logger.error("Leaderboard aggregation failed: %s", e)
        raise AggregationFailure(str(e)) from e

    scored = [(account, record.points if record else 0) for account, record in zip(accounts, records)]
    ranked = rank_accounts(scored)

    current_user_rank = len(ranked) + 1
    for entry in ranked:
        if entry.uid == caller_id:
            current_user_rank = entry.rank
            break

    return Leaderboard(entries=ranked[:size], current_user_rank=current_user_rank)
