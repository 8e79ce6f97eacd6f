import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from dependencies import get_current_user, get_directory, get_progress_store
from errors import AggregationFailure
from helpers.leaderboard import build_leaderboard
from models import CurrentUser
from schemas.leaderboard import LeaderboardEntry, LeaderboardError, LeaderboardResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/leaderboard", tags=["Leaderboard"])


@router.get(
    "",
    response_model=LeaderboardResponse,
    responses={500: {"model": LeaderboardError}},
)
def get_leaderboard(
    user: CurrentUser = Depends(get_current_user),
    directory=Depends(get_directory),
    progress_store=Depends(get_progress_store),
):
    # Full recomputation on every request, no caching
    try:
        board = build_leaderboard(user.uid, directory, progress_store)
    except AggregationFailure as e:
        logger.error("Error fetching leaderboard: %s", e)
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to fetch leaderboard", "details": str(e)},
        )

    return LeaderboardResponse(
        leaderboard=[
            LeaderboardEntry(
                rank=entry.rank,
                display_name=entry.display_name,
                points=entry.points,
                uid=entry.uid,
            )
            for entry in board.entries
        ],
        current_user_rank=board.current_user_rank,
    )
