from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# Firestore collections
LIBRARY_COLLECTION = "codeLibrary"
EXAMPLE_COLLECTION = "example"
CHALLENGE_COLLECTION = "challenges"
PROGRESS_COLLECTION = "userProgress"

ANONYMOUS = "Anonymous"
DEFAULT_PHOTO_URL = "https://img.daisyui.com/images/stock/photo-1534528741775-53994a69daeb.webp"


@dataclass
class Account:
    uid: str
    display_name: Optional[str] = None
    email: Optional[str] = None
    disabled: bool = False
    photo_url: Optional[str] = None
    admin: bool = False


@dataclass
class DirectoryPage:
    accounts: List[Account]
    next_token: Optional[str] = None


@dataclass
class ProgressRecord:
    account_id: str
    points: int = 0
    solved_challenge_ids: List[str] = field(default_factory=list)
    retry_counts: Dict[str, int] = field(default_factory=dict)
    last_attempts: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_document(self) -> Dict[str, Any]:
        # Field names as stored in Firestore and returned by /api/userProgress
        return {
            "Points": self.points,
            "SolvedChallenges": list(self.solved_challenge_ids),
            "retryCount": dict(self.retry_counts),
            "challengeAttempts": dict(self.last_attempts),
        }

    @classmethod
    def from_document(cls, account_id: str, data: Optional[Dict[str, Any]]):
        data = data or {}
        return cls(
            account_id=account_id,
            # Older documents may hold fractional or string points
            points=int(data.get("Points") or 0),
            solved_challenge_ids=list(data.get("SolvedChallenges") or []),
            retry_counts=dict(data.get("retryCount") or {}),
            last_attempts=dict(data.get("challengeAttempts") or {}),
        )


@dataclass
class LeaderboardEntry:
    rank: int
    uid: str
    display_name: str
    points: int


@dataclass
class Leaderboard:
    entries: List[LeaderboardEntry]
    current_user_rank: int


@dataclass
class CurrentUser:
    uid: str
    email: Optional[str] = None
    admin: bool = False
