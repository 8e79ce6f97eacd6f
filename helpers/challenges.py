from typing import Any, Dict, List, Optional

from schemas.common import is_missing

MULTIPLE_CHOICE = 1
SORTING_ARRANGEMENT = 2
FILL_IN_THE_BLANKS = 3

CHALLENGE_TYPES = {
    MULTIPLE_CHOICE: "Multiple Choices",
    SORTING_ARRANGEMENT: "Sorting Arrangement",
    FILL_IN_THE_BLANKS: "Fill In The Blanks",
}
DIFFICULTIES = ["Easy", "Medium", "Hard"]
CATEGORIES = ["Sorting", "Search", "Graph Traversal", "Recursion"]

QUESTION_ERRORS = {
    MULTIPLE_CHOICE: "Multiple Choices requires question, answer, and exactly 4 choices",
    SORTING_ARRANGEMENT: (
        "Sorting Arrangement requires algorithm, initialArray, expectedArray, stepDescription, "
        "and explanation, with arrays for initialArray and expectedArray"
    ),
    FILL_IN_THE_BLANKS: "Fill In The Blanks requires text, exactly 2 correctAnswers, exactly 4 choices, and explanation",
}


class ChallengeValidationError(ValueError):
    pass


def _present(question: Dict[str, Any], *keys: str) -> bool:
    return not any(is_missing(question.get(key)) for key in keys)


def _list_of(value: Any, length: int) -> bool:
    return isinstance(value, list) and len(value) == length


def question_is_valid(challenge_type: int, question: Dict[str, Any]) -> bool:
    if not isinstance(question, dict):
        return False

    if challenge_type == MULTIPLE_CHOICE:
        return _present(question, "question", "answer") and _list_of(question.get("choices"), 4)

    if challenge_type == SORTING_ARRANGEMENT:
        return (
            _present(question, "algorithm", "initialArray", "expectedArray", "stepDescription", "explanation")
            and isinstance(question["initialArray"], list)
            and isinstance(question["expectedArray"], list)
        )

    if challenge_type == FILL_IN_THE_BLANKS:
        return (
            _present(question, "text", "explanation")
            and _list_of(question.get("correctAnswers"), 2)
            and _list_of(question.get("choices"), 4)
        )

    return False


def is_challenge_type(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value in CHALLENGE_TYPES


def validate_challenge(
    title: Optional[str],
    category: Optional[str],
    questions: Optional[List[Any]],
    challenge_type: Optional[int],
    difficulty: Optional[str],
) -> None:
    """Raises ChallengeValidationError with the first rule the challenge breaks."""
    if not isinstance(title, str) or not title.strip():
        raise ChallengeValidationError("Title is required and must be a non-empty string")
    if not isinstance(questions, list) or not questions:
        raise ChallengeValidationError("Request body must include a non-empty questions array")
    if not is_challenge_type(challenge_type):
        raise ChallengeValidationError("Type is required and must be 1, 2, or 3")
    if difficulty not in DIFFICULTIES:
        raise ChallengeValidationError("Difficulty is required and must be Easy, Medium, or Hard")
    if category not in CATEGORIES:
        raise ChallengeValidationError(
            "Category is required and must be Sorting, Search, Graph Traversal, or Recursion"
        )

    for question in questions:
        if not question_is_valid(challenge_type, question):
            raise ChallengeValidationError(QUESTION_ERRORS[challenge_type])
