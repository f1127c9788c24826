import re
from typing import Any, Dict, List, Mapping

from .errors import GradingError

# leading integer, so "2", " 2 " and "2.0" all read as option 2
_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _submitted_index(answers: Mapping[Any, Any], i: int) -> int:
    raw = answers.get(f"question-{i}", answers.get(i))
    if raw is None or isinstance(raw, bool):
        return -1
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT_RE.match(str(raw))
    return int(match.group(1)) if match else -1


def grade_quiz(quiz: List[Dict[str, Any]], answers: Mapping[Any, Any]) -> Dict[str, Any]:
    """
    Score submitted answers against parsed questions.

    ``answers`` is keyed by "question-<i>" (form field names) or by the
    integer position; values are option indices as ints or strings, read
    up to the first non-digit the way a form field is ("2.0" is 2).
    Missing or unreadable answers are reported as -1 and count as wrong.
    """
    if not quiz or not isinstance(quiz, list):
        raise GradingError("No quiz to grade.")

    answers = answers or {}
    score = 0
    results = []
    for i, q in enumerate(quiz):
        user_index = _submitted_index(answers, i)
        correct_index = q["correct_index"]
        is_correct = user_index == correct_index
        if is_correct:
            score += 1
        results.append({
            "question": q["question"],
            "options": q["options"],
            "user_answer_index": user_index,
            "correct_answer_index": correct_index,
            "is_correct": is_correct,
        })

    total = len(quiz)
    return {
        "score": score,
        "total": total,
        # half-up, 1 of 8 is 13%
        "percentage": int(score * 100 / total + 0.5),
        "results": results,
    }
