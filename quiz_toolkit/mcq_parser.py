"""
Turns the free-text quiz an LLM sends back into question records.

The model is asked for numbered questions, lettered options and an
"Answer: X)" line, but replies drift: bullets instead of letters, answers
spelled out, "(correct)" tags on an option, chatty preambles. Everything
here is best effort; blocks that can't be read are dropped.
"""
import logging
import re
from typing import Any, Dict, List, Optional, Tuple

from .settings import MAX_OPTIONS

logger = logging.getLogger(__name__)

_FIRST_QUESTION_RE = re.compile(r"^[ \t]*\d+[.)]", re.MULTILINE)
_BLOCK_SPLIT_RE = re.compile(r"\n(?=[ \t]*\d+[.)]\s)")
_QUESTION_RE = re.compile(r"^[ \t]*\d+[.)]\s*(.+?)(?=\n\s*(?:[A-Da-d][.)]|[-*•]))", re.DOTALL)
_ANSWER_SUFFIX_RE = re.compile(r"\s*Answer\s*:.*", re.IGNORECASE)

_LETTER_OPTION_RE = re.compile(r"^[ \t]*[A-Da-d][.)][ \t]*(.+?)[ \t]*$", re.MULTILINE)
_BULLET_OPTION_RE = re.compile(r"^[ \t]*[-*•][ \t]*(.+?)[ \t]*$", re.MULTILINE)
_CORRECT_NOTE_RE = re.compile(r"\s*\(correct\)|\s*\[correct\]", re.IGNORECASE)
_CORRECT_MARKER_RE = re.compile(r"\(correct\)|\[correct\]|✓|✔", re.IGNORECASE)

_ANSWER_LETTER_RE = re.compile(r"Answer\s*[:\-]?\s*\(?([A-Da-d])(?:[.)]|\b)", re.IGNORECASE)
_ANSWER_TEXT_RE = re.compile(r"Answer[ \t]*[:\-]?[ \t]*(.+?)[ \t]*$", re.IGNORECASE | re.MULTILINE)


def _locate_first_question(text: str) -> str:
    match = _FIRST_QUESTION_RE.search(text)
    if match:
        return text[match.start():]
    return text


def _split_blocks(text: str) -> List[str]:
    return [b for b in _BLOCK_SPLIT_RE.split(text) if len(b.strip()) > 10]


def _extract_question(block: str) -> Optional[Tuple[str, str]]:
    """
    Returns (question, answer_area). The answer area is the text after the
    stem plus any inline "Answer: ..." cut from the stem, so a stem that
    just mentions the word "answer" never shadows the real answer line.
    """
    match = _QUESTION_RE.match(block)
    if not match:
        return None
    stem = match.group(1).strip()
    tail = block[match.end():]
    inline = _ANSWER_SUFFIX_RE.search(stem)
    if not inline:
        return stem, tail
    question = (stem[:inline.start()] + stem[inline.end():]).strip()
    return question, inline.group(0) + "\n" + tail


def _extract_options(block: str) -> Tuple[List[str], List[str]]:
    """Returns (cleaned, raw) option texts, or two empty lists if fewer than 2 were found."""
    raw = [m.group(1).strip() for m in _LETTER_OPTION_RE.finditer(block)]
    if len(raw) < 2:
        raw = [m.group(1).strip() for m in _BULLET_OPTION_RE.finditer(block)]
        if len(raw) < 2:
            return [], []
    cleaned = [_CORRECT_NOTE_RE.sub("", opt, count=1).strip() for opt in raw]
    return cleaned, raw


def _match_answer_text(answer: str, options: List[str]) -> Optional[int]:
    answer = answer.strip().lower()
    for i, opt in enumerate(options):
        opt = opt.lower()
        if opt and (answer in opt or opt in answer):
            return i
    return None


def _resolve_correct_index(answer_area: str, options: List[str], raw_options: List[str]) -> int:
    letter = _ANSWER_LETTER_RE.search(answer_area)
    if letter:
        return ord(letter.group(1).upper()) - ord("A")

    index = 0
    answer = _ANSWER_TEXT_RE.search(answer_area)
    if answer:
        found = _match_answer_text(answer.group(1), options)
        if found is not None:
            index = found

    if index == 0:
        for i, opt in enumerate(raw_options):
            if _CORRECT_MARKER_RE.search(opt):
                index = i
                break
    return index


def _parse_block(block: str) -> Optional[Dict[str, Any]]:
    extracted = _extract_question(block)
    if not extracted:
        return None
    question, answer_area = extracted
    if not question:
        return None

    options, raw_options = _extract_options(block)
    if len(options) < 2:
        return None

    correct_index = _resolve_correct_index(answer_area, options, raw_options)
    options = options[:MAX_OPTIONS]
    if not 0 <= correct_index < len(options):
        correct_index = 0

    return {
        "question": question,
        "options": options,
        "correct_index": correct_index,
    }


def parse_mcq_text(text: Any) -> List[Dict[str, Any]]:
    """
    Parse an LLM quiz reply into a list of
    {"question": str, "options": [str, ...], "correct_index": int}.

    Never raises; anything unreadable just yields fewer (or no) questions.
    A question without a recognisable answer key defaults to its first option.
    """
    quiz: List[Dict[str, Any]] = []

    if not isinstance(text, str):
        return quiz

    text = text.replace("\r", "").strip()
    if not text:
        return quiz

    blocks = _split_blocks(_locate_first_question(text))
    for block in blocks:
        try:
            parsed = _parse_block(block)
        except Exception as e:
            logger.error(f"Error parsing question block: {e}", exc_info=True)
            continue
        if parsed:
            quiz.append(parsed)

    logger.debug(f"Parsed {len(quiz)} of {len(blocks)} question blocks")
    return quiz
