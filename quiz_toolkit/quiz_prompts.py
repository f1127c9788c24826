from typing import Any, Dict, List

from . import settings

QUIZ_FORMAT_EXAMPLE = """1. What is the capital of France?
A) London
B) Berlin
C) Paris
D) Madrid
Answer: C)"""

_QUIZ_TEMPLATE = """Create exactly {count} multiple-choice questions based on the text below.

IMPORTANT FORMAT RULES:
- Number each question as "1.", "2.", etc.
- Provide exactly 4 options labeled "A)", "B)", "C)", "D)"
- After all options, write "Answer: X)" where X is the correct letter
- Keep questions clear and concise

Example format:
{example}

Text to create questions from:
---
{source}
---

Now create {count} questions following the exact format shown above."""

_SUMMARY_TEMPLATE = """You are an expert at explaining complex topics in simple, easy-to-understand language.

Please read the following text and provide a comprehensive summary that:
1. Explains all the key concepts in very simple terms (as if explaining to a beginner)
2. Breaks down complex ideas into easy-to-understand points
3. Includes all important information from the text
4. Uses everyday language and avoids jargon
5. Organizes the information logically with clear sections

Format your summary with:
- A brief overview at the start
- Main points organized with headings
- Simple explanations for any technical terms
- Key takeaways at the end

Text to summarize:
---
{source}
---

Please provide a clear, comprehensive, and beginner-friendly summary:"""


def coerce_question_count(value: Any) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError):
        return settings.DEFAULT_QUESTION_COUNT
    if count <= 0:
        return settings.DEFAULT_QUESTION_COUNT
    return min(count, settings.MAX_QUESTIONS_PER_QUIZ)


def build_quiz_prompt(source: str, num_questions: Any = None) -> str:
    count = coerce_question_count(num_questions)
    return _QUIZ_TEMPLATE.format(count=count, example=QUIZ_FORMAT_EXAMPLE, source=source)


def build_summary_prompt(source: str) -> str:
    return _SUMMARY_TEMPLATE.format(source=source)


def chat_messages(prompt: str) -> List[Dict[str, str]]:
    return [{"role": "user", "content": prompt}]
