"""
Quiz toolkit

Prompt building, source preparation, LLM quiz-reply parsing and grading
for the AI quiz / summary app.
"""

from .mcq_parser import parse_mcq_text

__version__ = "1.0.0"
