#!/usr/bin/env python3
"""
Verification script: runs the MCQ parser over saved LLM replies.
Checks: at least one question per file, 2-4 options, answer index in range.

Usage: verify_parser.py [reply.txt ...]   (defaults to samples/*.txt)
"""
import sys
from pathlib import Path
from typing import Any, Dict, List

from quiz_toolkit.mcq_parser import parse_mcq_text
from quiz_toolkit.settings import configure_logging

SAMPLES_DIR = Path(__file__).parent / "samples"


def check_question(q: Dict[str, Any]) -> List[str]:
    problems = []
    if not q.get("question"):
        problems.append("empty question text")
    options = q.get("options", [])
    if not 2 <= len(options) <= 4:
        problems.append(f"{len(options)} options")
    if not 0 <= q.get("correct_index", -1) < len(options):
        problems.append(f"correct_index {q.get('correct_index')} out of range")
    return problems


def verify_file(path: Path) -> List[str]:
    print(f"\nParsing {path.name}...")
    questions = parse_mcq_text(path.read_text(encoding="utf-8"))
    if not questions:
        return [f"{path.name}: NO QUESTIONS FOUND"]

    errors = []
    for n, q in enumerate(questions, start=1):
        print(f"  {n}. {q['question']}")
        for i, opt in enumerate(q["options"]):
            mark = "*" if i == q["correct_index"] else " "
            print(f"   {mark} {chr(65 + i)}) {opt}")
        for problem in check_question(q):
            errors.append(f"{path.name} Q{n}: {problem}")
    print(f"  ✓ {len(questions)} questions parsed")
    return errors


def main(argv: List[str]) -> int:
    configure_logging()
    paths = [Path(a) for a in argv] or sorted(SAMPLES_DIR.glob("*.txt"))
    if not paths:
        print("⚠️  No reply files to verify")
        return 0

    errors = []
    for path in paths:
        errors.extend(verify_file(path))

    print("\n" + "=" * 60)
    if errors:
        print(f"❌ {len(errors)} issues found:")
        for e in errors[:20]:
            print(f"  - {e}")
        if len(errors) > 20:
            print(f"  ... and {len(errors) - 20} more")
        return 1
    print(f"🎉 All {len(paths)} files parsed cleanly")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
