import io

import pytest
from pypdf import PdfWriter

from quiz_toolkit import quiz_source
from quiz_toolkit.errors import QuizError, SourceError
from quiz_toolkit.quiz_source import (
    extract_pdf_text,
    prepare_quiz_source,
    prepare_source,
    prepare_summary_source,
)

LONG_TEXT = "Photosynthesis converts light energy into chemical energy stored in glucose. " * 3


class _FakePage:
    def __init__(self, text):
        self._text = text

    def extract_text(self):
        return self._text


class _FakeReader:
    pages_text = []

    def __init__(self, source):
        self.pages = [_FakePage(t) for t in self.pages_text]


@pytest.fixture
def fake_reader(monkeypatch):
    monkeypatch.setattr(quiz_source, "PdfReader", _FakeReader)
    return _FakeReader


def _blank_pdf() -> io.BytesIO:
    writer = PdfWriter()
    writer.add_blank_page(width=72, height=72)
    buf = io.BytesIO()
    writer.write(buf)
    buf.seek(0)
    return buf


def test_text_is_trimmed():
    assert prepare_quiz_source(text="  \n" + LONG_TEXT + "\n ") == LONG_TEXT.strip()


def test_missing_input():
    with pytest.raises(SourceError, match="paste some text to generate a quiz"):
        prepare_quiz_source(text="   ")
    with pytest.raises(SourceError, match="to summarize"):
        prepare_summary_source()


def test_short_text_rejected():
    with pytest.raises(SourceError, match="at least 50 characters"):
        prepare_quiz_source(text="Too short to be useful.")


def test_summary_needs_more_text_than_quiz():
    text = "x" * 80
    assert prepare_quiz_source(text=text) == text
    with pytest.raises(SourceError, match="too short to summarize. Please provide more text"):
        prepare_summary_source(text=text)


def test_long_text_truncated():
    text = "a" * 12000
    assert prepare_quiz_source(text=text) == "a" * 10000
    assert len(prepare_summary_source(text="b" * 20000)) == 15000


def test_custom_limits():
    assert prepare_source(text="abcdefghij", min_chars=5, max_chars=4) == "abcd"


def test_pdf_pages_are_joined(fake_reader):
    fake_reader.pages_text = ["Page one " * 5, None, "Page three " * 5]
    content = prepare_quiz_source(pdf=io.BytesIO(b"%PDF"), filename="notes.pdf", mimetype="application/pdf")
    assert content == ("Page one " * 5 + "\n\n" + "Page three " * 5).strip()


def test_pdf_preferred_over_text(fake_reader):
    fake_reader.pages_text = ["From the PDF. " * 5]
    content = prepare_quiz_source(text=LONG_TEXT, pdf=io.BytesIO(b"%PDF"), filename="notes.pdf")
    assert content.startswith("From the PDF.")


@pytest.mark.parametrize("filename, mimetype", [
    ("notes.docx", None),
    ("notes.pdf", "text/plain"),
    (None, None),
])
def test_non_pdf_upload_rejected(filename, mimetype):
    with pytest.raises(SourceError, match="Invalid file type"):
        prepare_quiz_source(pdf=io.BytesIO(b"data"), filename=filename, mimetype=mimetype)


def test_unreadable_pdf_is_wrapped(monkeypatch):
    def broken(source):
        raise ValueError("not a pdf")

    monkeypatch.setattr(quiz_source, "PdfReader", broken)
    with pytest.raises(SourceError, match="Failed to parse PDF") as info:
        extract_pdf_text(io.BytesIO(b"garbage"))
    assert isinstance(info.value.__cause__, ValueError)
    assert isinstance(info.value, QuizError)


def test_blank_pdf_has_no_text():
    assert extract_pdf_text(_blank_pdf()).strip() == ""
    with pytest.raises(SourceError, match="too short"):
        prepare_quiz_source(pdf=_blank_pdf(), filename="blank.pdf")
