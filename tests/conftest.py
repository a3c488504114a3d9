"""
Shared fixtures for handbook engine and API tests.
"""

from pathlib import Path

import pytest

UNIFORM_PARAGRAPH = (
    "Students must wear the prescribed school uniform and identification card "
    "at all times while on campus."
)
ATTENDANCE_PARAGRAPH = (
    "Absences exceeding twenty percent of class days may result in a failing "
    "grade unless properly excused."
)
BULLYING_PARAGRAPH = (
    "Bullying in any form, including cyber bullying, is prohibited and will be "
    "sanctioned by the Discipline Office."
)
APPEAL_PARAGRAPH = (
    "Students may appeal disciplinary decisions in writing within forty eight "
    "hours of the decision."
)

HANDBOOK_TEXT = "\n\n".join([
    "STUDENT HANDBOOK",
    "Page 1",
    UNIFORM_PARAGRAPH,
    ATTENDANCE_PARAGRAPH,
    "  \n",
    BULLYING_PARAGRAPH,
    APPEAL_PARAGRAPH,
])


class StubLoader:
    """Stands in for HandbookLoader without touching the filesystem."""

    def __init__(self, text=HANDBOOK_TEXT, error=None, path=Path("/srv/docs/studenthandbook.pdf")):
        self.text = text
        self.error = error
        self.path = path
        self.loads = 0

    def resolve_path(self):
        return None if self.error else self.path

    def load(self):
        self.loads += 1
        if self.error:
            raise self.error
        return self.text


class FakeOllamaClient:
    """Records chat calls and replies with a canned message."""

    def __init__(self, content="Generated text", error=None):
        self.content = content
        self.error = error
        self.calls = []

    def chat(self, model, messages, options=None):
        self.calls.append({"model": model, "messages": messages, "options": options})
        if self.error:
            raise self.error
        return {"message": {"role": "assistant", "content": self.content}}

    @property
    def last_prompt(self):
        return self.calls[-1]["messages"][-1]["content"]


@pytest.fixture
def handbook_text():
    return HANDBOOK_TEXT


@pytest.fixture
def stub_loader():
    return StubLoader()


@pytest.fixture
def fake_ollama():
    return FakeOllamaClient()
