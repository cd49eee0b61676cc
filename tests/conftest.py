import time
from types import SimpleNamespace

import fitz  # PyMuPDF
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.gemini_service import AnalysisRequester


class FakeModels:
    def __init__(self, text=None, error=None, delay=0.0):
        self.text = text
        self.error = error
        self.delay = delay
        self.calls = []

    def generate_content(self, model, contents, config):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeGeminiClient:
    """Stands in for google.genai.Client; only ``models.generate_content`` is used."""

    def __init__(self, text=None, error=None, delay=0.0):
        self.models = FakeModels(text=text, error=error, delay=delay)

    @property
    def calls(self):
        return self.models.calls


def make_pdf(*page_texts: str) -> bytes:
    doc = fitz.open()
    for text in page_texts or ("",):
        page = doc.new_page()
        if text:
            page.insert_text((72, 72), text)
    data = doc.tobytes()
    doc.close()
    return data


SAMPLE_RESUME = """Jane Doe
jane@example.com | 555-123-4567 | https://www.linkedin.com/in/jane-doe

Education
B.Sc. Computer Science
  State University, 2019

Experience
Software Engineer, Acme Corp
Built billing services in Python

Skills
Python, SQL, Docker

Projects
Resume matcher
"""


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def make_requester():
    def _make(text=None, error=None, delay=0.0, **kwargs):
        client = FakeGeminiClient(text=text, error=error, delay=delay)
        return AnalysisRequester(client, **kwargs)

    return _make


@pytest.fixture
def client():
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_requester():
    """Route the analyze endpoints to the given requester."""

    def _use(requester):
        app.state.analysis_requester = requester
        return requester

    yield _use
    app.state.analysis_requester = None


@pytest.fixture
def pdf_factory():
    return make_pdf
