from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from stubs import StubOcrEngine

from simplifier.api.app import create_app
from simplifier.config.settings import Settings
from simplifier.processor.processor import build_processor
from simplifier.summarization.models import SummarizerConfig
from simplifier.summarization.summarizer import Summarizer


@pytest.fixture()
def settings() -> Settings:
    return Settings(openai_api_key="", summarizer_provider="openai")


@pytest.fixture()
def ocr_engine() -> StubOcrEngine:
    return StubOcrEngine(text="SECTION 1\nThe tenant pays rent.\n\nSECTION 2\nNo pets.\n")


@pytest.fixture()
def summary_client() -> MagicMock:
    client = MagicMock()
    client.create_chat_completion.return_value = (
        "The tenant pays rent and may not keep pets.\n\n- Rent is owed\n- No pets allowed"
    )
    return client


@pytest.fixture()
def client(settings: Settings, ocr_engine: StubOcrEngine) -> TestClient:
    """App with stub OCR and no language-model credential."""
    processor = build_processor(settings, ocr_engine=ocr_engine)
    return TestClient(create_app(settings, processor=processor))


@pytest.fixture()
def llm_client(
    settings: Settings,
    ocr_engine: StubOcrEngine,
    summary_client: MagicMock,
) -> TestClient:
    """App with stub OCR and a mocked language-model client."""
    summarizer = Summarizer(config=SummarizerConfig(api_key="sk-test"), client=summary_client)
    processor = build_processor(settings, ocr_engine=ocr_engine, summarizer=summarizer)
    return TestClient(create_app(settings, processor=processor))
