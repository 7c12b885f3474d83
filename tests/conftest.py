"""Shared pytest fixtures for Zodiac Prompt Generator tests."""

from typing import Generator

import pytest
from fastapi.testclient import TestClient

from zodiacprompt.core.config import ZodiacPromptConfig
from zodiacprompt.core.prompt_builder import Selection


@pytest.fixture
def test_config(monkeypatch) -> ZodiacPromptConfig:
    """Create a configuration isolated from the environment and .env file.

    Returns:
        ZodiacPromptConfig instance with defaults only
    """
    for name in ZodiacPromptConfig.model_fields:
        monkeypatch.delenv(f"ZODIACPROMPT_{name.upper()}", raising=False)
    return ZodiacPromptConfig(_env_file=None)


@pytest.fixture
def dark_winter_aries() -> Selection:
    """The form's initial selection with Aries chosen."""
    return Selection(gender="female", tone="dark", theme="winter", sign="Aries")


@pytest.fixture
def test_client() -> Generator[TestClient, None, None]:
    """FastAPI TestClient with the lifespan hook run.

    Yields:
        TestClient bound to the application
    """
    from zodiacprompt.api.main import app

    with TestClient(app) as client:
        yield client
