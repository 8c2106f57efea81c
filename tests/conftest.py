"""
Shared fixtures: an application wired to in-memory test doubles.
"""

from pathlib import Path
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from server.app import create_app
from server.config import ServiceConfig


class FakeSummaryClient:
    """Records prompts and returns a canned summary (or raises)."""

    def __init__(self, result: str = "Alice and Bob agreed on the budget.", error: Optional[Exception] = None):
        self.result = result
        self.error = error
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.result


class FakeMailClient:
    """Records outgoing messages instead of talking to a relay."""

    def __init__(self, error: Optional[Exception] = None):
        self.error = error
        self.sent: List[dict] = []

    async def send(self, recipients, subject, body) -> None:
        if self.error is not None:
            raise self.error
        self.sent.append({"recipients": list(recipients), "subject": subject, "body": body})


@pytest.fixture
def upload_dir(tmp_path) -> Path:
    return tmp_path / "uploads"


@pytest.fixture
def config(upload_dir) -> ServiceConfig:
    return ServiceConfig(upload_dir=str(upload_dir), email_user="bot@x.com")


@pytest.fixture
def summary_client() -> FakeSummaryClient:
    return FakeSummaryClient()


@pytest.fixture
def mail_client() -> FakeMailClient:
    return FakeMailClient()


@pytest.fixture
def client(config, summary_client, mail_client) -> TestClient:
    app = create_app(config, summary_client=summary_client, mail_client=mail_client)
    return TestClient(app)
