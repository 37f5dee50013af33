import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client() -> TestClient:
    from md_to_notion.main import app

    return TestClient(app)
