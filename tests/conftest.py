from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from maiden.config import Settings
from maiden.main import create_app
from maiden.services.dust import Dust


@pytest.fixture
def config(tmp_path) -> Settings:
    data_dir = tmp_path / 'data'
    data_dir.mkdir()
    return Settings(data_dir=str(data_dir), app_dir=str(tmp_path / 'app'), doc_dir=str(tmp_path / 'doc'))


@pytest.fixture
def dust(config) -> Dust:
    return Dust.from_settings(config)


@pytest.fixture
def client(config):
    with TestClient(create_app(config)) as test_client:
        yield test_client
