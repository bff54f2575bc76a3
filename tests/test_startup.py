from __future__ import annotations

from fastapi.testclient import TestClient

from maiden import main
from maiden.config import Settings


def test_startup_creates_data_directory(tmp_path):
    data_dir = tmp_path / 'fresh' / 'data'
    application = main.create_app(Settings(data_dir=str(data_dir)))

    assert not data_dir.exists()
    with TestClient(application) as client:
        assert data_dir.is_dir()
        assert client.get('/api/v1/dust').json()['entries'] == []


def test_create_app_threads_configuration(tmp_path):
    config = Settings(data_dir=str(tmp_path), api_root='/api/v2')
    application = main.create_app(config)

    assert application.state.settings is config
    assert application.state.dust.devices.root == tmp_path.resolve()
    assert application.state.dust.resources('') == '/api/v2/dust'
