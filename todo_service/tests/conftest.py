import pytest
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app

SETTINGS_ENV = (
    "APP_NAME", "ENV", "HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS",
    "SSL_CERTFILE", "SSL_KEYFILE", "SSL_KEYFILE_PASSWORD", "SSL_CA_CERTS", "SSL_CLIENT_AUTH",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, APP_NAME="todo_test", ENV="test")


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def pem_files(tmp_path):
    """Archivos PEM de relleno; `ssl_options` solo comprueba que existan."""
    paths = {}
    for name in ("server.crt", "server.key", "ca.crt"):
        p = tmp_path / name
        p.write_text("-----BEGIN PLACEHOLDER-----\n")
        paths[name] = str(p)
    return paths
