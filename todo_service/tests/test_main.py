import logging
import ssl

import pytest

from app import main
from app.config import Settings
from app.tls import TLSConfigError


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(main.uvicorn, "run", lambda app, **kw: calls.append((app, kw)))
    return calls


def test_run_plain_http(uvicorn_calls):
    main.run(Settings(_env_file=None, HOST="127.0.0.1", PORT=8080))

    assert len(uvicorn_calls) == 1
    app, kw = uvicorn_calls[0]
    assert app.title == "Todo Service"
    assert kw == {"host": "127.0.0.1", "port": 8080, "log_level": "info"}


def test_run_mutual_tls(uvicorn_calls, pem_files):
    s = Settings(
        _env_file=None,
        SSL_CERTFILE=pem_files["server.crt"],
        SSL_KEYFILE=pem_files["server.key"],
        SSL_CA_CERTS=pem_files["ca.crt"],
        SSL_CLIENT_AUTH="required",
    )
    main.run(s)

    _, kw = uvicorn_calls[0]
    assert kw["ssl_certfile"] == pem_files["server.crt"]
    assert kw["ssl_ca_certs"] == pem_files["ca.crt"]
    assert kw["ssl_cert_reqs"] == ssl.CERT_REQUIRED
    assert kw["port"] == 8443


def test_run_invalid_tls_does_not_start(uvicorn_calls, pem_files):
    s = Settings(_env_file=None, SSL_KEYFILE=pem_files["server.key"])

    with pytest.raises(TLSConfigError):
        main.run(s)
    assert uvicorn_calls == []


def test_log_level_maps_uvicorn_names():
    assert main.log_level("warning") == logging.WARNING
    assert main.log_level("info") == logging.INFO
    assert main.log_level("trace") == logging.DEBUG


def test_run_logs_invalid_tls(uvicorn_calls, pem_files, caplog):
    s = Settings(_env_file=None, SSL_CERTFILE=pem_files["server.crt"])

    with caplog.at_level(logging.ERROR, logger="app.main"):
        with pytest.raises(TLSConfigError):
            main.run(s)

    assert "Configuración TLS inválida" in caplog.text
    assert "sin SSL_KEYFILE" in caplog.text


def test_run_logs_listening_address(uvicorn_calls, caplog):
    with caplog.at_level(logging.INFO, logger="app.main"):
        main.run(Settings(_env_file=None, HOST="127.0.0.1", PORT=8080))

    assert "Escuchando en http://127.0.0.1:8080" in caplog.text
