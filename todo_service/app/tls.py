"""
tls.py
======

Convierte la configuración TLS de `Settings` en los argumentos `ssl_*` que
acepta `uvicorn.run`.

Sin certificado configurado el servidor queda en HTTP plano y
`ssl_options` devuelve un diccionario vacío. Con `SSL_CLIENT_AUTH` en
"optional" o "required" el servidor pide certificado al cliente y lo
verifica contra `SSL_CA_CERTS` (TLS mutuo).
"""

import logging
import ssl
from pathlib import Path
from typing import Any, Dict

from .config import Settings

logger = logging.getLogger(__name__)

_CLIENT_AUTH = {
    "none": ssl.CERT_NONE,
    "optional": ssl.CERT_OPTIONAL,
    "required": ssl.CERT_REQUIRED,
}


class TLSConfigError(ValueError):
    """Material TLS incompleto o inconsistente."""


def client_auth_mode(value: str) -> int:
    try:
        return _CLIENT_AUTH[value.strip().lower()]
    except KeyError:
        raise TLSConfigError(f"Modo de autenticación cliente desconocido: {value!r}") from None


def is_mutual(settings: Settings) -> bool:
    return bool(settings.SSL_CERTFILE) and settings.SSL_CLIENT_AUTH != "none"


def _check_file(name: str, path: str) -> None:
    if not Path(path).is_file():
        raise TLSConfigError(f"{name} no existe: {path}")


def ssl_options(settings: Settings) -> Dict[str, Any]:
    """
    Construye los argumentos TLS para Uvicorn.

    Args:
        settings: Configuración del servicio.

    Returns:
        Diccionario con `ssl_certfile`, `ssl_keyfile`, `ssl_keyfile_password`,
        `ssl_ca_certs` y `ssl_cert_reqs`, o vacío si TLS está desactivado.

    Raises:
        TLSConfigError: si falta el certificado o la clave, si algún archivo
            no existe, o si se pide certificado cliente sin `SSL_CA_CERTS`.
    """
    cert, key = settings.SSL_CERTFILE, settings.SSL_KEYFILE

    if not cert and not key:
        if settings.SSL_CLIENT_AUTH != "none":
            logger.warning("SSL_CLIENT_AUTH=%s ignorado: TLS desactivado", settings.SSL_CLIENT_AUTH)
        return {}

    if not cert:
        raise TLSConfigError("SSL_KEYFILE configurado sin SSL_CERTFILE")
    if not key:
        raise TLSConfigError("SSL_CERTFILE configurado sin SSL_KEYFILE")

    _check_file("SSL_CERTFILE", cert)
    _check_file("SSL_KEYFILE", key)

    cert_reqs = client_auth_mode(settings.SSL_CLIENT_AUTH)
    ca_certs = settings.SSL_CA_CERTS

    if cert_reqs != ssl.CERT_NONE and not ca_certs:
        raise TLSConfigError(
            f"SSL_CLIENT_AUTH={settings.SSL_CLIENT_AUTH} requiere SSL_CA_CERTS"
        )
    if ca_certs:
        _check_file("SSL_CA_CERTS", ca_certs)

    return {
        "ssl_certfile": cert,
        "ssl_keyfile": key,
        "ssl_keyfile_password": settings.SSL_KEYFILE_PASSWORD,
        "ssl_ca_certs": ca_certs,
        "ssl_cert_reqs": cert_reqs,
    }
