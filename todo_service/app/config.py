"""
Módulo de configuración del servicio todo.

Utiliza `pydantic-settings` para cargar la configuración desde variables
de entorno y/o archivos `.env`. Todos los atributos definidos en `Settings`
pueden sobreescribirse mediante variables de entorno con el mismo nombre.

Ejemplo de `.env` para levantar el servidor con TLS mutuo:
    APP_NAME=todo_service
    PORT=8443
    SSL_CERTFILE=certs/server.crt
    SSL_KEYFILE=certs/server.key
    SSL_CA_CERTS=certs/ca.crt
    SSL_CLIENT_AUTH=required
"""

from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")
CLIENT_AUTH_MODES = ("none", "optional", "required")


class Settings(BaseSettings):
    """
    Configuración central del servicio.

    Atributos principales:
        APP_NAME:
            Nombre de la aplicación (documentación y healthcheck).
        ENV:
            Entorno de ejecución: "dev", "prod", "test", etc.
        HOST, PORT:
            Dirección y puerto donde escucha Uvicorn.
        LOG_LEVEL:
            Nivel de log de la app y de Uvicorn.
        CORS_ORIGINS:
            Orígenes permitidos separados por coma ("*" para todos).
        SSL_CERTFILE, SSL_KEYFILE, SSL_KEYFILE_PASSWORD:
            Certificado y clave del servidor (PEM). Sin certificado el
            servidor escucha en HTTP plano.
        SSL_CA_CERTS:
            Bundle de CAs con las que se verifican los certificados cliente.
        SSL_CLIENT_AUTH:
            "none", "optional" o "required".
    """

    APP_NAME: str = "todo_service"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 8443
    LOG_LEVEL: str = "info"

    CORS_ORIGINS: str = "*"

    # TLS / mTLS
    SSL_CERTFILE: Optional[str] = None
    SSL_KEYFILE: Optional[str] = None
    SSL_KEYFILE_PASSWORD: Optional[str] = None
    SSL_CA_CERTS: Optional[str] = None
    SSL_CLIENT_AUTH: str = "none"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL debe ser uno de {LOG_LEVELS}, no {v!r}")
        return v

    @field_validator("SSL_CLIENT_AUTH")
    @classmethod
    def check_client_auth(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in CLIENT_AUTH_MODES:
            raise ValueError(
                f"SSL_CLIENT_AUTH debe ser uno de {CLIENT_AUTH_MODES}, no {v!r}"
            )
        return v

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    """Instancia única de configuración usada en el resto de la app."""
    return Settings()
