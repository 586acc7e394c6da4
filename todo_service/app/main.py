"""
Punto de entrada principal del servicio todo.

Expone una función `create_app` para facilitar el testeo y la integración
con servidores ASGI (Uvicorn, Gunicorn, etc.), una instancia global `app`
usada por defecto con `uvicorn app.main:app`, y `run()` que arranca Uvicorn
con la configuración TLS de `Settings`.

Las rutas se definen en el paquete `routers`:
    - health: endpoint de salud.
    - todo:   endpoint `GET /todo`.
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Settings, get_settings
from .routers import health, todo
from .tls import TLSConfigError, is_mutual, ssl_options

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def log_level(level: str) -> int:
    # "trace" solo existe en Uvicorn
    return getattr(logging, level.upper(), logging.DEBUG)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=log_level(level),
        format=LOG_FORMAT,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Crea y configura la aplicación FastAPI.

    - Asigna nombre y versión de la api.
    - Configura CORS según `CORS_ORIGINS`.
    - Registra los routers de salud y de todo.

    Args:
        settings: Configuración a usar; por defecto `get_settings()`.

    Returns:
        Instancia configurada de `FastAPI`.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Todo Service",
        description="Servidor de prueba para conexiones con TLS mutuo",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
    )
    app.dependency_overrides[get_settings] = lambda: settings

    # --- CORS Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "HEAD"],
        allow_headers=["*"],
    )

    # --- Rutas de healthcheck ---
    app.include_router(health.router, prefix="/health", tags=["health"])

    # --- Ruta de negocio ---
    app.include_router(todo.router, tags=["todo"])

    logger.info("%s %s creado (env=%s)", settings.APP_NAME, __version__, settings.ENV)
    return app


# Instancia por defecto utilizada por Uvicorn
app = create_app()


def run(settings: Optional[Settings] = None) -> None:
    """
    Arranca Uvicorn con la configuración (y el TLS) de `settings`.

    Raises:
        TLSConfigError: si la configuración TLS es inconsistente.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    try:
        tls = ssl_options(settings)
    except TLSConfigError as e:
        logger.error("Configuración TLS inválida: %s", e)
        raise

    scheme = "https" if tls else "http"
    logger.info("Escuchando en %s://%s:%d", scheme, settings.HOST, settings.PORT)
    if tls:
        logger.info("Autenticación de cliente: %s (mTLS=%s)", settings.SSL_CLIENT_AUTH, is_mutual(settings))

    uvicorn.run(
        create_app(settings),
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL,
        **tls,
    )


if __name__ == "__main__":
    run()
