"""
routers
=======

FastAPI routers del servicio.

Modules
-------
todo
    Endpoint `GET /todo` con respuesta fija en texto plano.
health
    Endpoint de healthcheck.
"""

from . import health, todo

__all__ = ["health", "todo"]
