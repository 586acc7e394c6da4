"""
Esquemas Pydantic expuestos por la api del servicio.
"""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """
    Respuesta del endpoint de healthcheck.

    Atributos:
        status:
            Siempre "ok" mientras el proceso acepte peticiones.
        service:
            Nombre del servicio (`Settings.APP_NAME`).
    """

    status: Literal["ok"] = "ok"
    service: str = Field(..., description="Nombre del servicio")
