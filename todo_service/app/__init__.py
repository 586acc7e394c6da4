"""Todo Service Application.

Servidor HTTP mínimo que acompaña las pruebas de TLS mutuo (mTLS).

Arquitectura:
    - routers/: FastAPI endpoints (todo, health)
    - config.py: Settings cargados desde entorno / `.env`
    - tls.py: Traducción de la configuración TLS a argumentos de Uvicorn
    - main.py: Fábrica de la app y arranque del servidor

Usage:
    todo-service                # o: python -m app.main (aplica SSL_*)
    uvicorn app.main:app        # solo HTTP plano, ignora SSL_*
"""

__version__ = "1.0.0"
