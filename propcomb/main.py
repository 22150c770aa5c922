"""
Punto de entrada principal del servicio propcomb.

Expone una función `create_app` para facilitar el testeo y la integración
con servidores ASGI (Uvicorn, Gunicorn, etc.), y una instancia global
`app` usada por defecto cuando se ejecuta directamente con Uvicorn.

Usage:
    uvicorn propcomb.main:app --reload
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from . import __version__
from .api.routes import router
from .config import settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """
    Crea y configura la aplicación FastAPI.

    - Asigna nombre y versión de la api.
    - Configura CORS para permitir peticiones desde el frontend.
    - Registra las rutas de lógica proposicional, calculadora y salud.

    Returns:
        Instancia configurada de `FastAPI`.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        description="Parser combinators y simplificador de lógica proposicional",
        version=__version__,
    )

    # --- CORS Configuration ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # En producción, especificar orígenes
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, tags=["propcomb"])

    logger.info(f"{settings.APP_NAME} {__version__} iniciado - entorno: {settings.ENV}")

    return app


# Instancia por defecto utilizada por Uvicorn
app = create_app()

if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )
