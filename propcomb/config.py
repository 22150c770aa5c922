"""
Módulo de configuración de propcomb.

Utiliza `pydantic-settings` para cargar la configuración desde variables
de entorno y/o archivos `.env`. Todos los atributos definidos en `Settings`
pueden sobreescribirse mediante variables de entorno con el mismo nombre.

Ejemplo de `.env`:
    APP_NAME=propcomb
    ENV=prod
    HOST=0.0.0.0
    PORT=8004
    LOG_LEVEL=INFO
    MAX_INPUT_LENGTH=10000
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Configuración central del servicio.

    Atributos principales:
        APP_NAME:
            Nombre de la aplicación (aparece en la documentación de FastAPI).
        ENV:
            Entorno de ejecución: "dev", "prod", "test", etc.
        HOST / PORT:
            Dirección en la que escucha Uvicorn.
        LOG_LEVEL:
            Nivel del logging (DEBUG, INFO, WARNING, ...).
        MAX_INPUT_LENGTH:
            Longitud máxima aceptada para fórmulas y expresiones en la API.
    """

    APP_NAME: str = "propcomb"
    ENV: str = "dev"

    HOST: str = "0.0.0.0"
    PORT: int = 8004

    LOG_LEVEL: str = "INFO"

    MAX_INPUT_LENGTH: int = 10_000

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        extra="ignore",
    )


# Instancia única de configuración usada en el resto de la app
settings = Settings()
