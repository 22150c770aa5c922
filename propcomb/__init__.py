"""propcomb.

Motor de combinadores de parsers y simplificador de lógica proposicional.

Arquitectura:
    - infrastructure/: motor de parseo (vistas de entrada, combinadores, tokens)
    - domain/: términos de la lógica proposicional y simplificador
    - services/: gramáticas (lógica, calculadora), entorno y orquestación
    - api/: FastAPI endpoints (HTTP layer)
    - schemas.py: Request/Response models (Pydantic)
    - cli.py: comandos `prop` y `calc`

Usage:
    from propcomb.main import app
    # uvicorn propcomb.main:app --reload
"""

__version__ = "1.0.0"
