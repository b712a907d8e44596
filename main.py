import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings
from app.interfaces.api.routes import register_routes
from app.infrastructure.database import initialize_database, engine


def configure_logging(level: str) -> None:
    """Configure the root logger once for the API process."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logging.getLogger().setLevel(level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Inicializa la base de datos al arrancar y libera los recursos al cerrar."""

    initialize_database()
    yield
    engine.dispose()


def create_app() -> FastAPI:
    """Crea y configura la aplicación principal de FastAPI."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="CRM Activity API", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_routes(app)
    return app


app = create_app()
