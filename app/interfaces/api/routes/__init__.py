from fastapi import FastAPI

from .activity import router as activity_router
from .contacts import router as contacts_router
from .dashboard import router as dashboard_router
from .projects import router as projects_router
from .tasks import router as tasks_router


def register_routes(app: FastAPI) -> None:
    """Registra todos los routers de la API en la aplicación FastAPI."""

    app.include_router(activity_router)
    app.include_router(dashboard_router)
    app.include_router(contacts_router)
    app.include_router(projects_router)
    app.include_router(tasks_router)
