"""Helper utilities shared across API route handlers."""

from fastapi import HTTPException, status

from app.application.use_cases.activity import ActivityAggregationError


def activity_unavailable(exc: ActivityAggregationError) -> HTTPException:
    """Translate an aggregation failure into a ``503`` naming the failed source."""

    return HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail={
            "message": "No se pudo obtener la actividad reciente",
            "source": exc.kind.value,
        },
    )


__all__ = ["activity_unavailable"]
