"""Utility script to populate an owner with demo CRM records."""

from __future__ import annotations

import argparse
from datetime import timedelta

from sqlalchemy.exc import SQLAlchemyError

from app.domain.entities import (
    CONTACT_TYPE_CLIENT,
    CONTACT_TYPE_LEAD,
    INTERACTION_TYPE_CALL,
    INTERACTION_TYPE_MEETING,
    PROJECT_STATUS_COMPLETED,
    PROJECT_STATUS_IN_PROGRESS,
    TASK_PRIORITY_HIGH,
    TASK_PRIORITY_LOW,
    TASK_STATUS_COMPLETED,
    TASK_STATUS_PENDING,
)
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.models import (
    ContactModel,
    InteractionModel,
    ProjectModel,
    TaskModel,
)
from app.infrastructure.security import create_owner_token
from app.utils import local_now


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the demo seed."""

    parser = argparse.ArgumentParser(
        description="Create demo contacts, interactions, tasks and projects for an owner.",
    )
    parser.add_argument(
        "--owner-id",
        type=int,
        default=1,
        help="Identificador del propietario de los registros (por defecto: 1)",
    )
    parser.add_argument(
        "--print-token",
        action="store_true",
        help="Imprime un token de acceso para el propietario al finalizar.",
    )
    return parser.parse_args()


def seed(session, owner_id: int) -> None:
    now = local_now()

    client = ContactModel(
        owner_id=owner_id,
        name="Ana Souza",
        email="ana@example.com",
        company="Souza Consultoria",
        type=CONTACT_TYPE_CLIENT,
        notes="Cliente desde 2021, prefiere contacto por teléfono.",
        created_at=now - timedelta(days=20),
        updated_at=now - timedelta(days=2),
    )
    lead = ContactModel(
        owner_id=owner_id,
        name="Bruno Lima",
        email="bruno@example.com",
        type=CONTACT_TYPE_LEAD,
        created_at=now - timedelta(days=3),
        updated_at=now - timedelta(days=3),
    )
    session.add_all([client, lead])
    session.flush()

    project = ProjectModel(
        owner_id=owner_id,
        name="Migración de CRM",
        description="Migrar la base de clientes al nuevo sistema.",
        status=PROJECT_STATUS_IN_PROGRESS,
        client_id=client.id,
        created_at=now - timedelta(days=15),
        updated_at=now - timedelta(days=1),
    )
    finished_project = ProjectModel(
        owner_id=owner_id,
        name="Auditoría anual",
        status=PROJECT_STATUS_COMPLETED,
        client_id=client.id,
        created_at=now - timedelta(days=60),
        updated_at=now - timedelta(days=10),
    )
    session.add_all([project, finished_project])
    session.flush()

    session.add_all(
        [
            TaskModel(
                owner_id=owner_id,
                title="Preparar propuesta",
                priority=TASK_PRIORITY_HIGH,
                status=TASK_STATUS_PENDING,
                due_date=now + timedelta(days=2),
                project_id=project.id,
                created_at=now - timedelta(days=5),
                updated_at=now - timedelta(days=5),
            ),
            TaskModel(
                owner_id=owner_id,
                title="Enviar contrato firmado",
                priority=TASK_PRIORITY_LOW,
                status=TASK_STATUS_COMPLETED,
                contact_id=client.id,
                created_at=now - timedelta(days=8),
                updated_at=now - timedelta(days=4),
            ),
            InteractionModel(
                contact_id=client.id,
                type=INTERACTION_TYPE_MEETING,
                date=now - timedelta(days=6),
                subject="Reunión de kickoff",
                description="Definición de alcance y cronograma del proyecto.",
                created_at=now - timedelta(days=6),
                updated_at=now - timedelta(days=6),
            ),
            InteractionModel(
                contact_id=lead.id,
                type=INTERACTION_TYPE_CALL,
                date=now - timedelta(hours=5),
                created_at=now - timedelta(hours=5),
                updated_at=now - timedelta(hours=5),
            ),
        ]
    )


def main() -> None:
    """Seed demo data using the provided command line arguments."""

    args = parse_args()

    initialize_database()

    session = SessionLocal()
    try:
        seed(session, args.owner_id)
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error al guardar los datos de demostración: {exc}") from exc
    else:
        print(f"Datos de demostración creados para el propietario {args.owner_id}")
        if args.print_token:
            print(f"Token: {create_owner_token(args.owner_id)}")
    finally:
        session.close()


if __name__ == "__main__":
    main()
