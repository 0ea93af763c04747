"""Repository adapters - Database implementations."""

from .postgres import PostgresRideRepository, run_migrations

__all__ = ["PostgresRideRepository", "run_migrations"]
