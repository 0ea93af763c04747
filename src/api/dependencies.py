"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresRideRepository
from src.domain.rides import RideService


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresRideRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresRideRepository(pool)


def get_ride_service(request: Request) -> RideService:
    """Create ride service wired to the Postgres repository."""
    return RideService(repository=get_repository(request))
