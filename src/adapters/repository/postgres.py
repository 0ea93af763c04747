"""
PostgreSQL repository adapter - Implements RideRepository protocol.

This module provides the PostgreSQL implementation of the domain's
repository port using psycopg3 with raw SQL.

Rides are append-only: rows are inserted and read, never updated or
deleted. Ordering by the SERIAL ``ride_id`` gives insertion order, which
is the only sort order the API exposes.
"""

import logging
from pathlib import Path

import psycopg
from psycopg_pool import ConnectionPool

from src.domain.ports import NewRide, Ride

logger = logging.getLogger(__name__)

# src/adapters/repository/postgres.py -> <project root>/migrations
MIGRATIONS_DIR = Path(__file__).resolve().parents[3] / "migrations"

_RIDE_COLUMNS = """
    ride_id, start_lat, start_long, end_lat, end_long,
    rider_name, driver_name, driver_vehicle, created
"""


def _row_to_ride(row: tuple) -> Ride:
    """Map a row selected with _RIDE_COLUMNS to a Ride."""
    return Ride(
        ride_id=row[0],
        start_lat=row[1],
        start_long=row[2],
        end_lat=row[3],
        end_long=row[4],
        rider_name=row[5],
        driver_name=row[6],
        driver_vehicle=row[7],
        created=row[8],
    )


class PostgresRideRepository:
    """
    Implements RideRepository protocol via psycopg3.

    Uses structural subtyping - no explicit inheritance from Protocol.
    All SQL uses parameterized queries.
    """

    def __init__(self, pool: ConnectionPool) -> None:
        """
        Initialize repository with connection pool.

        Args:
            pool: psycopg3 ConnectionPool for database connections
        """
        self._pool = pool

    def list_rides(self) -> list[Ride]:
        """Fetch every ride ordered by id (insertion order)."""
        sql = f"SELECT {_RIDE_COLUMNS} FROM rides ORDER BY ride_id"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql)
            return [_row_to_ride(row) for row in cursor.fetchall()]

    def add_ride(self, ride: NewRide) -> Ride:
        """
        Insert a ride, then re-fetch the stored row.

        The database assigns ``ride_id`` (SERIAL) and ``created`` (NOW()),
        so concurrent inserts never collide on id.

        Args:
            ride: Validated ride fields from the domain layer

        Returns:
            The stored ride as read back from the table
        """
        insert_sql = """
            INSERT INTO rides (start_lat, start_long, end_lat, end_long,
                               rider_name, driver_name, driver_vehicle)
            VALUES (%s, %s, %s, %s, %s, %s, %s)
            RETURNING ride_id
        """
        select_sql = f"SELECT {_RIDE_COLUMNS} FROM rides WHERE ride_id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(
                insert_sql,
                (
                    ride.start_lat,
                    ride.start_long,
                    ride.end_lat,
                    ride.end_long,
                    ride.rider_name,
                    ride.driver_name,
                    ride.driver_vehicle,
                ),
            )
            ride_id = cursor.fetchone()[0]

            cursor.execute(select_sql, (ride_id,))
            row = cursor.fetchone()
            conn.commit()
            return _row_to_ride(row)

    def get_ride(self, ride_id: int) -> Ride | None:
        """Fetch one ride by id, or None if absent."""
        sql = f"SELECT {_RIDE_COLUMNS} FROM rides WHERE ride_id = %s"

        with self._pool.connection() as conn, conn.cursor() as cursor:
            cursor.execute(sql, (ride_id,))
            row = cursor.fetchone()
            return _row_to_ride(row) if row is not None else None


def run_migrations(pool: ConnectionPool, migrations_dir: Path = MIGRATIONS_DIR) -> None:
    """
    Apply every ``*.sql`` file in ``migrations_dir``, ordered by filename.

    Files must be safe to re-run (CREATE TABLE IF NOT EXISTS and the like)
    since they are applied on every startup.

    Raises:
        RuntimeError: If a file cannot be read or its SQL fails
    """
    if not migrations_dir.is_dir():
        logger.warning("No migrations directory at %s, skipping schema setup", migrations_dir)
        return

    sql_files = sorted(migrations_dir.glob("*.sql"))
    logger.info("Applying %d migration file(s) from %s", len(sql_files), migrations_dir)

    for sql_file in sql_files:
        try:
            with pool.connection() as conn:
                conn.execute(sql_file.read_text())
        except (OSError, psycopg.Error) as e:
            logger.error("Migration %s failed: %s", sql_file.name, e)
            raise RuntimeError(f"Database migration failed: {sql_file.name}") from e
        logger.info("Applied %s", sql_file.name)
