"""
repositories/reservation_repo.py
---------------------------------
Read-only data access for reservations, as needed by the customer layer.
"""

from typing import Protocol

from db.connection import QueryExecutor
from models.reservation import Reservation
from utils.logger import get_logger

logger = get_logger(__name__)


class ReservationSource(Protocol):
    """Whatever can list the reservations held by one customer."""

    def get_reservations_for_customer(self, customer_id: int) -> list[Reservation]:
        ...


class ReservationRepository:
    """Repository for lookups on the reservations table."""

    def __init__(self, db: QueryExecutor):
        self.db = db

    def get_reservations_for_customer(self, customer_id: int) -> list[Reservation]:
        """
        Fetch every reservation for a customer, earliest first.

        Args:
            customer_id: Primary key of the customer.

        Returns:
            List of Reservation objects (empty if the customer has none).
        """
        sql = """
            SELECT id, customer_id, start_at, num_guests, notes
            FROM reservations
            WHERE customer_id = %s
            ORDER BY start_at;
        """
        rows = self.db.execute(sql, (customer_id,))
        logger.debug(f"Loaded {len(rows)} reservations for customer #{customer_id}")
        return [Reservation.from_row(r) for r in rows]
