"""
models/reservation.py
---------------------
Domain model for reservations, as read back for a customer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping, Optional


@dataclass
class Reservation:
    """
    A table booking held by one customer.

    Attributes:
        id: Database primary key (None for new records).
        customer_id: The customer who made the booking.
        start_at: When the party arrives.
        num_guests: Party size.
        notes: Optional free-text notes.
    """
    customer_id: int
    start_at: datetime
    num_guests: int
    notes: Optional[str] = None
    id: Optional[int] = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Reservation":
        return cls(
            id=row["id"],
            customer_id=row["customer_id"],
            start_at=row["start_at"],
            num_guests=row["num_guests"],
            notes=row["notes"],
        )

    def __str__(self) -> str:
        return f"{self.start_at:%Y-%m-%d %I:%M %p} | {self.num_guests} guests"
