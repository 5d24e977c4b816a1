"""
models/customer.py
------------------
Domain model for restaurant customers, and the row <-> entity mapping
shared by every customer query.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

# Column list selected by every customer query; keys match `Customer.from_row`.
CUSTOMER_COLUMNS = (
    "customers.id, customers.first_name, customers.last_name, "
    "customers.phone, customers.notes"
)


@dataclass
class Customer:
    """
    A guest of the restaurant.

    Attributes:
        id: Database primary key (None until the customer is first saved).
        first_name: Given name.
        last_name: Family name.
        phone: Contact number, stored as entered.
        notes: Optional free-text notes.
    """
    first_name: str
    last_name: str
    phone: str = ""
    notes: Optional[str] = None
    id: Optional[int] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    @property
    def is_persisted(self) -> bool:
        """True once the store has assigned an id."""
        return self.id is not None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Customer":
        """Convert a database row to a Customer domain object."""
        return cls(
            id=row["id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            phone=row["phone"],
            notes=row["notes"],
        )

    def __str__(self) -> str:
        return self.full_name
