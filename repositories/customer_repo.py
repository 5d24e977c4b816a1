"""
repositories/customer_repo.py
------------------------------
Data access layer for customers.
All SQL queries related to the `customers` table live here, including
name search and the reservation-count rankings.
"""

from typing import Optional

from db.connection import QueryExecutor
from models.customer import CUSTOMER_COLUMNS, Customer
from models.errors import InvalidArgument, InvalidState, NotFound
from models.reservation import Reservation
from models.result import Err, Ok, Result
from repositories.reservation_repo import ReservationRepository, ReservationSource
from utils.logger import get_logger

logger = get_logger(__name__)

NAME_ORDER = "ORDER BY customers.last_name, customers.first_name"

# Customers with equal counts fall back to name order, so the ranking
# queries below always agree with each other.
RANK_ORDER = (
    "ORDER BY COUNT(reservations.id) DESC, "
    "customers.last_name, customers.first_name, customers.id"
)


def parse_search_terms(name: Optional[str]) -> Result:
    """
    Split a free-text name query into one or two search terms.

    The query is trimmed, then split on single spaces.

    Returns:
        Ok(tuple of terms), or Err(InvalidArgument) for an empty query
        or one with more than two terms.
    """
    stripped = (name or "").strip()
    if not stripped:
        return Err(InvalidArgument("Please enter a name."))

    terms = tuple(stripped.split(" "))
    if len(terms) > 2:
        return Err(InvalidArgument("Please enter one or two search terms."))
    return Ok(terms)


def _check_limit(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int) or n < 0:
        raise InvalidArgument("Number of customers must be a non-negative integer.")


class CustomerRepository:
    """Repository for CRUD, search and ranking queries on the customers table."""

    def __init__(self, db: QueryExecutor, reservations: Optional[ReservationSource] = None):
        """
        Args:
            db: Query executor every statement is sent to.
            reservations: Source used by `get_reservations`; defaults to a
                ReservationRepository on the same executor.
        """
        self.db = db
        self.reservations = reservations or ReservationRepository(db)

    # ── READ ──────────────────────────────────────────────

    def all(self) -> list[Customer]:
        """Fetch every customer, ordered by last name then first name."""
        sql = f"SELECT {CUSTOMER_COLUMNS} FROM customers {NAME_ORDER};"
        return [Customer.from_row(r) for r in self.db.execute(sql)]

    def get(self, customer_id: int) -> Customer:
        """
        Fetch a single customer by ID.

        Raises:
            NotFound: If no customer has this ID.
        """
        sql = f"SELECT {CUSTOMER_COLUMNS} FROM customers WHERE customers.id = %s;"
        rows = self.db.execute(sql, (customer_id,))
        if not rows:
            raise NotFound(f"No such customer: {customer_id}")
        return Customer.from_row(rows[0])

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, customer: Customer) -> None:
        """
        Insert a new customer or update an existing one.

        A customer without an id is inserted and gets the generated id
        assigned in place. Otherwise all mutable fields are overwritten
        for the matching row (last write wins).
        """
        try:
            if not customer.is_persisted:
                sql = """
                    INSERT INTO customers (first_name, last_name, phone, notes)
                    VALUES (%s, %s, %s, %s)
                    RETURNING id;
                """
                rows = self.db.execute(sql, (
                    customer.first_name, customer.last_name,
                    customer.phone, customer.notes,
                ))
                customer.id = rows[0]["id"]
                logger.info(f"Created customer #{customer.id}")
            else:
                sql = """
                    UPDATE customers
                    SET first_name = %s, last_name = %s, phone = %s, notes = %s
                    WHERE id = %s;
                """
                self.db.execute(sql, (
                    customer.first_name, customer.last_name,
                    customer.phone, customer.notes, customer.id,
                ))
                logger.info(f"Updated customer #{customer.id}")
        except Exception as e:
            logger.error(f"Failed to save customer {customer.full_name!r}: {e}")
            raise

    # ── SEARCH ────────────────────────────────────────────

    def try_search(self, name: Optional[str]) -> Result:
        """
        Search customers by first and/or last name without raising on bad input.

        One term matches either name; two terms match "first last" or
        "last first". Matching is a case-insensitive substring match.

        Returns:
            Ok(list of Customer ordered by name) or Err(InvalidArgument).
        """
        parsed = parse_search_terms(name)
        if isinstance(parsed, Err):
            return parsed

        terms = parsed.value
        if len(terms) == 2:
            first, last = (f"%{t}%" for t in terms)
            sql = f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                WHERE (first_name ILIKE %s AND last_name ILIKE %s)
                   OR (first_name ILIKE %s AND last_name ILIKE %s)
                {NAME_ORDER};
            """
            params: tuple = (first, last, last, first)
        else:
            term = f"%{terms[0]}%"
            sql = f"""
                SELECT {CUSTOMER_COLUMNS}
                FROM customers
                WHERE first_name ILIKE %s OR last_name ILIKE %s
                {NAME_ORDER};
            """
            params = (term, term)

        rows = self.db.execute(sql, params)
        logger.debug(f"Search {terms!r} matched {len(rows)} customers")
        return Ok([Customer.from_row(r) for r in rows])

    def search(self, name: Optional[str]) -> list[Customer]:
        """
        Search customers by name.

        Raises:
            InvalidArgument: For an empty query or more than two terms.
        """
        return self.try_search(name).unwrap()

    # ── RANKING ───────────────────────────────────────────

    def get_top_customers(self, n: int) -> list[Customer]:
        """
        Fetch the `n` customers with the most reservations, busiest first.
        Customers without reservations are never included.
        """
        return [customer for customer, _ in self.get_top_customers_with_counts(n)]

    def get_top_reservations(self, n: int) -> list[int]:
        """
        Fetch the `n` largest per-customer reservation counts, in the same
        order as `get_top_customers(n)`.
        """
        _check_limit(n)
        if n == 0:
            return []
        sql = f"""
            SELECT COUNT(reservations.id) AS reservation_count
            FROM customers
            JOIN reservations ON reservations.customer_id = customers.id
            GROUP BY customers.id
            {RANK_ORDER}
            LIMIT %s;
        """
        return [int(r["reservation_count"]) for r in self.db.execute(sql, (n,))]

    def get_top_customers_with_counts(self, n: int) -> list[tuple[Customer, int]]:
        """
        Fetch the `n` busiest customers paired with their reservation counts.

        Raises:
            InvalidArgument: If `n` is not a non-negative integer.
        """
        _check_limit(n)
        if n == 0:
            return []
        sql = f"""
            SELECT {CUSTOMER_COLUMNS}, COUNT(reservations.id) AS reservation_count
            FROM customers
            JOIN reservations ON reservations.customer_id = customers.id
            GROUP BY customers.id
            {RANK_ORDER}
            LIMIT %s;
        """
        rows = self.db.execute(sql, (n,))
        logger.debug(f"Top {n} customers: {len(rows)} rows")
        return [(Customer.from_row(r), int(r["reservation_count"])) for r in rows]

    # ── RESERVATIONS ──────────────────────────────────────

    def get_reservations(self, customer: Customer) -> list[Reservation]:
        """
        Fetch the reservations held by a saved customer.

        Raises:
            InvalidState: If the customer has not been saved yet.
        """
        if not customer.is_persisted:
            raise InvalidState("Customer has not been saved yet.")
        return self.reservations.get_reservations_for_customer(customer.id)
