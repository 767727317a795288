"""Customer generator for the customers table."""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterator

from backoffice_data.formatting import make_email, nigerian_phone
from backoffice_data.generators.base import BaseGenerator
from backoffice_data.generators.fields import WeightedRoll, offset_days
from backoffice_data.generators.pool import DataPools
from backoffice_data.generators.seeding import SeedCursor, hash_string
from backoffice_data.models.financial import Customer, CustomerStatus

logger = logging.getLogger(__name__)


class CustomerGenerator(BaseGenerator):
    """Generate customers for a batch seed.

    Record ``i`` is drawn from its own stream at ``hash(seed) + i``, so any
    single row can be rebuilt without generating the rows before it.

    Parameters
    ----------
    seed : str
        Batch seed string (default ``"customers"``).
    pools : DataPools | None
        Literal pools.
    today : date | None
        Reference date for join dates.
    """

    STATUS = WeightedRoll.from_weights(
        [(CustomerStatus.ACTIVE, 90), (CustomerStatus.SCHEDULED, 10)]
    )

    def __init__(
        self,
        seed: str = "customers",
        pools: DataPools | None = None,
        today: date | None = None,
    ) -> None:
        super().__init__(pools, today)
        self.seed = seed
        self.base_seed = hash_string(seed)

    def generate(self, index: int) -> Customer:
        """Generate the customer at position ``index`` of the batch."""
        cursor = SeedCursor.from_seed(self.base_seed + index)

        name, cursor = cursor.choice(self.pools.customer_names)
        number, cursor = cursor.next_int(10000, 99999)
        status, cursor = self.STATUS.draw(cursor)
        prefix, cursor = cursor.next_int(800, 909)
        middle, cursor = cursor.next_int(100, 999)
        line, cursor = cursor.next_int(1000, 9999)
        domain, cursor = cursor.choice(self.pools.email_domains)
        days_ago, cursor = cursor.next_int(1, 730)

        return Customer(
            id=f"customer-{index + 1}",
            customer_number=f"ID: {number}",
            name=name,
            status=status,
            phone_number=nigerian_phone(prefix, middle, line),
            # Position suffix keeps emails distinct when names repeat
            email=make_email(name, domain, suffix=str(index + 1)),
            date_joined=offset_days(self.today, -days_ago),
        )

    def generate_batch(self, count: int = 100) -> Iterator[Customer]:
        """Generate ``count`` customers in batch order.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Returns
        -------
        Iterator[Customer]
            Customers 0..count-1; calling again yields the same sequence.

        Raises
        ------
        InvalidCountError
            If ``count`` is negative or not an integer.
        """
        self._validate_count(count)
        logger.debug(
            "Generating %d customers for seed %r",
            count,
            self.seed,
            extra={"entity": "customers", "count": count, "seed": self.base_seed},
        )
        return (self.generate(i) for i in range(count))
