"""Base generator class for all data generators."""

from __future__ import annotations

from abc import ABC
from datetime import date

from backoffice_data.exceptions import InvalidCountError
from backoffice_data.generators.pool import DataPools


class BaseGenerator(ABC):
    """Base class for all data generators.

    Provides the injected literal pools and the reference date used for
    relative dates. Generators hold no stream state of their own: every
    record is rebuilt from its seed on each call.

    Parameters
    ----------
    pools : DataPools | None
        Literal pools (defaults to the built-in ones).
    today : date | None
        Reference date for "N days ago" style fields. Defaults to the
        current date at construction time.
    """

    def __init__(
        self,
        pools: DataPools | None = None,
        today: date | None = None,
    ) -> None:
        self.pools = pools or DataPools.default()
        self.today = today or date.today()

    @staticmethod
    def _validate_count(count: int) -> int:
        """Reject negative and non-integer record counts."""
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidCountError(f"Record count must be an integer, got {count!r}")
        if count < 0:
            raise InvalidCountError(f"Record count must be non-negative, got {count}")
        return count
