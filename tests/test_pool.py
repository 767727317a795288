"""Tests for literal pools."""

import dataclasses

import pytest

from backoffice_data.config import GeneratorConfig
from backoffice_data.exceptions import ConfigurationError, EmptyPoolError
from backoffice_data.generators.pool import (
    CUSTOMER_NAMES,
    GENDERS,
    OFFICER_NAMES,
    DataPools,
    build_pools,
)


class TestDataPools:
    """Tests for DataPools."""

    def test_default_pools(self, pools: DataPools) -> None:
        assert pools.customer_names == CUSTOMER_NAMES
        assert pools.officer_names == OFFICER_NAMES
        assert pools.genders == GENDERS
        assert len(pools.officer_names) == 10

    def test_all_pools_non_empty(self, pools: DataPools) -> None:
        for f in dataclasses.fields(pools):
            assert len(getattr(pools, f.name)) > 0

    @pytest.mark.parametrize(
        "pool_name",
        [
            "customer_names",
            "officer_names",
            "borrower_names",
            "first_names",
            "last_names",
            "email_domains",
            "addresses",
            "genders",
        ],
    )
    def test_empty_pool_rejected(self, pool_name: str) -> None:
        """Test an empty pool fails at construction."""
        with pytest.raises(EmptyPoolError, match=pool_name):
            DataPools(**{pool_name: ()})

    def test_pools_are_immutable(self, pools: DataPools) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            pools.customer_names = ("Someone",)  # type: ignore[misc]

    def test_swap_single_pool(self) -> None:
        swapped = dataclasses.replace(DataPools.default(), officer_names=("Only Officer",))
        assert swapped.officer_names == ("Only Officer",)
        assert swapped.customer_names == CUSTOMER_NAMES

    def test_unknown_gender_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="Other"):
            DataPools(genders=("Female", "Other"))

    def test_gender_subset_accepted(self) -> None:
        pools = DataPools(genders=("Female",))
        assert pools.genders == ("Female",)


class TestFakerPools:
    """Tests for Faker-built pools."""

    def test_from_faker_sizes(self) -> None:
        pools = DataPools.from_faker(locale="en_US", seed=7, size=15)

        assert len(pools.customer_names) == 15
        assert len(pools.addresses) == 15
        assert len(pools.email_domains) >= 1
        assert pools.genders == GENDERS

    def test_from_faker_reproducible(self) -> None:
        """Test the same Faker seed builds the same pools."""
        assert DataPools.from_faker(seed=3, size=10) == DataPools.from_faker(seed=3, size=10)

    def test_addresses_single_line(self) -> None:
        pools = DataPools.from_faker(seed=1, size=10)
        assert all("\n" not in address for address in pools.addresses)

    def test_from_faker_zero_size(self) -> None:
        with pytest.raises(EmptyPoolError):
            DataPools.from_faker(size=0)


class TestBuildPools:
    """Tests for build_pools."""

    def test_no_config(self) -> None:
        assert build_pools() == DataPools.default()

    def test_no_locale(self) -> None:
        assert build_pools(GeneratorConfig()) == DataPools.default()

    def test_with_locale(self) -> None:
        config = GeneratorConfig(pool_locale="en_US", pool_seed=5, pool_size=12)
        pools = build_pools(config)
        assert pools == DataPools.from_faker(locale="en_US", seed=5, size=12)
        assert len(pools.officer_names) == 12
