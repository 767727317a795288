"""Literal value pools injected into generators.

Generators never read module-level name lists directly; they receive a
:class:`DataPools` instance. ``DataPools.default()`` carries the dashboard's
Nigerian names and Lagos addresses; ``DataPools.from_faker()`` builds an
alternate set from a seeded Faker instance so tests and demos can swap
pools without touching generator logic.

Usage::

    pools = DataPools.default()
    pools = DataPools.from_faker(locale="en_US", seed=7, size=40)
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from faker import Faker

from backoffice_data.config import GeneratorConfig
from backoffice_data.exceptions import ConfigurationError, EmptyPoolError
from backoffice_data.models.financial.enums import Gender

CUSTOMER_NAMES = (
    "Ademola Jumoke",
    "Adegboyoga Precious",
    "Nneka Chukwu",
    "Damilare Usman",
    "Jide Kosoko",
    "Oladeji Israel",
    "Eze Chinedu",
    "Adebanji Bolaji",
    "Baba Kaothat",
    "Adebayo Salami",
    "Chioma Okafor",
    "Emeka Nwosu",
    "Folake Adeyemi",
    "Gbenga Ogunleye",
    "Halima Bello",
    "Ibrahim Musa",
    "Jumoke Adeyemi",
    "Kemi Adetiba",
    "Lanre Hassan",
    "Maryam Abacha",
    "Ngozi Okonjo",
    "Obinna Nwankwo",
    "Patience Ozokwor",
    "Quadri Adewale",
    "Rasheed Gbadamosi",
    "Sade Okoya",
    "Tunde Bakare",
    "Uche Jombo",
    "Victor Olatunji",
    "Wale Adenuga",
    "Yemi Alade",
    "Zainab Balogun",
    "Akin Alabi",
    "Bisola Aiyeola",
    "Chidi Mokeme",
    "Desmond Elliot",
    "Ebuka Obi-Uchendu",
    "Funke Akindele",
    "Genevieve Nnaji",
    "Hakeem Olajuwon",
    "Ini Edo",
    "John Okafor",
    "Kunle Afolayan",
    "Lateef Adedimeji",
    "Mercy Johnson",
    "Nkem Owoh",
    "Olu Jacobs",
    "Pete Edochie",
    "Queen Nwokoye",
    "Ramsey Nouah",
    "Segun Arinze",
    "Toyin Abraham",
    "Usman Baba",
    "Victoria Inyama",
    "Wunmi Mosaku",
    "Yul Edochie",
    "Zubby Michael",
    "Adesua Etomi",
    "Banky Wellington",
    "Chiwetel Ejiofor",
    "Don Jazzy",
    "Ebenezer Obey",
    "Fela Kuti",
    "Helen Paul",
    "Iyabo Ojo",
    "Jay Jay Okocha",
    "Kanu Nwankwo",
    "Linda Ikeji",
    "Mikel Obi",
    "Osita Iheme",
    "Paul Okoye",
    "Rita Dominic",
    "Stella Damasus",
    "Tiwa Savage",
    "Uzo Aduba",
    "Yinka Ayefele",
    "Adaeze Yobo",
    "Chika Ike",
    "Eucharia Anunobi",
    "Hilda Dokubo",
    "Ikechukwu Uche",
    "Jennifer Eliogu",
    "Kate Henshaw",
    "Liz Benson",
    "Monalisa Chinda",
    "Nse Ikpe-Etim",
    "Omotola Jalade",
    "Rukky Sanda",
    "Stephanie Okereke",
    "Tonto Dikeh",
)

OFFICER_NAMES = (
    "Mike Salam",
    "Ademola Jumoke",
    "Adegboyega Precious",
    "Nneka Chukwu",
    "Damilare Usman",
    "Jide Kosoko",
    "Oladeji Israel",
    "Eze Chinedu",
    "Baba Kaothat",
    "Adebayo Salami",
)

BORROWER_NAMES = (
    "Ademola Jumoke",
    "Adegboyoga Precious",
    "Nneka Chukwu",
    "Damilare Usman",
    "Jide Kosoko",
    "Oladeji Israel",
    "Eze Chinedu",
    "Adebanji Bolaji",
    "Baba Kaothat",
    "Adebayo Salami",
    "Chioma Okafor",
    "Emeka Nwosu",
    "Folake Adeyemi",
    "Gbenga Ogunleye",
    "Halima Bello",
    "Ibrahim Musa",
    "Joke Adebisi",
    "Kunle Ajayi",
    "Lateef Adewale",
    "Maryam Abdullahi",
    "Ngozi Eze",
    "Obinna Okeke",
    "Patricia Okonkwo",
    "Rasheed Lawal",
    "Sade Oladipo",
    "Tunde Bakare",
    "Uche Nnamdi",
    "Victoria Ojo",
    "Wasiu Ayinde",
    "Yetunde Akinola",
)

FIRST_NAMES = (
    "Ademola", "Chioma", "Oluwaseun", "Ngozi", "Babatunde",
    "Amaka", "Chukwuemeka", "Folake", "Ikenna", "Jumoke",
    "Kehinde", "Nneka", "Obinna", "Titilayo", "Uche",
    "Yetunde", "Adebayo", "Chinwe", "Emeka", "Funmilayo",
    "Ifeanyi", "Kemi", "Nnamdi", "Oluwatoyin", "Segun",
)

LAST_NAMES = (
    "Adeyemi", "Okafor", "Okonkwo", "Adeleke", "Nwosu",
    "Olayinka", "Chukwu", "Afolabi", "Eze", "Ogunleye",
    "Okeke", "Adebisi", "Nwankwo", "Oyebanji", "Onyeka",
    "Adewale", "Chinedu", "Oladipo", "Nnadi", "Taiwo",
)

EMAIL_DOMAINS = (
    "gmail.com",
    "yahoo.com",
    "outlook.com",
    "hotmail.com",
    "aol.com",
    "mac.com",
    "live.com",
    "msn.com",
    "me.com",
    "icloud.com",
)

ADDRESSES = (
    "12 Admiralty Way, Lekki Phase 1, Lagos",
    "45 Adeola Odeku Street, Victoria Island, Lagos",
    "23 Awolowo Road, Ikoyi, Lagos",
    "78 Allen Avenue, Ikeja, Lagos",
    "34 Opebi Road, Ikeja, Lagos",
    "56 Ajose Adeogun Street, Victoria Island, Lagos",
    "89 Ozumba Mbadiwe Avenue, Victoria Island, Lagos",
    "15 Glover Road, Ikoyi, Lagos",
    "67 Akin Adesola Street, Victoria Island, Lagos",
    "90 Adetokunbo Ademola Street, Victoria Island, Lagos",
)

GENDERS = ("Male", "Female")


@dataclass(frozen=True)
class DataPools:
    """Immutable literal pools used by every generator.

    Parameters
    ----------
    customer_names : tuple[str, ...]
        Full names for customers and customer detail headers.
    officer_names : tuple[str, ...]
        Full names for credit officers.
    borrower_names : tuple[str, ...]
        Full names for credit-officer loan portfolios.
    first_names, last_names : tuple[str, ...]
        Name parts combined for branch loan borrowers.
    email_domains : tuple[str, ...]
        Domains appended to generated email local parts.
    addresses : tuple[str, ...]
        Single-line street addresses.
    genders : tuple[str, ...]
        Gender labels; each must be a value of :class:`Gender`.

    Raises
    ------
    EmptyPoolError
        If any pool is empty.
    ConfigurationError
        If ``genders`` holds a label outside :class:`Gender`.
    """

    customer_names: tuple[str, ...] = CUSTOMER_NAMES
    officer_names: tuple[str, ...] = OFFICER_NAMES
    borrower_names: tuple[str, ...] = BORROWER_NAMES
    first_names: tuple[str, ...] = FIRST_NAMES
    last_names: tuple[str, ...] = LAST_NAMES
    email_domains: tuple[str, ...] = EMAIL_DOMAINS
    addresses: tuple[str, ...] = ADDRESSES
    genders: tuple[str, ...] = GENDERS

    def __post_init__(self) -> None:
        for f in fields(self):
            if not getattr(self, f.name):
                raise EmptyPoolError(f"Pool '{f.name}' is empty")
        unknown = set(self.genders) - {gender.value for gender in Gender}
        if unknown:
            raise ConfigurationError(f"Unknown gender labels: {sorted(unknown)}")

    @classmethod
    def default(cls) -> DataPools:
        """Pools with the dashboard's built-in literals."""
        return cls()

    @classmethod
    def from_faker(
        cls,
        locale: str = "en_US",
        seed: int = 0,
        size: int = 50,
    ) -> DataPools:
        """Build pools from a seeded Faker instance.

        The same ``(locale, seed, size)`` yields the same pools for a given
        Faker release. Genders keep the built-in labels.

        Parameters
        ----------
        locale : str
            Faker locale.
        seed : int
            Faker instance seed.
        size : int
            Number of entries per pool (domains are de-duplicated).
        """
        fake = Faker(locale)
        fake.seed_instance(seed)

        names = tuple(fake.name() for _ in range(size))
        domains = tuple(sorted({fake.free_email_domain() for _ in range(size)}))

        return cls(
            customer_names=names,
            officer_names=tuple(fake.name() for _ in range(size)),
            borrower_names=tuple(fake.name() for _ in range(size)),
            first_names=tuple(fake.first_name() for _ in range(size)),
            last_names=tuple(fake.last_name() for _ in range(size)),
            email_domains=domains,
            addresses=tuple(fake.address().replace("\n", ", ") for _ in range(size)),
        )


def build_pools(config: GeneratorConfig | None = None) -> DataPools:
    """Pools for ``config``: Faker-built when a locale is set, built-in otherwise."""
    if config is None or config.pool_locale is None:
        return DataPools.default()
    return DataPools.from_faker(
        locale=config.pool_locale,
        seed=config.pool_seed,
        size=config.pool_size,
    )
