"""
Economic era catalog.

Eras drive two things: the diversity bonus applied to a candidate's score and
the focus/exclude filters of a scenario. The catalog is an immutable value
that is passed into the scorer and the period filter, so alternate catalogs
can be used without touching module state.

The bonus multipliers are tuned by hand: eras that are rare in a sliding
window corpus sit below 1.0 (favoured), crowded recent eras sit above 1.0.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType


@dataclass(frozen=True)
class EraDescriptor:
    """A named, inclusive year range with its diversity bonus."""

    key: str
    name: str
    start_year: int
    end_year: int
    bonus: float

    def contains(self, day: date) -> bool:
        return self.start_year <= day.year <= self.end_year

    @property
    def timeframe(self) -> str:
        return f"{self.start_year}-{self.end_year}"


@dataclass(frozen=True)
class EraCatalog:
    """
    Ordered era table plus the alias table used to resolve user-supplied names.

    Lookups by date return the first era (in table order) whose year range
    contains the date.
    """

    eras: tuple[EraDescriptor, ...]
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "eras", tuple(self.eras))
        object.__setattr__(
            self,
            "aliases",
            MappingProxyType({alias.lower(): key for alias, key in self.aliases.items()}),
        )

    def __iter__(self):
        return iter(self.eras)

    def get(self, key: str) -> EraDescriptor | None:
        for era in self.eras:
            if era.key == key:
                return era
        return None

    def resolve(self, name: str) -> str | None:
        """
        Resolve an era name or alias (case-insensitive) to its canonical key.

        Returns None when the name is unknown.
        """
        lowered = name.strip().lower()
        if lowered in self.aliases:
            return self.aliases[lowered]
        for era in self.eras:
            if era.key.lower() == lowered:
                return era.key
        return None

    def resolve_all(self, names: Iterable[str]) -> list[EraDescriptor]:
        """Resolve names to era descriptors, silently dropping unknown names."""
        resolved = []
        for name in names:
            key = self.resolve(name)
            era = self.get(key) if key else None
            if era is not None and era not in resolved:
                resolved.append(era)
        return resolved

    def era_for(self, day: date) -> EraDescriptor | None:
        for era in self.eras:
            if era.contains(day):
                return era
        return None


DEFAULT_ERAS = (
    EraDescriptor("MODERN_ERA", "Modern Era (Post-COVID)", 2020, 2030, 1.15),
    EraDescriptor("GREAT_RECESSION_RECOVERY", "Great Recession Recovery", 2010, 2019, 1.05),
    EraDescriptor("FINANCIAL_CRISIS", "Financial Crisis", 2007, 2009, 0.85),
    EraDescriptor("DOT_COM_ERA", "Dot-Com Era", 1995, 2006, 0.90),
    EraDescriptor("GREENSPAN_ERA", "Greenspan Era", 1987, 1994, 0.88),
    EraDescriptor("VOLCKER_INFLATION", "Volcker Anti-Inflation", 1979, 1986, 0.80),
    EraDescriptor("STAGFLATION", "Stagflation Era", 1970, 1978, 0.75),
    EraDescriptor("GOLDEN_AGE", "Post-War Golden Age", 1950, 1969, 0.85),
    EraDescriptor("HISTORICAL", "Early Historical", 1900, 1949, 0.95),
)

DEFAULT_ERA_ALIASES = {
    "modern": "MODERN_ERA",
    "post-covid": "MODERN_ERA",
    "recovery": "GREAT_RECESSION_RECOVERY",
    "great-recession-recovery": "GREAT_RECESSION_RECOVERY",
    "financial-crisis": "FINANCIAL_CRISIS",
    "crisis": "FINANCIAL_CRISIS",
    "dot-com": "DOT_COM_ERA",
    "dotcom": "DOT_COM_ERA",
    "greenspan": "GREENSPAN_ERA",
    "volcker": "VOLCKER_INFLATION",
    "stagflation": "STAGFLATION",
    "golden-age": "GOLDEN_AGE",
    "post-war": "GOLDEN_AGE",
    "historical": "HISTORICAL",
    "early": "HISTORICAL",
}

DEFAULT_ERA_CATALOG = EraCatalog(eras=DEFAULT_ERAS, aliases=DEFAULT_ERA_ALIASES)
