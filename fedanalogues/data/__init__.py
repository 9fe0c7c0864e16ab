"""Data types, reference catalogs and pandas adapters."""

from fedanalogues.data.eras import DEFAULT_ERA_CATALOG, EraCatalog, EraDescriptor
from fedanalogues.data.models import (
    Analogue,
    DataPoint,
    DataQuality,
    DateRange,
    PolicyAction,
    PolicyActionKind,
    Reliability,
    ScenarioParams,
    WeightedIndicator,
    validate_series,
)

__all__ = [
    "DEFAULT_ERA_CATALOG",
    "EraCatalog",
    "EraDescriptor",
    "Analogue",
    "DataPoint",
    "DataQuality",
    "DateRange",
    "PolicyAction",
    "PolicyActionKind",
    "Reliability",
    "ScenarioParams",
    "WeightedIndicator",
    "validate_series",
]
