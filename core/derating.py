from typing import Mapping, Optional

from core.config import THERMAL_RESISTIVITY_BASELINE


def stepwise_lookup(table: Mapping[float, float], value: float) -> float:
    """
    Returns the factor of the first threshold >= value, scanning thresholds in
    ascending order. Values above every threshold clamp to the largest one.
    """
    if not table:
        raise ValueError("Correction factor table is empty")
    thresholds = sorted(table)
    for limit in thresholds:
        if value <= limit:
            return table[limit]
    return table[thresholds[-1]]


def temperature_factor(tables: Mapping[int, Mapping[float, float]], rating: int, ambient_c: float) -> float:
    # Tables are keyed by conductor temperature rating, then ambient threshold
    return stepwise_lookup(tables[rating], ambient_c)


def grouping_factor(table: Mapping[int, float], count: int, override: Optional[float] = None) -> float:
    if override:
        return override
    return stepwise_lookup(table, count)


def installation_factor(table: Mapping, method) -> float:
    return table.get(method, 1.0)


def thermal_resistivity_factor(resistivity: Optional[float], buried: bool) -> float:
    if not buried or resistivity is None:
        return 1.0
    if resistivity > THERMAL_RESISTIVITY_BASELINE:
        return THERMAL_RESISTIVITY_BASELINE / resistivity
    return 1.0
