import logging
from typing import Dict, List

from core.models import CalculationInput, CorrectionFactors, StandardId
from standards import bs7671_tables
from standards.iec import IECEngine

logger = logging.getLogger(__name__)


class BS7671Engine(IECEngine):
    """UK wiring regulations: IEC reference methods with the BS7671 Appendix 4 tables."""
    standard = StandardId.BS7671
    method = "BS7671:2018+A2:2022 (IET Wiring Regulations)"

    conductors = bs7671_tables.BS7671_CONDUCTORS
    temp_correction = bs7671_tables.TEMP_CORRECTION_FACTORS
    grouping_table = bs7671_tables.GROUPING_FACTORS
    installation_table = bs7671_tables.INSTALLATION_FACTORS
    buried_methods = bs7671_tables.BURIED_METHODS
    aluminum_multiplier = bs7671_tables.ALUMINUM_RESISTANCE_MULTIPLIER
    supported_ambient = bs7671_tables.SUPPORTED_AMBIENT

    DEFAULT_RATING = 70
    DEFAULT_AMBIENT = 20.0

    def review_input(self, data: CalculationInput, ambient: float,
                     warnings: List[str], assumptions: List[str]) -> None:
        if data.voltage == bs7671_tables.DEPRECATED_VOLTAGE:
            warnings.append("240V is deprecated in UK. Use 230V for new installations (BS7671)")
        low, high = bs7671_tables.UK_VOLTAGE_RANGE
        if data.voltage < low or data.voltage > high:
            warnings.append("Voltage outside standard UK range (230V single-phase, 400V three-phase)")
        if ambient not in bs7671_tables.REFERENCE_AMBIENTS:
            assumptions.append(f"Using {ambient:g}°C ambient temperature (UK standard assumes 20°C)")
        for msg in warnings:
            logger.warning(msg)

    def safety_factors(self, factors: CorrectionFactors) -> Dict[str, float]:
        result = super().safety_factors(factors)
        # Callers apply diversity to the load current with apply_uk_diversity_factor
        result["ukDiversityFactor"] = 1.0
        return result


def apply_uk_diversity_factor(current: float, load_type: str) -> float:
    """Scales a connected load by its BS7671 Appendix 1 diversity; unknown types get none."""
    return current * bs7671_tables.UK_DIVERSITY_FACTORS.get(load_type, 1.0)
