import logging
from typing import List

from core.calculator import SizingEngine, StandardProfile, run_pipeline
from core.config import NOMINAL_VOLTAGES, VOLTAGE_DROP_LIMITS
from core.derating import (
    grouping_factor, installation_factor, temperature_factor, thermal_resistivity_factor,
)
from core.models import (
    CalculationInput, CalculationResult, CorrectionFactors, NECInstallationMethod, StandardId,
    VoltageSystem,
)
from standards import nec_tables

logger = logging.getLogger(__name__)


class NECEngine(SizingEngine):
    """NEC Articles 210, 310 and 240 conductor sizing (lengths in feet)."""
    standard = StandardId.NEC
    method = "NEC Articles 210, 310, 240"

    DEFAULT_RATING = 75
    DEFAULT_AMBIENT = 30.0
    DEFAULT_CONDUCTORS = 3
    DEFAULT_POWER_FACTOR = 1.0

    def size(self, data: CalculationInput) -> CalculationResult:
        warnings: List[str] = []
        assumptions: List[str] = []

        rating = data.temperature_rating or self.DEFAULT_RATING
        ambient = self.DEFAULT_AMBIENT if data.ambient_temperature is None else data.ambient_temperature
        conductors = data.number_of_conductors or self.DEFAULT_CONDUCTORS
        power_factor = data.power_factor or self.DEFAULT_POWER_FACTOR
        method = NECInstallationMethod(data.installation_method)

        # NEC 210.19(A)(1) - 125% of continuous load
        multiplier = nec_tables.CONTINUOUS_LOAD_MULTIPLIER if data.include_continuous_multiplier else 1.0
        design_current = data.load_current * multiplier
        if data.include_continuous_multiplier:
            assumptions.append(f"Applied NEC {multiplier}x multiplier for continuous loads")

        system = VoltageSystem(data.voltage_system).value
        nominal = NOMINAL_VOLTAGES[self.standard][system]
        if data.voltage not in nominal:
            msg = f"{data.voltage:g}V is not a standard NEC {system} voltage ({', '.join(str(v) for v in nominal)}V)"
            logger.warning(msg)
            warnings.append(msg)

        factors = CorrectionFactors(
            temperature=temperature_factor(nec_tables.TEMP_CORRECTION_FACTORS, rating, ambient),
            grouping=grouping_factor(nec_tables.GROUPING_FACTORS, conductors, data.grouping_factor),
            installation=installation_factor(nec_tables.INSTALLATION_FACTORS, method),
            thermal=thermal_resistivity_factor(
                data.thermal_resistivity, method == NECInstallationMethod.DIRECT_BURIAL),
        )
        logger.debug("NEC factors at %s°C rating, %s°C ambient: %s", rating, ambient, factors)

        profile = StandardProfile(
            standard=self.standard.value,
            method=self.method,
            conductors=nec_tables.NEC_CONDUCTORS,
            aluminum_multiplier=nec_tables.ALUMINUM_RESISTANCE_MULTIPLIER,
            voltage_drop_limit=VOLTAGE_DROP_LIMITS[self.standard].normal,
        )
        low, high = nec_tables.SUPPORTED_AMBIENT
        return run_pipeline(
            data, profile,
            ampacity_of=lambda c: c.ampacity_at(rating),
            design_current=design_current,
            factors=factors,
            power_factor=power_factor,
            temperature_compliant=lambda c: low <= ambient <= high,
            installation_compliant=lambda c: method in nec_tables.INSTALLATION_FACTORS,
            safety_factors={
                "continuousLoadMultiplier": multiplier,
                "temperatureCorrection": factors.temperature,
                "conductorAdjustment": factors.grouping,
                "installationFactor": factors.installation,
            },
            assumptions=assumptions,
            warnings=warnings,
        )
