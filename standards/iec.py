import logging
from typing import Dict, List

from core.calculator import SizingEngine, StandardProfile, run_pipeline
from core.config import NOMINAL_VOLTAGES, VOLTAGE_DROP_LIMITS
from core.derating import (
    grouping_factor, installation_factor, temperature_factor, thermal_resistivity_factor,
)
from core.models import (
    CalculationInput, CalculationResult, CorrectionFactors, IECInstallationMethod, StandardId,
    VoltageSystem,
)
from standards import iec_tables

logger = logging.getLogger(__name__)


class IECEngine(SizingEngine):
    """
    IEC 60364-5-52 cable sizing. Lengths are in metres and the cable tables
    carry ohm/km, so no unit conversion happens inside the engine.
    """
    standard = StandardId.IEC
    method = "IEC 60364-5-52, IEC 60287"

    conductors = iec_tables.IEC_CONDUCTORS
    temp_correction = iec_tables.TEMP_CORRECTION_FACTORS
    grouping_table = iec_tables.GROUPING_FACTORS
    installation_table = iec_tables.INSTALLATION_FACTORS
    buried_methods = iec_tables.BURIED_METHODS
    aluminum_multiplier = iec_tables.ALUMINUM_RESISTANCE_MULTIPLIER
    supported_ambient = iec_tables.SUPPORTED_AMBIENT

    DEFAULT_RATING = 90
    DEFAULT_AMBIENT = 30.0
    DEFAULT_CONDUCTORS = 3
    DEFAULT_POWER_FACTOR = 0.8
    DEFAULT_THERMAL_RESISTIVITY = 2.5

    def size(self, data: CalculationInput) -> CalculationResult:
        warnings: List[str] = []
        assumptions: List[str] = [f"No continuous load multiplier applied ({self.standard.value} standard)"]

        rating = data.temperature_rating or self.DEFAULT_RATING
        ambient = self.DEFAULT_AMBIENT if data.ambient_temperature is None else data.ambient_temperature
        conductors = data.number_of_conductors or self.DEFAULT_CONDUCTORS
        power_factor = data.power_factor or self.DEFAULT_POWER_FACTOR
        resistivity = data.thermal_resistivity or self.DEFAULT_THERMAL_RESISTIVITY
        method = IECInstallationMethod(data.installation_method)

        self.review_input(data, ambient, warnings, assumptions)

        factors = CorrectionFactors(
            temperature=temperature_factor(self.temp_correction, rating, ambient),
            grouping=grouping_factor(self.grouping_table, conductors, data.grouping_factor),
            installation=installation_factor(self.installation_table, method),
            thermal=thermal_resistivity_factor(resistivity, method in self.buried_methods),
        )
        logger.debug("%s factors at %s°C rating, %s°C ambient, method %s: %s",
                     self.standard.value, rating, ambient, method.value, factors)

        profile = StandardProfile(
            standard=self.standard.value,
            method=self.method,
            conductors=self.conductors,
            aluminum_multiplier=self.aluminum_multiplier,
            voltage_drop_limit=VOLTAGE_DROP_LIMITS[self.standard].normal,
        )
        low, high = self.supported_ambient
        return run_pipeline(
            data, profile,
            ampacity_of=lambda c: c.ampacity_at(rating),
            design_current=data.load_current,
            factors=factors,
            power_factor=power_factor,
            temperature_compliant=lambda c: low <= ambient <= high,
            installation_compliant=lambda c: method in self.installation_table,
            safety_factors=self.safety_factors(factors),
            assumptions=assumptions,
            warnings=warnings,
        )

    def review_input(self, data: CalculationInput, ambient: float,
                     warnings: List[str], assumptions: List[str]) -> None:
        system = VoltageSystem(data.voltage_system).value
        nominal = NOMINAL_VOLTAGES[self.standard][system]
        if data.voltage not in nominal:
            msg = f"{data.voltage:g}V is not a standard IEC {system} voltage ({', '.join(str(v) for v in nominal)}V)"
            logger.warning(msg)
            warnings.append(msg)

    def safety_factors(self, factors: CorrectionFactors) -> Dict[str, float]:
        return {
            "temperatureCorrection": factors.temperature,
            "groupingFactor": factors.grouping,
            "installationFactor": factors.installation,
            "thermalResistivityFactor": factors.thermal,
        }
