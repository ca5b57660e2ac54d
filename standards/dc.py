import logging
from dataclasses import replace
from typing import List

from core.calculator import SizingEngine, StandardProfile, run_pipeline
from core.derating import stepwise_lookup
from core.models import (
    CalculationInput, CalculationResult, CorrectionFactors, DCApplicationType, DCSpecificResult,
    LoadType, StandardId, VoltageSystem,
)
from standards import dc_tables

logger = logging.getLogger(__name__)


class DCEngine(SizingEngine):
    """
    Low-voltage DC sizing for one application profile.

    The wire table, ampacity safety factor, temperature derating and
    voltage-drop limit all come from the application type on the input, so a
    DC_SOLAR profile can still size a battery run. Resistances are ohm/1000 ft
    and lengths are one-way feet; the drop counts both conductors.
    """

    def __init__(self, standard: StandardId):
        self.standard = StandardId(standard)

    def size(self, data: CalculationInput) -> CalculationResult:
        warnings: List[str] = []
        assumptions: List[str] = []

        application = DCApplicationType(data.dc_application_type)
        app = dc_tables.APPLICATION_STANDARDS[application]
        load_type = LoadType(data.load_type or LoadType.CONTINUOUS)
        ambient = dc_tables.DEFAULT_AMBIENT if data.ambient_temperature is None else data.ambient_temperature
        # Continuous loads are held to the critical tier
        tier, default_limit = (("critical", app.voltage_drop_critical) if load_type == LoadType.CONTINUOUS
                               else ("normal", app.voltage_drop_normal))
        limit = data.allowable_voltage_drop_percent or default_limit

        design_current = data.load_current * app.ampacity_safety_factor
        assumptions.append(f"Applied {app.ampacity_safety_factor}x ampacity safety factor ({app.name})")
        if data.allowable_voltage_drop_percent:
            assumptions.append(f"Custom voltage drop limit of {limit:g}% replaces the {default_limit:g}% {tier} limit")
        else:
            assumptions.append(f"Using the {tier} {limit:g}% voltage drop limit for {load_type.value} loads")

        self._review_input(data, app, warnings)

        factors = CorrectionFactors(
            temperature=stepwise_lookup(dc_tables.TEMP_CORRECTION_FACTORS[application], ambient),
            grouping=data.grouping_factor or 1.0,
        )
        logger.debug("%s: %s application, %s°C ambient, factors %s",
                     self.standard.value, application.value, ambient, factors)

        profile = StandardProfile(
            standard=self.standard.value,
            method=f"DC Wire Calculation Engine ({app.name})",
            conductors=dc_tables.WIRE_TABLES[application],
            aluminum_multiplier=dc_tables.ALUMINUM_RESISTANCE_MULTIPLIER,
            voltage_drop_limit=limit,
        )
        low, high = app.temperature_range
        result = run_pipeline(
            data, profile,
            ampacity_of=lambda w: w.ampacity_at(w.temperature_rating),
            design_current=design_current,
            factors=factors,
            power_factor=1.0,
            temperature_compliant=lambda w: low <= ambient <= high and ambient <= w.temperature_rating,
            installation_compliant=lambda w: application.value in w.applications,
            safety_factors={
                "ampacitySafetyFactor": app.ampacity_safety_factor,
                "temperatureCorrection": factors.temperature,
            },
            assumptions=assumptions,
            warnings=warnings,
        )

        efficiency_ok = result.efficiency >= app.minimum_efficiency
        metadata = result.metadata
        if not efficiency_ok:
            msg = (f"Efficiency {result.efficiency:.2f}% is below the {app.minimum_efficiency:g}% "
                   f"expected for {app.name}")
            logger.warning(msg)
            metadata = replace(metadata, warnings=metadata.warnings + (msg,))

        return replace(
            result,
            metadata=metadata,
            dc=DCSpecificResult(
                application_type=application.value,
                dc_voltage_system=data.dc_voltage_system,
                voltage_at_load=data.voltage - result.voltage_drop_volts,
                temperature_derating=factors.temperature,
                minimum_efficiency=app.minimum_efficiency,
                efficiency_compliant=efficiency_ok,
            ),
        )

    def _review_input(self, data: CalculationInput, app: dc_tables.DCApplicationStandard,
                      warnings: List[str]) -> None:
        found = []
        nominal = dc_tables.DC_VOLTAGE_LEVELS.get(data.dc_voltage_system)
        if nominal is not None and nominal != data.voltage:
            found.append(f"Voltage {data.voltage:g}V differs from the {data.dc_voltage_system} system")
        if nominal is not None and nominal not in app.voltage_range:
            found.append(f"{data.dc_voltage_system} is not a typical voltage for {app.name}")
        if data.installation_method not in app.installation_methods:
            found.append(f"Installation method '{data.installation_method}' is not typical for {app.name}")
        for msg in found:
            logger.warning(msg)
        warnings.extend(found)


def size_battery_charging_wire(engine: DCEngine, battery_voltage: float, charging_current: float,
                               cable_length: float, allowable_voltage_drop_percent: float,
                               conductor_material: str = "copper") -> CalculationResult:
    return engine.size(CalculationInput(
        standard=engine.standard.value,
        load_current=charging_current,
        circuit_length=cable_length,
        voltage=battery_voltage,
        voltage_system=VoltageSystem.DC.value,
        installation_method="conduit",
        conductor_material=conductor_material,
        dc_voltage_system=f"{battery_voltage:g}V",
        dc_application_type=DCApplicationType.BATTERY.value,
        load_type=LoadType.CONTINUOUS.value,
        allowable_voltage_drop_percent=allowable_voltage_drop_percent,
    ))


# NEC 690.8(A) - PV source circuit current is 125% of short-circuit current
PV_CURRENT_MULTIPLIER = 1.25


def size_solar_wire(engine: DCEngine, panel_voltage: float, short_circuit_current: float,
                    number_of_panels: int, cable_length: float, ambient_temperature: float,
                    conductor_material: str = "copper") -> CalculationResult:
    """Sizes a PV string run for panels wired in parallel, held to a 2% drop."""
    return engine.size(CalculationInput(
        standard=engine.standard.value,
        load_current=short_circuit_current * number_of_panels * PV_CURRENT_MULTIPLIER,
        circuit_length=cable_length,
        voltage=panel_voltage,
        voltage_system=VoltageSystem.DC.value,
        installation_method="solar_outdoor",
        conductor_material=conductor_material,
        ambient_temperature=ambient_temperature,
        dc_voltage_system=f"{panel_voltage:g}V",
        dc_application_type=DCApplicationType.SOLAR.value,
        load_type=LoadType.CONTINUOUS.value,
        allowable_voltage_drop_percent=2.0,
    ))
