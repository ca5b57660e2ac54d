"""
Entry point for conductor sizing: validates a CalculationInput, then hands it
to the engine registered for its standard.
"""
import logging
import math
from dataclasses import fields, replace
from enum import Enum
from typing import Any, Dict, List, Tuple

from core import config
from core.calculator import SizingEngine
from core.errors import UnsupportedStandardError, ValidationError
from core.models import (
    CalculationInput, CalculationResult, ConductorMaterial, DCApplicationType,
    DCInstallationMethod, DCVoltageSystem, IECInstallationMethod, LoadType,
    NECInstallationMethod, StandardId, VoltageSystem,
)
from standards.bs7671 import BS7671Engine
from standards.dc import DCEngine
from standards.iec import IECEngine
from standards.nec import NECEngine

logger = logging.getLogger(__name__)

DC_STANDARDS = (
    StandardId.DC_AUTOMOTIVE, StandardId.DC_MARINE, StandardId.DC_SOLAR, StandardId.DC_TELECOM,
)

ENGINES: Dict[StandardId, SizingEngine] = {
    StandardId.NEC: NECEngine(),
    StandardId.IEC: IECEngine(),
    StandardId.BS7671: BS7671Engine(),
    **{standard: DCEngine(standard) for standard in DC_STANDARDS},
}

_AC_METHODS = {
    StandardId.NEC: NECInstallationMethod,
    StandardId.IEC: IECInstallationMethod,
    StandardId.BS7671: IECInstallationMethod,
}


def supported_standards() -> Tuple[str, ...]:
    return tuple(s.value for s in StandardId)


def _standard_id(standard) -> StandardId:
    try:
        return StandardId(standard)
    except ValueError:
        raise UnsupportedStandardError(standard, supported_standards()) from None


def is_dc_standard(standard) -> bool:
    return standard in DC_STANDARDS


def get_standard_defaults(standard) -> Dict[str, Any]:
    """Starting values for a new calculation under `standard`."""
    standard_id = _standard_id(standard)
    defaults = dict(config.BASE_DEFAULTS)
    defaults.update(config.STANDARD_DEFAULTS[standard_id])
    return defaults


def get_voltage_drop_limits(standard) -> config.VoltageDropLimits:
    return config.VOLTAGE_DROP_LIMITS[_standard_id(standard)]


def _values(enum_cls) -> List[str]:
    return [member.value for member in enum_cls]


def _is_valid(enum_cls, value) -> bool:
    return value in _values(enum_cls)


def _not_finite(value) -> bool:
    return value is not None and not math.isfinite(value)


def validate_wire_calculation_input(data: CalculationInput) -> List[str]:
    """Collects every violated constraint instead of stopping at the first one."""
    errors: List[str] = []

    if _not_finite(data.load_current):
        errors.append("Load current must be a finite number")
    elif not data.load_current or data.load_current <= 0:
        errors.append("Load current must be greater than 0")
    elif data.load_current > config.MAX_LOAD_CURRENT:
        errors.append(f"Load current exceeds maximum supported value ({config.MAX_LOAD_CURRENT:g}A)")

    if _not_finite(data.circuit_length):
        errors.append("Circuit length must be a finite number")
    elif not data.circuit_length or data.circuit_length <= 0:
        errors.append("Circuit length must be greater than 0")
    elif data.circuit_length > config.MAX_CIRCUIT_LENGTH:
        errors.append(f"Circuit length exceeds maximum supported value ({config.MAX_CIRCUIT_LENGTH:g}m/ft)")

    if _not_finite(data.voltage):
        errors.append("Voltage must be a finite number")
    elif not data.voltage or data.voltage <= 0:
        errors.append("Voltage must be greater than 0")
    elif data.voltage > config.MAX_VOLTAGE:
        errors.append(f"Voltage exceeds maximum supported value ({config.MAX_VOLTAGE / 1000:g}kV)")

    if not data.voltage_system:
        errors.append("Voltage system must be specified")
    elif not _is_valid(VoltageSystem, data.voltage_system):
        errors.append(f"Invalid voltage system. Must be one of: {', '.join(_values(VoltageSystem))}")

    if not data.installation_method:
        errors.append("Installation method must be specified")

    if not data.conductor_material:
        errors.append("Conductor material must be specified")
    elif not _is_valid(ConductorMaterial, data.conductor_material):
        errors.append(f"Invalid conductor material. Must be one of: {', '.join(_values(ConductorMaterial))}")

    if data.ambient_temperature is not None:
        low, high = config.AMBIENT_RANGE
        if not math.isfinite(data.ambient_temperature):
            errors.append("Ambient temperature must be a finite number")
        elif data.ambient_temperature < low or data.ambient_temperature > high:
            errors.append(f"Ambient temperature must be between {low:g}°C and {high:g}°C")

    if data.number_of_conductors is not None:
        low, high = config.CONDUCTOR_COUNT_RANGE
        if not math.isfinite(data.number_of_conductors):
            errors.append("Number of conductors must be a finite number")
        elif data.number_of_conductors < low or data.number_of_conductors > high:
            errors.append(f"Number of conductors must be between {low} and {high}")

    if _not_finite(data.power_factor):
        errors.append("Power factor must be a finite number")
    elif data.power_factor is not None and (data.power_factor <= 0 or data.power_factor > 1.0):
        errors.append("Power factor must be between 0 and 1.0")

    if data.grouping_factor is not None and not 0 < data.grouping_factor <= config.MAX_GROUPING_OVERRIDE:
        errors.append(f"Grouping factor must be between 0 and {config.MAX_GROUPING_OVERRIDE:g}")

    if _not_finite(data.thermal_resistivity):
        errors.append("Thermal resistivity must be a finite number")
    elif data.thermal_resistivity is not None and data.thermal_resistivity <= 0:
        errors.append("Thermal resistivity must be greater than 0")

    standard = _standard_id(data.standard)
    if is_dc_standard(standard):
        errors.extend(_validate_dc(data))
    else:
        errors.extend(_validate_ac(standard, data))
    return errors


def _validate_ac(standard: StandardId, data: CalculationInput) -> List[str]:
    errors = []
    if data.voltage_system == VoltageSystem.DC:
        errors.append("Use DC-specific standards for DC calculations "
                      f"({', '.join(s.value for s in DC_STANDARDS)})")

    methods = _AC_METHODS[standard]
    if data.installation_method and not _is_valid(methods, data.installation_method):
        errors.append(f"Invalid {standard.value} installation method. Must be one of: {', '.join(_values(methods))}")

    ratings = config.TEMPERATURE_RATINGS[standard]
    if data.temperature_rating is not None and data.temperature_rating not in ratings:
        *head, last = [f"{r}°C" for r in ratings]
        choices = f"{', '.join(head)}, or {last}" if len(head) > 1 else f"{head[0]} or {last}"
        errors.append(f"{standard.value} temperature rating must be {choices}")
    return errors


def _validate_dc(data: CalculationInput) -> List[str]:
    errors = []
    if data.voltage_system and data.voltage_system != VoltageSystem.DC:
        errors.append("DC standards require the 'dc' voltage system")

    if not data.dc_voltage_system:
        errors.append("DC voltage system must be specified for DC calculations")
    elif not _is_valid(DCVoltageSystem, data.dc_voltage_system):
        errors.append("DC voltage system must be 12V, 24V, or 48V")

    if not data.dc_application_type:
        errors.append("DC application type must be specified for DC calculations")
    elif not _is_valid(DCApplicationType, data.dc_application_type):
        errors.append(f"Invalid DC application type. Must be one of: {', '.join(_values(DCApplicationType))}")

    if data.installation_method and not _is_valid(DCInstallationMethod, data.installation_method):
        errors.append(f"Invalid DC installation method. Must be one of: {', '.join(_values(DCInstallationMethod))}")

    if data.load_type is not None and not _is_valid(LoadType, data.load_type):
        errors.append(f"Invalid load type. Must be one of: {', '.join(_values(LoadType))}")

    limit = data.allowable_voltage_drop_percent
    if limit is not None and not 0 < limit <= config.MAX_CUSTOM_VOLTAGE_DROP:
        errors.append(f"Allowable voltage drop must be between 0 and {config.MAX_CUSTOM_VOLTAGE_DROP:g}%")
    return errors


def _plain(data: CalculationInput) -> CalculationInput:
    # Engines format these fields into messages, so hand them plain strings
    changes = {
        f.name: getattr(data, f.name).value
        for f in fields(data) if isinstance(getattr(data, f.name), Enum)
    }
    return replace(data, **changes) if changes else data


def calculate_wire_size(data: CalculationInput) -> CalculationResult:
    """
    Validates `data` and sizes the conductor with the engine for its standard.

    Raises UnsupportedStandardError for an unknown standard, ValidationError
    carrying every violated constraint, and NoSuitableConductorError when no
    table entry carries the required ampacity.
    """
    standard = _standard_id(data.standard)
    data = _plain(data)

    errors = validate_wire_calculation_input(data)
    if errors:
        logger.debug("Rejected %s input: %s", standard.value, errors)
        raise ValidationError(errors)

    logger.debug("Dispatching %s calculation: %.2f A over %g", standard.value,
                 data.load_current, data.circuit_length)
    return ENGINES[standard].size(data)
