from dataclasses import replace
from typing import Optional

from core.config import NOMINAL_VOLTAGES, STANDARD_DEFAULTS, TEMPERATURE_RATINGS
from core.models import (
    CalculationInput, DCInstallationMethod, DCVoltageSystem, IECInstallationMethod, LoadType,
    NECInstallationMethod, StandardId, VoltageSystem,
)
from core.router import get_standard_defaults, is_dc_standard

FEET_PER_METER = 3.28084
METERS_PER_FOOT = 0.3048

# Nearest commercial equivalents, not a geometric conversion
AWG_TO_MM2 = {
    "14": 2.5, "12": 4, "10": 6, "8": 10, "6": 16, "4": 25, "3": 35, "2": 35,
    "1": 50, "1/0": 70, "2/0": 95, "3/0": 120, "4/0": 150,
    "250": 185, "300": 240, "350": 300, "400": 400, "500": 500,
}

_METHODS = {
    StandardId.NEC: NECInstallationMethod,
    StandardId.IEC: IECInstallationMethod,
    StandardId.BS7671: IECInstallationMethod,
}


def feet_to_meters(feet: float) -> float:
    return feet * METERS_PER_FOOT


def meters_to_feet(meters: float) -> float:
    return meters * FEET_PER_METER


def fahrenheit_to_celsius(fahrenheit: float) -> float:
    return (fahrenheit - 32) * 5 / 9


def celsius_to_fahrenheit(celsius: float) -> float:
    return celsius * 9 / 5 + 32


def convert_length_unit(val: float, unit: str) -> float:
    """Returns length in meters."""
    unit = unit.strip().lower()
    if unit in ["m", "mts", "metros", "metro"]: return val
    if unit in ["ft", "pies", "pie"]: return feet_to_meters(val)
    if unit in ["yd", "yarda", "yardas"]: return val * 0.9144
    raise ValueError(f"Unknown length unit: {unit}")


def length_unit_for(standard) -> str:
    if standard == StandardId.NEC or is_dc_standard(standard):
        return "ft"
    return "m"


def awg_to_mm2(awg: str) -> Optional[float]:
    return AWG_TO_MM2.get(awg)


def mm2_to_awg(mm2: float) -> Optional[str]:
    for awg, size in AWG_TO_MM2.items():
        if size == mm2:
            return awg
    return None


def closest_awg(mm2: float) -> str:
    # First entry wins a tie, so 35 mm² maps to 3 AWG
    return min(AWG_TO_MM2, key=lambda awg: abs(AWG_TO_MM2[awg] - mm2))


def format_wire_size(size: str, standard) -> str:
    if length_unit_for(standard) == "ft":
        return f"{size} AWG"
    return f"{size} mm²"


def convert_wire_size(size: str, from_standard, to_standard) -> Optional[str]:
    """
    Translates a size label between the AWG and metric families. Returns the
    label unchanged inside one family, and None for an AWG size with no
    metric equivalent.
    """
    from_imperial = length_unit_for(from_standard) == "ft"
    to_imperial = length_unit_for(to_standard) == "ft"
    if from_imperial == to_imperial:
        return size
    if from_imperial:
        mm2 = awg_to_mm2(size)
        return None if mm2 is None else f"{mm2:g}"
    return closest_awg(float(size))


def switch_standard(data: CalculationInput, target) -> CalculationInput:
    """
    Carries a calculation over to another standard. The length is converted
    when the unit system changes; values the target cannot accept are
    replaced with its defaults.
    """
    defaults = get_standard_defaults(target)
    target = StandardId(target)
    target_dc = is_dc_standard(target)

    length = data.circuit_length
    source_unit, target_unit = length_unit_for(data.standard), length_unit_for(target)
    if source_unit == "ft" and target_unit == "m":
        length = feet_to_meters(length)
    elif source_unit == "m" and target_unit == "ft":
        length = meters_to_feet(length)

    system = data.voltage_system
    if target_dc:
        system = VoltageSystem.DC.value
    elif system not in (VoltageSystem.SINGLE, VoltageSystem.THREE_PHASE):
        system = defaults["voltage_system"]
    system = VoltageSystem(system).value

    nominal = NOMINAL_VOLTAGES[target][system]
    voltage = data.voltage if data.voltage in nominal else nominal[0]

    methods = DCInstallationMethod if target_dc else _METHODS[target]
    method = data.installation_method
    if method not in [m.value for m in methods]:
        method = defaults["installation_method"]

    rating = data.temperature_rating
    if target_dc or rating not in TEMPERATURE_RATINGS[target]:
        rating = defaults.get("temperature_rating")

    changes = dict(
        standard=target.value,
        circuit_length=length,
        voltage=voltage,
        voltage_system=system,
        installation_method=method,
        temperature_rating=rating,
    )
    if target_dc:
        tag = f"{voltage:g}V"
        load_type = data.load_type if data.load_type in [t.value for t in LoadType] else defaults["load_type"]
        changes.update(
            dc_voltage_system=tag if tag in [v.value for v in DCVoltageSystem] else defaults["dc_voltage_system"],
            dc_application_type=defaults["dc_application_type"],
            load_type=load_type,
            allowable_voltage_drop_percent=defaults["allowable_voltage_drop_percent"],
        )
    else:
        changes.update(dc_voltage_system=None, dc_application_type=None, load_type=None,
                       allowable_voltage_drop_percent=None)
    return replace(data, **changes)


def default_input(standard) -> CalculationInput:
    """A ready-to-run CalculationInput built from the standard's defaults."""
    defaults = get_standard_defaults(standard)
    return CalculationInput(standard=StandardId(standard).value, **defaults)
