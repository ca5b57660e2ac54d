import math
from dataclasses import dataclass, replace
from typing import Tuple

from core.models import ConductorSpecification, DCApplicationType, DCInstallationMethod, frozen_map


@dataclass(frozen=True)
class DCApplicationStandard:
    name: str
    description: str
    voltage_range: Tuple[int, ...]
    voltage_drop_normal: float      # %
    voltage_drop_critical: float    # %
    temperature_range: Tuple[float, float]
    installation_methods: Tuple[str, ...]
    ampacity_safety_factor: float
    minimum_efficiency: float = 95.0


APPLICATION_STANDARDS = frozen_map({
    DCApplicationType.AUTOMOTIVE: DCApplicationStandard(
        "Automotive Systems", "ISO 6722 automotive wire and systems (12V/24V)",
        (12, 24), 2.0, 1.0, (-40, 125), (DCInstallationMethod.AUTOMOTIVE,), 1.25),
    DCApplicationType.MARINE: DCApplicationStandard(
        "Marine Systems", "ABYC marine electrical systems (12V/24V/48V)",
        (12, 24, 48), 3.0, 2.0, (-20, 80), (DCInstallationMethod.MARINE,), 1.2),
    DCApplicationType.SOLAR: DCApplicationStandard(
        "Solar/Renewable Energy", "Solar panel, battery, and renewable energy systems",
        (12, 24, 48), 2.0, 1.0, (-40, 90),
        (DCInstallationMethod.SOLAR_OUTDOOR, DCInstallationMethod.SOLAR_INDOOR), 1.25, 98.0),
    DCApplicationType.TELECOM: DCApplicationStandard(
        "Telecommunications", "24V/48V telecommunications and data center power",
        (24, 48), 1.0, 0.5, (0, 50),
        (DCInstallationMethod.CONDUIT, DCInstallationMethod.CABLE_TRAY, DCInstallationMethod.FREE_AIR),
        1.15, 99.0),
    DCApplicationType.BATTERY: DCApplicationStandard(
        "Battery Systems", "Battery charging and energy storage systems",
        (12, 24, 48), 1.5, 1.0, (-20, 60),
        (DCInstallationMethod.CONDUIT, DCInstallationMethod.CABLE_TRAY), 1.3),
    DCApplicationType.LED: DCApplicationStandard(
        "LED Lighting", "Low voltage LED lighting systems",
        (12, 24), 3.0, 2.0, (-10, 70),
        (DCInstallationMethod.CONDUIT, DCInstallationMethod.FREE_AIR), 1.15),
})

# ISO 6722 / SAE J1128 automotive cable, TXL insulation rated 105°C
# Format: (Gauge, mm², Diameter in, R ohm/1000 ft, Continuous A, Intermittent A, Applications)
_BASE_ROWS = [
    ("20", 0.52, 0.032, 10.15, 11, 14, ("automotive", "led")),
    ("18", 0.82, 0.040, 6.385, 16, 20, ("automotive", "marine", "led")),
    ("16", 1.31, 0.051, 4.016, 22, 27, ("automotive", "marine", "led")),
    ("14", 2.08, 0.064, 2.525, 32, 40, ("automotive", "marine", "solar", "battery")),
    ("12", 3.31, 0.081, 1.588, 45, 55, ("automotive", "marine", "solar", "battery", "telecom")),
    ("10", 5.26, 0.102, 0.999, 60, 75, ("automotive", "marine", "solar", "battery", "telecom")),
    ("8", 8.37, 0.128, 0.628, 80, 100, ("automotive", "marine", "solar", "battery")),
    ("6", 13.3, 0.162, 0.395, 105, 130, ("automotive", "marine", "solar", "battery")),
    ("4", 21.2, 0.204, 0.249, 140, 175, ("automotive", "marine", "solar", "battery")),
    ("2", 33.6, 0.257, 0.156, 190, 240, ("automotive", "marine", "solar", "battery")),
    ("1", 42.4, 0.289, 0.124, 220, 275, ("automotive", "marine", "solar", "battery")),
    ("1/0", 53.5, 0.325, 0.098, 260, 325, ("automotive", "marine", "solar", "battery")),
    ("2/0", 67.4, 0.365, 0.078, 300, 375, ("marine", "solar", "battery")),
    ("4/0", 107.0, 0.460, 0.049, 380, 475, ("marine", "solar", "battery")),
]


def _wire(gauge, area, dia, r, continuous, intermittent, applications, rating, insulation):
    return ConductorSpecification(
        size=gauge, area=area, resistance=r, ampacity=frozen_map({rating: continuous}),
        diameter=dia, intermittent_ampacity=intermittent, temperature_rating=rating,
        insulation=insulation, applications=applications,
    )


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _gauge_number(wire: ConductorSpecification) -> int:
    # 1/0 -> 0, 2/0 -> -1, 4/0 -> -3
    if "/" in wire.size:
        return 1 - int(wire.size.split("/")[0])
    return int(wire.size)


def _derive(base, application: str, insulation: str, rating: int, multiplier: float = 1.0):
    derived = []
    for wire in base:
        if application not in wire.applications:
            continue
        continuous = wire.ampacity_at(wire.temperature_rating)
        intermittent = wire.intermittent_ampacity
        if multiplier != 1.0:
            continuous = _round_half_up(continuous * multiplier)
            intermittent = _round_half_up(intermittent * multiplier)
        derived.append(replace(
            wire, ampacity=frozen_map({rating: continuous}), intermittent_ampacity=intermittent,
            temperature_rating=rating, insulation=insulation,
        ))
    return tuple(derived)


AUTOMOTIVE_WIRES = tuple(_wire(*row, rating=105, insulation="TXL") for row in _BASE_ROWS)

# ABYC E-11 - tinned marine cable, 10% derated for the marine environment
MARINE_WIRES = _derive(AUTOMOTIVE_WIRES, "marine", "Tinned Marine", 105, 0.9)

# UL 4703 USE-2 - free-air outdoor runs gain 10%
SOLAR_WIRES = _derive(AUTOMOTIVE_WIRES, "solar", "USE-2 (UV Resistant)", 90, 1.1)

TELECOM_WIRES = (
    _wire("24", 0.20, 0.020, 25.67, 3.5, 4.5, ("telecom",), rating=75, insulation="PVC"),
    _wire("22", 0.33, 0.025, 16.14, 7, 9, ("telecom",), rating=75, insulation="PVC"),
) + tuple(w for w in _derive(AUTOMOTIVE_WIRES, "telecom", "PVC/Plenum", 75) if _gauge_number(w) <= 12)

BATTERY_WIRES = _derive(AUTOMOTIVE_WIRES, "battery", "Battery Cable", 105, 1.2)

# Low current LED runs, gauges 14 AWG and thinner
LED_WIRES = tuple(w for w in _derive(AUTOMOTIVE_WIRES, "led", "CL2/CL3", 75) if _gauge_number(w) >= 14)

WIRE_TABLES = frozen_map({
    DCApplicationType.AUTOMOTIVE: AUTOMOTIVE_WIRES,
    DCApplicationType.MARINE: MARINE_WIRES,
    DCApplicationType.SOLAR: SOLAR_WIRES,
    DCApplicationType.TELECOM: TELECOM_WIRES,
    DCApplicationType.BATTERY: BATTERY_WIRES,
    DCApplicationType.LED: LED_WIRES,
})

# Ampacity correction by ambient temperature, per application
# Format: {Application: {Max_Ambient: Factor}}
TEMP_CORRECTION_FACTORS = frozen_map({
    DCApplicationType.AUTOMOTIVE: frozen_map({-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95,
                                              60: 0.87, 80: 0.76, 100: 0.62, 125: 0.40}),
    DCApplicationType.MARINE: frozen_map({-20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95, 60: 0.87, 80: 0.76}),
    DCApplicationType.SOLAR: frozen_map({-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95,
                                         60: 0.87, 70: 0.82, 80: 0.76, 90: 0.67}),
    DCApplicationType.TELECOM: frozen_map({0: 1.05, 10: 1.02, 25: 1.00, 40: 0.95, 50: 0.87}),
    DCApplicationType.BATTERY: frozen_map({-20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95, 60: 0.87}),
    DCApplicationType.LED: frozen_map({-10: 1.05, 0: 1.02, 25: 1.00, 40: 0.95, 60: 0.87, 70: 0.82}),
})

DC_VOLTAGE_LEVELS = frozen_map({"12V": 12, "24V": 24, "48V": 48})

ALUMINUM_RESISTANCE_MULTIPLIER = 1.61
DEFAULT_AMBIENT = 25.0
