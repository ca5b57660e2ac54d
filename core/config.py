from dataclasses import dataclass

from core.models import StandardId, frozen_map

# Router input bounds (shared by every standard)
MAX_LOAD_CURRENT = 10000.0     # A
MAX_CIRCUIT_LENGTH = 10000.0   # m or ft, depending on the standard
MAX_VOLTAGE = 50000.0          # V
AMBIENT_RANGE = (-50.0, 200.0)  # °C
CONDUCTOR_COUNT_RANGE = (1, 100)
MAX_GROUPING_OVERRIDE = 1.5
MAX_CUSTOM_VOLTAGE_DROP = 10.0  # %

# Soil thermal resistivity reference for buried methods (K.m/W)
THERMAL_RESISTIVITY_BASELINE = 2.5

ALTERNATIVES_LIMIT = 5


@dataclass(frozen=True)
class VoltageDropLimits:
    normal: float
    sensitive: float
    critical: float


VOLTAGE_DROP_LIMITS = frozen_map({
    StandardId.NEC: VoltageDropLimits(3.0, 2.0, 1.0),
    StandardId.IEC: VoltageDropLimits(4.0, 3.0, 2.0),
    StandardId.BS7671: VoltageDropLimits(4.0, 3.0, 2.0),
    StandardId.DC_AUTOMOTIVE: VoltageDropLimits(2.0, 1.0, 0.5),
    StandardId.DC_MARINE: VoltageDropLimits(3.0, 2.0, 1.0),
    StandardId.DC_SOLAR: VoltageDropLimits(2.0, 1.5, 1.0),
    StandardId.DC_TELECOM: VoltageDropLimits(1.0, 0.5, 0.25),
})

# Nominal voltages offered per standard: (single-phase, three-phase, dc)
NOMINAL_VOLTAGES = frozen_map({
    StandardId.NEC: {"single": (120, 240), "three-phase": (208, 240, 277, 480), "dc": ()},
    StandardId.IEC: {"single": (230,), "three-phase": (400, 690), "dc": ()},
    StandardId.BS7671: {"single": (230,), "three-phase": (400,), "dc": ()},
    StandardId.DC_AUTOMOTIVE: {"single": (), "three-phase": (), "dc": (12, 24)},
    StandardId.DC_MARINE: {"single": (), "three-phase": (), "dc": (12, 24, 48)},
    StandardId.DC_SOLAR: {"single": (), "three-phase": (), "dc": (12, 24, 48)},
    StandardId.DC_TELECOM: {"single": (), "three-phase": (), "dc": (24, 48)},
})

# Temperature ratings each standard tabulates (°C)
TEMPERATURE_RATINGS = frozen_map({
    StandardId.NEC: (60, 75, 90),
    StandardId.IEC: (60, 70, 90),
    StandardId.BS7671: (70, 90),
})

BASE_DEFAULTS = frozen_map({
    "load_current": 20.0,
    "circuit_length": 100.0,
    "conductor_material": "copper",
    "ambient_temperature": 30.0,
    "number_of_conductors": 3,
    "power_factor": 0.8,
})

STANDARD_DEFAULTS = frozen_map({
    StandardId.NEC: {
        "voltage": 120.0, "voltage_system": "single", "installation_method": "conduit",
        "temperature_rating": 75, "include_continuous_multiplier": True,
    },
    StandardId.IEC: {
        "voltage": 230.0, "voltage_system": "single", "installation_method": "A1",
    },
    StandardId.BS7671: {
        "voltage": 230.0, "voltage_system": "single", "installation_method": "A1",
    },
    StandardId.DC_AUTOMOTIVE: {
        "voltage": 12.0, "voltage_system": "dc", "dc_voltage_system": "12V",
        "dc_application_type": "automotive", "installation_method": "automotive",
        "load_current": 10.0, "circuit_length": 20.0, "allowable_voltage_drop_percent": 2.0,
        "load_type": "continuous",
    },
    StandardId.DC_MARINE: {
        "voltage": 12.0, "voltage_system": "dc", "dc_voltage_system": "12V",
        "dc_application_type": "marine", "installation_method": "marine",
        "load_current": 15.0, "circuit_length": 30.0, "allowable_voltage_drop_percent": 3.0,
        "load_type": "continuous",
    },
    StandardId.DC_SOLAR: {
        "voltage": 24.0, "voltage_system": "dc", "dc_voltage_system": "24V",
        "dc_application_type": "solar", "installation_method": "solar_outdoor",
        "load_current": 25.0, "circuit_length": 50.0, "allowable_voltage_drop_percent": 2.0,
        "load_type": "continuous",
    },
    StandardId.DC_TELECOM: {
        "voltage": 48.0, "voltage_system": "dc", "dc_voltage_system": "48V",
        "dc_application_type": "telecom", "installation_method": "free_air",
        "load_current": 30.0, "circuit_length": 100.0, "allowable_voltage_drop_percent": 1.0,
        "load_type": "continuous",
    },
})

NOMINAL_VOLTAGES = frozen_map({k: frozen_map(v) for k, v in NOMINAL_VOLTAGES.items()})
STANDARD_DEFAULTS = frozen_map({k: frozen_map(v) for k, v in STANDARD_DEFAULTS.items()})
