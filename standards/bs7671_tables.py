from core.models import ConductorSpecification, IECInstallationMethod, frozen_map
from standards import iec_tables

# BS7671 Appendix 4, Table 4D5A - thermoplastic insulated cables to BS 6004
# Format: (Size mm², R ohm/km, X ohm/km, {Rating: Amps}, Diameter mm, Weight kg/km, Cost)
_ROWS = [
    ("1.0", 18.1, 0.08, {60: 11, 70: 13, 90: 16}, 5.6, 45, 1.0),
    ("1.5", 12.1, 0.08, {60: 14.5, 70: 17.5, 90: 20}, 6.1, 58, 1.1),
    ("2.5", 7.41, 0.08, {60: 20, 70: 24, 90: 27}, 6.8, 78, 1.3),
    ("4", 4.61, 0.075, {60: 26, 70: 32, 90: 36}, 7.5, 102, 1.6),
    ("6", 3.08, 0.075, {60: 34, 70: 41, 90: 46}, 8.2, 130, 1.9),
    ("10", 1.83, 0.075, {60: 46, 70: 57, 90: 64}, 9.5, 180, 2.4),
    ("16", 1.15, 0.070, {60: 61, 70: 76, 90: 85}, 10.5, 240, 3.0),
    ("25", 0.727, 0.070, {60: 80, 70: 101, 90: 112}, 12.2, 330, 3.8),
    ("35", 0.524, 0.065, {60: 99, 70: 125, 90: 138}, 13.4, 430, 4.6),
    ("50", 0.387, 0.065, {60: 119, 70: 151, 90: 167}, 15.0, 580, 5.7),
    ("70", 0.268, 0.065, {60: 151, 70: 192, 90: 213}, 17.0, 770, 7.1),
    ("95", 0.193, 0.060, {60: 182, 70: 232, 90: 258}, 19.2, 1000, 8.6),
    ("120", 0.153, 0.060, {60: 210, 70: 269, 90: 299}, 21.0, 1200, 10.4),
    ("150", 0.124, 0.055, {60: 240, 70: 309, 90: 344}, 22.8, 1450, 12.5),
    ("185", 0.099, 0.055, {60: 273, 70: 353, 90: 392}, 24.8, 1750, 14.8),
    ("240", 0.077, 0.050, {60: 320, 70: 415, 90: 461}, 27.3, 2200, 17.8),
    ("300", 0.061, 0.050, {60: 367, 70: 477, 90: 530}, 29.8, 2700, 20.9),
    ("400", 0.047, 0.045, {60: 419, 70: 546, 90: 607}, 33.0, 3400, 24.8),
    ("500", 0.037, 0.045, {60: 467, 70: 609, 90: 677}, 35.8, 4100, 28.8),
    ("630", 0.030, 0.040, {60: 525, 70: 686, 90: 763}, 39.5, 5000, 34.2),
]

BS7671_CONDUCTORS = tuple(
    ConductorSpecification(
        size=size, area=float(size), resistance=r, reactance=x, ampacity=frozen_map(amps),
        diameter=dia, weight=weight, cost_factor=cost, insulation="BS 6004",
    )
    for size, r, x, amps, dia, weight, cost in _ROWS
)

# BS7671 Appendix 4, Table 4B1 - same values as IEC 60364-5-52 for 70°C and 90°C
TEMP_CORRECTION_FACTORS = frozen_map({
    70: iec_tables.TEMP_CORRECTION_FACTORS[70],
    90: iec_tables.TEMP_CORRECTION_FACTORS[90],
})

# BS7671 Appendix 4, Table 4C1
GROUPING_FACTORS = iec_tables.GROUPING_FACTORS

INSTALLATION_FACTORS = iec_tables.INSTALLATION_FACTORS

INSTALLATION_DESCRIPTIONS = frozen_map({
    **iec_tables.INSTALLATION_DESCRIPTIONS,
    IECInstallationMethod.C: "Multicore cable on wall or ceiling (clipped direct)",
    IECInstallationMethod.E: "Multicore cable in free air (on cable tray)",
})

# BS7671 Appendix 1 - allowance for diversity
UK_DIVERSITY_FACTORS = frozen_map({
    "socket_outlets": 0.4,
    "lighting": 0.66,
    "water_heating": 1.0,
    "space_heating": 1.0,
    "cooking": 0.1,
    "motor_loads": 1.0,
    "other_loads": 0.75,
})

BURIED_METHODS = iec_tables.BURIED_METHODS

ALUMINUM_RESISTANCE_MULTIPLIER = 1.64
SUPPORTED_AMBIENT = (-10, 70)
UK_VOLTAGE_RANGE = (230, 400)
DEPRECATED_VOLTAGE = 240
REFERENCE_AMBIENTS = (20, 30)
