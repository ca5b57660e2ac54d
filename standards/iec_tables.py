from core.models import ConductorSpecification, IECInstallationMethod, frozen_map

# IEC 60364-5-52 / IEC 60228 copper cables, PVC/XLPE insulated
# Format: (Size mm², R ohm/km, X ohm/km, {Rating: Amps}, Diameter mm, Weight kg/km, Cost)
_ROWS = [
    ("0.75", 24.5, 0.08, {60: 11, 70: 13, 90: 16}, 5.2, 38, 1.0),
    ("1.0", 18.1, 0.08, {60: 13, 70: 16, 90: 19}, 5.6, 45, 1.1),
    ("1.5", 12.1, 0.08, {60: 17.5, 70: 21, 90: 24}, 6.1, 58, 1.2),
    ("2.5", 7.41, 0.08, {60: 24, 70: 28, 90: 32}, 6.8, 78, 1.4),
    ("4", 4.61, 0.075, {60: 32, 70: 37, 90: 43}, 7.5, 102, 1.7),
    ("6", 3.08, 0.075, {60: 41, 70: 47, 90: 54}, 8.2, 130, 2.0),
    ("10", 1.83, 0.075, {60: 57, 70: 66, 90: 75}, 9.5, 180, 2.5),
    ("16", 1.15, 0.070, {60: 76, 70: 87, 90: 100}, 10.5, 240, 3.2),
    ("25", 0.727, 0.070, {60: 101, 70: 115, 90: 132}, 12.2, 330, 4.1),
    ("35", 0.524, 0.065, {60: 125, 70: 144, 90: 165}, 13.4, 430, 5.0),
    ("50", 0.387, 0.065, {60: 151, 70: 173, 90: 196}, 15.0, 580, 6.2),
    ("70", 0.268, 0.065, {60: 192, 70: 218, 90: 246}, 17.0, 770, 7.8),
    ("95", 0.193, 0.060, {60: 232, 70: 263, 90: 297}, 19.2, 1000, 9.5),
    ("120", 0.153, 0.060, {60: 269, 70: 305, 90: 344}, 21.0, 1200, 11.5),
    ("150", 0.124, 0.055, {60: 309, 70: 350, 90: 394}, 22.8, 1450, 13.8),
    ("185", 0.099, 0.055, {60: 353, 70: 400, 90: 450}, 24.8, 1750, 16.2),
    ("240", 0.077, 0.050, {60: 415, 70: 469, 90: 527}, 27.3, 2200, 19.5),
    ("300", 0.061, 0.050, {60: 477, 70: 539, 90: 606}, 29.8, 2700, 23.0),
    ("400", 0.047, 0.045, {60: 546, 70: 618, 90: 695}, 33.0, 3400, 27.5),
    ("500", 0.037, 0.045, {60: 609, 70: 689, 90: 775}, 35.8, 4100, 32.0),
    ("630", 0.030, 0.040, {60: 686, 70: 776, 90: 873}, 39.5, 5000, 38.0),
    ("800", 0.023, 0.040, {60: 758, 70: 857, 90: 964}, 42.8, 6200, 45.0),
    ("1000", 0.018, 0.035, {60: 814, 70: 920, 90: 1035}, 45.8, 7500, 52.0),
]

IEC_CONDUCTORS = tuple(
    ConductorSpecification(
        size=size, area=float(size), resistance=r, reactance=x, ampacity=frozen_map(amps),
        diameter=dia, weight=weight, cost_factor=cost,
    )
    for size, r, x, amps, dia, weight, cost in _ROWS
)

# IEC 60364-5-52 Table B.52.14 - Ambient temperature correction (base 30°C)
# Format: {Insulation_Rating: {Max_Ambient: Factor}}
TEMP_CORRECTION_FACTORS = frozen_map({
    60: frozen_map({10: 1.22, 15: 1.17, 20: 1.12, 25: 1.06, 30: 1.00, 35: 0.94,
                    40: 0.87, 45: 0.79, 50: 0.71, 55: 0.61, 60: 0.50}),
    70: frozen_map({10: 1.15, 15: 1.12, 20: 1.08, 25: 1.04, 30: 1.00, 35: 0.96,
                    40: 0.91, 45: 0.87, 50: 0.82, 55: 0.76, 60: 0.71, 65: 0.65, 70: 0.58}),
    90: frozen_map({10: 1.10, 15: 1.08, 20: 1.05, 25: 1.03, 30: 1.00, 35: 0.98,
                    40: 0.95, 45: 0.93, 50: 0.90, 55: 0.87, 60: 0.84, 65: 0.81,
                    70: 0.77, 75: 0.74, 80: 0.70, 85: 0.67, 90: 0.63}),
})

# IEC 60364-5-52 Table B.52.17 - Grouping of circuits
# Format: {Circuits: Factor}
GROUPING_FACTORS = frozen_map({
    1: 1.00, 2: 0.80, 3: 0.70, 4: 0.65, 5: 0.60, 6: 0.57, 7: 0.54, 8: 0.52, 9: 0.50,
    10: 0.48, 11: 0.46, 12: 0.45, 13: 0.44, 14: 0.43, 15: 0.42, 16: 0.41, 17: 0.40,
    18: 0.39, 19: 0.38, 20: 0.38,
})

# Reference installation methods (IEC 60364-5-52 Table B.52.1)
INSTALLATION_FACTORS = frozen_map({
    IECInstallationMethod.A1: 1.0,
    IECInstallationMethod.A2: 1.0,
    IECInstallationMethod.B1: 1.0,
    IECInstallationMethod.B2: 1.0,
    IECInstallationMethod.C: 1.0,
    IECInstallationMethod.D1: 1.0,
    IECInstallationMethod.D2: 1.0,
    IECInstallationMethod.E: 1.2,
    IECInstallationMethod.F: 1.1,
    IECInstallationMethod.G: 1.0,
})

INSTALLATION_DESCRIPTIONS = frozen_map({
    IECInstallationMethod.A1: "Insulated conductors in conduit in thermally insulating wall",
    IECInstallationMethod.A2: "Multicore cable in conduit in thermally insulating wall",
    IECInstallationMethod.B1: "Insulated conductors in conduit on wall or in trunking",
    IECInstallationMethod.B2: "Multicore cable in conduit on wall or in trunking",
    IECInstallationMethod.C: "Multicore cable on wall or ceiling",
    IECInstallationMethod.D1: "Multicore cable in underground duct",
    IECInstallationMethod.D2: "Multicore cable buried direct in ground",
    IECInstallationMethod.E: "Multicore cable in free air",
    IECInstallationMethod.F: "Single core cables in free air",
    IECInstallationMethod.G: "Single core cables in underground duct",
})

BURIED_METHODS = (IECInstallationMethod.D1, IECInstallationMethod.D2)

ALUMINUM_RESISTANCE_MULTIPLIER = 1.64
SUPPORTED_AMBIENT = (-40, 90)
