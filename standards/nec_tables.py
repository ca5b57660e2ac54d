from core.models import ConductorSpecification, NECInstallationMethod, frozen_map

# NEC Table 310.16 - Allowable Ampacities of Insulated Conductors (copper)
# combined with NEC Chapter 9, Table 8 (DC resistance at 75°C, ohm/1000 ft)
# and Table 9 (reactance, PVC conduit, ohm/1000 ft)
# Format: (Size, Area in², R, X, {Rating: Amps}, Diameter in, Weight lb/1000 ft, Cost)
_ROWS = [
    ("14", 0.0097, 3.070, 0.058, {60: 15, 75: 20, 90: 25}, 0.064, 12.4, 1.0),
    ("12", 0.0133, 1.930, 0.054, {60: 20, 75: 25, 90: 30}, 0.081, 19.8, 1.2),
    ("10", 0.0211, 1.210, 0.050, {60: 30, 75: 35, 90: 40}, 0.102, 31.4, 1.8),
    ("8", 0.0366, 0.764, 0.052, {60: 40, 75: 50, 90: 55}, 0.128, 49.8, 2.5),
    ("6", 0.0507, 0.491, 0.051, {60: 55, 75: 65, 90: 75}, 0.162, 79.5, 3.2),
    ("4", 0.0824, 0.308, 0.048, {60: 70, 75: 85, 90: 95}, 0.204, 126.4, 4.1),
    ("3", 0.1040, 0.245, 0.047, {60: 85, 75: 100, 90: 115}, 0.229, 159.3, 4.8),
    ("2", 0.1318, 0.194, 0.045, {60: 95, 75: 115, 90: 130}, 0.258, 201.9, 5.6),
    ("1", 0.1662, 0.154, 0.046, {60: 110, 75: 130, 90: 150}, 0.289, 254.5, 6.5),
    ("1/0", 0.2109, 0.122, 0.044, {60: 125, 75: 150, 90: 170}, 0.325, 322.6, 7.5),
    ("2/0", 0.2642, 0.097, 0.043, {60: 145, 75: 175, 90: 195}, 0.365, 404.7, 8.8),
    ("3/0", 0.3355, 0.077, 0.042, {60: 165, 75: 200, 90: 225}, 0.410, 512.1, 10.2),
    ("4/0", 0.4202, 0.061, 0.041, {60: 195, 75: 230, 90: 260}, 0.460, 640.5, 11.8),
    # kcmil sizes
    ("250", 0.4963, 0.052, 0.041, {60: 215, 75: 255, 90: 290}, 0.505, 772.0, 13.5),
    ("300", 0.5958, 0.043, 0.041, {60: 240, 75: 285, 90: 320}, 0.555, 920.0, 15.2),
    ("350", 0.6837, 0.037, 0.040, {60: 260, 75: 310, 90: 350}, 0.595, 1064.0, 16.8),
    ("400", 0.7901, 0.032, 0.040, {60: 280, 75: 335, 90: 380}, 0.630, 1213.0, 18.5),
    ("500", 0.9887, 0.026, 0.039, {60: 320, 75: 380, 90: 430}, 0.711, 1526.0, 22.0),
    ("600", 1.1705, 0.022, 0.039, {60: 355, 75: 420, 90: 475}, 0.777, 1829.0, 25.5),
    ("750", 1.4784, 0.017, 0.038, {60: 400, 75: 475, 90: 535}, 0.870, 2267.0, 30.0),
    ("1000", 1.9635, 0.013, 0.037, {60: 455, 75: 545, 90: 615}, 1.000, 3718.0, 36.0),
]

NEC_CONDUCTORS = tuple(
    ConductorSpecification(
        size=size, area=area, resistance=r, reactance=x, ampacity=frozen_map(amps),
        diameter=dia, weight=weight, cost_factor=cost,
    )
    for size, area, r, x, amps, dia, weight, cost in _ROWS
)

# NEC Table 310.15(B)(2)(a) - Ambient Temperature Correction Factors
# Based on 30°C base ambient
# Format: {Insulation_Rating: {Max_Ambient: Factor}}
TEMP_CORRECTION_FACTORS = frozen_map({
    60: frozen_map({21: 1.08, 25: 1.05, 30: 1.00, 35: 0.94, 40: 0.88, 45: 0.82,
                    50: 0.75, 55: 0.67, 60: 0.58, 65: 0.47, 70: 0.33}),
    75: frozen_map({21: 1.05, 25: 1.02, 30: 1.00, 35: 0.96, 40: 0.91, 45: 0.87,
                    50: 0.82, 55: 0.76, 60: 0.71, 65: 0.65, 70: 0.58, 75: 0.50, 80: 0.41}),
    90: frozen_map({21: 1.04, 25: 1.02, 30: 1.00, 35: 0.97, 40: 0.95, 45: 0.92,
                    50: 0.89, 55: 0.86, 60: 0.83, 65: 0.80, 70: 0.76, 75: 0.73,
                    80: 0.69, 85: 0.65, 90: 0.61}),
})

# NEC Table 310.15(C)(1) - Adjustment Factors for More Than Three Current-Carrying Conductors
# Format: {Max_Conductors: Factor}
GROUPING_FACTORS = frozen_map({
    3: 1.00,
    6: 0.80,   # 4-6
    21: 0.70,  # 7-21
    30: 0.60,  # 22-30
    40: 0.50,  # 31-40
    41: 0.45,  # 41+
})

INSTALLATION_FACTORS = frozen_map({
    NECInstallationMethod.CONDUIT: 1.0,
    NECInstallationMethod.CABLE_TRAY: 1.0,
    NECInstallationMethod.DIRECT_BURIAL: 0.8,
    NECInstallationMethod.FREE_AIR: 1.2,
})

INSTALLATION_DESCRIPTIONS = frozen_map({
    NECInstallationMethod.CONDUIT: "Conduit or tubing",
    NECInstallationMethod.CABLE_TRAY: "Cable tray installation",
    NECInstallationMethod.DIRECT_BURIAL: "Direct burial",
    NECInstallationMethod.FREE_AIR: "Free air installation",
})

ALUMINUM_RESISTANCE_MULTIPLIER = 1.63
CONTINUOUS_LOAD_MULTIPLIER = 1.25  # NEC 210.19(A)(1)
SUPPORTED_AMBIENT = (-40, 90)
