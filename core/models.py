from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple


class StandardId(str, Enum):
    NEC = "NEC"
    IEC = "IEC"
    BS7671 = "BS7671"
    DC_AUTOMOTIVE = "DC_AUTOMOTIVE"
    DC_MARINE = "DC_MARINE"
    DC_SOLAR = "DC_SOLAR"
    DC_TELECOM = "DC_TELECOM"


class VoltageSystem(str, Enum):
    SINGLE = "single"
    THREE_PHASE = "three-phase"
    DC = "dc"


class ConductorMaterial(str, Enum):
    COPPER = "copper"
    ALUMINUM = "aluminum"


class NECInstallationMethod(str, Enum):
    CONDUIT = "conduit"
    CABLE_TRAY = "cable_tray"
    DIRECT_BURIAL = "direct_burial"
    FREE_AIR = "free_air"


class IECInstallationMethod(str, Enum):
    # IEC 60364-5-52 reference methods, also used by BS7671 Appendix 4
    A1 = "A1"
    A2 = "A2"
    B1 = "B1"
    B2 = "B2"
    C = "C"
    D1 = "D1"
    D2 = "D2"
    E = "E"
    F = "F"
    G = "G"


class DCInstallationMethod(str, Enum):
    AUTOMOTIVE = "automotive"
    MARINE = "marine"
    SOLAR_OUTDOOR = "solar_outdoor"
    SOLAR_INDOOR = "solar_indoor"
    FREE_AIR = "free_air"
    CONDUIT = "conduit"
    CABLE_TRAY = "cable_tray"


class DCVoltageSystem(str, Enum):
    V12 = "12V"
    V24 = "24V"
    V48 = "48V"


class DCApplicationType(str, Enum):
    AUTOMOTIVE = "automotive"
    MARINE = "marine"
    SOLAR = "solar"
    TELECOM = "telecom"
    BATTERY = "battery"
    LED = "led"


class LoadType(str, Enum):
    CONTINUOUS = "continuous"
    INTERMITTENT = "intermittent"


def frozen_map(data: Mapping) -> Mapping:
    """Read-only view used for every reference table."""
    return MappingProxyType(dict(data))


@dataclass(frozen=True)
class ConductorSpecification:
    size: str                  # AWG/kcmil label or mm² size
    area: float                # in² (NEC) or mm² (metric, DC)
    resistance: float          # ohm per 1000 ft (NEC, DC) or ohm per km (IEC, BS7671)
    ampacity: Mapping[int, float]
    reactance: float = 0.0     # same length unit as resistance, AC only
    diameter: float = 0.0
    weight: float = 0.0
    cost_factor: float = 1.0
    # DC application tables only
    intermittent_ampacity: Optional[float] = None
    temperature_rating: Optional[int] = None
    insulation: str = ""
    applications: Tuple[str, ...] = ()

    def ampacity_at(self, rating: int) -> float:
        return self.ampacity[rating]


@dataclass(frozen=True)
class CalculationInput:
    standard: str
    load_current: float
    circuit_length: float      # one-way; ft for NEC and DC, m for IEC and BS7671
    voltage: float
    voltage_system: Optional[str]
    installation_method: Optional[str]
    conductor_material: Optional[str] = ConductorMaterial.COPPER
    ambient_temperature: Optional[float] = None
    number_of_conductors: Optional[int] = None
    power_factor: Optional[float] = None
    grouping_factor: Optional[float] = None
    thermal_resistivity: Optional[float] = None
    temperature_rating: Optional[int] = None
    include_continuous_multiplier: bool = True
    # DC profiles
    dc_voltage_system: Optional[str] = None
    dc_application_type: Optional[str] = None
    load_type: Optional[str] = None
    allowable_voltage_drop_percent: Optional[float] = None


@dataclass(frozen=True)
class CorrectionFactors:
    temperature: float = 1.0
    grouping: float = 1.0
    installation: float = 1.0
    thermal: float = 1.0

    @property
    def combined(self) -> float:
        return self.temperature * self.grouping * self.installation * self.thermal


@dataclass(frozen=True)
class Compliance:
    current: bool
    voltage_drop: bool
    temperature: bool
    installation: bool

    @property
    def overall(self) -> bool:
        return self.current and self.voltage_drop and self.temperature and self.installation


@dataclass(frozen=True)
class CalculationMetadata:
    standard: str
    method: str
    voltage_drop_limit: float
    safety_factors: Mapping[str, float] = field(default_factory=dict)
    assumptions: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()


@dataclass(frozen=True)
class Alternative:
    size: str
    current_capacity: float
    voltage_drop_percent: float
    is_compliant: bool
    cost_factor: float = 1.0


@dataclass(frozen=True)
class DCSpecificResult:
    application_type: str
    dc_voltage_system: str
    voltage_at_load: float
    temperature_derating: float
    minimum_efficiency: float
    efficiency_compliant: bool


@dataclass(frozen=True)
class CalculationResult:
    recommended_size: str
    current_capacity: float
    derated_ampacity: float
    design_current: float
    required_ampacity: float
    voltage_drop_percent: float
    voltage_drop_volts: float
    power_loss_watts: float
    efficiency: float
    correction_factors: CorrectionFactors
    compliance: Compliance
    metadata: CalculationMetadata
    alternatives: Tuple[Alternative, ...] = ()
    dc: Optional[DCSpecificResult] = None
