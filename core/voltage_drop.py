"""
Voltage drop and power loss model.

Resistance and reactance are per 1000 length units, so `length_scale` is 1000
for every table shipped here: ohm/1000 ft with lengths in feet for NEC and DC,
ohm/km with lengths in metres for IEC and BS7671.
"""
import math
from dataclasses import dataclass

from core.models import VoltageSystem


@dataclass(frozen=True)
class VoltageDrop:
    volts: float
    percent: float


def voltage_drop(
    current: float,
    length: float,
    resistance: float,
    reactance: float,
    voltage: float,
    voltage_system: str,
    power_factor: float = 1.0,
    length_scale: float = 1000.0,
) -> VoltageDrop:
    if voltage_system == VoltageSystem.DC:
        # Round trip, resistive only
        volts = 2 * current * length * resistance / length_scale
    else:
        sin_phi = math.sqrt(max(0.0, 1 - power_factor * power_factor))
        z_eff = resistance * power_factor + reactance * sin_phi
        k = 2.0 if voltage_system == VoltageSystem.SINGLE else math.sqrt(3)
        volts = k * current * length * z_eff / length_scale
    return VoltageDrop(volts=volts, percent=(volts / voltage) * 100.0)


def power_loss(
    current: float,
    resistance: float,
    length: float,
    voltage_system: str,
    length_scale: float = 1000.0,
) -> float:
    multiplier = 3 if voltage_system == VoltageSystem.THREE_PHASE else 1
    return multiplier * current * current * resistance * length / length_scale


def efficiency(voltage: float, drop_volts: float) -> float:
    return ((voltage - drop_volts) / voltage) * 100.0


def material_resistance(resistance: float, material: str, aluminum_multiplier: float) -> float:
    if material == "aluminum":
        return resistance * aluminum_multiplier
    return resistance
