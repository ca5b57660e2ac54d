import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Tuple

from core.config import ALTERNATIVES_LIMIT
from core.errors import NoSuitableConductorError
from core.models import (
    Alternative, CalculationInput, CalculationMetadata, CalculationResult, Compliance,
    ConductorSpecification, CorrectionFactors,
)
from core.voltage_drop import (
    VoltageDrop, efficiency, material_resistance, power_loss, voltage_drop,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StandardProfile:
    """Per-standard constants the shared sizing pipeline needs."""
    standard: str
    method: str
    conductors: Tuple[ConductorSpecification, ...]
    aluminum_multiplier: float
    voltage_drop_limit: float
    length_scale: float = 1000.0


@dataclass(frozen=True)
class Selection:
    conductor: ConductorSpecification
    drop: VoltageDrop
    voltage_drop_compliant: bool


class SizingEngine(ABC):

    @abstractmethod
    def size(self, data: CalculationInput) -> CalculationResult:
        """Selects the smallest compliant conductor for the given circuit."""


def filter_candidates(
    conductors: Sequence[ConductorSpecification],
    ampacity_of: Callable[[ConductorSpecification], float],
    required_ampacity: float,
) -> Tuple[ConductorSpecification, ...]:
    return tuple(c for c in conductors if ampacity_of(c) >= required_ampacity)


def conductor_drop(conductor: ConductorSpecification, data: CalculationInput,
                   profile: StandardProfile, power_factor: float) -> VoltageDrop:
    r = material_resistance(conductor.resistance, data.conductor_material, profile.aluminum_multiplier)
    return voltage_drop(
        current=data.load_current,
        length=data.circuit_length,
        resistance=r,
        reactance=conductor.reactance,
        voltage=data.voltage,
        voltage_system=data.voltage_system,
        power_factor=power_factor,
        length_scale=profile.length_scale,
    )


def select_by_voltage_drop(
    candidates: Sequence[ConductorSpecification],
    drop_of: Callable[[ConductorSpecification], VoltageDrop],
    limit: float,
) -> Selection:
    # Smallest candidate within the limit, else the smallest ampacity-compliant one
    for conductor in candidates:
        drop = drop_of(conductor)
        if drop.percent <= limit:
            return Selection(conductor, drop, True)
    first = candidates[0]
    return Selection(first, drop_of(first), False)


def build_alternatives(
    candidates: Sequence[ConductorSpecification],
    ampacity_of: Callable[[ConductorSpecification], float],
    drop_of: Callable[[ConductorSpecification], VoltageDrop],
    limit: float,
) -> Tuple[Alternative, ...]:
    alternatives: List[Alternative] = []
    for conductor in candidates[:ALTERNATIVES_LIMIT]:
        drop = drop_of(conductor)
        alternatives.append(Alternative(
            size=conductor.size,
            current_capacity=ampacity_of(conductor),
            voltage_drop_percent=drop.percent,
            is_compliant=drop.percent <= limit,
            cost_factor=conductor.cost_factor,
        ))
    return tuple(alternatives)


def run_pipeline(
    data: CalculationInput,
    profile: StandardProfile,
    *,
    ampacity_of: Callable[[ConductorSpecification], float],
    design_current: float,
    factors: CorrectionFactors,
    power_factor: float,
    temperature_compliant: Callable[[ConductorSpecification], bool],
    installation_compliant: Callable[[ConductorSpecification], bool],
    safety_factors: Dict[str, float],
    assumptions: List[str],
    warnings: List[str],
) -> CalculationResult:
    """
    Steps 3 to 9 of the sizing pipeline: required ampacity, candidate filter,
    voltage-drop search, losses, compliance and alternatives. The engines
    resolve the design current and correction factors beforehand; the
    compliance callables receive the selected conductor.
    """
    required = design_current / factors.combined
    logger.debug("%s: design current %.2f A, combined factor %.3f, required ampacity %.2f A",
                 profile.standard, design_current, factors.combined, required)

    candidates = filter_candidates(profile.conductors, ampacity_of, required)
    if not candidates:
        raise NoSuitableConductorError(profile.standard, required)

    def drop_of(conductor: ConductorSpecification) -> VoltageDrop:
        return conductor_drop(conductor, data, profile, power_factor)

    selection = select_by_voltage_drop(candidates, drop_of, profile.voltage_drop_limit)
    if not selection.voltage_drop_compliant:
        msg = (f"No conductor meets the {profile.voltage_drop_limit}% voltage drop limit; "
               f"smallest ampacity-compliant size {selection.conductor.size} returned")
        logger.warning(msg)
        warnings.append(msg)

    selected = selection.conductor
    resistance = material_resistance(selected.resistance, data.conductor_material, profile.aluminum_multiplier)
    loss = power_loss(data.load_current, resistance, data.circuit_length,
                      data.voltage_system, profile.length_scale)
    capacity = ampacity_of(selected)

    compliance = Compliance(
        current=capacity >= required,
        voltage_drop=selection.voltage_drop_compliant,
        temperature=temperature_compliant(selected),
        installation=installation_compliant(selected),
    )
    logger.info("%s: selected %s (%.1f A, %.2f%% drop)",
                profile.standard, selected.size, capacity, selection.drop.percent)

    return CalculationResult(
        recommended_size=selected.size,
        current_capacity=capacity,
        derated_ampacity=capacity * factors.combined,
        design_current=design_current,
        required_ampacity=required,
        voltage_drop_percent=selection.drop.percent,
        voltage_drop_volts=selection.drop.volts,
        power_loss_watts=loss,
        efficiency=efficiency(data.voltage, selection.drop.volts),
        correction_factors=factors,
        compliance=compliance,
        metadata=CalculationMetadata(
            standard=profile.standard,
            method=profile.method,
            voltage_drop_limit=profile.voltage_drop_limit,
            safety_factors=dict(safety_factors),
            assumptions=tuple(assumptions),
            warnings=tuple(warnings),
        ),
        alternatives=build_alternatives(candidates, ampacity_of, drop_of, profile.voltage_drop_limit),
    )
