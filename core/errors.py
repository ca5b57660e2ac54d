from typing import Iterable, List, Optional


class WireCalculationError(Exception):
    """Base class for every error raised by the sizing engines."""


class ValidationError(WireCalculationError):
    def __init__(self, errors: Iterable[str]):
        self.errors: List[str] = list(errors)
        super().__init__(f"Input validation failed: {', '.join(self.errors)}")


class UnsupportedStandardError(WireCalculationError):
    def __init__(self, standard, supported: Iterable[str]):
        self.standard = standard
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported electrical standard: {standard}. "
            f"Use one of: {', '.join(self.supported)}"
        )


class NoSuitableConductorError(WireCalculationError):
    def __init__(self, standard: str, required_ampacity: Optional[float] = None):
        self.standard = standard
        self.required_ampacity = required_ampacity
        msg = f"No suitable {standard} conductor size found for the given ampacity requirements"
        if required_ampacity is not None:
            msg += f" (required {required_ampacity:.1f} A)"
        super().__init__(msg)
