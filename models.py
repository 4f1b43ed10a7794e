# models.py
"""
Data definitions shared by the PK engine and the report layer.

No PK calculations live here, only input checks. Every object is created per evaluation request and
never mutated afterwards.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class InvalidInputError(ValueError):
    """Raised when a numeric precondition of the PK engine does not hold."""
    pass


def require_positive(message, *values):
    """Raise InvalidInputError with message unless every value is > 0."""
    if any(value is None or value <= 0 for value in values):
        raise InvalidInputError(message)


def coerce_enum(enum_cls, value, field_name):
    """Map a raw form value onto enum_cls, accepting members as-is."""
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidInputError(f"Valor inválido para {field_name}: {value!r}") from None


class Antibiotic(Enum):
    VANCOMYCIN_INTERMITTENT = "vancomycin_intermittent"
    VANCOMYCIN_CONTINUOUS = "vancomycin_continuous"
    GENTAMICIN = "gentamicin"
    AMIKACIN = "amikacin"
    TOBRAMYCIN = "tobramycin"

    @property
    def is_aminoglycoside(self):
        return self in (Antibiotic.GENTAMICIN, Antibiotic.AMIKACIN, Antibiotic.TOBRAMYCIN)


class AgeUnit(Enum):
    DAYS = "days"
    MONTHS = "months"
    YEARS = "years"


class LevelType(Enum):
    PEAK = "peak"
    TROUGH = "trough"
    RANDOM = "random"


class DoseStatus(Enum):
    INSUFFICIENT = "Insuficiente"
    EXCESSIVE = "Excessiva"
    ADEQUATE = "Adequada"
    OUT_OF_STEADY_RANGE = "Fora da faixa estável"


@dataclass(frozen=True)
class DrugProfile:
    """Population PK parameters for one antibiotic."""
    vd_l_kg: float
    infusion_time: float
    ke_slope: float
    ke_intercept: float
    continuous: bool = False

    def elimination_rate(self, crcl_l_h_kg):
        """Ke (hr⁻¹) from clearance normalised to L/hr/kg."""
        return crcl_l_h_kg * self.ke_slope + self.ke_intercept


@dataclass(frozen=True)
class PatientInput:
    """Form data for one evaluation. Presence and parsing are the caller's job."""
    weight: float                       # kg
    age_value: float
    age_unit: AgeUnit
    creatinine: float                   # mg/dL
    antibiotic: Antibiotic
    dose: float                         # mg (mg/day for continuous infusion)
    interval: float                     # hr, ignored for continuous infusion
    measured_level: Optional[float] = None   # mg/L
    level_type: Optional[LevelType] = None
    random_time: Optional[float] = None      # hr since dose start

    @property
    def dose_per_kg(self):
        return self.dose / self.weight


@dataclass(frozen=True)
class PKSimulation:
    """Full-precision simulator output for one dosing interval."""
    antibiotic: Antibiotic
    vd: float                 # L/kg
    ke: float                 # hr⁻¹
    infusion_time: float      # hr
    cmax: float
    cmin: float
    auc: float
    half_life: Optional[float]
    time_points: Tuple[float, ...]
    concentrations: Tuple[float, ...]
    measured_point: Optional[Tuple[float, float]] = None


@dataclass(frozen=True)
class DoseAssessment:
    status: DoseStatus
    suggestion: str = ""


@dataclass(frozen=True)
class PKResult:
    """Engine output consumed by the chart and the report."""
    antibiotic: Antibiotic
    time_points: Tuple[float, ...]
    concentrations: Tuple[float, ...]
    cmax: float
    cmin: float
    auc: float
    half_life: Optional[float]
    status: DoseStatus
    suggestion: str
    infusion_time: float
    clearance: float                    # mL/min
    renal_function: str
    measured_point: Optional[Tuple[float, float]] = None
    warnings: Tuple[str, ...] = ()

    def curve_points(self):
        """Ordered (time, concentration) pairs, without the measured overlay point.

        The overlay point, when present, is the last entry of time_points and
        concentrations.
        """
        points = list(zip(self.time_points, self.concentrations))
        if self.measured_point is not None:
            points = points[:-1]
        return points

    def formatted(self):
        """Two-decimal strings for the report."""
        return {
            "Cmax": f"{self.cmax:.2f}",
            "Cmin": f"{self.cmin:.2f}",
            "auc": f"{self.auc:.2f}",
            "t1_2": f"{self.half_life:.2f}" if self.half_life is not None else "N/A",
        }
