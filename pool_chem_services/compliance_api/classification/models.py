"""Modelos de datos para la evaluación de química de piscina.

Enums y dataclasses inmutables que representan los estándares MAHC,
los resultados de validación y los informes de cumplimiento.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Tuple, Union


class UnknownChemicalError(KeyError):
    """Clave de químico fuera del enum cerrado (error de programación)."""


class ChemicalType(str, Enum):
    """Químicos medidos en un test. El valor es el nombre en el wire."""

    FREE_CHLORINE = "freeChlorine"
    TOTAL_CHLORINE = "totalChlorine"
    PH = "ph"
    ALKALINITY = "alkalinity"
    CYANURIC_ACID = "cyanuricAcid"
    CALCIUM = "calcium"
    TEMPERATURE = "temperature"

    @classmethod
    def parse(cls, key: Union["ChemicalType", str]) -> "ChemicalType":
        """Acepta el enum o su nombre en el wire; cualquier otra cosa es un bug del caller."""
        if isinstance(key, cls):
            return key
        try:
            return cls(key)
        except ValueError:
            raise UnknownChemicalError(key) from None


class ValidationStatus(str, Enum):
    """Niveles de severidad, de menor a mayor."""

    GOOD = "good"
    WARNING = "warning"
    CRITICAL = "critical"
    EMERGENCY = "emergency"

    @property
    def rank(self) -> int:
        return _STATUS_RANK[self]


_STATUS_RANK = {
    ValidationStatus.GOOD: 0,
    ValidationStatus.WARNING: 1,
    ValidationStatus.CRITICAL: 2,
    ValidationStatus.EMERGENCY: 3,
}


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class ComplianceVerdict(str, Enum):
    COMPLIANT = "compliant"
    WARNING = "warning"
    NON_COMPLIANT = "non-compliant"
    EMERGENCY = "emergency"


class AdjustmentAction(str, Enum):
    INCREASE = "increase"
    DECREASE = "decrease"


@dataclass(frozen=True)
class IdealRange:
    """Sub-rango óptimo dentro del rango aceptable."""

    min_value: float
    max_value: float

    @property
    def target(self) -> float:
        """Punto de referencia para ajustes (centro del rango ideal)."""
        return (self.min_value + self.max_value) / 2

    def contains(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


@dataclass(frozen=True)
class ChemicalStandard:
    """Entrada de la tabla de estándares MAHC para un químico.

    Invariante: critical_low < min_value < ideal.min <= ideal.max < max_value < critical_high
    """

    min_value: float
    max_value: float
    ideal: IdealRange
    unit: str
    critical_low: float
    critical_high: float
    description: str
    regulation: str

    def __post_init__(self) -> None:
        ordered = (
            self.critical_low < self.min_value < self.ideal.min_value
            <= self.ideal.max_value < self.max_value < self.critical_high
        )
        if not ordered:
            raise ValueError(f"Rangos anidados inválidos para {self.description}")


@dataclass(frozen=True)
class ValidationResult:
    """Resultado de evaluar un valor contra su estándar."""

    status: ValidationStatus
    severity: Severity
    message: str
    recommendation: Optional[str] = None
    requires_action: bool = False
    requires_closure: bool = False


@dataclass(frozen=True)
class Adjustment:
    """Corrección necesaria para volver al rango ideal."""

    action: AdjustmentAction
    amount: float
    unit: str


@dataclass(frozen=True)
class ReadingDetail:
    chemical: ChemicalType
    value: float
    validation: ValidationResult


@dataclass(frozen=True)
class ComplianceReport:
    """Agregado de validaciones de un test completo. Nunca se persiste."""

    overall: ComplianceVerdict
    total_tests: int
    passed_tests: int
    warning_tests: int
    critical_tests: int
    emergency_tests: int
    details: Tuple[ReadingDetail, ...] = ()
    recommendations: Tuple[str, ...] = ()
    required_actions: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ClosureDecision:
    should_close: bool
    reasons: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ReadingCheck:
    """Resultado de la validación estructural (pre-check de formulario)."""

    is_valid: bool
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()


# Lectura parcial: químico -> valor. Claves como enum o nombre en el wire.
ChemicalReading = Mapping[Union[ChemicalType, str], Optional[float]]
