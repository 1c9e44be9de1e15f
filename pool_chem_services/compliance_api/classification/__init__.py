"""Clasificación de lecturas químicas contra la tabla MAHC.

Estructura modular:
- models.py: Enums y dataclasses (ChemicalType, ValidationResult, etc.)
- standards.py: Tabla de estándares MAHC y rangos para display
- remediation.py: Recomendaciones por químico y dirección
- reading_classifier.py: Clasificador de un valor (4 niveles)
"""

from .models import (
    Adjustment,
    AdjustmentAction,
    ChemicalReading,
    ChemicalStandard,
    ChemicalType,
    ClosureDecision,
    ComplianceReport,
    ComplianceVerdict,
    IdealRange,
    ReadingCheck,
    ReadingDetail,
    Severity,
    UnknownChemicalError,
    ValidationResult,
    ValidationStatus,
)
from .reading_classifier import validate_chemical
from .standards import (
    MAHC_STANDARDS,
    display_precision,
    format_chemical_value,
    get_acceptable_range,
    get_ideal_range,
    standard_for,
)

__all__ = [
    "Adjustment",
    "AdjustmentAction",
    "ChemicalReading",
    "ChemicalStandard",
    "ChemicalType",
    "ClosureDecision",
    "ComplianceReport",
    "ComplianceVerdict",
    "IdealRange",
    "MAHC_STANDARDS",
    "ReadingCheck",
    "ReadingDetail",
    "Severity",
    "UnknownChemicalError",
    "ValidationResult",
    "ValidationStatus",
    "display_precision",
    "format_chemical_value",
    "get_acceptable_range",
    "get_ideal_range",
    "standard_for",
    "validate_chemical",
]
