"""Tests del clasificador de lecturas y la tabla de estándares MAHC.

Ejecutar:
    pytest tests/test_reading_classifier.py -v
"""

import pytest

from pool_chem_services.compliance_api.classification import (
    MAHC_STANDARDS,
    ChemicalStandard,
    ChemicalType,
    IdealRange,
    Severity,
    UnknownChemicalError,
    ValidationStatus,
    format_chemical_value,
    get_acceptable_range,
    get_ideal_range,
    standard_for,
    validate_chemical,
)
from pool_chem_services.compliance_api.classification.remediation import (
    EMERGENCY_RECOMMENDATION,
    REMEDIATION,
)


def _expected_status(value: float, chemical: ChemicalType) -> ValidationStatus:
    std = MAHC_STANDARDS[chemical]
    if value <= std.critical_low or value >= std.critical_high:
        return ValidationStatus.EMERGENCY
    if value < std.min_value or value > std.max_value:
        return ValidationStatus.CRITICAL
    if value < std.ideal.min_value or value > std.ideal.max_value:
        return ValidationStatus.WARNING
    return ValidationStatus.GOOD


def _grid(chemical: ChemicalType, steps: int = 200) -> list:
    std = MAHC_STANDARDS[chemical]
    span = std.critical_high - std.critical_low
    low = std.critical_low - span / 2
    high = std.critical_high + span / 2
    return [low + (high - low) * i / steps for i in range(steps + 1)]


# =============================================================================
# TABLA DE ESTÁNDARES
# =============================================================================

class TestStandardsTable:
    """La tabla cubre el enum completo y respeta los rangos anidados."""

    def test_every_chemical_has_a_standard(self):
        assert set(MAHC_STANDARDS) == set(ChemicalType)

    @pytest.mark.parametrize("chemical", list(ChemicalType))
    def test_nested_ranges(self, chemical):
        std = standard_for(chemical)
        assert (
            std.critical_low < std.min_value < std.ideal.min_value
            <= std.ideal.max_value < std.max_value < std.critical_high
        )

    def test_lookup_accepts_wire_name(self):
        assert standard_for("freeChlorine") is MAHC_STANDARDS[ChemicalType.FREE_CHLORINE]

    def test_unknown_chemical_is_programming_error(self):
        with pytest.raises(UnknownChemicalError):
            standard_for("chloride")
        # Subclase de KeyError: no se confunde con errores de valor
        with pytest.raises(KeyError):
            standard_for("bromine")

    def test_invalid_nesting_rejected_at_definition(self):
        with pytest.raises(ValueError):
            ChemicalStandard(
                min_value=1.0,
                max_value=3.0,
                ideal=IdealRange(0.5, 2.0),
                unit="ppm",
                critical_low=0.2,
                critical_high=5.0,
                description="Broken",
                regulation="n/a",
            )

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            MAHC_STANDARDS[ChemicalType.PH] = MAHC_STANDARDS[ChemicalType.ALKALINITY]

    def test_remediation_table_is_read_only(self):
        with pytest.raises(TypeError):
            REMEDIATION[ChemicalType.PH]["low"] = "otra cosa"
        with pytest.raises(TypeError):
            REMEDIATION[ChemicalType.PH] = {}
        assert validate_chemical(7.25, "ph").recommendation == REMEDIATION[ChemicalType.PH]["low"]

    def test_remediation_table_has_fourteen_entries(self):
        assert set(REMEDIATION) == set(ChemicalType)
        texts = [REMEDIATION[c][d] for c in ChemicalType for d in ("low", "high")]
        assert len(texts) == 14
        assert all(texts)


# =============================================================================
# ESCENARIOS DE CLASIFICACIÓN
# =============================================================================

class TestValidateScenarios:
    """Escenarios concretos por nivel."""

    def test_good_ph(self):
        result = validate_chemical(7.4, "ph")
        assert result.status is ValidationStatus.GOOD
        assert result.severity is Severity.LOW
        assert result.requires_action is False
        assert result.requires_closure is False
        assert result.recommendation is None
        assert result.message == "GOOD: pH Level within ideal range (7.4)"

    def test_warning_ph_between_min_and_ideal(self):
        result = validate_chemical(7.25, ChemicalType.PH)
        assert result.status is ValidationStatus.WARNING
        assert result.severity is Severity.MEDIUM
        assert result.requires_action is True
        assert result.requires_closure is False
        assert result.recommendation == REMEDIATION[ChemicalType.PH]["low"]

    def test_ph_below_min_is_critical(self):
        # 7.1 < min 7.2: fuera del rango aceptable
        result = validate_chemical(7.1, "ph")
        assert result.status is ValidationStatus.CRITICAL

    def test_critical_ph_between_max_and_critical_high(self):
        result = validate_chemical(7.9, "ph")
        assert result.status is ValidationStatus.CRITICAL
        assert result.severity is Severity.HIGH
        assert result.message == "CRITICAL: pH Level too high (7.9)"
        assert result.recommendation == (
            "Add muriatic acid or sodium bisulfate to lower pH. Test in small increments."
        )
        assert result.requires_action is True
        assert result.requires_closure is False

    def test_emergency_ph_beyond_critical_high(self):
        result = validate_chemical(8.5, "ph")
        assert result.status is ValidationStatus.EMERGENCY
        assert result.severity is Severity.CRITICAL
        assert result.message == "EMERGENCY: pH Level critically out of range"
        assert result.recommendation == EMERGENCY_RECOMMENDATION
        assert result.requires_closure is True

    def test_message_includes_unit(self):
        result = validate_chemical(0.8, "freeChlorine")
        assert result.status is ValidationStatus.CRITICAL
        assert result.message == "CRITICAL: Free Available Chlorine too low (0.8 ppm)"
        assert result.recommendation == (
            "Add liquid chlorine or granular chlorine. Check chlorine feeder operation."
        )

    def test_negative_value_is_not_rejected_here(self):
        # Validación física es otra capa; aquí solo hay niveles
        result = validate_chemical(-1, "freeChlorine")
        assert result.status is ValidationStatus.EMERGENCY

    def test_nan_raises(self):
        with pytest.raises(ValueError):
            validate_chemical(float("nan"), "ph")

    def test_infinity_is_emergency(self):
        assert validate_chemical(float("inf"), "calcium").status is ValidationStatus.EMERGENCY
        assert validate_chemical(float("-inf"), "calcium").status is ValidationStatus.EMERGENCY


# =============================================================================
# LÍMITES INCLUSIVOS
# =============================================================================

class TestBoundaries:
    """min/max inclusivos hacia el lado seguro; críticos hacia el peor."""

    @pytest.mark.parametrize("chemical", list(ChemicalType))
    def test_acceptable_bounds_are_not_critical(self, chemical):
        std = standard_for(chemical)
        assert validate_chemical(std.min_value, chemical).status is ValidationStatus.WARNING
        assert validate_chemical(std.max_value, chemical).status is ValidationStatus.WARNING

    @pytest.mark.parametrize("chemical", list(ChemicalType))
    def test_ideal_bounds_are_good(self, chemical):
        std = standard_for(chemical)
        assert validate_chemical(std.ideal.min_value, chemical).status is ValidationStatus.GOOD
        assert validate_chemical(std.ideal.max_value, chemical).status is ValidationStatus.GOOD

    @pytest.mark.parametrize("chemical", list(ChemicalType))
    def test_critical_bounds_are_emergency(self, chemical):
        std = standard_for(chemical)
        assert validate_chemical(std.critical_low, chemical).status is ValidationStatus.EMERGENCY
        assert validate_chemical(std.critical_high, chemical).status is ValidationStatus.EMERGENCY

    def test_ph_edges(self):
        assert validate_chemical(7.2, "ph").status is ValidationStatus.WARNING
        assert validate_chemical(7.6, "ph").status is ValidationStatus.WARNING
        assert validate_chemical(6.8, "ph").status is ValidationStatus.EMERGENCY
        assert validate_chemical(8.0, "ph").status is ValidationStatus.EMERGENCY


# =============================================================================
# PROPIEDADES
# =============================================================================

class TestClassifierProperties:
    """Partición, monotonía e idempotencia sobre una rejilla de valores."""

    @pytest.mark.parametrize("chemical", list(ChemicalType))
    def test_tiers_partition_the_line(self, chemical):
        for value in _grid(chemical):
            result = validate_chemical(value, chemical)
            assert result.status is _expected_status(value, chemical), value
            assert result.requires_closure == (result.status is ValidationStatus.EMERGENCY)
            assert result.requires_action == (result.status is not ValidationStatus.GOOD)

    @pytest.mark.parametrize("chemical", list(ChemicalType))
    def test_severity_monotonic_in_distance(self, chemical):
        std = standard_for(chemical)
        target = std.ideal.target
        step = (std.critical_high - std.critical_low) / 100
        for sign in (1, -1):
            previous_rank = -1
            for i in range(150):
                rank = validate_chemical(target + sign * step * i, chemical).status.rank
                assert rank >= previous_rank
                previous_rank = rank

    def test_idempotent(self):
        assert validate_chemical(7.9, "ph") == validate_chemical(7.9, "ph")


# =============================================================================
# FORMATO Y RANGOS
# =============================================================================

class TestFormatting:
    """Precisión por químico y rangos legibles."""

    def test_ph_one_decimal(self):
        assert format_chemical_value(7.456, "ph") == "7.5"
        assert format_chemical_value(7.4, "ph") == "7.4"

    def test_chlorine_one_decimal_with_unit(self):
        assert format_chemical_value(2, "freeChlorine") == "2.0 ppm"
        assert format_chemical_value(1.25, "totalChlorine") == "1.3 ppm"

    def test_whole_units_for_the_rest(self):
        assert format_chemical_value(100.4, "alkalinity") == "100 ppm"
        assert format_chemical_value(82.5, "temperature") == "83 °F"
        assert format_chemical_value(299.6, "calcium") == "300 ppm"

    def test_ranges(self):
        assert get_acceptable_range("freeChlorine") == "1.0-3.0 ppm"
        assert get_acceptable_range("ph") == "7.2-7.6"
        assert get_ideal_range("ph") == "7.3-7.5"
        assert get_ideal_range(ChemicalType.ALKALINITY) == "90-110 ppm"
        assert get_acceptable_range("temperature") == "78-84 °F"
