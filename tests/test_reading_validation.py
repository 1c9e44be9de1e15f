"""Tests de la validación estructural (pre-check de formulario)."""

import pytest

from pool_chem_services.compliance_api.classification import UnknownChemicalError
from pool_chem_services.compliance_api.pipelines import validate_chemical_reading


class TestStructuralErrors:
    """Valores físicamente imposibles se reportan como errores, sin excepciones."""

    def test_negative_free_chlorine(self):
        result = validate_chemical_reading({"freeChlorine": -1})
        assert result.is_valid is False
        assert result.errors == ("Free Available Chlorine cannot be negative",)

    def test_every_negative_is_reported(self):
        result = validate_chemical_reading({"freeChlorine": -1, "alkalinity": -50, "calcium": -5})
        assert len(result.errors) == 3
        assert "Total Alkalinity cannot be negative" in result.errors

    @pytest.mark.parametrize("ph", [0, 14])
    def test_ph_limits_are_valid(self, ph):
        assert validate_chemical_reading({"ph": ph}).errors == ()

    @pytest.mark.parametrize("ph", [-0.1, 15])
    def test_ph_out_of_scale(self, ph):
        result = validate_chemical_reading({"ph": ph})
        assert result.errors == ("pH must be between 0 and 14",)

    @pytest.mark.parametrize("temperature", [30, 125])
    def test_temperature_out_of_range(self, temperature):
        result = validate_chemical_reading({"temperature": temperature})
        assert result.is_valid is False
        assert result.errors == ("Temperature must be between 32°F and 120°F",)

    def test_non_finite_value(self):
        result = validate_chemical_reading({"calcium": float("nan")})
        assert result.errors == ("Calcium Hardness must be a finite number",)

    def test_unknown_key_is_programming_error(self):
        with pytest.raises(UnknownChemicalError):
            validate_chemical_reading({"bromine": 3})


class TestIdealRangeWarnings:
    """Fuera del ideal -> aviso; no invalida la lectura."""

    def test_ideal_reading_is_clean(self, ideal_reading):
        result = validate_chemical_reading(ideal_reading)
        assert result.is_valid is True
        assert result.errors == ()
        assert result.warnings == ()

    def test_warnings_describe_value_and_bound(self):
        result = validate_chemical_reading({"ph": 7.1, "freeChlorine": 2.8, "temperature": 85})
        assert result.is_valid is True
        assert result.warnings == (
            "pH Level (7.1) is below ideal minimum (7.3)",
            "Free Available Chlorine (2.8 ppm) is above ideal maximum (2.5 ppm)",
            "Water Temperature (85°F) is above ideal maximum (82°F)",
        )

    def test_absent_fields_ignored(self):
        result = validate_chemical_reading({"cyanuricAcid": None})
        assert result.is_valid is True
        assert result.warnings == ()

    def test_error_suppresses_warning_for_same_field(self):
        result = validate_chemical_reading({"ph": 15})
        assert result.warnings == ()
