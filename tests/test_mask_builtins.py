"""
Tests para core/mask/builtins.py - Formateadores incorporados.
"""

import pytest

from reactform.core.mask import (
    MaskToken,
    format_currency,
    format_date,
    mask,
    only_digits,
    strip_digits,
)


class TestCurrency:
    """Tests para el token currency."""

    def test_cents(self):
        """Test los dígitos se interpretan como centavos."""
        assert mask("1050", "currency") == "10,50"

    def test_thousands_separator(self):
        """Test separador de miles con punto."""
        assert mask("100000", "currency") == "1.000,00"
        assert mask("123456789", "currency") == "1.234.567,89"

    def test_small_amounts(self):
        """Test importes menores a una unidad."""
        assert format_currency("5") == "0,05"
        assert format_currency("0005") == "0,05"

    def test_non_digits_are_ignored(self):
        """Test símbolos y separadores tecleados se ignoran."""
        assert format_currency("$ 1.234,56") == "1.234,56"

    def test_very_long_amount(self):
        """Test importes de miles de dígitos se formatean sin convertir a entero."""
        result = mask("9" * 5000, "currency")
        assert result.endswith(",99")
        assert only_digits(result) == "9" * 5000
        assert result.startswith("999.999.")

    def test_only_zeros(self):
        assert format_currency("000") == "0,00"

    @pytest.mark.parametrize("raw", ["", "abc", "$"])
    def test_without_digits(self, raw):
        """Test sin dígitos el resultado es vacío."""
        assert mask(raw, "currency") == ""


class TestDate:
    """Tests para el token date."""

    def test_full_date(self):
        """Test fecha completa."""
        assert mask("31122024", "date") == "31/12/2024"

    def test_partial_date(self):
        """Test barras solo entre grupos presentes."""
        assert mask("3112", "date") == "31/12"
        assert format_date("311") == "31/1"
        assert format_date("31") == "31"

    def test_truncates_after_year(self):
        """Test nada después del año."""
        assert mask("311220249999", "date") == "31/12/2024"

    def test_reformats_already_masked_value(self):
        """Test un valor ya formateado se mantiene."""
        assert mask("31/12/2024", "date") == "31/12/2024"

    def test_empty(self):
        """Test valor vacío."""
        assert mask("", "date") == ""


class TestTextAndNumber:
    """Tests para los tokens text y number."""

    def test_text_strips_digits(self):
        """Test text quita dígitos y deja el resto."""
        assert mask("abc123def", "text") == "abcdef"
        assert strip_digits("R$ 10,5") == "R$ ,"

    def test_number_keeps_digits(self):
        """Test number deja solo dígitos."""
        assert mask("a1b2c3", "number") == "123"
        assert only_digits("(099) 123-456") == "099123456"

    @pytest.mark.parametrize("token", list(MaskToken))
    def test_empty_value(self, token):
        """Test todos los tokens con valor vacío."""
        assert mask("", token.value) == ""

    def test_enum_member_as_pattern(self):
        """Test el token puede pasarse como miembro del enum."""
        assert mask("3112", MaskToken.DATE) == "31/12"

    def test_token_inside_list_is_a_plain_pattern(self):
        """Test dentro de una lista un token no activa el formateador."""
        # Como patrón literal "date" solo admite una letra (su "a")
        assert mask("3112", ["date"]) == "3112"
