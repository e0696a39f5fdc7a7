"""
Tests para la CLI - Comandos mask y fill.
"""

import textwrap

from typer.testing import CliRunner

from reactform.cli import app
from reactform.cli.display import format_field_value


runner = CliRunner()


def _write(path, text):
    path.write_text(textwrap.dedent(text), encoding="utf-8")
    return str(path)


class TestMaskCommand:
    """Tests para reactform mask."""

    def test_builtin_token(self):
        result = runner.invoke(app, ["mask", "31122024", "date"])
        assert result.exit_code == 0
        assert '"31/12/2024"' in result.output

    def test_single_pattern(self):
        result = runner.invoke(app, ["mask", "ab123", "AA-999"])
        assert result.exit_code == 0
        assert '"AB-123"' in result.output

    def test_candidates_verbose(self):
        """Test muestra el patrón elegido."""
        result = runner.invoke(app, ["mask", "-v", "12345678", "999-9999", "99999-9999"])
        assert result.exit_code == 0
        assert "99999-9999" in result.output
        assert '"12345-678 "' in result.output

    def test_unreachable_verbose(self):
        result = runner.invoke(app, ["mask", "-v", "12", "AA", "aa"])
        assert result.exit_code == 0
        assert "Ningún patrón" in result.output
        assert '"12"' in result.output


class TestFillCommand:
    """Tests para reactform fill."""

    def test_fill_masks_values(self, tmp_path):
        path = _write(tmp_path / "form.yaml", """
            initial_values:
              nombre: Ana
            masked:
              fecha: date
        """)
        result = runner.invoke(app, ["fill", path, "-s", "fecha=31122024"])
        assert result.exit_code == 0
        assert "31/12/2024" in result.output
        assert "Ana" in result.output

    def test_submit_without_schema(self, tmp_path):
        path = _write(tmp_path / "form.yaml", """
            masked:
              monto: currency
        """)
        result = runner.invoke(app, ["fill", path, "-s", "monto=100000", "--submit"])
        assert result.exit_code == 0
        assert "1.000,00" in result.output
        assert "Formulario enviado" in result.output

    def test_submit_with_errors(self, tmp_path, monkeypatch):
        """Test envío rechazado por el esquema termina con código 1."""
        _write(tmp_path / "schemas_cli.py", """
            from pydantic import BaseModel, Field

            class Registro(BaseModel):
                nombre: str = Field(..., min_length=3)
        """)
        monkeypatch.syspath_prepend(str(tmp_path))
        path = _write(tmp_path / "form.yaml", """
            schema: "schemas_cli:Registro"
        """)
        result = runner.invoke(app, ["fill", path, "-s", "nombre=Al", "--submit"])
        assert result.exit_code == 1
        assert "errores" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["fill", str(tmp_path / "no.yaml")])
        assert result.exit_code == 1
        assert "no encontrado" in result.output

    def test_missing_schema_attribute(self, tmp_path):
        """Test un esquema inexistente en el módulo termina con código 1."""
        path = _write(tmp_path / "form.yaml", """
            schema: "os:nope"
        """)
        result = runner.invoke(app, ["fill", path])
        assert result.exit_code == 1
        assert "nope" in result.output

    def test_malformed_yaml(self, tmp_path):
        path = _write(tmp_path / "form.yaml", "masked: [unclosed\n")
        result = runner.invoke(app, ["fill", path])
        assert result.exit_code == 1
        assert "[x]" in result.output

    def test_invalid_assignment(self, tmp_path):
        path = _write(tmp_path / "form.yaml", "masked: {fecha: date}\n")
        result = runner.invoke(app, ["fill", path, "-s", "sin_igual"])
        assert result.exit_code != 0


class TestFormatFieldValue:
    """Tests para format_field_value."""

    def test_empty(self):
        assert format_field_value(None) == "-"
        assert format_field_value("") == "-"

    def test_float(self):
        assert format_field_value(1.5) == "1.50"

    def test_list(self):
        assert format_field_value(["a", "b"]) == "a, b"
        assert format_field_value([]) == "-"
