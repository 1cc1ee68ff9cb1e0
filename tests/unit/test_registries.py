"""Unit tests for TemplateRegistry and style presets."""

import pytest
from jinja2 import TemplateNotFound

from vitae.contexts.templating.defaults import get_default_style
from vitae.contexts.templating.exceptions import InvalidStyleError, TemplateRenderError
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.contexts.templating.style_resolver import load_style


@pytest.mark.unit
def test_template_registry_init():
    """Test TemplateRegistry initialization."""
    registry = TemplateRegistry()
    assert (registry.template_base_path / "types").exists()
    assert registry._cache == {}


@pytest.mark.unit
def test_template_caching():
    """Test that templates are cached after first load."""
    registry = TemplateRegistry()

    template1 = registry.get_template("work_entry")
    assert "types/work_entry/template.tex.jinja" in registry._cache

    template2 = registry.get_template("work_entry")
    assert template1 is template2


@pytest.mark.unit
def test_render_uses_cached_template():
    """render() goes through get_template(), so repeated renders reuse one load."""
    registry = TemplateRegistry()
    registry.render("cv_item", label="a", text="b")
    template = registry.get_template("cv_item")

    registry.render("cv_item", label="c", text="d")
    assert registry.get_template("cv_item") is template
    assert len(registry._cache) == 1


@pytest.mark.unit
def test_get_template_not_found():
    """Test error handling for missing template."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateNotFound):
        registry.get_template("nonexistent_type")


@pytest.mark.unit
def test_render_uses_latex_safe_delimiters():
    """Braces in the template are LaTeX, not Jinja."""
    registry = TemplateRegistry()
    assert registry.render("cv_item", label="Go", text="fast") == r"\cvitem{Go}{fast}"


@pytest.mark.unit
def test_render_missing_variable_raises():
    """StrictUndefined surfaces missing context instead of rendering blanks."""
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError) as exc_info:
        registry.render("cv_item", label="Go")
    assert exc_info.value.type_name == "cv_item"
    assert exc_info.value.original_error is not None


@pytest.mark.unit
def test_render_missing_type_raises():
    registry = TemplateRegistry()

    with pytest.raises(TemplateRenderError):
        registry.render("nonexistent_type")


@pytest.mark.unit
def test_custom_template_directory(tmp_path):
    (tmp_path / "types" / "cv_item").mkdir(parents=True)
    (tmp_path / "types" / "cv_item" / "template.tex.jinja").write_text(
        r"\cvline{<<< label >>>}{<<< text >>>}" + "\n", encoding="utf-8"
    )
    registry = TemplateRegistry(template_base_path=tmp_path)
    assert registry.render("cv_item", label="a", text="b") == r"\cvline{a}{b}"


@pytest.mark.unit
class TestLoadStyle:
    """Tests for load_style function."""

    def test_bundled_preset_matches_defaults(self):
        assert load_style() == get_default_style()

    def test_partial_preset_keeps_defaults(self, tmp_path):
        preset = tmp_path / "style.yaml"
        preset.write_text("color: grey\ndocument_class:\n  paper: letterpaper\n", encoding="utf-8")

        style = load_style(preset)
        assert style["color"] == "grey"
        assert style["style"] == "classic"
        assert style["document_class"] == {
            "font_size": "11pt",
            "paper": "letterpaper",
            "font_family": "sans",
        }

    def test_non_mapping_preset(self, tmp_path):
        preset = tmp_path / "style.yaml"
        preset.write_text("- blue\n- classic\n", encoding="utf-8")

        with pytest.raises(InvalidStyleError):
            load_style(preset)

    def test_scalar_document_class(self, tmp_path):
        preset = tmp_path / "style.yaml"
        preset.write_text("document_class: a4paper\n", encoding="utf-8")

        with pytest.raises(InvalidStyleError):
            load_style(preset)

    def test_missing_preset(self, tmp_path):
        with pytest.raises(InvalidStyleError):
            load_style(tmp_path / "missing.yaml")
