"""Unit tests for components/generator.py"""

import pytest

from mdxlive.components.generator import (
    build_artifact,
    escape_js,
    generate_web_component,
    to_pascal_case,
)
from mdxlive.components.models import ComponentStructure
from mdxlive.components.structure import extract_structure


@pytest.mark.parametrize("tag,expected", [
    ("button-preview", "ButtonPreview"),
    ("preview-block-12", "PreviewBlock12"),
    ("x", "X"),
])
def test_to_pascal_case(tag, expected):
    assert to_pascal_case(tag) == expected


@pytest.mark.parametrize("raw,expected", [
    ("it's", "it\\'s"),
    ("a\\b", "a\\\\b"),
    ("line\nbreak", "line\\nbreak"),
    ("</script>", "<\\/script>"),
])
def test_escape_js(raw, expected):
    """Values are safe inside a single-quoted literal within a <script> element."""
    assert escape_js(raw) == expected


def test_generate_web_component_contents(button_source):
    """The module carries the class tables, defaults, attributes and registration."""
    js = generate_web_component(extract_structure(button_source), "button-preview")
    assert "export class ButtonPreview extends BaseElement" in js
    assert "'secondary': 'bg-secondary text-black'," in js
    assert "'lg': 'h-12 px-6 text-lg'," in js
    assert "const baseClasses = 'inline-flex items-center rounded-md font-medium';" in js
    assert "const defaultVariant = 'default';" in js
    assert "const defaultSize = 'sm';" in js
    assert "static observedAttributes = ['variant', 'size', 'disabled', 'loading'];" in js
    assert "!customElements.get('button-preview')" in js
    assert "customElements.define('button-preview', ButtonPreview);" in js
    assert js.rstrip().endswith("export default ButtonPreview;")


def test_generate_web_component_shared_stylesheet_cache():
    """Adopted stylesheets are memoized once per page in a globalThis slot."""
    js = generate_web_component(ComponentStructure(variant_table={"a": "x"}), "a-preview")
    assert "Symbol.for('mdxlive.adoptedStyleSheets')" in js
    assert "if (globalThis[SHEETS_KEY]) return globalThis[SHEETS_KEY];" in js


def test_generate_web_component_escapes_values():
    """Quotes in class strings cannot break out of their JS literal."""
    structure = ComponentStructure(variant_table={"odd": "before:content-['x']"})
    js = generate_web_component(structure, "odd-preview")
    assert "'odd': 'before:content-[\\'x\\']'," in js


def test_generate_web_component_empty_sizes():
    """A component without sizes still produces an empty table and the default size."""
    js = generate_web_component(ComponentStructure(variant_table={"a": "x"}), "a-preview")
    assert "const sizeClasses = {\n};" in js
    assert "const defaultSize = 'default';" in js


def test_generate_web_component_deterministic(button_source):
    """Same structure and tag always yield identical text."""
    structure = extract_structure(button_source)
    assert generate_web_component(structure, "b-preview") == generate_web_component(structure, "b-preview")


def test_build_artifact(button_source):
    """Artifacts bundle tag, source, classes and attributes."""
    structure = extract_structure(button_source)
    artifact = build_artifact(structure, "button-preview")
    assert artifact.tag_name == "button-preview"
    assert artifact.source == generate_web_component(structure, "button-preview")
    assert artifact.classes_used == structure.classes_used()
    assert artifact.attributes == ["variant", "size", "disabled", "loading"]
