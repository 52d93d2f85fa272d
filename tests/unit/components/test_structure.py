"""Unit tests for components/structure.py"""

import pytest

from mdxlive.components.models import DEFAULT_DISABLED_CLASSES
from mdxlive.components.structure import (
    extract_attributes,
    extract_base_classes,
    extract_record,
    extract_structure,
)
from mdxlive.core.errors import MissingVariantsError


def test_extract_structure_button(button_source):
    """A typical component yields every field from its own declarations."""
    s = extract_structure(button_source)
    assert s.name == "Button"
    assert list(s.variant_table) == ["default", "secondary", "destructive"]
    assert s.size_table["md"] == "h-10 px-4"
    assert s.base_classes == "inline-flex items-center rounded-md font-medium"
    assert s.disabled_classes == DEFAULT_DISABLED_CLASSES
    assert s.default_variant == "default"
    assert s.default_size == "sm"
    assert s.observed_attributes == ["variant", "size", "disabled", "loading"]


def test_extract_structure_two_entry_table():
    """Variant table order follows the source and the first key is the default."""
    s = extract_structure("const variantClasses = { default: 'a b', secondary: 'c' }")
    assert s.variant_table == {"default": "a b", "secondary": "c"}
    assert list(s.variant_table) == ["default", "secondary"]
    assert s.default_variant == "default"


@pytest.mark.parametrize("source", [
    "",
    "export function Button() { return null; }",
    "const sizeClasses = { sm: 'h-8' };",
    "const variantClasses = {};",
    "const variants = { default: 'a' };",
])
def test_extract_structure_missing_variants(source):
    """Sources without a usable variantClasses object fail with MissingVariantsError only."""
    with pytest.raises(MissingVariantsError):
        extract_structure(source)


def test_extract_structure_defaults():
    """Every field other than the variant table falls back to its default."""
    s = extract_structure("const variantClasses = { primary: 'bg-blue' };")
    assert s.name == "Component"
    assert s.size_table == {}
    assert s.default_size == "default"
    assert s.base_classes == ""
    assert s.disabled_classes == DEFAULT_DISABLED_CLASSES
    assert s.observed_attributes == ["variant"]


def test_extract_record_typed_and_quoted_keys():
    """Type annotations and quoted keys are accepted."""
    source = """
    const variantClasses: Record<Variant, string> = {
      'default': "bg-primary hover:bg-primary/90",
      "outline-dark": 'border',
    };
    """
    assert extract_record(source, "variantClasses") == {
        "default": "bg-primary hover:bg-primary/90",
        "outline-dark": "border",
    }


def test_extract_record_merges_declarations():
    """Repeated declarations merge; a later duplicate key keeps its first position."""
    source = "const sizeClasses = { sm: 'a', md: 'b' };\nconst sizeClasses = { lg: 'c', sm: 'z' };"
    table = extract_record(source, "sizeClasses")
    assert list(table) == ["sm", "md", "lg"]
    assert table["sm"] == "z"


@pytest.mark.parametrize("source,expected", [
    ("const baseClasses = 'a b';", "a b"),
    ("const baseClasses = 'a  ' +\n  'b c';", "a b c"),
    ('const baseClasses: string = "x " + "y";', "x y"),
    ("const base = 'a';", None),
])
def test_extract_base_classes(source, expected):
    """Concatenated and single literals both resolve; whitespace is normalized."""
    assert extract_base_classes(source) == expected


@pytest.mark.parametrize("line", [
    "const disabledClasses = 'opacity-25';",
    "disabledCls = 'opacity-25'",
])
def test_extract_disabled_classes(line):
    """disabledClasses and disabledCls override the default."""
    s = extract_structure(f"const variantClasses = {{ a: 'x' }};\n{line}")
    assert s.disabled_classes == "opacity-25"


def test_extract_attributes_props_and_destructure():
    """Props fields and destructured params are added; children/className/style/rest are not."""
    source = """
    interface CardProps extends Base {
      // heading text
      title: string;
      elevated?: boolean;
      className?: string;
      children?: ReactNode;
    }
    export function Card({ title, elevated = false, href, style, ...rest }: CardProps) {}
    """
    assert extract_attributes(source) == ["title", "elevated", "href"]


def test_extract_attributes_common_tokens_first():
    """Common attribute tokens come first, in fixed order, when mentioned anywhere."""
    source = "type ToneProps = { tone: string };\n// supports size and variant"
    assert extract_attributes(source) == ["variant", "size", "tone"]


def test_classes_used_deduplicated(button_source):
    """classes_used lists every referenced class once in first-seen order."""
    classes = extract_structure(button_source).classes_used()
    assert classes[:4] == ["inline-flex", "items-center", "rounded-md", "font-medium"]
    assert classes.count("text-white") == 1
    assert "cursor-not-allowed" in classes
