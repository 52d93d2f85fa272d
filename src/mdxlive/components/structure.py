"""Pattern-based recovery of a component's class tables and attributes from source text.

This is deliberately not a parser. Each field is recovered by an independent pass
over the raw text and degrades to a fixed default when its pattern is absent:

    field               pattern                                   default
    ------------------  ----------------------------------------  ------------------------
    variant table       const variantClasses = { k: 'v', ... }    (required)
    size table          const sizeClasses = { ... }               {}
    base classes        const baseClasses = 'a' + 'b' | 'a b'     ""
    disabled classes    [const] disabledClasses|disabledCls = ''  DEFAULT_DISABLED_CLASSES
    name                function|const <Uppercase>                "Component"
    observed attrs      tokens, *Props body, destructured params  []

Only a missing variant table is an error.
"""

import re
from typing import Optional

from mdxlive.components.models import DEFAULT_DISABLED_CLASSES, ComponentStructure
from mdxlive.core.errors import MissingVariantsError


COMPONENT_NAME_RE = re.compile(r'(?:export\s+)?(?:function|const)\s+([A-Z][a-zA-Z0-9]*)')
ENTRY_RE = re.compile(r'''['"]?([\w-]+)['"]?\s*:\s*['"]([^'"]*)['"]''')
STRING_LITERAL_RE = re.compile(r'''['"]([^'"]*)['"]''')
BASE_CLASSES_CONCAT_RE = re.compile(
    r'''const\s+baseClasses\s*(?::\s*string\s*)?=\s*((?:['"][^'"]*['"]\s*\+?\s*)+)'''
)
BASE_CLASSES_SIMPLE_RE = re.compile(r'''const\s+baseClasses\s*=\s*['"]([^'"]+)['"]''')
DISABLED_CLASSES_RE = re.compile(r'''(?:const\s+)?disabledCl(?:asse)?s\s*=\s*['"]([^'"]+)['"]''')
PROPS_BODY_RE = re.compile(
    r'(?:interface\s+\w*Props(?:\s+extends\s+[^{]+)?|type\s+\w*Props\s*=)\s*\{([^}]+)\}'
)
DESTRUCTURE_RE = re.compile(r'\{\s*([^}]+)\s*\}\s*(?::\s*\w+)?\s*\)')

COMMON_ATTRIBUTES = ('variant', 'size', 'disabled', 'loading')
EXCLUDED_PROPS = frozenset({'children', 'className', 'style'})


def _record_re(name: str) -> re.Pattern:
    # optional type annotation, e.g. `: Record<Variant, string>`
    return re.compile(
        rf'const\s+{re.escape(name)}\s*(?::\s*[^={{}};]+?)?\s*=\s*\{{([^}}]+)\}}'
    )


def extract_record(source: str, name: str) -> dict[str, str]:
    """Merge every `const <name> = { key: 'value' }` declaration into one ordered table.

    Later duplicate keys overwrite the value but keep the first position.
    """
    entries: dict[str, str] = {}
    for m in _record_re(name).finditer(source):
        for key, value in ENTRY_RE.findall(m.group(1)):
            entries[key] = value
    return entries


def _normalize(classes: str) -> str:
    return ' '.join(classes.split())


def extract_base_classes(source: str) -> Optional[str]:
    """Concatenated literals ('a ' + 'b') first, then a single literal."""
    m = BASE_CLASSES_CONCAT_RE.search(source)
    if m:
        classes = _normalize(' '.join(STRING_LITERAL_RE.findall(m.group(1))))
        if classes:
            return classes
    m = BASE_CLASSES_SIMPLE_RE.search(source)
    return _normalize(m.group(1)) if m else None


def extract_disabled_classes(source: str) -> Optional[str]:
    m = DISABLED_CLASSES_RE.search(source)
    return m.group(1) if m else None


def extract_component_name(source: str) -> Optional[str]:
    m = COMPONENT_NAME_RE.search(source)
    return m.group(1) if m else None


def _prop_names_from_body(body: str) -> list[str]:
    names = []
    for line in body.splitlines():
        line = line.strip()
        if not line or line.startswith(('//', '/*', '*')):
            continue
        name = re.split(r'[:?]', line, maxsplit=1)[0].strip()
        if name.isidentifier() and name not in EXCLUDED_PROPS:
            names.append(name)
    return names


def _prop_names_from_destructure(params: str) -> list[str]:
    names = []
    for part in params.split(','):
        name = re.split(r'[=:]', part, maxsplit=1)[0].strip()
        if name.startswith('...'):
            continue
        if name.isidentifier() and name not in EXCLUDED_PROPS:
            names.append(name)
    return names


def extract_attributes(source: str) -> list[str]:
    """Union of common tokens, *Props fields and destructured params, first-seen order."""
    found = [a for a in COMMON_ATTRIBUTES if a in source]

    m = PROPS_BODY_RE.search(source)
    if m:
        found.extend(_prop_names_from_body(m.group(1)))

    m = DESTRUCTURE_RE.search(source)
    if m:
        found.extend(_prop_names_from_destructure(m.group(1)))

    return list(dict.fromkeys(found))


def extract_structure(source: str) -> ComponentStructure:
    """Recover a ComponentStructure from arbitrary component source.

    Raises MissingVariantsError when no variantClasses entries can be found.
    """
    variant_table = extract_record(source, 'variantClasses')
    if not variant_table:
        raise MissingVariantsError()

    disabled = extract_disabled_classes(source)
    return ComponentStructure(
        name=extract_component_name(source) or "Component",
        variant_table=variant_table,
        size_table=extract_record(source, 'sizeClasses'),
        base_classes=extract_base_classes(source) or "",
        disabled_classes=disabled if disabled is not None else DEFAULT_DISABLED_CLASSES,
        observed_attributes=extract_attributes(source),
    )
