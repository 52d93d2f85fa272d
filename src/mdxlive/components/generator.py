"""Custom-element (Web Component) source generation from a ComponentStructure.

The output is a self-registering ES module. It adopts the page's readable
stylesheets once per browser session (shared across every generated element via a
globalThis slot) so utility classes from the page apply inside the shadow root.
"""

from jinja2 import Environment, StrictUndefined

from mdxlive.components.models import Artifact, ComponentStructure


_JS_ESCAPES = (
    ('\\', '\\\\'),
    ("'", "\\'"),
    ('\n', '\\n'),
    ('\r', '\\r'),
    ('</', '<\\/'),
)


def escape_js(s: str) -> str:
    """Escape a value for a single-quoted JS string literal inside a <script> element."""
    for old, new in _JS_ESCAPES:
        s = s.replace(old, new)
    return s


def to_pascal_case(tag_name: str) -> str:
    """'button-preview' -> 'ButtonPreview'."""
    return ''.join(part[:1].upper() + part[1:] for part in tag_name.split('-'))


WEB_COMPONENT_TEMPLATE = """\
/**
 * {{ class_name }} - generated preview element
 * Source component: {{ component_name }}
 * Tag: <{{ tag_name }}>
 */

const variantClasses = {
{%- for key, value in variants %}
  '{{ key }}': '{{ value }}',
{%- endfor %}
};

const sizeClasses = {
{%- for key, value in sizes %}
  '{{ key }}': '{{ value }}',
{%- endfor %}
};

const baseClasses = '{{ base_classes }}';
const disabledClasses = '{{ disabled_classes }}';
const defaultVariant = '{{ default_variant }}';
const defaultSize = '{{ default_size }}';

const SHEETS_KEY = Symbol.for('mdxlive.adoptedStyleSheets');
const hasDom = typeof window !== 'undefined' && typeof document !== 'undefined';
const BaseElement = typeof HTMLElement !== 'undefined' ? HTMLElement : class {};

function pageStyleSheets() {
  if (globalThis[SHEETS_KEY]) return globalThis[SHEETS_KEY];
  const sheets = [];
  if (hasDom && typeof CSSStyleSheet !== 'undefined') {
    for (const sheet of document.styleSheets) {
      try {
        const clone = new CSSStyleSheet();
        clone.replaceSync(Array.from(sheet.cssRules).map((r) => r.cssText).join('\\n'));
        sheets.push(clone);
      } catch (e) {
        // cross-origin sheet, rules not readable
      }
    }
  }
  globalThis[SHEETS_KEY] = sheets;
  return sheets;
}

export class {{ class_name }} extends BaseElement {
  static observedAttributes = [{{ attributes }}];

  #root = null;
  #element = null;

  connectedCallback() {
    if (!this.#root) {
      this.#root = this.attachShadow({ mode: 'open' });
      this.#root.adoptedStyleSheets = pageStyleSheets();
    }
    this.#render();
  }

  attributeChangedCallback() {
    if (this.#root) this.#render();
  }

  #render() {
    const variantAttr = this.getAttribute('variant');
    const sizeAttr = this.getAttribute('size');
    const variant = Object.hasOwn(variantClasses, variantAttr ?? '') ? variantAttr : defaultVariant;
    const size = Object.hasOwn(sizeClasses, sizeAttr ?? '') ? sizeAttr : defaultSize;
    const loading = this.hasAttribute('loading');
    const disabled = this.hasAttribute('disabled') || loading;

    const classes = [
      baseClasses,
      variantClasses[variant],
      sizeClasses[size],
      disabled ? disabledClasses : '',
    ].filter(Boolean).join(' ');

    if (this.#element) this.#element.remove();

    const el = document.createElement('button');
    el.type = 'button';
    el.className = classes;
    el.disabled = disabled;
    if (disabled) el.setAttribute('aria-disabled', 'true');

    if (loading) {
      el.setAttribute('aria-busy', 'true');
      const marker = document.createElement('span');
      marker.setAttribute('aria-hidden', 'true');
      marker.textContent = 'Loading...';
      el.appendChild(marker);
    } else {
      el.appendChild(document.createElement('slot'));
    }

    this.#element = el;
    this.#root.appendChild(el);
  }
}

if (typeof customElements !== 'undefined' && !customElements.get('{{ tag_name }}')) {
  customElements.define('{{ tag_name }}', {{ class_name }});
}

export default {{ class_name }};
"""

_env = Environment(autoescape=False, undefined=StrictUndefined, keep_trailing_newline=True)
_template = _env.from_string(WEB_COMPONENT_TEMPLATE)


def generate_web_component(structure: ComponentStructure, tag_name: str) -> str:
    """Render the custom-element module for structure registered under tag_name."""
    return _template.render(
        class_name=to_pascal_case(tag_name),
        component_name=escape_js(structure.name),
        tag_name=escape_js(tag_name),
        variants=[(escape_js(k), escape_js(v)) for k, v in structure.variant_table.items()],
        sizes=[(escape_js(k), escape_js(v)) for k, v in structure.size_table.items()],
        base_classes=escape_js(structure.base_classes),
        disabled_classes=escape_js(structure.disabled_classes),
        default_variant=escape_js(structure.default_variant),
        default_size=escape_js(structure.default_size),
        attributes=', '.join(f"'{escape_js(a)}'" for a in structure.observed_attributes),
    )


def build_artifact(structure: ComponentStructure, tag_name: str) -> Artifact:
    return Artifact(
        tag_name=tag_name,
        source=generate_web_component(structure, tag_name),
        classes_used=structure.classes_used(),
        attributes=list(structure.observed_attributes),
    )
