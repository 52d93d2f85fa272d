"""Jinja2 page templates: base layout, doc page and navigation sidebar"""

from jinja2 import DictLoader, Environment, StrictUndefined

from mdxlive.core.models import PageContext


BASE_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>{{ title }} - {{ site_title }}</title>
  {% for style in styles %}<link rel="stylesheet" href="{{ style }}">
  {% endfor %}<link rel="stylesheet" href="{{ base_url }}assets/main.css">
</head>
<body>
  <div class="layout">
    <nav class="sidebar">
      {% include "nav.html" %}
    </nav>
    <main class="main">
      {% block content %}{% endblock %}
    </main>
  </div>
  <script src="{{ base_url }}assets/main.js"></script>
  {% for wc in web_components %}
  <script type="module">{{ wc | safe }}</script>
  {% endfor %}
</body>
</html>
"""

DOC_TEMPLATE = """\
{% extends "base.html" %}

{% block content %}
<article class="doc">
  <div class="content">
    {{ content | safe }}
  </div>
</article>

{% if toc %}
<aside class="toc">
  <h2>On this page</h2>
  <ul>
  {% for entry in toc %}
    <li class="toc-level-{{ entry.level }}">
      <a href="#{{ entry.id }}">{{ entry.title }}</a>
    </li>
  {% endfor %}
  </ul>
</aside>
{% endif %}
{% endblock %}
"""

NAV_TEMPLATE = """\
<div class="nav-header">
  <a href="{{ base_url }}" class="nav-logo">{{ site_title }}</a>
</div>
<ul class="nav-list">
{% for item in nav %}
  <li class="nav-item{% if item.active %} active{% endif %}">
    <a href="{{ item.path }}">{{ item.title }}</a>
    {% if item.children %}
    <ul class="nav-children">
      {% for child in item.children %}
      <li class="nav-item{% if child.active %} active{% endif %}">
        <a href="{{ child.path }}">{{ child.title }}</a>
      </li>
      {% endfor %}
    </ul>
    {% endif %}
  </li>
{% endfor %}
</ul>
"""


class TemplateEngine:
    """Renders PageContext through the built-in templates (HTML autoescaped)."""

    def __init__(self) -> None:
        self.env = Environment(
            loader=DictLoader({
                "base.html": BASE_TEMPLATE,
                "doc.html": DOC_TEMPLATE,
                "nav.html": NAV_TEMPLATE,
            }),
            autoescape=True,
            undefined=StrictUndefined,
        )

    def render_page(self, template: str, context: PageContext) -> str:
        return self.env.get_template(template).render(**context.model_dump())
