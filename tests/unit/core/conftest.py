"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt


SAMPLE_MDX = """\
---
title: Button
description: Clickable action
order: 2
---

# Button

Buttons trigger actions.

## Usage

```tsx live
<Button variant="primary">Click</Button>
```

## Source

```tsx filename="Button.tsx"
export function Button() {}
```

    indented code
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="sample_mdx")
def sample_mdx_fixture():
    return SAMPLE_MDX
