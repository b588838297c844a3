"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt


SAMPLE_MD = """\
# Title

One two three four.

```python
print("not counted")
```

```
plain fence
```

## Part two

Five six `seven`
"""

VALID_FM = {
    "title": "Hello Flutter",
    "pubDate": "2023-03-14T09:00:00+01:00",
    "description": "A short post about widgets.",
    "author": "Codderlly",
    "image": "/images/hello.svg",
    "tags": ["flutter", "dart"],
}


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("gfm-like", options_update={"linkify": False})


@pytest.fixture(name="sample_tokens")
def sample_tokens_fixture(parser):
    return parser.parse(SAMPLE_MD)


@pytest.fixture(name="valid_fm")
def valid_fm_fixture() -> dict:
    """A fresh copy of a front-matter mapping that passes the schema."""
    return {k: (list(v) if isinstance(v, list) else v) for k, v in VALID_FM.items()}
