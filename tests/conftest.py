"""Root test configuration: a throwaway site tree with one valid article"""

from pathlib import Path

import pytest


PROJECT_ROOT = Path(__file__).parent.parent

SAMPLE_POST = """\
---
title: 'Hello Flutter'
pubDate: '2023-03-14T09:00:00+01:00'
description: 'A short post about widgets.'
author: 'Codderlly'
image: '/images/hello.svg'
tags: ['flutter', 'dart']
---

# Hello

Widgets all the way down.
"""


@pytest.fixture(name="project_root")
def project_root_fixture() -> Path:
    return PROJECT_ROOT


@pytest.fixture(name="sample_post")
def sample_post_fixture() -> str:
    return SAMPLE_POST


@pytest.fixture(name="site_root")
def site_root_fixture(tmp_path) -> Path:
    """tmp_path laid out like the repository: public assets plus content/blog/hello.md."""
    public = tmp_path / "public"
    (public / "images").mkdir(parents=True)
    (public / "og.jpg").write_bytes(b"\xff\xd8\xff\xd9")
    (public / "logo.svg").write_text("<svg/>")
    (public / "images" / "hello.svg").write_text("<svg/>")

    blog = tmp_path / "content" / "blog"
    blog.mkdir(parents=True)
    (blog / "hello.md").write_text(SAMPLE_POST, encoding="utf-8")
    return tmp_path
