from __future__ import annotations

import pytest

POST_MARKDOWN = """
---
title: 'Parsing a Markdown file metadata into a struct'
description: 'This tutorial walks you through the practice of parsing markdown files for metadata'
tags: ['markdown', 'rust', 'files', 'parsing', 'metadata']
similar_posts:
  - 'Rendering markdown'
  - 'Using Rust to render markdown'
date: '2021-09-13T03:48:00'
favorite_numbers:
    - 3.14
    - 1970
    - 12345
---


# Parsing a **Markdown** file metadata into a `struct`

> This tutorial walks you through the practice of parsing markdown files for metadata
"""


@pytest.fixture()
def post_markdown() -> str:
    return POST_MARKDOWN


@pytest.fixture()
def simple_document() -> str:
    return '---\ntitle: "T"\n---\nHello\nWorld'
