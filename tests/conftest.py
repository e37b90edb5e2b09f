"""Shared pytest fixtures."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from chunkfeat.chunks import Chunk, link_chunks
from chunkfeat.text import Text

ARTICLE_HTML = """<html><head><title>Welcome to the Site</title></head><body>
<div class="nav"><a href="/">Home</a> <a href="/about">About</a></div>
<article>
  <h1 class="title">Welcome</h1>
  <div class="post-content">
    <p class="intro">Intro text here.</p>
    <p>Second paragraph. It has <a href="/x">one link</a> and two sentences!</p>
    <img src="/a.png">
  </div>
  <blockquote><p>Quoted words.</p></blockquote>
  <ul><li><span>Listed item</span></li></ul>
</article>
<aside><p class="widget">Sidebar text</p></aside>
</body></html>"""


@pytest.fixture
def article_soup() -> BeautifulSoup:
    return BeautifulSoup(ARTICLE_HTML, "lxml")


@pytest.fixture
def welcome_chunks() -> list[Chunk]:
    """``h1 "Welcome"``, ``p "Intro text here."``, ``div.nav "Home About"``."""
    return link_chunks([
        Chunk(tag="h1", text=Text("Welcome")),
        Chunk(tag="p", text=Text("Intro text here."), parent_tag="div"),
        Chunk(tag="div", text=Text("Home About"), link_text=2, classes=["nav"]),
    ])
