"""Tests for the chunk and cluster models and the document-wide statistics."""

from __future__ import annotations

import logging

import pytest
from bs4 import BeautifulSoup

from chunkfeat.chunks import Ancestor, Chunk, link_chunks
from chunkfeat.cluster import Cluster, ClusterError
from chunkfeat.stats import class_stats, cluster_stats
from chunkfeat.text import Text

# ---------------------------------------------------------------------------
# Chunk.from_element
# ---------------------------------------------------------------------------


class TestFromElement:
    def test_heading_inside_article(self, article_soup: BeautifulSoup) -> None:
        h1 = article_soup.find("h1")
        chunk = Chunk.from_element(h1)
        assert chunk.tag == "h1"
        assert chunk.parent_tag == "article"
        assert chunk.classes == ["title"]
        assert chunk.text.words == 1
        assert chunk.ancestors == Ancestor.ARTICLE
        assert chunk.sibling_types == ["div", "blockquote", "ul"]
        assert chunk.block is h1.parent

    def test_paragraph_siblings_exclude_itself(self, article_soup: BeautifulSoup) -> None:
        chunk = Chunk.from_element(article_soup.find("p", class_="intro"))
        assert chunk.parent_tag == "div"
        assert chunk.sibling_types == ["p", "img"]

    def test_link_text_counts_anchor_words(self, article_soup: BeautifulSoup) -> None:
        second = article_soup.find_all("p")[1]
        chunk = Chunk.from_element(second)
        assert chunk.link_text == 2
        assert chunk.text.sentences == 2

    def test_anchor_chunk_is_all_link_text(self, article_soup: BeautifulSoup) -> None:
        chunk = Chunk.from_element(article_soup.find("a", href="/x"))
        assert chunk.tag == "a"
        assert chunk.link_text == 2
        assert chunk.parent_tag == "p"

    def test_nav_block(self, article_soup: BeautifulSoup) -> None:
        chunk = Chunk.from_element(article_soup.find("div", class_="nav"))
        assert chunk.link_text == 2
        assert chunk.ancestors == Ancestor.NONE
        assert chunk.sibling_types == ["article", "aside"]

    def test_nested_ancestors(self, article_soup: BeautifulSoup) -> None:
        quote = Chunk.from_element(article_soup.blockquote.p)
        item = Chunk.from_element(article_soup.find("span"))
        aside = Chunk.from_element(article_soup.aside.p)
        assert quote.ancestors == Ancestor.ARTICLE | Ancestor.BLOCKQUOTE
        assert item.ancestors == Ancestor.ARTICLE | Ancestor.LIST
        assert item.parent_tag == "li"
        assert aside.ancestors == Ancestor.ASIDE
        assert aside.classes == ["widget"]

    def test_top_level_element_has_no_parent(self) -> None:
        soup = BeautifulSoup("<p>Lonely words.</p>", "html.parser")
        chunk = Chunk.from_element(soup.p)
        assert chunk.parent_tag is None
        assert chunk.sibling_types == []
        assert chunk.block is None

    def test_explicit_block(self, article_soup: BeautifulSoup) -> None:
        marker = object()
        chunk = Chunk.from_element(article_soup.find("h1"), block=marker)
        assert chunk.block is marker


class TestChunkModel:
    def test_link_chunks(self, welcome_chunks: list[Chunk]) -> None:
        h1, p, div = welcome_chunks
        assert h1.prev is None
        assert h1.next is p
        assert p.prev is h1 and p.next is div
        assert div.next is None

    def test_identity_equality(self) -> None:
        a = Chunk(tag="p", text=Text("same"))
        b = Chunk(tag="p", text=Text("same"))
        assert a != b
        assert len({a, b}) == 2

    def test_same_block_is_identity(self) -> None:
        block = object()
        a = Chunk(tag="p", block=block)
        b = Chunk(tag="p", block=block)
        c = Chunk(tag="p", block=object())
        assert a.same_block(b)
        assert not a.same_block(c)


# ---------------------------------------------------------------------------
# Cluster
# ---------------------------------------------------------------------------


class TestCluster:
    def test_score_is_mean(self, welcome_chunks: list[Chunk]) -> None:
        cluster = Cluster(chunks=welcome_chunks, scores=[1.0, 0.5, -0.5])
        assert cluster.score() == pytest.approx(1.0 / 3)

    def test_index(self, welcome_chunks: list[Chunk]) -> None:
        cluster = Cluster(chunks=welcome_chunks[:2], scores=[0.0, 0.0])
        assert cluster.index(welcome_chunks[1]) == 1
        assert cluster.index(welcome_chunks[2]) is None

    def test_misaligned_scores_rejected(self, welcome_chunks: list[Chunk]) -> None:
        with pytest.raises(ClusterError):
            Cluster(chunks=welcome_chunks, scores=[0.0])

    def test_chunks_and_scores_are_required(self) -> None:
        with pytest.raises(TypeError):
            Cluster()

    def test_empty_cluster_rejected(self) -> None:
        with pytest.raises(ClusterError):
            Cluster(chunks=[], scores=[])

    def test_duplicate_chunk_rejected(self, welcome_chunks: list[Chunk]) -> None:
        h1 = welcome_chunks[0]
        with pytest.raises(ClusterError):
            Cluster(chunks=[h1, h1], scores=[0.0, 0.0])
        cluster = Cluster(chunks=[h1], scores=[0.0])
        with pytest.raises(ClusterError):
            cluster.append(h1, 1.0)

    def test_append_keeps_alignment(self, welcome_chunks: list[Chunk]) -> None:
        cluster = Cluster(chunks=[welcome_chunks[0]], scores=[0.2])
        cluster.append(welcome_chunks[1], 0.4)
        assert len(cluster) == 2
        assert cluster.scores == [0.2, 0.4]


# ---------------------------------------------------------------------------
# Document-wide statistics
# ---------------------------------------------------------------------------


class TestStats:
    def test_class_stats(self) -> None:
        chunks = [
            Chunk(tag="p", text=Text("one two three."), classes=["body", "body"]),
            Chunk(tag="p", text=Text("four."), classes=["body", "lead"]),
        ]
        stats = class_stats(chunks)
        assert (stats["body"].words, stats["body"].sentences, stats["body"].count) == (4, 2, 2)
        assert stats["lead"].count == 1

    def test_cluster_stats_shared_per_cluster(self, welcome_chunks: list[Chunk]) -> None:
        h1, p, div = welcome_chunks
        first = Cluster(chunks=[h1, p], scores=[0.0, 0.0])
        second = Cluster(chunks=[div], scores=[0.0])
        stats = cluster_stats([first, second])
        assert stats[h1] is stats[p]
        assert (stats[h1].words, stats[h1].sentences, stats[h1].count) == (4, 2, 2)
        assert stats[div].count == 1

    def test_cluster_stats_first_cluster_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        a, b, c = link_chunks([
            Chunk(tag="p", text=Text("One two.")),
            Chunk(tag="p", text=Text("Three.")),
            Chunk(tag="p", text=Text("Four five six seven.")),
        ])
        first = Cluster(chunks=[a, b], scores=[0.0, 0.0])
        second = Cluster(chunks=[b, c], scores=[0.0, 0.0])
        with caplog.at_level(logging.WARNING, logger="chunkfeat.stats"):
            stats = cluster_stats([first, second])
        assert stats[b] is stats[a]
        assert stats[b].words == 3
        assert stats[c].words == 5
        assert len(caplog.records) == 1
