"""Benchmark suite for the format analyzer.

Measures extraction and end-to-end analysis across content sizes, up to
tens of kilobytes of block markup.

Run:  pytest tests/test_benchmarks.py --benchmark-enable
Skip: pytest tests/ -m "not benchmark"
"""

from __future__ import annotations

import pytest

import formatsignals
from formatsignals._markup import scan_markers, strip_tags
from formatsignals._scorer import score

pytestmark = pytest.mark.benchmark

# ---------------------------------------------------------------------------
# Sample content
# ---------------------------------------------------------------------------

STATUS = "<p>Just shipped a new feature! Feeling great about the progress.</p>"

CHAT = "\n".join(
    f"<!-- wp:paragraph --><p>{name}: message number {i}</p><!-- /wp:paragraph -->"
    for i, name in enumerate(["Alice", "Bob"] * 20)
)

ARTICLE_SECTION = (
    "<!-- wp:heading --><h2>Section</h2><!-- /wp:heading -->\n"
    "<!-- wp:paragraph --><p>The quick brown fox jumps over the lazy dog, "
    'and <a href="https://example.com/ref">a reference</a> follows. '
    "Several more words pad this paragraph to a realistic length for a "
    "long-form post.</p><!-- /wp:paragraph -->\n"
    '<!-- wp:image --><figure class="wp-block-image"><img src="a.jpg" alt="">'
    "</figure><!-- /wp:image -->\n"
)

ARTICLE_10KB = ARTICLE_SECTION * (10_000 // len(ARTICLE_SECTION) + 1)
ARTICLE_50KB = ARTICLE_SECTION * (50_000 // len(ARTICLE_SECTION) + 1)

SAMPLE_CONTENT = {
    "status": STATUS,
    "chat_40_lines": CHAT,
    "article_10kb": ARTICLE_10KB,
    "article_50kb": ARTICLE_50KB,
}


# ---------------------------------------------------------------------------
# 1. Startup
# ---------------------------------------------------------------------------


def test_bench_startup(benchmark):
    """Measure formatsignals.load() with the built-in weights."""
    benchmark.pedantic(formatsignals.load, rounds=5, iterations=1, warmup_rounds=0)


# ---------------------------------------------------------------------------
# 2. End-to-end analysis
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("content_key", list(SAMPLE_CONTENT.keys()))
def test_bench_analyze_e2e(benchmark, analyzer, content_key):
    """End-to-end analyzer.analyze() across content sizes."""
    content = SAMPLE_CONTENT[content_key]
    benchmark.extra_info["content_key"] = content_key
    benchmark.extra_info["n_bytes"] = len(content.encode("utf-8"))
    result = benchmark(analyzer.analyze, content, "")
    assert 0 <= result.confidence <= 100


# ---------------------------------------------------------------------------
# 3. Per-stage isolation
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("content_key", ["status", "article_10kb"])
def test_bench_strip_tags(benchmark, content_key):
    """Tag stripping alone."""
    benchmark(strip_tags, SAMPLE_CONTENT[content_key])


@pytest.mark.parametrize("content_key", ["status", "article_10kb"])
def test_bench_marker_scan(benchmark, content_key):
    """Single Aho-Corasick pass over lowercased markup."""
    benchmark(scan_markers, SAMPLE_CONTENT[content_key])


@pytest.mark.parametrize("content_key", ["status", "article_10kb"])
def test_bench_extract(benchmark, analyzer, content_key):
    """Full signal extraction for one content."""
    benchmark(analyzer.signals, SAMPLE_CONTENT[content_key], "")


def test_bench_score(benchmark, analyzer):
    """Scoring a precomputed signal set against the default table."""
    signals = analyzer.signals(ARTICLE_10KB, "Title")
    benchmark(score, signals, analyzer.weights)


def test_bench_validate(benchmark, analyzer):
    """Validation of a long article against the image format."""
    benchmark(analyzer.validate, ARTICLE_10KB, "image", "Title")


# ---------------------------------------------------------------------------
# 4. Batch
# ---------------------------------------------------------------------------


def test_bench_analyze_batch(benchmark, analyzer):
    """analyze_batch() over 10 mixed contents."""
    items = [STATUS, CHAT, ARTICLE_10KB, STATUS, CHAT] * 2
    benchmark(analyzer.analyze_batch, items)
