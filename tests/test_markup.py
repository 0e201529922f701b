"""Tests for tag stripping, word counting and the marker scan."""

from formatsignals._markup import count_words, scan_markers, strip_tags


def test_strip_empty():
    """Empty and blank input strip to an empty string."""
    assert strip_tags("") == ""
    assert strip_tags("   \n  ") == ""


def test_strip_plain_text_untouched():
    """Plain text passes through unchanged."""
    assert strip_tags("Hello world.") == "Hello world."


def test_strip_block_comments():
    """Block annotations should be dropped."""
    content = (
        "<!-- wp:paragraph -->\n<p>Hello</p>\n<!-- /wp:paragraph -->"
    )
    assert strip_tags(content) == "Hello"


def test_strip_script_and_style_bodies():
    """Script and style bodies should be dropped."""
    content = "<style>p { color: red; }</style><p>Hi</p><script>alert(1)</script>"
    assert strip_tags(content) == "Hi"


def test_paragraphs_become_lines():
    """Each paragraph should end up on its own line."""
    content = "<p>Alice: hi</p><p>Bob: yo</p>"
    assert strip_tags(content).splitlines() == ["Alice: hi", "Bob: yo"]


def test_line_breaks_become_lines():
    """<br> tags become line breaks."""
    assert strip_tags("one<br>two<br />three").splitlines() == [
        "one", "two", "three",
    ]


def test_malformed_markup_does_not_raise():
    """Broken markup still strips without error."""
    assert strip_tags("<p>unclosed <b>bold") == "unclosed bold"
    assert strip_tags("a < b and c > d") == "a  d"


def test_count_words():
    """Words allow inner apostrophes and hyphens."""
    assert count_words("") == 0
    assert count_words("Hello, world!") == 2
    assert count_words("don't stop the well-known café") == 5


def test_count_words_ignores_numbers():
    """Digits are not words."""
    assert count_words("42 is the answer") == 3


def test_scan_markers_case_insensitive():
    """Marker matching ignores case."""
    counts = scan_markers('<BLOCKQUOTE>x</BLOCKQUOTE><Cite>y</Cite>')
    assert counts["blockquote"] == 1
    assert counts["cite"] == 1


def test_scan_markers_counts_repeats():
    """Every occurrence of a marker is counted."""
    counts = scan_markers("<p>a</p><p>b</p><p>c</p>")
    assert counts["paragraph_close"] == 3


def test_scan_markers_hosts():
    """Host markers fold into their categories."""
    counts = scan_markers(
        "https://youtu.be/x https://vimeo.com/1 https://overcast.fm/+abc"
    )
    assert counts["youtube_vimeo"] == 2
    assert counts["podcast_host"] == 1


def test_scan_markers_empty():
    """Empty input has no markers."""
    assert not scan_markers("")
