"""Tests for the Markdown ```fen block filter."""

import base64
import re

import pytest

from fen2png.data.markdown import MarkdownFilter

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
IMAGE = re.compile(r'!\[\]\(data:image/png;base64,(?P<data>[A-Za-z0-9+/=]+) "(?P<title>[^"]*)"\)')

DOCUMENT = """# Opening

Some text.

```fen
rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1
--coordinates --size=200 --turn-indicator
```

```python
print("untouched")
```

```fen
8/8/8/4k3/8/8/8/4K3
```
"""


@pytest.fixture
def markdown_filter(fake_font, fake_rasterize):
    return MarkdownFilter()


class TestMarkdownFilter:
    """Test MarkdownFilter.apply."""

    def test_replaces_fen_blocks(self, markdown_filter):
        output = markdown_filter.apply(DOCUMENT)

        images = list(IMAGE.finditer(output))
        assert len(images) == 2
        assert images[0].group("title") == "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"
        assert images[1].group("title") == "8/8/8/4k3/8/8/8/4K3"
        assert base64.b64decode(images[0].group("data")).startswith(PNG_SIGNATURE)
        assert "```fen" not in output
        assert 'print("untouched")' in output
        assert output.startswith("# Opening\n\nSome text.\n\n![](")

    def test_option_line(self, markdown_filter, fake_rasterize):
        markdown_filter.apply(DOCUMENT)

        first, second = (options for _, _, options in fake_rasterize)
        assert first.coordinates and first.turn_indicator
        assert first.size == 200
        assert not first.grayscale
        assert first.base64

    def test_grayscale_by_default(self, markdown_filter, fake_rasterize):
        markdown_filter.apply(DOCUMENT)

        _, second = (options for _, _, options in fake_rasterize)
        assert second.grayscale
        assert second.base64

    def test_font_loaded_once_per_size(self, markdown_filter, fake_font):
        markdown_filter.apply(DOCUMENT + DOCUMENT)
        assert sorted(size for _, size in fake_font) == [200, 400]

    def test_bad_fen_left_unchanged(self, markdown_filter):
        text = "```fen\n8/8/8\n```\n"
        assert markdown_filter.apply(text) == text

    def test_bad_option_left_unchanged(self, markdown_filter):
        text = "```fen\n8/8/8/8/8/8/8/8\n--no-such-option\n```\n"
        assert markdown_filter.apply(text) == text

    def test_empty_block_does_not_hide_next_block(self, markdown_filter):
        text = "```fen\n```\n\nSome prose.\n\n```fen\n8/8/8/8/8/8/8/8\n```\n"

        output = markdown_filter.apply(text)

        assert output.startswith("```fen\n```\n\nSome prose.\n\n![](")
        images = list(IMAGE.finditer(output))
        assert len(images) == 1
        assert images[0].group("title") == "8/8/8/8/8/8/8/8"

    def test_blank_lines_before_options(self, markdown_filter, fake_rasterize):
        text = "```fen\n\n8/8/8/8/8/8/8/8 b\n\n--coordinates\n```\n"

        output = markdown_filter.apply(text)

        assert IMAGE.search(output).group("title") == "8/8/8/8/8/8/8/8 b"
        options = fake_rasterize[0][2]
        assert options.coordinates
        assert not options.grayscale

    def test_text_without_blocks(self, markdown_filter):
        assert markdown_filter.apply("plain text\n") == "plain text\n"
