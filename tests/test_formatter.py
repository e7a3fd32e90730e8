"""Unit tests for core/formatter.py and the main.py CLI."""

import json
from unittest.mock import patch

import main
from core.formatter import disable_color, format_card, to_json
from core.models import Card, CardBatch, sentinel_card

disable_color()

_CARD = Card(
    id="p1",
    title="Hello",
    description="A description",
    author="Ann",
    link="https://example.com/p1",
    image_url="",
)


class TestFormatter:
    def test_to_json_uses_card_fields(self):
        data = json.loads(to_json([_CARD]))
        assert data == [
            {
                "id": "p1",
                "title": "Hello",
                "description": "A description",
                "author": "Ann",
                "link": "https://example.com/p1",
                "image_url": "",
            }
        ]

    def test_format_card_omits_empty_image(self):
        text = format_card(_CARD)
        assert "Hello" in text
        assert "by Ann" in text
        assert "https://example.com/p1" in text
        assert "image" not in text

    def test_sentinel_rendered(self):
        assert "Error: Failed to load content" in format_card(sentinel_card("p9"))


class TestCli:
    def test_json_output(self, capsys):
        with (
            patch("sys.argv", ["main.py", "--json"]),
            patch("main.load_cards", return_value=CardBatch(cards=[_CARD])),
        ):
            assert main.main() == 0
        assert json.loads(capsys.readouterr().out)[0]["id"] == "p1"

    def test_no_sort_flag(self):
        with (
            patch("sys.argv", ["main.py", "--no-sort", "--no-color"]),
            patch("main.load_cards", return_value=CardBatch()) as mock_load,
        ):
            main.main()
        assert mock_load.call_args.args[0].sort_by_title is False

    def test_fetch_failure_exit_code(self, capsys):
        with (
            patch("sys.argv", ["main.py"]),
            patch("main.load_cards", return_value=CardBatch(error="Content store returned 401")),
        ):
            assert main.main() == 1
        assert "Could not read database" in capsys.readouterr().err
