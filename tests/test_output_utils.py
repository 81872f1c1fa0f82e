import os
from unittest.mock import patch

from output_utils import document_title_for_deck_list, open_file_in_explorer, pdf_path_for_deck_list, write_missing_cards_file


class TestPaths:
    def test_pdf_sits_next_to_deck_list(self) -> None:
        assert pdf_path_for_deck_list(os.path.join("decks", "tayam.txt")) == os.path.join("decks", "tayam.pdf")

    def test_only_last_extension_is_replaced(self) -> None:
        assert pdf_path_for_deck_list(os.path.join("my.decks", "v1.2.txt")) == os.path.join("my.decks", "v1.2.pdf")

    def test_no_extension(self) -> None:
        assert pdf_path_for_deck_list("tayam") == "tayam.pdf"

    def test_title_is_stem(self) -> None:
        assert document_title_for_deck_list(os.path.join("decks", "tayam.txt")) == "tayam"


class TestWriteMissingCardsFile:
    def test_nothing_missing(self, tmp_path) -> None:
        assert write_missing_cards_file(str(tmp_path / "deck.txt"), []) is None
        assert list(tmp_path.iterdir()) == []

    def test_keeps_deck_order(self, tmp_path) -> None:
        path = write_missing_cards_file(str(tmp_path / "deck.txt"), ["Zur (CSP)", "Arcane Signet"])

        assert path == str(tmp_path / "deck_missing.txt")
        with open(path, encoding="utf-8") as f:
            assert f.read().splitlines() == ["Zur (CSP)", "Arcane Signet"]


class TestOpenFileInExplorer:
    def test_linux(self) -> None:
        with patch("output_utils.sys.platform", "linux"), patch("output_utils.subprocess.Popen") as popen:
            open_file_in_explorer("deck.pdf")

        popen.assert_called_once_with(["xdg-open", "deck.pdf"])

    def test_macos(self) -> None:
        with patch("output_utils.sys.platform", "darwin"), patch("output_utils.subprocess.Popen") as popen:
            open_file_in_explorer("deck.pdf")

        popen.assert_called_once_with(["open", "deck.pdf"])

    def test_missing_viewer_is_not_fatal(self, capsys) -> None:
        with patch("output_utils.sys.platform", "linux"), patch("output_utils.subprocess.Popen", side_effect=FileNotFoundError("xdg-open")):
            open_file_in_explorer("deck.pdf")

        assert "Warning: Could not open" in capsys.readouterr().out
