"""Test daily seeds and themed batch builds."""

from datetime import datetime, timezone
from unittest.mock import patch

import pytest

from wordweb.engine import (
    BuildConfig,
    CorpusError,
    ThemeRow,
    build_daily,
    build_themed,
    central_date_str,
    daily_seed,
    parse_themes,
    read_themes,
)
from wordweb.verifiers import verify_puzzle


CORPUS = [
    "Wooster", "Jeeves", "Blandings", "Whisky", "Agatha", "Psmith",
    "Emsworth", "Gussie", "Dahlia", "Bertie", "Madeline", "Spode",
]


class TestCentralDate:
    """Dates are computed in America/Chicago."""

    def test_late_utc_is_previous_day(self):
        """03:00 UTC is still the previous evening in Chicago."""
        assert central_date_str(datetime(2025, 9, 15, 3, 0, tzinfo=timezone.utc)) == "2025-09-14"

    def test_midday_utc(self):
        """Midday UTC is the same calendar day in Chicago."""
        assert central_date_str(datetime(2025, 9, 15, 12, 0, tzinfo=timezone.utc)) == "2025-09-15"

    def test_naive_is_utc(self):
        """Naive datetimes are read as UTC."""
        assert central_date_str(datetime(2025, 9, 15, 3, 0)) == "2025-09-14"

    def test_winter_offset(self):
        """Standard time is six hours behind UTC."""
        assert central_date_str(datetime(2025, 1, 15, 5, 30, tzinfo=timezone.utc)) == "2025-01-14"
        assert central_date_str(datetime(2025, 1, 15, 6, 30, tzinfo=timezone.utc)) == "2025-01-15"

    def test_default_is_today(self):
        """Without an argument the current date is formatted."""
        assert len(central_date_str()) == 10


class TestDailySeed:
    """Test daily seed derivation."""

    def test_format(self):
        """Seeds join the date and corpus size."""
        assert daily_seed("2025-09-14", 500) == "2025-09-14|500"

    @pytest.mark.parametrize("date", ["2025-9-14", "2025-09-14"])
    def test_canonical_date(self, date):
        """Unpadded dates seed the same as their zero-padded form."""
        assert daily_seed(date, 500) == "2025-09-14|500"

    def test_unpadded_date_same_puzzle(self):
        """The same calendar day builds the same puzzle however it is written."""
        a = build_daily(CORPUS, date="2025-9-14")
        b = build_daily(CORPUS, date="2025-09-14")
        assert a.seed == b.seed
        assert a.puzzle == b.puzzle

    @pytest.mark.parametrize("date", ["2025-13-01", "14/09/2025", "", "2025-02-30"])
    def test_invalid_date(self, date):
        """Malformed dates are rejected."""
        with pytest.raises(ValueError):
            daily_seed(date, 10)


class TestBuildDaily:
    """Test dated builds from a corpus."""

    def test_seed_uses_normalized_corpus_size(self):
        """The seed counts eligible, deduplicated words."""
        result = build_daily(CORPUS + ["jeeves", "cat"], date="2025-09-14")
        assert result.seed == f"2025-09-14|{len(CORPUS)}"

    def test_same_day_same_puzzle(self):
        """The same date and corpus give the same puzzle."""
        a = build_daily(CORPUS, date="2025-09-14")
        b = build_daily(CORPUS, date="2025-09-14")
        assert a.puzzle == b.puzzle

    def test_next_day_differs(self):
        """Consecutive days give different grids."""
        a = build_daily(CORPUS, date="2025-09-14")
        b = build_daily(CORPUS, date="2025-09-15")
        assert a.puzzle.grid != b.puzzle.grid

    def test_default_date(self):
        """Without a date, today's Chicago date is used."""
        with patch("wordweb.engine.daily.central_date_str", return_value="2025-09-14"):
            result = build_daily(CORPUS)
        assert result.seed.startswith("2025-09-14|")

    def test_config_is_used(self):
        """Build settings pass through to the builder."""
        result = build_daily(CORPUS, date="2025-09-14", config=BuildConfig(size=10, word_count=5))
        assert result.puzzle.size == 10
        assert len(result.puzzle.answers) == 5
        assert verify_puzzle(result.puzzle).valid


THEMES_TSV = (
    "date\ttheme\twords\n"
    "2025-09-14\tThe Drones Club\tBingo|Gussie|Tuppy|Oofy\n"
    "\n"
    "2025-09-15\tBlandings\tEmsworth | Empress | Beach | Baxter\n"
)


class TestParseThemes:
    """Test themes TSV parsing."""

    def test_rows(self):
        """Each data row becomes a ThemeRow."""
        rows = parse_themes(THEMES_TSV)
        assert rows == [
            ThemeRow(date="2025-09-14", theme="The Drones Club", words=["Bingo", "Gussie", "Tuppy", "Oofy"]),
            ThemeRow(date="2025-09-15", theme="Blandings", words=["Emsworth", "Empress", "Beach", "Baxter"]),
        ]

    def test_column_order_and_case(self):
        """Columns are found by header name in any order."""
        rows = parse_themes("Words\tDATE\tTheme\nJeeves|Wooster\t2025-09-14\tValet\r\n")
        assert rows[0].date == "2025-09-14"
        assert rows[0].theme == "Valet"
        assert rows[0].words == ["Jeeves", "Wooster"]

    def test_short_row(self):
        """Missing trailing cells are read as empty."""
        rows = parse_themes("date\ttheme\twords\n2025-09-14\tEmpty")
        assert rows[0].words == []

    def test_missing_column(self):
        """A header without a required column is rejected."""
        with pytest.raises(CorpusError, match="words"):
            parse_themes("date\ttheme\n2025-09-14\tNo words")

    def test_empty_text(self):
        """An empty file has no rows."""
        assert parse_themes("") == []

    def test_read_file(self, tmp_path):
        """Themes are read from disk."""
        path = tmp_path / "themes.tsv"
        path.write_text(THEMES_TSV, encoding="utf-8")
        assert len(read_themes(path)) == 2

    def test_read_missing_file(self, tmp_path):
        """A missing themes file is a corpus error."""
        with pytest.raises(CorpusError):
            read_themes(tmp_path / "missing.tsv")


class TestBuildThemed:
    """Test themed builds."""

    def test_all_words_hidden(self):
        """Every theme word is placed and the theme is kept."""
        row = ThemeRow(date="2025-09-14", theme="Aunts", words=["Agatha", "Dahlia", "Julia", "Aunt Agatha"])
        result = build_themed(row)
        puzzle = result.puzzle

        assert puzzle.theme == "Aunts"
        assert puzzle.size == 14
        assert sorted(puzzle.words) == sorted(["AGATHA", "DAHLIA", "JULIA", "AUNTAGATHA"])
        assert verify_puzzle(puzzle, require_disjoint=False).valid

    def test_word_longer_than_grid_bends(self):
        """With bent paths allowed a word longer than the grid still fits."""
        row = ThemeRow(date="2025-09-15", theme="Castle", words=["Blandings Castle", "Emsworth"])
        result = build_themed(row, BuildConfig.for_themes(size=10))

        long_word = next(p for p in result.placements if p.word == "BLANDINGSCASTLE")
        assert len(long_word.path) == 15
        assert long_word.turns >= 1
        assert verify_puzzle(result.puzzle, require_disjoint=False).valid

    def test_date_is_seed(self):
        """The row date seeds the build."""
        row = ThemeRow(date="2025-09-14", theme="Drones", words=["Bingo", "Gussie", "Tuppy"])
        assert build_themed(row).seed == "2025-09-14"
        assert build_themed(row).puzzle == build_themed(row).puzzle

    def test_no_usable_words(self):
        """A row without letters cannot be built."""
        with pytest.raises(CorpusError):
            build_themed(ThemeRow(date="2025-09-14", theme="Nothing", words=["123", "--"]))
