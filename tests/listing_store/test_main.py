"""Tests for the listing store CLI."""

import json
import logging

import pytest

from listing_analytics.listing_store.main import main


def _run(listings_file, tmp_path, *args) -> object:
    output = tmp_path / "out.json"
    main(["--data", str(listings_file), "--output", str(output), *args])
    with open(output, encoding="utf-8") as f:
        return json.load(f)


class TestMain:
    def test_default_is_statistics(self, listings_file, tmp_path):
        result = _run(listings_file, tmp_path)
        assert result["total_listings"] == 6
        assert result["null_counts"] == {"color": 1, "language": 2, "country": 2}

    def test_filter(self, listings_file, tmp_path):
        result = _run(listings_file, tmp_path, "--filter", "color", "--value", "RED")
        assert [r["id"] for r in result] == [1, 2]

    def test_filter_empty_value(self, listings_file, tmp_path):
        result = _run(listings_file, tmp_path, "--filter", "color", "--value", "")
        assert [r["id"] for r in result] == [5]

    def test_filter_requires_value(self, listings_file):
        with pytest.raises(SystemExit):
            main(["--data", str(listings_file), "--filter", "color"])

    def test_rejects_unknown_attribute(self, listings_file):
        with pytest.raises(SystemExit):
            main(["--data", str(listings_file), "--filter", "country", "--value", "x"])

    def test_missing(self, listings_file, tmp_path):
        result = _run(listings_file, tmp_path, "--missing", "language")
        assert [r["id"] for r in result] == [3, 5]
        assert result[0]["language"] is None

    def test_by_country(self, listings_file, tmp_path):
        result = _run(listings_file, tmp_path, "--by-country")
        assert list(result) == ["France", "Unknown", "Brazil", "China"]
        assert [r["id"] for r in result["Unknown"]] == [2, 5]

    def test_values(self, listings_file, tmp_path):
        result = _run(listings_file, tmp_path, "--values", "language")
        assert result == ["Chinese", "English", "French", "english"]

    def test_countries(self, listings_file, tmp_path):
        assert _run(listings_file, tmp_path, "--countries") == ["France", "Brazil", "China"]

    def test_modes_are_exclusive(self, listings_file):
        with pytest.raises(SystemExit):
            main(["--data", str(listings_file), "--stats", "--countries"])

    def test_logs_missing_breakdown(self, listings_file, caplog):
        with caplog.at_level(logging.INFO):
            main(["--data", str(listings_file)])
        assert "Missing Language: 2 (33.3%)" in caplog.text

    def test_missing_data_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            main(["--data", str(tmp_path / "absent.json")])

    def test_value_requires_filter(self, listings_file, tmp_path):
        output = tmp_path / "out.json"
        with pytest.raises(SystemExit):
            main(["--data", str(listings_file), "--value", "red", "--output", str(output)])
        assert not output.exists()

    def test_by_country_highlights_filter_matches(self, listings_file, tmp_path, caplog):
        with caplog.at_level(logging.INFO):
            result = _run(
                listings_file, tmp_path, "--by-country", "--filter", "color", "--value", "red",
            )
        assert list(result) == ["France", "Unknown", "Brazil", "China"]
        assert "France: 2 listings, 1 matches" in caplog.text
        assert "Unknown: 2 listings, 1 matches" in caplog.text
        assert "Brazil: 1 listings, 0 matches" in caplog.text

    def test_by_country_rejects_other_modes(self, listings_file):
        with pytest.raises(SystemExit):
            main(["--data", str(listings_file), "--by-country", "--missing", "color"])

    def test_default_data_is_bundled_sample(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        output = tmp_path / "out.json"
        main(["--output", str(output)])
        with open(output, encoding="utf-8") as f:
            assert json.load(f)["total_listings"] == 12
