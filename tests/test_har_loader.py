"""Tests for HAR loading and time filtering."""

import io
import json
from datetime import datetime, timedelta, timezone

import pytest

from harscope.har import (
    HarLoadError,
    entries,
    entry_part,
    filter_by_time,
    load_har,
    parse_timestamp,
    request_url,
)


class TestParseTimestamp:
    """Tests for parse_timestamp."""

    def test_zulu(self):
        moment = parse_timestamp("2024-01-01T10:00:00.000Z")
        assert moment == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_offset(self):
        moment = parse_timestamp("2024-01-01T12:00:00+02:00")
        assert moment == datetime(2024, 1, 1, 10, 0, tzinfo=timezone.utc)

    def test_naive_is_local(self):
        moment = parse_timestamp("2024-01-01T10:00:00")
        assert moment.tzinfo is not None

    def test_invalid(self):
        with pytest.raises(ValueError):
            parse_timestamp("yesterday")


class TestLoadHar:
    """Tests for load_har."""

    def test_load_file(self, sample_har_file):
        document = load_har(sample_har_file)
        assert len(entries(document)) == 6

    def test_load_str_path(self, sample_har_file):
        document = load_har(str(sample_har_file))
        assert document["log"]["version"] == "1.2"

    def test_load_stream(self, sample_har_data):
        stream = io.StringIO(json.dumps(sample_har_data))
        document = load_har(stream)
        assert len(entries(document)) == 6

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.har"
        bad.write_text("{not json", encoding="utf-8")
        with pytest.raises(HarLoadError, match="as JSON"):
            load_har(bad)

    def test_missing_file(self, tmp_path):
        with pytest.raises(HarLoadError, match="Cannot read"):
            load_har(tmp_path / "missing.har")

    def test_missing_log(self, tmp_path):
        bad = tmp_path / "nolog.har"
        bad.write_text('{"entries": []}', encoding="utf-8")
        with pytest.raises(HarLoadError, match="'log'"):
            load_har(bad)

    def test_entries_not_list(self, tmp_path):
        bad = tmp_path / "noentries.har"
        bad.write_text('{"log": {"entries": {}}}', encoding="utf-8")
        with pytest.raises(HarLoadError, match="log.entries"):
            load_har(bad)


class TestEntryAccess:
    """Tests for entries, entry_part and request_url."""

    def test_entries_skip_non_objects(self, sample_har_data):
        sample_har_data["log"]["entries"].extend([None, "x", 3, []])
        assert len(entries(sample_har_data)) == 6

    @pytest.mark.parametrize("entry", [
        {},
        {"request": None},
        {"request": "GET /"},
        {"request": {"url": None}},
    ])
    def test_missing_request_url(self, entry):
        assert request_url(entry) == ""
        assert isinstance(entry_part(entry, "request"), dict)

    def test_request_url(self, sample_har_data):
        assert request_url(entries(sample_har_data)[0]) == "https://a.example.com/index.html"


class TestFilterByTime:
    """Tests for filter_by_time."""

    BOUNDARY = datetime(2024, 1, 1, 10, 2, tzinfo=timezone.utc)

    def test_before_keeps_boundary(self, sample_har_data):
        removed = filter_by_time(sample_har_data, self.BOUNDARY, keep_after=False)
        times = [e["startedDateTime"] for e in entries(sample_har_data)]
        assert times == [
            "2024-01-01T10:00:00.000Z",
            "2024-01-01T10:01:00.000Z",
            "2024-01-01T10:02:00.000Z",
        ]
        assert removed == 3

    def test_after_keeps_boundary(self, sample_har_data):
        filter_by_time(sample_har_data, self.BOUNDARY, keep_after=True)
        times = [e["startedDateTime"] for e in entries(sample_har_data)]
        assert times[0] == "2024-01-01T10:02:00.000Z"
        assert len(times) == 4

    def test_window(self, sample_har_data):
        filter_by_time(sample_har_data, self.BOUNDARY, keep_after=True)
        filter_by_time(sample_har_data, self.BOUNDARY + timedelta(minutes=1), keep_after=False)
        assert len(entries(sample_har_data)) == 2

    def test_other_timezone(self, sample_har_data):
        """Test that the boundary is compared as an instant, not wall time."""
        boundary = datetime(2024, 1, 1, 11, 0, tzinfo=timezone(timedelta(hours=1)))
        filter_by_time(sample_har_data, boundary, keep_after=False)
        assert len(entries(sample_har_data)) == 1

    def test_missing_timestamp(self, sample_har_data):
        del sample_har_data["log"]["entries"][2]["startedDateTime"]
        with pytest.raises(HarLoadError, match="entry 3"):
            filter_by_time(sample_har_data, self.BOUNDARY, keep_after=True)

    def test_bad_timestamp(self, sample_har_data):
        sample_har_data["log"]["entries"][0]["startedDateTime"] = "noon"
        with pytest.raises(HarLoadError, match="Invalid HAR file"):
            filter_by_time(sample_har_data, self.BOUNDARY, keep_after=False)

    def test_non_object_entries_dropped(self, sample_har_data):
        sample_har_data["log"]["entries"].insert(0, None)
        removed = filter_by_time(sample_har_data, self.BOUNDARY, keep_after=True)
        assert removed == 3
        assert None not in sample_har_data["log"]["entries"]
