"""
test_entry.py
-------------
Unit tests for the raw and canonical entry models.

Covers default substitution, required fields, type checks and ordering.
"""
import dataclasses
import pytest
from datetime import date, datetime

from tomlreadme.core.exceptions import DecodeError
from tomlreadme.dataclasses.entry import (
    Config,
    Entry,
    RawConfig,
    RawEntry,
    decode_config,
)


def raw_entry(**overrides):
    data = {
        "title": "Hello",
        "date": date(2024, 9, 30),
        "at": "Earth",
        "senpan": "",
    }
    data.update(overrides)
    return data


class TestDefaults:
    """Test optional fields become empty strings."""

    def test_missing_meta_defaults_to_empty(self):
        """Test absent meta decodes to ''."""
        config = decode_config({"entries": [raw_entry(content="x")]})
        assert config.entries[0].meta == ""

    def test_missing_content_defaults_to_empty(self):
        """Test absent content decodes to ''."""
        config = decode_config({"entries": [raw_entry(meta="m")]})
        assert config.entries[0].content == ""

    def test_missing_header_defaults_to_empty(self):
        """Test absent markdown_header decodes to ''."""
        assert decode_config({"entries": []}).markdown_header == ""

    def test_missing_id_stays_none(self):
        """Test an absent id is omitted, not defaulted."""
        assert decode_config({"entries": [raw_entry()]}).entries[0].id is None

    def test_raw_keeps_absence(self):
        """Test the raw layer still records absent fields as None."""
        raw = RawEntry.from_dict(raw_entry())
        assert raw.content is None
        assert raw.meta is None

    def test_no_none_survives(self):
        """Test no text field of a canonical entry is None."""
        entry = decode_config({"entries": [raw_entry()]}).entries[0]
        for name in ("title", "content", "meta", "at", "senpan"):
            assert isinstance(getattr(entry, name), str)

    def test_empty_senpan_distinct_from_absent(self):
        """Test senpan may be empty but must be present."""
        assert decode_config({"entries": [raw_entry(senpan="")]}).entries[0].senpan == ""
        data = raw_entry()
        del data["senpan"]
        with pytest.raises(DecodeError, match="senpan"):
            decode_config({"entries": [data]})


class TestRequiredFields:
    """Test required fields are enforced."""

    @pytest.mark.parametrize("name", ["title", "date", "at", "senpan"])
    def test_missing_required_field(self, name):
        """Test each required field raises DecodeError when absent."""
        data = raw_entry()
        del data[name]
        with pytest.raises(DecodeError, match=f"missing field '{name}'"):
            decode_config({"entries": [data]})

    def test_error_names_entry_index(self):
        """Test the message points at the failing entry."""
        bad = raw_entry()
        del bad["at"]
        with pytest.raises(DecodeError, match="entry 2"):
            decode_config({"entries": [raw_entry(), bad]})

    def test_error_prefix(self):
        """Test every decode error names the failing operation."""
        with pytest.raises(DecodeError, match="^Unable to parse the document"):
            decode_config({"entries": [{}]})

    def test_empty_title_rejected(self):
        """Test the title must be non-empty."""
        with pytest.raises(DecodeError, match="title"):
            decode_config({"entries": [raw_entry(title="")]})


class TestTypes:
    """Test field type checks."""

    def test_string_date_parsed(self):
        """Test ISO strings become dates."""
        entry = decode_config({"entries": [raw_entry(date="2024-09-30")]}).entries[0]
        assert entry.date == date(2024, 9, 30)

    def test_unparseable_date(self):
        """Test malformed date strings are rejected."""
        with pytest.raises(DecodeError, match="invalid date"):
            decode_config({"entries": [raw_entry(date="30/09/2024")]})

    def test_datetime_rejected(self):
        """Test dates with a time part are rejected."""
        with pytest.raises(DecodeError, match="without time"):
            decode_config({"entries": [raw_entry(date=datetime(2024, 9, 30, 12, 0))]})

    def test_free_text_date_kept(self):
        """Test free-text mode keeps any string."""
        config = decode_config(
            {"entries": [raw_entry(date="late September")]}, free_text_dates=True
        )
        assert config.entries[0].date == "late September"

    def test_free_text_mode_still_accepts_dates(self):
        """Test free-text mode keeps real dates as dates."""
        config = decode_config({"entries": [raw_entry()]}, free_text_dates=True)
        assert config.entries[0].date == date(2024, 9, 30)

    @pytest.mark.parametrize("value", [0, -1, True, "1", 1.5])
    def test_bad_id(self, value):
        """Test ids must be positive integers."""
        with pytest.raises(DecodeError, match="'id'"):
            decode_config({"entries": [raw_entry(id=value)]})

    def test_duplicate_ids_accepted(self):
        """Test id uniqueness is not validated."""
        config = decode_config({"entries": [raw_entry(id=1), raw_entry(id=1)]})
        assert [entry.id for entry in config.entries] == [1, 1]

    def test_non_string_text_field(self):
        """Test text fields reject other types."""
        with pytest.raises(DecodeError, match="'meta' must be a string"):
            decode_config({"entries": [raw_entry(meta=3)]})

    def test_unknown_fields_ignored(self):
        """Test extra keys do not fail decoding."""
        config = decode_config({"entries": [raw_entry(tags=["x"])]})
        assert config.entries[0].title == "Hello"


class TestDocumentShape:
    """Test top-level document handling."""

    def test_order_preserved(self):
        """Test entries keep document order."""
        titles = ["c", "a", "b"]
        config = decode_config({"entries": [raw_entry(title=t) for t in titles]})
        assert [entry.title for entry in config.entries] == titles

    def test_legacy_key(self):
        """Test [[yasunori]] is accepted."""
        config = decode_config({"yasunori": [raw_entry()]})
        assert len(config.entries) == 1

    def test_both_keys_rejected(self):
        """Test entries and yasunori together are ambiguous."""
        with pytest.raises(DecodeError, match="not both"):
            decode_config({"entries": [], "yasunori": []})

    def test_no_entries(self):
        """Test a document without entries decodes to an empty list."""
        assert decode_config({}).entries == ()

    def test_entries_not_a_list(self):
        """Test a non-array entries value is rejected."""
        with pytest.raises(DecodeError, match="array of tables"):
            decode_config({"entries": {"title": "x"}})

    def test_entry_not_a_table(self):
        """Test array members must be tables."""
        with pytest.raises(DecodeError, match="expected a table"):
            decode_config({"entries": ["x"]})

    def test_top_level_not_a_table(self):
        """Test a non-mapping document is rejected."""
        with pytest.raises(DecodeError):
            decode_config(["x"])

    def test_header_must_be_string(self):
        """Test markdown_header type check."""
        with pytest.raises(DecodeError, match="markdown_header"):
            decode_config({"markdown_header": 1})


class TestImmutability:
    """Test canonical models are frozen."""

    def test_entry_frozen(self):
        """Test Entry fields cannot be reassigned."""
        entry = decode_config({"entries": [raw_entry()]}).entries[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.title = "changed"

    def test_config_entries_tuple(self):
        """Test Config holds an immutable sequence."""
        config = decode_config({"entries": [raw_entry()]})
        assert isinstance(config.entries, tuple)
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.markdown_header = "x"

    def test_from_raw_roundtrip_equal(self):
        """Test decoding twice yields equal models."""
        data = {"entries": [raw_entry(id=2, content="c\n")]}
        assert decode_config(data) == decode_config(data)

    def test_has_ids(self):
        """Test has_ids reflects whether any entry has an id."""
        assert not Config.from_raw(RawConfig.from_dict({"entries": [raw_entry()]})).has_ids
        assert decode_config({"entries": [raw_entry(), raw_entry(id=4)]}).has_ids

    def test_entry_from_raw(self):
        """Test Entry.from_raw copies concrete fields."""
        raw = RawEntry(title="t", date=date(2024, 1, 1), at="a", senpan="s", id=7, meta="m")
        assert Entry.from_raw(raw) == Entry(
            id=7, title="t", date=date(2024, 1, 1), content="", meta="m", at="a", senpan="s"
        )
