"""Unit tests for ResumeRecord construction."""

import dataclasses

import pytest

from vitae.contexts.intake.record import (
    Basics,
    Location,
    Profile,
    ResumeRecord,
    WorkEntry,
    or_default,
)


@pytest.mark.unit
class TestFromDict:
    """Tests for ResumeRecord.from_dict."""

    def test_empty_document(self):
        """Empty document yields an empty record with default basics."""
        record = ResumeRecord.from_dict({})
        assert record.basics == Basics()
        assert record.work == ()
        assert record.publications == ()

    def test_non_dict_document(self):
        """Anything that isn't an object yields an empty record."""
        assert ResumeRecord.from_dict(None) == ResumeRecord()
        assert ResumeRecord.from_dict(["not", "a", "resume"]) == ResumeRecord()

    def test_null_sections(self):
        """Null sections are treated as absent."""
        record = ResumeRecord.from_dict({"basics": None, "work": None, "skills": "Python"})
        assert record.basics == Basics()
        assert record.work == ()
        assert record.skills == ()

    def test_full_document(self, full_record):
        """All sections and nested fields are mapped from JSON Resume keys."""
        basics = full_record.basics
        assert basics.name == "Ada Maria Lovelace"
        assert basics.location.postal_code == "SW1Y 4JH"
        assert basics.location.country_code == "GB"
        assert basics.profiles[1] == Profile(
            network="LinkedIn", username=None, url="https://linkedin.com/in/ada"
        )

        assert full_record.work[0].start_date == "2019-02-01"
        assert full_record.work[0].end_date is None
        assert full_record.work[1] == WorkEntry(name="Babbage & Co")
        assert full_record.education[0].study_type == "BSc"
        assert full_record.skills[0].keywords == ("Python", "Rust")
        assert full_record.skills[1].keywords == ()
        assert full_record.publications[0].release_date == "1843-09-01"

    def test_location_absent_is_none(self):
        record = ResumeRecord.from_dict({"basics": {"name": "Jane Doe"}})
        assert record.basics.location is None

    def test_location_partial(self):
        record = ResumeRecord.from_dict({"basics": {"location": {"city": "Berlin"}}})
        assert record.basics.location == Location(city="Berlin")

    def test_non_string_scalars_become_text(self):
        record = ResumeRecord.from_dict(
            {"basics": {"phone": 5551234}, "work": [{"startDate": 2019}]}
        )
        assert record.basics.phone == "5551234"
        assert record.work[0].start_date == "2019"

    def test_non_object_entries_skipped(self):
        record = ResumeRecord.from_dict({"work": ["junk", {"position": "Dev"}, None]})
        assert record.work == (WorkEntry(position="Dev"),)

    def test_unknown_keys_ignored(self):
        record = ResumeRecord.from_dict({"meta": {"theme": "x"}, "work": [{"highlights": ["a"]}]})
        assert record.work == (WorkEntry(),)

    def test_keywords_skip_nulls(self):
        record = ResumeRecord.from_dict({"skills": [{"name": "Go", "keywords": ["a", None, 3]}]})
        assert record.skills[0].keywords == ("a", "3")


@pytest.mark.unit
def test_record_is_immutable(full_record):
    """Rendering can't mutate the record."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        full_record.basics.name = "Someone Else"


@pytest.mark.unit
@pytest.mark.parametrize(
    "value, expected",
    [(None, "Role"), ("", "Role"), ("Engineer", "Engineer"), ("0", "0"), (" ", " ")],
)
def test_or_default(value, expected):
    """Only None and empty string trigger the default."""
    assert or_default(value, "Role") == expected
