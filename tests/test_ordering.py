import pytest
from pydantic import ValidationError

from hospital_queue.core.config import DEFAULT_DISEASE_SEVERITY
from hospital_queue.core.severity import SeverityTable, UnknownDiseaseError, load_severity_table
from hospital_queue.models.patient import (
    PatientRecord, compare_patients, has_higher_priority, priority_key
)


def make_record(name, disease, time_to_reach, number=1):
    return PatientRecord(
        name=name, disease=disease, time_to_reach=time_to_reach, appointment_number=number
    )


class TestSeverityTable:

    def test_reference_table(self, severity):
        """The default table carries the ten reference diseases."""
        assert len(severity) == 10
        assert severity.lookup("bleeding") == 7
        assert severity.lookup("heart ache") == 8
        assert severity.lookup("cold") == 1

    def test_lookup_absent_is_none(self, severity):
        """An unlisted disease is distinguishable from any rank."""
        assert severity.lookup("flu") is None
        assert severity.is_valid("flu") is False

    def test_names_match_exactly(self, severity):
        """No case folding or trimming is applied."""
        assert severity.lookup("Bleeding") is None
        assert severity.lookup(" bleeding") is None

    def test_rank_fails_fast_on_unknown(self, severity):
        with pytest.raises(UnknownDiseaseError) as exc_info:
            severity.rank("flu")
        assert exc_info.value.disease == "flu"
        assert isinstance(exc_info.value, KeyError)

    def test_table_is_immutable(self, severity):
        with pytest.raises(TypeError):
            severity["flu"] = 2

    def test_custom_table_does_not_alias_source(self):
        ranks = {"flu": 2}
        table = SeverityTable(ranks)
        ranks["flu"] = 9
        assert table.rank("flu") == 2

    @pytest.mark.parametrize("bad_rank", [0, -1, "3", 2.5])
    def test_rejects_non_positive_or_non_integer_ranks(self, bad_rank):
        with pytest.raises(ValueError):
            SeverityTable({"flu": bad_rank})

    def test_load_from_explicit_ranks(self):
        table = load_severity_table({"flu": 3})
        assert table.as_dict() == {"flu": 3}

    def test_load_from_settings_defaults(self):
        assert load_severity_table().as_dict() == DEFAULT_DISEASE_SEVERITY


class TestPatientRecord:

    def test_record_is_immutable(self):
        record = make_record("Sam", "bleeding", 10)
        with pytest.raises(ValidationError):
            record.name = "Alex"

    def test_any_disease_string_is_accepted(self):
        """Disease membership is validated at input time, not construction."""
        record = make_record("Sam", "flu", 10)
        assert record.disease == "flu"

    @pytest.mark.parametrize("field", ["time_to_reach", "appointment_number"])
    def test_rejects_non_positive_numbers(self, field):
        values = {"name": "Sam", "disease": "cold", "time_to_reach": 5, "appointment_number": 1}
        values[field] = 0
        with pytest.raises(ValidationError):
            PatientRecord(**values)


class TestOrderingRule:

    def test_higher_rank_wins_regardless_of_time(self, severity):
        """A more severe disease goes first even from much further away."""
        severe = make_record("Sam", "bleeding", 500)
        mild = make_record("Alex", "headache", 1)
        assert has_higher_priority(severe, mild, severity)
        assert compare_patients(severe, mild, severity) == -1
        assert compare_patients(mild, severe, severity) == 1

    def test_equal_rank_lower_time_wins(self, severity):
        near = make_record("Lee", "diarrhea", 5)
        far = make_record("Pat", "vomiting", 20)
        assert has_higher_priority(near, far, severity)
        assert not has_higher_priority(far, near, severity)

    def test_equal_rank_and_time_are_equivalent(self, severity):
        a = make_record("A", "concussion", 7, number=1)
        b = make_record("B", "heart ache", 7, number=2)
        assert compare_patients(a, b, severity) == 0
        assert not has_higher_priority(a, b, severity)
        assert not has_higher_priority(b, a, severity)

    def test_priority_key(self, severity):
        assert priority_key(make_record("Sam", "bleeding", 10), severity) == (-7, 10)

    def test_unknown_disease_fails_fast(self, severity):
        known = make_record("Sam", "cold", 10)
        unknown = make_record("Alex", "flu", 10)
        with pytest.raises(UnknownDiseaseError):
            compare_patients(known, unknown, severity)
