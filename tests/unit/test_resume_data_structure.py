"""Unit tests for parsing raw resume data into ResumeDocument."""

import pytest

from jsonresume_md.contexts.intake.resume_data_structure import (
    EducationEntry,
    ResumeDocument,
    text_list,
)


@pytest.mark.unit
@pytest.mark.parametrize("raw", [None, {}, [], "resume", 42])
def test_non_mapping_input_is_empty_document(raw):
    resume = ResumeDocument.from_dict(raw)
    assert resume == ResumeDocument()


@pytest.mark.unit
def test_text_fields_are_trimmed_or_none():
    resume = ResumeDocument.from_dict(
        {"basics": {"name": "  Alex Doe ", "label": "   ", "email": 42, "phone": None}}
    )
    assert resume.basics.name == "Alex Doe"
    assert resume.basics.label is None
    assert resume.basics.email is None
    assert resume.basics.phone is None


@pytest.mark.unit
def test_wrong_typed_containers_are_absent():
    resume = ResumeDocument.from_dict(
        {"basics": {"location": "Berlin", "profiles": {"network": "GitHub"}}, "work": "ACME"}
    )
    assert resume.basics.location.city is None
    assert resume.basics.profiles == []
    assert resume.work == []


@pytest.mark.unit
def test_non_mapping_entries_are_skipped():
    resume = ResumeDocument.from_dict({"work": [None, "ACME", 3, [], {"name": "ACME"}]})
    assert len(resume.work) == 1
    assert resume.work[0].name == "ACME"


@pytest.mark.unit
def test_section_with_only_invalid_entries_is_empty():
    assert ResumeDocument.from_dict({"skills": [None, "Python"]}).skills == []


@pytest.mark.unit
def test_text_list_coerces_and_drops_blanks():
    assert text_list(["  Shipped ", "", None, 42, "   "]) == ["Shipped", "42"]
    assert text_list("Shipped") == []


@pytest.mark.unit
@pytest.mark.parametrize(
    "element, expected",
    [
        (True, "true"),
        (False, "false"),
        (1.0, "1"),
        (2.5, "2.5"),
        (7, "7"),
    ],
)
def test_text_list_scalars_print_like_json(element, expected):
    assert text_list([element]) == [expected]


@pytest.mark.unit
def test_camel_case_fields_are_mapped():
    resume = ResumeDocument.from_dict(
        {
            "basics": {"location": {"postalCode": "10115", "countryCode": "de"}},
            "work": [{"startDate": "2020-01", "endDate": "2021-01"}],
            "education": [{"studyType": "BSc"}],
            "publications": [{"releaseDate": "2019-06"}],
        }
    )
    assert resume.basics.location.postal_code == "10115"
    assert resume.basics.location.country_code == "de"
    assert resume.work[0].start_date == "2020-01"
    assert resume.work[0].end_date == "2021-01"
    assert resume.education[0].study_type == "BSc"
    assert resume.publications[0].release_date == "2019-06"


class TestEducationGpa:
    @pytest.mark.unit
    def test_gpa_field(self):
        assert EducationEntry.from_dict({"gpa": "3.9"}).gpa == "3.9"

    @pytest.mark.unit
    def test_score_fallback(self):
        assert EducationEntry.from_dict({"score": "3.8"}).gpa == "3.8"

    @pytest.mark.unit
    def test_gpa_wins_over_score(self):
        assert EducationEntry.from_dict({"gpa": "3.9", "score": "3.8"}).gpa == "3.9"

    @pytest.mark.unit
    def test_numeric_gpa_is_absent(self):
        assert EducationEntry.from_dict({"gpa": 3.9}).gpa is None
