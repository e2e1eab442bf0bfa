"""
Integration tests for the full render pipeline: resume document -> Markdown.
"""

import re
from pathlib import Path

import pytest

from jsonresume_md import render
from jsonresume_md.contexts.intake.loader import load_resume_file
from jsonresume_md.contexts.rendering.config import LOCALE_ENV_VAR, RenderConfig
from jsonresume_md.contexts.rendering.renderer import SECTION_RENDERERS
from jsonresume_md.utils.localization import Locale

FIXTURES_PATH = Path(__file__).parent.parent / "fixtures"


def assert_in_order(lines, expected_lines):
    last_index = -1
    for expected in expected_lines:
        assert expected in lines, f"Expected line not found: {expected}"
        index = lines.index(expected)
        assert index > last_index, f"Expected line out of order: {expected}"
        last_index = index


@pytest.mark.integration
def test_full_document_exact_output():
    resume = {
        "basics": {
            "name": "Alex Doe",
            "label": "Engineer",
            "summary": "Builds things.",
            "email": "alex@example.com",
            "location": {"city": "Sampletown", "countryCode": "DE"},
        },
        "work": [
            {
                "name": "ACME",
                "position": "Engineer",
                "url": "https://acme.example",
                "startDate": "2020-01",
                "highlights": ["Shipped", ""],
            }
        ],
        "skills": [{"name": "Backend", "keywords": ["PHP"]}],
    }
    expected = "\n".join(
        [
            "# Alex Doe — Engineer",
            "",
            "Builds things.",
            "",
            "- 📍 Sampletown, Germany",
            "- ✉️ [alex@example.com](mailto:alex@example.com)",
            "",
            "## Work Experience",
            "",
            "### Engineer",
            "**[ACME](https://acme.example)**",
            "",
            "*2020-01 → present*",
            "",
            "- Shipped",
            "",
            "## Skills",
            "",
            "### Backend",
            "PHP",
        ]
    ) + "\n"
    assert render(resume) == expected


@pytest.mark.integration
def test_contact_info_with_icons_links_and_country_name():
    resume = {
        "basics": {
            "name": "Alex Doe",
            "email": "alex@example.com",
            "url": "https://example.dev",
            "location": {"city": "Sampletown", "countryCode": "DE"},
            "profiles": [{"network": "LinkedIn", "url": "https://www.linkedin.com/in/alex-doe"}],
        }
    }
    lines = render(resume).split("\n")
    assert_in_order(
        lines,
        [
            "- 📍 Sampletown, Germany",
            "- ✉️ [alex@example.com](mailto:alex@example.com)",
            "- 🔗 [example.dev](https://example.dev)",
            "- 👤 [www.linkedin.com/in/alex-doe](https://www.linkedin.com/in/alex-doe) (LinkedIn)",
        ],
    )


@pytest.mark.integration
def test_german_labels_from_environment(monkeypatch):
    monkeypatch.setenv(LOCALE_ENV_VAR, "DE")
    resume = {
        "basics": {"name": "Alex Doe", "location": {"city": "Sampletown", "countryCode": "DE"}},
        "work": [{"name": "ACME", "position": "Engineer", "startDate": "2020-01"}],
    }
    lines = render(resume).split("\n")
    assert "- 📍 Sampletown, Deutschland" in lines
    assert "*2020-01 → heute*" in lines


@pytest.mark.integration
def test_environment_is_read_on_every_call(monkeypatch):
    resume = {"work": [{"position": "Engineer", "startDate": "2020-01"}]}
    assert "*2020-01 → present*" in render(resume)
    monkeypatch.setenv(LOCALE_ENV_VAR, "de")
    assert "*2020-01 → heute*" in render(resume)


@pytest.mark.integration
def test_explicit_config_overrides_environment(monkeypatch):
    monkeypatch.setenv(LOCALE_ENV_VAR, "de")
    resume = {"work": [{"position": "Engineer", "startDate": "2020-01"}]}
    assert "*2020-01 → present*" in render(resume, RenderConfig(locale=Locale.EN))


@pytest.mark.integration
def test_linked_entity_names():
    resume = {
        "basics": {"name": "Alex Doe"},
        "work": [
            {
                "name": "Graph-IT GmbH",
                "position": "Senior Software Developer",
                "url": "https://graph-it.com/",
                "startDate": "2021-01",
                "endDate": "2023-06",
                "location": "Berlin, Germany",
            }
        ],
        "projects": [{"name": "Resume Revamp", "url": "https://example.com/project"}],
        "volunteer": [{"organization": "Code Club", "position": "Mentor", "url": "https://codeclub.example"}],
        "certificates": [{"name": "AWS Certified Developer", "issuer": "Amazon", "url": "https://aws.example"}],
    }
    lines = render(resume).split("\n")
    assert "### Senior Software Developer" in lines
    assert "**[Graph-IT GmbH](https://graph-it.com/)**" in lines
    assert "*2021-01 → 2023-06*" in lines
    assert "Berlin, Germany" in lines
    assert "### [Resume Revamp](https://example.com/project)" in lines
    assert "### Mentor @ [Code Club](https://codeclub.example)" in lines
    assert "- [AWS Certified Developer](https://aws.example) — Amazon" in lines


@pytest.mark.integration
def test_skill_without_keywords_followed_by_blank_line():
    resume = {
        "basics": {"name": "Alex Doe"},
        "skills": [
            {"name": "Backend", "level": "Senior", "keywords": ["PHP", "Symfony", "PostgreSQL"]},
            {"name": "Cloud"},
            {"name": "Data"},
        ],
    }
    lines = render(resume).split("\n")
    assert "### Backend — Senior" in lines
    assert "PHP, Symfony, PostgreSQL" in lines
    cloud_index = lines.index("### Cloud")
    assert lines[cloud_index + 1] == ""


@pytest.mark.integration
def test_education_entry():
    resume = {
        "education": [
            {
                "institution": "State University",
                "area": "Computer Science",
                "studyType": "BSc",
                "startDate": "2016",
                "endDate": "2020",
                "courses": ["Algorithms", "Distributed Systems"],
            }
        ]
    }
    lines = render(resume).split("\n")
    assert_in_order(
        lines,
        [
            "### State University",
            "**Computer Science**",
            "*2016 - 2020*",
            "BSc",
            "Algorithms, Distributed Systems",
        ],
    )


class TestTotality:
    """render() returns a string for any input."""

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "document",
        [
            None,
            {},
            [],
            "resume",
            42,
            {"basics": "Alex"},
            {"basics": {"name": 5, "location": [], "profiles": [None, {"url": 3}]}},
            {"work": "ACME"},
            {"work": [None, 1, "x", [], {"highlights": "not a list"}]},
            {"education": [{"courses": [None, 1, {"a": 1}], "gpa": 3.9}]},
            {"skills": [{"keywords": [None]}], "interests": [{"name": None}]},
            {"certificates": [{}], "publications": [{}], "references": [{}]},
        ],
    )
    def test_never_raises(self, document):
        output = render(document)
        assert isinstance(output, str)
        assert output.endswith("\n")
        assert not output.endswith("\n\n")

    @pytest.mark.integration
    @pytest.mark.parametrize("document", [None, {}])
    def test_empty_document_is_resume_title(self, document):
        assert render(document) == "# Resume\n"


@pytest.mark.integration
def test_header_composition():
    assert render({"basics": {"name": "Alex Doe", "label": "Engineer"}}).split("\n")[0] == "# Alex Doe — Engineer"
    assert render({"basics": {"name": "Alex Doe"}}).split("\n")[0] == "# Alex Doe"


@pytest.mark.integration
def test_blank_fields_are_equivalent_to_missing_fields():
    without_blanks = {
        "basics": {"name": "Alex Doe"},
        "work": [{"position": "Engineer", "startDate": "2020-01"}],
        "education": [{"institution": "State University"}],
        "skills": [{"name": "Backend"}],
        "interests": [{"name": "Chess"}],
    }
    with_blanks = {
        "basics": {"name": "Alex Doe", "label": "  ", "summary": "", "email": "\t", "profiles": [{"network": " "}]},
        "work": [
            {
                "position": "Engineer",
                "name": "",
                "url": " ",
                "startDate": "2020-01",
                "endDate": "  ",
                "location": "",
                "summary": " \n ",
                "highlights": ["", "   "],
            }
        ],
        "education": [{"institution": "State University", "area": "", "courses": [" "], "gpa": ""}],
        "skills": [{"name": "Backend", "level": " ", "keywords": ["", " "]}],
        "interests": [{"name": "Chess", "keywords": [""]}],
    }
    assert render(with_blanks) == render(without_blanks)


@pytest.mark.integration
def test_empty_sections_are_omitted():
    output = render({"basics": {"name": "Alex"}, "skills": [], "work": [None]})
    assert "Skills" not in output
    assert "Work Experience" not in output


@pytest.mark.integration
def test_unknown_country_code_is_echoed():
    output = render({"basics": {"location": {"countryCode": "xy"}}})
    assert "- 📍 XY" in output.split("\n")


class TestBulletListBlankLines:
    @pytest.mark.integration
    def test_all_blank_highlights_equal_absent(self):
        base = {"work": [{"position": "Engineer"}]}
        blank = {"work": [{"position": "Engineer", "highlights": ["", " "]}]}
        assert render(blank) == render(base)

    @pytest.mark.integration
    def test_one_blank_line_after_highlights(self):
        resume = {
            "work": [{"position": "Engineer", "highlights": ["Shipped"]}],
            "projects": [{"name": "Tool"}],
        }
        lines = render(resume).split("\n")
        index = lines.index("- Shipped")
        assert lines[index + 1] == ""
        assert lines[index + 2] == "## Projects"


@pytest.mark.integration
def test_output_normalization():
    resume = {
        "basics": {"name": "Alex Doe   ", "summary": "First line   \r\nSecond\tline\t"},
        "references": [{"name": "Jane", "reference": "Great.  \n\n\n"}],
    }
    output = render(resume)
    assert all(line == line.rstrip() for line in output.split("\n"))
    assert "First line\nSecond line" in output
    assert output.endswith("Great.\n")


@pytest.mark.integration
@pytest.mark.parametrize(
    "resume",
    [
        load_resume_file(FIXTURES_PATH / "resume.json"),
        {
            "basics": {"name": "A\n#### B"},
            "work": [{"position": "Engineer\r\n#### Lead"}],
            "projects": [{"name": "Tool\n\n##### Other"}],
            "skills": [{"name": "Backend", "level": "\n#### Senior"}],
        },
    ],
    ids=["fixture", "multiline-titles"],
)
def test_heading_levels_are_limited_to_three(resume):
    for line in render(resume).split("\n"):
        match = re.match(r"^(#+) ", line)
        if match:
            assert len(match.group(1)) <= 3


@pytest.mark.integration
def test_multiline_name_stays_in_title():
    assert render({"basics": {"name": "A\n#### B"}}) == "# A #### B\n"


@pytest.mark.integration
def test_section_order():
    resume = {
        "references": [{"name": "R"}],
        "publications": [{"name": "P"}],
        "certificates": [{"name": "C"}],
        "awards": [{"title": "A"}],
        "interests": [{"name": "I"}],
        "languages": [{"language": "L"}],
        "skills": [{"name": "S"}],
        "education": [{"institution": "E"}],
        "volunteer": [{"position": "V"}],
        "projects": [{"name": "Pr"}],
        "work": [{"position": "W"}],
    }
    headings = [line for line in render(resume).split("\n") if line.startswith("## ")]
    assert headings == [
        "## Work Experience",
        "## Projects",
        "## Volunteer",
        "## Education",
        "## Skills",
        "## Languages",
        "## Interests",
        "## Awards",
        "## Certificates",
        "## Publications",
        "## References",
    ]
    assert [name for name, _ in SECTION_RENDERERS][0] == "basics"


@pytest.mark.integration
def test_fixture_resume_renders():
    output = render(load_resume_file(FIXTURES_PATH / "resume.json"))
    lines = output.split("\n")
    assert lines[0] == "# Alex Doe — Senior Software Developer"
    assert "- 📍 10115, Berlin, Germany" in lines
    assert "- 👤 [github.com/alexdoe](https://github.com/alexdoe) (GitHub)" in lines
    assert "- 👤 @alex@hachyderm.io (Mastodon)" in lines
    assert "*2021-01 → present*" in lines
    assert "2022-03 → 2022-05" in lines
    assert "- **GPA**: 3.8" in lines
    assert "- German — Native" in lines
