"""
Resume Document Structure

Typed, fully-optional representation of a JSON Resume document.

The raw input is untrusted: any field may be missing, null, of the wrong type
or blank. ResumeDocument.from_dict() maps it once into dataclasses whose text
fields are either a trimmed, non-blank string or None, and whose sequence
fields only hold non-blank strings. Renderers consume this model and never
re-check types.
"""

from dataclasses import dataclass, field
from typing import Any, List, Optional

from jsonresume_md.utils.field_access import as_list, as_mapping, get_path
from jsonresume_md.utils.text_processing import clean_text, is_present


def _scalar_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def text_list(value: Any) -> List[str]:
    """
    Coerce a sequence field (highlights, keywords, courses) to trimmed strings.

    Elements are converted to text the way JSON values print (True -> "true",
    2.0 -> "2"); None elements and blank results are dropped. A non-list value
    yields an empty list.
    """
    items = []
    for element in as_list(value):
        if element is None:
            continue
        text = _scalar_text(element)
        if is_present(text):
            items.append(text.strip())
    return items


def _entries(raw: Any, key: str) -> List[dict]:
    """Mapping entries of a top-level section list; anything else is skipped."""
    return [entry for entry in as_list(get_path(raw, key)) if as_mapping(entry) is not None]


@dataclass
class Location:
    address: Optional[str] = None
    postal_code: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    country_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Location":
        return cls(
            address=clean_text(get_path(data, "address")),
            postal_code=clean_text(get_path(data, "postalCode")),
            city=clean_text(get_path(data, "city")),
            region=clean_text(get_path(data, "region")),
            country_code=clean_text(get_path(data, "countryCode")),
        )


@dataclass
class Profile:
    """Social/professional profile (e.g. LinkedIn, GitHub)."""

    network: Optional[str] = None
    username: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Profile":
        return cls(
            network=clean_text(get_path(data, "network")),
            username=clean_text(get_path(data, "username")),
            url=clean_text(get_path(data, "url")),
        )


@dataclass
class Basics:
    """
    Header block of a resume.

    Attributes:
        name: Full name
        label: Job title / professional label
        summary: Free-text summary paragraph
        email: Email address
        phone: Phone number
        url: Personal website
        location: Postal location (always present, fields may all be None)
        profiles: Online profiles in input order
    """

    name: Optional[str] = None
    label: Optional[str] = None
    summary: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    location: Location = field(default_factory=Location)
    profiles: List[Profile] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "Basics":
        return cls(
            name=clean_text(get_path(data, "name")),
            label=clean_text(get_path(data, "label")),
            summary=clean_text(get_path(data, "summary")),
            email=clean_text(get_path(data, "email")),
            phone=clean_text(get_path(data, "phone")),
            url=clean_text(get_path(data, "url")),
            location=Location.from_dict(get_path(data, "location")),
            profiles=[
                Profile.from_dict(profile)
                for profile in as_list(get_path(data, "profiles"))
                if as_mapping(profile) is not None
            ],
        )


@dataclass
class WorkEntry:
    name: Optional[str] = None
    position: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    location: Optional[str] = None
    summary: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "WorkEntry":
        return cls(
            name=clean_text(data.get("name")),
            position=clean_text(data.get("position")),
            url=clean_text(data.get("url")),
            start_date=clean_text(data.get("startDate")),
            end_date=clean_text(data.get("endDate")),
            location=clean_text(data.get("location")),
            summary=clean_text(data.get("summary")),
            highlights=text_list(data.get("highlights")),
        )


@dataclass
class ProjectEntry:
    name: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "ProjectEntry":
        return cls(
            name=clean_text(data.get("name")),
            description=clean_text(data.get("description")),
            url=clean_text(data.get("url")),
            start_date=clean_text(data.get("startDate")),
            end_date=clean_text(data.get("endDate")),
            highlights=text_list(data.get("highlights")),
        )


@dataclass
class VolunteerEntry:
    organization: Optional[str] = None
    position: Optional[str] = None
    url: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    summary: Optional[str] = None
    highlights: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "VolunteerEntry":
        return cls(
            organization=clean_text(data.get("organization")),
            position=clean_text(data.get("position")),
            url=clean_text(data.get("url")),
            start_date=clean_text(data.get("startDate")),
            end_date=clean_text(data.get("endDate")),
            summary=clean_text(data.get("summary")),
            highlights=text_list(data.get("highlights")),
        )


@dataclass
class EducationEntry:
    """
    Education entry.

    gpa reads the "gpa" field, falling back to JSON Resume's "score".
    """

    institution: Optional[str] = None
    area: Optional[str] = None
    study_type: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    courses: List[str] = field(default_factory=list)
    gpa: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "EducationEntry":
        return cls(
            institution=clean_text(data.get("institution")),
            area=clean_text(data.get("area")),
            study_type=clean_text(data.get("studyType")),
            start_date=clean_text(data.get("startDate")),
            end_date=clean_text(data.get("endDate")),
            courses=text_list(data.get("courses")),
            gpa=clean_text(data.get("gpa")) or clean_text(data.get("score")),
        )


@dataclass
class SkillEntry:
    name: Optional[str] = None
    level: Optional[str] = None
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "SkillEntry":
        return cls(
            name=clean_text(data.get("name")),
            level=clean_text(data.get("level")),
            keywords=text_list(data.get("keywords")),
        )


@dataclass
class LanguageEntry:
    language: Optional[str] = None
    fluency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "LanguageEntry":
        return cls(
            language=clean_text(data.get("language")),
            fluency=clean_text(data.get("fluency")),
        )


@dataclass
class InterestEntry:
    name: Optional[str] = None
    keywords: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "InterestEntry":
        return cls(
            name=clean_text(data.get("name")),
            keywords=text_list(data.get("keywords")),
        )


@dataclass
class AwardEntry:
    title: Optional[str] = None
    awarder: Optional[str] = None
    date: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "AwardEntry":
        return cls(
            title=clean_text(data.get("title")),
            awarder=clean_text(data.get("awarder")),
            date=clean_text(data.get("date")),
            summary=clean_text(data.get("summary")),
        )


@dataclass
class CertificateEntry:
    name: Optional[str] = None
    issuer: Optional[str] = None
    date: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "CertificateEntry":
        return cls(
            name=clean_text(data.get("name")),
            issuer=clean_text(data.get("issuer")),
            date=clean_text(data.get("date")),
            url=clean_text(data.get("url")),
        )


@dataclass
class PublicationEntry:
    name: Optional[str] = None
    publisher: Optional[str] = None
    release_date: Optional[str] = None
    url: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "PublicationEntry":
        return cls(
            name=clean_text(data.get("name")),
            publisher=clean_text(data.get("publisher")),
            release_date=clean_text(data.get("releaseDate")),
            url=clean_text(data.get("url")),
            summary=clean_text(data.get("summary")),
        )


@dataclass
class ReferenceEntry:
    name: Optional[str] = None
    reference: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> "ReferenceEntry":
        return cls(
            name=clean_text(data.get("name")),
            reference=clean_text(data.get("reference")),
        )


@dataclass
class ResumeDocument:
    """
    Structured representation of a complete resume document.

    Every section list holds only well-formed entries in input order; an empty
    list means the section is not rendered at all.
    """

    basics: Basics = field(default_factory=Basics)
    work: List[WorkEntry] = field(default_factory=list)
    projects: List[ProjectEntry] = field(default_factory=list)
    volunteer: List[VolunteerEntry] = field(default_factory=list)
    education: List[EducationEntry] = field(default_factory=list)
    skills: List[SkillEntry] = field(default_factory=list)
    languages: List[LanguageEntry] = field(default_factory=list)
    interests: List[InterestEntry] = field(default_factory=list)
    awards: List[AwardEntry] = field(default_factory=list)
    certificates: List[CertificateEntry] = field(default_factory=list)
    publications: List[PublicationEntry] = field(default_factory=list)
    references: List[ReferenceEntry] = field(default_factory=list)

    @classmethod
    def from_dict(cls, raw: Any) -> "ResumeDocument":
        """
        Parse an untyped resume document.

        Args:
            raw: Decoded JSON Resume data; None or a non-mapping is treated as {}

        Returns:
            ResumeDocument instance (never raises for malformed input)
        """
        if as_mapping(raw) is None:
            raw = {}

        return cls(
            basics=Basics.from_dict(as_mapping(raw.get("basics"))),
            work=[WorkEntry.from_dict(e) for e in _entries(raw, "work")],
            projects=[ProjectEntry.from_dict(e) for e in _entries(raw, "projects")],
            volunteer=[VolunteerEntry.from_dict(e) for e in _entries(raw, "volunteer")],
            education=[EducationEntry.from_dict(e) for e in _entries(raw, "education")],
            skills=[SkillEntry.from_dict(e) for e in _entries(raw, "skills")],
            languages=[LanguageEntry.from_dict(e) for e in _entries(raw, "languages")],
            interests=[InterestEntry.from_dict(e) for e in _entries(raw, "interests")],
            awards=[AwardEntry.from_dict(e) for e in _entries(raw, "awards")],
            certificates=[CertificateEntry.from_dict(e) for e in _entries(raw, "certificates")],
            publications=[PublicationEntry.from_dict(e) for e in _entries(raw, "publications")],
            references=[ReferenceEntry.from_dict(e) for e in _entries(raw, "references")],
        )
