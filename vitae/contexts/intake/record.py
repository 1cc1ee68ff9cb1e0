"""
Resume Record Data Structures

Immutable representation of a JSON Resume document (https://jsonresume.org/schema)
restricted to the fields vitae renders.

Construction via from_dict() is tolerant: missing keys, None values, wrong
container types and unknown keys never raise. Missing strings become None,
missing lists become empty tuples.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


def _text(data: Dict[str, Any], key: str) -> Optional[str]:
    """Read a scalar field as text (None when missing or null)."""
    value = data.get(key)
    if value is None or isinstance(value, (dict, list)):
        return None
    return value if isinstance(value, str) else str(value)


def _mapping(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _entries(data: Dict[str, Any], key: str) -> Tuple[Dict[str, Any], ...]:
    """Read a list of objects, skipping anything that isn't an object."""
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, dict))


def _keywords(data: Dict[str, Any]) -> Tuple[str, ...]:
    value = data.get("keywords")
    if not isinstance(value, list):
        return ()
    return tuple(str(item) for item in value if item is not None)


def or_default(value: Optional[str], default: str) -> str:
    """Return value unless it is absent (None or empty string)."""
    return default if value is None or value == "" else value


@dataclass(frozen=True)
class Location:
    """Postal location from basics.location."""

    address: Optional[str] = None
    city: Optional[str] = None
    region: Optional[str] = None
    postal_code: Optional[str] = None
    country_code: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Location":
        return cls(
            address=_text(data, "address"),
            city=_text(data, "city"),
            region=_text(data, "region"),
            postal_code=_text(data, "postalCode"),
            country_code=_text(data, "countryCode"),
        )


@dataclass(frozen=True)
class Profile:
    """Social profile (network name, username, url)."""

    network: Optional[str] = None
    username: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            network=_text(data, "network"),
            username=_text(data, "username"),
            url=_text(data, "url"),
        )


@dataclass(frozen=True)
class Basics:
    """
    Identity and contact block.

    Attributes:
        name: Full name ("Given Names Family")
        label: Professional title
        summary: Professional summary paragraph
        location: Postal location (None when the source has no location object)
        profiles: Social profiles in source order
    """

    name: Optional[str] = None
    label: Optional[str] = None
    summary: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    url: Optional[str] = None
    location: Optional[Location] = None
    profiles: Tuple[Profile, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Basics":
        location = data.get("location")
        return cls(
            name=_text(data, "name"),
            label=_text(data, "label"),
            summary=_text(data, "summary"),
            email=_text(data, "email"),
            phone=_text(data, "phone"),
            url=_text(data, "url"),
            location=Location.from_dict(location) if isinstance(location, dict) else None,
            profiles=tuple(Profile.from_dict(item) for item in _entries(data, "profiles")),
        )


@dataclass(frozen=True)
class WorkEntry:
    """Single role. `name` is the employer."""

    position: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WorkEntry":
        return cls(
            position=_text(data, "position"),
            name=_text(data, "name"),
            location=_text(data, "location"),
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            summary=_text(data, "summary"),
        )


@dataclass(frozen=True)
class EducationEntry:
    institution: Optional[str] = None
    study_type: Optional[str] = None
    area: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EducationEntry":
        return cls(
            institution=_text(data, "institution"),
            study_type=_text(data, "studyType"),
            area=_text(data, "area"),
            start_date=_text(data, "startDate"),
            end_date=_text(data, "endDate"),
            summary=_text(data, "summary"),
        )


@dataclass(frozen=True)
class Skill:
    name: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Skill":
        return cls(name=_text(data, "name"), keywords=_keywords(data))


@dataclass(frozen=True)
class VolunteerEntry:
    position: Optional[str] = None
    organization: Optional[str] = None
    summary: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VolunteerEntry":
        return cls(
            position=_text(data, "position"),
            organization=_text(data, "organization"),
            summary=_text(data, "summary"),
        )


@dataclass(frozen=True)
class LanguageEntry:
    language: Optional[str] = None
    fluency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LanguageEntry":
        return cls(language=_text(data, "language"), fluency=_text(data, "fluency"))


@dataclass(frozen=True)
class Interest:
    name: Optional[str] = None
    keywords: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Interest":
        return cls(name=_text(data, "name"), keywords=_keywords(data))


@dataclass(frozen=True)
class Publication:
    name: Optional[str] = None
    publisher: Optional[str] = None
    release_date: Optional[str] = None
    summary: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Publication":
        return cls(
            name=_text(data, "name"),
            publisher=_text(data, "publisher"),
            release_date=_text(data, "releaseDate"),
            summary=_text(data, "summary"),
            url=_text(data, "url"),
        )


@dataclass(frozen=True)
class ResumeRecord:
    """
    Complete résumé record consumed by both document generators.

    Section order within each tuple is the source order; the generators never
    reorder entries.
    """

    basics: Basics = field(default_factory=Basics)
    work: Tuple[WorkEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[Skill, ...] = ()
    volunteer: Tuple[VolunteerEntry, ...] = ()
    languages: Tuple[LanguageEntry, ...] = ()
    interests: Tuple[Interest, ...] = ()
    publications: Tuple[Publication, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResumeRecord":
        """
        Build a record from a deserialized JSON Resume document.

        Args:
            data: Parsed JSON object (anything that isn't a dict yields an empty record)

        Returns:
            ResumeRecord with defaults filled in for everything missing
        """
        data = _mapping(data)
        return cls(
            basics=Basics.from_dict(_mapping(data.get("basics"))),
            work=tuple(WorkEntry.from_dict(item) for item in _entries(data, "work")),
            education=tuple(
                EducationEntry.from_dict(item) for item in _entries(data, "education")
            ),
            skills=tuple(Skill.from_dict(item) for item in _entries(data, "skills")),
            volunteer=tuple(
                VolunteerEntry.from_dict(item) for item in _entries(data, "volunteer")
            ),
            languages=tuple(
                LanguageEntry.from_dict(item) for item in _entries(data, "languages")
            ),
            interests=tuple(Interest.from_dict(item) for item in _entries(data, "interests")),
            publications=tuple(
                Publication.from_dict(item) for item in _entries(data, "publications")
            ),
        )
