"""
Intake Context

Responsibilities:
- Reads the JSON Resume source
- Builds the immutable ResumeRecord with defaults for missing fields

Owns: Source deserialization, record data structures
Never: Formats output text
"""

from vitae.contexts.intake.exceptions import ResumeLoadError
from vitae.contexts.intake.loader import load_resume
from vitae.contexts.intake.record import (
    Basics,
    EducationEntry,
    Interest,
    LanguageEntry,
    Location,
    Profile,
    Publication,
    ResumeRecord,
    Skill,
    VolunteerEntry,
    WorkEntry,
)

__all__ = [
    "load_resume",
    "ResumeLoadError",
    # Record data structures
    "ResumeRecord",
    "Basics",
    "Location",
    "Profile",
    "WorkEntry",
    "EducationEntry",
    "Skill",
    "VolunteerEntry",
    "LanguageEntry",
    "Interest",
    "Publication",
]
