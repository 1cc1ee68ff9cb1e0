"""
Plaintext Generator

Converts a ResumeRecord to a plain-text résumé.

Unlike the LaTeX document, every section here (including Experience,
Education and Skills) is omitted entirely when it has no entries.
"""

from typing import Optional

from vitae.contexts.intake.record import Location, ResumeRecord, or_default
from vitae.contexts.templating.defaults import (
    DEFAULT_FULL_NAME,
    DEFAULT_POSITION,
    DEFAULT_PUBLICATION_TITLE,
)
from vitae.contexts.templating.latex_generator import format_degree, is_present
from vitae.utils.text_processing import finalize_text, join_nonempty

CONTACT_SEPARATOR = " | "
TITLE_SEPARATOR = " — "


def format_contact_line(record: ResumeRecord) -> str:
    """
    Join the non-empty contact values with " | ".

    Order: address, "city, region", phone, email, url.

    Returns:
        Contact line, or "" when no contact value is present
    """
    basics = record.basics
    location = basics.location or Location()

    return join_nonempty(
        [
            location.address,
            join_nonempty([location.city, location.region], ", "),
            basics.phone,
            basics.email,
            basics.url,
        ],
        CONTACT_SEPARATOR,
    )


def _title_line(title: str, subtitle: Optional[str]) -> str:
    return f"{title}{TITLE_SEPARATOR}{subtitle or ''}"


def generate_plaintext(record: ResumeRecord) -> str:
    """
    Render a record as a plain-text résumé.

    Layout:
        Name
        Label (if present)
        Contact line (if any contact value is present)
        <blank>
        SUMMARY / EXPERIENCE / EDUCATION / SKILLS / PUBLICATIONS blocks,
        each only when it has content

    Args:
        record: Résumé record

    Returns:
        Plain text, stripped and terminated by exactly one newline
    """
    basics = record.basics
    lines = [or_default(basics.name, DEFAULT_FULL_NAME)]

    if is_present(basics.label):
        lines.append(basics.label)

    contact_line = format_contact_line(record)
    if contact_line:
        lines.append(contact_line)
    lines.append("")

    if is_present(basics.summary):
        lines.append("SUMMARY")
        lines.append(basics.summary)
        lines.append("")

    if record.work:
        lines.append("EXPERIENCE")
        for role in record.work:
            lines.append(_title_line(or_default(role.position, DEFAULT_POSITION), role.name))
            lines.append(role.summary or "")
            lines.append("")

    if record.education:
        lines.append("EDUCATION")
        for school in record.education:
            lines.append(
                _title_line(format_degree(school.study_type, school.area), school.institution)
            )
            if is_present(school.summary):
                lines.append(school.summary)
            lines.append("")

    if record.skills:
        lines.append("SKILLS")
        for skill in record.skills:
            lines.append(f"{skill.name or ''}: {', '.join(skill.keywords)}")
        lines.append("")

    if record.publications:
        lines.append("PUBLICATIONS")
        for publication in record.publications:
            title = or_default(publication.name, DEFAULT_PUBLICATION_TITLE)
            lines.append(f"{title} ({publication.publisher or ''})")
            if is_present(publication.summary):
                lines.append(publication.summary)
            if is_present(publication.url):
                lines.append(publication.url)
            lines.append("")

    return finalize_text("\n".join(lines))
