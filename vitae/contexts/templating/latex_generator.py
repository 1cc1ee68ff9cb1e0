"""
LaTeX Generator

Converts a ResumeRecord to a moderncv LaTeX document.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

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
    or_default,
)
from vitae.contexts.templating.defaults import (
    DEFAULT_ADDRESS,
    DEFAULT_FAMILY_NAME,
    DEFAULT_FULL_NAME,
    DEFAULT_GIVEN_NAMES,
    DEFAULT_POSITION,
    DEFAULT_PUBLICATION_TITLE,
    DEFAULT_WORK_LOCATION,
    END_DATE_FALLBACK,
    MANDATORY_SECTIONS,
    RELEASE_DATE_FALLBACK,
    SOCIAL_NETWORKS,
    START_DATE_FALLBACK,
    UNDATED_ROLE_LABEL,
    get_default_style,
)
from vitae.contexts.templating.logger import _log_debug
from vitae.contexts.templating.registries import TemplateRegistry
from vitae.utils.latex_tools import format_latex_command, format_latex_environment, to_latex
from vitae.utils.text_processing import join_blocks
from vitae.utils.timestamp import normalize_date

# Document body markers
BEGIN_DOCUMENT = r"\begin{document}"
MICROTYPE_SETUP = r"\microtypesetup{expansion=false}"
MAKE_CV_TITLE = r"\makecvtitle"
END_DOCUMENT = r"\end{document}"


def is_present(value: Optional[str]) -> bool:
    """True unless value is None or the empty string."""
    return value is not None and value != ""


def split_name(name: Optional[str]) -> Tuple[str, str]:
    """
    Split a full name into (given names, family name).

    The last whitespace-separated token is the family name; everything before
    it forms the given names.

    Args:
        name: Full name, or None

    Returns:
        (given_names, family_name) with defaults for missing parts

    Example:
        >>> split_name("Jane Q Public")
        ('Jane Q', 'Public')
        >>> split_name(None)
        ('Adam DJ', 'Brett')
    """
    parts = or_default(name, DEFAULT_FULL_NAME).split()
    family_name = parts.pop() if parts else ""
    given_names = " ".join(parts)
    return (given_names or DEFAULT_GIVEN_NAMES, family_name or DEFAULT_FAMILY_NAME)


def format_date_range(start_date: Optional[str], end_date: Optional[str]) -> str:
    """Format "<start year>--<end year>" (missing start is blank, missing end is Present)."""
    start = normalize_date(start_date, START_DATE_FALLBACK)
    end = normalize_date(end_date, END_DATE_FALLBACK)
    return f"{start}--{end}"


def format_degree(study_type: Optional[str], area: Optional[str]) -> str:
    """Format "<studyType> in <area>", trimmed (e.g., "in Physics" when studyType is missing)."""
    return f"{study_type or ''} in {area or ''}".strip()


class RecordToLaTeXConverter:
    """Converts a ResumeRecord to a moderncv LaTeX document."""

    def __init__(
        self,
        template_registry: TemplateRegistry = None,
        style: Dict[str, Any] = None,
    ):
        self.template_registry = template_registry or TemplateRegistry()
        self.style = style or get_default_style()

    def render_list_section(
        self, title: str, items: Sequence[Any], formatter: Callable[[Any], str]
    ) -> str:
        """
        Render a titled section, or nothing when there are no items.

        Args:
            title: Section heading (inserted verbatim)
            items: Records to render
            formatter: Renders one record to a LaTeX line

        Returns:
            \\section{title} followed by one line per item, or "" if items is empty
        """
        if not items:
            return ""

        return self.template_registry.render_file(
            "wrappers/section_wrapper.tex.jinja",
            name=title,
            content="\n".join(formatter(item) for item in items),
        )

    # Section renderers

    def render_work_entry(self, role: WorkEntry) -> str:
        if is_present(role.start_date) or is_present(role.end_date):
            when = format_date_range(role.start_date, role.end_date)
        else:
            when = UNDATED_ROLE_LABEL

        return self.template_registry.render(
            "work_entry",
            when=when,
            position=to_latex(or_default(role.position, DEFAULT_POSITION)),
            employer=to_latex(role.name),
            location=to_latex(or_default(role.location, DEFAULT_WORK_LOCATION)),
            summary=to_latex(role.summary),
        )

    def render_work(self, work: Sequence[WorkEntry] = ()) -> str:
        """
        Render experience entries, one \\cventry per role in input order.

        Args:
            work: Roles (ordering is the caller's responsibility)

        Returns:
            Newline-joined \\cventry commands ("" when there are no roles)
        """
        return "\n".join(self.render_work_entry(role) for role in work)

    def render_education_entry(self, school: EducationEntry) -> str:
        return self.template_registry.render(
            "education_entry",
            years=format_date_range(school.start_date, school.end_date),
            degree=to_latex(format_degree(school.study_type, school.area)),
            institution=to_latex(school.institution),
            summary=to_latex(school.summary),
        )

    def render_education(self, education: Sequence[EducationEntry] = ()) -> str:
        return "\n".join(self.render_education_entry(school) for school in education)

    def render_skill(self, skill: Skill) -> str:
        return self._cv_item(skill.name, ", ".join(skill.keywords))

    def render_skills(self, skills: Sequence[Skill] = ()) -> str:
        return "\n".join(self.render_skill(skill) for skill in skills)

    def render_volunteer_entry(self, entry: VolunteerEntry) -> str:
        text = entry.organization or ""
        if is_present(entry.summary):
            text += f": {entry.summary}"
        return self._cv_item(or_default(entry.position, DEFAULT_POSITION), text)

    def render_volunteer(self, volunteer: Sequence[VolunteerEntry] = ()) -> str:
        return self.render_list_section("Volunteer", volunteer, self.render_volunteer_entry)

    def render_language_entry(self, entry: LanguageEntry) -> str:
        return self.template_registry.render(
            "language_entry",
            language=to_latex(entry.language),
            fluency=to_latex(entry.fluency),
        )

    def render_languages(self, languages: Sequence[LanguageEntry] = ()) -> str:
        return self.render_list_section("Languages", languages, self.render_language_entry)

    def render_interest(self, interest: Interest) -> str:
        return self._cv_item(interest.name, ", ".join(interest.keywords))

    def render_interests(self, interests: Sequence[Interest] = ()) -> str:
        return self.render_list_section("Interests", interests, self.render_interest)

    def render_publication(self, publication: Publication) -> str:
        year = None
        if is_present(publication.release_date):
            year = normalize_date(publication.release_date, RELEASE_DATE_FALLBACK)

        return self.template_registry.render(
            "publication_item",
            title=to_latex(or_default(publication.name, DEFAULT_PUBLICATION_TITLE)),
            publisher=to_latex(publication.publisher),
            year=year,
            summary=to_latex(publication.summary),
            url=to_latex(publication.url) if is_present(publication.url) else None,
        )

    def render_publications(self, publications: Sequence[Publication] = ()) -> str:
        """
        Render publications as an itemize list under a Publications heading.

        Each item reads "<title> (<publisher>, <year>). <summary>", followed by
        a \\newline\\href line when the publication has a URL.

        Returns:
            Complete section, or "" when there are no publications
        """
        if not publications:
            return ""

        items = "\n".join(self.render_publication(publication) for publication in publications)
        return self.template_registry.render_file(
            "wrappers/section_wrapper.tex.jinja",
            name="Publications",
            content=format_latex_environment("itemize", items),
        )

    def render_summary(self, basics: Basics) -> str:
        if not is_present(basics.summary):
            return ""

        return self.template_registry.render_file(
            "wrappers/section_wrapper.tex.jinja",
            name="Professional Summary",
            content=self._cv_item("", basics.summary),
        )

    # Header

    def render_address(self, location: Optional[Location]) -> str:
        """Render \\address{street}{city, region postcode}{country} ("" without a location)."""
        if location is None:
            return ""

        city_line = f"{location.city or ''}, {location.region or ''} {location.postal_code or ''}"
        return format_latex_command(
            "address",
            [
                to_latex(or_default(location.address, DEFAULT_ADDRESS)),
                to_latex(city_line.strip()),
                to_latex(location.country_code),
            ],
        )

    def render_socials(self, profiles: Sequence[Profile] = ()) -> str:
        """
        Render \\social commands for profiles on known networks.

        Profiles on networks outside SOCIAL_NETWORKS are dropped. The handle is
        the username, else the url.
        """
        commands = []
        for profile in profiles:
            network = SOCIAL_NETWORKS.get(profile.network)
            if network is None:
                continue
            handle = profile.username if is_present(profile.username) else profile.url
            commands.append(
                format_latex_command("social", [to_latex(handle)], optional_args=[network])
            )
        return "\n".join(commands)

    def generate_header(self, basics: Basics) -> List[str]:
        """
        Generate the moderncv personal-data commands.

        Args:
            basics: Identity and contact block

        Returns:
            One block per command (address and socials are "" when absent)
        """
        given_names, family_name = split_name(basics.name)
        blocks = [format_latex_command("name", [to_latex(given_names), to_latex(family_name)])]

        if is_present(basics.label):
            blocks.append(format_latex_command("title", [to_latex(basics.label)]))

        blocks.append(self.render_address(basics.location))

        if is_present(basics.phone):
            blocks.append(
                format_latex_command("phone", [to_latex(basics.phone)], optional_args=["mobile"])
            )
        if is_present(basics.email):
            blocks.append(format_latex_command("email", [to_latex(basics.email)]))
        if is_present(basics.url):
            blocks.append(format_latex_command("homepage", [to_latex(basics.url)]))

        blocks.append(self.render_socials(basics.profiles))
        return blocks

    def generate_preamble(self) -> str:
        """
        Generate the document class and package preamble from the style preset.

        Returns:
            Preamble directives separated by blank lines
        """
        return self.template_registry.render_file("structure/preamble.tex.jinja", style=self.style)

    def generate_document(self, record: ResumeRecord) -> str:
        """
        Generate complete LaTeX document from a résumé record.

        Experience, Education and Skills headings are always emitted, even
        with no entries. Volunteer, Languages, Interests and Publications
        disappear entirely when empty.

        Args:
            record: Résumé record

        Returns:
            Complete LaTeX document string (blocks separated by one blank line)
        """
        experience, education, skills = MANDATORY_SECTIONS
        _log_debug(
            f"Rendering LaTeX: {len(record.work)} roles, {len(record.education)} schools, "
            f"{len(record.skills)} skills, {len(record.publications)} publications"
        )

        blocks = [
            self.generate_preamble(),
            *self.generate_header(record.basics),
            BEGIN_DOCUMENT,
            MICROTYPE_SETUP,
            MAKE_CV_TITLE,
            self.render_summary(record.basics),
            format_latex_command("section", [experience]),
            self.render_work(record.work),
            format_latex_command("section", [education]),
            self.render_education(record.education),
            format_latex_command("section", [skills]),
            self.render_skills(record.skills),
            self.render_volunteer(record.volunteer),
            self.render_languages(record.languages),
            self.render_interests(record.interests),
            self.render_publications(record.publications),
            END_DOCUMENT,
        ]

        return join_blocks(blocks)

    def _cv_item(self, label: Optional[str], text: Optional[str]) -> str:
        return self.template_registry.render("cv_item", label=to_latex(label), text=to_latex(text))


def generate_latex(record: ResumeRecord, style: Dict[str, Any] = None) -> str:
    """
    Render a record to a moderncv LaTeX document.

    Args:
        record: Résumé record
        style: Preamble style (defaults to the built-in moderncv style)

    Returns:
        LaTeX source
    """
    return RecordToLaTeXConverter(style=style).generate_document(record)
