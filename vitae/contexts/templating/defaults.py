"""
Default values for vitae rendering.

Provides shared defaults used by:
- latex_generator.py (fallback labels, social networks, preamble style)
- plaintext_generator.py (fallback labels)

Every missing field in a record resolves to one of these values instead of
raising.
"""

from typing import Any, Dict

# Name used when basics.name is absent, and its split parts
DEFAULT_FULL_NAME = "Adam DJ Brett"
DEFAULT_GIVEN_NAMES = "Adam DJ"
DEFAULT_FAMILY_NAME = "Brett"

# Per-field fallback labels
DEFAULT_POSITION = "Role"
DEFAULT_WORK_LOCATION = "Remote"
DEFAULT_ADDRESS = "Virtual"
DEFAULT_PUBLICATION_TITLE = "Untitled"

# Date fallbacks (see vitae.utils.timestamp.normalize_date)
START_DATE_FALLBACK = ""
END_DATE_FALLBACK = "Present"
RELEASE_DATE_FALLBACK = "n.d."
UNDATED_ROLE_LABEL = "Current"

# Profiles on any other network are dropped from the header
SOCIAL_NETWORKS = {
    "LinkedIn": "linkedin",
    "GitHub": "github",
    "ORCID": "orcid",
}

# Fixed typeset headings (always emitted, even with no entries)
MANDATORY_SECTIONS = ("Experience", "Education", "Skills")

# moderncv preamble style, overridable with a YAML preset (CV_STYLE_PATH)
DEFAULT_STYLE = {
    "generator_comment": "Generated from cv.json via scripts/generate_cv.py",
    "document_class": {
        "font_size": "11pt",
        "paper": "a4paper",
        "font_family": "sans",
    },
    "color": "blue",
    "style": "classic",
    "geometry_scale": 0.75,
    "language": "english",
}


def get_default_style() -> Dict[str, Any]:
    """
    Get a fresh copy of the default preamble style.

    Returns:
        Nested dict with document class options, color, style, geometry and babel language
    """
    return {
        **DEFAULT_STYLE,
        "document_class": DEFAULT_STYLE["document_class"].copy(),
    }
