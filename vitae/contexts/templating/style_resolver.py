"""
Style Preset Resolution for the moderncv preamble

Merges a YAML style preset over the built-in defaults. Keys left out of the
preset keep their default values.

Examples:
    # Bundled preset (CV_STYLE_PATH or template/style.yaml)
    >>> style = load_style()

    # Custom preset
    >>> style = load_style(Path("styles/banking.yaml"))
    >>> style["color"]
    'grey'
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from vitae.contexts.templating.defaults import get_default_style
from vitae.contexts.templating.exceptions import InvalidStyleError

load_dotenv()
CV_STYLE_PATH = Path(
    os.getenv("CV_STYLE_PATH", Path(__file__).parent / "template" / "style.yaml")
)


def load_style(config_path: Path = None) -> Dict[str, Any]:
    """
    Load a moderncv style preset merged over the defaults.

    Args:
        config_path: Optional path to a YAML preset (defaults to CV_STYLE_PATH)

    Returns:
        Plain dict with generator_comment, document_class, color, style,
        geometry_scale and language

    Raises:
        InvalidStyleError: If the preset can't be read, is not a mapping, or
                           conflicts with the default structure
    """
    if config_path is None:
        config_path = CV_STYLE_PATH

    try:
        preset = OmegaConf.load(config_path)
    except OSError as e:
        raise InvalidStyleError(f"Could not read style preset {config_path}: {e}") from e

    if not OmegaConf.is_dict(preset):
        raise InvalidStyleError(f"Style preset must be a mapping: {config_path}")

    try:
        merged = OmegaConf.merge(OmegaConf.create(get_default_style()), preset)
    except OmegaConfBaseException as e:
        raise InvalidStyleError(f"Style preset {config_path} is invalid: {e}") from e

    style = OmegaConf.to_container(merged, resolve=True)
    if not isinstance(style["document_class"], dict):
        raise InvalidStyleError(
            f"Style preset {config_path}: document_class must be a mapping of "
            "font_size, paper and font_family"
        )

    return style
