"""
Templating Registries

Centralized registry for loading and caching the Jinja2 templates used for
LaTeX generation.
"""

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateNotFound
from jinja2.exceptions import TemplateError

from vitae.contexts.templating.exceptions import TemplateRenderError

load_dotenv()
TEMPLATE_PATH = Path(
    os.getenv("CV_TEMPLATE_PATH", Path(__file__).parent / "template")
)


class TemplateRegistry:
    """
    Registry for loading and caching Jinja2 templates for LaTeX generation.

    Entry templates are stored in template/types/{type_name}/template.tex.jinja,
    document-level templates in template/structure/ and template/wrappers/.
    All use custom delimiters to avoid conflicts with LaTeX syntax:
    - Variable: <<< var >>>
    - Block: <%% block %%>
    - Comment: <# comment #>
    """

    def __init__(self, template_base_path: Path = None):
        """
        Initialize the template registry.

        Args:
            template_base_path: Base template directory. Defaults to
                                CV_TEMPLATE_PATH from environment, else the
                                bundled template/ directory
        """
        if template_base_path is None:
            template_base_path = TEMPLATE_PATH

        self.template_base_path = Path(template_base_path)
        self._cache: Dict[str, Template] = {}

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_base_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            # Custom delimiters to avoid LaTeX brace conflicts
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            trim_blocks=False,
            lstrip_blocks=False,
            # Template files end with a newline that isn't part of the output
            keep_trailing_newline=False,
        )

    def get_template(self, type_name: str) -> Template:
        """
        Get a template by type name, loading and caching it if necessary.

        Args:
            type_name: Name of the type (e.g., 'work_entry')

        Returns:
            Jinja2 Template object

        Raises:
            TemplateNotFound: If template file doesn't exist
            TemplateSyntaxError: If template has Jinja2 syntax errors
        """
        return self._load(self._type_path(type_name))

    def render(self, type_name: str, **context: Any) -> str:
        """
        Render a type template.

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        try:
            return self.get_template(type_name).render(**context)
        except TemplateError as e:
            raise self._render_error(type_name, self._type_path(type_name), e) from e

    def render_file(self, relative_path: str, **context: Any) -> str:
        """
        Render a document-level template (e.g., 'structure/preamble.tex.jinja').

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        try:
            return self._load(relative_path).render(**context)
        except TemplateError as e:
            raise self._render_error(relative_path, relative_path, e) from e

    def _load(self, relative_path: str) -> Template:
        # Check cache first
        if relative_path in self._cache:
            return self._cache[relative_path]

        try:
            template = self.env.get_template(relative_path)
        except TemplateNotFound as e:
            raise TemplateNotFound(
                f"Template not found at {self.template_base_path / relative_path}"
            ) from e

        self._cache[relative_path] = template
        return template

    @staticmethod
    def _type_path(type_name: str) -> str:
        return f"types/{type_name}/template.tex.jinja"

    def _render_error(
        self, type_name: str, relative_path: str, error: TemplateError
    ) -> TemplateRenderError:
        return TemplateRenderError(
            "Failed to render template",
            type_name=type_name,
            template_path=self.template_base_path / relative_path,
            original_error=error,
        )
