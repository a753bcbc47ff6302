"""Output writers that render the notice report to text.

A writer is anything with ``render(context) -> str``. Built-in writers are
Jinja2 templates shipped with the package; users can point at their own
template file or pass a plain function.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Protocol, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    Template,
    TemplateError,
    TemplateNotFound,
    select_autoescape,
)

from notice_checker.exceptions import ConfigurationError

TEMPLATE_DIR = Path(__file__).resolve().parents[1] / "templates"

# Built-in writer names mapped to template files in TEMPLATE_DIR
BUILTIN_TEMPLATES: dict[str, str] = {
    "default": "notice.txt",
    "html": "notice.html",
}


class OutputWriter(Protocol):
    """Renders the report context to the notice text."""

    def render(self, context: Dict[str, Any]) -> str:
        ...


def _environment(template_dir: Path) -> Environment:
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        autoescape=select_autoescape(["html", "htm", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


class TemplateWriter:
    """Writer backed by a Jinja2 template."""

    def __init__(self, template: Template) -> None:
        self._template = template

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> TemplateWriter:
        """Load a writer from a Jinja2 template file.

        Args:
            path: Template file path. HTML/XML templates are autoescaped.

        Raises:
            ConfigurationError: If the template is missing or invalid.
        """
        template_path = Path(path)
        env = _environment(template_path.parent)
        try:
            return cls(env.get_template(template_path.name))
        except TemplateNotFound as e:
            raise ConfigurationError(
                f"Output template '{template_path}' does not exist"
            ) from e
        except TemplateError as e:
            raise ConfigurationError(
                f"Invalid output template '{template_path}': {e}"
            ) from e

    def render(self, context: Dict[str, Any]) -> str:
        return self._template.render(**context)


class CallableWriter:
    """Writer wrapping a plain render function."""

    def __init__(self, render_function: Callable[[Dict[str, Any]], str]) -> None:
        self._render_function = render_function

    def render(self, context: Dict[str, Any]) -> str:
        return self._render_function(context)


def resolve_output_writer(
    output_writer: Union[str, Callable[[Dict[str, Any]], str]],
) -> OutputWriter:
    """Resolve the ``output_writer`` option to a writer.

    Args:
        output_writer: ``"default"``, ``"html"``, a template file path,
            or a render function.

    Returns:
        Writer ready to render the report.

    Raises:
        ConfigurationError: If a template cannot be loaded.
    """
    if callable(output_writer):
        return CallableWriter(output_writer)
    if output_writer in BUILTIN_TEMPLATES:
        return TemplateWriter.from_file(TEMPLATE_DIR / BUILTIN_TEMPLATES[output_writer])
    return TemplateWriter.from_file(output_writer)
