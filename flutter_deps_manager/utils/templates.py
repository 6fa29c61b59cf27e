"""Render the plain-text Jinja2 templates bundled with the package."""

from pathlib import Path

import jinja2
import structlog
from pydantic import BaseModel

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

TEMPLATES_DIRECTORY = Path(__file__).parent.parent / "templates"


def construct_jinja2_environment(templates_directory: Path = TEMPLATES_DIRECTORY) -> jinja2.Environment:
    """Construct a Jinja2 environment for commit messages and terminal text.

    Undefined variables are errors, and each template keeps its final newline.
    """
    return jinja2.Environment(
        loader=jinja2.FileSystemLoader(templates_directory),
        undefined=jinja2.StrictUndefined,
        keep_trailing_newline=True,
        autoescape=False,
    )


def load_bundled_template(name: str, environment: jinja2.Environment | None = None) -> jinja2.Template:
    """Load one of the templates shipped with the package by file name."""
    if environment is None:
        environment = construct_jinja2_environment()
    try:
        return environment.get_template(name)
    except jinja2.TemplateNotFound:
        logger.error("Bundled template not found", template_name=name, templates_directory=str(TEMPLATES_DIRECTORY))
        raise


def render_template_with_model(model: BaseModel, template: jinja2.Template) -> str:
    """Render a template with the fields of a Pydantic model as its variables."""
    try:
        return template.render(model.model_dump())
    except jinja2.UndefinedError as exc:
        logger.error("Template refers to a field the model lacks", model_type=type(model).__name__, template=template.name, error=str(exc))
        raise
