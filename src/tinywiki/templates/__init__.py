"""Page templates.

``view.html`` and ``edit.html`` are bundled with the package and may be
replaced by a directory of the same names via configuration.
"""

from importlib.resources import files
from pathlib import Path

import jinja2

TEMPLATE_NAMES = ("view.html", "edit.html")


def get_templates_dir() -> Path:
    """Return path to the bundled templates.

    Raises:
        FileNotFoundError: If the templates are not bundled
    """
    templates = files("tinywiki").joinpath("templates")
    if not templates.is_dir():
        raise FileNotFoundError("Bundled templates not found in tinywiki package")
    return Path(str(templates))


def create_environment(templates_dir: Path | None = None) -> jinja2.Environment:
    """Create the Jinja2 environment used to render pages.

    Autoescaping is off: page bodies carry link markup produced by the
    rewriter and are emitted verbatim.

    Args:
        templates_dir: Directory overriding the bundled templates

    Returns:
        Environment with every page template loaded

    Raises:
        FileNotFoundError: If templates_dir doesn't exist
        jinja2.TemplateError: If a template is missing or fails to parse
    """
    directory = templates_dir if templates_dir is not None else get_templates_dir()
    if not directory.is_dir():
        raise FileNotFoundError(f"Templates directory not found: {directory}")

    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(directory),
        autoescape=False,
        keep_trailing_newline=True,
    )
    # Parse up front so a broken template fails at startup.
    for name in TEMPLATE_NAMES:
        env.get_template(name)
    return env
