from __future__ import annotations

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from .config import Config


env = Environment(
    loader=PackageLoader("webapp", "templates"),
    autoescape=select_autoescape(["html"]),
    undefined=StrictUndefined,
)


def render_index(config: Config) -> str:
    """Render the landing page for ``config``.

    Raises a ``jinja2.TemplateError`` subclass when the template is missing
    or fails to render.
    """
    template = env.get_template("index.html")
    return template.render(config=config)
