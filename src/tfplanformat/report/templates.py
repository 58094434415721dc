"""Render the render context through a template engine."""

from enum import Enum
from typing import Union
from jinja2 import Environment, StrictUndefined, TemplateSyntaxError
from ..contracts.render_context import RenderContext, format_line
from ..utils.errors import TemplateRenderError
from ..utils.logging import get_logger

logger = get_logger("report.templates")

GITHUB_MARKDOWN_TEMPLATE = """
{%- for plan in plans -%}
<details>
<summary>{{ plan.source_path }}</summary>
{%- for resource in plan.resources %}
<details>
<summary>{{ resource.icon }}{{ resource.address }}</summary>

```
{% for line in resource.lines -%}
{{ line | format_line }}
{% endfor -%}
```

</details>
{%- endfor %}
</details>
{% endfor -%}
"""


class TemplateEngine(str, Enum):
    """Supported template engines."""
    JINJA2 = "jinja2"

    @classmethod
    def parse(cls, name: str) -> "TemplateEngine":
        """Resolve an engine by name, raising TemplateRenderError when unknown."""
        try:
            return cls(name)
        except ValueError:
            raise TemplateRenderError(f"Invalid template engine: {name}") from None


def _jinja_environment() -> Environment:
    env = Environment(undefined=StrictUndefined, autoescape=False)
    env.filters["format_line"] = format_line
    env.globals["format_line"] = format_line
    return env


def render_template(
    context: RenderContext,
    template: str,
    engine: Union[TemplateEngine, str] = TemplateEngine.JINJA2,
) -> str:
    """
    Render a template string against the render context.

    The template sees ``plans`` (the list of plan entries as plain data) and
    the ``format_line`` filter/function.

    Args:
        context: Render context
        template: Template source
        engine: Template engine (only jinja2 today)

    Returns:
        Rendered text

    Raises:
        TemplateRenderError: If the template cannot be parsed or rendered
    """
    engine = TemplateEngine.parse(engine)
    env = _jinja_environment()

    try:
        compiled = env.from_string(template)
    except TemplateSyntaxError as e:
        raise TemplateRenderError(f"Failed to add template: {e}") from e

    try:
        result = compiled.render(**context.to_template_data())
    except Exception as e:
        raise TemplateRenderError(f"Failed to render template: {e}") from e

    logger.debug(f"Rendered template with {engine.value} ({len(result)} characters)")
    return result


def render_github(context: RenderContext) -> str:
    """Render the context as GitHub-flavoured markdown with collapsible sections."""
    return render_template(context, GITHUB_MARKDOWN_TEMPLATE)
