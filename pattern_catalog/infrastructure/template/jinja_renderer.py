"""Jinja2 rendering of the markdown catalogue."""
from pathlib import Path
from typing import Dict, List, Optional, Union

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    TemplateError,
)

from pattern_catalog.domain.pattern import Catalog, Pattern
from pattern_catalog.infrastructure.exceptions import RenderError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.markdown.parser import FENCE_RE, is_fence_close
from pattern_catalog.infrastructure.markdown.anchors import github_anchor

DEFAULT_TEMPLATE = "catalog.md.j2"
DEFAULT_STUB_MARKER = "Coming soon"


def normalise_blank_lines(text: str) -> str:
    """Collapse runs of blank lines outside code fences and end with one newline."""
    result: List[str] = []
    fence: Optional[str] = None
    for line in text.splitlines():
        line = line.rstrip()
        if fence is not None:
            if is_fence_close(line, fence):
                fence = None
            result.append(line)
            continue
        match = FENCE_RE.match(line)
        if match:
            fence = match.group(1)
        elif not line and (not result or not result[-1]):
            continue
        result.append(line)

    while result and not result[-1]:
        result.pop()
    return "\n".join(result) + "\n"


class JinjaCatalogRenderer:
    """
    Renders a Catalog into markdown.

    Templates come from the packaged ``templates`` directory unless a template
    directory is given.
    """

    def __init__(self, template_dir: Optional[Union[str, Path]] = None,
                 template_name: str = DEFAULT_TEMPLATE,
                 stub_marker: str = DEFAULT_STUB_MARKER):
        self.template_name = template_name
        self.stub_marker = stub_marker
        self._logger = get_logger(__name__)

        loader: BaseLoader
        if template_dir:
            loader = FileSystemLoader(str(Path(template_dir).expanduser()))
        else:
            loader = PackageLoader("pattern_catalog.infrastructure.template", "templates")

        self.environment = Environment(
            loader=loader,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
            autoescape=False,
        )
        self.environment.filters["anchor"] = github_anchor

    def render(self, catalog: Catalog,
               sources: Optional[Dict[str, str]] = None,
               outputs: Optional[Dict[str, List[str]]] = None) -> str:
        """
        Render the catalogue.

        Args:
            catalog: Catalogue to render
            sources: Sample source code by pattern slug
            outputs: Demo output lines by pattern slug

        Returns:
            Markdown text ending with a single newline

        Raises:
            RenderError: If the template is missing or fails to render
        """
        patterns = catalog.patterns
        by_slug: Dict[str, Pattern] = {p.slug: p for p in patterns}
        related = {
            p.slug: [by_slug[slug] for slug in p.related if slug in by_slug]
            for p in patterns
        }

        try:
            template = self.environment.get_template(self.template_name)
            text = template.render(
                catalog=catalog,
                sources=sources or {},
                outputs=outputs or {},
                related=related,
                stub_marker=self.stub_marker,
            )
        except TemplateError as e:
            raise RenderError(f"Failed to render template {self.template_name}: {e}",
                              {"template": self.template_name}) from e

        markdown = normalise_blank_lines(text)
        self._logger.debug("Rendered catalogue", patterns=len(patterns), size=len(markdown))
        return markdown
