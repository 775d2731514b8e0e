"""Catalogue application service - browsing, rendering and validating the catalogue."""
import ast
from typing import Dict, List, Optional, Union

from pattern_catalog.application.dto import CatalogProblemDTO, CatalogValidationDTO
from pattern_catalog.config.schemas.catalog_schema import CatalogConfig
from pattern_catalog.domain.base.events import (
    CatalogRenderedEvent,
    CatalogValidatedEvent,
    DemoExecutedEvent,
    DomainEvent,
    EventPublisher,
)
from pattern_catalog.domain.pattern import (
    Catalog,
    Pattern,
    PatternCategory,
    PatternNotFoundError,
    PatternStatus,
)
from pattern_catalog.infrastructure.exceptions import SampleLoadError, SampleNotFoundError
from pattern_catalog.infrastructure.logging.logger import get_logger
from pattern_catalog.infrastructure.persistence import YamlPatternRepository
from pattern_catalog.infrastructure.registry import SampleRegistry
from pattern_catalog.infrastructure.template import JinjaCatalogRenderer

DEFAULT_TITLE = "Design Patterns"


class CatalogApplicationService:
    """Application service for catalogue operations."""

    def __init__(self,
                 repository: YamlPatternRepository,
                 sample_registry: SampleRegistry,
                 renderer: JinjaCatalogRenderer,
                 config: Optional[CatalogConfig] = None,
                 event_publisher: Optional[EventPublisher] = None):
        self._repository = repository
        self._samples = sample_registry
        self._renderer = renderer
        self._config = config or CatalogConfig()
        self._event_publisher = event_publisher
        self._logger = get_logger(__name__)

    def list_patterns(self,
                      category: Optional[Union[str, PatternCategory]] = None,
                      status: Optional[Union[str, PatternStatus]] = None) -> List[Pattern]:
        """List patterns in catalogue order, optionally filtered."""
        patterns = self._repository.find_all()
        if category is not None:
            category = PatternCategory(category)
            patterns = [p for p in patterns if p.category == category]
        if status is not None:
            status = PatternStatus(status)
            patterns = [p for p in patterns if p.status == status]

        order = {c: i for i, c in enumerate(self._config.category_order)}
        return sorted(patterns,
                      key=lambda p: (order.get(p.category, len(order)), p.order, p.name))

    def get_pattern(self, slug: str) -> Pattern:
        pattern = self._repository.find_by_slug(slug)
        if pattern is None:
            raise PatternNotFoundError(slug)
        return pattern

    def get_sample_source(self, slug: str) -> str:
        """Get the source code shown as the sample of a pattern."""
        pattern = self.get_pattern(slug)
        self._ensure_sample(pattern)
        return self._samples.get_source(slug, pattern.sample.objects)

    def run_demo(self, slug: str) -> List[str]:
        """Run the demo of a pattern sample and return its output lines."""
        pattern = self.get_pattern(slug)
        self._ensure_sample(pattern)
        lines = self._samples.run_demo(slug)
        self._publish(DemoExecutedEvent(aggregate_id=slug, line_count=len(lines)))
        return lines

    def build_catalog(self, include_stubs: Optional[bool] = None,
                      title: Optional[str] = None) -> Catalog:
        """Group the catalogue entries into the ordered catalogue."""
        if include_stubs is None:
            include_stubs = self._config.include_stubs
        patterns = self._repository.find_all()
        if not include_stubs:
            patterns = [p for p in patterns if not p.is_stub]

        metadata = self._repository.get_catalog_metadata()
        descriptions = dict(metadata.get("categories") or {})
        descriptions.update(self._config.category_descriptions)

        return Catalog.from_patterns(
            patterns,
            category_order=self._config.category_order,
            category_descriptions=descriptions,
            title=title or self._config.title or metadata.get("title") or DEFAULT_TITLE,
            introduction=metadata.get("introduction") or "",
        )

    def render_catalog(self, include_stubs: Optional[bool] = None,
                       title: Optional[str] = None,
                       include_output: bool = True) -> str:
        """
        Render the catalogue as markdown.

        Sample sources are read from the sample modules; demo output is
        included when ``include_output`` is set.
        """
        catalog = self.build_catalog(include_stubs=include_stubs, title=title)
        sources: Dict[str, str] = {}
        outputs: Dict[str, List[str]] = {}
        for pattern in catalog.patterns:
            if pattern.is_stub:
                continue
            sources[pattern.slug] = self.get_sample_source(pattern.slug)
            if include_output:
                outputs[pattern.slug] = self._samples.run_demo(pattern.slug)

        markdown = self._renderer.render(catalog, sources=sources, outputs=outputs)
        stubs = sum(1 for p in catalog.patterns if p.is_stub)
        self._logger.info("Rendered catalogue", patterns=len(catalog.patterns), stubs=stubs)
        self._publish(CatalogRenderedEvent(
            aggregate_id=catalog.title,
            pattern_count=len(catalog.patterns),
            stub_count=stubs,
            size_bytes=len(markdown.encode("utf-8")),
        ))
        return markdown

    def validate_catalog(self) -> CatalogValidationDTO:
        """
        Check the catalogue data for consistency.

        Related slugs must exist; every sample must import, expose the listed
        objects, have parseable source and a demo that runs.
        """
        patterns = self._repository.find_all()
        known = {p.slug for p in patterns}
        problems: List[CatalogProblemDTO] = []
        checked = 0

        for pattern in patterns:
            for slug in pattern.related:
                if slug not in known:
                    problems.append(CatalogProblemDTO(
                        slug=pattern.slug, check="related",
                        message=f"related pattern '{slug}' does not exist"))

            if pattern.sample is None:
                continue
            checked += 1
            problems.extend(self._validate_sample(pattern))

        result = CatalogValidationDTO(pattern_count=len(patterns), checked_samples=checked,
                                      problems=problems)
        if problems:
            self._logger.warning("Catalogue validation found problems", count=len(problems))
        self._publish(CatalogValidatedEvent(aggregate_id="catalog",
                                            pattern_count=len(patterns),
                                            problem_count=len(problems)))
        return result

    def _validate_sample(self, pattern: Pattern) -> List[CatalogProblemDTO]:
        slug = pattern.slug
        try:
            source = self.get_sample_source(slug)
        except (SampleNotFoundError, SampleLoadError) as e:
            return [CatalogProblemDTO(slug=slug, check="sample", message=str(e))]

        try:
            ast.parse(source)
        except SyntaxError as e:
            return [CatalogProblemDTO(slug=slug, check="syntax",
                                      message=f"sample source does not parse: {e.msg}")]

        try:
            self._samples.run_demo(slug)
        except Exception as e:
            return [CatalogProblemDTO(slug=slug, check="demo",
                                      message=f"demo failed: {type(e).__name__}: {e}")]
        return []

    def _ensure_sample(self, pattern: Pattern) -> None:
        """Register the sample module of a pattern on first use."""
        if pattern.sample is None:
            raise SampleNotFoundError(pattern.slug)
        self._samples.ensure_sample(pattern.slug, pattern.sample.module)

    def _publish(self, event: DomainEvent) -> None:
        if self._event_publisher is not None:
            self._event_publisher.publish(event)
