"""Application bootstrap - wires configuration, infrastructure and services."""

from __future__ import annotations

from typing import Optional

from pattern_catalog.application import CatalogApplicationService, DocumentLintService
from pattern_catalog.config import ConfigurationManager
from pattern_catalog.infrastructure.events import ConfigurableEventPublisher, create_event_publisher
from pattern_catalog.infrastructure.logging.logger import get_logger, setup_logging
from pattern_catalog.infrastructure.persistence import YamlPatternRepository
from pattern_catalog.infrastructure.patterns import get_singleton
from pattern_catalog.infrastructure.registry import SampleRegistry
from pattern_catalog.infrastructure.template import JinjaCatalogRenderer


class Application:
    """Application context holding configuration and lazily built services."""

    def __init__(self, config_path: Optional[str] = None,
                 config_manager: Optional[ConfigurationManager] = None) -> None:
        self.config_path = config_path
        self._config_manager = config_manager
        self._event_publisher: Optional[ConfigurableEventPublisher] = None
        self._catalog_service: Optional[CatalogApplicationService] = None
        self._lint_service: Optional[DocumentLintService] = None
        self._initialized = False

        self.logger = get_logger(__name__)

    @property
    def config_manager(self) -> ConfigurationManager:
        if self._config_manager is None:
            self._config_manager = ConfigurationManager(self.config_path)
        return self._config_manager

    def initialize(self, configure_logging: bool = True) -> bool:
        """Load configuration and set up logging. Configuration errors propagate."""
        if self._initialized:
            return True

        app_config = self.config_manager.app_config
        if configure_logging:
            setup_logging(app_config.logging)

        self._initialized = True
        self.logger.debug("Application initialized", config=self.config_path or "auto")
        return True

    @property
    def event_publisher(self) -> ConfigurableEventPublisher:
        if self._event_publisher is None:
            events = self.config_manager.get_events_config()
            self._event_publisher = create_event_publisher(mode=events.mode, enabled=events.enabled)
        return self._event_publisher

    @property
    def catalog_service(self) -> CatalogApplicationService:
        if self._catalog_service is None:
            catalog_config = self.config_manager.get_catalog_config()
            self._catalog_service = CatalogApplicationService(
                repository=YamlPatternRepository(catalog_config.data_dir),
                sample_registry=get_singleton(SampleRegistry),
                renderer=JinjaCatalogRenderer(
                    template_dir=catalog_config.template_dir,
                    template_name=catalog_config.template_name,
                    stub_marker=self._stub_marker(),
                ),
                config=catalog_config,
                event_publisher=self.event_publisher,
            )
        return self._catalog_service

    @property
    def lint_service(self) -> DocumentLintService:
        if self._lint_service is None:
            self._lint_service = DocumentLintService(
                config=self.config_manager.get_lint_config(),
                event_publisher=self.event_publisher,
            )
        return self._lint_service

    def _stub_marker(self) -> str:
        markers = self.config_manager.get_lint_config().stub_markers
        return markers[0] if markers else "Coming soon"


def create_application(config_path: Optional[str] = None,
                       configure_logging: bool = True) -> Application:
    """Create and initialize the application."""
    app = Application(config_path)
    app.initialize(configure_logging=configure_logging)
    return app
