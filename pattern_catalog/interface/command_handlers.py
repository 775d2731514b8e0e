"""CLI command handlers for the interface layer."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Union

from pattern_catalog.application.dto import PatternDetailDTO
from pattern_catalog.infrastructure.error import with_cli_error_handling
from pattern_catalog.infrastructure.logging.logger import get_logger

if TYPE_CHECKING:
    from pattern_catalog.bootstrap import Application


class CommandResult:
    """What a handler produced: structured data or markdown text, and the exit code."""

    def __init__(self, data: Union[Dict[str, Any], str], exit_code: int = 0):
        self.data = data
        self.exit_code = exit_code

    @property
    def is_text(self) -> bool:
        return isinstance(self.data, str)


class CLICommandHandler(ABC):
    """Base class for CLI command handlers."""

    def __init__(self, app: Application, logger=None):
        self.app = app
        self.logger = logger or get_logger(self.__class__.__module__)

    @abstractmethod
    def handle(self, command) -> CommandResult:
        """
        Handle a parsed CLI command.

        Args:
            command: argparse namespace of the command

        Returns:
            CommandResult for the CLI to print
        """


class ListPatternsCLIHandler(CLICommandHandler):
    """Handler for ``patterns list``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        category = getattr(command, 'category', None)
        status = getattr(command, 'status', None)
        self.logger.debug("Listing patterns", category=category, status=status)

        patterns = self.app.catalog_service.list_patterns(category=category, status=status)
        return CommandResult({
            "patterns": [p.to_summary() for p in patterns],
            "count": len(patterns),
        })


class ShowPatternCLIHandler(CLICommandHandler):
    """Handler for ``patterns show``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        service = self.app.catalog_service
        pattern = service.get_pattern(command.slug)
        source = None if pattern.is_stub else service.get_sample_source(pattern.slug)
        return CommandResult(PatternDetailDTO.from_pattern(pattern, source).to_dict())


class DemoPatternCLIHandler(CLICommandHandler):
    """Handler for ``patterns demo``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        lines = self.app.catalog_service.run_demo(command.slug)
        return CommandResult({"slug": command.slug, "output": lines})


class ValidateCatalogCLIHandler(CLICommandHandler):
    """Handler for ``patterns validate``. Exits with 1 when problems are found."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        result = self.app.catalog_service.validate_catalog()
        return CommandResult(result.to_dict(), exit_code=0 if result.valid else 1)


class RenderCatalogCLIHandler(CLICommandHandler):
    """Handler for ``catalog render``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        include_stubs = False if getattr(command, 'no_stubs', False) else None
        markdown = self.app.catalog_service.render_catalog(
            include_stubs=include_stubs,
            title=getattr(command, 'title', None),
            include_output=not getattr(command, 'no_output', False),
        )
        return CommandResult(markdown)


class LintDocumentCLIHandler(CLICommandHandler):
    """Handler for ``catalog lint``. Exits with 1 when the document does not pass."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        strict = True if getattr(command, 'strict', False) else None
        report = self.app.lint_service.lint_file(
            command.file,
            strict=strict,
            disabled_rules=getattr(command, 'disable', None) or [],
        )
        return CommandResult(report.to_dict(), exit_code=0 if report.passed else 1)


class ConsolidateDocumentCLIHandler(CLICommandHandler):
    """Handler for ``catalog consolidate``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        result = self.app.lint_service.consolidate_file(
            command.file,
            regenerate_toc=getattr(command, 'regenerate_toc', False),
        )
        if getattr(command, 'stats', False):
            return CommandResult(result.model_dump(exclude={"markdown"}))
        return CommandResult(result.markdown)


class GenerateTocCLIHandler(CLICommandHandler):
    """Handler for ``catalog toc``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        return CommandResult(self.app.lint_service.generate_toc(command.file))


class ShowConfigCLIHandler(CLICommandHandler):
    """Handler for ``config show``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        return CommandResult(self.app.config_manager.to_dict())


class ValidateConfigCLIHandler(CLICommandHandler):
    """Handler for ``config validate``."""

    @with_cli_error_handling()
    def handle(self, command) -> CommandResult:
        manager = self.app.config_manager
        config_file = getattr(command, 'file', None)
        if config_file:
            config = manager.validate_file(config_file)
        else:
            config = manager.reload()
            config_file = manager.config_file or manager.loader.find_config_file()
        return CommandResult({
            "valid": True,
            "file": str(config_file) if config_file else None,
            "config": config.model_dump(mode="json"),
        })


COMMAND_HANDLERS = {
    ('patterns', 'list'): ListPatternsCLIHandler,
    ('patterns', 'show'): ShowPatternCLIHandler,
    ('patterns', 'demo'): DemoPatternCLIHandler,
    ('patterns', 'validate'): ValidateCatalogCLIHandler,
    ('catalog', 'render'): RenderCatalogCLIHandler,
    ('catalog', 'lint'): LintDocumentCLIHandler,
    ('catalog', 'consolidate'): ConsolidateDocumentCLIHandler,
    ('catalog', 'toc'): GenerateTocCLIHandler,
    ('config', 'show'): ShowConfigCLIHandler,
    ('config', 'validate'): ValidateConfigCLIHandler,
}
