"""CLI entry points for parameter-number - Thin Controller using Typer."""

import logging
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import typer

from parameter_number.domain.config import RuleConfig
from parameter_number.domain.constants import PYTHON_OVERRIDE_NAMES
from parameter_number.domain.errors import ConfigurationError
from parameter_number.domain.protocols import (
    FileSystemProtocol,
    MessageCatalogProtocol,
    TreeGatewayProtocol,
)
from parameter_number.interface.reporters import FindingReporter
from parameter_number.use_cases.check_files import CheckFilesUseCase

EXIT_CLEAN = 0
EXIT_FINDINGS = 1
EXIT_CONFIG_ERROR = 2


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    tree_gateway: TreeGatewayProtocol
    filesystem: FileSystemProtocol
    message_catalog: MessageCatalogProtocol
    load_config: Callable[[], dict[str, object]]
    """Returns the [tool.parameter-number] table (may raise ConfigurationError)."""


class CLIAppFactory:
    """Creates the Typer app."""

    @staticmethod
    def resolve_target_paths(paths: list[Path] | None) -> list[str]:
        """Explicit paths, else src/ if it exists, else '.'."""
        if paths:
            return [str(p) for p in paths]
        src_dir = Path.cwd() / "src"
        if src_dir.is_dir():
            return ["src"]
        return ["."]

    @staticmethod
    def build_config(
        raw: dict[str, object],
        max_parameters: int | None,
        ignore_overridden: bool | None,
        python_overrides: tuple[str, ...],
    ) -> RuleConfig:
        """CLI flags > [tool.parameter-number] > defaults."""
        config = RuleConfig(override_names=python_overrides)
        config = RuleConfig.from_mapping(raw, defaults=config)
        return config.replace(
            max_parameters=max_parameters,
            ignore_overridden=ignore_overridden,
        )

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies."""
        app = typer.Typer(
            name="parameter-number",
            help="Flag functions and methods that declare too many parameters.",
            add_completion=False,
        )

        @app.callback()
        def main(
            verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
        ) -> None:
            """parameter-number: too-many-parameters linter."""
            logging.basicConfig(
                level=logging.DEBUG if verbose else logging.WARNING,
                format="%(levelname)s %(name)s: %(message)s",
            )

        @app.command()
        def check(
            paths: list[Path] | None = typer.Argument(None, help="Files or directories (default: src/ or .)"),  # noqa: B008
            max_parameters: int | None = typer.Option(
                None, "--max", help="Maximum allowed parameters (default 7)"),
            ignore_overridden: bool | None = typer.Option(
                None, "--ignore-overridden-methods/--no-ignore-overridden-methods",
                help="Skip methods decorated with @override (default: pyproject, else off)"),
            output_format: str = typer.Option(
                "text", "--format", help="Output format: text or json"),
            locale: str | None = typer.Option(
                None, "--locale", help="Message locale (e.g. de, fr)"),
        ) -> None:
            """Check Python sources and list declarations over the limit."""
            if output_format not in ("text", "json"):
                print(f"Unknown format: {output_format}", file=sys.stderr)
                sys.exit(EXIT_CONFIG_ERROR)
            try:
                config = CLIAppFactory.build_config(
                    deps.load_config(), max_parameters, ignore_overridden, PYTHON_OVERRIDE_NAMES
                )
            except ConfigurationError as exc:
                print(f"Configuration error: {exc}", file=sys.stderr)
                sys.exit(EXIT_CONFIG_ERROR)

            use_case = CheckFilesUseCase(
                tree_gateway=deps.tree_gateway,
                filesystem=deps.filesystem,
                config=config,
            )
            result = use_case.execute(CLIAppFactory.resolve_target_paths(paths))
            reporter = FindingReporter(deps.message_catalog.get_registry(), locale=locale)
            print(reporter.render(result, output_format))
            for failure in result.errors:
                print(f"error: {failure}", file=sys.stderr)

            if result.has_findings():
                sys.exit(EXIT_FINDINGS)
            sys.exit(EXIT_CLEAN)

        return app
