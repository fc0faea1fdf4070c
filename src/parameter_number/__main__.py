"""Package entry point - composition root. Wire dependencies and run the CLI app."""

from parameter_number.infrastructure.config_file_loader import ConfigFileLoader
from parameter_number.infrastructure.di.container import ParameterNumberContainer
from parameter_number.interface.cli import CLIAppFactory, CLIDependencies


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    container = ParameterNumberContainer.get_instance()
    deps = CLIDependencies(
        tree_gateway=container.get_tree_gateway(),
        filesystem=container.get_filesystem_gateway(),
        message_catalog=container.get_message_catalog(),
        load_config=ConfigFileLoader.load_config_from_fs,
    )
    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
