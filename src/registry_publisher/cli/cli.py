import click

from registry_publisher.cli.commands.publish_registry import publish_registry_command

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(name="registry-publisher", context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="registry-publisher")
def cli() -> None:
    """Publish the types-registry package."""


cli.add_command(publish_registry_command)


def main() -> None:
    """CLI entry point used by the `registry-publisher` console script."""
    cli()
