"""Publish-registry command."""

import logging
import os
from pathlib import Path

import click

from registry_publisher.cli.output import print_publish_summary, user_output
from registry_publisher.core.config import DEFAULT_CONFIG_FILENAME, load_config
from registry_publisher.core.context import PublisherContext, create_context
from registry_publisher.core.errors import RegistryPublishError
from registry_publisher.core.packages import read_latest_typings, read_not_needed_packages
from registry_publisher.core.publish_registry import publish_registry

logger = logging.getLogger(__name__)

# Enable debug logging if REGISTRY_PUBLISHER_DEBUG environment variable is set
if os.getenv("REGISTRY_PUBLISHER_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


@click.command(name="publish-registry")
@click.option("--dry-run", is_flag=True, help="Do everything except publish and tag calls.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help=f"Configuration file (default: ./{DEFAULT_CONFIG_FILENAME} if present).",
)
@click.pass_context
def publish_registry_command(
    click_ctx: click.Context, dry_run: bool, config_path: Path | None
) -> None:
    """Publish the registry package if its contents changed.

    Retags a previously stranded version, publishes a new patch version, or
    skips. Every path verifies the public package against the freshly built
    registry before anything is tagged latest.
    """
    ctx = click_ctx.obj
    if not isinstance(ctx, PublisherContext):
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME
        config = load_config(config_path)
        ctx = create_context(config, dry_run=dry_run)
    elif dry_run and not ctx.dry_run:
        msg = "--dry-run cannot be used with a context that is not in dry-run mode"
        raise click.UsageError(msg)

    if ctx.dry_run:
        user_output("[DRY RUN MODE - No publish or tag calls will be made]\n")

    try:
        typings = read_latest_typings(ctx.config.data_dir)
        not_needed = read_not_needed_packages(ctx.config.data_dir)
        logger.debug("Read %d typings, %d not needed", len(typings), len(not_needed))
        result = publish_registry(ctx, typings, not_needed)
    except RegistryPublishError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    except KeyboardInterrupt:
        user_output("\n✗ Interrupted by user")
        raise SystemExit(130) from None

    print_publish_summary(result, dry_run=ctx.dry_run)
