"""
Command line interface for the VPC source share reader.

    vpc-share-source read --share-replica <id> [--format json|yaml|table]
"""

import asyncio
import json
import sys
from typing import Any, Dict, Optional

import click
import yaml
from rich.console import Console
from rich.table import Table

from .config_manager import ShareSourceConfig, create_config_from_env, setup_logging
from .exceptions import ShareSourceError
from .logging_config import configure_logging
from .schema import AttributeSet
from .services.sdk_factory import (
    create_authenticator,
    create_tagging_client,
    create_vpc_client,
)
from .services.share_client import ShareSourceClient
from .services.source_share_reader import SourceShareReader
from .services.tagging_service import GlobalTagService

console = Console()
err_console = Console(stderr=True)


def build_reader(config: ShareSourceConfig) -> SourceShareReader:
    """Wire the SDK clients into a reader, sharing one IAM authenticator."""
    authenticator = create_authenticator(config.ibmcloud)
    client = ShareSourceClient(
        config,
        vpc_client=create_vpc_client(config.ibmcloud, authenticator, config.timeouts),
    )
    tag_service = GlobalTagService(
        config,
        tagging_client=create_tagging_client(
            config.ibmcloud, authenticator, config.timeouts
        ),
    )
    return SourceShareReader(client, tag_service)


def print_json(data: Dict[str, Any]) -> None:
    """Print data as formatted JSON."""
    console.print_json(json.dumps(data, indent=2, default=str))


def print_yaml(data: Dict[str, Any]) -> None:
    """Print data as formatted YAML."""
    console.print(
        yaml.dump(data, default_flow_style=False, sort_keys=False), markup=False
    )


def print_table(data: Dict[str, Any]) -> None:
    """Print top-level attributes as a table; nested blocks as JSON."""
    table = Table(title=f"Source share {data.get('id') or '(none)'}")
    table.add_column("Attribute", style="cyan")
    table.add_column("Value")
    for name, value in data.items():
        if isinstance(value, (list, dict)):
            value = json.dumps(value, default=str)
        table.add_row(name, str(value))
    console.print(table)


async def read_command_handler(
    share_replica: str, config: ShareSourceConfig
) -> AttributeSet:
    reader = build_reader(config)
    return await reader.read(share_replica)


@click.group()
@click.option(
    "--log-level",
    default=None,
    help="Logging level (DEBUG, INFO, WARNING, ERROR). Defaults to LOG_LEVEL.",
)
@click.option("--region", default=None, help="IBM Cloud region (default: IBMCLOUD_REGION)")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], region: Optional[str]) -> None:
    """Read IBM Cloud VPC source file shares."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level
    ctx.obj["region"] = region


@cli.command("read")
@click.option("--share-replica", required=True, help="The replica file share identifier")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "table"]),
    default="json",
    show_default=True,
)
@click.option("--timeout", type=float, default=None, help="Fetch timeout in seconds")
@click.pass_context
def read(
    ctx: click.Context,
    share_replica: str,
    output_format: str,
    timeout: Optional[float],
) -> None:
    """Read the source share of a replica share."""
    try:
        config = create_config_from_env(
            region=ctx.obj.get("region"),
            log_level=ctx.obj.get("log_level"),
            fetch_timeout=timeout,
        )
        setup_logging(config.logging)
        configure_logging()
        config.log_configuration_summary()
        result = asyncio.run(read_command_handler(share_replica, config))
    except ShareSourceError as e:
        err_console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)

    if not result.id:
        console.print(
            f"[yellow]No source share found for replica {share_replica}[/yellow]"
        )
        return

    data = result.to_dict()
    if output_format == "yaml":
        print_yaml(data)
    elif output_format == "table":
        print_table(data)
    else:
        print_json(data)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
