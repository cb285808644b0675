"""Main CLI entry point for the azure-wiki command.

This module provides the Typer application that runs the MCP server and
exposes every wiki operation on the command line for scripting and
troubleshooting.
"""

import logging
import sys
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

import typer

from src.cli.config import ConfigLoader
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.mcp_server.provider import WikiClientProvider, build_service
from src.mcp_server.server import run_server
from src.page_operations.service import WikiService
from src.wiki_client.errors import (
    InvalidCredentialsError,
    PageNotFoundError,
    TransportError,
    WikiError,
)

app = typer.Typer(
    name="azure-wiki",
    help="""Azure DevOps wiki tools for agents and the command line.

QUICK START:
  azure-wiki serve                                  # Run the MCP server on stdio
  azure-wiki wikis -p MyProject                     # List wikis
  azure-wiki tree MyProject.wiki --depth 2          # Show the page hierarchy
  azure-wiki page MyProject.wiki /Home              # Print a page
  azure-wiki update MyProject.wiki /Home -f home.md # Create or update a page

Connection settings come from AZURE_DEVOPS_* environment variables (or .env),
falling back to .azure-wiki/config.yaml.""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=True,
)

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


@dataclass
class CLIContext:
    """Options shared by every command."""
    config_path: str
    verbosity: int
    no_color: bool
    output: OutputHandler


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. All handlers write to stderr or a file: stdout carries the
    MCP protocol and command results.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"azure-wiki_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _exit_code_for(error: WikiError) -> ExitCode:
    if isinstance(error, PageNotFoundError):
        return ExitCode.NOT_FOUND
    if isinstance(error, InvalidCredentialsError):
        return ExitCode.AUTH_ERROR
    if isinstance(error, TransportError):
        return ExitCode.NETWORK_ERROR
    return ExitCode.GENERAL_ERROR


def _run(ctx: typer.Context, message: str, call: Callable[[WikiService], None]) -> None:
    """Build the service, run one operation, and map errors to exit codes."""
    cli: CLIContext = ctx.obj
    output = cli.output
    service: Optional[WikiService] = None
    try:
        service = build_service(ConfigLoader.load(cli.config_path))
        output.info(message)
        call(service)
    except WikiError as e:
        logger.debug(f"Command failed: {e}")
        output.error(str(e))
        raise typer.Exit(_exit_code_for(e))
    finally:
        if service is not None:
            service.close()


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"azure-wiki version {VERSION}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: str = typer.Option(
        ConfigLoader.DEFAULT_CONFIG_PATH,
        "--config",
        "-c",
        help="Settings file with connection defaults",
        metavar="FILE",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=results only, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Azure DevOps wiki tools for agents and the command line."""
    _configure_logging(verbosity, logdir)
    ctx.obj = CLIContext(
        config_path=config,
        verbosity=verbosity,
        no_color=no_color,
        output=OutputHandler(verbosity=verbosity, no_color=no_color),
    )


@app.command()
def serve(ctx: typer.Context) -> None:
    """Run the MCP server on stdio."""
    cli: CLIContext = ctx.obj
    try:
        run_server(WikiClientProvider(config_path=cli.config_path))
    except WikiError as e:
        cli.output.error(f"Failed to start server: {e}")
        raise typer.Exit(_exit_code_for(e))


@app.command()
def wikis(
    ctx: typer.Context,
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="Organization name"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name"),
) -> None:
    """List the wikis of a project."""
    output: OutputHandler = ctx.obj.output

    def call(service: WikiService) -> None:
        result = service.list_wikis(organization, project)
        output.print_json([wiki.to_dict() for wiki in result])

    _run(ctx, "Listing wikis", call)


@app.command()
def tree(
    ctx: typer.Context,
    wiki_id: str = typer.Argument(..., help="Wiki identifier or name"),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", min=1, help="Maximum depth to retrieve"),
    as_tree: bool = typer.Option(False, "--tree", help="Render as a tree instead of JSON"),
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="Organization name"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name"),
) -> None:
    """Show the page hierarchy of a wiki."""
    output: OutputHandler = ctx.obj.output

    def call(service: WikiService) -> None:
        roots = service.get_page_tree(wiki_id, organization, project, depth)
        if not roots:
            output.warning(f"No pages found in wiki {wiki_id}")
        if as_tree:
            output.print_tree(roots, label=wiki_id)
        else:
            output.print_json([root.to_dict() for root in roots])

    _run(ctx, f"Fetching page tree of {wiki_id}", call)


@app.command()
def page(
    ctx: typer.Context,
    wiki_id: str = typer.Argument(..., help="Wiki identifier or name"),
    path: str = typer.Argument(..., help="Page path, e.g. /Home/Overview"),
    content_only: bool = typer.Option(False, "--content", help="Print only the Markdown content"),
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="Organization name"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name"),
) -> None:
    """Print a wiki page."""
    output: OutputHandler = ctx.obj.output

    def call(service: WikiService) -> None:
        result = service.get_page(wiki_id, path, organization, project)
        if content_only:
            typer.echo(result.content)
        else:
            output.print_json(result.to_dict())

    _run(ctx, f"Fetching page {path}", call)


@app.command()
def update(
    ctx: typer.Context,
    wiki_id: str = typer.Argument(..., help="Wiki identifier or name"),
    path: str = typer.Argument(..., help="Page path, e.g. /Home/Overview"),
    file: Optional[Path] = typer.Option(
        None, "--file", "-f", help="Markdown file with the new content (default: stdin)",
        exists=True, dir_okay=False, readable=True,
    ),
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="Organization name"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name"),
) -> None:
    """Create a page, or replace its content if it exists."""
    output: OutputHandler = ctx.obj.output
    content = file.read_text(encoding="utf-8") if file else sys.stdin.read()

    def call(service: WikiService) -> None:
        outcome = service.upsert_page(wiki_id, path, content, organization, project)
        verb = "Updated" if outcome.action == "update" else "Created"
        output.success(f"{verb} page {outcome.path}")
        output.print_json(outcome.to_dict())

    _run(ctx, f"Writing page {path}", call)


@app.command()
def search(
    ctx: typer.Context,
    search_text: str = typer.Argument(..., help="Search query"),
    wiki_id: Optional[str] = typer.Option(None, "--wiki", "-w", help="Restrict to one wiki"),
    top: int = typer.Option(25, "--top", min=1, help="Maximum number of results"),
    organization: Optional[str] = typer.Option(None, "--organization", "-o", help="Organization name"),
    project: Optional[str] = typer.Option(None, "--project", "-p", help="Project name"),
) -> None:
    """Search wiki content."""
    output: OutputHandler = ctx.obj.output

    def call(service: WikiService) -> None:
        results = service.search(search_text, organization, project, wiki_id, top)
        output.print_json([result.to_dict() for result in results])

    _run(ctx, f"Searching for '{search_text}'", call)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
