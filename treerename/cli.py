"""CLI entrypoints."""

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from treerename.messages import FOUND_TEMPLATE, NO_MATCH_MESSAGE
from treerename.models.rename import RenameRequest
from treerename.processors.tree_renamer import DEFAULT_SORT_ENTRIES, TreeRenamer


console = Console()


def _format_validation_error(error: ValidationError) -> str:
    """Flatten a request validation error into a single line."""
    messages = []
    for detail in error.errors():
        message = detail["msg"]
        # pydantic prefixes messages raised from validators
        messages.append(message.removeprefix("Value error, "))
    return "; ".join(messages)


@click.group(context_settings=dict(show_default=True))
def cli() -> None:
    """treerename - Rename files with the same name throughout a directory tree."""
    pass


@cli.command("rename")
@click.argument("root_path", type=click.Path())
@click.option(
    "-t",
    "--target",
    "target_name",
    type=str,
    required=True,
    help="New file name given to every matching file.",
)
@click.option(
    "-m",
    "--match",
    "match_name",
    type=str,
    default="",
    help="Exact name of the files to rename. Leave empty to take every file in each directory.",
)
@click.option(
    "--sort/--no-sort",
    default=DEFAULT_SORT_ENTRIES,
    help="Visit directory entries in name order instead of filesystem order.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show directories scanned and conflicts skipped.")
@click.option(
    "-y",
    "--yes",
    is_flag=True,
    default=False,
    help="Rename without asking for confirmation.",
)
def rename(
    root_path: str,
    target_name: str,
    match_name: str,
    sort: bool,
    verbose: bool,
    yes: bool,
) -> None:
    """Rename matching files to TARGET in every directory under ROOT_PATH.

    A file is only renamed when its directory has no entry named TARGET yet,
    so existing files are never overwritten.

    Examples:

        treerename rename res/ --match img.png --target icon.png

        treerename rename drawable/ -t ic_launcher.png -y
    """
    try:
        request = RenameRequest(root_path=root_path, match_name=match_name, target_name=target_name)
    except ValidationError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(_format_validation_error(e))}")
        raise SystemExit(1) from e

    match_description = f"'{escape(request.match_name)}'" if not request.matches_any_file else "every file"
    console.print(
        f"Renaming {match_description} under [bold cyan]{escape(request.root_path)}[/bold cyan] "
        f"to [bold magenta]{escape(request.target_name)}[/bold magenta]..."
    )

    if not yes and not click.confirm("Apply these renames?", default=False):
        console.print("[yellow]Aborted. No files were renamed.[/yellow]")
        return

    renamer = TreeRenamer(sort_entries=sort, console=console if verbose else None)
    try:
        outcome = renamer.run(request)
    except OSError as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e

    found_prefix = FOUND_TEMPLATE.format(path="")
    for line in outcome.log:
        style = "cyan" if line.startswith(found_prefix) else "green"
        console.print(line, style=style, markup=False, highlight=False, soft_wrap=True)

    if not outcome.matched:
        console.print(f"[bold red]{NO_MATCH_MESSAGE}[/bold red]")
        raise SystemExit(1)

    console.print(f"[bold green]Done.[/bold green] Renamed {outcome.renamed} file(s).")
