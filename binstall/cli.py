"""CLI interface for binstall."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import Settings, get_settings
from .exceptions import InstallError
from .logging_config import get_logger, setup_logging
from .pipeline import InstallPipeline, InstallResult

logger = get_logger("binstall.cli")

app = typer.Typer(
    name="binstall",
    help="Build a release binary and install it into ~/bin",
    add_completion=False,
)
console = Console()


def apply_overrides(
    settings: Settings,
    install_root: Path | None = None,
    project_dir: Path | None = None,
    binary_name: str | None = None,
) -> Settings:
    """Return settings with CLI overrides applied."""
    update = {}
    if install_root is not None:
        update["install_root"] = install_root.expanduser()
    if project_dir is not None:
        update["project_dir"] = project_dir.expanduser()
    if binary_name:
        update["binary_name"] = binary_name
    return settings.model_copy(update=update) if update else settings


def print_summary(result: InstallResult, binary_name: str) -> None:
    """Print the success message and PATH guidance."""
    install_dir = result.target.directory

    console.print()
    console.print(f"[bold green]✓[/bold green] {binary_name} installed successfully!")
    console.print(f"  Location: {result.install_path}", markup=False, soft_wrap=True)
    console.print()
    if result.on_search_path:
        console.print(f"{install_dir} is already in your PATH.", markup=False, soft_wrap=True)
    else:
        console.print(f"Make sure {install_dir} is in your PATH:", markup=False, soft_wrap=True)
        console.print(f'  export PATH="{install_dir}:$PATH"', markup=False, soft_wrap=True)
    console.print()
    console.print(f"Then you can use: {binary_name} --help")


@app.command()
def install(
    install_root: Path | None = typer.Option(
        None, "--install-root", help="Directory to install the executable into"
    ),
    project_dir: Path | None = typer.Option(
        None, "--project-dir", help="Project root to build"
    ),
    binary_name: str | None = typer.Option(
        None, "--binary-name", help="Base name of the executable"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Build the project in release mode and install its executable."""
    settings = apply_overrides(get_settings(), install_root, project_dir, binary_name)
    setup_logging("DEBUG" if verbose else settings.log_level)
    logger.debug(f"Using settings: {settings.model_dump()}")

    pipeline = InstallPipeline(settings, console=console)
    try:
        result = pipeline.run()
    except InstallError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)

    print_summary(result, settings.binary_name)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
