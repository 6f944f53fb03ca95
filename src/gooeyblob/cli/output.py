"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from gooeyblob.domain import SmoothedPath

console = Console()
error_console = Console(stderr=True)

SYM_STEP = "▸"
SYM_OK = "✓"
SYM_ERR = "✗"
SYM_DOT = "·"


def create_progress() -> Progress:
    """Create a rich progress bar for batch rendering.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Gooeyblob[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_lines_info(source: str, line_count: int, empty_count: int) -> None:
    """Print a summary of the input lines.

    Args:
        source: Where the lines came from (file path or "command line")
        line_count: Total number of lines
        empty_count: Number of empty lines
    """
    line = Text("  ")
    line.append(source)
    console.print(line)
    console.print(f"  {line_count} lines {SYM_DOT} {empty_count} empty")


def print_blob_summary(result: SmoothedPath, verbose: bool = False) -> None:
    """Print the shape of a generated blob.

    Args:
        result: Generated blob
        verbose: Also print the per-ring corner radii
    """
    bbox = result.bounding_box
    console.print(
        f"  {len(result.rings)} rings {SYM_DOT} {bbox.width:g} x {bbox.height:g} "
        f"{SYM_DOT} {len(result.path)} chars"
    )
    if result.fallback:
        console.print("  [yellow]Outline failed, bounding box used instead[/yellow]")
    if verbose:
        for i, ring in enumerate(result.rings):
            console.print(f"  ring {i}: {len(ring)} corners, max radius {ring.max_radius():g}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_processing_info(workers: int, is_auto: bool = False) -> None:
    """Print processing configuration.

    Args:
        workers: Number of parallel workers
        is_auto: Whether the count was auto-detected
    """
    auto_suffix = " (auto)" if is_auto else ""
    console.print(f"  {workers} workers{auto_suffix} {SYM_DOT} Ctrl+C to cancel")


def print_written(output_path: str) -> None:
    """Print the path of a written file."""
    line = Text(f"\n{SYM_OK} ", style="bold green")
    line.append(output_path, style="bold")
    console.print(line)


def print_batch_success(
    output_dir: str,
    total_time_s: float,
    rendered: int,
    fallbacks: int,
    errors: int,
    avg_time_ms: float | None = None,
    min_time_ms: float | None = None,
    max_time_ms: float | None = None,
) -> None:
    """Print batch summary.

    Args:
        output_dir: Directory the SVG files were written to
        total_time_s: Total processing time in seconds
        rendered: Number of jobs rendered
        fallbacks: Number of jobs that fell back to a bounding box
        errors: Number of errors encountered
        avg_time_ms: Average render time per job in milliseconds
        min_time_ms: Minimum render time per job in milliseconds
        max_time_ms: Maximum render time per job in milliseconds
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_dir, style="bold")
    console.print(line)

    error_style = "red" if errors > 0 else "green"
    console.print(
        f"  {rendered} blobs {SYM_DOT} {fallbacks} fallbacks {SYM_DOT} "
        f"[{error_style}]{errors} errors[/{error_style}]"
    )

    if avg_time_ms is not None:
        timing_str = f"{avg_time_ms:.1f}ms avg"
        if min_time_ms is not None and max_time_ms is not None:
            timing_str += f" ({min_time_ms:.1f}–{max_time_ms:.1f}ms range)"
        console.print(f"  {timing_str}")


def print_presets(names: list[str], view_box: tuple[float, float, float, float]) -> None:
    """Print the available organic presets."""
    box = " ".join(f"{v:g}" for v in view_box)
    console.print(f"\n[bold]{len(names)} presets[/bold] {SYM_DOT} viewBox {box}\n")
    for name in names:
        console.print(f"  {name}")


def print_subpath_table(rows: list[tuple[int, int, int, int, bool]]) -> None:
    """Print a table of parsed subpaths.

    Args:
        rows: (index, commands, points, curves, closed) per subpath
    """
    table = Table(show_header=True, header_style="bold")
    table.add_column("#", justify="right")
    table.add_column("commands", justify="right")
    table.add_column("points", justify="right")
    table.add_column("curves", justify="right")
    table.add_column("closed")
    for index, commands, points, curves, closed in rows:
        table.add_row(str(index), str(commands), str(points), str(curves), SYM_OK if closed else SYM_ERR)
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    error_console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        error_console.print(f"  {details}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} Cancelling... waiting for in-progress jobs")
