"""CLI application entry point for gooeyblob.

This module provides the main CLI interface using Typer.
"""

import os
import re
from pathlib import Path
from typing import Annotated, Any

import typer

from gooeyblob import __version__
from gooeyblob.cli.output import (
    console,
    create_progress,
    print_batch_success,
    print_blob_summary,
    print_cancellation_notice,
    print_error,
    print_header,
    print_lines_info,
    print_presets,
    print_processing_info,
    print_step,
    print_subpath_table,
    print_written,
)
from gooeyblob.config import (
    BlobOptions,
    GooeyBlobSettings,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
)
from gooeyblob.config.settings import (
    DEFAULT_LINE_HEIGHT,
    DEFAULT_PRECISION,
    DEFAULT_ROUNDNESS,
    DEFAULT_SPREAD,
)
from gooeyblob.core import BatchProcessor, BlobGenerator
from gooeyblob.core.organic import (
    BLOB_PRESETS,
    GENERATED_VIEW_BOX,
    PRESET_VIEW_BOX,
    organic_blob_path,
    preset_names,
)
from gooeyblob.domain import BoundingBox, Line
from gooeyblob.exceptions import GooeyBlobError, InputError, LineParseError, OutputWriteError
from gooeyblob.io import (
    get_output_path,
    parse_line_spec,
    parse_subpaths,
    read_jobs,
    read_lines,
    write_path_svg,
    write_svg,
)
from gooeyblob.utils import configure_logging

app = typer.Typer(
    name="gooeyblob",
    help="Generate smooth text-hugging blob backgrounds as SVG paths.",
    add_completion=False,
    no_args_is_help=True,
)

LogFileOption = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOption = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOption = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Gooeyblob[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def _main(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate smooth text-hugging blob backgrounds as SVG paths."""


def _collect_lines(lines_json: Path | None, line_specs: list[str] | None) -> list[Line]:
    """Gather lines from a JSON file followed by any --line specs."""
    lines: list[Line] = []
    if lines_json is not None:
        lines.extend(read_lines(lines_json))
    for spec in line_specs or []:
        lines.append(parse_line_spec(spec, index=len(lines)))
    return lines


@app.command()
def render(
    lines_json: Annotated[
        Path | None,
        typer.Argument(
            help="JSON file with [{text, width}, ...] lines",
            show_default=False,
        ),
    ] = None,
    line: Annotated[
        list[str] | None,
        typer.Option(
            "--line",
            "-l",
            help="Line as TEXT:WIDTH (repeatable, appended after LINES_JSON)",
        ),
    ] = None,
    line_height: Annotated[
        float,
        typer.Option("--line-height", help="Distance between baselines in pixels"),
    ] = DEFAULT_LINE_HEIGHT,
    font_size: Annotated[
        float | None,
        typer.Option("--font-size", help="Font size in pixels (default: line height)"),
    ] = None,
    spread: Annotated[
        float,
        typer.Option("--spread", "-s", help="Padding around each line in pixels"),
    ] = DEFAULT_SPREAD,
    roundness: Annotated[
        float,
        typer.Option("--roundness", "-r", help="Corner roundness (0-1)"),
    ] = DEFAULT_ROUNDNESS,
    align: Annotated[
        str,
        typer.Option("--align", "-a", help="Line alignment (left|center|right)"),
    ] = "left",
    reference_width: Annotated[
        float | None,
        typer.Option("--reference-width", help="Container width (default: widest line)"),
    ] = None,
    style: Annotated[
        str,
        typer.Option("--style", help="Outline style (merged|pill)"),
    ] = "merged",
    precision: Annotated[
        int,
        typer.Option("--precision", help="Decimal places in path data (0-6)"),
    ] = DEFAULT_PRECISION,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output SVG path (default: {name}-blob.svg or blob.svg)",
        ),
    ] = None,
    fill: Annotated[
        str,
        typer.Option("--fill", help="Fill color"),
    ] = "#ffffff",
    opacity: Annotated[
        float,
        typer.Option("--opacity", help="Fill opacity (0-1)", min=0.0, max=1.0),
    ] = 1.0,
    margin: Annotated[
        float,
        typer.Option("--margin", help="Extra viewBox space around the blob", min=0.0),
    ] = 0.0,
    print_path: Annotated[
        bool,
        typer.Option("--print-path", help="Print the path data instead of writing SVG"),
    ] = False,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose console output"),
    ] = False,
    quiet: QuietOption = False,
) -> None:
    """Render a text-hugging blob for a block of measured lines.

    Example:
        gooeyblob render --line "Hello there:180" --line "world:96" --spread 8

    Writes blob.svg containing one smooth outline around both lines.
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = GooeyBlobSettings(
        blob=BlobOptions(
            line_height=line_height,
            font_size=font_size,
            spread=spread,
            roundness=roundness,
            align=align,
            reference_width=reference_width,
            style=style,
            precision=precision,
        ),
        output=OutputConfig(fill=fill, opacity=opacity, margin=margin),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet or print_path,
    )

    try:
        lines = _collect_lines(lines_json, line)
        if not lines:
            print_error(
                "No lines given",
                details="Pass a LINES_JSON file or one or more --line TEXT:WIDTH options.",
            )
            raise typer.Exit(code=1)

        result = BlobGenerator(settings.blob).generate(lines)

        if print_path:
            typer.echo(result.path)
            return

        if not quiet:
            print_header(__version__)
            print_step("Lines")
            print_lines_info(
                source=str(lines_json) if lines_json is not None else "command line",
                line_count=len(lines),
                empty_count=sum(1 for item in lines if item.is_empty()),
            )
            print_step("Outline")
            print_blob_summary(result, verbose=verbose)

        if output is None:
            output = get_output_path(lines_json) if lines_json is not None else Path("blob.svg")

        written = write_svg(result, output, settings.output, settings.blob.precision)

        if not quiet:
            print_written(str(written))

    except LineParseError as e:
        print_error(f"Could not read lines: {e.reason}", details=e.source)
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write SVG: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except GooeyBlobError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _job_filename(job_id: str) -> str:
    """Make a job id safe to use as a file name."""
    return re.sub(r"[^A-Za-z0-9._-]+", "_", job_id).strip("._") or "job"


@app.command()
def batch(
    jobs_json: Annotated[
        Path,
        typer.Argument(
            help="JSON file with [{id, lines, options}, ...] jobs",
            show_default=False,
        ),
    ],
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-d",
            help="Directory for SVG files (default: {name}-blobs next to JOBS_JSON)",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-j",
            help="Number of parallel workers (default: auto)",
            min=1,
        ),
    ] = None,
    fill: Annotated[
        str,
        typer.Option("--fill", help="Fill color"),
    ] = "#ffffff",
    margin: Annotated[
        float,
        typer.Option("--margin", help="Extra viewBox space around each blob", min=0.0),
    ] = 0.0,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Render many blobs in parallel, one SVG per job."""
    settings = GooeyBlobSettings(
        output=OutputConfig(fill=fill, margin=margin),
        processing=ProcessingConfig(max_workers=workers),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    try:
        jobs = read_jobs(jobs_json)
        target_dir = (
            output_dir if output_dir is not None else jobs_json.parent / f"{jobs_json.stem}-blobs"
        )

        if not quiet:
            print_header(__version__)
            print_step(f"Rendering {len(jobs)} jobs")
            print_processing_info(workers or os.cpu_count() or 1, is_auto=workers is None)

        processor = BatchProcessor(settings, logger=logger)

        try:
            if not quiet:
                with create_progress() as progress:
                    task_id = progress.add_task(f"Rendering {len(jobs)} jobs", total=len(jobs))

                    def update_progress(completed: int, *_: object) -> None:
                        progress.update(task_id, completed=completed)

                    results, stats = processor.process(
                        jobs, max_workers=workers, progress_callback=update_progress
                    )
            else:
                results, stats = processor.process(jobs, max_workers=workers)
        except KeyboardInterrupt:
            if not quiet:
                print_cancellation_notice()
            raise typer.Exit(code=130) from None

        for result in results:
            if "error" in result:
                print_error(f"Job {result['id']} failed: {result['error']}")
                continue
            _write_job_result(result, target_dir, settings.output)

        if not quiet:
            print_batch_success(
                output_dir=str(target_dir),
                total_time_s=stats.duration_seconds,
                rendered=stats.rendered_count,
                fallbacks=stats.fallback_count,
                errors=stats.error_count,
                avg_time_ms=stats.avg_job_time_ms,
                min_time_ms=stats.min_job_time_ms,
                max_time_ms=stats.max_job_time_ms,
            )

    except LineParseError as e:
        print_error(f"Could not read jobs: {e.reason}", details=e.source)
        raise typer.Exit(code=1)
    except OutputWriteError as e:
        print_error(f"Could not write SVG: {e.reason}", details=e.path)
        raise typer.Exit(code=1)
    except GooeyBlobError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _write_job_result(result: dict[str, Any], target_dir: Path, output: OutputConfig) -> Path:
    """Write one successful batch result as an SVG file."""
    rendered = result["result"]
    bounding_box = BoundingBox.from_dict(rendered["bounding_box"])
    return write_path_svg(
        rendered["path"],
        bounding_box.view_box(output.margin),
        target_dir / f"{_job_filename(result['id'])}.svg",
        output,
    )


@app.command()
def presets(
    name: Annotated[
        str | None,
        typer.Option("--name", "-n", help="Preset to output (see the list)"),
    ] = None,
    seed: Annotated[
        float | None,
        typer.Option("--seed", help="Generate an organic blob from this seed"),
    ] = None,
    complexity: Annotated[
        int,
        typer.Option("--complexity", help="Anchor points for generated blobs", min=3),
    ] = 8,
    contrast: Annotated[
        float,
        typer.Option(
            "--contrast",
            help="Radius variation for generated blobs (0-1)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.5,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the blob as SVG instead of printing it"),
    ] = None,
    fill: Annotated[
        str,
        typer.Option("--fill", help="Fill color"),
    ] = "#ffffff",
) -> None:
    """List decorative blob presets, or output one.

    With --name a preset is printed as path data (or written with -o);
    with --seed a new organic blob is generated instead.
    """
    if name is None and seed is None:
        print_presets(preset_names(), PRESET_VIEW_BOX)
        return

    if name is not None and seed is not None:
        print_error("Use either --name or --seed, not both")
        raise typer.Exit(code=1)

    if name is not None:
        if name not in BLOB_PRESETS:
            print_error(
                f"Unknown preset: {name}",
                details=f"Valid values: {', '.join(preset_names())}",
            )
            raise typer.Exit(code=1)
        path_data = BLOB_PRESETS[name]
        view_box = PRESET_VIEW_BOX
    else:
        path_data = organic_blob_path(seed, complexity, contrast)
        view_box = GENERATED_VIEW_BOX

    if output is None:
        typer.echo(path_data)
        return

    try:
        written = write_path_svg(path_data, view_box, output, OutputConfig(fill=fill))
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    print_written(str(written))


@app.command("inspect")
def inspect_path(
    path_data: Annotated[
        str,
        typer.Argument(help="SVG path data to inspect", show_default=False),
    ],
) -> None:
    """Re-parse path data and report its subpaths.

    Useful for checking that an emitted path is read back by an SVG parser
    as the expected number of closed subpaths.
    """
    try:
        subpaths = parse_subpaths(path_data)
    except InputError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    console.print(f"\n[bold]{len(subpaths)} subpaths[/bold]\n")
    if subpaths:
        print_subpath_table(
            [
                (i, len(sub.commands), len(sub.points), sub.curve_count, sub.is_closed_loop())
                for i, sub in enumerate(subpaths)
            ]
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
