"""CLI application entry point for stencilbridge.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from stencilbridge import __version__
from stencilbridge.cli.output import (
    SYM_OK,
    console,
    print_cancellation_notice,
    print_document_info,
    print_error,
    print_header,
    print_image_analysis,
    print_island_table,
    print_islands_found,
    print_step,
    print_success,
)
from stencilbridge.config import (
    BridgeConfig,
    ClassificationMode,
    ClassifierConfig,
    LoggingConfig,
    RenderConfig,
    StencilBridgeSettings,
    TraceConfig,
)
from stencilbridge.core import StencilProcessor, StencilResult
from stencilbridge.exceptions import (
    DocumentLoadError,
    DocumentSaveError,
    InvalidOptionError,
    StencilBridgeError,
    TracerError,
)
from stencilbridge.io import DocumentWriter, ImageAnalysis, analyze_image, is_raster
from stencilbridge.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="stencilbridge",
    help="Turn traced outlines into laser-cuttable stencils by bridging enclosed islands.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Stencilbridge[/bold blue] v{__version__}")
        raise typer.Exit()


def parse_mode(mode: str) -> ClassificationMode:
    """Parse the --mode option.

    Raises:
        InvalidOptionError: If the value is not a known mode
    """
    try:
        return ClassificationMode(mode.lower())
    except ValueError:
        raise InvalidOptionError(
            "--mode", mode, [m.value for m in ClassificationMode]
        ) from None


@app.command()
def stencilize(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="Path to an SVG outline or a raster image (PNG, JPG, WebP, GIF, BMP)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {name}_stencil.svg)",
        ),
    ] = None,
    bridge_width: Annotated[
        float,
        typer.Option(
            "--bridge-width",
            "-w",
            help="Bridge width in millimeters",
            min=0.1,
            max=50.0,
        ),
    ] = 2.0,
    threshold: Annotated[
        int,
        typer.Option(
            "--threshold",
            "-t",
            help="Binarization threshold for raster input (0-255)",
            min=0,
            max=255,
        ),
    ] = 128,
    blur: Annotated[
        float,
        typer.Option(
            "--blur",
            "-b",
            help="Blur radius applied to raster input before thresholding (0-10)",
            min=0.0,
            max=10.0,
        ),
    ] = 0.0,
    invert: Annotated[
        bool,
        typer.Option(
            "--invert",
            "-i",
            help="Swap black and white in raster input",
        ),
    ] = False,
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Island classification (auto|grouped|containment)",
        ),
    ] = "auto",
    bridge_color: Annotated[
        str,
        typer.Option(
            "--bridge-color",
            help="Fill color of bridges (the material color)",
        ),
    ] = "#FFFFFF",
    no_bridges: Annotated[
        bool,
        typer.Option(
            "--no-bridges",
            help="Omit the bridges layer from the output",
        ),
    ] = False,
    list_islands: Annotated[
        bool,
        typer.Option(
            "--list-islands",
            help="List all islands and exit",
        ),
    ] = False,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            help="Analyze and show what would be done without writing output",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
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
    """Turn an outline into a laser-cuttable stencil by adding bridges to islands.

    SVG input is used as is. Raster input is binarized and traced with potrace
    first.

    Example:
        stencilbridge logo.svg

    This will create logo_stencil.svg with the original paths in a "stencil"
    layer and the generated bridges in a "bridges" layer.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not input_file.exists():
        print_error(
            f"Input file not found: {input_file}",
            details=f"The file '{input_file}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not input_file.is_file():
        print_error(
            f"Input path is not a file: {input_file}",
            details="Please provide a path to an SVG document or a raster image.",
        )
        raise typer.Exit(code=1)

    try:
        classification_mode = parse_mode(mode)
    except InvalidOptionError as e:
        print_error(f"Invalid mode: {e.value}", details=f"Valid values: {', '.join(e.valid)}")
        raise typer.Exit(code=1)

    try:
        settings = StencilBridgeSettings(
            bridge=BridgeConfig(width_mm=bridge_width),
            render=RenderConfig(show_bridges=not no_bridges, bridge_color=bridge_color),
            trace=TraceConfig(threshold=threshold, blur=blur, invert=invert),
            classifier=ClassifierConfig(mode=classification_mode),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        print_error("Invalid option value", details=_format_validation_errors(e))
        raise typer.Exit(code=1) from None

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )

    if not quiet:
        print_header(__version__)

    try:
        processor = StencilProcessor(settings, logger=logger)

        if not quiet:
            print_step("Tracing image" if is_raster(input_file) else "Loading document")

        document = processor.load_document(input_file)
        result = processor.process_document(document, source=str(input_file))

        if not quiet:
            print_document_info(
                input_path=str(input_file),
                source_type="traced raster" if is_raster(input_file) else "SVG",
                shapes=result.stats.shapes_count,
                width=result.canvas_width,
                height=result.canvas_height,
            )
            print_step("Detecting islands")
            print_islands_found(
                islands=result.islands,
                unresolved=result.stats.unresolved_count,
                verbose=verbose,
            )

        analysis = None
        if (list_islands or dry_run) and is_raster(input_file):
            analysis = analyze_image(input_file)

        if list_islands:
            _handle_list_islands(result, quiet, analysis)
            raise typer.Exit(code=0)

        if dry_run:
            _handle_dry_run(result, settings, quiet, verbose, analysis)
            raise typer.Exit(code=0)

        actual_output_path = output or DocumentWriter.get_stencil_path(input_file)
        if not quiet:
            print_step("Writing stencil")

        DocumentWriter(actual_output_path).save(result.document)

        if not quiet:
            print_success(
                output_path=str(actual_output_path),
                file_size=_format_file_size(actual_output_path),
                total_time_s=result.stats.duration_seconds,
                shapes=result.stats.shapes_count,
                islands=len(result.islands),
                bridges=len(result.bridges),
            )

    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice()
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except DocumentLoadError as e:
        print_error(f"Could not load document: {e.reason}")
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save document: {e.reason}")
        raise typer.Exit(code=1)
    except TracerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except StencilBridgeError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_validation_errors(error: ValidationError) -> str:
    """Join pydantic validation errors into one line per option."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
        for err in error.errors()
    )


def _handle_list_islands(
    result: StencilResult, quiet: bool, analysis: ImageAnalysis | None = None
) -> None:
    """Handle --list-islands mode.

    Args:
        result: Processed document
        quiet: Suppress headings (the island list is always printed)
        analysis: Raster input summary, if the input was an image
    """
    islands = result.islands
    bridge_counts: dict[str, int] = {}
    for bridge in result.bridges:
        bridge_counts[bridge.island_id] = bridge_counts.get(bridge.island_id, 0) + 1

    if not quiet:
        if analysis is not None:
            print_image_analysis(analysis)
        console.print(f"\n[bold]{len(islands)} islands[/bold]\n")

    if islands:
        print_island_table(islands, bridge_counts)


def _handle_dry_run(
    result: StencilResult,
    settings: StencilBridgeSettings,
    quiet: bool,
    verbose: bool,
    analysis: ImageAnalysis | None = None,
) -> None:
    """Handle --dry-run mode.

    Args:
        result: Processed document
        settings: Stencilbridge settings
        quiet: Suppress output
        verbose: Show verbose output
        analysis: Raster input summary, if the input was an image
    """
    if quiet:
        return

    if analysis is not None:
        print_image_analysis(analysis)

    stats = result.stats
    console.print("\n[bold]Analysis[/bold]\n")
    console.print(f"  Shapes                {stats.shapes_count}")
    console.print(f"  Contours              {stats.contours_count}")
    console.print(f"  Islands               {len(result.islands)}")
    console.print(f"  Bridges               {len(result.bridges)}")
    console.print(
        f"  Bridge width          {settings.bridge.width_mm:g} mm "
        f"({settings.bridge.document_width():g} units)"
    )

    if verbose and stats.step_timings_ms:
        console.print("\n[bold]Timings[/bold]")
        for step, duration_ms in stats.step_timings_ms.items():
            console.print(f"  {step:<21} {duration_ms:.2f}ms")

    console.print(f"\n[bold green]{SYM_OK} Dry run complete[/bold green] – no changes made")


def _format_file_size(path: Path) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    try:
        size_bytes = path.stat().st_size
    except OSError:
        return "unknown"
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    else:
        return f"{size_bytes / (1024 * 1024):.1f} MB"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
