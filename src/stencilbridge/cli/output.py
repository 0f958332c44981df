"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from stencilbridge.domain import SubPath
from stencilbridge.io import ImageAnalysis

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Stencilbridge[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_warning(message: str) -> None:
    """Print a non-fatal warning."""
    console.print(f"  [yellow]{SYM_WARN} {message}[/yellow]")


def print_document_info(
    input_path: str, source_type: str, shapes: int, width: float, height: float
) -> None:
    """Print input document information.

    Args:
        input_path: Path to the input file
        source_type: "SVG" or "traced raster"
        shapes: Number of drawable path elements
        width: Canvas width used for clamping
        height: Canvas height used for clamping
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(input_path)
    line1.append(f" ({source_type})")
    console.print(line1)
    console.print(f"  {shapes:,} shapes {SYM_DOT} canvas {width:g} × {height:g}")


def print_islands_found(islands: list[SubPath], unresolved: int, verbose: bool) -> None:
    """Print islands discovery result.

    Args:
        islands: Islands that will receive bridges
        unresolved: Islands without a resolvable parent
        verbose: Whether to show island ids
    """
    console.print(f"  [green]{len(islands)}[/green] islands")
    if unresolved:
        print_warning(f"{unresolved} islands without a resolvable parent")
    if verbose and islands:
        ids = ", ".join(island.id for island in islands[:20])
        if len(islands) > 20:
            ids += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(islands) - 20} more)"
        console.print(f"  {ids}")


def print_island_table(islands: list[SubPath], bridge_counts: dict[str, int]) -> None:
    """Print a table of islands with their bounds and bridge counts.

    Args:
        islands: Islands to list
        bridge_counts: Planned bridges per island id
    """
    table = Table(show_edge=False, pad_edge=False, box=None)
    table.add_column("Island", style="bold")
    table.add_column("Parent")
    table.add_column("Bounds (x, y, w, h)")
    table.add_column("Area", justify="right")
    table.add_column("Bridges", justify="right")

    for island in islands:
        b = island.bounds
        table.add_row(
            island.id,
            island.parent_id or "-",
            f"{b.x:g}, {b.y:g}, {b.width:g}, {b.height:g}",
            f"{island.area:,.0f}",
            str(bridge_counts.get(island.id, 0)),
        )

    console.print(table)


def print_image_analysis(analysis: ImageAnalysis) -> None:
    """Print the technical summary of a raster input.

    Args:
        analysis: Result of analyze_image
    """
    console.print("\n[bold]Image[/bold]\n")
    console.print(f"  Size                  {analysis.width} × {analysis.height} px")
    console.print(f"  Transparency          {'yes' if analysis.has_transparency else 'no'}")
    console.print(
        f"  Complexity            {analysis.complexity.value} "
        f"(stddev {analysis.mean_stddev:.1f})"
    )
    console.print(f"  Estimated islands     ~{analysis.estimated_islands}")


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


def print_success(
    output_path: str,
    file_size: str,
    total_time_s: float,
    shapes: int,
    islands: int,
    bridges: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        total_time_s: Total processing time in seconds
        shapes: Number of drawable path elements
        islands: Number of islands found
        bridges: Number of bridges generated
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(f"  {shapes} shapes {SYM_DOT} {islands} islands {SYM_DOT} {bridges} bridges")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {escape(details)}")


def print_cancellation_notice() -> None:
    """Print cancellation acknowledgment."""
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print("  No output file created")
