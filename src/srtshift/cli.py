"""
Command-line interface for srtshift.

Main entry point for shifting SRT subtitle timestamps.
"""

import sys
from pathlib import Path

import click
from tqdm import tqdm

from . import __version__
from .config import DEFAULT_INPUT, DEFAULT_OUTPUT, ShiftConfig
from .offset import calculate_offset
from .rewriter import shift_subtitles
from .srt_file import load_srt, write_srt
from .timecode import DEFAULT_FPS
from .utils import SrtShiftError, format_offset, get_logger, setup_logging

logger = get_logger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="srtshift")
@click.argument("new_time")
@click.argument(
    "reference_index",
    required=False,
    default=1,
    type=click.IntRange(min=1),
)
@click.option(
    "-i",
    "--input",
    "input_path",
    default=DEFAULT_INPUT,
    type=click.Path(dir_okay=False),
    help=f"Input SRT file path. Default: {DEFAULT_INPUT}",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    default=DEFAULT_OUTPUT,
    type=click.Path(dir_okay=False),
    help=f"Output SRT file path. Default: {DEFAULT_OUTPUT}",
)
@click.option(
    "--fps",
    default=DEFAULT_FPS,
    type=click.IntRange(min=1),
    help=f"Frame rate for HH:MM:SS:FF timecodes. Default: {DEFAULT_FPS}",
)
@click.option(
    "--encoding",
    default=None,
    help="Input encoding. Default: auto-detect",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose logging",
)
@click.option(
    "--log-file",
    type=click.Path(),
    help="Optional log file path",
)
def main(
    new_time,
    reference_index,
    input_path,
    output_path,
    fps,
    encoding,
    verbose,
    log_file,
):
    """
    srtshift - shift every SRT timestamp from a reference caption onward

    Moves caption REFERENCE_INDEX (default 1) so that it starts at NEW_TIME
    and shifts every later caption by the same amount. Earlier captions
    keep their times. Caption numbers are rewritten as 1, 2, 3, ...

    \b
    Arguments:
        NEW_TIME: New start time, HH:MM:SS,mmm or HH:MM:SS:FF
        REFERENCE_INDEX: Caption number to anchor on (default 1)

    \b
    Example:
        srtshift 00:00:49,111
        srtshift 00:00:41:17 2 -i movie.srt -o movie.shifted.srt
    """
    setup_logging(verbose=verbose, log_file=log_file)

    config = ShiftConfig(
        new_time=new_time,
        reference_index=reference_index,
        input_path=input_path,
        output_path=output_path,
        fps=fps,
        encoding=encoding,
    )

    try:
        result = run_pipeline(config.validate())

        display_summary(result, config)

        click.echo(f"\n{output_path} was updated!\n")
        sys.exit(0)

    except SrtShiftError as e:
        click.echo(f"\nError: {e}\n", err=True)
        logger.error(f"Shift failed: {e}", exc_info=True)
        sys.exit(1)

    except KeyboardInterrupt:
        click.echo("\n\nInterrupted by user\n", err=True)
        sys.exit(130)

    except Exception as e:
        click.echo(f"\nUnexpected error: {e}\n", err=True)
        logger.error(f"Unexpected error: {e}", exc_info=True)
        sys.exit(1)


def run_pipeline(config: ShiftConfig) -> dict:
    """
    Run the complete shift pipeline.

    Nothing is written unless every earlier phase succeeds.

    Args:
        config: Run configuration

    Returns:
        Dictionary with pipeline results and statistics
    """
    results = {}

    with tqdm(total=4, desc="Pipeline Progress", unit="phase") as pbar:
        pbar.set_description("Loading subtitles")
        loaded = load_srt(config.input_path, encoding=config.encoding)
        results["input"] = loaded
        pbar.update(1)

        pbar.set_description("Computing offset")
        offset = calculate_offset(
            document=loaded["document"],
            new_time=config.new_time,
            reference_index=config.reference_index,
            fps=config.fps,
        )
        results["offset"] = offset
        pbar.update(1)

        pbar.set_description("Rewriting")
        rewritten = shift_subtitles(
            document=loaded["document"],
            offset=offset,
            reference_index=config.reference_index,
            fps=config.fps,
        )
        results["rewrite"] = rewritten
        pbar.update(1)

        pbar.set_description("Writing")
        results["output"] = write_srt(
            config.output_path,
            rewritten["text"],
            encoding=loaded["encoding"],
        )
        pbar.update(1)

    return results


def display_summary(results: dict, config: ShiftConfig):
    """
    Display pipeline summary statistics.

    Args:
        results: Pipeline results dictionary
        config: Run configuration
    """
    click.echo(f"\n{'='*60}")
    click.echo("Summary")
    click.echo(f"{'='*60}")

    click.echo(f"New time:      {config.new_time} (caption {config.reference_index})")

    if "input" in results:
        loaded = results["input"]
        click.echo(
            f"Input:         {loaded['total_captions']} captions, "
            f"{loaded['total_lines']} lines ({loaded['encoding']})"
        )

    if "offset" in results:
        click.echo(f"Offset:        {format_offset(results['offset'])}")

    if "rewrite" in results:
        rewrite = results["rewrite"]
        click.echo(
            f"Rewritten:     {rewrite['renumbered']} captions renumbered, "
            f"{rewrite['shifted']} shifted"
        )

    if "output" in results:
        click.echo(f"File:          {Path(results['output']['output_file'])}")

    click.echo(f"{'='*60}")


if __name__ == "__main__":
    main()
