"""Command-line interface for buffer preparation calculations."""

from __future__ import annotations

import argparse
import logging
import sys
import time
import warnings

from . import config
from .data_processing import load_requests
from .engine import compute_many
from .output import save_family_table, save_results_to_csv
from .plotting import plot_buffer_composition, plot_family_overview
from .reporting import describe_result, family_table, results_to_dataframe
from .schema import BufferRequest, BufferType

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bufferprep",
        description=(
            "Compute the reagent amounts needed to prepare a phosphate, Tris, "
            "citrate, acetate or carbonate buffer."
        ),
    )
    parser.add_argument(
        "-b", "--buffer", default=config.DEFAULT_BUFFER_TYPE,
        help=f"buffer type: {', '.join(m.value for m in BufferType)}",
    )
    parser.add_argument("--ph", type=float, default=config.DEFAULT_TARGET_PH,
                        help="target pH (0-14)")
    parser.add_argument("--volume", type=float, default=config.DEFAULT_VOLUME_L,
                        help="final volume in L")
    parser.add_argument("--concentration", type=float,
                        default=config.DEFAULT_CONCENTRATION_M,
                        help="total buffer concentration in mol/L")
    parser.add_argument("--temperature", type=float,
                        default=config.DEFAULT_TEMPERATURE_C,
                        help="temperature in deg C (used by Tris only)")
    parser.add_argument("--batch", metavar="CSV",
                        help="compute every request in a CSV file instead")
    parser.add_argument("-o", "--output-dir", default=config.OUTPUT_DIR,
                        help="directory for CSV and plot output")
    parser.add_argument("--save", action="store_true",
                        help="write the recipes to CSV in the output directory")
    parser.add_argument("--plot", action="store_true",
                        help=(
                            "write a composition plot for each buffer type used; "
                            "batch runs add a family overview at the batch "
                            "temperature, or the default when temperatures differ"
                        ))
    parser.add_argument("--list", action="store_true", dest="list_families",
                        help="print the supported buffer systems and exit")
    parser.add_argument("--no-validate", action="store_true",
                        help="skip input range checks")
    return parser


def _collect_requests(args) -> list:
    if args.batch:
        logging.info("Loading batch requests from %s", args.batch)
        return load_requests(args.batch)
    return [
        BufferRequest(
            buffer_type=args.buffer,
            target_ph=args.ph,
            volume=args.volume,
            concentration=args.concentration,
            temperature=args.temperature,
        )
    ]


def main(argv=None) -> int:
    """Run the calculator; returns a process exit code."""
    logging.basicConfig(
        level=getattr(logging, config.LOG_LEVEL, logging.INFO),
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    args = build_parser().parse_args(argv)

    if args.list_families:
        print(family_table().to_string(index=False))
        if args.save:
            save_family_table(args.output_dir)
        return 0

    start_time = time.time()
    try:
        requests = _collect_requests(args)
    except (OSError, KeyError, ValueError) as exc:
        logging.error("Could not read requests: %s", exc)
        return 2

    # Buffer-region warnings are carried on each result and printed below.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", UserWarning)
        outcomes = compute_many(requests, validate=not args.no_validate)

    for outcome in outcomes:
        print(describe_result(outcome))
        print()

    n_failed = sum(1 for outcome in outcomes if not outcome.ok)
    logging.info(
        "Computed %d buffer recipes (%d rejected) in %.3f seconds",
        len(outcomes) - n_failed,
        n_failed,
        time.time() - start_time,
    )

    if args.save:
        save_results_to_csv(results_to_dataframe(outcomes, requests), args.output_dir)

    if args.plot:
        plotted = set()
        for outcome, request in zip(outcomes, requests):
            if not outcome.ok:
                continue
            key = (outcome.buffer_type, request.temperature)
            if key in plotted:
                continue
            target = outcome.target_ph if len(requests) == 1 else None
            path = plot_buffer_composition(
                outcome.buffer_type, request.temperature, target, args.output_dir
            )
            plotted.add(key)
            logging.info("  - Composition plot: %s", path)
        if len(requests) > 1:
            temperatures = {request.temperature for request in requests}
            overview_t = (
                temperatures.pop() if len(temperatures) == 1
                else config.DEFAULT_TEMPERATURE_C
            )
            path = plot_family_overview(overview_t, args.output_dir)
            logging.info("  - Family overview: %s", path)

    return 1 if n_failed else 0
