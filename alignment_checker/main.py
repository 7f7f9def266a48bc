import argparse
from pathlib import Path

from alignment_checker import config
from alignment_checker.design.aggregate import format_mean_vp
from alignment_checker.design.csv_reader import CSVReader
from alignment_checker.design.design_parameters import DesignParameters
from alignment_checker.errors import AlignmentError
from alignment_checker.log_cleaner import cleanup_old_logs
from alignment_checker.logger import CheckerLogger
from alignment_checker.pipeline import run_pipeline
from alignment_checker.utils import load_checks, get_output_path


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Alignment Checker: Assigns design speeds to alignment elements and checks their lengths."
    )
    parser.add_argument(
        "input_file", help="Path to the element list (CSV export)", type=Path
    )
    parser.add_argument(
        "-c", "--checks", nargs="+", default=list(config.DEFAULT_CHECKS),
        help="List of checks to run. Example: -c vp_diff too_short"
    )
    parser.add_argument(
        "--all", action="store_true", dest="print_all", help="Print all elements, not only the faulty ones"
    )
    parser.add_argument(
        "-o", "--output", nargs="?", const="", default=None,
        help="Export the table to a .csv file or a speed band to a .dxf file "
             "(without a path: <input>_checked.csv)"
    )
    parser.add_argument(
        "--delimiter", default=",", help="Field delimiter of the input file"
    )
    parser.add_argument(
        "--encoding", default="utf-8", help="Encoding of the input file"
    )
    parser.add_argument(
        "--max_vp", type=int, default=config.DESIGN_LIMITS["max_vp"],
        help="Upper limit for the design speed of radius elements (km/h)"
    )
    parser.add_argument(
        "--vp_tolerance", type=int, default=config.DESIGN_LIMITS["vp_diff_tolerance"],
        help="Allowed design speed difference between neighbouring elements (km/h)"
    )
    parser.add_argument(
        "--cleanup-logs", action="store_true",
        help="Clean up log files older than 1 week before running"
    )
    parser.add_argument(
        "--log-dir", default="logs", help="Folder for log files"
    )
    parser.add_argument(
        "--report-dir", default="reports", help="Folder for verbose reports"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Save detailed per-element report"
    )
    return parser.parse_args(argv)


def main(cli_args=None):
    args = parse_args() if cli_args is None else cli_args

    logger = CheckerLogger(verbose=args.verbose, log_dir=args.log_dir, report_dir=args.report_dir)
    try:
        return _run(args, logger)
    finally:
        logger.cleanup()


def _run(args, logger):
    if args.cleanup_logs:
        cleanup_old_logs(args.log_dir, args.report_dir, logger=logger)

    if not args.input_file.exists():
        logger.log(f"Input file does not exist: {args.input_file}", level="ERROR")
        raise SystemExit(1)

    logger.log(f"Input file: {args.input_file}")
    logger.log(f"Checks enabled: {args.checks}")

    parameters = DesignParameters(max_vp=args.max_vp, vp_diff_tolerance=args.vp_tolerance)

    # ------------------------------------------------------------------
    # 1. Read element list
    # ------------------------------------------------------------------
    reader = CSVReader(delimiter=args.delimiter, encoding=args.encoding, logger=logger)
    try:
        elements = reader.load_csv(args.input_file)
    except (OSError, UnicodeDecodeError) as e:
        logger.log(f"Failed to read input file: {e}", level="ERROR")
        raise SystemExit(1)
    except AlignmentError as e:
        logger.log(f"Invalid input: {e}", level="ERROR")
        raise SystemExit(1)

    # ------------------------------------------------------------------
    # 2. Assign speeds, derive lengths and run checks
    # ------------------------------------------------------------------
    check_params = {
        'verbose': args.verbose,
        'vp_tolerance': parameters.vp_diff_tolerance,
        'vp_ceiling': parameters.vp_ceiling,
    }
    checks = load_checks(args.checks, check_params, logger)

    try:
        report = run_pipeline(elements, parameters, checks, include_all=args.print_all, logger=logger)
    except AlignmentError as e:
        logger.log(f"Check aborted: {e}", level="ERROR")
        raise SystemExit(1)

    # ------------------------------------------------------------------
    # 3. Print table and export
    # ------------------------------------------------------------------
    print(report.render())

    if args.output is not None:
        output_path = Path(args.output) if args.output else get_output_path(args.input_file)
        try:
            report.save(output_path)
            logger.log(f"Saved report to: {output_path}")
        except OSError as e:
            logger.log(f"Failed to save output file: {e}", level="ERROR")
            raise SystemExit(1)

    print(format_mean_vp(report.mean_vp()))

    # ------------------------------------------------------------------
    # 4. Summary
    # ------------------------------------------------------------------
    summary = report.summary()
    logger.log("=== Check Summary ===")
    logger.log(
        f"{summary['count']} element(s), {summary['total_length']:.2f}m: "
        + ", ".join(f"{count} {kind}" for kind, count in summary['kinds'].items())
    )
    for check in checks:
        logger.log(f"{check.__class__.__name__}: {check.get_error_count()} issue(s)")

    if summary['flagged'] == 0:
        logger.log("No issues detected.")
    else:
        logger.log(f"Elements with issues: {summary['flagged']}")

    return report


if __name__ == "__main__":
    main()
