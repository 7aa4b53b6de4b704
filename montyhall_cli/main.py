"""
Main entry point for CLI Simulator.

Usage:
    python -m montyhall_cli [options]

Example:
    python -m montyhall_cli --trials 10000 --seed 42
"""

import argparse
import sys
from typing import List, Optional

from .config_builder import build_config, format_config_summary
from .runner import run_with_progress
from .reporter import print_full_report, export_to_csv, export_detailed_csv


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="montyhall-sim",
        description="Monty Hall CLI Simulator - Compare the stay and switch strategies",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m montyhall_cli
  python -m montyhall_cli --trials 100000 --seed 7
  python -m montyhall_cli --trials 1000 --output results.csv --plot convergence.png
        """
    )

    # Basic arguments
    parser.add_argument(
        "-t", "--trials",
        type=int,
        default=10000,
        help="Number of games to play (default: 10000)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility"
    )
    parser.add_argument(
        "--decimals",
        type=int,
        default=2,
        help="Decimal places for reported proportions (default: 2)"
    )

    # Outputs
    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output CSV file path (a <name>_detailed CSV is written too)"
    )
    parser.add_argument(
        "--plot",
        type=str,
        default=None,
        help="Save a running win rate plot to this image path"
    )

    # Output control
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Show detailed output"
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide progress bar"
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    try:
        config = build_config(args)

        # Print configuration
        print("\n" + "=" * 60)
        print("Monty Hall CLI Simulator")
        print("=" * 60)
        print("\nConfiguration:")
        print(format_config_summary(config))

        results = run_with_progress(
            config,
            show_progress=not args.no_progress,
            verbose=args.verbose,
        )

        # Print results
        print("\n")
        print_full_report(results, config)

        # Export to CSV if requested
        if args.output:
            export_to_csv(results, args.output, config.decimals)
            export_detailed_csv(results, args.output)

        if args.plot:
            # matplotlib is only loaded when a plot is requested
            from .plots import save_convergence_plot
            save_convergence_plot(results, args.plot)

        return 0

    except ValueError as e:
        print(f"Configuration error: {e}")
        return 1
    except KeyboardInterrupt:
        print("\n\nInterrupted by user.")
        return 130
    except Exception as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
