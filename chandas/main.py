#!/usr/bin/env python3
"""
Chandas - Sanskrit scansion and meter identification

Command line entry point.
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from config.config_manager import ConfigManager, get_config_manager
from chandas import __version__
from chandas.analysis.syllable_scanner import SyllableScanner
from chandas.data.meter_registry import MeterRegistry, MeterDataError
from chandas.evaluation.meter_classifier import MeterClassifier
from chandas.evaluation.verse_analyzer import VerseAnalyzer
from chandas.interface.cli_interface import CLIInterface
from chandas.interface.file_interface import FileInterface
from chandas.utils.logging_config import configure_logging


def create_analyzer(config: ConfigManager, meters_file: Optional[str] = None) -> VerseAnalyzer:
    """Create the analysis pipeline from configuration."""
    analysis_config = config.get_analysis_config()
    custom_file = meters_file or config.get_custom_meters_path()

    registry = MeterRegistry.from_yaml(custom_file) if custom_file else MeterRegistry()

    return VerseAnalyzer(
        scanner=SyllableScanner(),
        classifier=MeterClassifier(registry, prefix_limit=analysis_config.prefix_limit),
        show_ganas=analysis_config.show_ganas
    )


def main(argv=None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Chandas - Sanskrit scansion and meter identification",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive: type padas, blank line to analyse
  chandas

  # Analyse a single verse
  chandas -t "धर्मक्षेत्रे कुरुक्षेत्रे"

  # Batch analysis to JSON
  chandas -f verses.txt -o results.json

  # With extra meter templates
  chandas -m config/extra_meters.yaml
        """
    )

    parser.add_argument(
        "-c", "--config",
        type=str,
        help="Path to configuration file (default: config/default_config.yaml)"
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "-t", "--text",
        type=str,
        help="Verse to analyse; separate padas with newlines"
    )
    source.add_argument(
        "-f", "--file",
        type=str,
        help="Text or JSON file of verses to analyse in batch"
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output JSON file for batch analysis (default: stdout)"
    )

    parser.add_argument(
        "-m", "--meters",
        type=str,
        help="YAML file with additional meter templates"
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON"
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Chandas {__version__}"
    )

    args = parser.parse_args(argv)

    if args.config and not Path(args.config).exists():
        print(f"Error: Config file not found: {args.config}", file=sys.stderr)
        return 1

    config = get_config_manager(args.config)
    log_config = config.get_logging_config()
    configure_logging(log_config.level, log_config.format, log_config.file)

    try:
        analyzer = create_analyzer(config, args.meters)
    except MeterDataError as e:
        print(f"Error loading meters: {e}", file=sys.stderr)
        return 1

    output_format = "json" if args.json else config.get_interface_config().output_format
    if output_format not in ("text", "json"):
        print(f"Error: Unsupported output format: {output_format}", file=sys.stderr)
        return 1

    if args.file:
        try:
            interface = FileInterface(args.file, args.output, analyzer=analyzer)
        except (OSError, ValueError) as e:
            print(f"Error reading {args.file}: {e}", file=sys.stderr)
            return 1
        with interface:
            interface.run()
        return 0

    interface = CLIInterface(
        analyzer=analyzer,
        output_format=output_format,
        name=config.get_interface_config().name
    )

    if args.text is not None:
        interface.analyze_and_print(args.text.replace("\\n", "\n"))
        return 0

    with interface:
        interface.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
