"""Command-line interface for prosedoc."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .config import PipelineConfig
from .document import new_document
from .errors import ProseError
from .model import Model
from .pipeline import DocumentPipeline

COMMANDS = ("process", "parse")


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="prosedoc",
        description="Segment, tokenize, tag and extract entities from text",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Using a config file
  prosedoc --config config.yaml

  # Direct arguments
  prosedoc process --input data/input.jsonl --output data/output --format json

  # Tokens only, no tagging or entities
  prosedoc process --input notes.txt --no-segment --no-tag --no-extract

  # Parse a single text and print it as JSON
  prosedoc parse --text "Dr. Smith went home. He slept."
        """,
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    process_parser = subparsers.add_parser("process", help="Process an input file")
    setup_process_parser(process_parser)

    parse_parser = subparsers.add_parser("parse", help="Parse a single text")
    setup_parse_parser(parse_parser)

    return parser


def add_stage_arguments(parser: argparse.ArgumentParser) -> None:
    """Add stage toggles and the model option."""
    parser.add_argument(
        "--no-segment",
        action="store_true",
        help="Disable sentence segmentation",
    )
    parser.add_argument(
        "--no-tokenize",
        action="store_true",
        help="Disable tokenization (and everything that needs tokens)",
    )
    parser.add_argument(
        "--no-tag",
        action="store_true",
        help="Disable part-of-speech tagging",
    )
    parser.add_argument(
        "--no-extract",
        action="store_true",
        help="Disable named-entity extraction",
    )
    parser.add_argument(
        "--model",
        type=Path,
        help="Path to a YAML model file (default: built-in model)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )


def setup_process_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for process command."""
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--input",
        type=Path,
        help="Path to input file (JSONL or plain text, one document per line)",
    )
    parser.add_argument(
        "--input-format",
        choices=["auto", "jsonl", "text"],
        help="Input file format (default: auto, by file extension)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output directory for the result tables",
    )
    parser.add_argument(
        "--format",
        choices=["csv", "json", "parquet"],
        help="Output table format (default: csv)",
    )
    parser.add_argument(
        "--max-documents",
        type=int,
        help="Stop after this many documents",
    )
    add_stage_arguments(parser)


def setup_parse_parser(parser: argparse.ArgumentParser) -> None:
    """Setup arguments for parse command."""
    parser.add_argument(
        "--text",
        type=str,
        help="Text to parse (default: read from stdin)",
    )
    parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON indentation (default: 2)",
    )
    add_stage_arguments(parser)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments, defaulting to the process command."""
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv or argv[0] not in COMMANDS and argv[0] not in {"-h", "--help"}:
        argv.insert(0, "process")
    return build_parser().parse_args(argv)


def build_config(args: argparse.Namespace) -> PipelineConfig:
    """Build configuration from arguments."""
    # Start with config file if provided
    if getattr(args, "config", None):
        config = PipelineConfig.from_yaml(args.config)
    else:
        config = PipelineConfig()

    # Override with command-line arguments
    if getattr(args, "input", None):
        config.input_file = args.input
    if getattr(args, "input_format", None):
        config.input_format = args.input_format
    if getattr(args, "output", None):
        config.output.output_dir = args.output
    if getattr(args, "format", None):
        config.output.format = args.format
    if getattr(args, "max_documents", None):
        config.max_documents = args.max_documents
    if getattr(args, "model", None):
        config.model = args.model

    # Stage overrides
    if getattr(args, "no_segment", False):
        config.stages.segment = False
    if getattr(args, "no_tokenize", False):
        config.stages.tokenize = False
    if getattr(args, "no_tag", False):
        config.stages.tag = False
    if getattr(args, "no_extract", False):
        config.stages.extract = False

    return config


def handle_parse(args: argparse.Namespace) -> int:
    """Handle parse command."""
    text = args.text if args.text is not None else sys.stdin.read()
    config = build_config(args)

    try:
        model = Model.load(config.model) if config.model else None
        doc = new_document(text, *config.stages.to_options(model))
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except ProseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(doc.to_dict(), indent=args.indent, ensure_ascii=False))
    return 0


def handle_process(args: argparse.Namespace) -> int:
    """Handle process command."""
    try:
        config = build_config(args)
    except (ValueError, FileNotFoundError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not config.input_file:
        print("Error: Input file is required (use --input or --config)", file=sys.stderr)
        return 1

    # Run the pipeline
    try:
        pipeline = DocumentPipeline(config)
        doc_count = pipeline.run()
        print(f"\nProcessed {doc_count} documents")
        return 0
    except FileNotFoundError as e:
        print(f"Error: File not found - {e}", file=sys.stderr)
        return 1
    except ProseError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        logging.exception("Processing failed")
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv=None) -> int:
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose if hasattr(args, "verbose") else False)

    if args.command == "parse":
        return handle_parse(args)
    return handle_process(args)


if __name__ == "__main__":
    sys.exit(main())
