"""
Command line entry point for funcgraph
Extract functions, return types and call lists from JavaScript sources
"""
import argparse
import logging
import os
import sys

from funcgraph.config import VARIANTS, ScannerConfig
from funcgraph.errors import FuncGraphError
from funcgraph.parsers.repository_scanner import RepositoryScanner
from funcgraph.utils.call_graph_builder import CallGraphBuilder
from funcgraph.utils.json_output import records_to_json
from funcgraph.utils.node_search import NodeSearch
from funcgraph.utils.report_printer import ReportPrinter


def build_parser():
    parser = argparse.ArgumentParser(description='Extract function metadata and call lists from JavaScript code')
    parser.add_argument('path', help='JavaScript file or directory to analyze')
    parser.add_argument('--variant', choices=VARIANTS,
                        help='rich: return types and calls; signature: signatures with positions (default: rich)')
    parser.add_argument('--json', action='store_true', help='Print records as JSON')
    parser.add_argument('--output', help='Write JSON records to this file')
    parser.add_argument('--workers', type=int, help='Files to extract in parallel (default: 1)')
    parser.add_argument('--function', help='Show details for a function or Class.method')
    parser.add_argument('--class', dest='class_name', help='Show the methods of a class')
    parser.add_argument('--log-level', help='Logging level (default: WARNING)')
    parser.add_argument('--env-file', help='Path to a .env file')
    return parser


def load_config(args):
    """Environment config overridden by explicit flags"""
    config = ScannerConfig.from_env(args.env_file)
    return ScannerConfig(
        variant=args.variant or config.variant,
        max_file_size=config.max_file_size,
        workers=args.workers if args.workers is not None else config.workers,
        log_level=(args.log_level or config.log_level).upper(),
        ignore_patterns=config.ignore_patterns
    )


def main(argv=None):
    """Main function to run the extractor"""
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(level=config.log_level, format='%(levelname)s %(name)s: %(message)s')

    quiet = args.json and not args.output
    scanner = RepositoryScanner(config, verbose=not quiet)

    try:
        if os.path.isdir(args.path):
            results = scanner.scan_repository(args.path)
        else:
            scanner.scan_file(args.path, os.path.basename(args.path))
            results = scanner.results
    except (OSError, FuncGraphError) as e:
        print(f"❌ Error during analysis: {e}", file=sys.stderr)
        return 1

    CallGraphBuilder.build_call_graph(scanner.records, scanner.record_map)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(records_to_json(results, include_called_by=True))
        print(f"✅ Records written to {args.output}")

    if args.json and not args.output:
        print(records_to_json(results))
        return 0

    if args.function:
        ReportPrinter.print_function_details(args.function, NodeSearch.search_function(scanner.records, args.function))
    elif args.class_name:
        ReportPrinter.print_class_details(args.class_name, NodeSearch.search_class(scanner.records, args.class_name))
    elif not args.output:
        ReportPrinter.print_records(results)
        ReportPrinter.print_summary(scanner.get_statistics())

    return 0


if __name__ == "__main__":
    sys.exit(main())
