from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib import metadata
from typing import List, Optional

import uvicorn
from pydantic import ValidationError

from importy.analysis import analyze_imports
from importy.config import AnalysisOptions, ConfigurationError, Settings, default_concurrency
from importy.model import AnalysisResult

logger = logging.getLogger("importy")


def package_version() -> str:
	try:
		return metadata.version("importy")
	except metadata.PackageNotFoundError:
		return "0.0.0"


def configure_logging(level: str, verbose: bool = False) -> None:
	numeric = logging.getLevelName(level.upper())
	if not isinstance(numeric, int):
		numeric = logging.WARNING
	if verbose:
		numeric = min(numeric, logging.INFO)
	logging.basicConfig(level=numeric, format="%(levelname)s: %(message)s", stream=sys.stderr, force=True)


def write_result(result: AnalysisResult, output: Optional[str]) -> None:
	payload = json.dumps(result.to_json_dict(), indent=2)
	if output:
		try:
			with open(output, "w", encoding="utf-8") as fh:
				fh.write(payload)
			print(f"Results written to {output}")
			return
		except OSError as e:
			logger.error("Error writing to output file: %s", e)
	print(payload)


def cmd_analyze(args: argparse.Namespace) -> int:
	settings: Settings = args.settings
	configure_logging(settings.log_level, args.verbose)
	try:
		options = AnalysisOptions(
			dir=args.dir,
			lib=args.lib,
			include=args.include,
			exclude=args.exclude,
			verbose=args.verbose,
			concurrency=args.concurrency or settings.concurrency or default_concurrency(),
			ignore_dirs=tuple(args.ignore_dir or ()),
		)
		result = analyze_imports(options)
	except (ConfigurationError, ValidationError) as e:
		logger.error("Error during processing: %s", e)
		return 1

	write_result(result, args.output)
	if not result.components:
		logger.warning("No imports from '%s' were found in the specified directory.", args.lib)
	return 0


def cmd_serve(args: argparse.Namespace) -> int:
	configure_logging(args.settings.log_level)
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)
	return 0


def positive_int(value: str) -> int:
	try:
		number = int(value)
	except ValueError:
		raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from None
	if number < 1:
		raise argparse.ArgumentTypeError(f"must be a positive integer: {value!r}")
	return number


def build_parser(settings: Settings) -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog="importy", description="Analyze JavaScript/TypeScript imports from a specific library"
	)
	parser.add_argument("--version", action="version", version=package_version())
	sub = parser.add_subparsers(dest="cmd", required=True)

	pa = sub.add_parser("analyze", help="Scan a directory and print the import report JSON")
	pa.add_argument("-d", "--dir", required=True, help="Directory to scan")
	pa.add_argument("-l", "--lib", required=True, help="Library name to match")
	pa.add_argument("-o", "--output", help="Output results to a JSON file instead of stdout")
	pa.add_argument("-v", "--verbose", action="store_true", help="Enable verbose logging")
	pa.add_argument("-i", "--include", help="Only include files matching pattern (glob)")
	pa.add_argument("-e", "--exclude", help="Exclude files matching pattern (glob)")
	pa.add_argument(
		"-c", "--concurrency", type=positive_int, help="Number of concurrent file groups (defaults to CPU count - 1, max 4)"
	)
	pa.add_argument(
		"--ignore-dir", action="append", metavar="NAME", help="Directory name to skip entirely (repeatable)"
	)
	pa.set_defaults(func=cmd_analyze)

	ps = sub.add_parser("serve", help="Run FastAPI server")
	ps.add_argument("--host", default=settings.host)
	ps.add_argument("--port", type=int, default=settings.port)
	ps.add_argument("--reload", action="store_true")
	ps.set_defaults(func=cmd_serve)
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	settings = Settings()
	parser = build_parser(settings)
	args = parser.parse_args(argv)
	args.settings = settings
	return args.func(args)


if __name__ == "__main__":
	sys.exit(main())
