from __future__ import annotations

import asyncio
import logging
import os
from functools import partial

from .aggregate import build_component_map, summarize
from .batch import ProgressReporter, batch_size_for, process_in_batches
from .config import AnalysisOptions, ConfigurationError
from .extract import extract_imports_from_file
from .fs_scan import scan_directory
from .model import AnalysisResult

logger = logging.getLogger(__name__)


def validate_root(path: str) -> str:
	root = os.path.abspath(path)
	if not os.path.exists(root):
		raise ConfigurationError(f"Directory '{path}' does not exist")
	if not os.path.isdir(root):
		raise ConfigurationError(f"'{path}' is not a directory")
	return root


async def analyze_imports_async(options: AnalysisOptions) -> AnalysisResult:
	"""Scan ``options.dir`` and report every import of ``options.lib``."""
	root = validate_root(options.dir)
	level = logging.INFO if options.verbose else logging.DEBUG

	files = await asyncio.to_thread(
		scan_directory,
		root,
		include=options.include,
		exclude=options.exclude,
		ignore_dirs=options.ignore_dirs,
	)
	logger.log(level, "Found %d files to process", len(files))
	if not files:
		return summarize(build_component_map([]), options.lib, 0)

	concurrency = options.resolved_concurrency()
	batch_size = batch_size_for(len(files), concurrency)
	logger.log(level, "Processing %d files with %d concurrent groups", len(files), concurrency)

	results = await process_in_batches(
		[f.path for f in files],
		batch_size,
		partial(extract_imports_from_file, lib=options.lib),
		on_progress=ProgressReporter() if options.verbose else None,
	)

	component_map = build_component_map(results)
	result = summarize(component_map, options.lib, len(files))
	logger.log(
		level,
		"Analysis complete - Found %d components with %d total imports across %d files",
		result.summary.components_found,
		result.summary.total_imports,
		result.summary.files_scanned,
	)
	return result


def analyze_imports(options: AnalysisOptions) -> AnalysisResult:
	return asyncio.run(analyze_imports_async(options))
