from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, List, Optional

from .globmatch import compile_glob, normalize_path
from .model import FileInfo

logger = logging.getLogger(__name__)


EXTENSION_LANGUAGE: Dict[str, str] = {
	".js": "javascript",
	".jsx": "javascript",
	".ts": "typescript",
	".tsx": "typescript",
}


def detect_language(filename: str) -> str:
	_, ext = os.path.splitext(filename)
	return EXTENSION_LANGUAGE.get(ext, "unknown")


def is_source_file(filename: str) -> bool:
	return detect_language(filename) != "unknown"


def _any_match(matcher, *paths: str) -> bool:
	return any(matcher(p) for p in paths)


def _log_walk_error(err: OSError) -> None:
	logger.warning("Error reading directory %s: %s", err.filename, err.strerror or err)


def scan_directory(
	root: str,
	include: Optional[str] = None,
	exclude: Optional[str] = None,
	ignore_dirs: Iterable[str] = (),
) -> List[FileInfo]:
	"""Collect eligible source files under ``root``.

	Directories listed in ``ignore_dirs`` or matching ``exclude`` are pruned
	before descent. Files must match ``include`` when given and must not match
	``exclude``. Patterns are tried against both the absolute and the
	root-relative path.
	"""
	include_match = compile_glob(include) if include else None
	exclude_match = compile_glob(exclude) if exclude else None
	ignored = set(ignore_dirs)

	files: List[FileInfo] = []
	for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
		kept = []
		for d in sorted(dirnames):
			if d in ignored:
				continue
			full = normalize_path(os.path.join(dirpath, d))
			rel = normalize_path(os.path.relpath(os.path.join(dirpath, d), root))
			if exclude_match and _any_match(exclude_match, full, full + "/", rel, rel + "/"):
				logger.debug("Skipping excluded directory: %s", full)
				continue
			kept.append(d)
		dirnames[:] = kept

		for filename in sorted(filenames):
			if not is_source_file(filename):
				continue
			path = os.path.join(dirpath, filename)
			posix_path = normalize_path(path)
			rel_path = os.path.relpath(path, root)
			posix_rel = normalize_path(rel_path)
			if include_match and not _any_match(include_match, posix_path, posix_rel):
				logger.debug("Skipping file due to patterns: %s", path)
				continue
			if exclude_match and _any_match(exclude_match, posix_path, posix_rel):
				logger.debug("Skipping file due to patterns: %s", path)
				continue
			files.append(
				FileInfo(
					path=path,
					rel_path=rel_path,
					language=detect_language(filename),
				)
			)
	return files
