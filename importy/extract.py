from __future__ import annotations

import logging
from typing import List

from .ast_parse import (
	DefaultSpecifier,
	NamedSpecifier,
	NamespaceSpecifier,
	ParseFailure,
	Specifier,
	parse_source,
)
from .model import ImportMatch

logger = logging.getLogger(__name__)


DEFAULT_IMPORT = "default"
NAMESPACE_IMPORT = "*"
UNKNOWN_IMPORT = "unknown"


def matches_library(source: str, lib: str) -> bool:
	"""True for ``lib`` itself and any subpath import such as ``lib/Button``."""
	return source == lib or source.startswith(lib + "/")


def classify(specifier: Specifier) -> str:
	if isinstance(specifier, DefaultSpecifier):
		return DEFAULT_IMPORT
	if isinstance(specifier, NamespaceSpecifier):
		return NAMESPACE_IMPORT
	if isinstance(specifier, NamedSpecifier):
		return specifier.imported
	return UNKNOWN_IMPORT


def extract_imports(text: str, lib: str, file: str) -> List[ImportMatch]:
	outcome = parse_source(text)
	if isinstance(outcome, ParseFailure):
		logger.warning("Skipping %s: Failed to parse: %s", file, outcome.diagnostic)
		return []
	if outcome.recovered:
		logger.debug("Parsed %s with error recovery (%d error nodes)", file, outcome.error_count)

	matches: List[ImportMatch] = []
	for decl in outcome.program.imports:
		if not matches_library(decl.source, lib):
			continue
		for specifier in decl.specifiers:
			matches.append(
				ImportMatch(
					imported_name=classify(specifier),
					local_name=specifier.local,
					file=file,
					line=decl.line,
				)
			)
	return matches


def extract_imports_from_file(path: str, lib: str) -> List[ImportMatch]:
	try:
		with open(path, "r", encoding="utf-8") as fh:
			text = fh.read()
	except (OSError, UnicodeDecodeError) as e:
		logger.warning("Error reading file %s: %s", path, e)
		return []
	return extract_imports(text, lib, path)
