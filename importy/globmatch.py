"""Glob pattern to path predicate translation.

Supported syntax:
- ``**/`` zero or more whole directory segments
- ``**`` any run of characters, separators included
- ``*`` any run of non-separator characters
- ``?`` exactly one non-separator character
- ``[abc]`` / ``[!abc]`` character classes, never matching a separator

Everything else is literal. Patterns are anchored and case insensitive.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

PathMatcher = Callable[[str], bool]


def normalize_path(path: str) -> str:
	return path.replace("\\", "/")


def _translate_class(pattern: str, start: int) -> Tuple[Optional[str], int]:
	# start points just past "["; returns (regex, next index) or (None, start)
	i = start
	negate = False
	if i < len(pattern) and pattern[i] in "!^":
		negate = True
		i += 1
	# a leading "]" is part of the class
	if i < len(pattern) and pattern[i] == "]":
		i += 1
	while i < len(pattern) and pattern[i] != "]":
		i += 1
	if i >= len(pattern):
		return None, start
	body = pattern[start + (1 if negate else 0):i]
	body = body.replace("\\", "\\\\")
	if negate:
		return f"[^{body}/]", i + 1
	return f"(?!/)[{body}]", i + 1


def glob_to_regex(pattern: str) -> str:
	parts = []
	i = 0
	n = len(pattern)
	while i < n:
		c = pattern[i]
		if c == "*":
			if pattern.startswith("**", i):
				if pattern.startswith("**/", i):
					parts.append("(?:.*/)?")
					i += 3
				else:
					parts.append(".*")
					i += 2
				continue
			parts.append("[^/]*")
		elif c == "?":
			parts.append("[^/]")
		elif c == "[":
			translated, nxt = _translate_class(pattern, i + 1)
			if translated is None:
				parts.append(re.escape(c))
			else:
				parts.append(translated)
				i = nxt
				continue
		else:
			parts.append(re.escape(c))
		i += 1
	return "^" + "".join(parts) + "$"


def compile_glob(pattern: str) -> PathMatcher:
	try:
		regex = re.compile(glob_to_regex(normalize_path(pattern)), re.IGNORECASE)
	except re.error as e:
		logger.warning("Invalid pattern %r: %s", pattern, e)
		return lambda path: False

	def matcher(path: str) -> bool:
		return regex.match(normalize_path(path)) is not None

	return matcher
