"""Parse JS/TS source into a minimal, parser-independent import tree.

Tree-sitter does the parsing; ``parse_source`` lowers its concrete tree into
the small set of node kinds below so that callers never see tree-sitter
objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from tree_sitter_language_pack import get_parser

logger = logging.getLogger(__name__)


BASELINE_GRAMMAR = "tsx"
FALLBACK_GRAMMAR = "typescript"


@dataclass(frozen=True)
class DefaultSpecifier:
	local: str


@dataclass(frozen=True)
class NamespaceSpecifier:
	local: str


@dataclass(frozen=True)
class NamedSpecifier:
	imported: str
	local: str


@dataclass(frozen=True)
class UnknownSpecifier:
	local: str


Specifier = Union[DefaultSpecifier, NamespaceSpecifier, NamedSpecifier, UnknownSpecifier]


@dataclass(frozen=True)
class ImportDeclaration:
	source: str
	line: int
	specifiers: Tuple[Specifier, ...] = ()


@dataclass
class Program:
	imports: List[ImportDeclaration] = field(default_factory=list)


@dataclass
class ParseSuccess:
	program: Program
	recovered: bool = False
	error_count: int = 0


@dataclass
class ParseFailure:
	diagnostic: str


ParseOutcome = Union[ParseSuccess, ParseFailure]


def _text(node) -> str:
	return node.text.decode("utf-8", errors="replace")


def _string_value(node) -> Optional[str]:
	if node is None or node.is_missing or node.type != "string":
		return None
	raw = _text(node)
	if len(raw) >= 2 and raw[0] == raw[-1] and raw[0] in "'\"":
		return raw[1:-1]
	return None


def _module_export_name(node) -> Optional[str]:
	if node is None:
		return None
	if node.type == "string":
		return _string_value(node)
	return _text(node)


def _lower_specifier(node) -> Optional[Specifier]:
	name_node = node.child_by_field_name("name")
	alias_node = node.child_by_field_name("alias")
	imported = _module_export_name(name_node)
	if alias_node is not None:
		local = _text(alias_node)
	elif name_node is not None and name_node.type == "identifier":
		local = _text(name_node)
	else:
		return None
	if imported is None:
		return UnknownSpecifier(local=local)
	return NamedSpecifier(imported=imported, local=local)


def _lower_clause(clause) -> List[Specifier]:
	specifiers: List[Specifier] = []
	for child in clause.named_children:
		if child.type == "identifier":
			specifiers.append(DefaultSpecifier(local=_text(child)))
		elif child.type == "namespace_import":
			ident = next((c for c in child.named_children if c.type == "identifier"), None)
			if ident is not None:
				specifiers.append(NamespaceSpecifier(local=_text(ident)))
		elif child.type == "named_imports":
			for spec in child.named_children:
				if spec.type != "import_specifier":
					continue
				lowered = _lower_specifier(spec)
				if lowered is not None:
					specifiers.append(lowered)
	return specifiers


def _lower_import(node) -> Optional[ImportDeclaration]:
	source_node = node.child_by_field_name("source")
	if source_node is None:
		source_node = next((c for c in node.named_children if c.type == "string"), None)
	source = _string_value(source_node)
	if source is None:
		return None

	specifiers: List[Specifier] = []
	for child in node.named_children:
		if child.type == "import_clause":
			specifiers.extend(_lower_clause(child))
	return ImportDeclaration(
		source=source,
		line=node.start_point[0] + 1,
		specifiers=tuple(specifiers),
	)


def _lower_tree(tree) -> Tuple[Program, int]:
	"""Collect import declarations anywhere in the tree, error nodes included."""
	program = Program()
	errors = 0
	stack = [tree.root_node]
	while stack:
		node = stack.pop()
		if node.type == "ERROR" or node.is_missing:
			errors += 1
		if node.type == "import_statement":
			decl = _lower_import(node)
			if decl is not None:
				program.imports.append(decl)
			continue
		stack.extend(reversed(node.children))
	return program, errors


def _parse_with(grammar: str, source: bytes):
	parser = get_parser(grammar)
	return parser.parse(source)


def parse_source(text: str) -> ParseOutcome:
	"""Parse ``text`` and return its import declarations.

	The baseline attempt uses the TSX grammar and only accepts an error-free
	tree. Otherwise one retry with the plain TypeScript grammar runs, and the
	recovered tree with fewer error nodes is used.
	"""
	source = text.encode("utf-8")
	candidates: List[Tuple[Program, int]] = []
	diagnostics: List[str] = []

	try:
		tree = _parse_with(BASELINE_GRAMMAR, source)
		if not tree.root_node.has_error:
			program, _ = _lower_tree(tree)
			return ParseSuccess(program=program)
		candidates.append(_lower_tree(tree))
	except Exception as e:
		diagnostics.append(f"{BASELINE_GRAMMAR}: {e}")

	try:
		tree = _parse_with(FALLBACK_GRAMMAR, source)
		candidates.append(_lower_tree(tree))
	except Exception as e:
		diagnostics.append(f"{FALLBACK_GRAMMAR}: {e}")

	if not candidates:
		return ParseFailure(diagnostic="; ".join(diagnostics))

	program, errors = min(candidates, key=lambda c: c[1])
	return ParseSuccess(program=program, recovered=errors > 0, error_count=errors)
