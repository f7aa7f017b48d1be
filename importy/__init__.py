"""Importy: find every import of a given library across a JS/TS codebase.

Modules:
- fs_scan.py: Source file discovery with include/exclude filtering.
- globmatch.py: Glob pattern to path predicate translation.
- ast_parse.py: Tree-sitter parsing lowered to import declaration nodes.
- extract.py: Matching and classifying imports of the target library.
- aggregate.py: Component map and summary construction.
- batch.py: Group-sequential concurrent processing of files.
- analysis.py: Entry point tying discovery, extraction and aggregation together.
- config.py: Analysis options and environment settings.
- model.py: Result data structures.
"""

__all__ = [
	"fs_scan",
	"globmatch",
	"ast_parse",
	"extract",
	"aggregate",
	"batch",
	"analysis",
	"config",
	"model",
]
