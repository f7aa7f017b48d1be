from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .model import AnalysisResult, AnalysisSummary, ImportMatch


class ComponentMap:
	"""Imported name -> files importing it, one entry per file."""

	def __init__(self):
		# dict keys double as an insertion-ordered set
		self._files: Dict[str, Dict[str, None]] = {}

	def add(self, match: ImportMatch) -> None:
		self._files.setdefault(match.imported_name, {})[match.file] = None

	def merge(self, matches: Iterable[ImportMatch]) -> None:
		for match in matches:
			self.add(match)

	def names(self) -> List[str]:
		return list(self._files)

	def files_for(self, name: str) -> List[str]:
		return list(self._files.get(name, {}))

	def total_imports(self) -> int:
		return sum(len(files) for files in self._files.values())

	def as_dict(self) -> Dict[str, List[str]]:
		return {name: list(files) for name, files in self._files.items()}

	def __len__(self) -> int:
		return len(self._files)

	def __contains__(self, name: object) -> bool:
		return name in self._files


def build_component_map(
	results: Iterable[Optional[List[ImportMatch]]],
	component_map: Optional[ComponentMap] = None,
) -> ComponentMap:
	component_map = component_map if component_map is not None else ComponentMap()
	for matches in results:
		if not matches:
			continue
		component_map.merge(matches)
	return component_map


def summarize(component_map: ComponentMap, library: str, files_scanned: int) -> AnalysisResult:
	return AnalysisResult(
		summary=AnalysisSummary(
			library=library,
			components_found=len(component_map),
			total_imports=component_map.total_imports(),
			files_scanned=files_scanned,
		),
		components=component_map.as_dict(),
	)
