from __future__ import annotations

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FileInfo(BaseModel):
	path: str
	rel_path: str
	language: str


class ImportMatch(_CamelModel):
	imported_name: str
	local_name: str
	file: str
	line: Optional[int] = None


class AnalysisSummary(_CamelModel):
	library: str
	components_found: int = 0
	total_imports: int = 0
	files_scanned: int = 0


class AnalysisResult(_CamelModel):
	summary: AnalysisSummary
	components: Dict[str, List[str]] = {}

	def to_json_dict(self) -> dict:
		return self.model_dump(by_alias=True)
