from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, PositiveInt, ValidationError

from importy.analysis import analyze_imports_async
from importy.config import AnalysisOptions, ConfigurationError, Settings, default_concurrency
from importy.model import AnalysisResult


app = FastAPI(title="Importy Import Analyzer")
settings = Settings()


class AnalyzeRequest(BaseModel):
	dir: str
	lib: str
	include: Optional[str] = None
	exclude: Optional[str] = None
	concurrency: Optional[PositiveInt] = None
	ignore_dirs: List[str] = []


@app.post("/analyze", response_model=AnalysisResult, response_model_by_alias=True)
async def analyze(req: AnalyzeRequest) -> AnalysisResult:
	try:
		options = AnalysisOptions(
			dir=req.dir,
			lib=req.lib,
			include=req.include,
			exclude=req.exclude,
			concurrency=req.concurrency or settings.concurrency or default_concurrency(),
			ignore_dirs=tuple(req.ignore_dirs),
		)
		return await analyze_imports_async(options)
	except (ConfigurationError, ValidationError) as e:
		raise HTTPException(status_code=400, detail=str(e))


def create_app() -> FastAPI:
	return app
