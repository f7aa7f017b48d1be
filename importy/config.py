from __future__ import annotations

import os
from typing import Optional, Tuple

from pydantic import BaseModel, Field, PositiveInt, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


MAX_DEFAULT_CONCURRENCY = 4


class ConfigurationError(ValueError):
	"""Raised when the analysis cannot start, e.g. the root is not a directory."""


def default_concurrency(cpu_count: Optional[int] = None) -> int:
	"""Worker-group count used when none is configured: cpus - 1, clamped to [1, 4]."""
	if cpu_count is None:
		cpu_count = os.cpu_count() or 1
	return max(1, min(MAX_DEFAULT_CONCURRENCY, cpu_count - 1))


class AnalysisOptions(BaseModel):
	dir: str
	lib: str
	include: Optional[str] = None
	exclude: Optional[str] = None
	verbose: bool = False
	concurrency: Optional[PositiveInt] = None
	ignore_dirs: Tuple[str, ...] = ()

	@field_validator("lib")
	@classmethod
	def _lib_not_blank(cls, value: str) -> str:
		if not value.strip():
			raise ValueError("library name must not be empty")
		return value

	@field_validator("include", "exclude")
	@classmethod
	def _blank_pattern_is_none(cls, value: Optional[str]) -> Optional[str]:
		if value is not None and not value.strip():
			return None
		return value

	def resolved_concurrency(self) -> int:
		return self.concurrency or default_concurrency()


class Settings(BaseSettings):
	"""Process-wide defaults, read once by the CLI / API drivers."""

	model_config = SettingsConfigDict(
		env_prefix="IMPORTY_", env_file=".env", case_sensitive=False, extra="ignore"
	)

	concurrency: Optional[PositiveInt] = Field(default=None)
	log_level: str = Field(default="WARNING")
	host: str = Field(default="127.0.0.1")
	port: int = Field(default=8000)
