from __future__ import annotations

import asyncio
import logging
import math
from typing import Callable, List, Optional, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

ProgressCallback = Callable[[int, int], None]


def chunked(items: Sequence[T], size: int) -> List[List[T]]:
	if size < 1:
		raise ValueError(f"chunk size must be positive, got {size}")
	return [list(items[i:i + size]) for i in range(0, len(items), size)]


def batch_size_for(total: int, concurrency: int) -> int:
	"""Group size such that the number of groups is about ``concurrency``."""
	return max(1, math.ceil(total / max(1, concurrency)))


class ProgressReporter:
	"""Logs progress once per completed decile."""

	def __init__(self, label: str = "files"):
		self.label = label
		self._last_decile = 0

	def __call__(self, completed: int, total: int) -> None:
		if total <= 0:
			return
		decile = (completed * 10) // total
		if decile <= self._last_decile:
			return
		self._last_decile = decile
		logger.info("Progress: %d%% (%d/%d %s)", decile * 10, completed, total, self.label)


async def process_in_batches(
	items: Sequence[T],
	batch_size: int,
	processor: Callable[[T], List[R]],
	on_progress: Optional[ProgressCallback] = None,
) -> List[List[R]]:
	"""Run ``processor`` over ``items`` one group at a time.

	Items inside a group run concurrently in worker threads; the next group
	starts only after the whole group has finished. A failing item yields an
	empty list instead of aborting the run. Results keep the input order.
	"""
	total = len(items)
	completed = 0
	results: List[List[R]] = []

	def report() -> None:
		nonlocal completed
		completed += 1
		if on_progress is None:
			return
		try:
			on_progress(completed, total)
		except Exception as e:
			logger.debug("Progress callback failed: %s", e)

	async def run_one(item: T) -> List[R]:
		try:
			result = await asyncio.to_thread(processor, item)
		except Exception as e:
			logger.warning("Error processing %s: %s", item, e)
			result = []
		report()
		return result

	for group in chunked(items, batch_size):
		results.extend(await asyncio.gather(*(run_one(item) for item in group)))
	return results
