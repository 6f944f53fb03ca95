"""Batch processing orchestration.

Renders many independent blob jobs (for example, every text box on every
slide of a carousel) with a process pool. Jobs travel as plain
dictionaries so they can be pickled to worker processes.

Key components:
- render_job: Top-level picklable function for parallel execution
- BatchProcessor: Orchestrator that fans jobs out and collects results
"""

import time
import traceback
from collections.abc import Callable
from concurrent.futures import Future, ProcessPoolExecutor, as_completed
from typing import Any

import structlog

from gooeyblob.config import BlobOptions, GooeyBlobSettings
from gooeyblob.core.generator import BlobGenerator
from gooeyblob.utils import ProcessingLogger, ProcessingStats


def job_id_for(job: dict[str, Any], position: int) -> str:
    """Get a job's identifier, defaulting to its position."""
    return str(job.get("id", f"job-{position}"))


def render_job(
    job_dict: dict[str, Any],
    default_options: dict[str, Any] | None = None,
    position: int = 0,
) -> dict[str, Any]:
    """Render a single blob job.

    Top-level function designed to be picklable for use with
    ProcessPoolExecutor. Never raises: failures come back as error dicts.

    Args:
        job_dict: ``{"id": str, "lines": [...], "options": {...}}``
        default_options: Option values applied before the job's own options
        position: Position of the job in the batch

    Returns:
        Dictionary containing either:
        - Success: {"id", "position", "result": SmoothedPath dict, "duration_ms"}
        - Error: {"id", "position", "error", "traceback", "duration_ms"}
    """
    start_time = time.time()
    job_id = job_id_for(job_dict, position)

    try:
        options = BlobOptions.model_validate(
            {**(default_options or {}), **job_dict.get("options", {})}
        )
        result = BlobGenerator(options).generate(job_dict["lines"])

        duration_ms = (time.time() - start_time) * 1000
        return {
            "id": job_id,
            "position": position,
            "result": result.to_dict(),
            "duration_ms": duration_ms,
        }

    except Exception as e:
        duration_ms = (time.time() - start_time) * 1000
        return {
            "id": job_id,
            "position": position,
            "error": str(e),
            "traceback": traceback.format_exc(),
            "duration_ms": duration_ms,
        }


class BatchProcessor:
    """Orchestrates parallel rendering of blob jobs.

    Example:
        processor = BatchProcessor(GooeyBlobSettings())
        results, stats = processor.process(jobs, max_workers=4)
    """

    def __init__(
        self,
        settings: GooeyBlobSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize batch processor.

        Args:
            settings: Application settings (blob defaults, worker count)
            logger: Structured logger (module logger if None)
        """
        self.settings = settings if settings is not None else GooeyBlobSettings()
        self.logger = logger if logger is not None else structlog.get_logger(__name__)
        self.processing_logger = ProcessingLogger(self.logger)

    def process(
        self,
        jobs: list[dict[str, Any]],
        max_workers: int | None = None,
        progress_callback: Callable[[int, int, str, bool], None] | None = None,
    ) -> tuple[list[dict[str, Any]], ProcessingStats]:
        """Render all jobs.

        A single worker renders in-process; more workers use a process
        pool. Results always come back in input order.

        Args:
            jobs: Job dictionaries
            max_workers: Worker processes (None = settings, then auto)
            progress_callback: Optional callback(completed, total, job_id, success)

        Returns:
            Tuple of (results in input order, statistics)

        Raises:
            KeyboardInterrupt: If processing is cancelled by user
        """
        self.processing_logger = ProcessingLogger(self.logger)
        stats = self.processing_logger.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        default_options = self.settings.blob.model_dump(mode="json")
        total = len(jobs)

        self.logger.info("Starting batch", jobs=total, max_workers=max_workers)

        results: list[dict[str, Any] | None] = [None] * total

        if max_workers == 1:
            for position, job in enumerate(jobs):
                self.processing_logger.log_job_start(job_id_for(job, position))
                result = render_job(job, default_options, position)
                results[position] = result
                self._record(result, position + 1, total, progress_callback)
        else:
            self._process_parallel(
                jobs, default_options, max_workers, results, progress_callback
            )

        stats.end_time = time.time()

        self.logger.info(
            "Batch complete",
            rendered=stats.rendered_count,
            fallbacks=stats.fallback_count,
            errors=stats.error_count,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return [r for r in results if r is not None], stats

    def _process_parallel(
        self,
        jobs: list[dict[str, Any]],
        default_options: dict[str, Any],
        max_workers: int | None,
        results: list[dict[str, Any] | None],
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> None:
        """Render jobs with a process pool, filling ``results`` in place."""
        total = len(jobs)
        completed = 0
        pending_futures: dict[Future[dict[str, Any]], int] = {}

        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            for position, job in enumerate(jobs):
                self.processing_logger.log_job_start(job_id_for(job, position))
                future = executor.submit(render_job, job, default_options, position)
                pending_futures[future] = position

            try:
                for future in as_completed(pending_futures):
                    position = pending_futures.pop(future)
                    try:
                        result = future.result()
                    except Exception as e:
                        # Executor-level error (e.g. worker crashed)
                        result = {
                            "id": job_id_for(jobs[position], position),
                            "position": position,
                            "error": str(e),
                            "traceback": traceback.format_exc(),
                            "duration_ms": 0.0,
                        }

                    results[position] = result
                    completed += 1
                    self._record(result, completed, total, progress_callback)

            except KeyboardInterrupt:
                self.logger.info("Cancellation requested by user")
                for f in pending_futures:
                    f.cancel()
                executor.shutdown(wait=True, cancel_futures=True)
                raise

    def _record(
        self,
        result: dict[str, Any],
        completed: int,
        total: int,
        progress_callback: Callable[[int, int, str, bool], None] | None,
    ) -> None:
        """Log one finished job and report progress."""
        success = "error" not in result
        if success:
            rendered = result["result"]
            self.processing_logger.log_job_complete(
                job_id=result["id"],
                rings=len(rendered["rings"]),
                fallback=rendered["fallback"],
                duration_ms=result["duration_ms"],
            )
        else:
            self.processing_logger.log_job_error(
                job_id=result["id"],
                error=Exception(result["error"]),
                traceback=result.get("traceback"),
            )

        if progress_callback is not None:
            progress_callback(completed, total, result["id"], success)
