"""Tests for batch processing orchestration."""

from unittest.mock import Mock

import pytest

from gooeyblob.config import BlobOptions, GooeyBlobSettings, ProcessingConfig
from gooeyblob.core.processor import BatchProcessor, job_id_for, render_job


@pytest.fixture
def hi_job() -> dict:
    """Create a job for the two-letter reference example."""
    return {
        "id": "hi",
        "lines": [{"text": "HI", "width": 40}],
        "options": {"line_height": 30, "spread": 6},
    }


@pytest.fixture
def jobs(hi_job: dict) -> list[dict]:
    """Create a small batch with an empty job and a broken job."""
    return [
        hi_job,
        {"id": "empty", "lines": [{"text": "", "width": 0}]},
        {"id": "broken", "options": {}},
        {"lines": [{"text": "a", "width": 10}, {"text": "bb", "width": 30}]},
    ]


@pytest.fixture
def settings() -> GooeyBlobSettings:
    """Create test settings with a single worker."""
    return GooeyBlobSettings(processing=ProcessingConfig(max_workers=1))


class TestRenderJob:
    """Tests for render_job function."""

    def test_render_job(self, hi_job: dict):
        """Test rendering a single job."""
        result = render_job(hi_job)

        assert "error" not in result
        assert result["id"] == "hi"
        assert result["position"] == 0
        assert result["result"]["bounding_box"]["width"] == 52
        assert result["result"]["bounding_box"]["height"] == 42
        assert result["result"]["path"].startswith("M ")
        assert result["duration_ms"] >= 0

    def test_job_options_override_defaults(self, hi_job: dict):
        """Test that job options win over batch defaults."""
        defaults = BlobOptions(spread=50, roundness=0).model_dump(mode="json")
        result = render_job(hi_job, defaults)

        # spread from the job, roundness from the defaults
        assert result["result"]["bounding_box"]["width"] == 52
        assert all(c["radius"] == 0 for c in result["result"]["rings"][0])

    def test_render_job_handles_error(self):
        """Test that render_job returns an error dict instead of raising."""
        result = render_job({"id": "bad"}, position=4)

        assert "error" in result
        assert "traceback" in result
        assert result["id"] == "bad"
        assert result["position"] == 4

    def test_job_id_default(self):
        """Test the positional job id."""
        assert job_id_for({}, 3) == "job-3"
        assert job_id_for({"id": 7}, 3) == "7"


class TestBatchProcessor:
    """Tests for BatchProcessor class."""

    def test_process_inline(self, jobs: list[dict], settings: GooeyBlobSettings):
        """Test in-process rendering keeps input order and counts outcomes."""
        processor = BatchProcessor(settings)
        results, stats = processor.process(jobs)

        assert [r["id"] for r in results] == ["hi", "empty", "broken", "job-3"]
        assert "error" in results[2]
        assert results[1]["result"]["path"] == ""
        assert stats.rendered_count == 3
        assert stats.empty_count == 1
        assert stats.error_count == 1
        assert stats.errors[0][0] == "broken"
        assert stats.duration_seconds >= 0
        assert len(stats.job_timings_ms) == 3

    def test_progress_callback(self, jobs: list[dict], settings: GooeyBlobSettings):
        """Test that progress is reported once per job."""
        callback = Mock()
        BatchProcessor(settings).process(jobs, progress_callback=callback)

        assert callback.call_count == len(jobs)
        completed, total, job_id, success = callback.call_args_list[-1].args
        assert (completed, total, job_id, success) == (4, 4, "job-3", True)
        assert callback.call_args_list[2].args[3] is False

    def test_stats_reset_between_runs(self, hi_job: dict, settings: GooeyBlobSettings):
        """Test that each process call starts fresh statistics."""
        processor = BatchProcessor(settings)
        processor.process([hi_job])
        _, stats = processor.process([hi_job])

        assert stats.rendered_count == 1

    def test_process_parallel(self, jobs: list[dict]):
        """Test that the process pool returns the same results as inline."""
        processor = BatchProcessor(GooeyBlobSettings())
        parallel, stats = processor.process(jobs, max_workers=2)
        inline, _ = processor.process(jobs, max_workers=1)

        assert [r["id"] for r in parallel] == [r["id"] for r in inline]
        assert parallel[0]["result"]["path"] == inline[0]["result"]["path"]
        assert stats.error_count == 1

    def test_settings_blob_defaults_apply(self, settings: GooeyBlobSettings):
        """Test that batch defaults come from the settings."""
        settings.blob = BlobOptions(spread=0, line_height=20)
        results, _ = BatchProcessor(settings).process([{"lines": [{"text": "x", "width": 10}]}])

        bbox = results[0]["result"]["bounding_box"]
        assert (bbox["width"], bbox["height"]) == (10, 20)
