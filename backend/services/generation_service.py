"""
Generation service — stands in for the real Suno pipeline.

The result is a fixed mock: the prompt is accepted but never used.
"""
import time

from domain.constants import MOCK_AUDIO_URLS, TASK_ID_PREFIX


def build_mock_result(now_ms: int | None = None) -> dict:
    """Build the canned generation payload, task id stamped with epoch millis."""
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    versions = [
        {"version": i, "audioUrl": url}
        for i, url in enumerate(MOCK_AUDIO_URLS, start=1)
    ]
    return {
        "taskId": f"{TASK_ID_PREFIX}{now_ms}",
        "status": "complete",
        "versionsIncluded": len(versions),
        "versions": versions,
    }
