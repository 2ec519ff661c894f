"""
Tests for PollScheduler.

Tests cover:
- Immediate first run and periodic runs
- Manual trigger
- Error scenarios: failing jobs do not stop the schedule
"""

import threading
from unittest.mock import Mock

import pytest
from firerisk.poll_scheduler import PollScheduler
from firerisk.errors import ApiRequestFailed


def wait_for_calls(job, count):
    """Wraps job so the returned event is set once it has been called count times."""
    done = threading.Event()
    calls = []
    
    def record(*args, **kwargs):
        calls.append(1)
        if len(calls) >= count:
            done.set()
        return job(*args, **kwargs)
    
    return record, done


class TestPollScheduler:
    """Test suite for PollScheduler."""
    
    def test_invalid_interval(self):
        with pytest.raises(ValueError):
            PollScheduler(Mock(), interval_ms=0)
    
    def test_runs_immediately_on_start(self):
        job = Mock()
        recorder, done = wait_for_calls(job, 1)
        scheduler = PollScheduler(recorder, interval_ms=60000)
        
        scheduler.start()
        try:
            assert done.wait(2.0)
        finally:
            scheduler.stop(timeout=2)
        
        job.assert_called_once()
    
    @pytest.mark.slow
    def test_runs_periodically(self):
        job = Mock()
        recorder, done = wait_for_calls(job, 3)
        scheduler = PollScheduler(recorder, interval_ms=20)
        
        scheduler.start()
        try:
            assert done.wait(2.0)
        finally:
            scheduler.stop(timeout=2)
        
        assert job.call_count >= 3
        assert not scheduler.is_running
    
    def test_no_immediate_run_when_disabled(self):
        job = Mock()
        scheduler = PollScheduler(job, interval_ms=60000, run_immediately=False)
        scheduler.start()
        scheduler.stop(timeout=2)
        job.assert_not_called()
    
    @pytest.mark.slow
    def test_failing_job_keeps_schedule(self):
        """Error scenario: A FireRiskError is logged and polling continues."""
        job = Mock(side_effect=ApiRequestFailed(503, "Service Unavailable"))
        recorder, done = wait_for_calls(job, 2)
        scheduler = PollScheduler(recorder, interval_ms=20)
        
        scheduler.start()
        try:
            assert done.wait(2.0)
        finally:
            scheduler.stop(timeout=2)
    
    @pytest.mark.slow
    def test_unexpected_error_keeps_schedule(self):
        """Error scenario: Any other exception is logged and polling continues."""
        job = Mock(side_effect=[RuntimeError("boom"), None, None])
        recorder, done = wait_for_calls(job, 2)
        scheduler = PollScheduler(recorder, interval_ms=20)
        
        scheduler.start()
        try:
            assert done.wait(2.0)
            assert scheduler.is_running
        finally:
            scheduler.stop(timeout=2)
        
        assert job.call_count >= 2
    
    def test_trigger_now_runs_on_caller_thread(self):
        job = Mock(return_value="result")
        scheduler = PollScheduler(job, interval_ms=60000)
        assert scheduler.trigger_now() == "result"
        job.assert_called_once()
    
    def test_trigger_now_propagates_errors(self):
        """Error scenario: Manual trigger surfaces the error to the caller."""
        scheduler = PollScheduler(Mock(side_effect=ApiRequestFailed(None, "timeout")), interval_ms=60000)
        with pytest.raises(ApiRequestFailed):
            scheduler.trigger_now()
    
    def test_start_twice_is_noop(self):
        scheduler = PollScheduler(Mock(), interval_ms=60000)
        scheduler.start()
        first_thread = scheduler._thread
        scheduler.start()
        try:
            assert scheduler._thread is first_thread
        finally:
            scheduler.stop(timeout=2)
