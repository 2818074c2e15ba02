import logging
import os

from referral_tracker.extensions import RQWrapper, rq
from referral_tracker.jobs.cleanup import remove_resume
from referral_tracker.services import storage

from conftest import make_pdf


def test_remove_resume_deletes_file(app):
    url = storage.save_file(make_pdf(), prefix="resumes")
    assert remove_resume(url) is True
    assert not os.path.exists(storage.local_path(url))


def test_remove_resume_logs_missing_file(app, caplog):
    with caplog.at_level(logging.WARNING):
        assert remove_resume("/uploads/resumes/missing.pdf") is False
    assert "Error deleting resume file /uploads/resumes/missing.pdf" in caplog.text


def test_queue_disabled_without_redis_url(app):
    assert rq.queue is None


def test_enqueue_runs_inline_without_queue(app):
    wrapper = RQWrapper()
    calls = []
    assert wrapper.enqueue(lambda x: calls.append(x) or "done", 1, job_timeout=30) == "done"
    assert calls == [1]


def test_enqueue_inline_failure_is_logged_not_raised(app, caplog):
    def boom():
        raise RuntimeError("nope")

    with caplog.at_level(logging.ERROR):
        assert RQWrapper().enqueue(boom) is None
    assert "Synchronous job execution failed" in caplog.text


def test_enqueue_falls_back_when_redis_is_down(app):
    class DownQueue:
        def enqueue(self, *args, **kwargs):
            raise ConnectionError("redis down")

    wrapper = RQWrapper()
    wrapper.queue = DownQueue()
    calls = []
    wrapper.enqueue(calls.append, "resume.pdf")
    assert calls == ["resume.pdf"]


def test_enqueue_uses_queue_when_available(app):
    class RecordingQueue:
        def __init__(self):
            self.jobs = []

        def enqueue(self, *args, **kwargs):
            self.jobs.append((args, kwargs))
            return "job-1"

    wrapper = RQWrapper()
    wrapper.queue = RecordingQueue()
    assert wrapper.enqueue(remove_resume, "/uploads/resumes/x.pdf") == "job-1"
    assert wrapper.queue.jobs == [((remove_resume, "/uploads/resumes/x.pdf"), {})]
