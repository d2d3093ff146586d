from .base import has_started


def pri_compare(queued, new):
    """
    Non-preemptive priority: lower priority value wins, but a job that has
    started keeps its place.
    """
    if has_started(queued):
        return -1
    return queued.priority - new.priority


def ppri_compare(queued, new):
    """Preemptive priority: lower priority value always wins, even over a running job."""
    return queued.priority - new.priority
