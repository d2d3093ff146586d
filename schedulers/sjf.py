from .base import has_started


def sjf_compare(queued, new):
    """
    Shortest Job First (non-preemptive).

    Shorter total burst wins. A job that has already started is never
    displaced, whatever its length.
    """
    if has_started(queued):
        return -1
    return queued.burst - new.burst


def psjf_compare(queued, new):
    """
    Preemptive Shortest Job First (shortest remaining time).

    Compares remaining time, which the engine brings up to date before each
    arrival, so a running job loses its core to any job that needs less
    time than it has left.
    """
    return queued.remaining - new.remaining
