"""
Scheduling schemes and helpers shared by the comparer functions.

Every scheme is expressed as a single comparer compare(queued, new) -> int
used to order the ready queue:
- negative or zero: the queued job keeps priority over the new one
- positive: the new job is placed ahead of the queued one

The same comparer decides preemption: a running job is displaced only when
compare(running, new) > 0. Non-preemptive schemes therefore never return a
positive value for a job that has already started.
"""
from enum import Enum


class Scheme(Enum):
    FCFS = 0
    SJF = 1
    PSJF = 2
    PRI = 3
    PPRI = 4
    RR = 5

    @classmethod
    def parse(cls, value):
        """Accept a Scheme, its name (case-insensitive) or its integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                names = ", ".join(s.name for s in cls)
                msg = f"Unknown scheduling scheme {value!r} (expected one of {names})"
                raise ValueError(msg) from None
        return cls(value)

    @property
    def preemptive(self):
        return self in (Scheme.PSJF, Scheme.PPRI)


def has_started(job):
    """True once the job has been dispatched to a core at least once."""
    return job.first_run is not None
