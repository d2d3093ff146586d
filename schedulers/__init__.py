"""
Queue ordering rules, one per scheduling scheme.

get_comparer() maps a Scheme to its pure comparer function:

    FCFS  fcfs_compare   arrival order
    SJF   sjf_compare    shortest burst, started jobs keep their place
    PSJF  psjf_compare   shortest remaining time
    PRI   pri_compare    lowest priority value, started jobs keep their place
    PPRI  ppri_compare   lowest priority value
    RR    rr_compare     arrival order, rotated on quantum expiry
"""
from .base import Scheme, has_started
from .fcfs import fcfs_compare
from .priority import ppri_compare, pri_compare
from .round_robin import rr_compare
from .sjf import psjf_compare, sjf_compare

COMPARERS = {
    Scheme.FCFS: fcfs_compare,
    Scheme.SJF: sjf_compare,
    Scheme.PSJF: psjf_compare,
    Scheme.PRI: pri_compare,
    Scheme.PPRI: ppri_compare,
    Scheme.RR: rr_compare,
}


def get_comparer(scheme):
    """Return the comparer for scheme (a Scheme, its name or its value)."""
    return COMPARERS[Scheme.parse(scheme)]


__all__ = [
    "COMPARERS",
    "Scheme",
    "get_comparer",
    "has_started",
    "fcfs_compare",
    "sjf_compare",
    "psjf_compare",
    "pri_compare",
    "ppri_compare",
    "rr_compare",
]
