"""
Pytest configuration and shared fixtures for scheduler tests.
"""
import pytest
from test_utils import create_test_job


@pytest.fixture
def four_job_workload():
    """
    Four jobs on one core used for hand-computed schedules.

    Bursts and priorities are chosen so every scheme produces a different
    order: job 0 is long and mid priority, job 1 short and high priority,
    job 2 longest and lowest priority, job 3 medium and top priority.
    """
    return [
        create_test_job(0, 0, 8, 2),
        create_test_job(1, 1, 4, 1),
        create_test_job(2, 2, 9, 3),
        create_test_job(3, 3, 5, 0),
    ]


@pytest.fixture
def mixed_workload():
    """A denser workload for multi-core property checks."""
    return [
        create_test_job(10, 0, 7, 3),
        create_test_job(11, 1, 3, 1),
        create_test_job(12, 2, 12, 4),
        create_test_job(13, 3, 2, 0),
        create_test_job(14, 5, 6, 2),
        create_test_job(15, 6, 1, 5),
        create_test_job(16, 8, 9, 1),
        create_test_job(17, 9, 4, 0),
        create_test_job(18, 13, 5, 3),
        create_test_job(19, 14, 2, 2),
    ]
