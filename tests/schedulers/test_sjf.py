"""
Tests for SJF and PSJF (shortest remaining time) scheduling.
"""
from test_utils import *
from engine import NO_CHANGE
from jobs import JobState


def test_sjf_does_not_preempt():
    """A much shorter job waits for the running one under plain SJF."""
    engine = create_test_engine(1, "SJF")

    assert engine.job_arrival(1, 0, 10, 0) == 0
    assert engine.job_arrival(2, 1, 1, 0) == NO_CHANGE
    assert engine.job_state(1) is JobState.RUNNING
    assert engine.job_finished(0, 1, 10) == 2


def test_sjf_orders_queue_by_burst():
    engine = create_test_engine(1, "SJF")
    engine.job_arrival(1, 0, 10, 0)
    engine.job_arrival(2, 1, 9, 0)
    engine.job_arrival(3, 2, 4, 0)
    engine.job_arrival(4, 3, 6, 0)

    assert engine.show_queue() == "1(0) 3(-1) 4(-1) 2(-1)"
    assert engine.job_finished(0, 1, 10) == 3
    assert engine.job_finished(0, 3, 14) == 4
    assert engine.job_finished(0, 4, 20) == 2


def test_sjf_statistics(four_job_workload):
    """Hand-computed SJF schedule: 0 [0,8) 1 [8,12) 3 [12,17) 2 [17,26)."""
    result = run_scheduler_test("SJF", four_job_workload)

    assert result['finish_times'] == {0: 8, 1: 12, 3: 17, 2: 26}
    assert_averages(result['engine'], wait=7.75, turnaround=14.25, response=7.75)


def test_psjf_preemption():
    """Job 2 needs 2 units while job 1 still has 6 left, so job 2 takes the core."""
    engine = create_test_engine(1, "PSJF")

    assert engine.job_arrival(1, 0, 10, 0) == 0
    assert engine.job_arrival(2, 4, 2, 0) == 0, "Shorter remaining time should preempt"
    assert engine.job_state(1) is JobState.QUEUED
    assert engine.job_finished(0, 2, 6) == 1, "Preempted job resumes on the freed core"
    assert engine.job_finished(0, 1, 12) == NO_CHANGE

    # Job 2: turnaround 2, wait 0; job 1: turnaround 12, wait 2; both responded at arrival
    assert_averages(engine, wait=1.0, turnaround=7.0, response=0.0)


def test_psjf_no_preemption_on_tie():
    """Equal remaining time keeps the running job on its core."""
    engine = create_test_engine(1, "PSJF")
    engine.job_arrival(1, 0, 10, 0)

    assert engine.job_arrival(2, 4, 6, 0) == NO_CHANGE


def test_psjf_uses_remaining_not_burst():
    """A long job that has almost finished is not displaced by a shorter burst."""
    engine = create_test_engine(1, "PSJF")
    engine.job_arrival(1, 0, 10, 0)

    assert engine.job_arrival(2, 8, 3, 0) == NO_CHANGE, "Job 1 only has 2 units left"
    assert engine.job_finished(0, 1, 10) == 2


def test_psjf_preempts_the_core_running_the_displaced_job():
    """On two cores only the job with more remaining time than the newcomer is evicted."""
    engine = create_test_engine(2, "PSJF")

    assert engine.job_arrival(1, 0, 4, 0) == 0
    assert engine.job_arrival(2, 1, 10, 0) == 1
    # At t=2: job 1 has 2 left, job 2 has 9 left, newcomer needs 3
    assert engine.job_arrival(3, 2, 3, 0) == 1
    assert engine.queue_snapshot() == [(1, 0), (3, 1), (2, -1)]


def test_psjf_evicts_longest_remaining():
    """When several running jobs could be displaced the one with most time left goes."""
    engine = create_test_engine(2, "PSJF")
    engine.job_arrival(1, 0, 20, 0)
    engine.job_arrival(2, 1, 8, 0)

    assert engine.job_arrival(3, 2, 2, 0) == 0, "Job 1 (18 left) should lose core 0"
    assert engine.show_queue() == "3(0) 2(1) 1(-1)"


def test_psjf_statistics(four_job_workload):
    """
    Hand-computed PSJF schedule:
    0 [0,1) 1 [1,5) 3 [5,10) 0 [10,17) 2 [17,26)
    """
    result = run_scheduler_test("PSJF", four_job_workload)

    assert result['finish_times'] == {1: 5, 3: 10, 0: 17, 2: 26}
    assert_averages(result['engine'], wait=6.5, turnaround=13.0, response=4.25)
