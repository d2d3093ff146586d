"""
Job records and their lifecycle bookkeeping.

A job moves through Queued -> Running -> (Queued | Completed). The tracker
owns every live Job from arrival until completion and is the only place
remaining time and first-run timestamps are updated, which keeps the
statistics contributions consistent under preemption.
"""
from enum import Enum


class JobState(Enum):
    QUEUED = "queued"
    RUNNING = "running"
    COMPLETED = "completed"


class Job:
    def __init__(self, job_id, arrival, burst, priority=0):
        self.job_id = job_id
        self.arrival = arrival
        self.burst = burst  # NEVER modify - total required run time (for statistics)
        self.remaining = burst  # Decreases only while the job holds a core
        self.priority = priority  # Lower value = higher priority
        self.first_run = None  # First dispatch time, set once
        self.last_dispatch = None  # Start of the current run interval, None while off-core
        self.core = None

    @property
    def running(self):
        return self.core is not None

    def __repr__(self):
        return (f"Job(id={self.job_id}, arrival={self.arrival}, burst={self.burst}, "
                f"remaining={self.remaining}, priority={self.priority}, core={self.core})")


class JobTracker:
    def __init__(self):
        self.jobs = {}  # job_id -> Job, live jobs only
        self.completed = set()

    def create(self, job_id, time, burst, priority=0):
        """Create the record for an arriving job (remaining = burst, first run unset)."""
        if job_id in self.jobs or job_id in self.completed:
            msg = f"Job {job_id} has already arrived"
            raise RuntimeError(msg)
        job = Job(job_id, time, burst, priority)
        self.jobs[job_id] = job
        return job

    def get(self, job_id):
        return self.jobs.get(job_id)

    def dispatch(self, job, core_id, time):
        """Put job on core_id at time; the first dispatch fixes its first-run timestamp."""
        if job.first_run is None:
            job.first_run = time
        job.last_dispatch = time
        job.core = core_id

    def accrue(self, job, time):
        """
        Charge the time job has run since its last dispatch (or last accrual).

        Calling it repeatedly at the same time is a no-op, so the engine can
        bring every running job up to date before comparing remaining times.
        """
        if job.last_dispatch is None:
            return
        job.remaining -= time - job.last_dispatch
        job.last_dispatch = time

    def preempt(self, job, time):
        """Take job off its core, freezing its remaining time."""
        self.accrue(job, time)
        job.last_dispatch = None
        job.core = None

    def complete(self, job_id, time):
        """
        Retire job_id at time and compute its statistics contributions.

        Returns:
            (wait, turnaround, response) where
              response   = first_run - arrival
              turnaround = time - arrival
              wait       = turnaround - burst
        """
        job = self.jobs.pop(job_id)
        job.remaining = 0
        job.last_dispatch = None
        job.core = None
        self.completed.add(job_id)

        turnaround = time - job.arrival
        wait = turnaround - job.burst
        response = job.first_run - job.arrival
        return wait, turnaround, response

    def state(self, job_id):
        """Return the JobState of job_id, or None if it never arrived."""
        if job_id in self.completed:
            return JobState.COMPLETED
        job = self.jobs.get(job_id)
        if job is None:
            return None
        return JobState.RUNNING if job.running else JobState.QUEUED

    def live_count(self):
        return len(self.jobs)

    def clear(self):
        self.jobs.clear()
