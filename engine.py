"""
Scheduling decision engine.

The engine reacts to three events supplied by an external driver, each
carrying the driver's current time:
1. job_arrival: a new job enters the system
2. job_finished: a core's job has completed
3. quantum_expired: a core's time slice ran out (Round Robin)

Each handler updates the job records, the core table and the ready queue,
then answers with a scheduling decision:
- job_arrival returns the core the new job should run on, or NO_CHANGE
- job_finished / quantum_expired return the job that should run on the
  given core next, or NO_CHANGE

The engine never advances time on its own. Preemption is decided by the
active scheme's comparer: a running job is displaced only when the comparer
ranks it behind the newcomer, which in practice means PSJF and PPRI.
"""
from cores import CoreTable
from jobs import JobTracker
from metrics import StatisticsAggregator
from priqueue import OrderedQueue
from schedulers import Scheme, get_comparer

NO_CHANGE = -1


class SchedulerEngine:
    def __init__(self, debug=False):
        self.debug = debug
        self.scheme = None
        self.comparer = None
        self.queue = None
        self.cores = None
        self.tracker = None
        self.stats = StatisticsAggregator()
        self.time = 0
        self.started = False
        self.shut_down = False

    def log(self, msg):
        if self.debug:
            print(f"[t={self.time}] {msg}")

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start_up(self, cores, scheme):
        """
        One-time initialisation.

        Args:
            cores: Number of cores, known as core 0 .. cores-1
            scheme: Scheme (or its name) selecting the queue ordering
        """
        if self.started:
            msg = "Scheduler has already been started"
            raise RuntimeError(msg)
        scheme = Scheme.parse(scheme)
        core_table = CoreTable(cores)

        self.scheme = scheme
        self.comparer = get_comparer(scheme)
        self.queue = OrderedQueue(self.comparer)
        self.cores = core_table
        self.tracker = JobTracker()
        self.started = True
        self.log(f"Scheduler STARTED (scheme={scheme.name}, cores={cores})")

    def shutdown(self):
        """Release all internal storage. Every job must have completed."""
        self._require_active()
        if self.tracker.live_count():
            msg = f"Cannot shut down with {self.tracker.live_count()} job(s) queued or running"
            raise RuntimeError(msg)
        self.queue.clear()
        self.cores.clear()
        self.tracker.clear()
        self.shut_down = True
        self.log("Scheduler SHUT DOWN")

    def _require_active(self):
        if not self.started:
            msg = "Scheduler has not been started"
            raise RuntimeError(msg)
        if self.shut_down:
            msg = "Scheduler has been shut down"
            raise RuntimeError(msg)

    def _advance(self, time):
        if time < self.time:
            msg = f"Time went backwards: {time} < {self.time}"
            raise ValueError(msg)
        self.time = time

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------
    def job_arrival(self, job_id, time, burst, priority=0):
        """
        Handle the arrival of job_id at time.

        Returns:
            Core id the job should run on (preempting that core's job if it
            has one), or NO_CHANGE if the job has to wait
        """
        self._require_active()
        if burst <= 0:
            msg = f"Job {job_id} must have a positive burst, got {burst}"
            raise ValueError(msg)
        if self.tracker.state(job_id) is not None:
            msg = f"Job {job_id} has already arrived"
            raise RuntimeError(msg)
        self._advance(time)

        job = self.tracker.create(job_id, time, burst, priority)
        # Bring remaining times up to date so PSJF compares against "now"
        for _, running in self.cores.running():
            self.tracker.accrue(running, time)

        position = self.queue.insert(job)
        self.log(f"Job {job_id} ARRIVED (burst={burst}, priority={priority}, position={position})")

        core_id = self.cores.find_idle_core()
        if core_id is not None:
            # An idle core means the queue was empty, so the newcomer is the head
            self.queue.remove_front()
            self._dispatch(job, core_id, time)
            return core_id

        if position != 0:
            return NO_CHANGE

        core_id = self._choose_victim(job)
        if core_id is None:
            return NO_CHANGE

        victim = self.cores.free(core_id)
        self.tracker.preempt(victim, time)
        self.queue.remove_front()
        self.queue.insert(victim)
        self.log(f"Job {victim.job_id} PREEMPTED on core {core_id} "
                 f"(remaining={victim.remaining})")
        self._dispatch(job, core_id, time)
        return core_id

    def job_finished(self, core_id, job_id, time):
        """
        Handle completion of job_id on core_id.

        Returns:
            Job id to run next on core_id, or NO_CHANGE if the core stays idle
        """
        self._require_active()
        job = self.cores.job_on(core_id)
        if job is None or job.job_id != job_id:
            running = None if job is None else job.job_id
            msg = f"Core {core_id} is not running job {job_id} (running: {running})"
            raise RuntimeError(msg)
        self._advance(time)

        self._complete(core_id, job, time)
        return self._dispatch_next(core_id, time)

    def quantum_expired(self, core_id, time):
        """
        Handle the end of a time slice on core_id.

        The job on the core goes to the back of the queue (Round Robin) and
        the queue head takes the core. A job with no time left completes
        instead.

        Returns:
            Job id to run next on core_id, or NO_CHANGE if nothing changes
            (the queue was and remains empty, so the same job keeps the core,
            or the core stays idle)
        """
        self._require_active()
        job = self.cores.job_on(core_id)
        self._advance(time)

        if job is None:
            return self._dispatch_next(core_id, time)

        self.tracker.accrue(job, time)
        if job.remaining <= 0:
            self._complete(core_id, job, time)
            return self._dispatch_next(core_id, time)

        self.cores.free(core_id)
        self.tracker.preempt(job, time)
        self.queue.insert(job)
        following = self.queue.remove_front()
        self._dispatch(following, core_id, time)
        if following is job:
            return NO_CHANGE
        self.log(f"Job {job.job_id} QUANTUM EXPIRED on core {core_id} (remaining={job.remaining})")
        return following.job_id

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _dispatch(self, job, core_id, time):
        self.cores.assign(core_id, job)
        self.tracker.dispatch(job, core_id, time)
        self.log(f"Job {job.job_id} STARTED on core {core_id} (remaining={job.remaining})")

    def _dispatch_next(self, core_id, time):
        following = self.queue.remove_front()
        if following is None:
            return NO_CHANGE
        self._dispatch(following, core_id, time)
        return following.job_id

    def _complete(self, core_id, job, time):
        self.cores.free(core_id)
        wait, turnaround, response = self.tracker.complete(job.job_id, time)
        self.stats.record(wait, turnaround, response)
        self.log(f"Job {job.job_id} FINISHED on core {core_id} "
                 f"(wait={wait}, turnaround={turnaround}, response={response})")

    def _choose_victim(self, job):
        """
        Pick the core whose job should give way to job, or None.

        Candidates are running jobs the comparer ranks behind job. Among
        them the one ranked last loses its core; equal ranks go to the most
        recent arrival.
        """
        victim_core = None
        victim = None
        for core_id, running in self.cores.running():
            if self.comparer(running, job) <= 0:
                continue
            if victim is None:
                victim_core, victim = core_id, running
                continue
            order = self.comparer(victim, running)
            if order < 0 or (order == 0 and running.arrival > victim.arrival):
                victim_core, victim = core_id, running
        return victim_core

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def job_state(self, job_id):
        """JobState of job_id (None if it never arrived)."""
        self._require_active()
        return self.tracker.state(job_id)

    def queue_snapshot(self):
        """
        Current schedule as (job_id, core_id) pairs.

        Running jobs come first in core order, followed by the ready queue
        from head to tail with core_id NO_CHANGE.
        """
        self._require_active()
        snapshot = [(job.job_id, core_id) for core_id, job in self.cores.running()]
        snapshot.extend((job.job_id, NO_CHANGE) for job in self.queue)
        return snapshot

    def show_queue(self):
        """Render queue_snapshot() as e.g. '2(0) 4(-1) 1(-1)'."""
        return " ".join(f"{job_id}({core_id})" for job_id, core_id in self.queue_snapshot())

    def average_waiting_time(self):
        return self.stats.average_waiting_time()

    def average_turnaround_time(self):
        return self.stats.average_turnaround_time()

    def average_response_time(self):
        return self.stats.average_response_time()
