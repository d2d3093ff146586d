"""
Discrete-event driver for the scheduling engine.

Implements event-driven simulation with:
- Priority event queue (ordered by time, then event kind, with a counter
  to break remaining ties)
- Its own accounting of which job runs on which core and for how long, so
  the engine's decisions are checked against an independent clock
- Finish events computed from each job's remaining time, and quantum events
  when a Round Robin quantum is configured
- Stale event detection: every (re)assignment of a core bumps its version
  and events carrying an older version are skipped

Within one timestamp, finishes are processed first, then quantum expiries,
then arrivals.
"""
import heapq

from engine import NO_CHANGE, SchedulerEngine
from schedulers import Scheme

FINISH = 0
QUANTUM = 1
ARRIVAL = 2


class Simulator:
    def __init__(self, num_cores, scheme, arrivals, quantum=None, debug=False):
        self.num_cores = num_cores
        self.scheme = Scheme.parse(scheme)
        self.arrivals = list(arrivals)
        if self.scheme is Scheme.RR and quantum is None:
            msg = "Round Robin needs a quantum"
            raise ValueError(msg)
        # Quantum events only make sense for Round Robin
        self.quantum = quantum if self.scheme is Scheme.RR else None
        self.debug = debug
        self.engine = None
        self.time = 0
        self.event_queue = []  # (time, kind, counter, payload)
        self.event_counter = 0
        self.running = {}  # core_id -> (job_id, since)
        self.remaining = {}  # job_id -> time still to run
        self.versions = []
        self.finish_times = {}

    def log(self, msg):
        if self.debug:
            print(f"[t={self.time}] {msg}")

    def schedule_event(self, t, kind, payload):
        heapq.heappush(self.event_queue, (t, kind, self.event_counter, payload))
        self.event_counter += 1

    def run(self, horizon=None):
        """
        Replay every arrival against a fresh engine.

        Args:
            horizon: Stop before processing events later than this time
                     (None = run until every job has finished)

        Returns:
            dict mapping job_id -> completion time for finished jobs
        """
        # Fresh state on every run so one Simulator can be replayed
        self.engine = SchedulerEngine(debug=self.debug)
        self.engine.start_up(self.num_cores, self.scheme)
        self.time = 0
        self.event_queue = []
        self.event_counter = 0
        self.running = {}
        self.remaining = {}
        self.versions = [0] * self.num_cores
        self.finish_times = {}

        for arrival in sorted(self.arrivals, key=lambda a: a.time):
            self.schedule_event(arrival.time, ARRIVAL, arrival)

        while self.event_queue:
            t, kind, _, payload = heapq.heappop(self.event_queue)
            if horizon is not None and t > horizon:
                break
            self.time = t

            if kind == ARRIVAL:
                self._on_arrival(payload)
                continue

            core_id, version = payload
            if version != self.versions[core_id]:
                continue  # core was reassigned since this event was scheduled
            if kind == FINISH:
                self._on_finish(core_id)
            else:
                self._on_quantum(core_id)

        return self.finish_times

    @property
    def all_finished(self):
        return len(self.finish_times) == len(self.arrivals)

    def summary(self):
        return self.engine.stats.summary()

    def _start(self, core_id, job_id):
        self.versions[core_id] += 1
        version = self.versions[core_id]
        self.running[core_id] = (job_id, self.time)
        self.schedule_event(self.time + self.remaining[job_id], FINISH, (core_id, version))
        if self.quantum is not None:
            self.schedule_event(self.time + self.quantum, QUANTUM, (core_id, version))
        self.log(f"Core {core_id} RUNS job {job_id} (remaining={self.remaining[job_id]})")

    def _stop(self, core_id):
        job_id, since = self.running.pop(core_id)
        self.remaining[job_id] -= self.time - since
        self.versions[core_id] += 1
        return job_id

    def _on_arrival(self, arrival):
        self.remaining[arrival.job_id] = arrival.burst
        self.log(f"Job {arrival.job_id} ARRIVED (burst={arrival.burst}, priority={arrival.priority})")
        core_id = self.engine.job_arrival(arrival.job_id, self.time, arrival.burst, arrival.priority)
        if core_id == NO_CHANGE:
            return
        if core_id in self.running:
            preempted = self._stop(core_id)
            self.log(f"Job {preempted} PREEMPTED on core {core_id} (remaining={self.remaining[preempted]})")
        self._start(core_id, arrival.job_id)

    def _on_finish(self, core_id):
        job_id = self._stop(core_id)
        self.finish_times[job_id] = self.time
        self.log(f"Job {job_id} FINISHED on core {core_id}")
        following = self.engine.job_finished(core_id, job_id, self.time)
        if following != NO_CHANGE:
            self._start(core_id, following)

    def _on_quantum(self, core_id):
        job_id = self._stop(core_id)
        following = self.engine.quantum_expired(core_id, self.time)
        if following == NO_CHANGE:
            # Nobody else is waiting: the same job starts a new slice
            following = job_id
        self._start(core_id, following)
