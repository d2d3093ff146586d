"""
Core table: which job, if any, each processing core is running.

Cores are known as core 0 .. core N-1. When several cores are idle the
lowest id is always handed out first.
"""


class CoreTable:
    def __init__(self, num_cores):
        if not isinstance(num_cores, int) or isinstance(num_cores, bool) or num_cores <= 0:
            msg = f"Core count must be a positive integer, got {num_cores!r}"
            raise ValueError(msg)
        self.slots = [None] * num_cores

    def __len__(self):
        return len(self.slots)

    def _check(self, core_id):
        if not isinstance(core_id, int) or core_id < 0 or core_id >= len(self.slots):
            msg = f"Core id {core_id!r} out of range [0, {len(self.slots)})"
            raise ValueError(msg)

    def find_idle_core(self):
        """Return the lowest idle core id, or None if every core is busy."""
        for core_id, job in enumerate(self.slots):
            if job is None:
                return core_id
        return None

    def find_core_running(self, job_id):
        """Return the id of the core running job_id, or None."""
        for core_id, job in enumerate(self.slots):
            if job is not None and job.job_id == job_id:
                return core_id
        return None

    def job_on(self, core_id):
        self._check(core_id)
        return self.slots[core_id]

    def assign(self, core_id, job):
        self._check(core_id)
        if self.slots[core_id] is not None:
            msg = f"Core {core_id} is already running job {self.slots[core_id].job_id}"
            raise RuntimeError(msg)
        self.slots[core_id] = job

    def free(self, core_id):
        """Release core_id and return the job it was running (None if it was idle)."""
        self._check(core_id)
        job = self.slots[core_id]
        self.slots[core_id] = None
        return job

    def running(self):
        """Yield (core_id, job) for every busy core, lowest id first."""
        for core_id, job in enumerate(self.slots):
            if job is not None:
                yield core_id, job

    @property
    def idle_count(self):
        return sum(1 for job in self.slots if job is None)

    def clear(self):
        self.slots = [None] * len(self.slots)
