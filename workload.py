"""
Synthetic workload generation for CPU scheduling simulation.

Generates jobs with:
- Poisson arrivals (integer times, strictly increasing so no two jobs share
  an arrival time)
- Exponential bursts (parameterizable mean, at least 1 time unit)
- Uniform priorities in [0, max_priority] (lower value = higher priority)

Supports Common Random Numbers (CRN) via configurable seed so every scheme
can be compared on exactly the same workload.
"""
from collections import namedtuple

import numpy as np

Arrival = namedtuple("Arrival", ["job_id", "time", "burst", "priority"])


def generate_jobs(
    num_jobs=50,
    arrival_rate=0.5,        # jobs per time unit
    mean_burst=5.0,          # mean burst length (time units)
    max_priority=5,
    seed=42
):
    """
    Generate a synthetic workload.
    Returns a list of Arrival records ordered by arrival time.
    """
    rng = np.random.RandomState(seed)

    arrivals = []
    t = 0
    for job_id in range(num_jobs):
        if job_id > 0:
            # Interarrival ~ Exponential(lambda = arrival_rate), rounded up to keep times distinct
            interarrival = rng.exponential(1.0 / arrival_rate)
            t += max(1, int(np.ceil(interarrival)))

        burst = max(1, int(round(rng.exponential(mean_burst))))
        priority = int(rng.randint(0, max_priority + 1))

        arrivals.append(Arrival(job_id=job_id, time=t, burst=burst, priority=priority))

    return arrivals
