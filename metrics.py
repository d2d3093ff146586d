"""
Performance statistics for scheduler evaluation.

Each completed job contributes three values:
1. Wait time: turnaround - burst (time spent ready but not running)
2. Turnaround time: completion - arrival
3. Response time: first run - arrival

The aggregator keeps every contribution so the averages can be recomputed
at any point (reads never mutate state) and tail metrics are available for
comparisons across schemes.
"""
import numpy as np


class StatisticsAggregator:
    def __init__(self):
        self.waits = []
        self.turnarounds = []
        self.responses = []

    def record(self, wait, turnaround, response):
        """Add the contributions of one completed job."""
        self.waits.append(wait)
        self.turnarounds.append(turnaround)
        self.responses.append(response)

    @property
    def completed(self):
        return len(self.turnarounds)

    @staticmethod
    def _mean(values):
        if not values:
            return 0.0
        return float(np.mean(values))

    def average_waiting_time(self):
        return self._mean(self.waits)

    def average_turnaround_time(self):
        return self._mean(self.turnarounds)

    def average_response_time(self):
        return self._mean(self.responses)

    def p95_turnaround(self):
        """95th percentile turnaround time, or 0.0 if nothing has completed."""
        if not self.turnarounds:
            return 0.0
        return float(np.percentile(self.turnarounds, 95))

    def max_wait(self):
        if not self.waits:
            return 0.0
        return float(np.max(self.waits))

    def summary(self):
        """
        Snapshot of all statistics as a plain dict.

        Returns:
            dict with keys completed, avg_wait, avg_turnaround, avg_response,
            p95_turnaround, max_wait
        """
        return {
            'completed': self.completed,
            'avg_wait': self.average_waiting_time(),
            'avg_turnaround': self.average_turnaround_time(),
            'avg_response': self.average_response_time(),
            'p95_turnaround': self.p95_turnaround(),
            'max_wait': self.max_wait(),
        }
