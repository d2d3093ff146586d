def fcfs_compare(queued, new):
    """
    First-Come, First-Served.

    The queued job always stays ahead, so the queue is pure arrival order
    and a running job is never displaced.
    """
    return -1
