def rr_compare(queued, new):
    """
    Round Robin ordering.

    New arrivals and jobs whose quantum expired both go to the back of the
    queue; the rotation itself is driven by quantum expiry events.
    """
    return -1
