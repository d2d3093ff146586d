"""
Comparator-ordered queue used as the scheduler's ready queue.

Entries are kept in the order produced by an injected comparer function
compare(queued, new) -> int, following the three-way convention:
- <= 0: the queued entry keeps its place ahead of the new one
- > 0:  the new entry goes in front of the queued one

Ties keep insertion order: a new entry lands after every entry it
compares equal-or-worse to, so earlier insertions win ties.
"""


class OrderedQueue:
    def __init__(self, comparer):
        self.comparer = comparer
        self._entries = []

    def insert(self, item):
        """
        Insert item at the position dictated by the comparer.

        Returns:
            Zero-based index where item was stored (0 = front of the queue)
        """
        index = 0
        for queued in self._entries:
            if self.comparer(queued, item) > 0:
                break
            index += 1
        self._entries.insert(index, item)
        return index

    def peek_front(self):
        """Return the head of the queue without removing it, or None if empty."""
        return self._entries[0] if self._entries else None

    def remove_front(self):
        """Remove and return the head of the queue, or None if empty."""
        if not self._entries:
            return None
        return self._entries.pop(0)

    def at(self, index):
        """Return the entry at index, or None if the queue has no such entry."""
        if index < 0 or index >= len(self._entries):
            return None
        return self._entries[index]

    def remove_all(self, item):
        """
        Remove every entry that *is* item (identity, not the comparer).

        The surviving entries keep their relative order. The list is rebuilt
        from the non-matching entries in a single pass, so nothing already
        removed is visited again.

        Returns:
            Number of entries removed
        """
        kept = [queued for queued in self._entries if queued is not item]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def remove_at(self, index):
        """Remove and return the entry at index, or None if index is out of range."""
        if index < 0 or index >= len(self._entries):
            return None
        return self._entries.pop(index)

    def size(self):
        return len(self._entries)

    def clear(self):
        self._entries = []

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))

    def __repr__(self):
        return f"OrderedQueue({self._entries!r})"
