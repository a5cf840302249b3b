"""
Memoization layers used by ContrastColorPicker.

CandidateLabCache holds the L*a*b* values of one candidate palette and
rebuilds itself when asked for a different palette. ResultCache maps raw
query strings to their formatted answers.
"""

import logging
import threading
from collections import OrderedDict

import numpy as np

from .color_space import LabColor, rgb_to_lab
from .resolver import resolve_color

logger = logging.getLogger(__name__)


def candidate_labs(candidates, resolver=resolve_color):
    """Resolve and convert every candidate, returning a tuple of LabColor."""
    rgbs = np.array([resolver(c) for c in candidates], dtype=float).reshape(-1, 3)
    return tuple(LabColor(*(float(v) for v in row)) for row in rgb_to_lab(rgbs))


class CandidateLabCache:
    """
    Lab values for the most recently requested candidate sequence.

    The cache is keyed by the sequence's fingerprint (the tuple of its
    identifiers); asking for a different sequence replaces the stored one.
    `generation` counts builds and resets.
    """

    def __init__(self, resolver=resolve_color):
        self._resolver = resolver
        self._lock = threading.Lock()
        self._fingerprint = None
        self._labs = None
        self.generation = 0

    @staticmethod
    def fingerprint(candidates):
        return tuple(candidates)

    @property
    def current(self):
        """Fingerprint of the cached sequence, or None when empty."""
        return self._fingerprint

    def is_valid_for(self, candidates):
        return self._labs is not None and self._fingerprint == self.fingerprint(candidates)

    def labs_for(self, candidates):
        """Return the Lab values parallel to `candidates`, building them on first use."""
        key = self.fingerprint(candidates)
        with self._lock:
            if self._labs is not None and self._fingerprint == key:
                return self._labs
            stale = self._fingerprint

        # Resolution errors propagate before anything is stored
        labs = candidate_labs(key, self._resolver)

        with self._lock:
            if stale is not None and stale != key:
                logger.debug("Candidate set changed (%d -> %d colors), rebuilding Lab cache",
                             len(stale), len(key))
            self._fingerprint = key
            self._labs = labs
            self.generation += 1
        logger.debug("Built Lab cache for %d candidates (generation %d)", len(key), self.generation)
        return labs

    def reset(self):
        with self._lock:
            self._fingerprint = None
            self._labs = None
            self.generation += 1


class ResultCache:
    """
    Exact-match memo of query string -> formatted contrast color.

    Keys are not normalized, so "red" and "#ff0000" are separate entries.
    The first value stored for a key wins. With `maxsize` set, the least
    recently used entry is evicted once the cache is full.
    """

    def __init__(self, initial=None, maxsize=None):
        if maxsize is not None and maxsize < 1:
            raise ValueError(f"maxsize must be positive or None, got {maxsize}")
        self.maxsize = maxsize
        self._entries = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0
        for key, value in dict(initial or {}).items():
            self.put(key, value)

    def get(self, key):
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self.misses += 1
                return None
            self.hits += 1
            if self.maxsize is not None:
                self._entries.move_to_end(key)
            return value

    def put(self, key, value):
        """Store `value` unless `key` already has one; return the stored value."""
        with self._lock:
            existing = self._entries.get(key)
            if existing is not None:
                return existing
            self._entries[key] = value
            if self.maxsize is not None and len(self._entries) > self.maxsize:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Result cache full, evicted %r", evicted)
            return value

    def clear(self):
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0

    def snapshot(self):
        with self._lock:
            return dict(self._entries)

    def __contains__(self, key):
        with self._lock:
            return key in self._entries

    def __len__(self):
        with self._lock:
            return len(self._entries)
