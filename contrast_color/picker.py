"""
ContrastColorPicker: the configured, cached entry point.

    picker = ContrastColorPicker(ContrastConfig(candidates="material"))
    picker.contrast_color("#1e1e1e")

A process-wide default picker backs the module-level contrast_color().
"""

import dataclasses
import logging
import os
import threading
from dataclasses import dataclass
from typing import Optional, Tuple

from .caches import CandidateLabCache, ResultCache
from .color_difference import delta_e_cie2000
from .palettes import BASIC_COLORS, PALETTES, get_palette
from .resolver import resolve_color
from .selector import format_color, rank_candidates, select_best

logger = logging.getLogger(__name__)

ENV_CANDIDATES = "CONTRAST_COLOR_CANDIDATES"
ENV_HEX_OUTPUT = "CONTRAST_COLOR_HEX_OUTPUT"
ENV_CACHE_SIZE = "CONTRAST_COLOR_CACHE_SIZE"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def parse_candidates(value):
    """Turn a preset name or comma-separated list into a candidate tuple."""
    value = value.strip()
    if value.lower() in PALETTES:
        return get_palette(value)
    return tuple(part.strip() for part in value.split(",") if part.strip())


@dataclass(frozen=True)
class ContrastConfig:
    """
    Picker configuration.

    `candidates` may be given as a preset name ("basic", "material"), a
    comma-separated string or any sequence of identifiers; it is stored as a
    tuple. `result_cache_size` is None (unbounded) or a positive int.
    """
    candidates: Tuple[str, ...] = BASIC_COLORS
    use_hex_output: bool = True
    result_cache_size: Optional[int] = None

    def __post_init__(self):
        candidates = self.candidates
        if isinstance(candidates, str):
            candidates = parse_candidates(candidates)
        object.__setattr__(self, "candidates", tuple(candidates))

        size = self.result_cache_size
        if size is not None and size < 1:
            raise ValueError(f"result_cache_size must be a positive int or None, got {size!r}")

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from CONTRAST_COLOR_* environment variables."""
        environ = os.environ if environ is None else environ
        kwargs = {}

        if environ.get(ENV_CANDIDATES):
            kwargs["candidates"] = parse_candidates(environ[ENV_CANDIDATES])

        hex_output = environ.get(ENV_HEX_OUTPUT)
        if hex_output:
            flag = hex_output.strip().lower()
            if flag not in _TRUE | _FALSE:
                raise ValueError(f"{ENV_HEX_OUTPUT} must be a boolean, got {hex_output!r}")
            kwargs["use_hex_output"] = flag in _TRUE

        cache_size = environ.get(ENV_CACHE_SIZE)
        if cache_size:
            try:
                kwargs["result_cache_size"] = int(cache_size)
            except ValueError:
                raise ValueError(f"{ENV_CACHE_SIZE} must be an integer, got {cache_size!r}") from None

        return cls(**kwargs)


class ContrastColorPicker:
    """
    Picks the most distinct candidate for a reference color.

    Owns a CandidateLabCache and a ResultCache. Answers are memoized per raw
    query string and are kept when the configuration changes, unless the
    caller clears them.
    """

    def __init__(self, config=None, seed=None, distance=delta_e_cie2000, resolver=resolve_color):
        self.config = config or ContrastConfig()
        self.lab_cache = CandidateLabCache(resolver)
        self.results = ResultCache(seed, maxsize=self.config.result_cache_size)
        self.distance = distance
        self.resolver = resolver

    def contrast_color(self, color):
        """Return the formatted contrast color for `color`."""
        cached = self.results.get(color)
        if cached is not None:
            logger.debug("Result cache hit for %r", color)
            return cached

        reference = self.resolver(color)
        best = select_best(reference, self.config.candidates, self.lab_cache,
                           distance=self.distance, resolver=self.resolver)
        result = format_color(best, self.config.use_hex_output, self.resolver)
        return self.results.put(color, result)

    def rank(self, color):
        """(identifier, distance) pairs for `color`, most distinct first. Not cached."""
        return rank_candidates(self.resolver(color), self.config.candidates, self.lab_cache,
                               distance=self.distance, resolver=self.resolver)

    def configure(self, clear_results=False, **changes):
        """
        Replace configuration fields.

        Changing candidates invalidates the Lab cache. Cached answers survive
        with a logged warning unless `clear_results` is set.
        """
        new_config = dataclasses.replace(self.config, **changes)
        if new_config == self.config:
            return self.config

        if new_config.candidates != self.config.candidates:
            self.lab_cache.reset()
        if new_config.result_cache_size != self.config.result_cache_size:
            self.results = ResultCache(self.results.snapshot(), maxsize=new_config.result_cache_size)

        if clear_results:
            self.results.clear()
        elif len(self.results):
            logger.warning(
                "Configuration changed but %d cached contrast colors were computed "
                "against the previous configuration; call clear_results() to recompute",
                len(self.results),
            )
        self.config = new_config
        return new_config

    def set_candidates(self, candidates, clear_results=False):
        return self.configure(clear_results=clear_results, candidates=candidates)

    def clear_results(self):
        self.results.clear()

    def reset(self):
        """Drop both caches."""
        self.lab_cache.reset()
        self.results.clear()


_default_picker = None
_default_lock = threading.Lock()


def get_default_picker():
    """Return the shared picker, built from the environment on first use."""
    global _default_picker
    with _default_lock:
        if _default_picker is None:
            _default_picker = ContrastColorPicker(ContrastConfig.from_env())
        return _default_picker


def reset_default_picker(config=None):
    """Discard the shared picker; the next call builds a fresh one."""
    global _default_picker
    with _default_lock:
        _default_picker = ContrastColorPicker(config) if config is not None else None


def contrast_color(color):
    """Module-level shortcut for get_default_picker().contrast_color(color)."""
    return get_default_picker().contrast_color(color)
