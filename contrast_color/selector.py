"""
Best-candidate search and output formatting.
"""

import logging

from .caches import candidate_labs
from .color_difference import delta_e_cie2000
from .color_space import to_lab
from .errors import EmptyCandidateSet
from .resolver import is_hex, resolve_color, rgb_to_hex

logger = logging.getLogger(__name__)

# Distances closer than this count as a tie; the earlier candidate keeps the win
TIE_TOLERANCE = 1e-9


def _score(reference, candidates, lab_cache, distance, resolver):
    """Yield (index, distance) for each distinct candidate, in order."""
    if not candidates:
        raise EmptyCandidateSet()
    if isinstance(reference, str):
        reference = resolver(reference)
    reference_lab = to_lab(reference)
    if lab_cache is not None:
        labs = lab_cache.labs_for(candidates)
    else:
        labs = candidate_labs(candidates, resolver)

    # Duplicate identifiers can never beat their first occurrence
    seen = set()
    for index, (identifier, lab) in enumerate(zip(candidates, labs)):
        if identifier in seen:
            continue
        seen.add(identifier)
        yield index, distance(reference_lab, lab)


def _pick(scores):
    """Running maximum; a later pair must win by more than TIE_TOLERANCE."""
    best = None
    for pair in scores:
        if best is None or pair[1] > best[1] + TIE_TOLERANCE:
            best = pair
    return best


def select_best(reference, candidates, lab_cache=None, distance=delta_e_cie2000,
                resolver=resolve_color):
    """
    Return the candidate identifier farthest from `reference`.

    Args:
        reference: RGBColor (or any RGB triple in 0-1), or a color identifier
        candidates: ordered sequence of color identifiers
        lab_cache: optional CandidateLabCache reused across calls
        distance: metric on two Lab colors, CIEDE2000 by default
        resolver: identifier -> RGBColor

    Raises:
        EmptyCandidateSet: if `candidates` is empty
        InvalidColorInput: if the reference or a candidate cannot be resolved
    """
    candidates = tuple(candidates)
    best_index, best_distance = _pick(_score(reference, candidates, lab_cache, distance, resolver))
    winner = candidates[best_index]
    logger.debug("Selected %s (delta E %.3f) out of %d candidates",
                 winner, best_distance, len(candidates))
    return winner


def rank_candidates(reference, candidates, lab_cache=None, distance=delta_e_cie2000,
                    resolver=resolve_color):
    """
    List (identifier, distance) pairs from most to least distinct.

    Each position is filled the way select_best picks its winner, so
    candidates within TIE_TOLERANCE of each other keep their configured
    order and the head of the list is always the select_best winner.
    """
    candidates = tuple(candidates)
    remaining = list(_score(reference, candidates, lab_cache, distance, resolver))
    ranked = []
    while remaining:
        best = _pick(remaining)
        remaining.remove(best)
        ranked.append(best)
    return [(candidates[index], d) for index, d in ranked]


def format_color(identifier, use_hex=True, resolver=resolve_color):
    """Render `identifier` as '#rrggbb' when `use_hex`, else return it unchanged."""
    if use_hex and not is_hex(identifier):
        return rgb_to_hex(resolver(identifier))
    return identifier
