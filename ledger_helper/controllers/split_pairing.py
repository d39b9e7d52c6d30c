"""
Pairing helpers for loose collections of splits.

Matches each split with the opposite leg it ``is_pair_of``. Only two-split
pairing is checked here. Whether a whole transaction balances is up to the
transaction that owns the splits.
"""

# ledger_helper/controllers/split_pairing.py
from __future__ import annotations

import logging
from typing import Iterable, List, Tuple

from ledger_helper.data_model.interfaces import ISplit

log = logging.getLogger(__name__)


def _match(splits: list[ISplit]) -> tuple[list[tuple[ISplit, ISplit]], list[ISplit]]:
    used = [False] * len(splits)
    pairs: list[tuple[ISplit, ISplit]] = []
    for i, first in enumerate(splits):
        if used[i]:
            continue
        for j in range(i + 1, len(splits)):
            if not used[j] and first.is_pair_of(splits[j]):
                used[i] = used[j] = True
                pairs.append((first, splits[j]))
                log.debug("Paired %s with %s", first, splits[j])
                break
    leftovers = [s for s, u in zip(splits, used) if not u]
    return pairs, leftovers


def find_pairs(splits: Iterable[ISplit]) -> List[Tuple[ISplit, ISplit]]:
    """Greedily pair splits in input order; each split is used at most once.

    Parameters
    ----------
    splits : Iterable[ISplit]
        Candidate splits. Earlier splits pick their partner first, taking the
        first later split they are a pair of.

    Returns
    -------
    List[Tuple[ISplit, ISplit]]
        ``(first, second)`` tuples, ordered by the position of ``first``.
    """
    pairs, leftovers = _match(list(splits))
    if leftovers:
        log.warning("%d split(s) have no pair", len(leftovers))
    return pairs


def unpaired(splits: Iterable[ISplit]) -> List[ISplit]:
    """Return the splits that :func:`find_pairs` leaves without a partner."""
    _, leftovers = _match(list(splits))
    return leftovers
