"""Opaque identifier generation for audit, scan and analysis runs.

IDs combine the current time in milliseconds with a short random suffix,
e.g. ``audit_1718000000000_k3j9x0a1b``. They are not collision-proof and are
never persisted.
"""

from __future__ import annotations

import random
import string
import time
from typing import Callable

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits
SUFFIX_LENGTH = 9


def new_id(
    prefix: str,
    *,
    clock: Callable[[], float] = time.time,
    rng: random.Random | None = None,
) -> str:
    """Build an opaque id of the form ``<prefix>_<epoch_ms>_<suffix>``.

    Args:
        prefix: Kind of run (``audit``, ``scan``, ``analysis``).
        clock: Time source returning UNIX seconds.
        rng: Optional random source (for deterministic tests).

    Returns:
        The generated identifier.
    """
    epoch_ms = int(clock() * 1000)
    suffix = "".join((rng or random).choices(_SUFFIX_ALPHABET, k=SUFFIX_LENGTH))
    return f"{prefix}_{epoch_ms}_{suffix}"
