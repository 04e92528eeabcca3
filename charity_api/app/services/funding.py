"""
Helpers for parsing and sorting funding amounts.

Funding amounts are stored as display text with a currency symbol and
thousands separators (``"₹1,25,000"``).  For sorting, everything except
digits and the decimal point is stripped and the integer part is used.
"""

import logging
import math
import re
from typing import Any, Dict, Iterable, List, Tuple

logger = logging.getLogger(__name__)

_NON_NUMERIC = re.compile(r"[^0-9.]")


def parse_fund_amount(value: Any) -> int:
    """Return the whole-number funding amount represented by ``value``.

    ``"₹1,000"`` and ``1000`` both give ``1000``; ``"₹99.50"`` gives
    ``99``.  Raises ``ValueError`` when no digits remain after
    stripping formatting characters or when ``value`` is not a string
    or number.
    """
    if isinstance(value, bool):
        raise ValueError(f"Malformed fund amount: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Malformed fund amount: {value!r}")
        return int(value)
    if not isinstance(value, str):
        raise ValueError(f"Malformed fund amount: {value!r}")
    whole = _NON_NUMERIC.sub("", value).split(".", 1)[0]
    if not whole:
        raise ValueError(f"Malformed fund amount: {value!r}")
    return int(whole)


def _sort_key(record: Dict[str, Any]) -> Tuple[int, int]:
    try:
        return (0, parse_fund_amount(record.get("fund_amount")))
    except ValueError:
        logger.warning(
            "Organization %s has malformed fund_amount %r; sorting it last",
            record.get("id"),
            record.get("fund_amount"),
        )
        return (1, 0)


def sort_by_funding(records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Return ``records`` ordered by funding amount, lowest first.

    The sort is stable.  Records with a malformed amount keep their
    relative order and come after every well-formed record.
    """
    return sorted(records, key=_sort_key)
