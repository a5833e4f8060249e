"""
Money and grouping helpers shared by purchase creation and confirmation.

All calculations use Decimal for precision (no floating point errors). The
purchase total and every seller subtotal are sums of line totals rounded to
whole currency units, which keeps sum(subtotals) == total by construction.
"""

from collections import defaultdict
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Tuple, TypeVar

ItemT = TypeVar("ItemT")


def line_total(unit_price, quantity: int) -> Decimal:
    """Exact line total: unit price x quantity."""
    return (Decimal(str(unit_price)) * quantity).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def rounded_line_total(unit_price, quantity: int) -> int:
    """Line total rounded half-up to a whole currency unit."""
    return int(line_total(unit_price, quantity).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def seller_subtotals(lines: Iterable[Tuple[int, int]]) -> Dict[int, int]:
    """
    Sum rounded line totals per seller.

    Args:
        lines: (seller_id, rounded_line_total) pairs

    Returns:
        Mapping of seller id to subtotal, keyed in ascending seller id order
    """
    totals: Dict[int, int] = defaultdict(int)
    for seller_id, amount in lines:
        totals[seller_id] += amount
    return {seller_id: totals[seller_id] for seller_id in sorted(totals)}


def group_items_by_seller(items: Iterable[ItemT], key=lambda item: item.seller_id) -> Dict[int, List[ItemT]]:
    """
    Group purchase items by their snapshotted seller.

    Sellers are ordered by ascending id so that proofs submitted as a plain
    list pair with sellers deterministically.
    """
    groups: Dict[int, List[ItemT]] = defaultdict(list)
    for item in items:
        groups[key(item)].append(item)
    return {seller_id: groups[seller_id] for seller_id in sorted(groups)}


def requested_quantities(lines: Iterable[Tuple[int, int]]) -> Dict[int, int]:
    """Combine (product_id, quantity) pairs so a repeated product is checked once against its total."""
    totals: Dict[int, int] = defaultdict(int)
    for product_id, quantity in lines:
        totals[product_id] += quantity
    return dict(totals)
