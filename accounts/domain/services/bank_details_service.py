"""
BankDetailsService - Seller payout destinations

Read-only lookup of the bank account each seller wants buyers to transfer
money to. The purchase flow calls it once per order with every distinct
seller of the cart.
"""

from dataclasses import dataclass
from typing import Dict, Iterable

from accounts.domain.models import SellerProfile
from utils.service_base import BaseService


@dataclass(frozen=True)
class BankDestination:
    bank_account_name: str = ""
    bank_account_holder: str = ""
    bank_account_number: str = ""


class BankDetailsService(BaseService):
    """
    Resolves seller ids to bank destinations.

    Sellers that never filled in their profile resolve to an empty
    destination rather than an error, so an order can still be placed and the
    buyer contacts the seller out of band.
    """

    @BaseService.log_performance
    def get_bank_destinations(self, seller_ids: Iterable[int]) -> Dict[int, BankDestination]:
        seller_ids = list(dict.fromkeys(seller_ids))
        if not seller_ids:
            return {}

        profiles = SellerProfile.objects.filter(user_id__in=seller_ids).only(
            "user_id", "bank_account_name", "bank_account_holder", "bank_account_number"
        )
        destinations = {
            profile.user_id: BankDestination(
                bank_account_name=profile.bank_account_name,
                bank_account_holder=profile.bank_account_holder,
                bank_account_number=profile.bank_account_number,
            )
            for profile in profiles
        }

        missing = [seller_id for seller_id in seller_ids if seller_id not in destinations]
        if missing:
            self.logger.warning(f"No bank details on file for sellers {missing}")
            for seller_id in missing:
                destinations[seller_id] = BankDestination()

        return destinations
