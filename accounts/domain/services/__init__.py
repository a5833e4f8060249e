from .bank_details_service import BankDestination, BankDetailsService

__all__ = ["BankDestination", "BankDetailsService"]
