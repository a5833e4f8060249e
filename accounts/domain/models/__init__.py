from .profile import SellerProfile

__all__ = ["SellerProfile"]
