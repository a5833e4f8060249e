from accounts.domain.models import SellerProfile


__all__ = ["SellerProfile"]
