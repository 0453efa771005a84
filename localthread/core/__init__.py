# Core modules

from .config import settings, get_settings, Settings
from .errors import LocalThreadError, CouponError, OrderError

__all__ = ["settings", "get_settings", "Settings", "LocalThreadError", "CouponError", "OrderError"]
