"""
Storage adapters.
"""
from .json_store import APPLICATIONS_KEY, JsonApplicationStore
from .local_storage import LocalStorage

__all__ = ["APPLICATIONS_KEY", "JsonApplicationStore", "LocalStorage"]
