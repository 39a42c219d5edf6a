from .store import ApplicationStore, KeyValueStorage

__all__ = ["ApplicationStore", "KeyValueStorage"]
