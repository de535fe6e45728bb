from .store import ApplicationStore, ApplicationNotFoundError, DEFAULT_DB_PATH

__all__ = [
    "ApplicationStore",
    "ApplicationNotFoundError",
    "DEFAULT_DB_PATH",
]
