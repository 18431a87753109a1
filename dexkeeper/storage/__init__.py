from dexkeeper.storage.base import StoragePort
from dexkeeper.storage.json_file import JsonFileStorage
from dexkeeper.storage.memory import InMemoryStorage

__all__ = [
    "InMemoryStorage",
    "JsonFileStorage",
    "StoragePort",
]
