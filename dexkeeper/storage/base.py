from typing import Protocol


class StoragePort(Protocol):
    """
    Durable string key/value store, shaped like browser local storage.

    Values are opaque strings (the collection store writes JSON). Reads of
    an unknown key return None. Implementations may raise OSError on I/O
    failure.
    """

    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...

    def remove_item(self, key: str) -> None: ...
