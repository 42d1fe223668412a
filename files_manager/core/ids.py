# files_manager/core/ids.py
import itertools
import os
import string
import threading
import time

ID_LENGTH = 24
ROOT_ID = 0
# how the root sentinel is stored in the parent_id column
ROOT_PARENT = "0"

_HEX_DIGITS = frozenset(string.hexdigits)

_process_random = os.urandom(5).hex()
_counter = itertools.count(int.from_bytes(os.urandom(2), "big"))
_counter_lock = threading.Lock()


def is_valid_id(value) -> bool:
    """True iff value is a 24 character hexadecimal string (any case)."""
    if not isinstance(value, str) or len(value) != ID_LENGTH:
        return False
    return all(char in _HEX_DIGITS for char in value)


def new_id() -> str:
    """
    Generate a 24 char hex identifier.

    Layout: 4-byte seconds timestamp, 5-byte per-process random, 3-byte
    counter. Ids produced by one process sort lexically in creation order.
    """
    with _counter_lock:
        count = next(_counter) % 0x1000000
        seconds = int(time.time())
    return f"{seconds:08x}{_process_random}{count:06x}"


def is_root(parent_id) -> bool:
    return parent_id is None or parent_id == ROOT_ID or parent_id == ROOT_PARENT


def normalize_id(value: str) -> str:
    """Canonical lowercase form of an id already accepted by is_valid_id."""
    return value.lower()
