"""Dataset layer.

Loads the static XML user file once per process and hands the immutable
sequence of users to the search layer.
"""

from .store import DatasetError, DatasetStore, load_all

__all__ = ["DatasetError", "DatasetStore", "load_all"]
