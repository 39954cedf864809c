"""
Local storage implementations of the KeyValueStore port.
"""

from infrastructure.storage.json_file_store import JsonFileKeyValueStore

__all__ = ["JsonFileKeyValueStore"]
