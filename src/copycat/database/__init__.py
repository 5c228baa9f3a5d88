"""
Storage backends for CopyCat.
"""

from copycat.database.history_file import HistoryFile, HistoryFileError

__all__ = [
    'HistoryFile',
    'HistoryFileError',
]
