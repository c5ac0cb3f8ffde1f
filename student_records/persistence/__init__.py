# ==============================================
# LAYER 3: PERSISTENCE (Flat file + offset table)
# ==============================================
#
# This package reads and writes the backing text file and
# remembers where each line started, so a single line can be
# re-read later without scanning the whole file.
#
# Modules:
# --------
# - flat_file_adapter.py  → load / save_all / append / read_at
#
# ==============================================

from .flat_file_adapter import FlatFileAdapter, LoadResult

__all__ = ["FlatFileAdapter", "LoadResult"]
