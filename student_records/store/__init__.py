# ==============================================
# LAYER 4: STORE (In-memory collection)
# ==============================================
#
# This package owns the authoritative list of records and the
# cached offset table, and delegates every file operation to
# the persistence layer.
#
# Modules:
# --------
# - record_store.py  → add / find / delete / sort / read_at_index / persist
#
# ==============================================

from .record_store import RecordStore

__all__ = ["RecordStore"]
