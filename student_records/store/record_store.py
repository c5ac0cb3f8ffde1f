# ==============================================
# RecordStore — In-memory collection + offset table
# ==============================================
#
# PURPOSE:
#   This is the class the presentation layer talks to. It keeps
#   the records in memory and keeps the offset table in step
#   with the backing file after every mutation.
#
# HOW IT CONNECTS THE LAYERS:
#
#   ┌──────────────────────────────────────────────┐
#   │                 RecordStore                  │
#   │                                              │
#   │   _records: list[StudentRecord]  (memory)    │
#   │   _offsets: list[int]            (cache)     │
#   │                 │                            │
#   │                 ▼                            │
#   │   FlatFileAdapter ── LineCodec ── file       │
#   └──────────────────────────────────────────────┘
#
# OFFSET FRESHNESS:
#   - "fresh" right after any load (initialize, add, delete)
#   - "stale" after a sort, until the next load
#   Sorting never reloads the file. read_at_index() always uses
#   the cached table, so after an unsaved sort it still returns
#   records in FILE order, not in the new in-memory order.
#   offsets_fresh exposes which state we're in.
#
# CLASS: RecordStore
# ------------------
#
#   Constructor:
#   ------------
#   - __init__(data_file=None, adapter=None, config=None)
#       data_file / adapter default to values built from config.
#
#   Public Methods:
#   ---------------
#   - initialize() -> int
#   - add(record) -> bool
#   - find_by_name(name) -> StudentRecord | None
#   - delete_by_name(name) -> bool
#   - sort_by_marks_descending() -> None
#   - sort_by_name_ascending() -> None
#   - read_at_index(one_based_index) -> StudentRecord | None
#   - persist() -> bool
#   - ensure_file() -> bool
#   - get_status() -> dict
#
# ==============================================

from pathlib import Path
from typing import Optional, Union

from student_records.codec.line_codec import LineCodec
from student_records.config import AppConfig, get_config
from student_records.model.record import StudentRecord
from student_records.persistence.flat_file_adapter import FlatFileAdapter


class RecordStore:
    """
    Owns the student records for one backing file.
    
    No module-level state: create one store per file and pass it
    to whoever needs it.
    """

    def __init__(
        self,
        data_file: Optional[Union[str, Path]] = None,
        adapter: Optional[FlatFileAdapter] = None,
        config: Optional[AppConfig] = None
    ):
        """
        Args:
            data_file: Backing file. Defaults to config.storage.data_file.
            adapter: Persistence adapter. Defaults to one built from config.
            config: Application configuration. If None, loads from environment.
        """
        if data_file is None or adapter is None:
            config = config or get_config()
        
        self._data_file = Path(data_file if data_file is not None else config.storage.data_file)
        self._adapter = adapter or FlatFileAdapter(
            codec=LineCodec(config.storage.delimiter),
            encoding=config.storage.encoding
        )
        
        self._records: list[StudentRecord] = []
        self._offsets: list[int] = []
        self._offsets_fresh = False

    @property
    def data_file(self) -> Path:
        return self._data_file

    @property
    def records(self) -> list[StudentRecord]:
        """Copy of the collection in its current in-memory order."""
        return list(self._records)

    @property
    def offsets(self) -> tuple[int, ...]:
        return tuple(self._offsets)

    @property
    def offsets_fresh(self) -> bool:
        return self._offsets_fresh

    def initialize(self) -> int:
        """
        Load records and offsets from the backing file.
        
        Returns:
            Number of records loaded (0 if the file is missing or empty)
        """
        result = self._adapter.load(self._data_file)
        self._records = result.records
        self._offsets = result.offsets
        self._offsets_fresh = True
        
        if not self._records:
            print("No students loaded (file missing or empty).")
        else:
            print(f"✓ Loaded {len(self._records)} students from {self._data_file}")
        
        return len(self._records)

    def add(self, record: StudentRecord) -> bool:
        """
        Add a record in memory and at the end of the file.
        
        The file is then rescanned to rebuild the offset table; the
        in-memory list is kept as-is.
        
        Args:
            record: Record to add
            
        Returns:
            True if the file append succeeded. The in-memory add
            happens either way.
        """
        self._records.append(record)
        
        ok = self._adapter.append(self._data_file, record)
        if not ok:
            print("⚠ Warning: could not append to file.")
        
        self._refresh_offsets()
        return ok

    def find_by_name(self, name: str) -> Optional[StudentRecord]:
        """
        First record (in current order) whose name equals `name`,
        ignoring case and surrounding whitespace in the query.
        """
        for record in self._records:
            if record.matches_name(name):
                return record
        return None

    def delete_by_name(self, name: str) -> bool:
        """
        Remove EVERY record whose name matches, then rewrite the file.
        
        Args:
            name: Name to delete (case-insensitive, trimmed)
            
        Returns:
            True if at least one record was removed
        """
        kept = [record for record in self._records if not record.matches_name(name)]
        if len(kept) == len(self._records):
            return False
        
        self._records = kept
        self._adapter.save_all(self._data_file, self._records)
        self._refresh_offsets()
        return True

    def sort_by_marks_descending(self) -> None:
        # Stable: equal marks keep their prior relative order
        self._records.sort(key=lambda record: record.marks, reverse=True)
        self._offsets_fresh = False

    def sort_by_name_ascending(self) -> None:
        self._records.sort(key=lambda record: record.name.lower())
        self._offsets_fresh = False

    def read_at_index(self, one_based_index: int) -> Optional[StudentRecord]:
        """
        Re-read one line straight from the file via the cached offsets.
        
        Args:
            one_based_index: Position in the offset table, 1..len(offsets)
            
        Returns:
            The record on that line, or None if the index is out of
            range or the line can't be parsed
        """
        if not self._offsets or one_based_index < 1 or one_based_index > len(self._offsets):
            return None
        return self._adapter.read_at(self._data_file, self._offsets, one_based_index - 1)

    def ensure_file(self) -> bool:
        """Create an empty backing file if there isn't one yet."""
        return self._adapter.ensure_exists(self._data_file)

    def persist(self) -> bool:
        """Overwrite the file with the in-memory collection."""
        return self._adapter.save_all(self._data_file, self._records)

    def get_status(self) -> dict:
        """
        Get current store status.
        
        Returns:
            Dictionary with store state information.
        """
        return {
            "data_file": str(self._data_file),
            "record_count": len(self._records),
            "offset_count": len(self._offsets),
            "offsets_fresh": self._offsets_fresh,
        }

    def _refresh_offsets(self) -> None:
        self._offsets = self._adapter.load(self._data_file).offsets
        self._offsets_fresh = True
