from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence, Union

from student_records.codec.line_codec import LineCodec
from student_records.model.record import StudentRecord


PathLike = Union[str, Path]


# ==============================================
# FlatFileAdapter
# ==============================================
#
# PURPOSE:
#   Persist the record collection as one line per record and
#   serve "direct-offset" reads of a single line.
#
# WHY THIS CLASS EXISTS:
#   The store must never touch a file handle itself. Every file
#   is opened, used and closed inside ONE call here; no handle
#   outlives the operation.
#
# FAILURE POLICY:
#   - Missing file on load  → empty result, not an error
#   - Malformed line        → skipped, but its offset is kept
#   - OSError while loading → whatever was read so far
#   - OSError while writing → warning printed, returns False
#   - Bad index / bad line on read_at → None
#   Nothing here raises for I/O problems.
#
# DATA CLASS: LoadResult
# ----------------------
#   - records: list[StudentRecord]  → only lines that parsed
#   - offsets: list[int]            → one per LINE, parsed or not
#
@dataclass
class LoadResult:
    records: list[StudentRecord] = field(default_factory=list)
    offsets: list[int] = field(default_factory=list)


# CLASS: FlatFileAdapter
# ----------------------
#   Stateless apart from its codec and encoding; the path is
#   passed to every call.
#
#   Constructor:
#   ------------
#   - __init__(codec: LineCodec | None = None, encoding: str = "utf-8")
#
class FlatFileAdapter:
    """
    Reads and writes the line-oriented backing file.
    
    Offsets are byte positions (the file is read in binary mode),
    so they stay valid for seek() regardless of encoding.
    """

    def __init__(self, codec: Optional[LineCodec] = None, encoding: str = "utf-8"):
        self.codec = codec or LineCodec()
        self.encoding = encoding

#   Methods:
#   --------
#   READING:
#   - load(path) -> LoadResult
#       Scan from byte 0. For each line, record tell() BEFORE
#       reading it, then try to parse it.
#
#   - read_at(path, offsets, index) -> StudentRecord | None
#       Seek to offsets[index] and parse exactly that line.
#
    def load(self, path: PathLike) -> LoadResult:
        """
        Load every record and the starting byte offset of every line.
        
        Args:
            path: Backing file
            
        Returns:
            LoadResult; both lists empty if the file doesn't exist
        """
        result = LoadResult()
        path = Path(path)
        
        if not path.exists():
            return result
        
        try:
            with open(path, "rb") as f:
                offset = f.tell()
                raw = f.readline()
                while raw:
                    result.offsets.append(offset)
                    record = self._parse_bytes(raw)
                    if record is not None:
                        result.records.append(record)
                    offset = f.tell()
                    raw = f.readline()
        except OSError:
            # Partial results are returned as-is
            pass
        
        return result

    def read_at(
        self,
        path: PathLike,
        offsets: Sequence[int],
        index: int
    ) -> Optional[StudentRecord]:
        """
        Re-read the single line that started at offsets[index].
        
        Args:
            path: Backing file
            offsets: Offset table from a previous load()
            index: Zero-based position in the offset table
            
        Returns:
            The parsed record, or None if the index is out of range,
            the read fails, or the line doesn't parse
        """
        if not offsets or index < 0 or index >= len(offsets):
            return None
        
        try:
            with open(path, "rb") as f:
                f.seek(offsets[index])
                raw = f.readline()
        except OSError as e:
            print(f"⚠ Direct-offset read error: {e}")
            return None
        
        if not raw:
            return None
        return self._parse_bytes(raw)

#   WRITING:
#   - save_all(path, records) -> bool
#       Truncate and rewrite, one line per record, in order.
#
#   - append(path, record) -> bool
#       Add one line at the end, creating the file if needed.
#
#   - ensure_exists(path) -> bool
#       Create an empty file (and parent dirs) if missing.
#
    def save_all(self, path: PathLike, records: Sequence[StudentRecord]) -> bool:
        """
        Overwrite the file with the given records.
        
        Returns:
            True on success, False if the file couldn't be written
        """
        try:
            with open(path, "w", encoding=self.encoding, newline="\n") as f:
                for record in records:
                    f.write(self.codec.serialize(record) + "\n")
            return True
        except OSError as e:
            print(f"⚠ Error saving file: {e}")
            return False

    def append(self, path: PathLike, record: StudentRecord) -> bool:
        """
        Append one record to the end of the file.
        
        Returns:
            True on success, False if the file couldn't be written
        """
        try:
            with open(path, "a", encoding=self.encoding, newline="\n") as f:
                f.write(self.codec.serialize(record) + "\n")
            return True
        except OSError as e:
            print(f"⚠ Error appending file: {e}")
            return False

    def ensure_exists(self, path: PathLike) -> bool:
        path = Path(path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
            return True
        except OSError as e:
            print(f"⚠ Could not create {path}: {e}")
            return False

    def _parse_bytes(self, raw: bytes) -> Optional[StudentRecord]:
        # Undecodable bytes count as a malformed line
        try:
            line = raw.decode(self.encoding)
        except UnicodeDecodeError:
            return None
        return self.codec.parse(line)

# FILE STRUCTURE:
# ---------------
#   students.txt
#   ├── 1,Alice,a@x,CS,88.5      ← offset 0
#   ├── 2,Bob,b@x,EE,92.0        ← offset 20
#   └── ...
#
# =============================================
