# ==============================================
# LineCodec
# ==============================================
#
# PURPOSE:
#   Translate between a StudentRecord and its one-line text form:
#
#       roll,name,email,course,marks
#       1,Alice,a@x,CS,88.5
#
# WHY THIS CLASS EXISTS:
#   Loading the file, appending to it and the direct-offset read
#   all need the exact same parse rule. If they drifted apart, a
#   line that loads fine could fail to re-read at its offset.
#
# PARSE RULE:
# -----------
#   1. Strip the line (this also drops "\n" / "\r\n").
#   2. Split on the delimiter.
#   3. Fewer than MIN_FIELD_COUNT parts → no record.
#      Extra trailing parts are ignored.
#   4. Strip every part; roll must be an int, marks a float,
#      written with ASCII characters and no "_" separators,
#      otherwise → no record. A "\r" left inside a value
#      also means no record.
#
#   "No record" is returned as None. parse() never raises for
#   bad input; callers test `is None`.
#
# KNOWN LIMITATION:
# -----------------
#   Values are NOT escaped. A name like "Doe, Jane" with the
#   default "," delimiter shifts every following field, and the
#   row is either dropped or read back wrong.
#
# CLASS: LineCodec
# ----------------
#   Constructor:
#   ------------
#   - __init__(delimiter: str = ",")
#
#   Methods:
#   --------
#   - serialize(record: StudentRecord) -> str   (no trailing newline)
#   - parse(line: str | None) -> StudentRecord | None
#
# ==============================================

from typing import Optional

from student_records.model.record import StudentRecord, FIELD_ORDER


MIN_FIELD_COUNT = len(FIELD_ORDER)


class LineCodec:
    def __init__(self, delimiter: str = ","):
        self.delimiter = delimiter

    def serialize(self, record: StudentRecord) -> str:
        """
        Render a record as a single delimited line.
        
        Marks go through repr(float) so the text is locale-invariant
        and parses back to the same value (92 → "92.0", 88.5 → "88.5").
        
        Args:
            record: Record to render
            
        Returns:
            The line, without a trailing newline
        """
        return self.delimiter.join([
            str(int(record.roll_number)),
            record.name,
            record.email,
            record.course,
            repr(float(record.marks)),
        ])

    def parse(self, line: Optional[str]) -> Optional[StudentRecord]:
        """
        Parse one line into a record.
        
        Args:
            line: Raw line, with or without its line terminator
            
        Returns:
            StudentRecord on success, None if the line is malformed
        """
        if line is None:
            return None
        
        parts = line.strip().split(self.delimiter)
        if len(parts) < MIN_FIELD_COUNT:
            return None
        
        roll_text, name, email, course, marks_text = (
            part.strip() for part in parts[:MIN_FIELD_COUNT]
        )
        
        roll_number = self._coerce_int(roll_text)
        marks = self._coerce_float(marks_text)
        if roll_number is None or marks is None:
            return None
        
        try:
            return StudentRecord(
                roll_number=roll_number,
                name=name,
                email=email,
                course=course,
                marks=marks
            )
        except ValueError:
            # A stray "\r" inside a value
            return None

    @staticmethod
    def _is_plain_number(value: str) -> bool:
        # int() and float() also take "1_0" and non-ASCII digits
        return value.isascii() and "_" not in value

    @classmethod
    def _coerce_int(cls, value: str) -> Optional[int]:
        if not cls._is_plain_number(value):
            return None
        try:
            return int(value)
        except (ValueError, TypeError):
            return None

    @classmethod
    def _coerce_float(cls, value: str) -> Optional[float]:
        if not cls._is_plain_number(value):
            return None
        try:
            return float(value)
        except (ValueError, TypeError):
            return None
