# ==============================================
# Tests for Persistence Module
# ==============================================

from student_records.codec.line_codec import LineCodec
from student_records.model.record import StudentRecord
from student_records.persistence.flat_file_adapter import FlatFileAdapter, LoadResult


class TestLoad:

    def test_missing_file_is_empty(self, adapter, data_file):
        result = adapter.load(data_file)
        assert result == LoadResult([], [])

    def test_empty_file(self, adapter, data_file):
        data_file.write_bytes(b"")
        assert adapter.load(data_file) == LoadResult([], [])

    def test_offsets_are_line_starts(self, adapter, data_file):
        data_file.write_bytes(b"1,Alice,a@x,CS,88.5\n2,Bob,b@x,EE,92.0\n")
        result = adapter.load(data_file)
        
        assert [r.name for r in result.records] == ["Alice", "Bob"]
        assert result.offsets == [0, 20]

    def test_malformed_line_keeps_offset_slot(self, adapter, data_file):
        """A 3-field row is dropped from records but still has an offset."""
        content = b"1,Alice,a@x,CS,88.5\n9,Broken,x@x\n2,Bob,b@x,EE,92.0\n"
        data_file.write_bytes(content)
        
        result = adapter.load(data_file)
        
        assert [r.roll_number for r in result.records] == [1, 2]
        assert result.offsets == [0, 20, 33]
        assert content[result.offsets[1]:].startswith(b"9,Broken")
        assert content[result.offsets[2]:].startswith(b"2,Bob")

    def test_blank_line_occupies_offset(self, adapter, data_file):
        data_file.write_bytes(b"1,Alice,a@x,CS,88.5\n\n2,Bob,b@x,EE,92.0\n")
        result = adapter.load(data_file)
        
        assert len(result.records) == 2
        assert result.offsets == [0, 20, 21]

    def test_crlf_line_endings(self, adapter, data_file, alice, bob):
        data_file.write_bytes(b"1,Alice,a@x,CS,88.5\r\n2,Bob,b@x,EE,92.0\r\n")
        result = adapter.load(data_file)
        
        assert result.records == [alice, bob]
        assert result.offsets == [0, 21]

    def test_last_line_without_newline(self, adapter, data_file, alice, bob):
        data_file.write_bytes(b"1,Alice,a@x,CS,88.5\n2,Bob,b@x,EE,92.0")
        assert adapter.load(data_file).records == [alice, bob]

    def test_undecodable_line_is_malformed(self, adapter, data_file, alice):
        data_file.write_bytes(b"\xff\xfe,bad\n1,Alice,a@x,CS,88.5\n")
        result = adapter.load(data_file)
        
        assert result.records == [alice]
        assert len(result.offsets) == 2

    def test_directory_path_returns_partial(self, adapter, tmp_path):
        """OSError while reading is swallowed"""
        assert adapter.load(tmp_path) == LoadResult([], [])


class TestSaveAndAppend:

    def test_load_after_save(self, adapter, data_file, sample_records):
        assert adapter.save_all(data_file, sample_records) is True
        
        result = adapter.load(data_file)
        assert result.records == sample_records
        assert len(result.offsets) == len(sample_records)

    def test_load_after_save_padded_values(self, adapter, data_file):
        records = [
            StudentRecord(1, " Alice", "a@x", "CS ", 88.5),
            StudentRecord(2, "Bob\t", " b@x ", "EE", 92.0),
        ]
        adapter.save_all(data_file, records)

        result = adapter.load(data_file)
        assert result.records == records
        assert len(result.offsets) == 2

    def test_carriage_return_row_is_one_malformed_line(self, adapter, data_file, bob):
        data_file.write_bytes(b"1,Al\rice,a@x,CS,88.5\n2,Bob,b@x,EE,92.0\n")
        result = adapter.load(data_file)

        assert result.records == [bob]
        assert result.offsets == [0, 21]

    def test_save_overwrites(self, adapter, data_file, alice, bob):
        adapter.save_all(data_file, [alice, bob])
        adapter.save_all(data_file, [bob])
        
        assert data_file.read_text() == "2,Bob,b@x,EE,92.0\n"

    def test_append_creates_file(self, adapter, data_file, alice, bob):
        assert adapter.append(data_file, alice) is True
        assert adapter.append(data_file, bob) is True
        
        assert data_file.read_text() == "1,Alice,a@x,CS,88.5\n2,Bob,b@x,EE,92.0\n"

    def test_save_failure_returns_false(self, adapter, tmp_path, alice, capsys):
        target = tmp_path / "missing_dir" / "students.txt"
        
        assert adapter.save_all(target, [alice]) is False
        assert "Error saving file" in capsys.readouterr().out

    def test_append_failure_returns_false(self, adapter, tmp_path, alice, capsys):
        assert adapter.append(tmp_path, alice) is False
        assert "Error appending file" in capsys.readouterr().out

    def test_custom_delimiter_and_encoding(self, data_file):
        adapter = FlatFileAdapter(codec=LineCodec(";"), encoding="latin-1")
        record = StudentRecord(4, "Zoë", "z@x", "Art", 55.5)
        
        adapter.save_all(data_file, [record])
        
        assert data_file.read_bytes() == "4;Zoë;z@x;Art;55.5\n".encode("latin-1")
        assert adapter.load(data_file).records == [record]

    def test_ensure_exists(self, adapter, tmp_path):
        target = tmp_path / "nested" / "students.txt"
        
        assert adapter.ensure_exists(target) is True
        assert target.exists()
        assert adapter.load(target) == LoadResult([], [])

    def test_ensure_exists_keeps_content(self, adapter, data_file, alice):
        adapter.append(data_file, alice)
        adapter.ensure_exists(data_file)
        
        assert adapter.load(data_file).records == [alice]


class TestReadAt:

    def test_every_offset_reads_back_its_record(self, adapter, data_file, sample_records):
        adapter.save_all(data_file, sample_records)
        result = adapter.load(data_file)
        
        for i, record in enumerate(result.records):
            assert adapter.read_at(data_file, result.offsets, i) == record

    def test_out_of_range(self, adapter, data_file, alice):
        adapter.save_all(data_file, [alice])
        offsets = adapter.load(data_file).offsets
        
        assert adapter.read_at(data_file, offsets, 1) is None
        assert adapter.read_at(data_file, offsets, -1) is None

    def test_empty_offsets(self, adapter, data_file, alice):
        adapter.save_all(data_file, [alice])
        assert adapter.read_at(data_file, [], 0) is None

    def test_malformed_line_at_offset(self, adapter, data_file):
        data_file.write_bytes(b"1,Alice,a@x,CS,88.5\n9,Broken,x@x\n")
        offsets = adapter.load(data_file).offsets
        
        assert adapter.read_at(data_file, offsets, 1) is None

    def test_offset_past_end_of_file(self, adapter, data_file, alice):
        adapter.save_all(data_file, [alice])
        assert adapter.read_at(data_file, [1000], 0) is None

    def test_missing_file(self, adapter, data_file, capsys):
        assert adapter.read_at(data_file, [0], 0) is None
        assert "Direct-offset read error" in capsys.readouterr().out
