# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# This file contains shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - clean_env        → environment with no STUDENT_RECORDS_* and no .env
# - data_file        → path to a not-yet-created backing file
# - adapter          → FlatFileAdapter with the default "," codec
# - store            → RecordStore bound to data_file
# - alice / bob      → the two records of the end-to-end scenario
# - sample_records   → a small mixed collection (duplicate names, tied marks)
#
# NOTES:
# ------
# - Everything lives under tmp_path; nothing touches the real
#   students.txt
# ==============================================

import pytest

from student_records import config as config_module
from student_records.codec.line_codec import LineCodec
from student_records.model.record import StudentRecord
from student_records.persistence.flat_file_adapter import FlatFileAdapter
from student_records.store.record_store import RecordStore


@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Drop the cached config so env changes in one test don't leak."""
    monkeypatch.setattr(config_module, "_config_instance", None)
    yield


@pytest.fixture
def clean_env(monkeypatch):
    """No STUDENT_RECORDS_* variables and no project .env."""
    for name in ("STUDENT_RECORDS_FILE", "STUDENT_RECORDS_DELIMITER", "STUDENT_RECORDS_ENCODING"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(config_module, "load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


@pytest.fixture
def data_file(tmp_path):
    return tmp_path / "students.txt"


@pytest.fixture
def adapter():
    return FlatFileAdapter(codec=LineCodec(","), encoding="utf-8")


@pytest.fixture
def store(data_file, adapter):
    return RecordStore(data_file=data_file, adapter=adapter)


@pytest.fixture
def alice():
    return StudentRecord(1, "Alice", "a@x", "CS", 88.5)


@pytest.fixture
def bob():
    return StudentRecord(2, "Bob", "b@x", "EE", 92.0)


@pytest.fixture
def sample_records():
    return [
        StudentRecord(10, "carol", "c@x", "ME", 75.0),
        StudentRecord(11, "Dave", "d@x", "CS", 90.0),
        StudentRecord(12, "Carol", "c2@x", "EE", 75.0),
        StudentRecord(13, "erin", "e@x", "CS", 60.25),
        StudentRecord(14, "Bob", "b2@x", "ME", 90.0),
    ]
