"""Tests for the DBC reader."""

from pathlib import Path
from types import SimpleNamespace

import pytest
from dbc_to_json.dbc import ModelUnavailable, convert_attribute_value, read_database
from dbc_to_json.ir import (
    Database,
    EnumValue,
    FloatValue,
    HexValue,
    IntValue,
    StringValue,
    UnknownValue,
)
from dbc_to_json.transform import serialize

from tests.fixtures.sample_dbcs import (
    EMPTY_DBC,
    EXTENDED_FRAMES_DBC,
    NOT_A_DBC,
    OVERLAPPING_SIGNALS_DBC,
    UNSORTED_SIGNALS_DBC,
)


def _write(tmp_path: Path, content: str, name: str = "test.dbc") -> Path:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")
    return path


def _attribute(type_name: str, value: object, choices: list[str] | None = None) -> object:
    """Build an object shaped like a cantools Attribute."""
    definition = SimpleNamespace(type_name=type_name, choices=choices)
    return SimpleNamespace(name="Attr", value=value, definition=definition)


class TestReadSample:
    """Tests for reading the sample DBC file."""

    @pytest.fixture
    def db(self, sample_dbc_path: Path) -> Database:
        """Read the sample database."""
        return read_database(sample_dbc_path)

    def test_header(self, db: Database, sample_dbc_path: Path) -> None:
        """Should keep the path as filename and the VERSION string."""
        assert db.filename == str(sample_dbc_path)
        assert db.version == "1.0"

    def test_messages_in_file_order(self, db: Database) -> None:
        """Should keep messages in file order."""
        assert [m.frame_id for m in db.messages] == [100, 200, 2024]
        assert [m.name for m in db.messages] == ["Engine", "Status", "Diagnostics"]
        assert [m.length for m in db.messages] == [8, 2, 4]

    def test_signal_fields(self, db: Database) -> None:
        """Should map start, length, scaling, range and unit."""
        engine = db.get_message(100)
        assert engine is not None
        rpm = engine.get_signal("RPM")
        assert rpm is not None
        assert rpm.bit_start == 0
        assert rpm.bit_length == 16
        assert rpm.factor == 0.25
        assert rpm.offset == 0.0
        assert rpm.minimum == 0.0
        assert rpm.maximum == 8000.0
        assert rpm.unit == "rpm"

        temp = engine.get_signal("CoolantTemp")
        assert temp is not None
        assert temp.offset == -40.0
        assert temp.minimum == -40.0

    def test_empty_unit_is_absent(self, db: Database) -> None:
        """Should treat an empty unit string as no unit."""
        status = db.get_message(200)
        assert status is not None
        assert all(signal.unit is None for signal in status.signals)

    def test_unspecified_range_is_zero(self, db: Database) -> None:
        """Should read a [0|0] range as zero bounds."""
        diagnostics = db.get_message(2024)
        assert diagnostics is not None
        error_code = diagnostics.get_signal("ErrorCode")
        assert error_code is not None
        assert error_code.minimum == 0.0
        assert error_code.maximum == 0.0

    def test_enum_attribute_resolved_to_label(self, db: Database) -> None:
        """Should resolve ENUM indices to their labels."""
        engine = db.get_message(100)
        status = db.get_message(200)
        assert engine is not None and status is not None

        engine_attrs = {a.name: a.value for a in engine.attributes}
        status_attrs = {a.name: a.value for a in status.attributes}
        assert engine_attrs["GenMsgSendType"] == EnumValue("Cyclic")
        assert status_attrs["GenMsgSendType"] == EnumValue("Spontaneous")

    def test_attribute_kinds(self, db: Database) -> None:
        """Should map each definition type to its value kind."""
        engine = db.get_message(100)
        status = db.get_message(200)
        diagnostics = db.get_message(2024)
        assert engine is not None and status is not None and diagnostics is not None

        engine_attrs = {a.name: a.value for a in engine.attributes}
        status_attrs = {a.name: a.value for a in status.attributes}
        diag_attrs = {a.name: a.value for a in diagnostics.attributes}

        assert engine_attrs["GenMsgCycleTime"] == IntValue(10)
        assert status_attrs["GenMsgStartValue"] == HexValue(255)
        assert status_attrs["GenMsgDelayTime"] == FloatValue(2.5)
        assert diag_attrs["GenMsgComment"] == StringValue("diag")

    def test_only_explicit_attributes(self, db: Database) -> None:
        """Should not add definition defaults as attributes."""
        diagnostics = db.get_message(2024)
        assert diagnostics is not None
        assert [a.name for a in diagnostics.attributes] == ["GenMsgComment"]


class TestReadVariants:
    """Tests for less common DBC content."""

    def test_signal_file_order_kept(self, tmp_path: Path) -> None:
        """Should not sort signals by start bit."""
        db = read_database(_write(tmp_path, UNSORTED_SIGNALS_DBC))
        assert [s.name for s in db.messages[0].signals] == ["High", "Low"]

    def test_empty_version(self, tmp_path: Path) -> None:
        """Should read an empty VERSION as empty string."""
        db = read_database(_write(tmp_path, UNSORTED_SIGNALS_DBC))
        assert db.version == ""

    def test_no_messages(self, tmp_path: Path) -> None:
        """Should read a database without messages."""
        db = read_database(_write(tmp_path, EMPTY_DBC))
        assert db.messages == ()
        assert db.version == "0.1"

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        """Should accept a str path and keep it as filename."""
        path = str(_write(tmp_path, EMPTY_DBC))
        assert read_database(path).filename == path

    def test_overlap_rejected_in_strict_mode(self, tmp_path: Path) -> None:
        """Should fail on overlapping signals by default."""
        with pytest.raises(ModelUnavailable, match="DBC parsing error"):
            read_database(_write(tmp_path, OVERLAPPING_SIGNALS_DBC))

    def test_overlap_accepted_when_not_strict(self, tmp_path: Path) -> None:
        """Should read overlapping signals with strict=False."""
        db = read_database(_write(tmp_path, OVERLAPPING_SIGNALS_DBC), strict=False)
        assert [s.name for s in db.messages[0].signals] == ["First", "Second"]

    def test_extended_frame_keeps_flag(self, tmp_path: Path) -> None:
        """Should keep bit 31 of an extended frame id as written in BO_."""
        db = read_database(_write(tmp_path, EXTENDED_FRAMES_DBC))
        assert [(m.frame_id, m.name) for m in db.messages] == [
            (256, "Std"),
            (0x80000100, "Ext"),
        ]


class TestReadThenSerialize:
    """Tests for read models passed straight to the serializer."""

    def test_standard_and_extended_frames_both_emitted(self, tmp_path: Path) -> None:
        """Should emit one document entry per message when ids differ only in bit 31."""
        result = serialize(read_database(_write(tmp_path, EXTENDED_FRAMES_DBC)))
        messages = result.document["messages"]

        assert len(messages) == result.message_count == 2
        assert list(messages) == ["256", "2147483904"]
        assert messages["256"]["name"] == "Std"
        assert messages["2147483904"]["name"] == "Ext"

    def test_sample_entry_count_matches_counter(self, sample_dbc_path: Path) -> None:
        """Should keep every message of the sample file."""
        result = serialize(read_database(sample_dbc_path))
        assert len(result.document["messages"]) == result.message_count


class TestReadFailures:
    """Tests for ModelUnavailable conditions."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Should fail for a missing file."""
        with pytest.raises(ModelUnavailable, match="File not found"):
            read_database(tmp_path / "missing.dbc")

    def test_directory(self, tmp_path: Path) -> None:
        """Should fail for a directory."""
        with pytest.raises(ModelUnavailable, match="Not a file"):
            read_database(tmp_path)

    def test_malformed_content(self, tmp_path: Path) -> None:
        """Should fail for content that is not DBC."""
        with pytest.raises(ModelUnavailable) as exc_info:
            read_database(_write(tmp_path, NOT_A_DBC))
        assert exc_info.value.path is not None
        assert exc_info.value.encoding_problem is False

    def test_unknown_encoding(self, tmp_path: Path) -> None:
        """Should flag an unknown encoding name as an encoding problem."""
        with pytest.raises(ModelUnavailable) as exc_info:
            read_database(_write(tmp_path, EMPTY_DBC), encoding="no-such-codec")
        assert exc_info.value.encoding_problem is True

    def test_error_message_includes_path(self, tmp_path: Path) -> None:
        """Should prefix the message with the path."""
        path = tmp_path / "missing.dbc"
        with pytest.raises(ModelUnavailable) as exc_info:
            read_database(path)
        assert str(exc_info.value).startswith(str(path))


class TestConvertAttributeValue:
    """Tests for attribute kind mapping."""

    def test_int(self) -> None:
        """Should map INT to IntValue."""
        assert convert_attribute_value(_attribute("INT", -3)) == IntValue(-3)

    def test_hex(self) -> None:
        """Should map HEX to HexValue."""
        assert convert_attribute_value(_attribute("HEX", 16)) == HexValue(16)

    def test_float(self) -> None:
        """Should map FLOAT to FloatValue."""
        assert convert_attribute_value(_attribute("FLOAT", 1)) == FloatValue(1.0)

    def test_string(self) -> None:
        """Should map STRING to StringValue."""
        assert convert_attribute_value(_attribute("STRING", "abc")) == StringValue("abc")

    def test_enum_index(self) -> None:
        """Should resolve ENUM index through choices."""
        value = convert_attribute_value(_attribute("ENUM", 1, ["Cyclic", "Spontaneous"]))
        assert value == EnumValue("Spontaneous")

    def test_enum_label(self) -> None:
        """Should keep an ENUM value that is already a label."""
        value = convert_attribute_value(_attribute("ENUM", "Cyclic", ["Cyclic"]))
        assert value == EnumValue("Cyclic")

    def test_enum_out_of_range(self) -> None:
        """Should fall back to UnknownValue for a bad ENUM index."""
        value = convert_attribute_value(_attribute("ENUM", 5, ["Cyclic"]))
        assert value == UnknownValue(type_name="ENUM", value=5)

    def test_negative_hex(self) -> None:
        """Should fall back to UnknownValue for a negative HEX value."""
        value = convert_attribute_value(_attribute("HEX", -1))
        assert isinstance(value, UnknownValue)

    def test_unknown_type(self) -> None:
        """Should map unknown definition types to UnknownValue."""
        value = convert_attribute_value(_attribute("BLOB", b"\x00"))
        assert value == UnknownValue(type_name="BLOB", value=b"\x00")
