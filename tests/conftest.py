"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from dbc_to_json.ir import Attribute, Database, EnumValue, IntValue, Message, Signal

from tests.fixtures.sample_dbcs import SAMPLE_DBC


@pytest.fixture
def sample_dbc_path(tmp_path: Path) -> Path:
    """Write the sample DBC to a temporary file and return its path."""
    path = tmp_path / "sample.dbc"
    path.write_text(SAMPLE_DBC, encoding="utf-8")
    return path


@pytest.fixture
def engine_message() -> Message:
    """Return a message with one allowed attribute and one signal."""
    return Message(
        frame_id=100,
        name="Engine",
        length=8,
        attributes=(Attribute("GenMsgSendType", EnumValue("Cyclic")),),
        signals=(
            Signal(
                name="RPM",
                bit_start=0,
                bit_length=16,
                factor=0.25,
                offset=0,
                minimum=0,
                maximum=8000,
                unit="rpm",
            ),
        ),
    )


@pytest.fixture
def engine_database(engine_message: Message) -> Database:
    """Return a database with a single Engine message."""
    return Database(filename="test.dbc", version="1.0", messages=(engine_message,))


@pytest.fixture
def multi_message_database(engine_message: Message) -> Database:
    """Return a database with three messages and four signals."""
    status = Message(
        frame_id=200,
        name="Status",
        length=2,
        attributes=(
            Attribute("GenMsgCycleTime", IntValue(100)),
            Attribute("GenMsgSendType", EnumValue("Spontaneous")),
        ),
        signals=(
            Signal(name="IgnitionOn", bit_start=0, bit_length=1),
            Signal(name="Mode", bit_start=8, bit_length=4, maximum=15),
        ),
    )
    diagnostics = Message(
        frame_id=2024,
        name="Diagnostics",
        length=4,
        signals=(Signal(name="ErrorCode", bit_start=0, bit_length=32),),
    )
    return Database(
        filename="vehicle.dbc",
        version="2.3",
        messages=(engine_message, status, diagnostics),
    )
