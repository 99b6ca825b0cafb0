import pytest

from xiangqi.globaldata import (
    DataId,
    DataPacket,
    GlobalData,
    ModuleId,
    PACKET_SIZE,
    PAYLOAD_SIZE,
    ViewId,
)


@pytest.fixture
def state():
    data = GlobalData.instance()
    data.reset()
    yield data
    data.reset()


def test_instance_is_shared(state):
    GlobalData.instance().user_name = "carol"
    assert GlobalData.instance().user_name == "carol"
    assert state.user_name == "carol"


def test_defaults(state):
    assert state.view_id == ViewId.NONE
    assert state.module_id == ModuleId.NONE
    assert state.user_name is None


def test_set_values(state):
    state.view_id = ViewId.GAME
    state.module_id = ModuleId.LOCAL
    state.user_name = "alice"
    assert state.view_id == ViewId.GAME
    assert state.module_id == ModuleId.LOCAL
    assert state.user_name == "alice"


def test_negative_view_rejected(state):
    with pytest.raises(ValueError):
        state.view_id = -1
    assert state.view_id == ViewId.NONE


def test_negative_module_rejected(state):
    state.module_id = ModuleId.SINGLE
    with pytest.raises(ValueError):
        state.module_id = -3
    assert state.module_id == ModuleId.SINGLE


def test_none_user_name_rejected(state):
    state.user_name = "dave"
    with pytest.raises(ValueError):
        state.user_name = None
    assert state.user_name == "dave"


def test_reset_restores_defaults(state):
    state.view_id = ViewId.SETTING
    state.user_name = "bob"
    state.reset()
    assert state.view_id == ViewId.NONE
    assert state.user_name is None


def test_packet_size_fixed():
    packet = DataPacket(DataId.HOME_MSG, "3:2")
    assert len(packet.encode()) == PACKET_SIZE
    assert PACKET_SIZE == 4 + PAYLOAD_SIZE


def test_packet_round_trip():
    packet = DataPacket(DataId.HOME_MSG, "17:1")
    assert DataPacket.decode(packet.encode()) == packet


def test_packet_wire_layout():
    wire = DataPacket(DataId.HOME_MSG, "3:2").encode()
    assert wire[:4] == b"\x01\x00\x00\x00"
    assert wire[4:7] == b"3:2"
    assert set(wire[7:]) == {0}


def test_decode_stops_at_nul():
    data = b"\x01\x00\x00\x00" + b"5:0\0junk"
    packet = DataPacket.decode(data)
    assert packet.data_id == DataId.HOME_MSG
    assert packet.payload == "5:0"


def test_decode_too_short():
    with pytest.raises(ValueError):
        DataPacket.decode(b"\x01")


def test_decode_unknown_id():
    with pytest.raises(ValueError):
        DataPacket.decode(b"\x63\x00\x00\x00" + b"x")


def test_encode_payload_too_long():
    with pytest.raises(ValueError):
        DataPacket(DataId.HOME_MSG, "a" * (PAYLOAD_SIZE + 1)).encode()