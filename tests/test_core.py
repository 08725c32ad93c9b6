import pytest

from ncidissect.constants import CoreOid, MessageType, NciVersion, ResetTrigger, ResetType, Status
from ncidissect.core import decode_core, decode_reset
from ncidissect.fields import TruncatedPacketError


def test_reset_command():
    data = bytes([0x20, 0x00, 0x01, 0x01])
    fields, offset = decode_reset(MessageType.CMD, data, 3)
    assert offset == 4
    assert len(fields) == 1
    field = fields[0]
    assert field.abbrev == "nci.core_reset_cmd.type"
    assert field.value == ResetType.RESET_CONFIG
    assert field.render() == "Reset Type: Reset config (1)"


def test_reset_response():
    data = bytes([0x40, 0x00, 0x01, 0x00])
    fields, offset = decode_reset(MessageType.RSP, data, 3)
    assert offset == len(data)
    assert [f.abbrev for f in fields] == ["nci.core_reset_rsp.status"]
    assert fields[0].value == Status.OK
    assert fields[0].labels is Status


def test_reset_notification():
    payload = bytes([0x02, 0x01, 0x20, 0x05, 0x02, 0xAA, 0xBB])
    data = bytes([0x60, 0x00, len(payload)]) + payload
    fields, offset = decode_reset(MessageType.NTF, data, 3)
    assert offset == len(data)
    assert [f.abbrev for f in fields] == [
        "nci.core_reset_ntf.reset_trigger",
        "nci.core_reset_ntf.status",
        "nci.core_reset_ntf.ver",
        "nci.core_reset_ntf.mfr_id",
        "nci.core_reset_ntf.mfr_si_len",
        "nci.core_reset_ntf.mfr_si",
    ]
    assert fields[0].value == ResetTrigger.RESET_CMD_RECEIVED
    assert fields[1].value == ResetType.RESET_CONFIG
    assert fields[2].value == NciVersion.V20
    assert fields[3].value == 0x05
    assert fields[4].value == 2
    assert fields[5].value == b"\xaa\xbb"
    assert fields[5].offset == 8
    assert fields[5].length == 2


def test_notification_fields_are_contiguous():
    payload = bytes([0x01, 0x00, 0x10, 0x00, 0x03, 0x01, 0x02, 0x03])
    data = bytes([0x60, 0x00, len(payload)]) + payload
    fields, offset = decode_reset(MessageType.NTF, data, 3)
    position = 3
    for field in fields:
        assert field.offset == position
        position += field.length
    assert position == offset


def test_notification_without_specific_info():
    data = bytes([0x60, 0x00, 0x05, 0x01, 0x00, 0x11, 0x00, 0x00])
    fields, offset = decode_reset(MessageType.NTF, data, 3)
    assert offset == len(data)
    assert fields[-1].value == b""


def test_notification_specific_info_truncated():
    data = bytes([0x60, 0x00, 0x06, 0x01, 0x00, 0x11, 0x00, 0x04, 0xAA])
    with pytest.raises(TruncatedPacketError):
        decode_reset(MessageType.NTF, data, 3)


def test_command_truncated():
    with pytest.raises(TruncatedPacketError):
        decode_reset(MessageType.CMD, bytes([0x20, 0x00, 0x01]), 3)


def test_data_message_yields_nothing():
    fields, offset = decode_reset(MessageType.DATA, bytes([0x00, 0x00, 0x01, 0x42]), 3)
    assert fields == []
    assert offset == 3


def test_decode_core_dispatches_reset():
    data = bytes([0x20, 0x00, 0x01, 0x00])
    assert decode_core(CoreOid.CORE_RESET, MessageType.CMD, data, 3) == decode_reset(
        MessageType.CMD, data, 3
    )


@pytest.mark.parametrize("oid", [CoreOid.CORE_INIT, CoreOid.CORE_SET_CONFIG, 0x3F])
def test_decode_core_other_oids_yield_nothing(oid):
    data = bytes([0x20, 0x01, 0x02, 0x00, 0x00])
    assert decode_core(oid, MessageType.CMD, data, 3) == ([], 3)