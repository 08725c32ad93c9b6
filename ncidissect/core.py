"""Decoding of NCI Core group (GID 0000b) control messages."""

from __future__ import annotations

from typing import List, Tuple

from .constants import CoreOid, MessageType, NciVersion, ResetTrigger, ResetType, Status
from .fields import Field, TruncatedPacketError, read_uint8


def _uint8_field(name: str, abbrev: str, data: bytes, offset: int, labels=None) -> Field:
    return Field(name, abbrev, offset, 1, read_uint8(data, offset), labels)


def decode_reset(message_type: int, data: bytes, offset: int) -> Tuple[List[Field], int]:
    """Decode a CORE_RESET payload starting at ``offset``.

    Returns the decoded fields and the offset just past them.
    """
    fields: List[Field] = []
    if message_type == MessageType.CMD:
        fields.append(
            _uint8_field("Reset Type", "nci.core_reset_cmd.type", data, offset, ResetType)
        )
        offset += 1
    elif message_type == MessageType.RSP:
        fields.append(
            _uint8_field("Status", "nci.core_reset_rsp.status", data, offset, Status)
        )
        offset += 1
    elif message_type == MessageType.NTF:
        layout = [
            ("Reset Trigger", "nci.core_reset_ntf.reset_trigger", ResetTrigger),
            ("Configuration Status", "nci.core_reset_ntf.status", ResetType),
            ("Version", "nci.core_reset_ntf.ver", NciVersion),
            ("Mfr. ID", "nci.core_reset_ntf.mfr_id", None),
            ("Mfr. Specific Info. Length", "nci.core_reset_ntf.mfr_si_len", None),
        ]
        for name, abbrev, labels in layout:
            fields.append(_uint8_field(name, abbrev, data, offset, labels))
            offset += 1
        info_length = fields[-1].value
        assert isinstance(info_length, int)
        info = data[offset:offset + info_length]
        if len(info) < info_length:
            raise TruncatedPacketError(offset, info_length, len(data))
        fields.append(
            Field(
                "Mfr. Specific Info.",
                "nci.core_reset_ntf.mfr_si",
                offset,
                info_length,
                bytes(info),
            )
        )
        offset += info_length
    return fields, offset


def decode_core(
    oid: int, message_type: int, data: bytes, offset: int
) -> Tuple[List[Field], int]:
    """Decode the payload of an NCI Core message; unhandled OIDs yield no fields."""
    if oid == CoreOid.CORE_RESET:
        return decode_reset(message_type, data, offset)
    return [], offset