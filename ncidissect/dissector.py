"""Dissection of whole NCI packets: header, control message routing and payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Type

from .constants import (
    GID_MASK,
    MT_MASK,
    OID_MASK,
    PBF_MASK,
    CoreOid,
    GroupId,
    MessageType,
    NfceeManagementOid,
    PacketBoundaryFlag,
    RfManagementOid,
    value_name,
)
from .core import decode_core
from .fields import Field, read_uint8

PROTOCOL_NAME = "NCI Protocol"
PROTOCOL_SHORT_NAME = "NCI"

HOST = "DH"
CONTROLLER = "NFCC"

_OID_TABLES = {
    GroupId.NCI_CORE: CoreOid,
    GroupId.RF_MGMT: RfManagementOid,
    GroupId.NFCEE_MGMT: NfceeManagementOid,
}


def oid_table(gid: int) -> Optional[Type[Enum]]:
    """Return the OID enumeration for a group, or None if the group is not decoded."""
    return _OID_TABLES.get(gid)


@dataclass
class Dissection:
    """The result of dissecting one NCI packet."""

    message_type: int
    summary: str
    source: Optional[str]
    destination: Optional[str]
    length: int
    protocol: str = PROTOCOL_SHORT_NAME
    fields: List[Field] = field(default_factory=list)

    def render(self) -> str:
        """Return the summary line followed by one indented line per field."""
        return "\n".join([self.summary, *(f"  {f.render()}" for f in self.fields)])


def _endpoints(message_type: int) -> tuple:
    if message_type & MessageType.CMD == MessageType.CMD:
        return HOST, CONTROLLER
    if (
        message_type & MessageType.NTF == MessageType.NTF
        or message_type & MessageType.DATA == MessageType.DATA
    ):
        return CONTROLLER, HOST
    return None, None


def _decode_control(message_type: int, data: bytes, fields: List[Field]) -> str:
    """Decode the control header and payload; return extra summary text."""
    offset = 0
    gid = read_uint8(data, offset) & GID_MASK
    fields.append(
        Field("GID", "nci.gid", offset, 1, gid, GroupId, GID_MASK)
    )
    offset += 1

    oid = read_uint8(data, offset) & OID_MASK
    table = oid_table(gid)
    extra = ""
    if table is not None:
        extra = f", Packet: {value_name(oid, table)}"
        fields.append(Field("OID", "nci.oid", offset, 1, oid, table, OID_MASK))
    offset += 1

    payload_length = read_uint8(data, offset)
    fields.append(
        Field("Payload length", "nci.plen", offset, 1, payload_length, unit=" bytes")
    )
    offset += 1

    if gid == GroupId.NCI_CORE:
        payload_fields, _ = decode_core(oid, message_type, data, offset)
        fields.extend(payload_fields)
    return extra


def dissect(data: bytes) -> Dissection:
    """Dissect one NCI packet.

    Raises TruncatedPacketError if a header or payload field lies past the end.
    """
    data = bytes(data)
    first = read_uint8(data, 0)
    message_type = first >> 5
    source, destination = _endpoints(message_type)

    fields: List[Field] = [
        Field("Message Type", "nci.mt", 0, 1, message_type, MessageType, MT_MASK),
        Field(
            "Packet Boundary Flag",
            "nci.pbf",
            0,
            1,
            (first & PBF_MASK) >> 4,
            PacketBoundaryFlag,
            PBF_MASK,
        ),
    ]
    summary = f"{PROTOCOL_NAME}, Type {value_name(message_type, MessageType)}"

    if message_type:
        summary += _decode_control(message_type, data, fields)

    return Dissection(
        message_type=message_type,
        summary=summary,
        source=source,
        destination=destination,
        length=len(data),
        fields=fields,
    )