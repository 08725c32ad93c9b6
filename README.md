# ncidissect

Decode packets of the NFC Controller Interface (NCI) exchanged between a
Device Host (DH) and an NFC Controller (NFCC).

For every packet the decoder reads the message type and the packet boundary
flag from the first byte, and works out the direction: commands go from DH to
NFCC; notifications and data packets go from NFCC to DH.

For control packets (commands, responses and notifications) it also reads the
group ID, the opcode ID and the payload length. The opcode is named for the
NCI Core, RF Management and NFCEE Management groups. The payload is decoded
for `CORE_RESET` commands (reset type), responses (status) and notifications
(reset trigger, configuration status, version, manufacturer ID and
manufacturer-specific information).

## Installation

```
pip install .
```

## Usage

```python
from ncidissect.dissector import dissect

# CORE_RESET_CMD, payload length 1, reset type "Reset config"
result = dissect(bytes([0x20, 0x00, 0x01, 0x01]))
print(result.render())
```

prints

```
NCI Protocol, Type CMD, Packet: CORE_RESET
  001. .... = Message Type: CMD (1)
  ...0 .... = Packet Boundary Flag: COMPLETE (0)
  .... 0000 = GID: NCI_CORE (0)
  ..00 0000 = OID: CORE_RESET (0)
  Payload length: 1 bytes
  Reset Type: Reset config (1)
```

`dissect` returns a `Dissection` with these attributes:

- `message_type`: the 3-bit message type
- `summary`: the summary line
- `source`, `destination`: `"DH"` or `"NFCC"`, or `None` when the direction
  is not known (responses)
- `length`: the number of bytes in the packet
- `protocol`: `"NCI"`
- `fields`: the decoded fields, in packet order

Each field is a `ncidissect.fields.Field` holding its name, filter
abbreviation (such as `nci.core_reset_ntf.ver`), offset, length, value, and
the enumeration and bit mask used to show it. Its `render()` method gives the
line shown above.

If a packet is shorter than its header or fields say it should be,
`ncidissect.fields.TruncatedPacketError` (a `ValueError`) is raised. An empty
packet raises it too.

The protocol's values are enumerations in `ncidissect.constants`:
`MessageType`, `PacketBoundaryFlag`, `GroupId`, `CoreOid`, `RfManagementOid`,
`NfceeManagementOid`, `Status`, `ResetType`, `ResetTrigger` and `NciVersion`,
plus the bit flags `CoreOption0`, `CoreOption1` and `CoreOption2`.
`value_name(value, enum_cls)` gives the display name of a value, or
`Unknown (0x..)` for a value the enumeration does not define.

The lower-level pieces are available as well:

- `ncidissect.fields.read_uint8(data, offset)` reads one byte with a bounds check.
- `ncidissect.core.decode_reset(message_type, data, offset)` decodes a
  `CORE_RESET` payload and returns the fields and the offset after them.
- `ncidissect.core.decode_core(oid, message_type, data, offset)` does the same
  for an NCI Core group payload; opcodes other than `CORE_RESET` give no fields.
- `ncidissect.dissector.oid_table(gid)` gives the opcode enumeration for a
  group, or `None` for groups whose opcodes are not named.

## What it does not do

- It decodes one packet at a time from bytes; it does not read capture files
  or capture traffic, and it has no command-line program.
- The payload of data packets is not decoded; only their message type and
  packet boundary flag are.
- Of the control messages, only `CORE_RESET` has its payload decoded. Opcodes
  of the NFCC Management, Test Management and proprietary groups are not named.

## Tests

```
pip install .[test]
pytest
```