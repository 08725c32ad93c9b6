"""Protocol constants of the NFC Controller Interface (NCI) v2.0."""

from __future__ import annotations

from enum import Enum, IntEnum, IntFlag

MT_MASK = 0b11100000
PBF_MASK = 0b00010000
GID_MASK = 0b00001111
OID_MASK = 0b00111111


class _LabelledEnum(IntEnum):
    """Integer enumeration whose members carry a display label."""

    label: str

    def __new__(cls, value: int, label: str) -> _LabelledEnum:
        member = int.__new__(cls, value)
        member._value_ = value
        member.label = label
        return member


class MessageType(_LabelledEnum):
    DATA = 0b000, "DATA"
    CMD = 0b001, "CMD"
    RSP = 0b010, "RSP"
    NTF = 0b011, "NTF"


class PacketBoundaryFlag(_LabelledEnum):
    COMPLETE = 0b0, "COMPLETE"
    SEGMENT = 0b1, "SEGMENT"


class GroupId(_LabelledEnum):
    NCI_CORE = 0b0000, "NCI_CORE"
    RF_MGMT = 0b0001, "RF_MGMT"
    NFCEE_MGMT = 0b0010, "NFCEE_MGMT"
    NFCC_MGMT = 0b0011, "NFCC_MGMT"
    TEST_MGMT = 0b0100, "TEST_MGMT"
    PROP = 0b1111, "PROP"


class CoreOid(_LabelledEnum):
    CORE_RESET = 0b000000, "CORE_RESET"
    CORE_INIT = 0b000001, "CORE_INIT"
    CORE_SET_CONFIG = 0b000010, "CORE_SET_CONFIG"
    CORE_GET_CONFIG = 0b000011, "CORE_GET_CONFIG"
    CORE_CONN_CREATE = 0b000100, "CORE_CONN_CREATE"
    CORE_CONN_CLOSE = 0b000101, "CORE_CONN_CLOSE"
    CORE_CONN_CREDITS = 0b000110, "CORE_CONN_CREDITS"
    CORE_GENERIC_ERROR = 0b000111, "CORE_GENERIC_ERROR"
    CORE_INTERFACE_ERROR = 0b001000, "CORE_INTERFACE_ERROR"
    CORE_SET_POWER_SUB_STATE = 0b001001, "CORE_SET_POWER_SUB_STATE"


class RfManagementOid(_LabelledEnum):
    RF_DISCOVER_MAP = 0b000000, "RF_DISCOVER_MAP"
    RF_SET_LISTEN_MODE_ROUTING = 0b000001, "RF_SET_LISTEN_MODE_ROUTING"
    RF_GET_LISTEN_MODE_ROUTING = 0b000010, "RF_GET_LISTEN_MODE_ROUTING"
    RF_DISCOVER = 0b000011, "RF_DISCOVER"
    RF_DISCOVER_SELECT = 0b000100, "RF_DISCOVER_SELECT"
    RF_INTF_ACTIVATED = 0b000101, "RF_INTF_ACTIVATED"
    RF_DEACTIVATE = 0b000110, "RF_DEACTIVATE"
    RF_FIELD_INFO = 0b000111, "RF_FIELD_INFO"
    RF_T3T_POLLING = 0b001000, "RF_T3T_POLLING"
    RF_NFCEE_ACTION = 0b001001, "RF_NFCEE_ACTION"
    RF_NFCEE_DISCOVERY_REQ = 0b001010, "RF_NFCEE_DISCOVERY_REQ"
    RF_PARAMETER_UPDATE = 0b001011, "RF_PARAMETER_UPDATE"
    RF_INTF_EXT_START = 0b001100, "RF_INTF_EXT_START"
    RF_INTF_EXT_STOP = 0b001101, "RF_INTF_EXT_STOP"
    RF_EXT_AGG_ABORT = 0b001110, "RF_EXT_AGG_ABORT"
    RF_NDEF_ABORT = 0b001111, "RF_NDEF_ABORT"
    RF_ISO_DEP_NAK_PRESENCE = 0b010000, "RF_ISO_DEP_NAK_PRESENCE"
    RF_SET_FORCED_NFCEE_ROUTING = 0b010001, "RF_SET_FORCED_NFCEE_ROUTING"


class NfceeManagementOid(_LabelledEnum):
    NFCEE_DISCOVER = 0b000000, "NFCEE_DISCOVER"
    NFCEE_MODE_SET = 0b000001, "NFCEE_MODE_SET"
    NFCEE_STATUS = 0b000010, "NFCEE_STATUS"
    NFCEE_POWER_AND_LINK_CNTRL = 0b000011, "NFCEE_POWER_AND_LINK_CNTRL"


class Status(_LabelledEnum):
    OK = 0x00, "STATUS_OK"
    REJECTED = 0x01, "STATUS_REJECTED"
    RF_FRAME_CORRUPTED = 0x02, "STATUS_RF_FRAME_CORRUPTED"
    FAILED = 0x03, "STATUS_FAILED"
    NOT_INITIALIZED = 0x04, "STATUS_NOT_INITIALIZED"
    SYNTAX_ERROR = 0x05, "STATUS_SYNTAX_ERROR"
    SEMANTIC_ERROR = 0x06, "STATUS_SEMANTIC_ERROR"
    INVALID_PARAM = 0x09, "STATUS_INVALID_PARAM"
    MESSAGE_SIZE_EXCEEDED = 0x0A, "STATUS_MESSAGE_SIZE_EXCEEDED"
    OK_1_BIT = 0x11, "STATUS_OK_1_BIT"
    OK_2_BIT = 0x12, "STATUS_OK_2_BIT"
    OK_3_BIT = 0x13, "STATUS_OK_3_BIT"
    OK_4_BIT = 0x14, "STATUS_OK_4_BIT"
    OK_5_BIT = 0x15, "STATUS_OK_5_BIT"
    OK_6_BIT = 0x16, "STATUS_OK_6_BIT"
    OK_7_BIT = 0x17, "STATUS_OK_7_BIT"
    DISCOVERY_ALREADY_STARTED = 0xA0, "STATUS_DISCOVERY_ALREADY_STARTED"
    DISCOVERY_TARGET_ACTIVATION_FAILED = 0xA1, "STATUS_DISCOVERY_TARGET_ACTIVATION_FAILED"
    DISCOVERY_TEAR_DOWN = 0xA2, "STATUS_DISCOVERY_TEAR_DOWN"
    RF_TRANSMISSION_EXCEPTION = 0xB0, "STATUS_RF_TRANSMISSION_EXCEPTION"
    RF_PROTOCOL_EXCEPTION = 0xB1, "STATUS_RF_PROTOCOL_EXCEPTION"
    RF_TIMEOUT_EXCEPTION = 0xB2, "STATUS_RF_TIMEOUT_EXCEPTION"
    RF_UNEXPECTED_DATA = 0xB3, "STATUS_RF_UNEXPECTED_DATA"
    NFCEE_INTERFACE_ACTIVATION_FAILED = 0xC0, "STATUS_NFCEE_INTERFACE_ACTIVATION_FAILED"
    NFCEE_TRANSMISSION_ERROR = 0xC1, "STATUS_NFCEE_TRANSMISSION_ERROR"
    NFCEE_PROTOCOL_ERROR = 0xC2, "STATUS_NFCEE_PROTOCOL_ERROR"
    NFCEE_TIMEOUT_ERROR = 0xC3, "STATUS_NFCEE_TIMEOUT_ERROR"


class ResetType(_LabelledEnum):
    KEEP_CONFIG = 0x00, "Keep config"
    RESET_CONFIG = 0x01, "Reset config"


class ResetTrigger(_LabelledEnum):
    ERROR = 0x00, "Unrecoverable error"
    POWER_ON = 0x01, "NFCC power on"
    RESET_CMD_RECEIVED = 0x02, "Reset CMD received"


class NciVersion(_LabelledEnum):
    V10 = 0x10, "V1.0"
    V11 = 0x11, "V1.1"
    V20 = 0x20, "V2.0"


class CoreOption0(IntFlag):
    DISCOVER_FREQ = 0b00000001
    MULTICONFIG = 0b00000010
    HCI_NETWORK = 0b00001000
    ACTIVE_COMM = 0b00010000


class CoreOption1(IntFlag):
    TECH_ROUTING = 0b00000010
    PROTOCOL_ROUTING = 0b00000100
    AID_ROUTING = 0b00001000
    SYSTEM_CODE_ROUTING = 0b00010000
    APDU_ROUTING = 0b00100000
    FORCED_NFCEE_ROUTING = 0b01000000


class CoreOption2(IntFlag):
    BATTERY_OFF_STATE = 0b00000001
    SWITCH_OFF_STATE = 0b00000010
    SWITCH_ON_SUBMODE_STATE = 0b00000100
    RF_CONF_SWITCH_OFF = 0b00001000


def value_name(value: int, enum_cls: type[Enum]) -> str:
    """Return the display name of ``value`` in ``enum_cls``, or an "Unknown" text."""
    try:
        member = enum_cls(value)
    except ValueError:
        return f"Unknown (0x{value:02x})"
    label = getattr(member, "label", None)
    if label is not None:
        return label
    if member.name is None:
        return f"Unknown (0x{value:02x})"
    return member.name