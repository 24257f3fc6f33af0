"""
SEP<MAC>.cnf.xml serializer.

Walks the form in a fixed element order and renders the provisioning
document the phone downloads over TFTP. Optional leaves follow one rule: they
are written only when their effective value is non-empty. Dropdown leaves
always have a non-empty encoded value, so they are always written. Hidden
state is ignored; a value entered while a field was visible is still written.
"""

from __future__ import annotations

import re
from pathlib import Path
from xml.sax.saxutils import escape

from sepgen.core.errors import OutputWriteError, ValidationError
from sepgen.core.form.registry import MAC_FIELD_ID, ButtonGroup, FieldRegistry
from sepgen.core.utils.logger import log_error, log_file_operation, log_info

MAC_LENGTH = 12
DEFAULT_SIP_PORT = "5060"
FEATURE_ID_LINE = "9"
FEATURE_ID_OTHER = "21"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

_NON_HEX = re.compile(r"[^0-9A-Fa-f]")


def sanitize_mac(text: str) -> str:
    """
    Reduce a MAC address to its first 12 hex digits, uppercased.

    Separators and any other non-hex characters are dropped. Short input is
    not padded, so it stays short and fails validation.

    Examples:
        >>> sanitize_mac("00:07:a1-B2.c3d4")
        '0007A1B2C3D4'
    """
    return _NON_HEX.sub("", text).upper()[:MAC_LENGTH]


def validated_mac(registry: FieldRegistry) -> str:
    mac = sanitize_mac(registry.value(MAC_FIELD_ID))
    if len(mac) != MAC_LENGTH:
        raise ValidationError(
            f"MAC address must be exactly {MAC_LENGTH} hex characters (got {len(mac)})",
            field_id=MAC_FIELD_ID,
        )
    return mac


def config_filename(mac: str) -> str:
    return f"SEP{mac}.cnf.xml"


class _Writer:
    """Line-oriented XML emitter with two-space indentation."""

    def __init__(self, escape_values: bool):
        self.lines: list[str] = []
        self.depth = 0
        self.escape_values = escape_values

    def _text(self, value: str) -> str:
        return escape(value) if self.escape_values else value

    def open(self, tag: str, attrs: str = "") -> None:
        self.lines.append(f"{'  ' * self.depth}<{tag}{attrs}>")
        self.depth += 1

    def close(self, tag: str) -> None:
        self.depth -= 1
        self.lines.append(f"{'  ' * self.depth}</{tag}>")

    def leaf(self, tag: str, value: str) -> None:
        self.lines.append(f"{'  ' * self.depth}<{tag}>{self._text(value)}</{tag}>")

    def optional(self, tag: str, value: str) -> None:
        if value:
            self.leaf(tag, value)

    def render(self) -> bytes:
        return ("\n".join([XML_DECLARATION, *self.lines]) + "\n").encode("utf-8")


def _call_manager_group(w: _Writer, registry: FieldRegistry) -> None:
    port = registry.value("voipControlPort") or DEFAULT_SIP_PORT
    w.open("callManagerGroup")
    w.open("members")
    for priority, key in enumerate(("processNodeName1", "processNodeName2", "processNodeName3")):
        node = registry.value(key)
        # Primary member is always written; backups only when configured.
        if priority > 0 and not node:
            continue
        w.open("member", f' priority="{priority}"')
        w.open("callManager")
        w.open("ports")
        w.leaf("ethernetPhonePort", port)
        w.close("ports")
        w.leaf("processNodeName", node)
        w.close("callManager")
        w.close("member")
    w.close("members")
    w.close("callManagerGroup")


def _date_time(w: _Writer, registry: FieldRegistry) -> None:
    w.open("dateTimeSetting")
    w.optional("ntpServerAddr", registry.value("ntpServer"))
    w.leaf("timeZone", registry.encoded_value("timeZone"))
    w.optional("dateTemplate", registry.encoded_value("dateTemplate"))
    w.optional("timeFormat", registry.encoded_value("timeFormat"))
    w.close("dateTimeSetting")


def _sip_stack(w: _Writer, registry: FieldRegistry) -> None:
    w.open("sipStack")
    w.leaf("transportLayerProtocol", registry.encoded_value("transportLayerProtocol"))
    if registry.encoded_value("natEnabled") == "true":
        w.leaf("natEnabled", "true")
        w.optional("natAddress", registry.value("natAddress"))
    w.close("sipStack")


def _locales(w: _Writer, registry: FieldRegistry) -> None:
    locale = registry.encoded_value("userLocale")
    w.open("userLocale")
    w.leaf("name", locale)
    w.leaf("langCode", locale)
    w.close("userLocale")
    w.leaf("networkLocale", registry.encoded_value("networkLocale"))


def _ethernet(w: _Writer, registry: FieldRegistry) -> None:
    w.open("ethernetConfig")
    w.optional("adminVlanId", registry.value("adminVlanId"))
    w.optional("pcPortVlanId", registry.value("pcPortVlanId"))
    w.close("ethernetConfig")


def _line(w: _Writer, button: ButtonGroup) -> None:
    w.open("line", f' button="{button.number}"')
    w.leaf("featureID", FEATURE_ID_LINE if button.is_line else FEATURE_ID_OTHER)
    w.optional("name", button.extension.raw_value)
    w.optional("displayName", button.label.raw_value)
    if button.is_line:
        w.optional("authName", button.auth_id.raw_value)
        w.optional("authPassword", button.password.raw_value)
        if button.auto_answer.encoded_value == "1":
            w.leaf("autoAnswerEnabled", "2")
            w.leaf("autoAnswerTimer", "1")
        w.optional("callForwardURI", button.forward_all.raw_value)
        w.optional("callPickupGroupURI", button.pickup_group.raw_value)
        w.optional("voiceMailPilot", button.voicemail.raw_value)
    w.close("line")


def _sip_lines(w: _Writer, registry: FieldRegistry) -> None:
    w.open("sipLines")
    for button in registry.buttons:
        if not button.is_disabled:
            _line(w, button)
    w.close("sipLines")


def _vendor_config(w: _Writer, registry: FieldRegistry) -> None:
    value, encoded = registry.value, registry.encoded_value
    w.open("vendorConfig")
    for key in ("settingsAccess", "webAccess", "sshAccess"):
        w.leaf(key, encoded(key))
    for key in ("sshUserId", "sshPassword", "adminPassword"):
        w.optional(key, value(key))
    for key in (
        "pcPort",
        "pcVoiceVlanAccess",
        "spanToPCPort",
        "gratuitousARP",
        "bluetooth",
        "bluetoothProfile",
        "preferredCodec",
        "advertiseG722Codec",
    ):
        w.leaf(key, encoded(key))
    w.optional("dscpForAudio", value("dscpForAudio"))
    if value("startMediaPort"):
        w.leaf("startMediaPort", value("startMediaPort"))
        w.optional("stopMediaPort", value("stopMediaPort"))
    for key in ("videoCapability", "autoTransmitVideo", "videoBitRate"):
        w.leaf(key, encoded(key))
    w.optional("dscpForVideo", value("dscpForVideo"))
    for key in ("rtcp", "dndControl", "dndCallAlert"):
        w.leaf(key, encoded(key))
    w.optional("dndReminderTimer", value("dndReminderTimer"))
    if encoded("snmpEnabled") == "1":
        w.leaf("snmpEnable", "1")
        w.optional("snmpCommunity", value("snmpCommunity"))
    for key in (
        "syslogAddr",
        "directoryURL",
        "servicesURL",
        "authenticationURL",
        "informationURL",
        "dialTemplate",
        "softKeyFile",
        "idleURL",
        "idleTimeout",
        "backgroundImage",
    ):
        w.optional(key, value(key))
    w.close("vendorConfig")


def serialize(registry: FieldRegistry, escape_values: bool = True) -> bytes:
    """
    Render the provisioning document for the current form state.

    Args:
        registry: Form to serialize (hidden state is ignored)
        escape_values: Escape ``&``, ``<`` and ``>`` in field values

    Returns:
        The UTF-8 encoded document

    Raises:
        ValidationError: If the MAC address is not 12 hex characters
    """
    validated_mac(registry)

    w = _Writer(escape_values)
    w.open("device")
    w.leaf("deviceProtocol", "SIP")
    w.optional("deviceLabel", registry.value("deviceLabel"))
    w.optional("loadInformation", registry.value("loadInformation"))
    _call_manager_group(w, registry)
    _date_time(w, registry)
    _sip_stack(w, registry)
    _locales(w, registry)
    _ethernet(w, registry)
    _sip_lines(w, registry)
    _vendor_config(w, registry)
    w.optional("mtu", registry.value("mtu"))
    w.close("device")
    return w.render()


def write_config(
    registry: FieldRegistry,
    output_dir: str | Path = ".",
    escape_values: bool = True,
) -> Path:
    """
    Serialize the form and write ``SEP<MAC>.cnf.xml`` into ``output_dir``.

    The document is rendered before anything touches the disk and written via
    a temporary file, so a failed save never leaves a partial file. An
    existing file of the same name is replaced.

    Raises:
        ValidationError: If the MAC address is invalid (nothing is written)
        OutputWriteError: If the file cannot be written
    """
    mac = validated_mac(registry)
    document = serialize(registry, escape_values=escape_values)

    target_path = Path(output_dir) / config_filename(mac)
    temp_path = target_path.with_suffix(".tmp")
    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path.write_bytes(document)
        temp_path.replace(target_path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        log_file_operation("write", str(target_path), False, str(e))
        log_error("SERIALIZER", "Could not write provisioning file", str(target_path), e)
        raise OutputWriteError(str(target_path), e) from e

    log_file_operation("write", str(target_path), True)
    log_info("SERIALIZER", f"Wrote {len(document)} bytes", context=mac)
    return target_path
