"""
Field registry for the SEP provisioning form.

The registry is the ordered catalog of every configuration field. It is built
once by ``build_registry()`` through a ``FormBuilder`` that records section
boundaries and the per-button field groups as data, so nothing downstream has
to rely on registration order or on fixed offsets between fields.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

from . import catalogs, lookup
from .fields import Field, FieldKind, Option

BUTTON_COUNT = 4

LINE_TYPE_KEY = "lineType"
MAC_FIELD_ID = "device"


@dataclass
class Section:
    """A titled group of fields; ``header`` is the section's own header row."""

    key: str
    title: str
    help: str
    header: Field
    fields: list[Field] = field(default_factory=list)


@dataclass
class ButtonGroup:
    """The nine fields configuring one SIP line/feature key."""

    number: int
    key_function: Field
    extension: Field
    label: Field
    auth_id: Field
    password: Field
    auto_answer: Field
    forward_all: Field
    pickup_group: Field
    voicemail: Field

    @property
    def line_type(self) -> str:
        """Label of the selected button type (Disabled, Line, SpeedDial, BLF)."""
        return self.key_function.raw_value

    @property
    def is_disabled(self) -> bool:
        return self.key_function.encoded_value == "0"

    @property
    def is_line(self) -> bool:
        return self.key_function.encoded_value == "1"

    def sub_fields(self) -> list[Field]:
        return [
            self.extension,
            self.label,
            *self.line_only_fields(),
        ]

    def line_only_fields(self) -> list[Field]:
        return [
            self.auth_id,
            self.password,
            self.auto_answer,
            self.forward_all,
            self.pickup_group,
            self.voicemail,
        ]


class FieldRegistry:
    """Ordered, immutable-shape collection of form fields."""

    def __init__(
        self,
        fields: Sequence[Field],
        sections: Sequence[Section],
        buttons: Sequence[ButtonGroup],
    ):
        self._fields = tuple(fields)
        self.sections = tuple(sections)
        self.buttons = tuple(buttons)
        self._by_id: dict[str, Field] = {}
        for f in self._fields:
            assert f.field_id not in self._by_id, f"duplicate field id {f.field_id}"
            self._by_id[f.field_id] = f

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._by_id

    @property
    def fields(self) -> tuple[Field, ...]:
        return self._fields

    def get(self, field_id: str) -> Field | None:
        return self._by_id.get(field_id)

    def find(self, xml_key: str) -> Field | None:
        """First field bound to ``xml_key`` in registry order."""
        if not xml_key:
            return None
        for f in self._fields:
            if f.xml_key == xml_key:
                return f
        return None

    def value(self, xml_key: str) -> str:
        return lookup.value(self, xml_key)

    def encoded_value(self, xml_key: str) -> str:
        return lookup.encoded_value(self, xml_key)

    def section(self, key: str) -> Section | None:
        return next((s for s in self.sections if s.key == key), None)

    def editable_fields(self) -> list[Field]:
        return [f for f in self._fields if not f.is_header]

    def visible_fields(self) -> list[Field]:
        """Fields to render: headers plus every field that is not hidden."""
        return [f for f in self._fields if not f.hidden]

    def navigable_fields(self) -> list[Field]:
        """Fields the cursor may land on: visible and not a header."""
        return [f for f in self._fields if not f.hidden and not f.is_header]


class FormBuilder:
    """Accumulates sections and fields in order, then produces a registry."""

    def __init__(self) -> None:
        self._fields: list[Field] = []
        self._sections: list[Section] = []
        self._buttons: list[ButtonGroup] = []
        self._prefix = ""

    @property
    def current_section(self) -> Section:
        assert self._sections, "add a section before adding fields"
        return self._sections[-1]

    def section(self, key: str, title: str, help: str, prefix: str = "") -> Section:
        """Start a new section; subsequent fields belong to it."""
        header = Field(
            field_id=f"section.{key}",
            label=title,
            xml_key="",
            kind=FieldKind.HEADER,
            help=help,
            section=key,
        )
        self._fields.append(header)
        new_section = Section(key=key, title=title, help=help, header=header)
        self._sections.append(new_section)
        self._prefix = prefix
        return new_section

    def _append(self, f: Field) -> Field:
        self._fields.append(f)
        self.current_section.fields.append(f)
        return f

    def add_field(
        self,
        label: str,
        xml_key: str,
        kind: FieldKind,
        help: str,
        hidden: bool = False,
    ) -> Field:
        assert kind is not FieldKind.HEADER, "headers are created by section()"
        return self._append(
            Field(
                field_id=f"{self._prefix}{xml_key}",
                label=label,
                xml_key=xml_key,
                kind=kind,
                help=help,
                section=self.current_section.key,
                hidden=hidden,
            )
        )

    def add_dropdown(
        self,
        label: str,
        xml_key: str,
        help: str,
        options: Sequence[Option],
        default_index: int = 0,
        hidden: bool = False,
    ) -> Field:
        options = tuple(options)
        assert options, f"dropdown {xml_key} has no options"
        assert 0 <= default_index < len(options), (
            f"default index {default_index} out of range for {xml_key}"
        )
        f = Field(
            field_id=f"{self._prefix}{xml_key}",
            label=label,
            xml_key=xml_key,
            kind=FieldKind.OPTIONAL,
            help=help,
            section=self.current_section.key,
            options=options,
            selected_index=default_index,
            raw_value=options[default_index].label,
            hidden=hidden,
            default_value=options[default_index].label,
        )
        return self._append(f)

    def add_button(self, number: int, default_type_index: int) -> ButtonGroup:
        self.section(
            f"button{number}",
            f"=== BUTTON {number} ===",
            "Line Configuration",
            prefix=f"button{number}.",
        )
        group = ButtonGroup(
            number=number,
            key_function=self.add_dropdown(
                "Key Function",
                LINE_TYPE_KEY,
                "Choose 'Line' for a standard extension, 'SpeedDial' for 1-touch "
                "calling, or 'BLF' to monitor if a colleague is on the phone.",
                catalogs.BUTTON_TYPES,
                default_type_index,
            ),
            extension=self.add_field(
                "Extension",
                "name",
                FieldKind.OPTIONAL,
                "The phone number for this line (e.g. 1001).",
            ),
            label=self.add_field(
                "Label",
                "displayName",
                FieldKind.OPTIONAL,
                "Label shown next to the button (e.g. 'Line 1').",
            ),
            auth_id=self.add_field(
                "Auth ID",
                "authName",
                FieldKind.OPTIONAL,
                "SIP Username (Often the same as Extension, but check provider).",
            ),
            password=self.add_field(
                "SIP Password",
                "authPassword",
                FieldKind.OPTIONAL,
                "SIP Password for this extension.",
            ),
            auto_answer=self.add_dropdown(
                "Auto Answer",
                "autoAnswerEnabled",
                "If Enabled, the phone answers calls automatically on speaker.",
                catalogs.DISABLED_ENABLED,
                0,
                hidden=True,
            ),
            forward_all=self.add_field(
                "Forward All",
                "callForwardURI",
                FieldKind.OPTIONAL,
                "Number to forward calls to unconditionally.",
                hidden=True,
            ),
            pickup_group=self.add_field(
                "Pickup Group",
                "callPickupGroupURI",
                FieldKind.OPTIONAL,
                "Code to dial to pick up a call ringing in your group.",
                hidden=True,
            ),
            voicemail=self.add_field(
                "Voicemail #",
                "voiceMailPilot",
                FieldKind.OPTIONAL,
                "Number dialed when the 'Messages' button is pressed.",
                hidden=True,
            ),
        )
        self._buttons.append(group)
        self._prefix = ""
        return group

    def build(self) -> FieldRegistry:
        return FieldRegistry(self._fields, self._sections, self._buttons)


def build_registry() -> FieldRegistry:
    """Define the complete provisioning form and apply initial visibility."""
    from .visibility import recompute_visibility

    b = FormBuilder()
    required, optional = FieldKind.REQUIRED, FieldKind.OPTIONAL

    b.section("identity", "=== IDENTITY & NETWORK ===", "Core System Settings")
    b.add_field(
        "MAC Address",
        MAC_FIELD_ID,
        required,
        "REQUIRED: The unique 12-char ID on the back of the phone.",
    )
    b.add_field(
        "Phone Label",
        "deviceLabel",
        optional,
        "Custom text shown in the top status bar (e.g. 'Reception').",
    )
    b.add_field(
        "Primary PBX IP",
        "processNodeName1",
        required,
        "REQUIRED: IP Address of your SIP Server / PBX (e.g. 192.168.1.10).",
    )
    b.add_field(
        "Secondary PBX",
        "processNodeName2",
        optional,
        "Backup Server IP (e.g. 192.168.1.11). Leave blank if none.",
    )
    b.add_field(
        "Tertiary PBX",
        "processNodeName3",
        optional,
        "Second Backup Server IP. Leave blank if none.",
    )
    b.add_dropdown(
        "Transport",
        "transportLayerProtocol",
        "Network Protocol. UDP (Standard) is faster with lower overhead. Use "
        "TCP/TLS only if your provider requires reliable or encrypted signaling.",
        catalogs.TRANSPORTS,
        0,
    )
    b.add_field(
        "Firmware Load",
        "loadInformation",
        optional,
        "Specific firmware version to load (e.g. sip8941_45.9-4-2-13). Leave "
        "blank to use the default load defined in the TFTP server config.",
    )
    b.add_field(
        "SIP Port",
        "voipControlPort",
        optional,
        "Port for SIP Signaling. Default is 5060. changing this may "
        "require firewall adjustments.",
    )

    b.section("ethernet", "=== ETHERNET & VLAN ===", "Network Layer 2 Settings")
    b.add_field(
        "Voice VLAN ID",
        "adminVlanId",
        optional,
        "VLAN ID for Voice traffic. Leave blank if Network Port is untagged.",
    )
    b.add_dropdown(
        "PC Port VLAN Mode",
        "pcVoiceVlanAccess",
        "Determines which VLAN the computer connected to the phone will use.",
        catalogs.PC_VLAN_MODES,
        0,
    )
    b.add_field(
        "PC VLAN ID",
        "pcPortVlanId",
        optional,
        "Enter the VLAN ID for the computer (Data VLAN).",
        hidden=True,
    )
    b.add_dropdown(
        "Span to PC",
        "spanToPCPort",
        "Advanced: Copies all phone audio/traffic to the PC port. Used for "
        "Wireshark/Packet Capture. WARNING: Can reduce network performance.",
        catalogs.DISABLED_ENABLED,
        0,
    )
    b.add_dropdown(
        "Gratuitous ARP",
        "gratuitousARP",
        "Send ARP updates on boot. Critical for scenarios where the Router might "
        "not know where the phone is (e.g. redundant links). (Rec: Enabled)",
        catalogs.DISABLED_ENABLED,
        1,
    )
    b.add_field(
        "MTU Size",
        "mtu",
        optional,
        "Max Transmission Unit. 1500 is Ethernet Standard. Use 1300-1400 "
        "for VPNs to prevent packet fragmentation and dropped calls.",
    )

    b.section("security", "=== SECURITY & ACCESS ===", "Device Access Control")
    b.add_dropdown(
        "Settings Lock",
        "settingsAccess",
        "Locks the 'Settings' menu on the phone screen to prevent changes.",
        catalogs.DISABLED_ENABLED,
        1,
    )
    b.add_dropdown(
        "Web Access",
        "webAccess",
        "Enables the phone's web page for viewing/changing settings.",
        catalogs.DISABLED_ENABLED,
        1,
    )
    b.add_dropdown(
        "SSH Access",
        "sshAccess",
        "Enables SSH for advanced remote administration.",
        catalogs.DISABLED_ENABLED,
        0,
    )
    b.add_field("SSH Username", "sshUserId", optional, "Username for SSH login.")
    b.add_field("SSH Password", "sshPassword", optional, "Password for SSH login.")
    b.add_field(
        "Admin Password",
        "adminPassword",
        optional,
        "Password to unlock the Settings menu or Web Interface.",
    )
    b.add_dropdown(
        "PC Port",
        "pcPort",
        "Enable/Disable the PC Ethernet port.",
        catalogs.DISABLED_ENABLED,
        1,
    )

    b.section("hardware", "=== HARDWARE ===", "Physical Peripherals")
    b.add_dropdown(
        "Bluetooth", "bluetooth", "Enable Bluetooth Radio.", catalogs.DISABLED_ENABLED, 1
    )
    b.add_dropdown(
        "BT Profiles",
        "bluetoothProfile",
        "Allowed BT Profiles (Handsfree/Headset).",
        catalogs.BLUETOOTH_PROFILES,
        2,
    )

    b.section("audio_video", "=== AUDIO & VIDEO ===", "Codecs and Call Quality")
    b.add_dropdown(
        "Preferred Codec",
        "preferredCodec",
        "Audio quality. G.711 is standard. G.729 is compressed.",
        catalogs.CODECS,
        0,
    )
    b.add_dropdown(
        "Advertise G.722",
        "advertiseG722Codec",
        "Advertise G.722 support for High Definition calls.",
        catalogs.DISABLED_ENABLED,
        1,
    )
    b.add_field(
        "Audio DSCP",
        "dscpForAudio",
        optional,
        "QoS Packet Tagging. 184 (EF - Expedited Forwarding) is the industry "
        "standard for Voice. Ensure your Switch/Router respects this tag.",
    )
    b.add_field(
        "RTP Min Port",
        "startMediaPort",
        optional,
        "Start of UDP Port range for Audio/Video. Default 16384. Ensure "
        "your Firewall allows this range inbound/outbound.",
    )
    b.add_field(
        "RTP Max Port",
        "stopMediaPort",
        optional,
        "End of UDP Port range for Audio/Video. Default 32766. Range must "
        "be large enough to handle concurrent calls.",
    )
    b.add_dropdown(
        "Video Enable",
        "videoCapability",
        "Enable the built-in camera for video calls. Requires a PBX "
        "that supports Video (H.264).",
        catalogs.NO_YES,
        1,
    )
    b.add_dropdown(
        "Start Video on Answer",
        "autoTransmitVideo",
        "Control if video starts automatically when you answer. 'No' "
        "provides privacy (Audio only) until you press the Video "
        "button. 'Yes' sends video immediately upon answering.",
        catalogs.NO_YES,
        0,
    )
    b.add_dropdown(
        "Video Quality",
        "videoBitRate",
        "Max bandwidth/quality for Video. Select based on your upload "
        "speed. 1.5M+ recommended for HD 720p.",
        catalogs.VIDEO_BITRATES,
        2,
    )
    b.add_field(
        "Video DSCP",
        "dscpForVideo",
        optional,
        "QoS Tag for Video. 136 (AF41) is standard. Set lower priority "
        "than Audio to prioritize voice clarity.",
    )
    b.add_dropdown(
        "RTCP Stats",
        "rtcp",
        "Send detailed call quality reports (Jitter/Latency "
        "constraints) to the SIP Server.",
        catalogs.DISABLED_ENABLED,
        1,
    )

    b.section("features", "=== FEATURES ===", "Do Not Disturb & User Features")
    b.add_dropdown(
        "Do Not Disturb",
        "dndControl",
        "Show the 'Do Not Disturb' button on the main screen.",
        catalogs.DISABLED_ENABLED,
        1,
    )
    b.add_dropdown(
        "DND Alert",
        "dndCallAlert",
        "How to notify you of incoming calls when DND is active.",
        catalogs.DND_ALERTS,
        1,
    )
    b.add_field(
        "DND Timer",
        "dndReminderTimer",
        optional,
        "Play a reminder tone every X minutes when DND is active.",
    )
    b.add_dropdown(
        "NAT Enabled",
        "natEnabled",
        "Select 'Yes' if this phone is behind a home router/firewall. "
        "Essential for remote phones.",
        catalogs.NO_YES,
        0,
    )
    b.add_field(
        "NAT Address",
        "natAddress",
        optional,
        "The Public IP Address of your internet connection. PRO TIP: If you have "
        "'One-Way Audio' (can't hear caller), setting this usually fixes it.",
        hidden=True,
    )

    b.section("monitoring", "=== MONITORING ===", "SNMP & Syslog")
    b.add_dropdown(
        "SNMP Enable",
        "snmpEnabled",
        "Enable Remote Monitoring.",
        catalogs.DISABLED_ENABLED,
        0,
    )
    b.add_field(
        "Community String",
        "snmpCommunity",
        optional,
        "SNMP Password (e.g. public).",
        hidden=True,
    )
    b.add_field(
        "Syslog Server",
        "syslogAddr",
        optional,
        "IP Address for sending Debug Logs (e.g. 192.168.1.50).",
    )

    b.section("region", "=== REGION & TIME ===", "Localization")
    b.add_dropdown(
        "Language",
        "userLocale",
        "Screen Language (Load from Server).",
        catalogs.USER_LOCALES,
        0,
    )
    b.add_dropdown(
        "Dial Tones",
        "networkLocale",
        "Sets the specific frequencies for Dial Tone, Busy Signal, and Ringback. "
        "Must match your region (e.g. US vs UK) or calls may sound 'wrong'.",
        catalogs.NETWORK_LOCALES,
        0,
    )
    b.add_field(
        "Dial Plan",
        "dialTemplate",
        optional,
        "Dialing Rules File (e.g. dialplan.xml).",
    )
    b.add_dropdown(
        "Time Zone",
        "timeZone",
        "Local Time Zone.",
        catalogs.TIMEZONES,
        catalogs.DEFAULT_TIMEZONE_INDEX,
    )
    b.add_field(
        "NTP Server",
        "ntpServer",
        optional,
        "Time Server IP (e.g. pool.ntp.org or 4.2.2.2).",
    )
    b.add_dropdown(
        "Date Format", "dateTemplate", "Display format.", catalogs.DATE_FORMATS, 0
    )
    b.add_dropdown(
        "Time Format", "timeFormat", "Clock format.", catalogs.TIME_FORMATS, 0
    )

    b.section("urls", "=== EXTERNAL URLS ===", "Integration Links")
    b.add_field(
        "Directory URL", "directoryURL", optional, "URL for the Corporate Phonebook."
    )
    b.add_field("Services URL", "servicesURL", optional, "URL for the Services Menu.")
    b.add_field(
        "Auth URL", "authenticationURL", optional, "URL for validating Services."
    )
    b.add_field(
        "Info URL", "informationURL", optional, "URL for the '?' Help button."
    )
    b.add_field(
        "Softkey Template",
        "softKeyFile",
        optional,
        "XML file on TFTP server defining button layouts (e.g. "
        "softkeys.xml). Allows removing/reordering buttons like 'Redial'.",
    )
    b.add_field(
        "Idle/Saver URL",
        "idleURL",
        optional,
        "URL to an XML file for the screensaver. Activated when phone is "
        "idle for the Timeout duration.",
    )
    b.add_field(
        "Saver Timeout",
        "idleTimeout",
        optional,
        "Time in seconds before the screensaver starts (e.g. 300 = 5 "
        "Minutes). Set to 0 to disable.",
    )
    b.add_field(
        "Wallpaper URL",
        "backgroundImage",
        optional,
        "URL to a Background Image. SPECS: 640x480 resolution, PNG format, "
        "24-bit Color Depth. Other formats (JPG/BMP) will NOT work.",
    )

    # Button 1 starts out as a Line, the rest disabled.
    for number in range(1, BUTTON_COUNT + 1):
        b.add_button(number, 1 if number == 1 else 0)

    registry = b.build()
    recompute_visibility(registry)
    return registry
