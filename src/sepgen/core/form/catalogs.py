"""
Dropdown option catalogs understood by the Cisco 8945 SIP firmware.

Labels are what the operator sees; values are written verbatim into the
provisioning document, so neither may be changed without checking the target
firmware.
"""

from .fields import Option


def _pairs(labels: list[str], values: list[str]) -> tuple[Option, ...]:
    assert len(labels) == len(values), "catalog labels and values differ in length"
    return tuple(Option(label, value) for label, value in zip(labels, values))


DISABLED_ENABLED = _pairs(["Disabled", "Enabled"], ["0", "1"])
NO_YES = _pairs(["No", "Yes"], ["false", "true"])

TRANSPORTS = _pairs(["UDP", "TCP", "TLS"], ["1", "2", "3"])

CODECS = _pairs(
    [
        "G.711u (Standard US)",
        "G.711a (Standard EU)",
        "G.722 (HD Audio)",
        "G.729 (Compressed)",
    ],
    ["PCMU", "PCMA", "G722", "G729"],
)

DATE_FORMATS = _pairs(["M/D/Y", "D/M/Y", "Y/M/D"], ["M/D/Y", "D/M/Y", "Y/M/D"])
TIME_FORMATS = _pairs(["12 Hour", "24 Hour"], ["12", "24"])

VIDEO_BITRATES = _pairs(
    ["384k", "768k", "1.5M", "2.5M", "4M"],
    ["384", "768", "1500", "2500", "4000"],
)

# (display name, firmware zone name). The firmware only offers the first 58.
_TIMEZONES = [
    ("Dateline Standard Time (GMT-12)", "Dateline Standard Time"),
    ("Samoa Standard Time (GMT-11)", "Samoa Standard Time"),
    ("Hawaiian Standard Time (GMT-10)", "Hawaiian Standard Time"),
    ("Alaskan Standard Time (GMT-9)", "Alaskan Standard Time"),
    ("Pacific Standard/Daylight Time (GMT-8)", "Pacific Standard/Daylight Time"),
    ("Mountain Standard/Daylight Time (GMT-7)", "Mountain Standard/Daylight Time"),
    ("US Mountain Standard Time (GMT-7)", "US Mountain Standard Time"),
    ("Central Standard/Daylight Time (GMT-6)", "Central Standard/Daylight Time"),
    ("Mexico Standard/Daylight Time (GMT-6)", "Mexico Standard/Daylight Time"),
    ("Canada Central Standard Time (GMT-6)", "Canada Central Standard Time"),
    ("SA Pacific Standard Time (GMT-5)", "SA Pacific Standard Time"),
    ("Eastern Standard/Daylight Time (GMT-5)", "Eastern Standard/Daylight Time"),
    ("US Eastern Standard Time (GMT-5)", "US Eastern Standard Time"),
    ("Atlantic Standard Time (GMT-4)", "Atlantic Standard Time"),
    ("SA Western Standard Time (GMT-4)", "SA Western Standard Time"),
    ("Newfoundland Standard Time (GMT-3.5)", "Newfoundland Standard Time"),
    ("E. South America Standard Time (GMT-3)", "E. South America Standard Time"),
    ("SA Eastern Standard Time (GMT-3)", "SA Eastern Standard Time"),
    ("Mid-Atlantic Standard Time (GMT-2)", "Mid-Atlantic Standard Time"),
    ("Azores Standard Time (GMT-1)", "Azores Standard Time"),
    ("GMT Standard/Daylight Time (GMT)", "GMT Standard/Daylight Time"),
    ("Greenwich Standard Time (GMT)", "Greenwich Standard Time"),
    ("W. Europe Standard/Daylight Time (GMT+1)", "W. Europe Standard/Daylight Time"),
    ("GTB Standard/Daylight Time (GMT+2)", "GTB Standard/Daylight Time"),
    ("Egypt Standard/Daylight Time (GMT+2)", "Egypt Standard/Daylight Time"),
    ("E. Europe Standard/Daylight Time (GMT+2)", "E. Europe Standard/Daylight Time"),
    ("Romance Standard/Daylight Time (GMT+2)", "Romance Standard/Daylight Time"),
    ("Russian Standard Time (GMT+3)", "Russian Standard Time"),
    ("Near East Standard/Daylight Time (GMT+3)", "Near East Standard/Daylight Time"),
    ("Iran Standard Time (GMT+3.5)", "Iran Standard Time"),
    ("Arabian Standard Time (GMT+4)", "Arabian Standard Time"),
    ("Caucasus Standard/Daylight Time (GMT+4)", "Caucasus Standard/Daylight Time"),
    (
        "Transitional Islamic State of Afghanistan Standard Time (GMT+4.5)",
        "Transitional Islamic State of Afghanistan Standard Time",
    ),
    ("Ekaterinburg Standard Time (GMT+5)", "Ekaterinburg Standard Time"),
    ("West Asia Standard Time (GMT+5)", "West Asia Standard Time"),
    ("India Standard Time (GMT+5.5)", "India Standard Time"),
    ("Nepal Standard Time (GMT+5.75)", "Nepal Standard Time"),
    ("Central Asia Standard Time (GMT+6)", "Central Asia Standard Time"),
    ("Sri Lanka Standard Time (GMT+6)", "Sri Lanka Standard Time"),
    ("N. Central Asia Standard Time (GMT+6)", "N. Central Asia Standard Time"),
    ("Myanmar Standard Time (GMT+6.5)", "Myanmar Standard Time"),
    ("SE Asia Standard Time (GMT+7)", "SE Asia Standard Time"),
    ("North Asia Standard Time (GMT+7)", "North Asia Standard Time"),
    ("China Standard/Daylight Time (GMT+8)", "China Standard/Daylight Time"),
    ("Singapore Standard Time (GMT+8)", "Singapore Standard Time"),
    ("Taipei Standard Time (GMT+8)", "Taipei Standard Time"),
    ("W. Australia Standard Time (GMT+8)", "W. Australia Standard Time"),
    ("North Asia East Standard Time (GMT+8)", "North Asia East Standard Time"),
    ("Korea Standard Time (GMT+9)", "Korea Standard Time"),
    ("Tokyo Standard Time (GMT+9)", "Tokyo Standard Time"),
    ("Yakutsk Standard Time (GMT+9)", "Yakutsk Standard Time"),
    ("Aus Central Standard Time (GMT+9.5)", "Aus Central Standard Time"),
    (
        "Cen. Australia Standard/Daylight Time (GMT+9.5)",
        "Cen. Australia Standard/Daylight Time",
    ),
    ("Aus Eastern Standard/Daylight Time (GMT+10)", "Aus Eastern Standard/Daylight Time"),
    ("E. Australia Standard Time (GMT+10)", "E. Australia Standard Time"),
    ("Vladivostok Standard Time (GMT+10)", "Vladivostok Standard Time"),
    ("Tasmania Standard/Daylight Time (GMT+10)", "Tasmania Standard/Daylight Time"),
    ("Central Pacific Standard Time (GMT+11)", "Central Pacific Standard Time"),
]
TIMEZONES = tuple(Option(label, value) for label, value in _TIMEZONES)
DEFAULT_TIMEZONE_INDEX = 4  # Pacific

BUTTON_TYPES = _pairs(["Disabled", "Line", "SpeedDial", "BLF"], ["0", "1", "2", "3"])

USER_LOCALES = _pairs(
    [
        "US (English)",
        "UK (English)",
        "France (French)",
        "Germany (German)",
        "Spain (Spanish)",
    ],
    ["United_States", "United_Kingdom", "France", "Germany", "Spain"],
)

NETWORK_LOCALES = _pairs(
    ["United States", "United Kingdom", "France", "Germany", "Spain"],
    ["United_States", "United_Kingdom", "France", "Germany", "Spain"],
)

BLUETOOTH_PROFILES = _pairs(
    ["Handsfree Only", "Headset Only", "Both"],
    ["Handsfree", "Headset", "Handsfree,Headset"],
)

DND_ALERTS = _pairs(
    ["None", "Flash Screen", "Beep", "Flash & Beep"],
    ["0", "5", "1", "2"],
)

PC_VLAN_MODES = _pairs(
    ["Native / Untagged", "Tag with Voice VLAN", "Tag with Specific VLAN"],
    ["0", "1", "2"],
)
PC_VLAN_SPECIFIC_INDEX = 2
