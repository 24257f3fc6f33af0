"""Text helpers for terminal output."""

import re

# This regex covers most emoji ranges (BMP and SMP)
_EMOJI_PATTERN = re.compile(
    "["
    "\U0001f600-\U0001f64f"  # emoticons
    "\U0001f300-\U0001f5ff"  # symbols & pictographs
    "\U0001f680-\U0001f6ff"  # transport & map symbols
    "\U0001f1e0-\U0001f1ff"  # flags (iOS)
    "\U00002700-\U000027bf"  # Dingbats
    "\U0001f900-\U0001f9ff"  # Supplemental Symbols and Pictographs
    "\U00002600-\U000026ff"  # Misc symbols
    "\U0001fa70-\U0001faff"  # Symbols and Pictographs Extended-A
    "\U000025a0-\U000025ff"  # Geometric Shapes
    "\U0000fe0f"  # variation selector left behind by stripped emoji
    "]+",
    flags=re.UNICODE,
)


def strip_emojis(text: str) -> str:
    """
    Remove all emoji characters from a string.

    Examples:
        >>> strip_emojis("✅ Saved")
        ' Saved'
        >>> strip_emojis("No emojis here")
        'No emojis here'
    """
    return _EMOJI_PATTERN.sub("", text)


def emoji_text(text: str, use_emojis: bool) -> str:
    """Return ``text`` unchanged, or emoji-free when emojis are disabled."""
    return text if use_emojis else strip_emojis(text)
