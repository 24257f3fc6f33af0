from sepgen.utils.text_utils import emoji_text, strip_emojis


def test_strip_emojis():
    assert strip_emojis("✅ SUCCESS") == " SUCCESS"
    assert strip_emojis("⚠️ warning") == " warning"
    assert strip_emojis("plain text") == "plain text"


def test_emoji_text_respects_setting():
    assert emoji_text("💾 Save", True) == "💾 Save"
    assert emoji_text("💾 Save", False) == " Save"
