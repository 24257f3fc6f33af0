from .ui import (
    PREVIEW_CHOICE_KEY,
    QUIT_CHOICE_KEY,
    REVIEW_CHOICE_KEY,
    SAVE_CHOICE_KEY,
    build_menu_choices,
    default_formatter,
    edit_field,
    field_title,
    prompt_option_index,
    prompt_text_value,
)

__all__ = [
    "PREVIEW_CHOICE_KEY",
    "QUIT_CHOICE_KEY",
    "REVIEW_CHOICE_KEY",
    "SAVE_CHOICE_KEY",
    "build_menu_choices",
    "default_formatter",
    "edit_field",
    "field_title",
    "prompt_option_index",
    "prompt_text_value",
]
