"""Quiz-related constants shared across UI and core layers."""

OPTION_COUNT: int = 4
DISTRACTOR_COUNT: int = OPTION_COUNT - 1
MIN_POOL_SIZE: int = OPTION_COUNT
FEEDBACK_DELAY_MS: int = 2000

DEFAULT_LANGUAGE: str = "english"
SUPPORTED_LANGUAGES: tuple[str, ...] = ("english", "japanese", "hiragana")
