from bloglist.configs.settings import (
    CONFIG_MAP,
    MIN_PASSWORD_LENGTH,
    MIN_USERNAME_LENGTH,
    LimiterConfig,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "LimiterConfig",
    "MIN_PASSWORD_LENGTH",
    "MIN_USERNAME_LENGTH",
    "settings",
]
