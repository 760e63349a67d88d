from bloglist.configs.settings import (
    CONFIG_MAP,
    HasherConfig,
    LimiterConfig,
    RetryConfig,
    file_logger,
    pool_kwargs,
    settings,
)

__all__ = [
    "CONFIG_MAP",
    "HasherConfig",
    "LimiterConfig",
    "RetryConfig",
    "file_logger",
    "pool_kwargs",
    "settings",
]
