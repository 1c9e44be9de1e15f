from .trend import (
    DEFAULT_TREND_CONFIG,
    TrendConfig,
    TrendDirection,
    TrendPoint,
    TrendResult,
    get_trend,
    split_thirds,
)

__all__ = [
    "DEFAULT_TREND_CONFIG",
    "TrendConfig",
    "TrendDirection",
    "TrendPoint",
    "TrendResult",
    "get_trend",
    "split_thirds",
]
