from .transaction import ReentrancyGuard
from .converter import (
    ColorConverter,
    ConversionResult,
    UsedModels,
    DERIVATION_ROUTES,
    ALPHA_ROUTES,
    CONSTRUCTOR_PRIORITY,
)

__all__ = [
    "ColorConverter",
    "ConversionResult",
    "UsedModels",
    "ReentrancyGuard",
    "DERIVATION_ROUTES",
    "ALPHA_ROUTES",
    "CONSTRUCTOR_PRIORITY",
]
