"""
Services package.

Re-exports the pricing API so callers can write:
    from hotel_pricing.services import PricingService, compute_price
"""

from .pricing_engine import (
    compute_price,
    compute_price_breakdown,
    resolve_quote,
    format_breakdown,
)
from .modifier_summary import summarize_modifiers, summarize_stay_types
from .pricing_service import PricingService

__all__ = [
    'PricingService',
    'compute_price',
    'compute_price_breakdown',
    'resolve_quote',
    'format_breakdown',
    'summarize_modifiers',
    'summarize_stay_types',
]
