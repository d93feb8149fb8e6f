"""
Views package.

Re-exports all views so URL imports work unchanged:
    from hotel_pricing.views import PriceQuoteView, etc.
"""

# Mixins
from .mixins import PricingApiMixin

# Pricing views
from .quotes import (
    PriceQuoteView,
    StayQuoteView,
    ChannelGridView,
    channel_summary_ajax,
    season_summary_ajax,
    stay_type_summary_ajax,
)
