"""Pricing URL patterns: quotes, channel grid, modifier summaries."""

from django.urls import path
from hotel_pricing.views import (
    PriceQuoteView,
    StayQuoteView,
    ChannelGridView,
    channel_summary_ajax,
    season_summary_ajax,
    stay_type_summary_ajax,
)

urlpatterns = [
    # Quotes
    path('api/pricing/quote/',
         PriceQuoteView.as_view(), name='price_quote'),
    path('api/pricing/stay-quote/',
         StayQuoteView.as_view(), name='stay_quote'),

    # Channel grid
    path('api/pricing/grid/',
         ChannelGridView.as_view(), name='channel_grid'),

    # Display summaries
    path('api/pricing/channels/<int:channel_id>/summary/',
         channel_summary_ajax, name='channel_summary'),
    path('api/pricing/seasons/<int:season_id>/summary/',
         season_summary_ajax, name='season_summary'),
    path('api/pricing/stay-types/summary/',
         stay_type_summary_ajax, name='stay_type_summary'),
]
