"""
Hotel pricing models package.

Re-exports all models so Django migrations and existing imports
continue to work unchanged:
    from hotel_pricing.models import Season, RoomType, etc.
"""

# Rooms: view types, room types, meal plans, stay types
from .rooms import (
    ViewType,
    RoomType,
    MealPlan,
    StayType,
)

# Pricing: channels, seasons and their room-type rules
from .pricing import (
    MODIFIER_TYPE_CHOICES,
    Channel,
    Season,
    ChannelPricing,
    SeasonalPricing,
)

__all__ = [
    # Rooms
    'ViewType', 'RoomType', 'MealPlan', 'StayType',
    # Pricing
    'MODIFIER_TYPE_CHOICES', 'Channel', 'Season', 'ChannelPricing', 'SeasonalPricing',
]
