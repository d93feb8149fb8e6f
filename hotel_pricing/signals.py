"""
Signal handlers for defaulting channel and season price modifiers.
"""

import logging

from django.db.models.signals import pre_save
from django.dispatch import receiver

from .models import Channel, Season
from .services.defaults import default_channel_modifier_percent, default_season_modifier_percent

logger = logging.getLogger(__name__)


@receiver(pre_save, sender=Channel)
def default_channel_modifier(sender, instance, **kwargs):
    """
    When a channel is saved without a price modifier, derive one
    from its name (e.g., Booking.com → 10%).
    """
    if instance.price_modifier_percent is None:
        instance.price_modifier_percent = default_channel_modifier_percent(instance.name)
        logger.debug("Defaulted channel %r modifier to %s%%", instance.name, instance.price_modifier_percent)


@receiver(pre_save, sender=Season)
def default_season_modifier(sender, instance, **kwargs):
    """
    When a season is saved without a price modifier, derive one
    from its name (e.g., Peak Season → 20%, Low Season → -10%).
    """
    if instance.price_modifier_percent is None:
        instance.price_modifier_percent = default_season_modifier_percent(instance.name)
        logger.debug("Defaulted season %r modifier to %s%%", instance.name, instance.price_modifier_percent)
