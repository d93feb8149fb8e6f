"""
Management command to fill missing channel and season price modifiers
from their names for existing data.
"""

from django.core.management.base import BaseCommand
from hotel_pricing.models import Channel, Season
from hotel_pricing.services.defaults import (
    default_channel_modifier_percent,
    default_season_modifier_percent,
)


class Command(BaseCommand):
    help = 'Fill empty price modifier percentages on channels and seasons from their names'
    
    def handle(self, *args, **options):
        channels = Channel.objects.filter(price_modifier_percent__isnull=True)
        seasons = Season.objects.filter(price_modifier_percent__isnull=True)
        
        self.stdout.write(f"Found {channels.count()} channels and {seasons.count()} seasons without modifiers")
        
        channel_count = 0
        for channel in channels:
            percent = default_channel_modifier_percent(channel.name)
            # update() skips the pre_save signal
            Channel.objects.filter(pk=channel.pk).update(price_modifier_percent=percent)
            channel_count += 1
            self.stdout.write(f"  Channel: {channel.name} → {percent}%")
        
        season_count = 0
        for season in seasons:
            percent = default_season_modifier_percent(season.name)
            Season.objects.filter(pk=season.pk).update(price_modifier_percent=percent)
            season_count += 1
            self.stdout.write(f"  Season: {season.name} → {percent}%")
        
        self.stdout.write(self.style.SUCCESS(
            f"\n✓ Complete!"
            f"\n  Channels updated: {channel_count}"
            f"\n  Seasons updated: {season_count}"
        ))
