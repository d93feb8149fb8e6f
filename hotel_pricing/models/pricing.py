"""
Pricing models: Channel, Season, ChannelPricing, SeasonalPricing.
"""

from django.db import models
from decimal import Decimal

from .rooms import RoomType

MODIFIER_TYPE_CHOICES = [
    ('percentage', 'Percentage (%)'),
    ('fixed', 'Fixed Amount ($)'),
]


class Channel(models.Model):
    """
    Booking channel with a blanket price modifier.

    price_modifier_percent is filled from the channel name when left
    empty (Booking.com +10%, Expedia +12%, direct channels 0%).
    """
    STATUS_CHOICES = [
        ('active', 'Active'),
        ('inactive', 'Inactive'),
    ]

    name = models.CharField(max_length=100, unique=True, help_text="e.g., Booking.com, Direct, Travel Agent")
    type = models.CharField(max_length=50, blank=True, default='', help_text="e.g., OTA, DIRECT, WEB, TA")
    contact_person = models.CharField(max_length=100, blank=True, default='')
    status = models.CharField(max_length=20, choices=STATUS_CHOICES, default='active')
    price_modifier_percent = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Percentage applied to every price sold through this channel"
    )
    sort_order = models.PositiveIntegerField(default=0, help_text="Display order")

    class Meta:
        ordering = ['sort_order', 'name']
        verbose_name = "Channel"
        verbose_name_plural = "Channels"

    def __str__(self):
        return self.name

    @property
    def effective_modifier_percent(self):
        return self.price_modifier_percent if self.price_modifier_percent is not None else Decimal('0.00')

    def to_snapshot(self):
        return {
            'id': self.id,
            'name': self.name,
            'status': self.status,
            'price_modifier_percent': self.effective_modifier_percent,
        }


class Season(models.Model):
    """
    Pricing season with an inclusive date range.

    Example:
        Peak Season: Dec 15 - Jan 10, +20%
        Low Season: May 1 - Sep 30, -10%
    """
    name = models.CharField(max_length=100, help_text="e.g., Low Season, Peak Season")
    start_date = models.DateField()
    end_date = models.DateField(help_text="Inclusive")
    price_modifier_percent = models.DecimalField(
        max_digits=6,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Percentage applied to prices for dates in this season"
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        ordering = ['start_date', 'name']
        verbose_name = "Season"
        verbose_name_plural = "Seasons"

    def __str__(self):
        return f"{self.name} ({self.start_date.strftime('%b %d')} - {self.end_date.strftime('%b %d')})"

    def clean(self):
        """Validate that end_date is not before start_date."""
        from hotel_pricing.exceptions import ValidationError

        if self.end_date and self.start_date and self.end_date < self.start_date:
            raise ValidationError({
                'end_date': 'End date cannot be before start date.'
            })

    def date_range_display(self):
        return f"{self.start_date.strftime('%b %d, %Y')} - {self.end_date.strftime('%b %d, %Y')}"

    def contains_date(self, check_date):
        return self.start_date <= check_date <= self.end_date

    def to_snapshot(self):
        return {
            'id': self.id,
            'name': self.name,
            'start_date': self.start_date,
            'end_date': self.end_date,
            'price_modifier_percent': self.price_modifier_percent or Decimal('0.00'),
            'is_active': self.is_active,
        }


class ChannelPricing(models.Model):
    """
    Room-type-specific channel rule. Replaces the channel's blanket
    percentage for that room type.
    """
    channel = models.ForeignKey(
        Channel,
        on_delete=models.CASCADE,
        related_name='pricing_rules'
    )
    room_type = models.ForeignKey(
        RoomType,
        on_delete=models.CASCADE,
        related_name='channel_pricing'
    )
    modifier_type = models.CharField(max_length=20, choices=MODIFIER_TYPE_CHOICES, default='percentage')
    modifier_value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Percent (e.g., 10 for +10%) or amount (e.g., -20 for $20 off)"
    )

    class Meta:
        ordering = ['channel', 'room_type', 'id']
        verbose_name = "Channel Pricing"
        verbose_name_plural = "Channel Pricing"

    def __str__(self):
        from hotel_pricing.services.modifier_summary import format_modifier
        return f"{self.channel.name} × {self.room_type.name}: {format_modifier(self.modifier_type, self.modifier_value)}"

    def to_snapshot(self):
        return {
            'id': self.id,
            'channel_id': self.channel_id,
            'room_type_id': self.room_type_id,
            'modifier_type': self.modifier_type,
            'modifier_value': self.modifier_value,
        }


class SeasonalPricing(models.Model):
    """
    Room-type-specific season rule. Replaces the season's blanket
    percentage for that room type.
    """
    season = models.ForeignKey(
        Season,
        on_delete=models.CASCADE,
        related_name='pricing_rules'
    )
    room_type = models.ForeignKey(
        RoomType,
        on_delete=models.CASCADE,
        related_name='seasonal_pricing'
    )
    modifier_type = models.CharField(max_length=20, choices=MODIFIER_TYPE_CHOICES, default='percentage')
    modifier_value = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Percent (e.g., 15 for +15%) or amount (e.g., 25 for +$25)"
    )

    class Meta:
        ordering = ['season', 'room_type', 'id']
        verbose_name = "Seasonal Pricing"
        verbose_name_plural = "Seasonal Pricing"

    def __str__(self):
        from hotel_pricing.services.modifier_summary import format_modifier
        return f"{self.season.name} × {self.room_type.name}: {format_modifier(self.modifier_type, self.modifier_value)}"

    def to_snapshot(self):
        return {
            'id': self.id,
            'season_id': self.season_id,
            'room_type_id': self.room_type_id,
            'modifier_type': self.modifier_type,
            'modifier_value': self.modifier_value,
        }
