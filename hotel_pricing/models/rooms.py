"""
Room models: ViewType, RoomType, MealPlan, StayType.
"""

from django.db import models
from decimal import Decimal
from django.core.validators import MinValueValidator, MaxValueValidator


class ViewType(models.Model):
    """
    Room view category (e.g., Sea View, Garden View).

    price_difference is informational; it is shown next to room types
    but not composed into quoted prices.
    """
    name = models.CharField(max_length=100, unique=True, help_text="e.g., Sea View, Garden View")
    price_difference = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Typical price difference vs. standard view in USD"
    )

    class Meta:
        ordering = ['name']
        verbose_name = "View Type"
        verbose_name_plural = "View Types"

    def __str__(self):
        if self.price_difference:
            return f"{self.name} (+${self.price_difference})"
        return self.name


class RoomType(models.Model):
    """
    Room category. base_price anchors every derived price.

    Example:
        Standard Room: $100, capacity 2
        Suite: $300, capacity 4
    """
    name = models.CharField(max_length=100, unique=True, help_text="e.g., Standard Room, Deluxe Room, Suite")
    description = models.TextField(blank=True, default='')
    capacity = models.PositiveIntegerField(
        default=2,
        validators=[MinValueValidator(1)],
        help_text="Maximum number of guests"
    )
    base_price = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        validators=[MinValueValidator(Decimal('0.00'))],
        help_text="Base nightly price in USD"
    )
    view_type = models.ForeignKey(
        ViewType,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='room_types'
    )
    sort_order = models.PositiveIntegerField(default=0, help_text="Display order")

    class Meta:
        ordering = ['sort_order', 'name']
        verbose_name = "Room Type"
        verbose_name_plural = "Room Types"

    def __str__(self):
        return f"{self.name} (${self.base_price})"

    def to_snapshot(self):
        return {
            'id': self.id,
            'name': self.name,
            'base_price': self.base_price,
            'capacity': self.capacity,
            'view_type_id': self.view_type_id,
        }


class MealPlan(models.Model):
    """
    Board type with a meal add-on.

    When per_room_rate is set it is used instead of per_person_rate.

    Example:
        Bed & Breakfast (BB): $15 per room
        Half Board (HB): $12 per person
    """
    name = models.CharField(max_length=100, help_text="e.g., Room Only, Bed & Breakfast")
    code = models.CharField(max_length=10, unique=True, help_text="e.g., RO, BB, HB, FB, AI")
    description = models.TextField(blank=True, default='')
    per_person_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        default=Decimal('0.00'),
        help_text="Meal cost per person in USD"
    )
    per_room_rate = models.DecimalField(
        max_digits=10,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Meal cost per room in USD (takes precedence over per person)"
    )
    is_active = models.BooleanField(default=True)
    sort_order = models.PositiveIntegerField(default=0, help_text="Display order")

    class Meta:
        ordering = ['sort_order', 'code']
        verbose_name = "Meal Plan"
        verbose_name_plural = "Meal Plans"

    def __str__(self):
        return f"{self.name} ({self.code})"

    def addon_display(self):
        if self.per_room_rate is not None:
            return f"+${self.per_room_rate}/room"
        if self.per_person_rate:
            return f"+${self.per_person_rate}/person"
        return "No add-on"

    def to_snapshot(self):
        return {
            'id': self.id,
            'code': self.code,
            'name': self.name,
            'per_person_rate': self.per_person_rate,
            'per_room_rate': self.per_room_rate,
            'is_active': self.is_active,
        }


class StayType(models.Model):
    """
    Duration-based stay (e.g., Day Use, Overnight, Extended Stay).

    rate_multiplier scales the base nightly price: 0.5 for a 6-hour
    day use, 1.0 for a standard night.
    """
    name = models.CharField(max_length=100, unique=True)
    hours = models.PositiveIntegerField(null=True, blank=True, validators=[MinValueValidator(1)])
    rate_multiplier = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        default=Decimal('1.00'),
        validators=[MinValueValidator(Decimal('0.01')), MaxValueValidator(Decimal('10.00'))],
        help_text="Multiplier applied to the base nightly price (typically 0.1 - 2.0)"
    )
    description = models.TextField(blank=True, default='')

    class Meta:
        ordering = ['name']
        verbose_name = "Stay Type"
        verbose_name_plural = "Stay Types"

    def __str__(self):
        return f"{self.name} (×{self.rate_multiplier})"

    def to_snapshot(self):
        return {
            'id': self.id,
            'name': self.name,
            'hours': self.hours,
            'rate_multiplier': self.rate_multiplier,
        }
