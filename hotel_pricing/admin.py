"""
Hotel pricing admin configuration.

Supports:
- Room data (ViewType, RoomType, MealPlan, StayType)
- Channels and seasons with their room-type pricing rules
- "Price Modifier" summary columns for channels and seasons
"""

from django.contrib import admin
from django.urls import reverse
from django.utils.html import format_html

from .models import (
    ViewType, RoomType, MealPlan, StayType,
    Channel, Season, ChannelPricing, SeasonalPricing,
)
from .services.modifier_summary import format_modifier, summarize_modifiers


def _signed_percent(value):
    if value is None:
        return '-'
    return f"+{value}%" if value > 0 else f"{value}%"


# =============================================================================
# ROOM DATA
# =============================================================================

@admin.register(ViewType)
class ViewTypeAdmin(admin.ModelAdmin):
    list_display = ['name', 'price_difference', 'room_type_count']
    search_fields = ['name']
    ordering = ['name']

    def room_type_count(self, obj):
        """Show count of room types with this view."""
        count = obj.room_types.count()
        if count > 0:
            url = reverse('admin:hotel_pricing_roomtype_changelist') + f'?view_type__id__exact={obj.id}'
            return format_html('<a href="{}">{} room types</a>', url, count)
        return '0'
    room_type_count.short_description = 'Room Types'


class RoomChannelPricingInline(admin.TabularInline):
    """Channel rules within a room type."""
    model = ChannelPricing
    extra = 0
    fields = ['channel', 'modifier_type', 'modifier_value']


class RoomSeasonalPricingInline(admin.TabularInline):
    """Seasonal rules within a room type."""
    model = SeasonalPricing
    extra = 0
    fields = ['season', 'modifier_type', 'modifier_value']


class ChannelPricingInline(admin.TabularInline):
    """Room-type rules within a channel."""
    model = ChannelPricing
    extra = 0
    fields = ['room_type', 'modifier_type', 'modifier_value']


class SeasonalPricingInline(admin.TabularInline):
    """Room-type rules within a season."""
    model = SeasonalPricing
    extra = 0
    fields = ['room_type', 'modifier_type', 'modifier_value']


@admin.register(RoomType)
class RoomTypeAdmin(admin.ModelAdmin):
    list_display = ['name', 'base_price', 'capacity', 'view_type', 'sort_order', 'rule_count']
    list_editable = ['base_price', 'sort_order']
    list_filter = ['view_type']
    search_fields = ['name']
    ordering = ['sort_order', 'name']

    fieldsets = (
        (None, {
            'fields': ('name', 'description', 'capacity', 'view_type', 'sort_order')
        }),
        ('Pricing', {
            'fields': ('base_price',),
            'description': 'Base nightly price. Meal plans, seasons, stay types and channels adjust it.'
        }),
    )

    inlines = [RoomChannelPricingInline, RoomSeasonalPricingInline]

    def rule_count(self, obj):
        """Show count of room-type-specific rules."""
        return f"{obj.channel_pricing.count()} channel / {obj.seasonal_pricing.count()} seasonal"
    rule_count.short_description = 'Pricing Rules'


@admin.register(MealPlan)
class MealPlanAdmin(admin.ModelAdmin):
    list_display = ['code', 'name', 'per_person_rate', 'per_room_rate', 'addon_display', 'is_active', 'sort_order']
    list_editable = ['is_active', 'sort_order']
    list_filter = ['is_active']
    ordering = ['sort_order', 'code']

    def addon_display(self, obj):
        """Show the add-on actually used in prices."""
        return obj.addon_display()
    addon_display.short_description = 'Applied Add-on'


@admin.register(StayType)
class StayTypeAdmin(admin.ModelAdmin):
    list_display = ['name', 'hours', 'rate_multiplier', 'multiplier_display']
    list_editable = ['rate_multiplier']
    ordering = ['name']

    def multiplier_display(self, obj):
        return f"×{obj.rate_multiplier}"
    multiplier_display.short_description = 'Multiplier'


# =============================================================================
# CHANNELS & SEASONS
# =============================================================================

@admin.register(Channel)
class ChannelAdmin(admin.ModelAdmin):
    list_display = [
        'name', 'type', 'status', 'price_modifier_percent',
        'price_modifier_display', 'sort_order'
    ]
    list_editable = ['price_modifier_percent', 'sort_order']
    list_filter = ['status', 'type']
    search_fields = ['name', 'contact_person']
    ordering = ['sort_order', 'name']

    fieldsets = (
        (None, {
            'fields': ('name', 'type', 'contact_person', 'status', 'sort_order')
        }),
        ('Pricing', {
            'fields': ('price_modifier_percent',),
            'description': 'Leave empty to derive the percentage from the channel name.'
        }),
    )

    inlines = [ChannelPricingInline]

    def price_modifier_display(self, obj):
        """Summary of room-type rules, or the blanket percentage."""
        summary = summarize_modifiers(obj.pricing_rules.all())
        if summary['kind'] is None:
            return _signed_percent(obj.price_modifier_percent)
        return summary['display']
    price_modifier_display.short_description = 'Price Modifier'


@admin.register(Season)
class SeasonAdmin(admin.ModelAdmin):
    list_display = [
        'name', 'start_date', 'end_date', 'price_modifier_percent',
        'price_modifier_display', 'is_active'
    ]
    list_editable = ['price_modifier_percent', 'is_active']
    list_filter = ['is_active']
    search_fields = ['name']
    ordering = ['start_date']

    fieldsets = (
        (None, {
            'fields': ('name', 'is_active')
        }),
        ('Date Range', {
            'fields': ('start_date', 'end_date')
        }),
        ('Pricing', {
            'fields': ('price_modifier_percent',),
            'description': 'Leave empty to derive the percentage from the season name.'
        }),
    )

    inlines = [SeasonalPricingInline]

    def price_modifier_display(self, obj):
        """Summary of room-type rules, or the blanket percentage."""
        summary = summarize_modifiers(obj.pricing_rules.all())
        if summary['kind'] is None:
            return _signed_percent(obj.price_modifier_percent)
        return summary['display']
    price_modifier_display.short_description = 'Price Modifier'


@admin.register(ChannelPricing)
class ChannelPricingAdmin(admin.ModelAdmin):
    list_display = ['channel', 'room_type', 'modifier_type', 'modifier_display']
    list_filter = ['channel', 'room_type', 'modifier_type']
    ordering = ['channel', 'room_type']

    def modifier_display(self, obj):
        return format_modifier(obj.modifier_type, obj.modifier_value)
    modifier_display.short_description = 'Modifier'


@admin.register(SeasonalPricing)
class SeasonalPricingAdmin(admin.ModelAdmin):
    list_display = ['season', 'room_type', 'modifier_type', 'modifier_display']
    list_filter = ['season', 'room_type', 'modifier_type']
    ordering = ['season', 'room_type']

    def modifier_display(self, obj):
        return format_modifier(obj.modifier_type, obj.modifier_value)
    modifier_display.short_description = 'Modifier'
