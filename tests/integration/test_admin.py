"""
Integration tests for the admin price modifier columns.
"""
import pytest
from datetime import date
from decimal import Decimal

from django.contrib.admin.sites import site
from django.urls import reverse

from hotel_pricing.models import Channel, ChannelPricing, Season


@pytest.mark.django_db
class TestPriceModifierColumns:

    def test_channel_without_rules_shows_percentage(self, booking_channel):
        channel = Channel.objects.get(pk=booking_channel.pk)
        assert site._registry[Channel].price_modifier_display(channel) == '+10.00%'

    def test_channel_with_rules_shows_range(self, standard_room, suite, booking_channel):
        ChannelPricing.objects.create(channel=booking_channel, room_type=standard_room,
                                      modifier_value=Decimal('5.00'))
        ChannelPricing.objects.create(channel=booking_channel, room_type=suite,
                                      modifier_value=Decimal('15.00'))
        assert site._registry[Channel].price_modifier_display(booking_channel) == '+5.0% to +15.0%'

    def test_season_negative_percentage(self):
        season = Season.objects.create(
            name='Low Season', start_date=date(2026, 5, 1), end_date=date(2026, 9, 30)
        )
        season = Season.objects.get(pk=season.pk)
        assert site._registry[Season].price_modifier_display(season) == '-10.00%'


@pytest.mark.django_db
class TestChangelists:

    @pytest.mark.parametrize('model_name', [
        'roomtype', 'mealplan', 'staytype', 'viewtype',
        'channel', 'season', 'channelpricing', 'seasonalpricing',
    ])
    def test_changelist_renders(self, admin_client, standard_room, booking_channel,
                                peak_season, meal_plans, stay_types, model_name):
        ChannelPricing.objects.create(channel=booking_channel, room_type=standard_room,
                                      modifier_value=Decimal('5.00'))
        response = admin_client.get(reverse(f'admin:hotel_pricing_{model_name}_changelist'))
        assert response.status_code == 200

    def test_room_type_change_page_has_inlines(self, admin_client, standard_room):
        response = admin_client.get(reverse('admin:hotel_pricing_roomtype_change', args=[standard_room.id]))
        assert response.status_code == 200
