"""
Integration tests for the management commands.
"""
import pytest
from datetime import date
from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError

from hotel_pricing.models import Channel, Season


@pytest.mark.django_db
class TestQuotePriceCommand:

    def test_prints_breakdown(self, standard_room, booking_channel, meal_plans, peak_season):
        out = StringIO()
        call_command(
            'quote_price',
            room_type=standard_room.id,
            channel=booking_channel.id,
            date='2026-12-24',
            meal_plan='BB',
            stdout=out,
        )
        output = out.getvalue()
        assert 'Standard Room via Booking.com' in output
        assert 'FINAL PRICE' in output
        assert 'Final price: 151.80 USD' in output

    def test_adjustment(self, suite):
        out = StringIO()
        call_command(
            'quote_price',
            room_type=suite.id,
            adjustment_type='percentage',
            adjustment_value='-5',
            stdout=out,
        )
        assert 'Final price: 285.00 USD' in out.getvalue()

    def test_adjustment_needs_both_options(self, suite):
        with pytest.raises(CommandError, match='must be given together'):
            call_command('quote_price', room_type=suite.id, adjustment_type='fixed', stdout=StringIO())

    def test_unknown_room_type(self, db):
        with pytest.raises(CommandError, match='not found'):
            call_command('quote_price', room_type=999, stdout=StringIO())

    def test_invalid_date(self, suite):
        with pytest.raises(CommandError, match='Invalid date'):
            call_command('quote_price', room_type=suite.id, date='soon', stdout=StringIO())

    def test_partial_date(self, suite):
        with pytest.raises(CommandError, match='Invalid date: 2026'):
            call_command('quote_price', room_type=suite.id, date='2026', stdout=StringIO())

    def test_oversized_adjustment(self, suite):
        with pytest.raises(CommandError, match='out of range'):
            call_command(
                'quote_price', room_type=suite.id,
                adjustment_type='fixed', adjustment_value='1e27', stdout=StringIO()
            )

    def test_inactive_meal_plan(self, suite, meal_plans):
        with pytest.raises(CommandError, match='Cannot quote price: Meal plan AI is not active.'):
            call_command('quote_price', room_type=suite.id, meal_plan='AI', stdout=StringIO())


@pytest.mark.django_db
class TestBackfillPriceModifiersCommand:

    def test_fills_missing_modifiers(self):
        agoda = Channel.objects.create(name='Agoda', price_modifier_percent=Decimal('1'))
        walk_in = Channel.objects.create(name='Walk-in', price_modifier_percent=Decimal('1'))
        low = Season.objects.create(
            name='Low Season', start_date=date(2026, 5, 1), end_date=date(2026, 9, 30),
            price_modifier_percent=Decimal('1')
        )
        # Rows written before the signal existed
        Channel.objects.filter(pk__in=[agoda.pk, walk_in.pk]).update(price_modifier_percent=None)
        Season.objects.filter(pk=low.pk).update(price_modifier_percent=None)

        out = StringIO()
        call_command('backfill_price_modifiers', stdout=out)

        agoda.refresh_from_db()
        walk_in.refresh_from_db()
        low.refresh_from_db()
        assert agoda.price_modifier_percent == Decimal('8.00')
        assert walk_in.price_modifier_percent == Decimal('0.00')
        assert low.price_modifier_percent == Decimal('-10.00')

        output = out.getvalue()
        assert 'Channels updated: 2' in output
        assert 'Seasons updated: 1' in output

    def test_keeps_existing_modifiers(self, booking_channel):
        Channel.objects.filter(pk=booking_channel.pk).update(price_modifier_percent=Decimal('3.00'))

        out = StringIO()
        call_command('backfill_price_modifiers', stdout=out)

        booking_channel.refresh_from_db()
        assert booking_channel.price_modifier_percent == Decimal('3.00')
        assert 'Channels updated: 0' in out.getvalue()
