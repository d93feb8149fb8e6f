"""
Integration tests for PricingService against the database.

Test Scenarios:
1. Booking.com + Bed & Breakfast, no season
2. Peak season date and a seasonal room-type rule
3. Channel room-type rules replacing the blanket percentage
4. Multi-night stay crossing into a season
5. Channel grid rows and price points
"""
import pytest
from datetime import date
from decimal import Decimal

from hotel_pricing.exceptions import ValidationError
from hotel_pricing.models import ChannelPricing, Season, SeasonalPricing
from hotel_pricing.services import PricingService

CHRISTMAS_EVE = date(2026, 12, 24)


@pytest.fixture
def service():
    return PricingService()


@pytest.mark.django_db
class TestQuote:
    """Single night quotes."""

    def test_channel_and_meal_plan(self, service, standard_room, booking_channel, meal_plans):
        """(100 + 15) × 1.10 = 126.50"""
        result = service.quote(standard_room, channel=booking_channel, meal_plan=meal_plans['BB'])
        assert result['final_price'] == Decimal('126.50')
        assert result['currency'] == 'USD'
        assert result['season_id'] is None

    def test_peak_season(self, service, standard_room, booking_channel, meal_plans, peak_season):
        """(100 + 15) × 1.20 × 1.10 = 151.80"""
        result = service.quote(
            standard_room, channel=booking_channel, stay_date=CHRISTMAS_EVE, meal_plan=meal_plans['BB']
        )
        assert result['final_price'] == Decimal('151.80')
        assert result['season_id'] == peak_season.id

    def test_date_outside_season(self, service, standard_room, booking_channel, meal_plans, peak_season):
        result = service.quote(
            standard_room, channel=booking_channel, stay_date=date(2026, 11, 1), meal_plan=meal_plans['BB']
        )
        assert result['final_price'] == Decimal('126.50')

    def test_inactive_season_ignored(self, service, standard_room, peak_season):
        peak_season.is_active = False
        peak_season.save()
        result = service.quote(standard_room, stay_date=CHRISTMAS_EVE)
        assert result['final_price'] == Decimal('100.00')

    def test_seasonal_rule_replaces_percentage(self, service, standard_room, booking_channel,
                                               meal_plans, peak_season):
        """(100 + 15 + 25) × 1.10 = 154.00"""
        SeasonalPricing.objects.create(
            season=peak_season, room_type=standard_room,
            modifier_type='fixed', modifier_value=Decimal('25.00')
        )
        result = service.quote(
            standard_room, channel=booking_channel, stay_date=CHRISTMAS_EVE, meal_plan=meal_plans['BB']
        )
        assert result['final_price'] == Decimal('154.00')
        assert result['season_rule_applied'] is True

    def test_overlapping_seasons_latest_start_wins(self, service, standard_room, peak_season):
        christmas = Season.objects.create(
            name='Christmas Week', start_date=date(2026, 12, 22), end_date=date(2026, 12, 28),
            price_modifier_percent=Decimal('30.00')
        )
        result = service.quote(standard_room, stay_date=CHRISTMAS_EVE)
        assert result['season_id'] == christmas.id
        assert result['final_price'] == Decimal('130.00')

    def test_channel_rule_replaces_percentage(self, service, suite, booking_channel):
        """Suite rule +5% instead of Booking.com +10%: 300 × 1.05 = 315.00"""
        ChannelPricing.objects.create(
            channel=booking_channel, room_type=suite,
            modifier_type='percentage', modifier_value=Decimal('5.00')
        )
        result = service.quote(suite, channel=booking_channel)
        assert result['final_price'] == Decimal('315.00')
        assert result['channel_rule_applied'] is True

    def test_latest_channel_rule_wins(self, service, suite, booking_channel):
        """Two rules for the same pair: the newest (8%) applies."""
        ChannelPricing.objects.create(
            channel=booking_channel, room_type=suite, modifier_value=Decimal('5.00')
        )
        ChannelPricing.objects.create(
            channel=booking_channel, room_type=suite, modifier_value=Decimal('8.00')
        )
        result = service.quote(suite, channel=booking_channel)
        assert result['final_price'] == Decimal('324.00')

    def test_channel_rule_for_other_room_ignored(self, service, standard_room, suite, booking_channel):
        ChannelPricing.objects.create(
            channel=booking_channel, room_type=suite,
            modifier_type='fixed', modifier_value=Decimal('-50.00')
        )
        result = service.quote(standard_room, channel=booking_channel)
        assert result['final_price'] == Decimal('110.00')

    def test_stay_type(self, service, standard_room, booking_channel, meal_plans, stay_types):
        """(100 × 0.5 + 15) × 1.10 = 71.50"""
        result = service.quote(
            standard_room, channel=booking_channel,
            meal_plan=meal_plans['BB'], stay_type=stay_types['day_use']
        )
        assert result['final_price'] == Decimal('71.50')

    def test_adjustment(self, service, suite, direct_channel):
        """Suite $300, -5% promotion, direct = 285.00"""
        result = service.quote(suite, channel=direct_channel, adjustment={'type': 'percentage', 'value': -5})
        assert result['final_price'] == Decimal('285.00')

    def test_clamped_quote_is_logged(self, service, standard_room, caplog):
        with caplog.at_level('WARNING', logger='hotel_pricing'):
            result = service.quote(standard_room, adjustment={'type': 'fixed', 'value': -500})
        assert result['final_price'] == Decimal('0.00')
        assert result['clamped'] is True
        assert 'clamped to zero' in caplog.text

    def test_inactive_meal_plan_rejected(self, service, standard_room, meal_plans):
        with pytest.raises(ValidationError):
            service.quote(standard_room, meal_plan=meal_plans['AI'])

    def test_currency_from_settings(self, settings, standard_room):
        settings.HOTEL_PRICING = {'CURRENCY': 'EUR'}
        assert PricingService().quote(standard_room)['currency'] == 'EUR'


@pytest.mark.django_db
class TestQuoteStay:
    """Multi-night stays."""

    def test_stay_crossing_into_season(self, service, standard_room, direct_channel, meal_plans, peak_season):
        """Dec 13-14 at 115, Dec 15-16 at 138 (peak +20%)."""
        result = service.quote_stay(
            standard_room, date(2026, 12, 13), date(2026, 12, 17),
            channel=direct_channel, meal_plan=meal_plans['BB']
        )
        prices = [night['final_price'] for night in result['nights']]
        assert prices == [Decimal('115.00'), Decimal('115.00'), Decimal('138.00'), Decimal('138.00')]
        assert result['night_count'] == 4
        assert result['total'] == Decimal('506.00')
        assert [night['stay_date'] for night in result['nights']][0] == date(2026, 12, 13)

    def test_single_night(self, service, suite):
        result = service.quote_stay(suite, date(2026, 3, 1), date(2026, 3, 2))
        assert result['night_count'] == 1
        assert result['total'] == Decimal('300.00')

    @pytest.mark.parametrize('check_out', [date(2026, 3, 1), date(2026, 2, 28)])
    def test_check_out_must_follow_check_in(self, service, suite, check_out):
        with pytest.raises(ValidationError):
            service.quote_stay(suite, date(2026, 3, 1), check_out)

    def test_dates_required(self, service, suite):
        with pytest.raises(ValidationError):
            service.quote_stay(suite, None, date(2026, 3, 2))

    def test_stay_length_capped(self, service, suite):
        """A year is the longest stay priced by default."""
        assert service.quote_stay(suite, date(2026, 1, 1), date(2027, 1, 1))['night_count'] == 365
        with pytest.raises(ValidationError) as exc_info:
            service.quote_stay(suite, date(2026, 1, 1), date(2027, 1, 2))
        assert str(exc_info.value) == 'Stays are limited to 365 nights.'

    def test_stay_cap_from_settings(self, settings, suite):
        settings.HOTEL_PRICING = {'MAX_STAY_NIGHTS': 3}
        with pytest.raises(ValidationError):
            PricingService().quote_stay(suite, date(2026, 3, 1), date(2026, 3, 5))


@pytest.mark.django_db
class TestGridData:
    """Channel grid."""

    def test_rows_and_columns(self, service, standard_room, suite, booking_channel, meal_plans):
        grid = service.get_grid_data(booking_channel)

        # 2 room types × 3 active meal plans × 2 guest types
        assert len(grid['rows']) == 12
        assert grid['columns'] == [1, 2, 3, 4, 5, 6, 7, 8]
        assert all(len(row['cells']) == 8 for row in grid['rows'])
        assert 'AI' not in {row['meal_plan_code'] for row in grid['rows']}
        assert grid['channel']['id'] == booking_channel.id

    def test_price_point_cells(self, service, standard_room, booking_channel, meal_plans):
        """Column 1: 102 + 15 = 117 × 1.10 = 128.70"""
        grid = service.get_grid_data(booking_channel)
        row = next(
            r for r in grid['rows']
            if r['room_type_id'] == standard_room.id and r['meal_plan_code'] == 'BB'
        )
        first = row['cells'][0]
        assert first['base_price'] == Decimal('102.00')
        assert first['final_price'] == Decimal('128.70')
        assert row['cells'][-1]['base_price'] == Decimal('116.00')

    def test_guest_type_does_not_change_price(self, service, standard_room, booking_channel, meal_plans):
        grid = service.get_grid_data(booking_channel)
        rows = [
            r for r in grid['rows']
            if r['room_type_id'] == standard_room.id and r['meal_plan_code'] == 'HB'
        ]
        assert [r['guest_type_code'] for r in rows] == ['AO', 'AC']
        assert rows[0]['cells'] == rows[1]['cells']

    def test_grid_uses_season_on_date(self, service, standard_room, direct_channel, meal_plans, peak_season):
        grid = service.get_grid_data(direct_channel, stay_date=CHRISTMAS_EVE)
        assert grid['season']['id'] == peak_season.id
        row = next(r for r in grid['rows'] if r['meal_plan_code'] == 'RO')
        # 102 × 1.20
        assert row['cells'][0]['final_price'] == Decimal('122.40')


@pytest.mark.django_db
class TestSummaries:
    """Display summaries through the service."""

    def test_channel_summary(self, service, standard_room, suite, booking_channel):
        ChannelPricing.objects.create(channel=booking_channel, room_type=standard_room,
                                      modifier_value=Decimal('5.00'))
        ChannelPricing.objects.create(channel=booking_channel, room_type=suite,
                                      modifier_value=Decimal('15.00'))
        summary = service.channel_modifier_summary(booking_channel)
        assert summary['display'] == '+5.0% to +15.0%'
        assert summary['blanket_percent'] == Decimal('10')

    def test_season_summary_without_rules(self, service, peak_season):
        summary = service.season_modifier_summary(peak_season)
        assert summary['display'] == '-'
        assert summary['blanket_percent'] == Decimal('20')

    def test_stay_type_summary(self, service, stay_types):
        summary = service.stay_type_summary()
        assert summary['count'] == 2
        assert summary['average_hours'] == 15
        assert summary['average_multiplier'] == Decimal('0.75')
