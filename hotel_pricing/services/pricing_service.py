"""
Pricing Service
===============

Reads entities from the database, turns them into plain snapshots and
hands them to the pure engine in pricing_engine.py.

    from hotel_pricing.services import PricingService

    service = PricingService()
    result = service.quote(
        room_type=room,
        channel=channel,
        stay_date=date(2026, 12, 24),
        meal_plan=bed_and_breakfast,
        adjustment={'type': 'percentage', 'value': -5},
    )

    print(f"Final Price: ${result['final_price']}")
"""

import logging
from datetime import date, timedelta
from decimal import Decimal

from django.conf import settings

from hotel_pricing.exceptions import ValidationError

from .modifier_summary import summarize_modifiers, summarize_stay_types
from .pricing_engine import find_season, price_points, resolve_quote, round_price

logger = logging.getLogger(__name__)

DEFAULT_GUEST_TYPES = [
    {'code': 'AO', 'name': 'Adult Only'},
    {'code': 'AC', 'name': 'Adult + Child'},
]


class PricingService:
    """
    Price quotes for room types, stays and the channel grid.

    Settings (HOTEL_PRICING):
        CURRENCY: Currency code shown with prices (default USD)
        PRICE_POINTS: Number of grid columns (default 8)
        PRICE_POINT_STEP_PERCENT: Increment between columns (default 2)
        GUEST_TYPES: Grid guest types, list of {'code', 'name'}
        MAX_STAY_NIGHTS: Longest stay quote_stay will price (default 365)
    """

    def __init__(self, currency=None, price_point_count=None, price_point_step=None, guest_types=None,
                 max_stay_nights=None):
        config = getattr(settings, 'HOTEL_PRICING', {})
        self.currency = currency or config.get('CURRENCY', 'USD')
        self.price_point_count = price_point_count or config.get('PRICE_POINTS', 8)
        self.price_point_step = price_point_step or config.get('PRICE_POINT_STEP_PERCENT', Decimal('2'))
        self.guest_types = guest_types or config.get('GUEST_TYPES', DEFAULT_GUEST_TYPES)
        self.max_stay_nights = max_stay_nights or config.get('MAX_STAY_NIGHTS', 365)

    # =========================================================================
    # SNAPSHOTS
    # =========================================================================

    def _seasons_between(self, start, end):
        """Active season snapshots overlapping [start, end]."""
        from hotel_pricing.models import Season

        return [
            season.to_snapshot()
            for season in Season.objects.filter(
                is_active=True,
                start_date__lte=end,
                end_date__gte=start,
            )
        ]

    def _season_rules(self, room_type, season_ids):
        from hotel_pricing.models import SeasonalPricing

        if not season_ids:
            return []
        return [
            rule.to_snapshot()
            for rule in SeasonalPricing.objects.filter(room_type=room_type, season_id__in=season_ids)
        ]

    def _channel_rules(self, room_type, channel):
        from hotel_pricing.models import ChannelPricing

        if channel is None:
            return []
        return [
            rule.to_snapshot()
            for rule in ChannelPricing.objects.filter(room_type=room_type, channel=channel)
        ]

    def _snapshot(self, room_type, channel, stay_date, meal_plan, stay_type, adjustment,
                  seasons, season_rules, channel_rules):
        return {
            'room_type': room_type.to_snapshot(),
            'meal_plan': meal_plan.to_snapshot() if meal_plan is not None else None,
            'channel': channel.to_snapshot() if channel is not None else None,
            'season': find_season(seasons, stay_date),
            'stay_type': stay_type.to_snapshot() if stay_type is not None else None,
            'adjustment': adjustment,
            'channel_rules': channel_rules,
            'season_rules': season_rules,
            'stay_date': stay_date,
        }

    def build_snapshot(self, room_type, channel=None, stay_date=None, meal_plan=None,
                       stay_type=None, adjustment=None):
        """
        Collect everything the engine needs for one room night.

        Args:
            room_type: RoomType instance
            channel: Channel instance or None
            stay_date: date; selects the season (None = no season)
            meal_plan: MealPlan instance or None
            stay_type: StayType instance or None
            adjustment: {'type': 'percentage'|'fixed', 'value': ...} or None

        Returns:
            dict snapshot accepted by pricing_engine.resolve_quote
        """
        seasons = self._seasons_between(stay_date, stay_date) if stay_date else []
        return self._snapshot(
            room_type, channel, stay_date, meal_plan, stay_type, adjustment,
            seasons=seasons,
            season_rules=self._season_rules(room_type, [s['id'] for s in seasons]),
            channel_rules=self._channel_rules(room_type, channel),
        )

    # =========================================================================
    # QUOTES
    # =========================================================================

    def quote(self, room_type, channel=None, stay_date=None, meal_plan=None,
              stay_type=None, adjustment=None):
        """
        Price one room night.

        Returns:
            dict breakdown from resolve_quote with 'currency' added
        """
        snapshot = self.build_snapshot(
            room_type, channel=channel, stay_date=stay_date,
            meal_plan=meal_plan, stay_type=stay_type, adjustment=adjustment,
        )
        result = resolve_quote(snapshot)
        result['currency'] = self.currency

        if result['clamped']:
            logger.warning(
                "Price for room type %s clamped to zero (before clamp: %s)",
                room_type.pk, result['after_channel']
            )
        logger.debug("Quoted room type %s on %s: %s", room_type.pk, stay_date, result['final_price'])
        return result

    def quote_stay(self, room_type, check_in, check_out, channel=None, meal_plan=None,
                   stay_type=None, adjustment=None):
        """
        Price every night of a stay. Each night gets its own season.

        Args:
            check_in: date of arrival
            check_out: date of departure (exclusive, must be after check_in
                and at most max_stay_nights later)

        Returns:
            dict with nights (list of breakdowns), night_count and total
        """
        if not isinstance(check_in, date) or not isinstance(check_out, date):
            raise ValidationError("Check-in and check-out must be dates.", code='invalid')
        if check_out <= check_in:
            raise ValidationError("Check-out must be after check-in.", code='invalid_date_range')
        if (check_out - check_in).days > self.max_stay_nights:
            raise ValidationError(
                f"Stays are limited to {self.max_stay_nights} nights.", code='stay_too_long'
            )

        last_night = check_out - timedelta(days=1)
        seasons = self._seasons_between(check_in, last_night)
        season_rules = self._season_rules(room_type, [s['id'] for s in seasons])
        channel_rules = self._channel_rules(room_type, channel)

        nights = []
        current = check_in
        while current < check_out:
            snapshot = self._snapshot(
                room_type, channel, current, meal_plan, stay_type, adjustment,
                seasons=seasons, season_rules=season_rules, channel_rules=channel_rules,
            )
            nights.append(resolve_quote(snapshot))
            current += timedelta(days=1)

        total = sum((night['final_price'] for night in nights), Decimal('0.00'))
        logger.info(
            "Quoted %d night stay for room type %s: %s %s",
            len(nights), room_type.pk, total, self.currency
        )
        return {
            'room_type_id': room_type.pk,
            'check_in': check_in,
            'check_out': check_out,
            'night_count': len(nights),
            'nights': nights,
            'total': round_price(total),
            'currency': self.currency,
        }

    # =========================================================================
    # CHANNEL GRID
    # =========================================================================

    def get_grid_data(self, channel, stay_date=None, adjustment=None):
        """
        Price grid for one channel.

        Rows are every room type × active meal plan × guest type; columns
        are price points stepping up from the room type's base price.

        Returns:
            dict with columns, rows and the channel snapshot
        """
        from hotel_pricing.models import RoomType, MealPlan

        room_types = list(RoomType.objects.all())
        meal_plans = list(MealPlan.objects.filter(is_active=True))
        seasons = self._seasons_between(stay_date, stay_date) if stay_date else []
        season_ids = [s['id'] for s in seasons]

        columns = list(range(1, self.price_point_count + 1))
        rows = []

        for room_type in room_types:
            season_rules = self._season_rules(room_type, season_ids)
            channel_rules = self._channel_rules(room_type, channel)
            points = price_points(room_type.base_price, self.price_point_count, self.price_point_step)

            for meal_plan in meal_plans:
                snapshot = self._snapshot(
                    room_type, channel, stay_date, meal_plan, None, adjustment,
                    seasons=seasons, season_rules=season_rules, channel_rules=channel_rules,
                )
                cells = []
                for column, point in zip(columns, points):
                    priced = dict(snapshot, room_type=dict(snapshot['room_type'], base_price=point))
                    result = resolve_quote(priced)
                    cells.append({
                        'column': column,
                        'base_price': round_price(point),
                        'final_price': result['final_price'],
                    })

                # Guest type is a row label; it does not change the price
                for guest_type in self.guest_types:
                    rows.append({
                        'room_type_id': room_type.pk,
                        'room_type_name': room_type.name,
                        'meal_plan_code': meal_plan.code,
                        'meal_plan_name': meal_plan.name,
                        'guest_type_code': guest_type['code'],
                        'guest_type_name': guest_type['name'],
                        'cells': cells,
                    })

        return {
            'channel': channel.to_snapshot() if channel is not None else None,
            'stay_date': stay_date,
            'season': find_season(seasons, stay_date),
            'currency': self.currency,
            'columns': columns,
            'rows': rows,
        }

    # =========================================================================
    # DISPLAY SUMMARIES
    # =========================================================================

    def channel_modifier_summary(self, channel):
        """Range/average of the channel's room-type rules (display only)."""
        summary = summarize_modifiers(channel.pricing_rules.all())
        summary['blanket_percent'] = channel.effective_modifier_percent
        return summary

    def season_modifier_summary(self, season):
        """Range/average of the season's room-type rules (display only)."""
        summary = summarize_modifiers(season.pricing_rules.all())
        summary['blanket_percent'] = season.price_modifier_percent or Decimal('0.00')
        return summary

    def stay_type_summary(self):
        from hotel_pricing.models import StayType

        return summarize_stay_types(StayType.objects.all())
