"""
Pricing Resolution Engine
=========================

Pure rate calculation over plain values. Nothing here reads the database;
callers pass numbers, dicts or model instances and get Decimals back.

Calculation Flow:
1. Base Price × Stay Type Multiplier = Nightly Rate
2. Nightly Rate + Meal Plan Add-on (per room, else per person)
3. Apply Season (room-type rule, else season percentage)
4. Apply Ad-hoc Adjustment (percentage or fixed)
5. Apply Channel (room-type rule, else channel percentage)
6. Clamp to zero
7. Round to cents (ROUND_HALF_UP)
"""

import re
from decimal import Decimal, DecimalException, InvalidOperation, ROUND_HALF_UP
from datetime import date

from dateutil.parser import isoparse

from hotel_pricing.exceptions import ValidationError

PERCENTAGE = 'percentage'
FIXED = 'fixed'
MODIFIER_TYPES = (PERCENTAGE, FIXED)

CENT = Decimal('0.01')
ZERO = Decimal('0.00')
ONE = Decimal('1')
HUNDRED = Decimal('100')

# Largest magnitude accepted for any single input
MAX_MAGNITUDE = Decimal('1e12')

ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def to_decimal(value, field='value', default=None):
    """
    Convert a numeric input to Decimal.

    Args:
        value: int, float, Decimal or numeric string
        field: Name used in the error message
        default: Returned when value is None (None means required)

    Raises:
        ValidationError: value is missing, not numeric, not finite or
            too large (1e12 or more in magnitude)
    """
    if value is None:
        if default is None:
            raise ValidationError(f"{field} is required.", code='required')
        return Decimal(str(default))

    if isinstance(value, bool):
        raise ValidationError(f"{field} must be a number.", code='invalid')

    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        raise ValidationError(f"{field} must be a number.", code='invalid')

    if not result.is_finite():
        raise ValidationError(f"{field} must be a finite number.", code='invalid')
    if result.copy_abs() >= MAX_MAGNITUDE:
        raise ValidationError(f"{field} is out of range.", code='out_of_range')
    return result


def parse_iso_date(value, field='date'):
    """Parse a full YYYY-MM-DD date string; empty means None."""
    if not value:
        return None
    if not ISO_DATE_PATTERN.match(value.strip()):
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format.", code='invalid')
    try:
        return isoparse(value.strip()).date()
    except ValueError:
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format.", code='invalid')


def round_price(amount):
    """Round to the currency minor unit, half-up."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def _get(source, *names):
    """Read the first present key/attribute from a dict or object."""
    for name in names:
        if isinstance(source, dict):
            if source.get(name) is not None:
                return source[name]
        elif getattr(source, name, None) is not None:
            return getattr(source, name)
    return None


def read_modifier(modifier, field='modifier'):
    """
    Normalize a modifier to a (type, Decimal value) tuple.

    Accepts {'type': ..., 'value': ...} dicts, rule dicts with
    modifier_type/modifier_value, or ChannelPricing/SeasonalPricing
    instances. Returns None for None.
    """
    if modifier is None:
        return None

    modifier_type = _get(modifier, 'type', 'modifier_type')
    if modifier_type not in MODIFIER_TYPES:
        raise ValidationError(
            f"{field} type must be 'percentage' or 'fixed', got {modifier_type!r}.",
            code='invalid_modifier_type'
        )
    value = to_decimal(_get(modifier, 'value', 'modifier_value'), f"{field} value")
    return modifier_type, value


def apply_modifier(amount, modifier_type, value):
    """
    Apply one modifier to an amount.

    percentage: amount × (1 + value/100)
    fixed:      amount + value (negative value = discount)
    """
    if modifier_type == PERCENTAGE:
        return amount * (ONE + value / HUNDRED)
    if modifier_type == FIXED:
        return amount + value
    raise ValidationError(
        f"Unknown modifier type {modifier_type!r}.", code='invalid_modifier_type'
    )


def meal_plan_addon(meal_plan):
    """Per-room rate when present, else per-person rate, else zero."""
    if meal_plan is None:
        return ZERO

    per_room = _get(meal_plan, 'per_room_rate')
    if per_room is not None:
        return to_decimal(per_room, 'Meal plan per-room rate')

    per_person = _get(meal_plan, 'per_person_rate')
    if per_person is not None:
        return to_decimal(per_person, 'Meal plan per-person rate')
    return ZERO


def compute_price_breakdown(base_price, meal_plan=None, adjustment=None,
                            channel_modifier_percent=0, seasonal_modifier_percent=0,
                            stay_type_multiplier=1, season_adjustment=None,
                            channel_adjustment=None):
    """
    Calculate a final price and keep every intermediate step.

    Args:
        base_price: Room type base price (>= 0)
        meal_plan: dict/object with per_room_rate and/or per_person_rate
        adjustment: Ad-hoc {'type', 'value'} preview adjustment
        channel_modifier_percent: Blanket channel percentage
        seasonal_modifier_percent: Blanket season percentage
        stay_type_multiplier: Stay type rate multiplier (> 0)
        season_adjustment: Room-type season rule; replaces the season percentage
        channel_adjustment: Room-type channel rule; replaces the channel percentage

    Returns:
        dict with the steps. Step amounts are rounded for display;
        the calculation itself only rounds final_price.
    """
    base = to_decimal(base_price, 'Base price')
    if base < ZERO:
        raise ValidationError("Base price cannot be negative.", code='negative_base_price')

    multiplier = to_decimal(stay_type_multiplier, 'Stay type multiplier', default=1)
    if multiplier <= ZERO:
        raise ValidationError("Stay type multiplier must be greater than zero.", code='invalid_multiplier')

    # Room-type rules win over the blanket percentages
    season_mod = read_modifier(season_adjustment, 'Season rule')
    if season_mod is None:
        season_mod = (PERCENTAGE, to_decimal(seasonal_modifier_percent, 'Season modifier', default=0))

    channel_mod = read_modifier(channel_adjustment, 'Channel rule')
    if channel_mod is None:
        channel_mod = (PERCENTAGE, to_decimal(channel_modifier_percent, 'Channel modifier', default=0))

    adjustment_mod = read_modifier(adjustment, 'Adjustment')
    addon = meal_plan_addon(meal_plan)

    try:
        after_stay_type = base * multiplier
        after_meal_plan = after_stay_type + addon
        after_season = apply_modifier(after_meal_plan, *season_mod)
        after_adjustment = after_season
        if adjustment_mod is not None:
            after_adjustment = apply_modifier(after_season, *adjustment_mod)
        after_channel = apply_modifier(after_adjustment, *channel_mod)

        clamped = after_channel < ZERO
        final_price = round_price(max(after_channel, ZERO))

        return {
            'base_price': round_price(base),
            'stay_type_multiplier': multiplier,
            'after_stay_type': round_price(after_stay_type),
            'meal_plan_addon': round_price(addon),
            'after_meal_plan': round_price(after_meal_plan),
            'season_modifier': {'type': season_mod[0], 'value': season_mod[1]},
            'after_season': round_price(after_season),
            'adjustment': (
                {'type': adjustment_mod[0], 'value': adjustment_mod[1]}
                if adjustment_mod else None
            ),
            'after_adjustment': round_price(after_adjustment),
            'channel_modifier': {'type': channel_mod[0], 'value': channel_mod[1]},
            'after_channel': round_price(after_channel),
            'clamped': clamped,
            'final_price': final_price,
        }
    except DecimalException:
        raise ValidationError(
            "Price is out of range for the given modifiers.", code='out_of_range'
        )


def compute_price(base_price, meal_plan=None, adjustment=None, channel_modifier_percent=0,
                  seasonal_modifier_percent=0, stay_type_multiplier=1,
                  season_adjustment=None, channel_adjustment=None):
    """Single authoritative price. See compute_price_breakdown for arguments."""
    return compute_price_breakdown(
        base_price,
        meal_plan=meal_plan,
        adjustment=adjustment,
        channel_modifier_percent=channel_modifier_percent,
        seasonal_modifier_percent=seasonal_modifier_percent,
        stay_type_multiplier=stay_type_multiplier,
        season_adjustment=season_adjustment,
        channel_adjustment=channel_adjustment,
    )['final_price']


def price_points(base_price, count=8, step_percent=2):
    """
    Price-point columns for the channel grid.

    Column n (1-based) is base + base × (n × step_percent / 100).
    """
    base = to_decimal(base_price, 'Base price')
    step = to_decimal(step_percent, 'Price point step')
    return [
        base + base * (Decimal(column) * step / HUNDRED)
        for column in range(1, count + 1)
    ]


# =============================================================================
# SNAPSHOT RESOLUTION
# =============================================================================

def season_applies(season, stay_date):
    """Active season whose inclusive date range contains stay_date."""
    if _get(season, 'is_active') is False:
        return False
    start = _get(season, 'start_date')
    end = _get(season, 'end_date')
    if start is None or end is None:
        return False
    return start <= stay_date <= end


def find_season(seasons, stay_date):
    """
    Pick the season that applies to a date.

    When several overlap, the one starting latest wins (the narrower,
    more recent range); ties go to the first in the given order.
    """
    if stay_date is None:
        return None

    best = None
    for season in seasons:
        if not season_applies(season, stay_date):
            continue
        if best is None or _get(season, 'start_date') > _get(best, 'start_date'):
            best = season
    return best


def find_rule(rules, owner_key, owner_id, room_type_id):
    """
    Room-type-specific rule for a channel or season.

    Args:
        rules: Iterable of rule dicts
        owner_key: 'channel_id' or 'season_id'
        owner_id: Channel/Season id
        room_type_id: Room type id

    Returns:
        The last matching rule, or None
    """
    match = None
    for rule in rules or ():
        if _get(rule, owner_key) == owner_id and _get(rule, 'room_type_id') == room_type_id:
            match = rule
    return match


def resolve_quote(snapshot):
    """
    Resolve a price from a read-only snapshot.

    Snapshot keys:
        room_type: {'id', 'base_price', ...} (required)
        meal_plan: {'code', 'per_room_rate', 'per_person_rate', 'is_active'}
        channel: {'id', 'name', 'price_modifier_percent'}
        season: {'id', 'start_date', 'end_date', 'price_modifier_percent', 'is_active'}
        stay_type: {'rate_multiplier'}
        adjustment: {'type', 'value'}
        channel_rules / season_rules: lists of rule dicts
        stay_date: date; when given the season must cover it

    Returns:
        Breakdown dict (compute_price_breakdown) plus the ids and rule
        flags that decided the price.
    """
    room_type = snapshot.get('room_type')
    if room_type is None:
        raise ValidationError("A room type is required to quote a price.", code='required')
    room_type_id = _get(room_type, 'id')

    meal_plan = snapshot.get('meal_plan')
    if meal_plan is not None and _get(meal_plan, 'is_active') is False:
        label = _get(meal_plan, 'code', 'name') or 'selected'
        raise ValidationError(f"Meal plan {label} is not active.", code='inactive_meal_plan')

    stay_date = snapshot.get('stay_date')
    if stay_date is not None and not isinstance(stay_date, date):
        raise ValidationError("Stay date must be a date.", code='invalid')

    season = snapshot.get('season')
    if season is not None:
        if _get(season, 'is_active') is False:
            season = None
        elif stay_date is not None and not season_applies(season, stay_date):
            season = None

    season_rule = None
    season_percent = 0
    if season is not None:
        season_rule = find_rule(snapshot.get('season_rules'), 'season_id', _get(season, 'id'), room_type_id)
        season_percent = _get(season, 'price_modifier_percent') or 0

    channel = snapshot.get('channel')
    channel_rule = None
    channel_percent = 0
    if channel is not None:
        channel_rule = find_rule(snapshot.get('channel_rules'), 'channel_id', _get(channel, 'id'), room_type_id)
        channel_percent = _get(channel, 'price_modifier_percent') or 0

    stay_type = snapshot.get('stay_type')
    multiplier = _get(stay_type, 'rate_multiplier') if stay_type is not None else None

    breakdown = compute_price_breakdown(
        _get(room_type, 'base_price'),
        meal_plan=meal_plan,
        adjustment=snapshot.get('adjustment'),
        channel_modifier_percent=channel_percent,
        seasonal_modifier_percent=season_percent,
        stay_type_multiplier=1 if multiplier is None else multiplier,
        season_adjustment=season_rule,
        channel_adjustment=channel_rule,
    )
    breakdown.update({
        'room_type_id': room_type_id,
        'meal_plan_code': _get(meal_plan, 'code') if meal_plan is not None else None,
        'channel_id': _get(channel, 'id') if channel is not None else None,
        'season_id': _get(season, 'id') if season is not None else None,
        'stay_date': stay_date,
        'season_rule_applied': season_rule is not None,
        'channel_rule_applied': channel_rule is not None,
    })
    return breakdown


def format_breakdown(result, currency='$'):
    """
    Format a breakdown as readable text.

    Args:
        result: dict from compute_price_breakdown / resolve_quote
        currency: Currency symbol

    Returns:
        str: Formatted breakdown
    """
    def modifier_text(modifier):
        if modifier is None:
            return "none"
        if modifier['type'] == PERCENTAGE:
            return f"{modifier['value']:+}%"
        return f"{'+' if modifier['value'] >= 0 else '-'}{currency}{abs(modifier['value'])}"

    lines = [
        f"Base Price:                {currency}{result['base_price']:>10.2f}",
        f"× Stay Type ({result['stay_type_multiplier']}):".ljust(27) + f"{currency}{result['after_stay_type']:>10.2f}",
        f"+ Meal Plan:               {currency}{result['meal_plan_addon']:>10.2f}",
        f"After Meal Plan:           {currency}{result['after_meal_plan']:>10.2f}",
        f"Season ({modifier_text(result['season_modifier'])}):".ljust(27) + f"{currency}{result['after_season']:>10.2f}",
        f"Adjustment ({modifier_text(result['adjustment'])}):".ljust(27) + f"{currency}{result['after_adjustment']:>10.2f}",
        f"Channel ({modifier_text(result['channel_modifier'])}):".ljust(27) + f"{currency}{result['after_channel']:>10.2f}",
        "═" * 38,
        f"FINAL PRICE:               {currency}{result['final_price']:>10.2f}",
    ]
    if result.get('clamped'):
        lines.extend(["", "⚠ Price clamped to zero by discounts"])
    return "\n".join(lines)
