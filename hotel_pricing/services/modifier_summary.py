"""
Display summaries for pricing rules.

These aggregate several rules for list columns and dashboards. They are
a reporting convenience and never feed a price calculation; use
pricing_engine.compute_price for the authoritative per-booking price.
"""

from decimal import Decimal, ROUND_HALF_UP

from .pricing_engine import FIXED, PERCENTAGE, read_modifier, to_decimal


def _signed(value, places):
    quantum = Decimal(1).scaleb(-places)
    value = value.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"+{value}" if value > 0 else f"{value}"


def format_modifier(modifier_type, value):
    """Label for a single rule, e.g. '+10%', '-5%', '+$15', '-$20'."""
    value = to_decimal(value, 'Modifier value')
    sign = '+' if value >= 0 else '-'
    if modifier_type == PERCENTAGE:
        return f"{sign}{abs(value).normalize():f}%"
    return f"{sign}${abs(value).normalize():f}"


def summarize_modifiers(rules):
    """
    Summarize channel or seasonal pricing rules for display.

    Percentage rules take precedence: when any exist, report their
    min/max/average and ignore fixed rules. Otherwise report the average
    of the fixed amounts.

    Args:
        rules: Iterable of rule dicts or ChannelPricing/SeasonalPricing objects

    Returns:
        dict with kind ('percentage', 'fixed' or None), count, min, max,
        average and display
    """
    percentages = []
    fixed_amounts = []
    for rule in rules:
        modifier_type, value = read_modifier(rule, 'Pricing rule')
        if modifier_type == PERCENTAGE:
            percentages.append(value)
        else:
            fixed_amounts.append(value)

    if percentages:
        low, high = min(percentages), max(percentages)
        average = sum(percentages) / len(percentages)
        if low == high:
            display = f"{_signed(average, 1)}%"
        else:
            display = f"{_signed(low, 1)}% to {_signed(high, 1)}%"
        return {
            'kind': PERCENTAGE,
            'count': len(percentages),
            'min': low,
            'max': high,
            'average': average,
            'display': display,
        }

    if fixed_amounts:
        average = sum(fixed_amounts) / len(fixed_amounts)
        amount = average.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
        sign = '+' if amount > 0 else '-' if amount < 0 else ''
        return {
            'kind': FIXED,
            'count': len(fixed_amounts),
            'min': min(fixed_amounts),
            'max': max(fixed_amounts),
            'average': average,
            'display': f"{sign}${abs(amount)}",
        }

    return {
        'kind': None,
        'count': 0,
        'min': None,
        'max': None,
        'average': None,
        'display': '-',
    }


def summarize_stay_types(stay_types):
    """
    Dashboard figures for stay types.

    Returns:
        dict with count, average_hours (whole hours, missing hours count
        as a 24h day) and average_multiplier (2 decimals)
    """
    hours = []
    multipliers = []
    for stay_type in stay_types:
        if isinstance(stay_type, dict):
            stay_hours = stay_type.get('hours')
            multiplier = stay_type.get('rate_multiplier')
        else:
            stay_hours = stay_type.hours
            multiplier = stay_type.rate_multiplier
        hours.append(Decimal(stay_hours or 24))
        multipliers.append(to_decimal(multiplier, 'Rate multiplier'))

    if not multipliers:
        return {'count': 0, 'average_hours': 0, 'average_multiplier': Decimal('0.00')}

    average_hours = (sum(hours) / len(hours)).quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    average_multiplier = (sum(multipliers) / len(multipliers)).quantize(
        Decimal('0.01'), rounding=ROUND_HALF_UP
    )
    return {
        'count': len(multipliers),
        'average_hours': int(average_hours),
        'average_multiplier': average_multiplier,
    }
