"""
Default price modifier percentages derived from entity names.

Channels and seasons created without a price_modifier_percent get one
from these tables the first time they are saved (see signals.py) or via
the backfill_price_modifiers command.
"""

from decimal import Decimal

# Checked in order; first substring match wins.
CHANNEL_DEFAULTS = [
    ('booking.com', Decimal('10')),
    ('agoda', Decimal('8')),
    ('expedia', Decimal('12')),
    ('hotels.com', Decimal('9')),
    ('tripadvisor', Decimal('7')),
    ('agent', Decimal('5')),
]

SEASON_DEFAULTS = [
    ('peak', Decimal('20')),
    ('holiday', Decimal('15')),
    ('low', Decimal('-10')),
    ('spring', Decimal('5')),
    ('fall', Decimal('3')),
    ('autumn', Decimal('3')),
]


def _match(name, table):
    name = (name or '').lower()
    for needle, percent in table:
        if needle in name:
            return percent
    return Decimal('0')


def default_channel_modifier_percent(name):
    """Direct, walk-in, corporate and group channels default to 0%."""
    return _match(name, CHANNEL_DEFAULTS)


def default_season_modifier_percent(name):
    return _match(name, SEASON_DEFAULTS)
