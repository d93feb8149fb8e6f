"""
Shared fixtures for hotel pricing tests.

Database fixtures build a small hotel:
    Room types: Standard ($100), Suite ($300)
    Meal plans: BB ($15/room), HB ($12/person), RO, AI (inactive)
    Channels:   Direct (0%), Booking.com (+10% from its name)
    Seasons:    Peak Season Dec 15 2026 - Jan 10 2027 (+20% from its name)
    Stay types: Day Use (×0.5, 6h), Overnight (×1.0)
"""

from datetime import date
from decimal import Decimal

import pytest


@pytest.fixture
def standard_room(db):
    from hotel_pricing.models import RoomType
    return RoomType.objects.create(name='Standard Room', base_price=Decimal('100.00'), capacity=2, sort_order=1)


@pytest.fixture
def suite(db):
    from hotel_pricing.models import RoomType
    return RoomType.objects.create(name='Suite', base_price=Decimal('300.00'), capacity=4, sort_order=2)


@pytest.fixture
def meal_plans(db):
    from hotel_pricing.models import MealPlan
    return {
        'BB': MealPlan.objects.create(
            name='Bed & Breakfast', code='BB', per_person_rate=Decimal('8.00'),
            per_room_rate=Decimal('15.00'), sort_order=1
        ),
        'HB': MealPlan.objects.create(
            name='Half Board', code='HB', per_person_rate=Decimal('12.00'), sort_order=2
        ),
        'RO': MealPlan.objects.create(name='Room Only', code='RO', sort_order=3),
        'AI': MealPlan.objects.create(
            name='All Inclusive', code='AI', per_person_rate=Decimal('40.00'),
            is_active=False, sort_order=4
        ),
    }


@pytest.fixture
def direct_channel(db):
    from hotel_pricing.models import Channel
    return Channel.objects.create(name='Direct', type='DIRECT', sort_order=1)


@pytest.fixture
def booking_channel(db):
    from hotel_pricing.models import Channel
    return Channel.objects.create(name='Booking.com', type='OTA', sort_order=2)


@pytest.fixture
def peak_season(db):
    from hotel_pricing.models import Season
    return Season.objects.create(
        name='Peak Season', start_date=date(2026, 12, 15), end_date=date(2027, 1, 10)
    )


@pytest.fixture
def stay_types(db):
    from hotel_pricing.models import StayType
    return {
        'day_use': StayType.objects.create(name='Day Use', hours=6, rate_multiplier=Decimal('0.50')),
        'overnight': StayType.objects.create(name='Overnight', rate_multiplier=Decimal('1.00')),
    }
