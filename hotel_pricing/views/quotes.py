"""
Pricing views: price quote, stay quote, channel grid and
modifier summary JSON endpoints.
"""

import logging

from django.shortcuts import get_object_or_404
from django.views.generic import View
from django.views.decorators.http import require_GET
from django.http import JsonResponse

from hotel_pricing.models import RoomType, MealPlan, StayType, Channel, Season
from hotel_pricing.services import PricingService

from .mixins import PricingApiMixin

logger = logging.getLogger(__name__)


class PriceQuoteView(PricingApiMixin, View):
    """
    Price one room night.

    URL: /api/pricing/quote/?room_type=1&channel=2&date=2026-12-24&meal_plan=BB
         &stay_type=1&adjustment_type=percentage&adjustment_value=-5
    """

    def get_data(self, request):
        params = request.GET
        room_type = self.get_instance(RoomType, params, 'room_type', required=True)
        result = PricingService().quote(
            room_type=room_type,
            channel=self.get_instance(Channel, params, 'channel'),
            stay_date=self.parse_date(params.get('date')),
            meal_plan=self.get_instance(MealPlan, params, 'meal_plan', lookup='code__iexact'),
            stay_type=self.get_instance(StayType, params, 'stay_type'),
            adjustment=self.parse_adjustment(params),
        )
        return {'quote': result}


class StayQuoteView(PricingApiMixin, View):
    """
    Price every night between check-in and check-out.

    URL: /api/pricing/stay-quote/?room_type=1&check_in=2026-12-22&check_out=2026-12-26
    """

    def get_data(self, request):
        params = request.GET
        room_type = self.get_instance(RoomType, params, 'room_type', required=True)
        check_in = self.parse_date(params.get('check_in'), 'check_in')
        check_out = self.parse_date(params.get('check_out'), 'check_out')
        return {
            'stay': PricingService().quote_stay(
                room_type,
                check_in,
                check_out,
                channel=self.get_instance(Channel, params, 'channel'),
                meal_plan=self.get_instance(MealPlan, params, 'meal_plan', lookup='code__iexact'),
                stay_type=self.get_instance(StayType, params, 'stay_type'),
                adjustment=self.parse_adjustment(params),
            )
        }


class ChannelGridView(PricingApiMixin, View):
    """
    Channel price grid: room type × meal plan × guest type rows,
    price point columns.

    URL: /api/pricing/grid/?channel=2&date=2026-12-24&adjustment_type=fixed&adjustment_value=10
    """

    def get_data(self, request):
        params = request.GET
        channel = self.get_instance(Channel, params, 'channel', required=True)
        return {
            'grid': PricingService().get_grid_data(
                channel,
                stay_date=self.parse_date(params.get('date')),
                adjustment=self.parse_adjustment(params),
            )
        }


@require_GET
def channel_summary_ajax(request, channel_id):
    """Price modifier summary for a channel's room-type rules."""
    channel = get_object_or_404(Channel, pk=channel_id)
    summary = PricingService().channel_modifier_summary(channel)
    return JsonResponse({'success': True, 'data': {'channel_id': channel.id, 'summary': summary}})


@require_GET
def season_summary_ajax(request, season_id):
    """Price modifier summary for a season's room-type rules."""
    season = get_object_or_404(Season, pk=season_id)
    summary = PricingService().season_modifier_summary(season)
    return JsonResponse({'success': True, 'data': {'season_id': season.id, 'summary': summary}})


@require_GET
def stay_type_summary_ajax(request):
    """Average duration and rate multiplier across stay types."""
    return JsonResponse({'success': True, 'data': PricingService().stay_type_summary()})
