"""
View mixins: PricingApiMixin.
"""

import logging
from decimal import Decimal

from django.http import Http404, JsonResponse

from hotel_pricing.exceptions import ValidationError
from hotel_pricing.services.pricing_engine import MODIFIER_TYPES, parse_iso_date, to_decimal

logger = logging.getLogger(__name__)


class PricingApiMixin:
    """
    Base mixin for pricing JSON endpoints.

    Subclasses implement get_data(request) and return a dict; validation
    errors become 400 responses and missing entities 404 responses.
    """

    def get(self, request, *args, **kwargs):
        try:
            data = self.get_data(request, *args, **kwargs)
        except ValidationError as e:
            logger.info("Rejected pricing request %s: %s", request.get_full_path(), e)
            return self.error_response(str(e), status=400)
        except Http404 as e:
            return self.error_response(str(e) or 'Not found', status=404)
        return self.success_response(data)

    def get_data(self, request, *args, **kwargs):
        raise NotImplementedError

    def json_response(self, data, status=200):
        """Return JSON response."""
        return JsonResponse(data, status=status)

    def error_response(self, message, status=400):
        """Return error JSON response."""
        return JsonResponse({'success': False, 'error': message}, status=status)

    def success_response(self, data=None, message=None):
        """Return success JSON response."""
        response = {'success': True}
        if message:
            response['message'] = message
        if data:
            response['data'] = data
        return JsonResponse(response)

    def parse_decimal(self, value, field, default=None):
        """Parse a decimal query parameter; empty means default."""
        if value is None or value == '':
            return default
        return to_decimal(value, field)

    def parse_date(self, value, field='date'):
        """Parse date from string (YYYY-MM-DD)."""
        return parse_iso_date(value, field)

    def parse_adjustment(self, params):
        """Ad-hoc adjustment from adjustment_type/adjustment_value, or None."""
        adjustment_type = params.get('adjustment_type')
        value = params.get('adjustment_value')
        if not adjustment_type and not value:
            return None
        if adjustment_type not in MODIFIER_TYPES:
            raise ValidationError(
                "adjustment_type must be 'percentage' or 'fixed'.", code='invalid_modifier_type'
            )
        return {
            'type': adjustment_type,
            'value': self.parse_decimal(value, 'adjustment_value', default=Decimal('0')),
        }

    def get_instance(self, model, params, field, required=False, lookup='pk'):
        """Fetch model instance named by a query parameter."""
        raw = params.get(field)
        if not raw:
            if required:
                raise ValidationError(f"{field} is required.", code='required')
            return None
        if lookup == 'pk' and not raw.isdigit():
            raise ValidationError(f"{field} must be an id.", code='invalid')

        instance = model.objects.filter(**{lookup: raw}).first()
        if instance is None:
            raise Http404(f"{model._meta.verbose_name} {raw} not found")
        return instance
