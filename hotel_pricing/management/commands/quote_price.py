"""
Management command to quote a room price from the command line.

Usage:
    python manage.py quote_price --room-type 1
    python manage.py quote_price --room-type 1 --channel 2 --date 2026-12-24 --meal-plan BB
    python manage.py quote_price --room-type 1 --adjustment-type percentage --adjustment-value -5
"""

from django.core.management.base import BaseCommand, CommandError

from hotel_pricing.exceptions import ValidationError


class Command(BaseCommand):
    help = 'Quote the price of one room night and print the breakdown'
    
    def add_arguments(self, parser):
        parser.add_argument('--room-type', type=int, required=True, help='Room type id')
        parser.add_argument('--channel', type=int, help='Channel id')
        parser.add_argument('--date', help='Stay date (YYYY-MM-DD); selects the season')
        parser.add_argument('--meal-plan', help='Meal plan code (e.g., BB)')
        parser.add_argument('--stay-type', type=int, help='Stay type id')
        parser.add_argument(
            '--adjustment-type',
            choices=['percentage', 'fixed'],
            help='Ad-hoc adjustment type'
        )
        parser.add_argument('--adjustment-value', help='Ad-hoc adjustment value (e.g., -5)')
    
    def handle(self, *args, **options):
        from hotel_pricing.models import RoomType, Channel, MealPlan, StayType
        from hotel_pricing.services import PricingService, format_breakdown
        from hotel_pricing.services.pricing_engine import parse_iso_date
        
        room_type = self._get(RoomType, pk=options['room_type'])
        channel = self._get(Channel, pk=options['channel']) if options['channel'] else None
        meal_plan = self._get(MealPlan, code__iexact=options['meal_plan']) if options['meal_plan'] else None
        stay_type = self._get(StayType, pk=options['stay_type']) if options['stay_type'] else None
        
        stay_date = None
        if options['date']:
            try:
                stay_date = parse_iso_date(options['date'])
            except ValidationError:
                raise CommandError(f"Invalid date: {options['date']}")
        
        adjustment = None
        if options['adjustment_type'] or options['adjustment_value']:
            if not (options['adjustment_type'] and options['adjustment_value']):
                raise CommandError('--adjustment-type and --adjustment-value must be given together')
            adjustment = {'type': options['adjustment_type'], 'value': options['adjustment_value']}
        
        service = PricingService()
        try:
            result = service.quote(
                room_type=room_type,
                channel=channel,
                stay_date=stay_date,
                meal_plan=meal_plan,
                stay_type=stay_type,
                adjustment=adjustment,
            )
        except ValidationError as e:
            raise CommandError(f'Cannot quote price: {e}')
        
        self.stdout.write(f'{room_type.name}' + (f' via {channel.name}' if channel else ''))
        self.stdout.write('')
        self.stdout.write(format_breakdown(result))
        self.stdout.write('')
        self.stdout.write(self.style.SUCCESS(f"Final price: {result['final_price']} {result['currency']}"))
    
    def _get(self, model, **lookup):
        instance = model.objects.filter(**lookup).first()
        if instance is None:
            value = next(iter(lookup.values()))
            raise CommandError(f'{model._meta.verbose_name} not found: {value}')
        return instance
