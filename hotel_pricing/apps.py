from django.apps import AppConfig


class HotelPricingConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'hotel_pricing'
    verbose_name = 'Hotel Pricing'
    
    def ready(self):
        """Import signals when app is ready."""
        import hotel_pricing.signals  # noqa
