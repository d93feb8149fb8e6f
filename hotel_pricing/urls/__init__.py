"""
URL configuration package.

Combines all URL patterns into a single urlpatterns list.
The app_name is 'hotel_pricing' for namespace.
"""

from .pricing import urlpatterns as pricing_urls

app_name = 'hotel_pricing'

urlpatterns = pricing_urls
