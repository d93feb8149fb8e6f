"""
URL configuration for Hotel Pricing project.
"""

from django.contrib import admin
from django.urls import path, include

admin.site.site_header = "Hotel Pricing Admin"
admin.site.site_title = "Admin Portal"
admin.site.index_title = "Welcome to the Hotel Pricing Manager"

urlpatterns = [
    path('admin/', admin.site.urls),
    path('', include('hotel_pricing.urls')),
]
