from django.contrib import admin
from django.urls import path, include
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
    SpectacularRedocView
)

admin.site.site_header = 'Inventory Administration'
admin.site.site_title = 'Inventory Admin'

urlpatterns = [
    # Django Admin (browser UI for products, categories, users and reports)
    path('admin/', admin.site.urls),

    # API endpoints
    path('products/', include('products.urls')),
    path('api/auth/', include('users.urls')),
    path('api/orders/', include('orders.urls')),

    # API Documentation
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
    path('api/schema/swagger-ui/', SpectacularSwaggerView.as_view(url_name='schema'), name='swagger-ui'),
    path('api/schema/redoc/', SpectacularRedocView.as_view(url_name='schema'), name='redoc'),
]
