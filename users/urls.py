from django.urls import path
from rest_framework_simplejwt.views import TokenRefreshView

from .views import (
    AddressDetailView,
    AddressListCreateView,
    UserLoginView,
    UserLogoutView,
    UserProfileView,
    UserRegistrationView,
)

app_name = 'users'

urlpatterns = [
    # Authentication
    path('register', UserRegistrationView.as_view(), name='register'),
    path('login', UserLoginView.as_view(), name='login'),
    path('logout', UserLogoutView.as_view(), name='logout'),
    path('token/refresh', TokenRefreshView.as_view(), name='token_refresh'),

    # Profile and address book
    path('profile', UserProfileView.as_view(), name='profile'),
    path('addresses', AddressListCreateView.as_view(), name='address_list'),
    path('addresses/<int:pk>', AddressDetailView.as_view(), name='address_detail'),
]
