from django.urls import path
from .views import AdminLoginAPIView, AdminLogoutAPIView, AdminCheckAPIView, AdminOrderListAPIView

urlpatterns = [
    path('login', AdminLoginAPIView.as_view(), name='admin-login'),
    path('logout', AdminLogoutAPIView.as_view(), name='admin-logout'),
    path('check', AdminCheckAPIView.as_view(), name='admin-check'),
    path('orders', AdminOrderListAPIView.as_view(), name='admin-orders'),
]
