from django.urls import path, include

from .views import (
    CategoryListAPIView,
    CarBrandListAPIView,
    CarModelListAPIView,
    ProductListAPIView,
    FeaturedProductsAPIView,
    ProductDetailAPIView,
    CartSessionAPIView,
    CartItemCreateAPIView,
    CartItemDetailAPIView,
    CartClearAPIView,
    CartTotalsAPIView,
    CheckoutValidateAPIView,
    OrderCreateAPIView,
    OrderDetailAPIView,
    ContactMessageAPIView,
    StripePaymentIntentAPIView,
    PaypalSetupAPIView,
    PaypalOrderAPIView,
    PaypalCaptureAPIView,
)

urlpatterns = [
    path('categories', CategoryListAPIView.as_view(), name='categories'),
    path('car-brands', CarBrandListAPIView.as_view(), name='car-brands'),
    path('car-models/<int:brand_id>', CarModelListAPIView.as_view(), name='car-models'),
    path('products', ProductListAPIView.as_view(), name='products'),
    path('products/featured', FeaturedProductsAPIView.as_view(), name='products-featured'),
    path('products/<int:product_id>', ProductDetailAPIView.as_view(), name='product-detail'),
    path('cart', CartItemCreateAPIView.as_view(), name='cart-add'),
    path('cart/totals', CartTotalsAPIView.as_view(), name='cart-totals'),
    path('cart/clear/<str:session_id>', CartClearAPIView.as_view(), name='cart-clear'),
    path('cart/<int:item_id>', CartItemDetailAPIView.as_view(), name='cart-item'),
    path('cart/<str:session_id>', CartSessionAPIView.as_view(), name='cart-session'),
    path('checkout/validate', CheckoutValidateAPIView.as_view(), name='checkout-validate'),
    path('orders', OrderCreateAPIView.as_view(), name='orders'),
    path('orders/<int:order_id>', OrderDetailAPIView.as_view(), name='order-detail'),
    path('contact', ContactMessageAPIView.as_view(), name='contact'),
    path('payments/stripe/intent', StripePaymentIntentAPIView.as_view(), name='stripe-intent'),
    path('payments/paypal/setup', PaypalSetupAPIView.as_view(), name='paypal-setup'),
    path('payments/paypal/order', PaypalOrderAPIView.as_view(), name='paypal-order'),
    path('payments/paypal/order/<str:order_id>/capture', PaypalCaptureAPIView.as_view(), name='paypal-capture'),

    # Mount the admin panel endpoints under /admin/
    path('admin/', include('api.admin_panel.urls')),
]
