from rest_framework.views import APIView
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework import status
import requests
import stripe
import logging
from catalog.models import Category, Product
from catalog.filters import ProductFilters, InvalidFilter, filter_products
from cars.models import CarBrand, CarModel
from cart.models import CartItem
from cart.aggregation import Cart
from orders.models import Order
from orders.services import place_order
from payments import paypal, stripe_gateway
from payments.errors import PaymentProviderError, PaymentProviderNotConfigured
from .serializers import (
    CategorySerializer, CarBrandSerializer, CarModelSerializer, ProductSerializer,
    CartItemSerializer, CartItemQuantitySerializer, CartTotalsRequestSerializer,
    ShippingFormSerializer, OrderSubmissionSerializer, OrderSerializer,
    ContactMessageSerializer, PaymentIntentSerializer, PaypalOrderSerializer,
)

# Initialize logger
logger = logging.getLogger(__name__)

FEATURED_PRODUCTS_LIMIT = 8


def error_response(message, http_status, errors=None):
    body = {'status': 'error', 'message': message}
    if errors is not None:
        body['errors'] = errors
    return Response(body, status=http_status)


class CategoryListAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            categories = Category.objects.all()
            return Response(CategorySerializer(categories, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching categories: {str(e)}")
            return error_response('Failed to fetch categories', status.HTTP_500_INTERNAL_SERVER_ERROR)


class CarBrandListAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            brands = CarBrand.objects.all()
            return Response(CarBrandSerializer(brands, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching car brands: {str(e)}")
            return error_response('Failed to fetch car brands', status.HTTP_500_INTERNAL_SERVER_ERROR)


class CarModelListAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, brand_id):
        try:
            models = CarModel.objects.filter(brand_id=brand_id)
            return Response(CarModelSerializer(models, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching car models for brand {brand_id}: {str(e)}")
            return error_response('Failed to fetch car models', status.HTTP_500_INTERNAL_SERVER_ERROR)


class ProductListAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            filters = ProductFilters.from_query_params(request.query_params)
        except InvalidFilter as e:
            return error_response('Invalid product filters', status.HTTP_400_BAD_REQUEST, {e.field: [e.message]})

        try:
            products = filter_products(Product.objects.all(), filters)
            return Response(ProductSerializer(products, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching products with {filters}: {str(e)}")
            return error_response('Failed to fetch products', status.HTTP_500_INTERNAL_SERVER_ERROR)


class FeaturedProductsAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request):
        try:
            products = Product.objects.all()[:FEATURED_PRODUCTS_LIMIT]
            return Response(ProductSerializer(products, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching featured products: {str(e)}")
            return error_response('Failed to fetch featured products', status.HTTP_500_INTERNAL_SERVER_ERROR)


class ProductDetailAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, product_id):
        try:
            product = Product.objects.get(id=product_id)
            return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)
        except Product.DoesNotExist:
            return error_response('Product not found', status.HTTP_404_NOT_FOUND)
        except Exception as e:
            logger.error(f"Error fetching product {product_id}: {str(e)}")
            return error_response('Failed to fetch product', status.HTTP_500_INTERNAL_SERVER_ERROR)


# Server-side cart table, keyed by the client's session identifier
class CartSessionAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, session_id):
        try:
            items = CartItem.objects.for_session(session_id)
            return Response(CartItemSerializer(items, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching cart for session {session_id}: {str(e)}")
            return error_response('Failed to fetch cart items', status.HTTP_500_INTERNAL_SERVER_ERROR)


class CartItemCreateAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CartItemSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Invalid cart item data: {serializer.errors}")
            return error_response('Invalid cart item data', status.HTTP_400_BAD_REQUEST, serializer.errors)

        data = serializer.validated_data
        try:
            item, created = CartItem.objects.add(data['session_id'], data['product'], data['quantity'])
            logger.info(
                f"Cart {item.session_id}: product {item.product_id} "
                f"{'added' if created else 'merged'}, quantity now {item.quantity}"
            )
            return Response(CartItemSerializer(item).data, status=status.HTTP_201_CREATED)
        except Exception as e:
            logger.error(f"Error adding item to cart: {str(e)}")
            return error_response('Failed to add item to cart', status.HTTP_500_INTERNAL_SERVER_ERROR)


class CartItemDetailAPIView(APIView):
    permission_classes = [AllowAny]

    def put(self, request, item_id):
        serializer = CartItemQuantitySerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid cart item quantity', status.HTTP_400_BAD_REQUEST, serializer.errors)

        try:
            item = CartItem.objects.set_quantity(item_id, serializer.validated_data['quantity'])
        except CartItem.DoesNotExist:
            return error_response('Cart item not found', status.HTTP_404_NOT_FOUND)
        except Exception as e:
            logger.error(f"Error updating cart item {item_id}: {str(e)}")
            return error_response('Failed to update cart item', status.HTTP_500_INTERNAL_SERVER_ERROR)

        if item is None:
            logger.info(f"Cart item {item_id} removed by zero quantity")
            return Response({'status': 'success', 'message': 'Item removed from cart'}, status=status.HTTP_200_OK)
        return Response(CartItemSerializer(item).data, status=status.HTTP_200_OK)

    def delete(self, request, item_id):
        try:
            deleted, _ = CartItem.objects.filter(id=item_id).delete()
        except Exception as e:
            logger.error(f"Error removing cart item {item_id}: {str(e)}")
            return error_response('Failed to remove item from cart', status.HTTP_500_INTERNAL_SERVER_ERROR)

        if not deleted:
            return error_response('Cart item not found', status.HTTP_404_NOT_FOUND)
        return Response({'status': 'success', 'message': 'Item removed from cart'}, status=status.HTTP_200_OK)


class CartClearAPIView(APIView):
    permission_classes = [AllowAny]

    def delete(self, request, session_id):
        try:
            removed = CartItem.objects.clear(session_id)
            logger.info(f"Cart {session_id} cleared ({removed} line(s))")
            return Response({'status': 'success', 'message': 'Cart cleared'}, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error clearing cart {session_id}: {str(e)}")
            return error_response('Failed to clear cart', status.HTTP_500_INTERNAL_SERVER_ERROR)


class CartTotalsAPIView(APIView):
    """Recompute totals for a client-held cart, merging repeated product ids."""
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = CartTotalsRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid cart data', status.HTTP_400_BAD_REQUEST, serializer.errors)

        data = serializer.validated_data
        cart = Cart.from_lines(data['items'], session_id=data.get('session_id') or None)
        return Response(cart.to_dict(), status=status.HTTP_200_OK)


class CheckoutValidateAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ShippingFormSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid shipping data', status.HTTP_400_BAD_REQUEST, serializer.errors)
        return Response({'status': 'success', 'data': serializer.validated_data}, status=status.HTTP_200_OK)


class OrderCreateAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = OrderSubmissionSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Order submission rejected: {serializer.errors}")
            return error_response('Invalid order data', status.HTTP_400_BAD_REQUEST, serializer.errors)

        try:
            order = place_order(serializer.validated_data['order'], serializer.validated_data['items'])
            return Response(OrderSerializer(order).data, status=status.HTTP_201_CREATED)
        except Exception as e:
            logger.error(f"Error creating order: {str(e)}")
            return error_response('Failed to create order', status.HTTP_500_INTERNAL_SERVER_ERROR)


class OrderDetailAPIView(APIView):
    permission_classes = [AllowAny]

    def get(self, request, order_id):
        try:
            order = Order.objects.prefetch_related('items__product').get(id=order_id)
            return Response(OrderSerializer(order).data, status=status.HTTP_200_OK)
        except Order.DoesNotExist:
            return error_response('Order not found', status.HTTP_404_NOT_FOUND)
        except Exception as e:
            logger.error(f"Error fetching order {order_id}: {str(e)}")
            return error_response('Failed to fetch order', status.HTTP_500_INTERNAL_SERVER_ERROR)


class ContactMessageAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = ContactMessageSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid contact data', status.HTTP_400_BAD_REQUEST, serializer.errors)
        try:
            serializer.save()
            logger.info(f"Contact message received from {serializer.data['email']}")
            return Response(serializer.data, status=status.HTTP_201_CREATED)
        except Exception as e:
            logger.error(f"Error storing contact message: {str(e)}")
            return error_response('Failed to send contact message', status.HTTP_500_INTERNAL_SERVER_ERROR)


class StripePaymentIntentAPIView(APIView):
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = PaymentIntentSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Amount is required', status.HTTP_400_BAD_REQUEST, serializer.errors)

        try:
            client_secret = stripe_gateway.create_payment_intent(serializer.validated_data['amount'])
            return Response({'client_secret': client_secret}, status=status.HTTP_200_OK)
        except PaymentProviderNotConfigured as e:
            logger.error(str(e))
            return error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except stripe.StripeError as e:
            logger.error(f"Stripe payment intent failed: {str(e)}")
            return error_response(f"Error creating payment intent: {str(e)}", status.HTTP_502_BAD_GATEWAY)


class PaypalAPIView(APIView):
    """Shared error mapping for the PayPal pass-through endpoints."""
    permission_classes = [AllowAny]

    def call_paypal(self, action, func, *args, **kwargs):
        try:
            return Response(func(*args, **kwargs), status=status.HTTP_200_OK)
        except PaymentProviderNotConfigured as e:
            logger.error(str(e))
            return error_response(str(e), status.HTTP_500_INTERNAL_SERVER_ERROR)
        except PaymentProviderError as e:
            return Response(
                {
                    'status': 'error',
                    'message': 'Payment service returned an error',
                    'details': e.details,
                    'status_code': e.status_code,
                },
                status=status.HTTP_502_BAD_GATEWAY
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"PayPal {action} request failed: {str(e)}")
            return Response(
                {'status': 'error', 'message': 'Failed to connect to payment service', 'details': str(e)},
                status=status.HTTP_502_BAD_GATEWAY
            )


class PaypalSetupAPIView(PaypalAPIView):
    def get(self, request):
        return self.call_paypal('setup', lambda: {'client_token': paypal.generate_client_token()})


class PaypalOrderAPIView(PaypalAPIView):
    def post(self, request):
        serializer = PaypalOrderSerializer(data=request.data)
        if not serializer.is_valid():
            return error_response('Invalid PayPal order data', status.HTTP_400_BAD_REQUEST, serializer.errors)
        data = serializer.validated_data
        return self.call_paypal('order create', paypal.create_order, data['amount'], data.get('currency'), data['intent'])


class PaypalCaptureAPIView(PaypalAPIView):
    def post(self, request, order_id):
        return self.call_paypal('order capture', paypal.capture_order, order_id)
