import re

from rest_framework import serializers
from django.contrib.auth import get_user_model
from catalog.models import Category, Product
from cars.models import CarBrand, CarModel
from cart.models import CartItem
from orders.models import Order, OrderItem
from .models import ContactMessage

User = get_user_model()

EMAIL_RE = re.compile(r'^\S+@\S+\.\S+$')
POSTAL_CODE_RE = re.compile(r'^\d{4,5}$')


class AdminUserSerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ['id', 'username', 'email', 'first_name', 'last_name', 'is_active', 'created_at']
        read_only_fields = fields


class CategorySerializer(serializers.ModelSerializer):
    class Meta:
        model = Category
        fields = ['id', 'name', 'name_en', 'slug', 'description', 'icon']


class CarBrandSerializer(serializers.ModelSerializer):
    class Meta:
        model = CarBrand
        fields = ['id', 'name', 'slug']


class CarModelSerializer(serializers.ModelSerializer):
    class Meta:
        model = CarModel
        fields = ['id', 'brand_id', 'name', 'slug']


class ProductSerializer(serializers.ModelSerializer):
    category_id = serializers.IntegerField(read_only=True)

    class Meta:
        model = Product
        fields = [
            'id', 'name', 'description', 'price', 'category_id', 'image_url',
            'in_stock', 'part_number', 'brand',
            'compatible_brands', 'compatible_models', 'compatible_years',
            'created_at',
        ]
        read_only_fields = fields


class CartItemSerializer(serializers.ModelSerializer):
    product = ProductSerializer(read_only=True)         # Nested product for display
    product_id = serializers.PrimaryKeyRelatedField(
        queryset=Product.objects.all(),
        source='product',
        write_only=True
    )
    quantity = serializers.IntegerField(min_value=1, default=1)

    class Meta:
        model = CartItem
        fields = ['id', 'session_id', 'product', 'product_id', 'quantity', 'created_at']
        read_only_fields = ['id', 'created_at']
        # Merging into an existing line is handled by the manager
        validators = []


class CartItemQuantitySerializer(serializers.Serializer):
    quantity = serializers.IntegerField()


class CartLineSerializer(serializers.Serializer):
    """One line of the client-held cart (price is the snapshot taken on add)."""
    product_id = serializers.IntegerField(min_value=1)
    name = serializers.CharField(max_length=255)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)
    quantity = serializers.IntegerField(min_value=1, default=1)
    image_url = serializers.CharField(required=False, allow_null=True, allow_blank=True)


class CartTotalsRequestSerializer(serializers.Serializer):
    session_id = serializers.CharField(required=False, allow_blank=True, max_length=64)
    items = CartLineSerializer(many=True)


class ShippingFormSerializer(serializers.Serializer):
    first_name = serializers.CharField(max_length=100)
    last_name = serializers.CharField(max_length=100)
    email = serializers.CharField(max_length=254)
    phone = serializers.CharField(max_length=30)
    address = serializers.CharField(max_length=255)
    city = serializers.CharField(max_length=100)
    postal_code = serializers.CharField(max_length=10)
    payment_method = serializers.ChoiceField(choices=Order.PAYMENT_METHOD_CHOICES, default='cash')

    def validate_email(self, value):
        if not EMAIL_RE.match(value):
            raise serializers.ValidationError('Invalid email format')
        return value

    def validate_phone(self, value):
        if len(value) < 8:
            raise serializers.ValidationError('Phone number must be at least 8 characters long')
        return value

    def validate_address(self, value):
        if len(value) < 5:
            raise serializers.ValidationError('Address must be at least 5 characters long')
        return value

    def validate_postal_code(self, value):
        postal_code = re.sub(r'\s', '', value)
        if not POSTAL_CODE_RE.match(postal_code):
            raise serializers.ValidationError('Postal code must contain 4-5 digits')
        return postal_code


class OrderCreateSerializer(ShippingFormSerializer):
    total = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)


class OrderLineSerializer(serializers.Serializer):
    product_id = serializers.PrimaryKeyRelatedField(queryset=Product.objects.all(), source='product')
    quantity = serializers.IntegerField(min_value=1)
    price = serializers.DecimalField(max_digits=10, decimal_places=2, min_value=0)


class OrderSubmissionSerializer(serializers.Serializer):
    order = OrderCreateSerializer()
    items = OrderLineSerializer(many=True, allow_empty=False)


class OrderItemSerializer(serializers.ModelSerializer):
    product_id = serializers.IntegerField(read_only=True)
    product_name = serializers.SerializerMethodField()

    class Meta:
        model = OrderItem
        fields = ['id', 'product_id', 'product_name', 'quantity', 'price']
        read_only_fields = fields

    def get_product_name(self, obj):
        return obj.product.name if obj.product else "N/A"


class AdminOrderItemSerializer(OrderItemSerializer):
    product = ProductSerializer(read_only=True)

    class Meta(OrderItemSerializer.Meta):
        fields = OrderItemSerializer.Meta.fields + ['product']
        read_only_fields = fields


class OrderSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = [
            'id', 'first_name', 'last_name', 'email', 'phone', 'address', 'city',
            'postal_code', 'payment_method', 'total', 'status', 'created_at', 'items',
        ]
        read_only_fields = fields


class AdminOrderSerializer(OrderSerializer):
    items = AdminOrderItemSerializer(many=True, read_only=True)


class ContactMessageSerializer(serializers.ModelSerializer):
    class Meta:
        model = ContactMessage
        fields = ['id', 'name', 'email', 'phone', 'message', 'created_at']
        read_only_fields = ['id', 'created_at']

    def validate_email(self, value):
        if not EMAIL_RE.match(value):
            raise serializers.ValidationError('Invalid email format')
        return value


class AdminCredentialsSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(trim_whitespace=False)


class PaymentIntentSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)


class PaypalOrderSerializer(serializers.Serializer):
    amount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0)
    currency = serializers.CharField(required=False, max_length=3)
    intent = serializers.ChoiceField(choices=['CAPTURE', 'AUTHORIZE'], default='CAPTURE')
