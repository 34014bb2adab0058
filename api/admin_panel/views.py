from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import AllowAny, IsAuthenticated, BasePermission
from rest_framework import status
from django.contrib.auth import authenticate, login, logout
import logging
from orders.models import Order
from api.authentication import SessionCookieAuthentication, LoginSessionAuthentication
from api.serializers import AdminUserSerializer, AdminCredentialsSerializer, AdminOrderSerializer

logger = logging.getLogger(__name__)


def is_store_admin(user):
    return bool(user and user.is_authenticated and user.is_active)


class IsStoreAdmin(BasePermission):
    def has_permission(self, request, view):
        return is_store_admin(request.user)


class AdminLoginAPIView(APIView):
    authentication_classes = [LoginSessionAuthentication]
    permission_classes = [AllowAny]

    def post(self, request):
        serializer = AdminCredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(
                {'status': 'error', 'message': 'Username and password are required', 'errors': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )

        username = serializer.validated_data['username']
        user = authenticate(request, username=username, password=serializer.validated_data['password'])
        if user is None:
            logger.warning(f"Failed admin login attempt for {username}")
            return Response(
                {'status': 'error', 'message': 'Invalid username or password'},
                status=status.HTTP_401_UNAUTHORIZED
            )

        login(request, user)
        logger.info(f"Admin {username} logged in successfully")
        return Response({
            'status': 'success',
            'message': 'Login successful',
            'user': AdminUserSerializer(user).data,
        }, status=status.HTTP_200_OK)


class AdminLogoutAPIView(APIView):
    authentication_classes = [LoginSessionAuthentication]
    permission_classes = [AllowAny]

    def post(self, request):
        username = request.user.get_username() if request.user.is_authenticated else None
        try:
            logout(request)
        except Exception as e:
            logger.error(f"Error during admin logout: {str(e)}")
            return Response(
                {'status': 'error', 'message': 'Logout failed'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        if username:
            logger.info(f"Admin {username} logged out")
        return Response({'status': 'success', 'message': 'Logout successful'}, status=status.HTTP_200_OK)


class AdminCheckAPIView(APIView):
    authentication_classes = [SessionCookieAuthentication]
    permission_classes = [AllowAny]

    def get(self, request):
        authenticated = is_store_admin(request.user)
        return Response({
            'is_authenticated': authenticated,
            'user': AdminUserSerializer(request.user).data if authenticated else None,
        }, status=status.HTTP_200_OK)


class AdminOrderListAPIView(APIView):
    authentication_classes = [SessionCookieAuthentication]
    permission_classes = [IsAuthenticated, IsStoreAdmin]

    def get(self, request):
        try:
            orders = Order.objects.prefetch_related('items__product').order_by('-created_at', '-id')
            logger.info(f"Orders retrieved by admin {request.user.username}")
            return Response(AdminOrderSerializer(orders, many=True).data, status=status.HTTP_200_OK)
        except Exception as e:
            logger.error(f"Error fetching orders for admin panel: {str(e)}")
            return Response(
                {'status': 'error', 'message': 'Failed to fetch orders'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
