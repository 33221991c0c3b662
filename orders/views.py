from rest_framework import generics, permissions
from drf_spectacular.utils import extend_schema, extend_schema_view

from .serializers import OrderSerializer


@extend_schema_view(
    get=extend_schema(
        tags=['Orders'],
        summary='List my orders',
        description='List the authenticated user\'s orders, newest first, with their items.',
    ),
)
class OrderListView(generics.ListAPIView):
    """
    Orders of the requesting user
    """
    serializer_class = OrderSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return self.request.user.orders.prefetch_related('items')


@extend_schema_view(
    get=extend_schema(
        tags=['Orders'],
        summary='Get order',
        description='Retrieve one of the authenticated user\'s orders.',
    ),
)
class OrderDetailView(generics.RetrieveAPIView):
    """
    Single order of the requesting user; other users' orders are not found
    """
    serializer_class = OrderSerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return self.request.user.orders.prefetch_related('items')
