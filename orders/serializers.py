from rest_framework import serializers

from .models import Order, OrderItem


class OrderItemSerializer(serializers.ModelSerializer):
    """Serializer for order lines"""

    class Meta:
        model = OrderItem
        fields = ('id', 'name', 'quantity', 'price')


class OrderSerializer(serializers.ModelSerializer):
    """Serializer for an order with its items"""
    items = OrderItemSerializer(many=True, read_only=True)

    class Meta:
        model = Order
        fields = ('id', 'date', 'status', 'total', 'items')
        read_only_fields = fields
