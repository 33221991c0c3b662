from decimal import Decimal

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from .models import Order, OrderItem

User = get_user_model()


class OrderAPITest(APITestCase):
    """Test cases for the order history endpoints"""

    def setUp(self):
        self.user = User.objects.create_user(email="jane@example.com", password="testpass123")
        self.other = User.objects.create_user(email="john@example.com", password="testpass123")

        self.order = Order.objects.create(user=self.user, total=Decimal("39.98"))
        OrderItem.objects.create(order=self.order, name="Mouse", quantity=2, price=Decimal("19.99"))
        self.other_order = Order.objects.create(user=self.other, total=Decimal("5.00"))

        self.client.force_authenticate(self.user)

    def test_list_own_orders(self):
        response = self.client.get(reverse('orders:order_list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([o['id'] for o in response.data], [self.order.pk])
        self.assertEqual(response.data[0]['status'], 'PENDING')
        self.assertEqual(response.data[0]['items'][0]['name'], 'Mouse')

    def test_get_own_order(self):
        response = self.client.get(reverse('orders:order_detail', kwargs={'pk': self.order.pk}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data['items']), 1)

    def test_other_users_order_not_found(self):
        response = self.client.get(reverse('orders:order_detail', kwargs={'pk': self.other_order.pk}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_requires_authentication(self):
        self.client.force_authenticate(None)
        response = self.client.get(reverse('orders:order_list'))
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_line_total(self):
        self.assertEqual(self.order.items.get().line_total, Decimal("39.98"))

    def test_cascade_from_user(self):
        self.user.delete()

        self.assertFalse(Order.objects.filter(pk=self.order.pk).exists())
        self.assertFalse(OrderItem.objects.exists())
