from decimal import Decimal

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.urls import reverse

from products.models import Product

from .models import ExpenseByCategory, ExpenseSummary, Purchase, Sale

User = get_user_model()


class ReportModelTest(TestCase):
    """Test cases for sales, purchases and summaries"""

    def setUp(self):
        self.product = Product.objects.create(product_id="p1", name="Mouse", price=Decimal("19.99"))

    def test_product_delete_cascades(self):
        Sale.objects.create(
            product=self.product, quantity=2,
            unit_price=Decimal("19.99"), total_amount=Decimal("39.98")
        )
        Purchase.objects.create(
            product=self.product, quantity=10,
            unit_cost=Decimal("8.00"), total_cost=Decimal("80.00")
        )

        self.product.delete()

        self.assertFalse(Sale.objects.exists())
        self.assertFalse(Purchase.objects.exists())

    def test_expense_breakdown_cascades(self):
        summary = ExpenseSummary.objects.create(total_expenses=Decimal("100.00"))
        ExpenseByCategory.objects.create(
            expense_summary=summary, category="Shipping", amount=Decimal("40.00")
        )

        summary.delete()

        self.assertFalse(ExpenseByCategory.objects.exists())


class ReportAdminTest(TestCase):

    def setUp(self):
        admin = User.objects.create_superuser(email="admin@example.com", password="adminpass123")
        self.client.force_login(admin)

    def test_changelists_render(self):
        for model in ['sale', 'purchase', 'salessummary', 'purchasesummary',
                      'expensesummary', 'expensebycategory']:
            response = self.client.get(reverse(f'admin:reports_{model}_changelist'))
            self.assertEqual(response.status_code, 200, model)
