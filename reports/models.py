from django.db import models
from django.utils import timezone

from products.models import Product


class Sale(models.Model):
    """A sale of a product"""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='sales'
    )
    timestamp = models.DateTimeField(default=timezone.now)
    quantity = models.IntegerField()
    unit_price = models.DecimalField(max_digits=10, decimal_places=2)
    total_amount = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        ordering = ['-timestamp']
        verbose_name = 'Sale'
        verbose_name_plural = 'Sales'

    def __str__(self):
        return f"{self.quantity} x {self.product_id} @ {self.unit_price}"


class Purchase(models.Model):
    """A restocking purchase of a product"""

    product = models.ForeignKey(
        Product,
        on_delete=models.CASCADE,
        related_name='purchases'
    )
    timestamp = models.DateTimeField(default=timezone.now)
    quantity = models.IntegerField()
    unit_cost = models.DecimalField(max_digits=10, decimal_places=2)
    total_cost = models.DecimalField(max_digits=12, decimal_places=2)

    class Meta:
        ordering = ['-timestamp']
        verbose_name = 'Purchase'
        verbose_name_plural = 'Purchases'

    def __str__(self):
        return f"{self.quantity} x {self.product_id} @ {self.unit_cost}"


# Summary tables are filled by reporting jobs outside this service

class SalesSummary(models.Model):
    total_value = models.DecimalField(max_digits=14, decimal_places=2)
    change_percentage = models.FloatField(blank=True, null=True)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date']
        verbose_name = 'Sales Summary'
        verbose_name_plural = 'Sales Summaries'

    def __str__(self):
        return f"Sales {self.date:%Y-%m-%d}: {self.total_value}"


class PurchaseSummary(models.Model):
    total_purchased = models.DecimalField(max_digits=14, decimal_places=2)
    change_percentage = models.FloatField(blank=True, null=True)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date']
        verbose_name = 'Purchase Summary'
        verbose_name_plural = 'Purchase Summaries'

    def __str__(self):
        return f"Purchases {self.date:%Y-%m-%d}: {self.total_purchased}"


class ExpenseSummary(models.Model):
    total_expenses = models.DecimalField(max_digits=14, decimal_places=2)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date']
        verbose_name = 'Expense Summary'
        verbose_name_plural = 'Expense Summaries'

    def __str__(self):
        return f"Expenses {self.date:%Y-%m-%d}: {self.total_expenses}"


class ExpenseByCategory(models.Model):
    """Breakdown line of an expense summary"""

    expense_summary = models.ForeignKey(
        ExpenseSummary,
        on_delete=models.CASCADE,
        related_name='by_category'
    )
    category = models.CharField(max_length=100)
    amount = models.DecimalField(max_digits=14, decimal_places=2)
    date = models.DateTimeField(default=timezone.now)

    class Meta:
        ordering = ['-date', 'category']
        verbose_name = 'Expense by Category'
        verbose_name_plural = 'Expenses by Category'

    def __str__(self):
        return f"{self.category}: {self.amount}"
