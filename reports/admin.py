from django.contrib import admin

from .models import (
    ExpenseByCategory,
    ExpenseSummary,
    Purchase,
    PurchaseSummary,
    Sale,
    SalesSummary,
)


@admin.register(Sale)
class SaleAdmin(admin.ModelAdmin):
    list_display = ['product', 'quantity', 'unit_price', 'total_amount', 'timestamp']
    list_filter = ['timestamp']
    search_fields = ['product__name', 'product__product_id']
    date_hierarchy = 'timestamp'
    raw_id_fields = ['product']


@admin.register(Purchase)
class PurchaseAdmin(admin.ModelAdmin):
    list_display = ['product', 'quantity', 'unit_cost', 'total_cost', 'timestamp']
    list_filter = ['timestamp']
    search_fields = ['product__name', 'product__product_id']
    date_hierarchy = 'timestamp'
    raw_id_fields = ['product']


@admin.register(SalesSummary)
class SalesSummaryAdmin(admin.ModelAdmin):
    list_display = ['date', 'total_value', 'change_percentage']
    date_hierarchy = 'date'


@admin.register(PurchaseSummary)
class PurchaseSummaryAdmin(admin.ModelAdmin):
    list_display = ['date', 'total_purchased', 'change_percentage']
    date_hierarchy = 'date'


class ExpenseByCategoryInline(admin.TabularInline):
    model = ExpenseByCategory
    extra = 0


@admin.register(ExpenseSummary)
class ExpenseSummaryAdmin(admin.ModelAdmin):
    list_display = ['date', 'total_expenses']
    date_hierarchy = 'date'
    inlines = [ExpenseByCategoryInline]


@admin.register(ExpenseByCategory)
class ExpenseByCategoryAdmin(admin.ModelAdmin):
    list_display = ['category', 'amount', 'date', 'expense_summary']
    list_filter = ['category']
    search_fields = ['category']
