from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    model = OrderItem
    extra = 0


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    """
    Admin interface for Order model.
    """
    list_display = ['id', 'user', 'date', 'status', 'total']
    list_filter = ['status', 'date']
    search_fields = ['user__email', 'items__name']
    autocomplete_fields = ['user']
    inlines = [OrderItemInline]
    ordering = ['-date']
    date_hierarchy = 'date'

    actions = ['mark_as_shipped', 'mark_as_cancelled']

    @admin.action(description='Mark selected orders as shipped')
    def mark_as_shipped(self, request, queryset):
        updated = queryset.update(status='SHIPPED')
        self.message_user(request, f'{updated} orders marked as shipped.')

    @admin.action(description='Mark selected orders as cancelled')
    def mark_as_cancelled(self, request, queryset):
        updated = queryset.update(status='CANCELLED')
        self.message_user(request, f'{updated} orders marked as cancelled.')
