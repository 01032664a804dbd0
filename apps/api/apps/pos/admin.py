from django.contrib import admin

from .models import Order, OrderItem


class OrderItemInline(admin.TabularInline):
    """Read-only items; orders are immutable once checked out."""
    model = OrderItem
    extra = 0
    fields = ['name', 'unit_price', 'quantity', 'subtotal']
    readonly_fields = fields
    can_delete = False

    def has_add_permission(self, request, obj=None):
        return False


@admin.register(Order)
class OrderAdmin(admin.ModelAdmin):
    list_display = ['id', 'payment_method', 'total', 'ordered_at']
    list_filter = ['payment_method', 'ordered_at']
    readonly_fields = ['id', 'total', 'payment_method', 'ordered_at']
    date_hierarchy = 'ordered_at'
    inlines = [OrderItemInline]

    def has_add_permission(self, request):
        return False
