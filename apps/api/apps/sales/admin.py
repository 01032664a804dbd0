from django.contrib import admin

from .models import SalesTransaction


@admin.register(SalesTransaction)
class SalesTransactionAdmin(admin.ModelAdmin):
    list_display = ['id', 'item_name', 'price', 'quantity', 'total', 'created_at']
    list_filter = ['created_at']
    search_fields = ['item_name']
    readonly_fields = ['id', 'total', 'created_at', 'updated_at']
    date_hierarchy = 'created_at'

    fieldsets = (
        ('Item', {
            'fields': ('id', 'item_name')
        }),
        ('Financial', {
            'fields': ('price', 'quantity', 'total')
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
