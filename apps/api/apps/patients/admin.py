from django.contrib import admin

from .models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ['id', 'name', 'phone_number', 'examination_date', 'created_at']
    list_filter = ['examination_date', 'created_at']
    search_fields = ['name', 'phone_number']
    readonly_fields = ['created_at', 'updated_at']
    date_hierarchy = 'examination_date'
    fieldsets = [
        ('Patient', {
            'fields': ['name', 'phone_number']
        }),
        ('Visit', {
            'fields': ['complaint', 'examination_date']
        }),
        ('Metadata', {
            'fields': ['created_at', 'updated_at']
        }),
    ]
