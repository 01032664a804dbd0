"""Sales models - single-item sales and service transactions."""
from django.db import models
from django.utils.translation import gettext_lazy as _

from apps.pos.calculator import calculate_line_subtotal


class SalesTransaction(models.Model):
    """
    A standalone sale of one item or service.

    Business Rules:
    - item_name must not be blank
    - price must be > 0 with at most two decimal places
    - quantity must be > 0
    - total = price * quantity, recomputed on every save
    """
    item_name = models.CharField(_('Item/Service'), max_length=255)
    price = models.DecimalField(
        _('Price'),
        max_digits=12,
        decimal_places=2,
        help_text=_('Price per unit (must be > 0)')
    )
    quantity = models.PositiveIntegerField(
        _('Quantity'),
        help_text=_('Must be greater than 0')
    )
    total = models.DecimalField(
        _('Total'),
        max_digits=12,
        decimal_places=2,
        help_text=_('Calculated as price * quantity')
    )

    # Timestamps
    created_at = models.DateTimeField(_('Created At'), auto_now_add=True)
    updated_at = models.DateTimeField(_('Updated At'), auto_now=True)

    class Meta:
        db_table = 'sales_transactions'
        ordering = ['-created_at', '-id']
        verbose_name = _('Sales Transaction')
        verbose_name_plural = _('Sales Transactions')
        indexes = [
            models.Index(fields=['-created_at'], name='idx_sales_tx_created'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(price__gt=0),
                name='sales_tx_price_positive'
            ),
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name='sales_tx_quantity_positive'
            ),
        ]

    def __str__(self):
        return f"{self.item_name} x {self.quantity} = {self.total}"

    def save(self, *args, **kwargs):
        """Recompute total from price and quantity, then validate."""
        if isinstance(self.item_name, str):
            self.item_name = self.item_name.strip()
        self.total = calculate_line_subtotal(self.price, self.quantity, price_field='price')
        self.full_clean()
        super().save(*args, **kwargs)
