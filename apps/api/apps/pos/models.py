"""POS models - multi-item checkout orders."""
from django.db import models
from django.utils import timezone
from django.utils.translation import gettext_lazy as _

from .calculator import calculate_line_subtotal


class PaymentMethodChoices(models.TextChoices):
    """Payment methods accepted at the counter."""
    CASH = 'cash', _('Cash')
    DEBIT = 'debit', _('Debit Card')
    CREDIT = 'credit', _('Credit Card')
    TRANSFER = 'transfer', _('Bank Transfer')


class Order(models.Model):
    """
    POS order (checkout).

    Business Rules:
    - total must equal the sum of its items' subtotals
    - an order always has at least one item
    - items are written together with the order and never modified
    """
    total = models.DecimalField(
        _('Total'),
        max_digits=12,
        decimal_places=2,
        help_text=_('Sum of item subtotals')
    )
    payment_method = models.CharField(
        _('Payment Method'),
        max_length=20,
        choices=PaymentMethodChoices.choices
    )
    ordered_at = models.DateTimeField(_('Ordered At'), default=timezone.now, db_index=True)

    class Meta:
        db_table = 'pos_orders'
        ordering = ['-ordered_at', '-id']
        verbose_name = _('Order')
        verbose_name_plural = _('Orders')
        indexes = [
            models.Index(fields=['payment_method', '-ordered_at'], name='idx_pos_order_payment'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(total__gt=0),
                name='pos_order_total_positive'
            ),
        ]

    def __str__(self):
        return f"Order #{self.pk} - {self.total} ({self.payment_method})"

    def save(self, *args, **kwargs):
        self.full_clean()
        super().save(*args, **kwargs)


class OrderItem(models.Model):
    """
    Line item of a POS order.

    subtotal = unit_price * quantity, computed on save.
    """
    order = models.ForeignKey(
        Order,
        on_delete=models.CASCADE,
        related_name='items',
        verbose_name=_('Order')
    )
    name = models.CharField(_('Item/Service'), max_length=255)
    unit_price = models.DecimalField(
        _('Unit Price'),
        max_digits=12,
        decimal_places=2,
        help_text=_('Price per unit (must be > 0)')
    )
    quantity = models.PositiveIntegerField(
        _('Quantity'),
        help_text=_('Must be greater than 0')
    )
    subtotal = models.DecimalField(
        _('Subtotal'),
        max_digits=12,
        decimal_places=2,
        help_text=_('Calculated as unit_price * quantity')
    )

    class Meta:
        db_table = 'pos_order_items'
        ordering = ['id']
        verbose_name = _('Order Item')
        verbose_name_plural = _('Order Items')
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name='pos_order_item_quantity_positive'
            ),
            models.CheckConstraint(
                condition=models.Q(unit_price__gt=0),
                name='pos_order_item_unit_price_positive'
            ),
        ]

    def __str__(self):
        return f"{self.name} x {self.quantity} = {self.subtotal}"

    def save(self, *args, **kwargs):
        """Calculate subtotal before saving."""
        self.subtotal = calculate_line_subtotal(self.unit_price, self.quantity)
        self.full_clean()
        super().save(*args, **kwargs)
