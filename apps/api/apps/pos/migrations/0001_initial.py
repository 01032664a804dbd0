import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('total', models.DecimalField(decimal_places=2, help_text='Sum of item subtotals', max_digits=12, verbose_name='Total')),
                ('payment_method', models.CharField(choices=[('cash', 'Cash'), ('debit', 'Debit Card'), ('credit', 'Credit Card'), ('transfer', 'Bank Transfer')], max_length=20, verbose_name='Payment Method')),
                ('ordered_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now, verbose_name='Ordered At')),
            ],
            options={
                'verbose_name': 'Order',
                'verbose_name_plural': 'Orders',
                'db_table': 'pos_orders',
                'ordering': ['-ordered_at', '-id'],
                'indexes': [
                    models.Index(fields=['payment_method', '-ordered_at'], name='idx_pos_order_payment'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(total__gt=0), name='pos_order_total_positive'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OrderItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Item/Service')),
                ('unit_price', models.DecimalField(decimal_places=2, help_text='Price per unit (must be > 0)', max_digits=12, verbose_name='Unit Price')),
                ('quantity', models.PositiveIntegerField(help_text='Must be greater than 0', verbose_name='Quantity')),
                ('subtotal', models.DecimalField(decimal_places=2, help_text='Calculated as unit_price * quantity', max_digits=12, verbose_name='Subtotal')),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='pos.order', verbose_name='Order')),
            ],
            options={
                'verbose_name': 'Order Item',
                'verbose_name_plural': 'Order Items',
                'db_table': 'pos_order_items',
                'ordering': ['id'],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(quantity__gt=0), name='pos_order_item_quantity_positive'),
                    models.CheckConstraint(condition=models.Q(unit_price__gt=0), name='pos_order_item_unit_price_positive'),
                ],
            },
        ),
    ]
