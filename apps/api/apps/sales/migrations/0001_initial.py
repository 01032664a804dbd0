from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='SalesTransaction',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('item_name', models.CharField(max_length=255, verbose_name='Item/Service')),
                ('price', models.DecimalField(decimal_places=2, help_text='Price per unit (must be > 0)', max_digits=12, verbose_name='Price')),
                ('quantity', models.PositiveIntegerField(help_text='Must be greater than 0', verbose_name='Quantity')),
                ('total', models.DecimalField(decimal_places=2, help_text='Calculated as price * quantity', max_digits=12, verbose_name='Total')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
            ],
            options={
                'verbose_name': 'Sales Transaction',
                'verbose_name_plural': 'Sales Transactions',
                'db_table': 'sales_transactions',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['-created_at'], name='idx_sales_tx_created'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(price__gt=0), name='sales_tx_price_positive'),
                    models.CheckConstraint(condition=models.Q(quantity__gt=0), name='sales_tx_quantity_positive'),
                ],
            },
        ),
    ]
