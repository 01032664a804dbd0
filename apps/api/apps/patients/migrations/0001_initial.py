from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('phone_number', models.CharField(max_length=50, verbose_name='Phone Number')),
                ('complaint', models.TextField(verbose_name='Complaint')),
                ('examination_date', models.DateField(verbose_name='Examination Date')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created At')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated At')),
            ],
            options={
                'verbose_name': 'Patient',
                'verbose_name_plural': 'Patients',
                'db_table': 'patients',
                'ordering': ['-examination_date', '-created_at'],
                'indexes': [
                    models.Index(fields=['-examination_date'], name='idx_patient_exam_date'),
                    models.Index(fields=['-created_at'], name='idx_patient_created'),
                    models.Index(fields=['phone_number'], name='idx_patient_phone'),
                ],
            },
        ),
    ]
