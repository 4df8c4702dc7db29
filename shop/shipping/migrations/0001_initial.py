import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ShippingMethod",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=255, unique=True, verbose_name="Код")),
                ("name", models.CharField(max_length=255, verbose_name="Название")),
                ("calculator", models.CharField(max_length=255, verbose_name="Калькулятор")),
                ("configuration", models.JSONField(blank=True, default=dict, verbose_name="Настройки калькулятора")),
                ("is_enabled", models.BooleanField(default=True, verbose_name="Активен")),
                ("position", models.PositiveIntegerField(default=0, verbose_name="Порядок")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Дата создания")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Дата обновления")),
            ],
            options={
                "verbose_name": "Способ доставки",
                "verbose_name_plural": "Способы доставки",
                "ordering": ["position", "code"],
            },
        ),
        migrations.CreateModel(
            name="PickupLocation",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=64, verbose_name="Код пункта")),
                ("name", models.CharField(max_length=255, verbose_name="Название")),
                ("street", models.CharField(max_length=255, verbose_name="Улица")),
                ("postcode", models.CharField(max_length=32, verbose_name="Почтовый индекс")),
                ("city", models.CharField(max_length=255, verbose_name="Город")),
                ("country_code", models.CharField(max_length=2, verbose_name="Код страны")),
                ("opening_hours", models.TextField(blank=True, verbose_name="Часы работы")),
                ("is_enabled", models.BooleanField(default=True, verbose_name="Активен")),
                ("position", models.PositiveIntegerField(default=0, verbose_name="Порядок")),
                (
                    "method",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pickup_locations",
                        to="shipping.shippingmethod",
                        verbose_name="Способ доставки",
                    ),
                ),
            ],
            options={
                "verbose_name": "Пункт выдачи",
                "verbose_name_plural": "Пункты выдачи",
                "ordering": ["position", "name"],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("method", "code"), name="unique_pickup_location_code"
                    )
                ],
            },
        ),
    ]
