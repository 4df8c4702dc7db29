from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Address",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("first_name", models.CharField(blank=True, max_length=255, verbose_name="Имя")),
                ("last_name", models.CharField(blank=True, max_length=255, verbose_name="Фамилия")),
                ("company", models.CharField(blank=True, max_length=255, verbose_name="Компания")),
                ("phone_number", models.CharField(blank=True, max_length=64, verbose_name="Телефон")),
                ("street", models.CharField(blank=True, max_length=255, verbose_name="Улица")),
                ("city", models.CharField(blank=True, max_length=255, verbose_name="Город")),
                ("postcode", models.CharField(blank=True, max_length=32, verbose_name="Почтовый индекс")),
                ("country_code", models.CharField(blank=True, max_length=2, verbose_name="Код страны")),
                ("province_code", models.CharField(blank=True, max_length=32, verbose_name="Код региона")),
                ("province_name", models.CharField(blank=True, max_length=255, verbose_name="Регион")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Дата создания")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Дата обновления")),
            ],
            options={
                "verbose_name": "Адрес",
                "verbose_name_plural": "Адреса",
            },
        ),
        migrations.CreateModel(
            name="Country",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("code", models.CharField(max_length=2, unique=True, verbose_name="Код страны (ISO 3166-1)")),
                ("enabled", models.BooleanField(default=True, verbose_name="Включена")),
            ],
            options={
                "verbose_name": "Страна",
                "verbose_name_plural": "Страны",
                "ordering": ["code"],
            },
        ),
    ]
