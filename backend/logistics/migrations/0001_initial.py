from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Order",
            fields=[
                ("id", models.AutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("origin", models.TextField()),
                ("destination", models.TextField()),
                ("distance", models.PositiveIntegerField()),
                (
                    "status",
                    models.TextField(
                        choices=[("UNASSIGNED", "Unassigned"), ("TAKEN", "Taken")],
                        default="UNASSIGNED",
                    ),
                ),
            ],
            options={
                "db_table": "orders",
                "ordering": ["id"],
            },
        ),
    ]
