from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("contact", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="contactsubmission",
            name="name",
            field=models.TextField(),
        ),
        migrations.AlterField(
            model_name="contactsubmission",
            name="email",
            field=models.TextField(),
        ),
        migrations.AlterField(
            model_name="contactsubmission",
            name="phone",
            field=models.TextField(blank=True),
        ),
        migrations.AlterField(
            model_name="contactsubmission",
            name="service",
            field=models.TextField(blank=True),
        ),
    ]
