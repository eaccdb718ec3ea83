from django.db import migrations

DONATION_TYPES = (
    (1, 'Money', 'Monetary donation', 'USD'),
    (2, 'Food', 'Non-perishable food items', 'items'),
    (3, 'Clothing', 'Clean, gently used clothing', 'items'),
    (4, 'Supplies', 'School and hygiene supplies', 'items'),
)


def seed_donation_types(apps, schema_editor):
    DonationTypes = apps.get_model('volunteering', 'DonationTypes')
    for pk, name, description, unit in DONATION_TYPES:
        DonationTypes.objects.update_or_create(
            pk=pk,
            defaults={'name': name, 'description': description, 'unit_of_measure': unit},
        )


def remove_donation_types(apps, schema_editor):
    DonationTypes = apps.get_model('volunteering', 'DonationTypes')
    DonationTypes.objects.filter(pk__in=[row[0] for row in DONATION_TYPES]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ('volunteering', '0001_initial'),
    ]

    operations = [
        migrations.RunPython(seed_donation_types, remove_donation_types),
    ]
