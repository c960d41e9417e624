from django.db import migrations, models


def fill_tags_text(apps, schema_editor):
    Store = apps.get_model('stores', 'Store')
    for store in Store.objects.only('pk', 'tags').iterator():
        text = "\n".join(str(tag) for tag in store.tags or [])
        Store.objects.filter(pk=store.pk).update(tags_text=text)


class Migration(migrations.Migration):

    dependencies = [
        ('stores', '0001_initial'),
    ]

    operations = [
        migrations.AddField(
            model_name='store',
            name='tags_text',
            field=models.TextField(blank=True, editable=False),
        ),
        migrations.RunPython(fill_tags_text, migrations.RunPython.noop),
    ]
