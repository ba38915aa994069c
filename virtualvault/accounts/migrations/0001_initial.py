# Generated manually for the user profile schema

from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=255, verbose_name='Name')),
                ('phone', models.CharField(max_length=64, verbose_name='Phone')),
                ('address', models.TextField(verbose_name='Address')),
                ('dob', models.DateField(blank=True, null=True, verbose_name='Date of birth')),
                ('answer', models.CharField(max_length=255, verbose_name='Security answer')),
                ('role', models.PositiveSmallIntegerField(choices=[(0, 'Customer'), (1, 'Admin')], default=0, verbose_name='Role')),
                ('created_at', models.DateTimeField(auto_now_add=True, verbose_name='Created')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='Updated')),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'User profile',
                'verbose_name_plural': 'User profiles',
                'indexes': [models.Index(fields=['phone'], name='idx_userprofile_phone')],
            },
        ),
    ]
