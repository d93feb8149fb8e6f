from decimal import Decimal

import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='ViewType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='e.g., Sea View, Garden View', max_length=100, unique=True)),
                ('price_difference', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Typical price difference vs. standard view in USD', max_digits=10)),
            ],
            options={
                'verbose_name': 'View Type',
                'verbose_name_plural': 'View Types',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='RoomType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='e.g., Standard Room, Deluxe Room, Suite', max_length=100, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('capacity', models.PositiveIntegerField(default=2, help_text='Maximum number of guests', validators=[django.core.validators.MinValueValidator(1)])),
                ('base_price', models.DecimalField(decimal_places=2, help_text='Base nightly price in USD', max_digits=10, validators=[django.core.validators.MinValueValidator(Decimal('0.00'))])),
                ('sort_order', models.PositiveIntegerField(default=0, help_text='Display order')),
                ('view_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='room_types', to='hotel_pricing.viewtype')),
            ],
            options={
                'verbose_name': 'Room Type',
                'verbose_name_plural': 'Room Types',
                'ordering': ['sort_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='MealPlan',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='e.g., Room Only, Bed & Breakfast', max_length=100)),
                ('code', models.CharField(help_text='e.g., RO, BB, HB, FB, AI', max_length=10, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('per_person_rate', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Meal cost per person in USD', max_digits=10)),
                ('per_room_rate', models.DecimalField(blank=True, decimal_places=2, help_text='Meal cost per room in USD (takes precedence over per person)', max_digits=10, null=True)),
                ('is_active', models.BooleanField(default=True)),
                ('sort_order', models.PositiveIntegerField(default=0, help_text='Display order')),
            ],
            options={
                'verbose_name': 'Meal Plan',
                'verbose_name_plural': 'Meal Plans',
                'ordering': ['sort_order', 'code'],
            },
        ),
        migrations.CreateModel(
            name='StayType',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(max_length=100, unique=True)),
                ('hours', models.PositiveIntegerField(blank=True, null=True, validators=[django.core.validators.MinValueValidator(1)])),
                ('rate_multiplier', models.DecimalField(decimal_places=2, default=Decimal('1.00'), help_text='Multiplier applied to the base nightly price (typically 0.1 - 2.0)', max_digits=5, validators=[django.core.validators.MinValueValidator(Decimal('0.01')), django.core.validators.MaxValueValidator(Decimal('10.00'))])),
                ('description', models.TextField(blank=True, default='')),
            ],
            options={
                'verbose_name': 'Stay Type',
                'verbose_name_plural': 'Stay Types',
                'ordering': ['name'],
            },
        ),
        migrations.CreateModel(
            name='Channel',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='e.g., Booking.com, Direct, Travel Agent', max_length=100, unique=True)),
                ('type', models.CharField(blank=True, default='', help_text='e.g., OTA, DIRECT, WEB, TA', max_length=50)),
                ('contact_person', models.CharField(blank=True, default='', max_length=100)),
                ('status', models.CharField(choices=[('active', 'Active'), ('inactive', 'Inactive')], default='active', max_length=20)),
                ('price_modifier_percent', models.DecimalField(blank=True, decimal_places=2, help_text='Percentage applied to every price sold through this channel', max_digits=6, null=True)),
                ('sort_order', models.PositiveIntegerField(default=0, help_text='Display order')),
            ],
            options={
                'verbose_name': 'Channel',
                'verbose_name_plural': 'Channels',
                'ordering': ['sort_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='Season',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(help_text='e.g., Low Season, Peak Season', max_length=100)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField(help_text='Inclusive')),
                ('price_modifier_percent', models.DecimalField(blank=True, decimal_places=2, help_text='Percentage applied to prices for dates in this season', max_digits=6, null=True)),
                ('is_active', models.BooleanField(default=True)),
            ],
            options={
                'verbose_name': 'Season',
                'verbose_name_plural': 'Seasons',
                'ordering': ['start_date', 'name'],
            },
        ),
        migrations.CreateModel(
            name='ChannelPricing',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('modifier_type', models.CharField(choices=[('percentage', 'Percentage (%)'), ('fixed', 'Fixed Amount ($)')], default='percentage', max_length=20)),
                ('modifier_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Percent (e.g., 10 for +10%) or amount (e.g., -20 for $20 off)', max_digits=10)),
                ('channel', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pricing_rules', to='hotel_pricing.channel')),
                ('room_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='channel_pricing', to='hotel_pricing.roomtype')),
            ],
            options={
                'verbose_name': 'Channel Pricing',
                'verbose_name_plural': 'Channel Pricing',
                'ordering': ['channel', 'room_type', 'id'],
            },
        ),
        migrations.CreateModel(
            name='SeasonalPricing',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('modifier_type', models.CharField(choices=[('percentage', 'Percentage (%)'), ('fixed', 'Fixed Amount ($)')], default='percentage', max_length=20)),
                ('modifier_value', models.DecimalField(decimal_places=2, default=Decimal('0.00'), help_text='Percent (e.g., 15 for +15%) or amount (e.g., 25 for +$25)', max_digits=10)),
                ('room_type', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='seasonal_pricing', to='hotel_pricing.roomtype')),
                ('season', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pricing_rules', to='hotel_pricing.season')),
            ],
            options={
                'verbose_name': 'Seasonal Pricing',
                'verbose_name_plural': 'Seasonal Pricing',
                'ordering': ['season', 'room_type', 'id'],
            },
        ),
    ]
