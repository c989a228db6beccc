"""
Initial migration for the users app.

Defines the `UserProfile` model.  Every user gets a profile through the
`post_save` signal, so the profile carries the global role and status.
"""
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
            name="UserProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("display_name", models.CharField(blank=True, max_length=100)),
                ("role", models.CharField(choices=[("user", "User"), ("moderator", "Moderator"), ("admin", "Admin"), ("superadmin", "Superadmin")], default="user", max_length=16)),
                ("status", models.CharField(choices=[("active", "Active"), ("suspended", "Suspended"), ("banned", "Banned")], default="active", max_length=16)),
                ("bio", models.TextField(blank=True)),
                ("avatar_url", models.URLField(blank=True)),
                ("trust_level", models.PositiveSmallIntegerField(default=0)),
                ("reputation_points", models.IntegerField(default=0)),
                ("email_verified", models.BooleanField(default=False)),
                ("must_change_password", models.BooleanField(default=False)),
                ("last_login_at", models.DateTimeField(blank=True, null=True)),
                ("user", models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name="profile", to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.AddIndex(
            model_name="userprofile",
            index=models.Index(fields=["role"], name="profile_role_idx"),
        ),
        migrations.AddIndex(
            model_name="userprofile",
            index=models.Index(fields=["status"], name="profile_status_idx"),
        ),
    ]
