"""
Initial migration for the moderation app.

Creates the append-only `ModerationLog` audit table.
"""
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("tenants", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ModerationLog",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("action_type", models.CharField(choices=[("register", "Register"), ("login", "Login"), ("logout", "Logout"), ("thread_lock", "Thread lock"), ("thread_delete", "Thread delete"), ("reply_delete", "Reply delete"), ("event_create", "Event create"), ("event_update", "Event update"), ("event_delete", "Event delete"), ("post_create", "Post create"), ("post_update", "Post update"), ("post_delete", "Post delete"), ("role_change", "Role change"), ("member_remove", "Member remove"), ("site_content_update", "Site content update")], max_length=32)),
                ("target_type", models.CharField(max_length=32)),
                ("target_id", models.CharField(max_length=64)),
                ("reason", models.TextField(blank=True, default="")),
                ("metadata", models.JSONField(blank=True, default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("actor", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="moderation_logs", to=settings.AUTH_USER_MODEL)),
                ("tenant", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="moderation_logs", to="tenants.tenant")),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
        migrations.AddIndex(
            model_name="moderationlog",
            index=models.Index(fields=["tenant", "created_at"], name="modlog_tenant_created_idx"),
        ),
        migrations.AddIndex(
            model_name="moderationlog",
            index=models.Index(fields=["action_type", "created_at"], name="modlog_action_created_idx"),
        ),
    ]
