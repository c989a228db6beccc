"""
Initial migration for the forum app.

Creates categories, threads (with their reply/view counters), replies,
reactions and thread subscriptions.
"""
from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ("tenants", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ForumCategory",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=255)),
                ("slug", models.SlugField(allow_unicode=True, max_length=255)),
                ("description", models.TextField(blank=True, default="")),
                ("is_locked", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forum_categories", to="tenants.tenant")),
            ],
            options={"ordering": ["created_at", "id"], "verbose_name_plural": "forum categories"},
        ),
        migrations.CreateModel(
            name="ForumThread",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=255)),
                ("slug", models.SlugField(allow_unicode=True, max_length=255)),
                ("body", models.TextField()),
                ("is_pinned", models.BooleanField(default=False)),
                ("is_locked", models.BooleanField(default=False)),
                ("is_hidden", models.BooleanField(default=False)),
                ("views_count", models.PositiveIntegerField(default=0)),
                ("replies_count", models.PositiveIntegerField(default=0)),
                ("last_activity_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("author", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forum_threads", to=settings.AUTH_USER_MODEL)),
                ("category", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="threads", to="forum.forumcategory")),
                ("tenant", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forum_threads", to="tenants.tenant")),
            ],
            options={"ordering": ["-is_pinned", "-created_at"]},
        ),
        migrations.CreateModel(
            name="ForumReply",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("body", models.TextField()),
                ("is_hidden", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("author", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forum_replies", to=settings.AUTH_USER_MODEL)),
                ("thread", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="replies", to="forum.forumthread")),
            ],
            options={"ordering": ["created_at", "id"], "verbose_name_plural": "forum replies"},
        ),
        migrations.CreateModel(
            name="ForumReaction",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("target_type", models.CharField(choices=[("thread", "Thread"), ("reply", "Reply"), ("category", "Category"), ("post", "Post")], max_length=16)),
                ("target_id", models.PositiveBigIntegerField()),
                ("reaction_type", models.CharField(choices=[("like", "Like"), ("helpful", "Helpful"), ("save", "Save"), ("follow", "Follow")], default="like", max_length=16)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forum_reactions", to=settings.AUTH_USER_MODEL)),
            ],
            options={"ordering": ["-created_at", "-id"]},
        ),
        migrations.CreateModel(
            name="ForumSubscription",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("thread", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="subscriptions", to="forum.forumthread")),
                ("user", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="forum_subscriptions", to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.AddIndex(
            model_name="forumthread",
            index=models.Index(fields=["tenant", "created_at"], name="thread_tenant_created_idx"),
        ),
        migrations.AddIndex(
            model_name="forumthread",
            index=models.Index(fields=["tenant", "last_activity_at"], name="thread_tenant_activity_idx"),
        ),
        migrations.AddIndex(
            model_name="forumthread",
            index=models.Index(fields=["category", "is_pinned", "created_at"], name="thread_category_idx"),
        ),
        migrations.AddIndex(
            model_name="forumreply",
            index=models.Index(fields=["thread", "created_at"], name="reply_thread_created_idx"),
        ),
        migrations.AddIndex(
            model_name="forumreaction",
            index=models.Index(fields=["target_type", "target_id"], name="reaction_target_idx"),
        ),
        migrations.AddConstraint(
            model_name="forumreaction",
            constraint=models.UniqueConstraint(fields=("user", "target_type", "target_id", "reaction_type"), name="uniq_forum_reaction"),
        ),
        migrations.AddConstraint(
            model_name="forumsubscription",
            constraint=models.UniqueConstraint(fields=("user", "thread"), name="uniq_forum_subscription"),
        ),
    ]
