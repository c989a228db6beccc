from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from tenants.models import Tenant, TenantMembership, TenantSettings
from tenants.roles import TenantRole

User = get_user_model()


class Command(BaseCommand):
    help = "Create (or update) a tenant with its settings row and an owner membership."

    def add_arguments(self, parser):
        parser.add_argument("slug")
        parser.add_argument("--name", default="")
        parser.add_argument("--plan", default=Tenant.PLAN_FREE, choices=[c[0] for c in Tenant.PLAN_CHOICES])
        parser.add_argument("--owner", help="Username that becomes the tenant owner.")
        parser.add_argument("--site-title", default="")

    @transaction.atomic
    def handle(self, *args, **options):
        slug = options["slug"]
        tenant, created = Tenant.objects.get_or_create(
            slug=slug,
            defaults={"name": options["name"] or slug, "plan": options["plan"]},
        )
        verb = "Created" if created else "Found"
        self.stdout.write(self.style.SUCCESS(f"{verb} tenant {tenant.slug} (id={tenant.pk})"))

        TenantSettings.objects.get_or_create(
            tenant=tenant,
            defaults={"site_title": options["site_title"] or tenant.name},
        )

        username = options.get("owner")
        if not username:
            return
        try:
            owner = User.objects.get(username=username)
        except User.DoesNotExist:
            raise CommandError(f"User {username!r} does not exist.")

        membership, _ = TenantMembership.objects.update_or_create(
            tenant=tenant, user=owner, defaults={"role": TenantRole.OWNER}
        )
        self.stdout.write(self.style.SUCCESS(f" - {owner.username} is {membership.role} of {tenant.slug}"))
