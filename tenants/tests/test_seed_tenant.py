import pytest
from django.core.management import CommandError, call_command

from tenants.models import Tenant, TenantMembership, TenantSettings
from tenants.roles import TenantRole


@pytest.mark.django_db
def test_seed_tenant_is_idempotent(make_user):
    make_user("founder")
    call_command("seed_tenant", "demo", "--name", "Demo", "--owner", "founder")
    call_command("seed_tenant", "demo", "--owner", "founder")

    tenant = Tenant.objects.get(slug="demo")
    assert tenant.name == "Demo"
    assert TenantSettings.objects.filter(tenant=tenant).count() == 1
    assert TenantMembership.objects.get(tenant=tenant).role == TenantRole.OWNER


@pytest.mark.django_db
def test_seed_tenant_unknown_owner():
    with pytest.raises(CommandError):
        call_command("seed_tenant", "demo", "--owner", "ghost")
