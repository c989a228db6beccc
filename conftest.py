"""
Common test fixtures for the API tests.

Provides the default tenant, a factory for users holding a given tenant
role, and Django test clients already signed in through the session.
"""
import pytest
from django.core.cache import cache
from django.contrib.auth.models import User
from django.test import Client

from forum.models import ForumCategory
from tenants.models import Tenant, TenantMembership
from tenants.roles import TenantRole


@pytest.fixture(autouse=True)
def clear_cache():
    """Throttle history lives in the cache; start every test with an empty one."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def tenant(db):
    return Tenant.objects.create(name="Akıncılar", slug="akincilar")


@pytest.fixture
def other_tenant(db):
    return Tenant.objects.create(name="Other Community", slug="other")


@pytest.fixture
def make_user(db):
    """Create a user, optionally with a membership in ``tenant`` and a global role."""

    def _make(username, tenant=None, tenant_role=TenantRole.MEMBER, global_role=None,
              status=None, password="pass12345"):
        user = User.objects.create_user(
            username=username, password=password, email=f"{username}@example.com"
        )
        changes = {}
        if global_role:
            changes["role"] = global_role
        if status:
            changes["status"] = status
        if changes:
            for field, value in changes.items():
                setattr(user.profile, field, value)
            user.profile.save(update_fields=list(changes))
        if tenant is not None and tenant_role is not None:
            TenantMembership.objects.create(tenant=tenant, user=user, role=tenant_role)
        return user

    return _make


@pytest.fixture
def owner(make_user, tenant):
    return make_user("owner", tenant, TenantRole.OWNER)


@pytest.fixture
def tenant_admin(make_user, tenant):
    return make_user("admin1", tenant, TenantRole.ADMIN)


@pytest.fixture
def moderator(make_user, tenant):
    return make_user("mod1", tenant, TenantRole.MODERATOR)


@pytest.fixture
def member(make_user, tenant):
    return make_user("member1", tenant, TenantRole.MEMBER)


@pytest.fixture
def client_for(db):
    """Return a test client signed in as ``user``."""

    def _client(user):
        c = Client()
        c.force_login(user)
        return c

    return _client


@pytest.fixture
def category(tenant):
    return ForumCategory.objects.create(tenant=tenant, name="General", slug="general")
