"""
API tests for the content app: public post reads and the admin CRUD.
"""
import pytest
from django.test import Client
from django.utils import timezone

from content.models import Post
from moderation.models import ModerationLog


@pytest.fixture
def published_post(tenant, owner):
    return Post.objects.create(
        tenant=tenant, author=owner, title="Duyuru", slug="duyuru", content="...",
        status=Post.STATUS_PUBLISHED, published_at=timezone.now(),
    )


@pytest.mark.django_db
def test_public_list_hides_drafts(tenant, owner, published_post):
    Post.objects.create(tenant=tenant, author=owner, title="Taslak", slug="taslak", content="...")
    resp = Client().get("/api/posts")
    assert resp.status_code == 200
    assert [p["slug"] for p in resp.json()["posts"]] == ["duyuru"]


@pytest.mark.django_db
def test_post_detail_by_id_or_slug(published_post):
    by_slug = Client().get("/api/posts/duyuru")
    by_id = Client().get(f"/api/posts/{published_post.id}")
    assert by_slug.status_code == by_id.status_code == 200
    assert by_slug.json()["post"]["id"] == by_id.json()["post"]["id"] == published_post.id
    assert Client().get("/api/posts/missing").status_code == 404


@pytest.mark.django_db
def test_admin_post_crud(client_for, owner):
    client = client_for(owner)
    resp = client.post(
        "/api/admin/posts",
        {"title": "Yeni Yazı", "content": "Gövde", "status": "published"},
        content_type="application/json",
    )
    assert resp.status_code == 201
    post = resp.json()
    assert post["slug"] == "yeni-yazı"
    assert post["published_at"] is not None
    assert post["author"]["username"] == "owner"

    resp = client.patch(f"/api/admin/posts/{post['id']}", {"title": "Güncel"}, content_type="application/json")
    assert resp.status_code == 200
    assert resp.json()["title"] == "Güncel"

    assert client.delete(f"/api/admin/posts/{post['id']}").status_code == 204
    actions = list(ModerationLog.objects.order_by("id").values_list("action_type", flat=True))
    assert actions == ["post_create", "post_update", "post_delete"]


@pytest.mark.django_db
def test_admin_post_duplicate_slug_is_409(client_for, owner, published_post):
    resp = client_for(owner).post(
        "/api/admin/posts",
        {"title": "Duyuru", "slug": "duyuru", "content": "..."},
        content_type="application/json",
    )
    assert resp.status_code == 409


@pytest.mark.django_db
def test_member_cannot_manage_posts(client_for, member):
    resp = client_for(member).post(
        "/api/admin/posts", {"title": "X yazısı", "content": "..."}, content_type="application/json"
    )
    assert resp.status_code == 403
