"""
Views for the users app.

Session-based authentication for the single-page client: CSRF cookie,
register, login, logout, the current user and password change.  Every
view is tenant scoped, so the session user is always reported together
with their role in the addressed community.
"""
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.contrib.auth import login as django_login, logout as django_logout
from django.contrib.auth import update_session_auth_hash
from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from rest_framework import status
from rest_framework.exceptions import AuthenticationFailed
from rest_framework.response import Response
from rest_framework.views import APIView

from common.exceptions import Conflict, NotAMember
from moderation.models import ModerationLog
from moderation.services import log_audit
from tenants.context import TenantScopedMixin
from tenants.models import TenantMembership
from tenants.permissions import RequireAuthenticated
from tenants.roles import TenantRole
from tenants.serializers import TenantSerializer

from .models import UserProfile
from .serializers import (
    ChangePasswordSerializer,
    LoginSerializer,
    RegisterSerializer,
    SessionUserSerializer,
)
from .throttling import AuthRateThrottle

logger = logging.getLogger(__name__)

UserModel = get_user_model()


class SessionPayloadMixin:
    def session_payload(self, user, message=None):
        ctx = self.tenant_ctx
        payload = {
            "user": SessionUserSerializer(user, context={"tenant_role": ctx.tenant_role}).data,
            "tenant": TenantSerializer(ctx.tenant).data,
        }
        if message:
            payload["message"] = message
        return payload


class CSRFCookieView(TenantScopedMixin, APIView):
    """
    GET to set the CSRF cookie. Call this before POST /auth/login from a browser.
    """
    permission_classes = []
    authentication_classes = []

    @method_decorator(ensure_csrf_cookie)
    def get(self, request, **kwargs):
        return Response({"detail": "CSRF cookie set"}, status=status.HTTP_200_OK)


class RegisterView(SessionPayloadMixin, TenantScopedMixin, APIView):
    """
    Create an account, join the addressed tenant as a member and sign in.
    """
    permission_classes = []
    authentication_classes = []
    throttle_classes = [AuthRateThrottle]

    @method_decorator(ensure_csrf_cookie)
    def post(self, request, **kwargs):
        serializer = RegisterSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        if UserModel.objects.filter(username=data["username"]).exists():
            raise Conflict("This username is already taken.")
        if UserModel.objects.filter(email__iexact=data["email"]).exists():
            raise Conflict("This email address is already registered.")

        tenant = self.tenant
        try:
            with transaction.atomic():
                user = UserModel.objects.create_user(
                    username=data["username"], email=data["email"], password=data["password"]
                )
                UserProfile.objects.filter(user=user).update(
                    display_name=data.get("display_name") or data["username"]
                )
                TenantMembership.objects.get_or_create(
                    tenant=tenant, user=user, defaults={"role": TenantRole.MEMBER}
                )
        except IntegrityError:
            logger.info("Registration race on username=%s", data["username"])
            raise Conflict("This username or email is already registered.")

        user = UserModel.objects.select_related("profile").get(pk=user.pk)
        django_login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        request.session["tenant_id"] = tenant.pk
        self.refresh_tenant_context(user)

        log_audit(user, ModerationLog.ACTION_REGISTER, "auth", tenant.pk, tenant=tenant)
        logger.info("Registered user %s in tenant %s", user.username, tenant.slug)
        return Response(
            self.session_payload(user, message="Registration successful."),
            status=status.HTTP_201_CREATED,
        )


class LoginView(SessionPayloadMixin, TenantScopedMixin, APIView):
    """
    Session-based login. Expects JSON: {"username": "...", "password": "..."}
    On success, creates a Django session (cookie-based) bound to the tenant.
    """
    permission_classes = []
    authentication_classes = []
    throttle_classes = [AuthRateThrottle]

    @method_decorator(ensure_csrf_cookie)
    def post(self, request, **kwargs):
        serializer = LoginSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        username = serializer.validated_data["username"]
        password = serializer.validated_data["password"]

        user = UserModel.objects.select_related("profile").filter(username=username).first()
        if user is None or not user.is_active or not user.check_password(password):
            logger.info("Failed login for username=%s", username)
            raise AuthenticationFailed("Invalid username or password.")

        profile = getattr(user, "profile", None)
        if profile is not None and profile.status == UserProfile.STATUS_BANNED:
            raise AuthenticationFailed("Your account has been banned.")
        if profile is not None and profile.status == UserProfile.STATUS_SUSPENDED:
            raise AuthenticationFailed("Your account is temporarily suspended.")

        tenant = self.tenant
        if not TenantMembership.objects.filter(tenant=tenant, user=user).exists():
            raise NotAMember("You do not have access to this community.")

        django_login(request, user, backend="django.contrib.auth.backends.ModelBackend")
        request.session.cycle_key()
        request.session["tenant_id"] = tenant.pk
        UserProfile.objects.filter(user=user).update(last_login_at=timezone.now())
        self.refresh_tenant_context(user)

        log_audit(user, ModerationLog.ACTION_LOGIN, "auth", tenant.pk, tenant=tenant)
        return Response(self.session_payload(user, message="Signed in."), status=status.HTTP_200_OK)


class LogoutView(TenantScopedMixin, APIView):
    """Session-based logout. Destroys the user's session and its cookie."""
    permission_classes = []

    def post(self, request, **kwargs):
        user = request.user if request.user.is_authenticated else None
        django_logout(request)
        log_audit(user, ModerationLog.ACTION_LOGOUT, "auth", self.tenant.pk, tenant=self.tenant)
        response = Response({"message": "Signed out."}, status=status.HTTP_200_OK)
        response.delete_cookie(
            settings.SESSION_COOKIE_NAME,
            path=settings.SESSION_COOKIE_PATH,
            domain=settings.SESSION_COOKIE_DOMAIN,
        )
        return response


class MeView(SessionPayloadMixin, TenantScopedMixin, APIView):
    """Return the current session user and tenant role (401 with ``user: null`` if signed out)."""
    permission_classes = []

    def get(self, request, **kwargs):
        if not self.tenant_ctx.is_authenticated:
            return Response(
                {"message": "You are not signed in.", "user": None},
                status=status.HTTP_401_UNAUTHORIZED,
            )
        return Response(self.session_payload(request.user), status=status.HTTP_200_OK)


class ChangePasswordView(TenantScopedMixin, APIView):
    permission_classes = [RequireAuthenticated]

    def post(self, request, **kwargs):
        serializer = ChangePasswordSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = request.user
        if not user.check_password(serializer.validated_data["current_password"]):
            raise AuthenticationFailed("Current password is incorrect.")

        user.set_password(serializer.validated_data["new_password"])
        user.save(update_fields=["password"])
        UserProfile.objects.filter(user=user).update(must_change_password=False)
        update_session_auth_hash(request, user)
        return Response({"message": "Password updated."}, status=status.HTTP_200_OK)
