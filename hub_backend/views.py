from django.utils import timezone
from rest_framework.response import Response
from rest_framework.views import APIView


class HealthView(APIView):
    """Liveness check; does not touch the tenant tables."""
    permission_classes = []
    authentication_classes = []

    def get(self, request, **kwargs):
        return Response({"status": "ok", "timestamp": timezone.now().isoformat()})
