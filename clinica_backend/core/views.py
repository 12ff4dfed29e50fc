import logging

from django.db import connection
from django.http import JsonResponse

from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from rest_framework_simplejwt.views import TokenObtainPairView

from clinica_backend.core.serializers import StaffTokenObtainPairSerializer, UserMeSerializer

logger = logging.getLogger(__name__)


def health(request):
    """Database ping; no authentication."""
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1;')
    except Exception:
        logger.exception('Health check failed')
        return JsonResponse({'status': 'error'}, status=503)

    return JsonResponse({'status': 'ok'})


class LoginView(TokenObtainPairView):
    """POST /api/auth/login/ -> {"access", "refresh", "user"}"""

    serializer_class = StaffTokenObtainPairSerializer


class MeView(APIView):
    """GET /api/auth/me/"""

    permission_classes = [IsAuthenticated]

    def get(self, request, *args, **kwargs):
        return Response(UserMeSerializer(request.user).data)
