from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.core.utils import load_component


class QuoteView(APIView):
    permission_classes = [IsAuthenticated]

    def get(self, request):
        provider = load_component('QUOTE_PROVIDER')
        return Response(provider.get_quote(request.user))
