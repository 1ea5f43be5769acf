from __future__ import annotations

from rest_framework.response import Response
from rest_framework.views import APIView

from .base import AlarmControllerMixin


class AlarmStatusView(AlarmControllerMixin, APIView):
    def get(self, request):
        return Response(self.get_controller().status())
