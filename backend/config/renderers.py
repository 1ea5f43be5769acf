from __future__ import annotations

from rest_framework.negotiation import BaseContentNegotiation
from rest_framework.renderers import BaseRenderer


class PlainTextRenderer(BaseRenderer):
    media_type = "text/plain"
    format = "txt"
    charset = "utf-8"

    def render(self, data, accepted_media_type=None, renderer_context=None):
        if data is None:
            return b""
        if isinstance(data, dict):
            # DRF's own errors arrive as {"detail": ...}.
            data = data.get("detail", "")
        return str(data).encode(self.charset)


class IgnoreClientContentNegotiation(BaseContentNegotiation):
    """
    Sensors and scripts hit the daemon with whatever Accept header their HTTP
    client sends; always answer with the first configured renderer.
    """

    def select_parser(self, request, parsers):
        return parsers[0]

    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)
