"""Server-wide information."""
from __future__ import annotations

from ..representation import ServerInfo
from .base import Resource


class ServerInfoResource(Resource):

    def get(self) -> ServerInfo:
        """Version, enabled features, providers and themes of the server."""
        return self._get_representation(ServerInfo, "/admin/serverinfo")
