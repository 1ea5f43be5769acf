from __future__ import annotations

from config.domain_exceptions import ServiceUnavailableError


class StateStoreError(RuntimeError):
    pass


class StateUnavailableError(ServiceUnavailableError):
    pass
