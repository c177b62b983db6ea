from __future__ import annotations

from typing import Any, ClassVar, Optional

from mvcbus.patterns.notifier import Notifier


class Proxy(Notifier):
    """
    Named data holder registered with the Model.

    Proxies wrap whatever the application treats as data (a dict, a domain
    object, a remote client) and announce changes by sending notifications.

    Parameters
    ----------
    proxy_name
        Registry key. Defaults to `NAME`.
    data
        Initial data object.
    """

    NAME: ClassVar[str] = "Proxy"

    def __init__(self, proxy_name: Optional[str] = None, data: Any = None) -> None:
        self._proxy_name = self.NAME if proxy_name is None else proxy_name
        self.data = data

    @property
    def proxy_name(self) -> str:
        return self._proxy_name

    def on_register(self) -> None:
        pass

    def on_remove(self) -> None:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(proxy_name={self._proxy_name!r})"
