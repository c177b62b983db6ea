from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from mvcbus.logger import get_logger
from mvcbus.patterns.proxy import Proxy

log = get_logger("model")


@dataclass(eq=False)
class Model:
    """
    Registry of named proxies.

    Notes
    -----
    - Registering a proxy under a name already in use replaces the previous
      proxy. The replaced proxy does not get `on_remove`.
    - Lookups of unknown names return None.

    Attributes
    ----------
    _proxies
        Internal mapping of proxy name to Proxy.
    """

    _proxies: Dict[str, Proxy] = field(default_factory=dict, repr=False)

    def register_proxy(self, proxy: Proxy) -> None:
        """
        Store ``proxy`` under its name, then call its `on_register` hook.
        """
        self._proxies[proxy.proxy_name] = proxy
        log.debug("registered proxy %r", proxy.proxy_name)
        proxy.on_register()

    def retrieve_proxy(self, proxy_name: str) -> Optional[Proxy]:
        """
        Retrieve a proxy by name.

        Returns
        -------
        Proxy or None
            The registered proxy, or None if the name is unknown.
        """
        return self._proxies.get(proxy_name)

    def has_proxy(self, proxy_name: str) -> bool:
        return proxy_name in self._proxies

    def remove_proxy(self, proxy_name: str) -> Optional[Proxy]:
        """
        Remove a proxy and call its `on_remove` hook.

        Returns
        -------
        Proxy or None
            The removed proxy, or None if nothing was registered.
        """
        proxy = self._proxies.pop(proxy_name, None)
        if proxy is None:
            return None
        log.debug("removed proxy %r", proxy_name)
        proxy.on_remove()
        return proxy

    def proxy_names(self) -> List[str]:
        """Registered proxy names in registration order."""
        return list(self._proxies)
