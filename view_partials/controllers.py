"""Controllers that hold the view state partials bind against."""

import re
from typing import Any

CONTROLLER_SUFFIX = "Controller"

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_NAMESPACE_SEPARATOR = re.compile(r"::|\.")


def underscore(name: str) -> str:
    """Convert a CamelCase word to snake_case ("HTMLPage" -> "html_page")."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def controller_path_for(controller: type | str) -> str:
    """Derive the default template directory for a controller.

    ``AdvertiserController`` maps to ``advertiser`` and a namespaced name such
    as ``Admin::UserAccountsController`` (or ``Admin.UserAccountsController``)
    maps to ``admin/user_accounts``.
    """
    name = controller if isinstance(controller, str) else controller.__name__
    segments = [segment for segment in _NAMESPACE_SEPARATOR.split(name) if segment]
    if segments and segments[-1].endswith(CONTROLLER_SUFFIX) and segments[-1] != CONTROLLER_SUFFIX:
        segments[-1] = segments[-1][: -len(CONTROLLER_SUFFIX)]
    return "/".join(underscore(segment) for segment in segments)


class ViewController:
    """Per-request controller holding the state visible to partials.

    Subclass it to get a path derived from the class name, or pass
    ``controller_path`` explicitly:

        class AdvertiserController(ViewController):
            ...

        controller = AdvertiserController(account=acct)
        controller.controller_path  # "advertiser"
    """

    def __init__(self, controller_path: str | None = None, **assigns: Any):
        self.controller_path = controller_path or controller_path_for(type(self))
        self.assigns: dict[str, Any] = dict(assigns)

    def assign(self, name: str, value: Any) -> None:
        """Store ``value`` as view state under ``name``."""
        self.assigns[name] = value

    def get_bound_state(self, name: str) -> Any:
        """Return the view state for ``name``; unset names yield None."""
        return self.assigns.get(name)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(controller_path={self.controller_path!r})"
