"""Protocol definitions for the partial resolver's collaborators."""

from collections.abc import Mapping
from typing import Any, Protocol


class Controller(Protocol):
    """The controller that owns the current request's view state.

    Partials without a directory are looked up under ``controller_path``, and
    the object bound to a partial defaults to the controller state stored
    under the partial's name.
    """

    controller_path: str

    def get_bound_state(self, name: str) -> Any:
        """Return the state stored under ``name``, or None when unset."""
        ...


class Renderer(Protocol):
    """Template engine entry point: render ``path`` with ``bindings``.

    Errors such as a missing template are raised by the implementation and are
    never caught by the resolver.
    """

    def __call__(self, path: str, bindings: Mapping[str, Any]) -> str: ...
