"""Partial rendering helpers for the view layer.

Partials are sub-templates whose file name starts with an underscore, which
separates them from full templates that can be rendered on their own.

In a template for the advertiser controller:

    {{ render_partial("account") }}

renders ``advertiser/_account`` with the controller's ``account`` state bound
to the local variable ``account``. Bindings can be supplied explicitly:

    {{ render_partial("account", {"account": buyer}) }}

A collection can be rendered with one call. Each element is bound under the
partial's name and a zero-based ``<name>_counter`` is made available:

    {{ render_partial_collection("ad", advertisements) | join }}

Partials can be shared between controllers by giving a directory:

    {{ render_partial("advertisement/ad", {"ad": advertisement}) }}

This renders ``advertisement/_ad`` regardless of the calling controller.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from view_partials.logging_config import get_logger, log_with_context
from view_partials.protocols import Controller, Renderer

logger = get_logger(__name__)

PATH_SEPARATOR = "/"
PARTIAL_PREFIX = "_"
COUNTER_SUFFIX = "_counter"


class _Missing:
    """Sentinel type for "no explicit object supplied"."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def partial_pieces(partial_path: str, default_path: str) -> tuple[str, str]:
    """Split a partial identifier into (directory, partial name).

    Identifiers without a separator live under ``default_path``. A trailing
    separator yields an empty name, which is returned as is.
    """
    if PATH_SEPARATOR in partial_path:
        directory, _, partial_name = partial_path.rpartition(PATH_SEPARATOR)
        return directory, partial_name
    return default_path, partial_path


def partial_counter_name(partial_name: str) -> str:
    """Name of the counter variable, e.g. ``"shared/ad"`` -> ``"ad_counter"``."""
    return f"{partial_name.split(PATH_SEPARATOR)[-1]}{COUNTER_SUFFIX}"


def partial_lookup_key(directory: str, partial_name: str) -> str:
    """Template path for a partial: ``"<directory>/_<name>"``."""
    return f"{directory}{PATH_SEPARATOR}{PARTIAL_PREFIX}{partial_name}"


def add_counter_to_local_assigns(partial_name: str, local_assigns: dict[str, Any]) -> dict[str, Any]:
    """Default the counter variable to 1 unless the caller already set it."""
    local_assigns.setdefault(partial_counter_name(partial_name), 1)
    return local_assigns


@dataclass(frozen=True)
class Bindings:
    """Local bindings only; the object comes from controller state."""

    values: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ExplicitObject:
    """Local bindings plus an object supplied by the caller."""

    value: Any
    values: dict[str, Any] = field(default_factory=dict)


PartialAssigns = Bindings | ExplicitObject


def coerce_assigns(local_assigns: Mapping[str, Any] | None, bound_object: Any = MISSING) -> PartialAssigns:
    """Normalise render arguments into a single tagged value.

    Raises:
        TypeError: If ``local_assigns`` is neither a mapping nor None
    """
    if local_assigns is None:
        values: dict[str, Any] = {}
    elif isinstance(local_assigns, Mapping):
        values = dict(local_assigns)
    else:
        raise TypeError(
            f"local_assigns must be a mapping, got {type(local_assigns).__name__}; "
            "pass the object to bind with bound_object="
        )

    if bound_object is MISSING:
        return Bindings(values)
    return ExplicitObject(bound_object, values)


class PartialResolver:
    """Resolves partial names to template paths and bindings, then renders them.

    The resolver holds no state of its own between calls: every render builds
    a fresh binding dict, and errors raised by ``render`` reach the caller
    untouched.
    """

    def __init__(self, controller: Controller, render: Renderer):
        """Initialize resolver.

        Args:
            controller: Supplies the default template directory and bound state
            render: Template engine callable taking (path, bindings)
        """
        self.controller = controller
        self.render = render

    def partial_pieces(self, partial_path: str) -> tuple[str, str]:
        """Split ``partial_path`` relative to the controller's directory."""
        return partial_pieces(partial_path, self.controller.controller_path)

    def extract_object(self, partial_name: str, assigns: PartialAssigns) -> Any:
        """Object bound under the partial's own name."""
        if isinstance(assigns, ExplicitObject):
            return assigns.value
        return self.controller.get_bound_state(partial_name)

    @staticmethod
    def extract_local_assigns(assigns: PartialAssigns) -> dict[str, Any]:
        """Fresh copy of the caller's local bindings."""
        return dict(assigns.values)

    def render_partial(
        self,
        partial_path: str,
        local_assigns: Mapping[str, Any] | None = None,
        *,
        bound_object: Any = MISSING,
    ) -> Any:
        """Render a single partial.

        Args:
            partial_path: ``"name"`` or ``"directory/name"``
            local_assigns: Extra local variables; these win over the bound object
            bound_object: Object to bind under the partial's name instead of the
                controller state of the same name

        Returns:
            Whatever the renderer returns
        """
        assigns = coerce_assigns(local_assigns, bound_object)
        path, partial_name = self.partial_pieces(partial_path)
        obj = self.extract_object(partial_name, assigns)
        bindings = add_counter_to_local_assigns(partial_name, self.extract_local_assigns(assigns))

        template_path = partial_lookup_key(path, partial_name)
        log_with_context(
            logger,
            "debug",
            "Rendering partial",
            partial_path=partial_path,
            template_path=template_path,
            binding_names=sorted({partial_name, *bindings}),
            event_type="partial_render",
        )
        return self.render(template_path, {partial_name: obj, **bindings})

    def render_partial_collection(
        self,
        partial_name: str,
        collection: Iterable[Any],
        spacer_template: str | None = None,
        local_assigns: Mapping[str, Any] | None = None,
    ) -> Any:
        """Render ``partial_name`` once per element of ``collection``.

        Each element is bound under the partial's name together with a
        zero-based counter; the counter overrides any counter key present in
        ``local_assigns`` (Rails' ``render_partial_collection`` lets the
        caller's counter win instead).

        Returns:
            None for an empty collection, the rendered fragments joined by one
            rendering of ``spacer_template`` when given, otherwise the list of
            rendered fragments in collection order
        """
        counter_name = partial_counter_name(partial_name)
        shared_assigns = coerce_assigns(local_assigns).values

        collection_of_partials = [
            self.render_partial(
                partial_name,
                {**shared_assigns, counter_name: counter},
                bound_object=element,
            )
            for counter, element in enumerate(collection)
        ]

        log_with_context(
            logger,
            "debug",
            "Rendered partial collection",
            partial_name=partial_name,
            count=len(collection_of_partials),
            spacer_template=spacer_template,
            event_type="partial_collection_render",
        )

        if not collection_of_partials:
            return None
        if spacer_template is not None:
            spacer_path, spacer_name = self.partial_pieces(spacer_template)
            spacer = self.render(partial_lookup_key(spacer_path, spacer_name), {})
            return spacer.join(collection_of_partials)
        return collection_of_partials

    render_collection_of_partials = render_partial_collection

    def template_helpers(self) -> dict[str, Any]:
        """Helpers exposed to templates so partials can render partials."""
        return {
            "render_partial": self.render_partial,
            "render_partial_collection": self.render_partial_collection,
            "render_collection_of_partials": self.render_partial_collection,
        }
