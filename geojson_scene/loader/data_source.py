"""GeoJSON data source: the load pipeline driver.

``GeoJsonDataSource`` turns a GeoJSON document into entities in its
``EntityCollection``:

1. Validate the argument and parse the root ``type`` tag.
2. Resolve the CRS transform (may await a link resolver).
3. Clear the collection; only reached once a transform exists, so a
   CRS failure leaves the previous contents in place.
4. Dispatch the document, creating styled entities.
5. Raise ``changed``.

Overlapping ``load`` calls on one instance are not serialised: each
clears and repopulates the shared collection, and the last one to reach
its dispatch phase wins.  There is no rollback if dispatch fails part of
the way through.

Example usage::

    source = GeoJsonDataSource()
    source.default_point.point.pixel_size = 6
    await source.load_url("https://example.com/parcels.geojson")
    for entity in source.entities:
        ...
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from geojson_scene.core.config import LoaderConfig
from geojson_scene.core.events import Event
from geojson_scene.core.exceptions import FetchError, MissingArgumentError
from geojson_scene.core.fetch import fetch_json
from geojson_scene.crs.registry import DEFAULT_REGISTRY
from geojson_scene.loader._dispatch import dispatch_document
from geojson_scene.loader._geometry import DecodeContext
from geojson_scene.loader._types import parse_document_type
from geojson_scene.models.defaults import (
    build_default_line,
    build_default_point,
    build_default_polygon,
)
from geojson_scene.models.entity import EntityCollection

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from geojson_scene.crs.registry import CrsRegistry

logger = logging.getLogger("geojson_scene.loader")


class LoadState(enum.Enum):
    """Progress of the most recent ``load`` call.

    Values:
        IDLE:          No load has started yet.
        RESOLVING_CRS: Waiting for the CRS transform.
        DISPATCHING:   Collection cleared, entities being created.
        DONE:          Load finished and ``changed`` was raised.
        FAILED:        Load raised; see the exception for details.
    """

    IDLE = "idle"
    RESOLVING_CRS = "resolving_crs"
    DISPATCHING = "dispatching"
    DONE = "done"
    FAILED = "failed"


class GeoJsonDataSource:
    """A data source that materialises GeoJSON as scene entities.

    GeoJSON has no styling, so entities receive graphics from the
    ``default_point``, ``default_line`` and ``default_polygon`` templates.
    Templates may be edited or replaced between loads; entities already
    created keep the style they were given.

    Args:
        registry: CRS registry used for resolution (defaults to the
            process-wide ``DEFAULT_REGISTRY``).
        config: Loader configuration (defaults to ``LoaderConfig()``;
            pass ``LoaderConfig.from_env()`` to honour the environment).
        entities: Collection to populate (a new one if omitted).
        fetcher: Coroutine function ``url -> parsed JSON`` used by
            ``load_url``; must raise ``FetchError`` on failure.
    """

    def __init__(
        self,
        registry: CrsRegistry | None = None,
        *,
        config: LoaderConfig | None = None,
        entities: EntityCollection | None = None,
        fetcher: Callable[[str], Awaitable[Any]] | None = None,
    ) -> None:
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._config = config if config is not None else LoaderConfig()
        self._entities = entities if entities is not None else EntityCollection()
        self._fetcher = fetcher if fetcher is not None else self._fetch
        self._changed = Event()
        self._error = Event()
        self._state = LoadState.IDLE

        self.default_point = build_default_point()
        self.default_line = build_default_line()
        self.default_polygon = build_default_polygon()

    # ------------------------------------------------------------------
    # Read-only surface
    # ------------------------------------------------------------------

    @property
    def entities(self) -> EntityCollection:
        """The collection of entities generated by this data source."""
        return self._entities

    @property
    def changed(self) -> Event:
        """Raised with ``(data_source,)`` after every successful load."""
        return self._changed

    @property
    def error(self) -> Event:
        """Raised with ``(data_source, error)`` when ``load_url`` cannot fetch."""
        return self._error

    @property
    def registry(self) -> CrsRegistry:
        return self._registry

    @property
    def config(self) -> LoaderConfig:
        return self._config

    @property
    def state(self) -> LoadState:
        """State of the most recently started load."""
        return self._state

    @property
    def clock(self) -> None:
        """GeoJSON is static, so there is never a clock."""
        return None

    @property
    def is_time_varying(self) -> bool:
        """GeoJSON is static; always ``False``."""
        return False

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load_url(self, url: str | None) -> EntityCollection | None:
        """Fetch the GeoJSON at *url* and load it, replacing existing data.

        Fetch failures are not raised: they are reported through the
        ``error`` event and the collection is left untouched.  Errors from
        ``load`` itself still propagate.

        Returns:
            The populated collection, or ``None`` if the fetch failed.

        Raises:
            MissingArgumentError: If *url* is ``None``.
        """
        if url is None:
            raise MissingArgumentError("url is required.")

        try:
            document = await self._fetcher(url)
        except FetchError as exc:
            logger.warning("Failed to fetch GeoJSON from %s: %s", url, exc)
            self._error.raise_event(self, exc)
            return None

        return await self.load(document, url)

    async def load(
        self, document: Mapping[str, Any] | None, source: str | None = None
    ) -> EntityCollection:
        """Load a parsed GeoJSON *document*, replacing existing data.

        Args:
            document: The GeoJSON object.
            source: Where the document came from (URL or path); used for
                logging only.

        Returns:
            The populated entity collection.

        Raises:
            MissingArgumentError: If *document* is ``None``.
            UnsupportedDocumentTypeError: If the root ``type`` is unknown.
            CrsError: If the ``crs`` member is malformed or unresolvable.
            UnknownGeometryTypeError: If a nested geometry type is unknown.
            MissingGeometryError: If a Feature lacks its ``geometry`` member.
        """
        if document is None:
            raise MissingArgumentError("document is required.")

        raw_type = document.get("type") if isinstance(document, Mapping) else None
        tag = parse_document_type(raw_type)
        label = source or "<object>"
        logger.info("Loading GeoJSON %s from %s", tag.value, label)

        self._state = LoadState.RESOLVING_CRS
        try:
            transform = await self._registry.resolve(document)
        except Exception:
            self._state = LoadState.FAILED
            raise

        self._state = LoadState.DISPATCHING
        self._entities.clear()
        ctx = DecodeContext(
            entities=self._entities,
            transform=transform,
            default_point=self.default_point,
            default_line=self.default_line,
            default_polygon=self.default_polygon,
        )
        try:
            dispatch_document(ctx, tag, document)
        except Exception:
            self._state = LoadState.FAILED
            logger.warning(
                "GeoJSON load from %s failed after creating %d entit(ies)",
                label,
                len(self._entities),
            )
            raise

        self._state = LoadState.DONE
        logger.info("Loaded %d entit(ies) from %s", len(self._entities), label)
        self._changed.raise_event(self)
        return self._entities

    async def _fetch(self, url: str) -> Any:
        return await fetch_json(
            url,
            timeout=self._config.fetch_timeout_s,
            follow_redirects=self._config.fetch_follow_redirects,
            headers={"User-Agent": self._config.fetch_user_agent},
        )
