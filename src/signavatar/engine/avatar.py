"""SignAvatar engine: the public surface the chat layer calls into."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

from signavatar.config import AnimationSettings, CatalogSettings
from signavatar.engine.controller import AnimationController
from signavatar.engine.interpolation import MalformedFrameError
from signavatar.engine.scheduler import Scheduler
from signavatar.models.pose import IDLE_POSE, normalize_sign_name
from signavatar.poses.loader import fallback_catalog, load_catalog

if TYPE_CHECKING:
    from pathlib import Path

    import httpx

    from signavatar.models.pose import Catalog, Frame
    from signavatar.render.base import Renderer

logger = logging.getLogger(__name__)


class SignAvatar:
    """An animated stick figure that plays a pose for each sign.

    The avatar starts on the built-in idle catalog and can tick and accept
    signs immediately.  :meth:`start` runs the frame loop and the catalog
    load side by side; when the load finishes the catalog is swapped in a
    single assignment, so a tick never sees a partial catalog.  Signs played
    before the load completes resolve against the fallback catalog.
    """

    def __init__(
        self,
        renderer: Renderer,
        source: str | Path | None = None,
        *,
        catalog_settings: CatalogSettings | None = None,
        animation_settings: AnimationSettings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.renderer = renderer
        self.catalog_settings = catalog_settings or CatalogSettings()
        self.source = str(source) if source is not None else self.catalog_settings.source
        anim = animation_settings or AnimationSettings()

        self._transport = transport
        self._catalog: Catalog = fallback_catalog()
        self._controller = AnimationController(
            anim.speed,
            snapshot_on_retarget=anim.snapshot_on_retarget,
        )
        self._scheduler = Scheduler(self.tick, fps=anim.fps)
        self._load_task: asyncio.Task[Catalog] | None = None

        self.set_pose(IDLE_POSE)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def controller(self) -> AnimationController:
        return self._controller

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def load(self) -> Catalog:
        """Fetch the catalog from :attr:`source` and install it.

        Falls back to the idle-only catalog when the fetch fails.
        """
        catalog = await load_catalog(
            self.source,
            timeout=self.catalog_settings.timeout,
            transport=self._transport,
        )
        self._catalog = catalog
        return catalog

    def start(self, max_ticks: int | None = None) -> asyncio.Task[None]:
        """Start the frame loop and, concurrently, the catalog load."""
        self._load_task = asyncio.create_task(self.load(), name="signavatar-load")
        return self._scheduler.start(max_ticks)

    async def stop(self) -> None:
        """Cancel the frame loop and any pending catalog load."""
        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._load_task
        self._load_task = None
        await self._scheduler.stop()

    # ------------------------------------------------------------------
    # Per-frame work
    # ------------------------------------------------------------------

    def tick(self) -> Frame | None:
        """Advance the animation one step and hand the frame to the renderer."""
        try:
            frame = self._controller.tick()
        except MalformedFrameError as exc:
            state = self._controller.state
            target = state.target_pose.name if state else "?"
            logger.error("Pose '%s' has malformed frames, reverting to %s: %s", target, IDLE_POSE, exc)
            self._controller.reset(self._catalog.idle)
            frame = self._controller.tick()

        if frame is not None:
            self.renderer.render(frame)
        return frame

    # ------------------------------------------------------------------
    # Sign API
    # ------------------------------------------------------------------

    def set_pose(self, name: str) -> None:
        """Blend towards the pose called *name*, or ``idle`` if unknown."""
        try:
            pose = self._catalog.resolve(name)
            self._controller.set_target(pose)
        except Exception:
            logger.exception("Could not set pose %r", name)

    def play_sign(self, text: str) -> None:
        """Play the sign for *text*. Never raises to the caller."""
        try:
            name = normalize_sign_name(text or "")
        except (TypeError, AttributeError):
            logger.warning("Cannot sign %r, playing %s", text, IDLE_POSE)
            name = IDLE_POSE
        self.set_pose(name)

    def resize(self, container_width: int, container_height: int) -> int:
        """Re-fit the output surface after its container changed size."""
        return self.renderer.resize(container_width, container_height)
