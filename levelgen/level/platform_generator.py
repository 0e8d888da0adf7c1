"""Platform layout generator.

Places platforms one at a time so that each new platform can be reached from
one already placed (or from the ground):
- The starting platform is placed first and seeds a FIFO frontier of bases
- Each iteration dequeues a base and tries a candidate one move away from it
- If that fails, a handful of random candidates are tried instead; those must
  be reachable from some placed platform or the ground directly below
- Accepted platforms join the frontier with a fixed probability
- The run stops at the target count or when the attempt budget runs out,
  in which case the partial layout is returned

Nothing is drawn or instantiated here. Collaborators register a placement
listener and build whatever they need from each position.
"""

from __future__ import annotations

import logging
import math
import random
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from levelgen.core.utils import distance
from levelgen.level.placement_rules import is_valid_position
from levelgen.level.platform_data import (
    GenerationConfig,
    GenerationResult,
    GroundSegment,
    PlatformLayout,
    PlatformPosition,
    WorldBounds,
)
from levelgen.level.position_sampler import sample_directed, sample_random
from levelgen.level.traversal_verification import is_reachable, is_reachable_from_any

logger = logging.getLogger(__name__)

PlacementListener = Callable[[PlatformPosition, int], None]


def build_ground_segments(world: WorldBounds, segment_width: float) -> List[GroundSegment]:
    """Cover the world width with ground segments laid left to right."""
    count = int(math.ceil(world.width / segment_width))
    return [
        GroundSegment(x=(i * segment_width) - world.half_width, y=world.ground_y, width=segment_width)
        for i in range(count)
    ]


class PlatformGenerator:
    """Generates and holds one platform layout at a time."""

    def __init__(self, config: Optional[GenerationConfig] = None, rng: Optional[random.Random] = None):
        """
        Args:
            config: Generation settings. Defaults to GenerationConfig().
            rng: Random source. If None, one is seeded from config.seed
                 (unseeded when config.seed is None).
        """
        self.config = config or GenerationConfig()
        self.rng = rng or random.Random(self.config.seed)
        self.layout = PlatformLayout()
        self.frontier: Deque[PlatformPosition] = deque()
        self._ground: List[GroundSegment] = []
        self._listeners: List[PlacementListener] = []
        self._generating = False

    # ----- Listener hook -----

    def add_placement_listener(self, listener: PlacementListener) -> None:
        """Call listener(position, index) once for every platform placed."""
        self._listeners.append(listener)

    def remove_placement_listener(self, listener: PlacementListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    # ----- Generation -----

    def generate(self) -> GenerationResult:
        """
        Run one full generation pass, discarding any previous layout.

        Raises:
            GenerationConfigError: if the settings are invalid. Nothing is
                cleared or placed in that case.
            RuntimeError: if called again while a run is in progress.
        """
        if self._generating:
            raise RuntimeError("Platform generation is already in progress")

        self.config.validate()

        self._generating = True
        try:
            self.layout.clear()
            self.frontier.clear()
            self._ground = build_ground_segments(self.config.world, self.config.ground_segment_width)
            logger.debug("Ground: %d segments at y=%.2f", len(self._ground), self.config.world.ground_y)

            start = PlatformPosition(*self.config.starting_position)
            self._place(start)
            self.frontier.append(start)

            attempts = self._fill_platforms()
        finally:
            self._generating = False

        result = GenerationResult(
            placed_positions=self.layout.positions(),
            achieved_count=len(self.layout),
            requested_count=self.config.number_of_platforms,
            attempts=attempts,
            ground_segments=list(self._ground),
        )
        if result.is_complete:
            logger.info("Platform generation completed. Placed: %d, Attempts: %d", result.achieved_count, attempts)
        else:
            logger.info(
                "Platform generation ran out of attempts. Placed: %d/%d, Attempts: %d",
                result.achieved_count, result.requested_count, attempts,
            )
        return result

    def _fill_platforms(self) -> int:
        target = self.config.number_of_platforms
        max_attempts = self.config.max_attempts
        attempts = 0

        while len(self.layout) < target and attempts < max_attempts:
            attempts += 1

            candidate = None
            if self.frontier:
                base = self.frontier.popleft()
                candidate = self._try_directed(base)

            if candidate is None:
                candidate = self._try_random()

            if candidate is None:
                logger.debug("Attempt %d: no valid candidate", attempts)
                continue

            self._place(candidate)
            if self.rng.random() < self.config.requeue_probability:
                self.frontier.append(candidate)

        return attempts

    def _try_directed(self, base: PlatformPosition) -> Optional[PlatformPosition]:
        config = self.config
        candidate = sample_directed(base, config.movement, config.world, self.rng)
        if not is_valid_position(candidate, self.layout, config):
            logger.debug("Directed candidate %s from %s rejected: spacing/bounds", candidate, base)
            return None
        if config.recheck_directed_reachability and not is_reachable(base, candidate, config.movement):
            logger.debug("Directed candidate %s from %s rejected: out of reach after clamping", candidate, base)
            return None
        return candidate

    def _try_random(self) -> Optional[PlatformPosition]:
        config = self.config
        for _ in range(config.random_attempts_per_iteration):
            candidate = sample_random(config.world, self.rng)
            if not is_valid_position(candidate, self.layout, config):
                continue
            if is_reachable_from_any(candidate, self.layout, config.movement, config.world.ground_y):
                return candidate
        return None

    def _place(self, position: PlatformPosition) -> None:
        index = self.layout.add(position)
        for listener in list(self._listeners):
            listener(self.layout[index], index)

    # ----- Queries -----

    @property
    def platform_count(self) -> int:
        return len(self.layout)

    def all_platforms(self) -> List[PlatformPosition]:
        """Copy of the placed platforms in placement order."""
        return self.layout.positions()

    def ground_segments(self) -> List[GroundSegment]:
        return list(self._ground)

    def nearest_platform(self, point: Tuple[float, float]) -> PlatformPosition:
        """
        Closest placed platform to point; the first one wins on ties.

        Returns the starting position if nothing has been placed.
        """
        if len(self.layout) == 0:
            return PlatformPosition(*self.config.starting_position)

        nearest = self.layout[0]
        nearest_distance = distance(point, nearest)
        for platform in self.layout:
            d = distance(point, platform)
            if d < nearest_distance:
                nearest = platform
                nearest_distance = d
        return nearest

    def random_platform(self) -> PlatformPosition:
        """Uniform pick over placed platforms, or the starting position if none."""
        if len(self.layout) == 0:
            return PlatformPosition(*self.config.starting_position)
        return self.layout[self.rng.randrange(len(self.layout))]
