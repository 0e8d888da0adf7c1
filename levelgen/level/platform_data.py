"""Platform layout data model.

Positions, world bounds, movement constraints and the generation settings
shared by the sampler, the placement rules and the generator, plus the
append-only layout container a generation run fills.
"""

from dataclasses import dataclass, field, replace
from typing import Iterator, List, NamedTuple, Optional
import logging

from levelgen.core.constants import (
    NUMBER_OF_PLATFORMS,
    WORLD_WIDTH,
    WORLD_HEIGHT,
    GROUND_Y,
    MAX_JUMP_HEIGHT,
    MAX_JUMP_DISTANCE,
    MAX_FALL_DISTANCE,
    MIN_PLATFORM_SPACING,
    PLATFORM_SIZE,
    STARTING_POSITION,
    REQUEUE_PROBABILITY,
    MAX_ATTEMPTS_PER_PLATFORM,
    RANDOM_ATTEMPTS_PER_ITERATION,
    GROUND_SEGMENT_WIDTH,
    HORIZONTAL_DRIFT,
    MIN_WORLD_SIZE,
    MIN_MOVEMENT_VALUE,
    MIN_PLATFORM_SPACING_VALUE,
    MIN_PLATFORM_DIMENSION,
)

logger = logging.getLogger(__name__)


class PlatformPosition(NamedTuple):
    """A platform center in world space (y grows upwards)."""
    x: float
    y: float


class PlatformSize(NamedTuple):
    """Footprint used for overlap testing."""
    width: float
    height: float


@dataclass(frozen=True)
class MovementConstraints:
    """
    What the player can traverse in one move.

    Attributes:
        max_jump_height: Largest upward step reachable with one jump
        max_jump_distance: Largest horizontal step for gaps, climbs and drops
        max_fall_distance: Largest drop the player survives
    """
    max_jump_height: Optional[float] = MAX_JUMP_HEIGHT
    max_jump_distance: Optional[float] = MAX_JUMP_DISTANCE
    max_fall_distance: Optional[float] = MAX_FALL_DISTANCE


@dataclass(frozen=True)
class WorldBounds:
    """
    The rectangle platforms must fit in.

    x spans [-width/2, width/2]; y spans (ground_y, height].
    """
    width: float = WORLD_WIDTH
    height: float = WORLD_HEIGHT
    ground_y: float = GROUND_Y

    @property
    def half_width(self) -> float:
        return self.width * 0.5

    def contains(self, x: float, y: float) -> bool:
        """Check if a point lies inside the world (strictly above the ground)."""
        if x < -self.half_width or x > self.half_width:
            return False
        return self.ground_y < y <= self.height


class GenerationConfigError(ValueError):
    """Raised before generation starts when settings cannot produce a layout."""

    def __init__(self, issues: List[str]):
        self.issues = list(issues)
        super().__init__("Invalid generation settings: " + "; ".join(self.issues))


@dataclass
class GenerationConfig:
    number_of_platforms: int = NUMBER_OF_PLATFORMS
    world: WorldBounds = field(default_factory=WorldBounds)
    movement: MovementConstraints = field(default_factory=MovementConstraints)
    min_platform_spacing: Optional[float] = MIN_PLATFORM_SPACING
    platform_size: PlatformSize = PlatformSize(*PLATFORM_SIZE)
    starting_position: PlatformPosition = PlatformPosition(*STARTING_POSITION)

    # Placement loop tuning
    requeue_probability: float = REQUEUE_PROBABILITY
    max_attempts_per_platform: int = MAX_ATTEMPTS_PER_PLATFORM
    random_attempts_per_iteration: int = RANDOM_ATTEMPTS_PER_ITERATION
    # When False, directed candidates are accepted on validity alone even if
    # clamping pushed them out of the base's movement envelope.
    recheck_directed_reachability: bool = True

    ground_segment_width: float = GROUND_SEGMENT_WIDTH
    seed: Optional[int] = None

    @property
    def max_attempts(self) -> int:
        return self.number_of_platforms * self.max_attempts_per_platform

    def collect_issues(self) -> List[str]:
        """Return every reason these settings cannot be used for a run."""
        issues = []

        if self.number_of_platforms is None or self.number_of_platforms < 1:
            issues.append("Number of platforms must be at least 1")

        world = self.world
        if world is None or world.width is None or world.height is None or world.ground_y is None:
            issues.append("World bounds are missing")
            world = None
        elif world.width < MIN_WORLD_SIZE or world.height < MIN_WORLD_SIZE:
            issues.append(
                f"World dimensions too small ({world.width}x{world.height}); "
                f"minimum {MIN_WORLD_SIZE:g}x{MIN_WORLD_SIZE:g} units required"
            )

        if self.movement is None:
            issues.append("Movement constraints are missing")
        else:
            for name in ("max_jump_height", "max_jump_distance", "max_fall_distance"):
                value = getattr(self.movement, name)
                if value is None:
                    issues.append(f"{name} is missing")
                elif value <= 0:
                    issues.append(f"{name} must be positive, got {value}")

        if self.min_platform_spacing is None:
            issues.append("min_platform_spacing is missing")
        elif self.min_platform_spacing < 0:
            issues.append(f"min_platform_spacing cannot be negative, got {self.min_platform_spacing}")

        if self.platform_size is None or self.platform_size.width <= 0 or self.platform_size.height <= 0:
            issues.append(f"platform_size must be positive, got {self.platform_size}")

        if self.requeue_probability is None:
            issues.append("requeue_probability is missing")
        elif not 0.0 <= self.requeue_probability <= 1.0:
            issues.append(f"requeue_probability must be within [0, 1], got {self.requeue_probability}")
        if self.max_attempts_per_platform is None:
            issues.append("max_attempts_per_platform is missing")
        elif self.max_attempts_per_platform < 1:
            issues.append("max_attempts_per_platform must be at least 1")
        if self.random_attempts_per_iteration is None:
            issues.append("random_attempts_per_iteration is missing")
        elif self.random_attempts_per_iteration < 0:
            issues.append("random_attempts_per_iteration cannot be negative")
        if self.ground_segment_width is None:
            issues.append("ground_segment_width is missing")
        elif self.ground_segment_width <= 0:
            issues.append("ground_segment_width must be positive")

        if self.starting_position is None:
            issues.append("starting_position is missing")
        elif world is not None and not world.contains(*self.starting_position):
            issues.append(f"starting_position {tuple(self.starting_position)} lies outside the world bounds")

        return issues

    def validate(self) -> None:
        """
        Raise GenerationConfigError if the settings are unusable.

        Settings that are usable but unlikely to give a good layout are only
        logged as warnings.
        """
        issues = self.collect_issues()
        if issues:
            for issue in issues:
                logger.error("Invalid generation setting: %s", issue)
            raise GenerationConfigError(issues)

        if self.min_platform_spacing > self.world.width:
            logger.warning(
                "min_platform_spacing %.2f exceeds world width %.2f; only the starting platform can be placed",
                self.min_platform_spacing, self.world.width,
            )
        if self.movement.max_jump_distance < HORIZONTAL_DRIFT:
            logger.warning(
                "max_jump_distance %.2f is shorter than the directed sampling drift %.2f; "
                "many directed candidates will be rejected",
                self.movement.max_jump_distance, HORIZONTAL_DRIFT,
            )

    def clamped(self) -> "GenerationConfig":
        """Return a copy with every setting raised to its minimum viable value."""
        movement = self.movement or MovementConstraints()
        world = self.world or WorldBounds()
        size = self.platform_size or PlatformSize(*PLATFORM_SIZE)
        return replace(
            self,
            number_of_platforms=max(1, int(self.number_of_platforms or 1)),
            world=replace(
                world,
                width=max(MIN_WORLD_SIZE, world.width or MIN_WORLD_SIZE),
                height=max(MIN_WORLD_SIZE, world.height or MIN_WORLD_SIZE),
                ground_y=world.ground_y if world.ground_y is not None else GROUND_Y,
            ),
            movement=MovementConstraints(
                max_jump_height=max(MIN_MOVEMENT_VALUE, movement.max_jump_height or 0.0),
                max_jump_distance=max(MIN_MOVEMENT_VALUE, movement.max_jump_distance or 0.0),
                max_fall_distance=max(MIN_MOVEMENT_VALUE, movement.max_fall_distance or 0.0),
            ),
            min_platform_spacing=max(MIN_PLATFORM_SPACING_VALUE, self.min_platform_spacing or 0.0),
            platform_size=PlatformSize(
                max(MIN_PLATFORM_DIMENSION, size.width),
                max(MIN_PLATFORM_DIMENSION, size.height),
            ),
            requeue_probability=min(1.0, max(0.0, self.requeue_probability or 0.0)),
            max_attempts_per_platform=max(1, self.max_attempts_per_platform or 1),
            random_attempts_per_iteration=max(0, self.random_attempts_per_iteration or 0),
            ground_segment_width=(
                self.ground_segment_width if self.ground_segment_width and self.ground_segment_width > 0
                else GROUND_SEGMENT_WIDTH
            ),
        )


class PlatformLayout:
    """
    Append-only, insertion-ordered store of placed platforms.

    A platform's identity is its index; nothing is moved or removed during
    a run, so indices stay stable until clear() starts the next run.
    """

    def __init__(self):
        self._positions: List[PlatformPosition] = []

    def add(self, position: PlatformPosition) -> int:
        """Append a platform and return its index."""
        self._positions.append(PlatformPosition(float(position[0]), float(position[1])))
        return len(self._positions) - 1

    def positions(self) -> List[PlatformPosition]:
        """Snapshot copy of every placed platform."""
        return list(self._positions)

    def clear(self) -> None:
        self._positions.clear()

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[PlatformPosition]:
        return iter(self._positions)

    def __getitem__(self, index: int) -> PlatformPosition:
        return self._positions[index]

    def __repr__(self) -> str:
        return f"PlatformLayout({len(self._positions)} platforms)"


@dataclass(frozen=True)
class GroundSegment:
    """One piece of the ground baseline; x is the segment's left edge."""
    x: float
    y: float
    width: float


@dataclass
class GenerationResult:
    """
    Outcome of one generation run.

    Attributes:
        placed_positions: Platforms in placement order (seed first)
        achieved_count: How many platforms were placed
        requested_count: The target platform count
        attempts: Placement iterations used (the seed is free)
        ground_segments: The ground baseline
    """
    placed_positions: List[PlatformPosition]
    achieved_count: int
    requested_count: int
    attempts: int = 0
    ground_segments: List[GroundSegment] = field(default_factory=list)

    @property
    def is_complete(self) -> bool:
        return self.achieved_count >= self.requested_count

    @property
    def fill_ratio(self) -> float:
        return self.achieved_count / max(1, self.requested_count)
