from collections import deque
from typing import Iterable, List, Sequence, Set, Tuple

from levelgen.core.constants import LEVEL_TOLERANCE
from levelgen.level.platform_data import MovementConstraints, PlatformPosition


def is_reachable(source: Tuple[float, float], target: Tuple[float, float], movement: MovementConstraints) -> bool:
    """
    Checks if the player can get from source to target in one move.

    Three moves are modelled: crossing a gap between roughly level platforms,
    climbing up to max_jump_height, and dropping down up to max_fall_distance.
    Every move is bounded horizontally by max_jump_distance. The check is
    directional: a drop that is possible may not be climbable back.
    """
    dx = abs(target[0] - source[0])
    dy = target[1] - source[1]  # Positive dy is a jump up

    if dx > movement.max_jump_distance:
        return False

    if abs(dy) <= LEVEL_TOLERANCE:
        return True
    if 0 < dy <= movement.max_jump_height:
        return True
    if dy < 0 and -dy <= movement.max_fall_distance:
        return True

    return False


def is_reachable_from_any(
    target: Tuple[float, float],
    placed: Iterable[Tuple[float, float]],
    movement: MovementConstraints,
    ground_y: float,
) -> bool:
    """
    Checks if target can be reached from any placed platform, or from the
    ground directly below it.
    """
    for existing in placed:
        if is_reachable(existing, target, movement):
            return True

    ground_position = (target[0], ground_y)
    return is_reachable(ground_position, target, movement)


def find_unreachable_platforms(
    positions: Sequence[PlatformPosition],
    movement: MovementConstraints,
    ground_y: float,
) -> List[int]:
    """
    Returns the indices of platforms nothing else leads to.

    The first platform is the entry point and is never reported.
    """
    unreachable = []
    for index in range(1, len(positions)):
        others = [p for i, p in enumerate(positions) if i != index]
        if not is_reachable_from_any(positions[index], others, movement, ground_y):
            unreachable.append(index)
    return unreachable


def verify_layout_traversable(
    positions: Sequence[PlatformPosition],
    movement: MovementConstraints,
    ground_y: float,
) -> bool:
    """Verifies that every platform after the first has a way in."""
    return not find_unreachable_platforms(positions, movement, ground_y)


def reachability_edges(positions: Sequence[PlatformPosition], movement: MovementConstraints) -> List[Tuple[int, int]]:
    """
    Lists (i, j) index pairs, i < j, where platform i reaches platform j.

    Used to draw connection lines between platforms in the debug overlay.
    """
    edges = []
    for i in range(len(positions)):
        for j in range(i + 1, len(positions)):
            if is_reachable(positions[i], positions[j], movement):
                edges.append((i, j))
    return edges


def reachable_from_start(
    positions: Sequence[PlatformPosition],
    movement: MovementConstraints,
    ground_y: float,
) -> Set[int]:
    """
    Breadth-first walk from the starting platform and the ground.

    Returns the indices of every platform the player can get to. Platforms
    reachable straight from the ground count as entry points too, since the
    player can always walk along the ground.
    """
    if not positions:
        return set()

    start_nodes = [0]
    for index, position in enumerate(positions):
        if index != 0 and is_reachable((position[0], ground_y), position, movement):
            start_nodes.append(index)

    queue = deque(start_nodes)
    visited = set(start_nodes)

    while queue:
        current = queue.popleft()
        for candidate in range(len(positions)):
            if candidate in visited:
                continue
            if is_reachable(positions[current], positions[candidate], movement):
                visited.add(candidate)
                queue.append(candidate)

    return visited
