"""An agent that finds and shows the way out of a maze."""

from __future__ import annotations

import time
from collections import deque
from enum import Enum

from mazerunner.world import Block, Coordinate

MOVE_XPLUS = Coordinate(1, 0, 0)
MOVE_XMINUS = Coordinate(-1, 0, 0)
MOVE_ZPLUS = Coordinate(0, 0, 1)
MOVE_ZMINUS = Coordinate(0, 0, -1)

MOVE_NORTH = MOVE_ZMINUS
MOVE_SOUTH = MOVE_ZPLUS
MOVE_EAST = MOVE_XPLUS
MOVE_WEST = MOVE_XMINUS

_PASSABLE = (Block.AIR, Block.BLUE_CARPET)


class Orientation(Enum):
    X_PLUS = 0
    Z_PLUS = 1
    X_MINUS = 2
    Z_MINUS = 3


_LEFT = {
    Orientation.X_PLUS: Orientation.Z_MINUS,
    Orientation.Z_PLUS: Orientation.X_PLUS,
    Orientation.X_MINUS: Orientation.Z_PLUS,
    Orientation.Z_MINUS: Orientation.X_MINUS,
}
_RIGHT = {after: before for before, after in _LEFT.items()}
_BACK = {
    Orientation.X_PLUS: Orientation.X_MINUS,
    Orientation.Z_PLUS: Orientation.Z_MINUS,
    Orientation.X_MINUS: Orientation.X_PLUS,
    Orientation.Z_MINUS: Orientation.Z_PLUS,
}
_FORWARD = {
    Orientation.X_PLUS: MOVE_EAST,
    Orientation.Z_PLUS: MOVE_SOUTH,
    Orientation.X_MINUS: MOVE_WEST,
    Orientation.Z_MINUS: MOVE_NORTH,
}


class Agent:
    """Searches the world for the blue-carpet exit and marks the route."""

    step_delay = 1.0

    def __init__(self, world, start: Coordinate):
        self.world = world
        self.current_location = start
        self.current_orientation = Orientation.Z_MINUS

    def initialize_player_block(self) -> None:
        self.current_location = self.world.get_player_position()
        self.current_orientation = Orientation.Z_MINUS

    def guide_to_exit(self) -> list[Coordinate]:
        """Walk a lime carpet along the shortest route; return where it was laid."""
        self.initialize_player_block()
        path = self.solve_with_bfs()
        if not path:
            print("Sorry, no path, you are trapped!")
            return []

        laid: list[Coordinate] = []
        previous = self.current_location
        for step, current in enumerate(path, start=1):
            y_below = current.y - 1
            while (
                self.world.get_block(Coordinate(current.x, y_below, current.z)) == Block.AIR
                and y_below > 1
            ):
                y_below -= 1
            carpet = Coordinate(current.x, y_below + 1, current.z)

            if step != 1:
                self.world.set_block(previous, Block.AIR)
            self.world.set_block(carpet, Block.LIME_CARPET)
            print(f"Step[{step}]: ({carpet.x}, {carpet.y}, {carpet.z})")

            laid.append(carpet)
            previous = carpet
            if self.step_delay:
                time.sleep(self.step_delay)

        print("Escape route visualized.")
        return laid

    def solve_with_bfs(self) -> list[Coordinate]:
        """Shortest route from the current location to the exit, start excluded."""
        start = self.current_location
        queue = deque([start])
        came_from: dict[Coordinate, Coordinate] = {}
        visited = {start}
        end = None

        while queue and end is None:
            current = queue.popleft()
            for move in (MOVE_NORTH, MOVE_SOUTH, MOVE_EAST, MOVE_WEST):
                nxt = current + move
                if nxt in visited:
                    continue
                if self.world.get_block(nxt) not in _PASSABLE:
                    continue
                came_from[nxt] = current
                visited.add(nxt)
                queue.append(nxt)
                if self.is_exit(nxt):
                    end = nxt
                    break

        if end is None:
            return []
        path = []
        at = end
        while at != start:
            path.append(at)
            at = came_from[at]
        path.reverse()
        return path

    def is_exit(self, loc: Coordinate) -> bool:
        return self.world.get_block(loc) == Block.BLUE_CARPET

    def turn_left(self, orientation: Orientation) -> Orientation:
        return _LEFT[orientation]

    def turn_right(self, orientation: Orientation) -> Orientation:
        return _RIGHT[orientation]

    def turn_back(self, orientation: Orientation) -> Orientation:
        return _BACK[orientation]

    def get_next_location(self, location: Coordinate, orientation: Orientation) -> Coordinate:
        return location + _FORWARD[orientation]

    def get_new_orientation(self, location: Coordinate, next_location: Coordinate) -> Orientation:
        dx = next_location.x - location.x
        dz = next_location.z - location.z
        if dx == 1:
            return Orientation.X_PLUS
        if dx == -1:
            return Orientation.X_MINUS
        if dz == 1:
            return Orientation.Z_PLUS
        if dz == -1:
            return Orientation.Z_MINUS
        return self.current_orientation

    def check_if_exit(self, location: Coordinate, orientation: Orientation) -> bool:
        return self.world.get_block(location) == Block.AIR