"""Maze generation and construction in a world, with undo."""

from __future__ import annotations

import random
import time

from mazerunner.world import Block, Coordinate

MAX_CHANGES = 10000
MAZE_HEIGHT = 3
WALL = "x"
PATH = "."

_STEPS = ((-2, 0), (2, 0), (0, -2), (0, 2))


class Maze:
    """Generates mazes, builds them in a world and undoes what was built."""

    undo_delay = 0.01

    def __init__(self, world):
        self.world = world
        self.exit_row = -1
        self._changes: list[tuple[Coordinate, Block]] = []
        self._rng = random.Random()

    def _save_block_change(self, coord: Coordinate) -> None:
        if len(self._changes) >= MAX_CHANGES:
            return
        self._changes.append((coord, self.world.get_block(coord)))

    def undo_changes(self) -> None:
        """Restore every recorded block, newest first."""
        for coord, original in reversed(self._changes):
            self.world.set_block(coord, original)
            if self.undo_delay:
                time.sleep(self.undo_delay)
        self._changes.clear()

    def generate_random_maze(self, rows: int, cols: int, test_mode: bool = False) -> list[str]:
        """Carve a perfect maze by depth-first search and open one exit on the right."""
        if rows < 3 or cols < 3:
            raise ValueError("maze must be at least 3x3")
        grid = [[WALL] * cols for _ in range(rows)]
        rng = random.Random(0) if test_mode else random.Random()

        def enter(r, c):
            grid[r][c] = PATH
            dirs = list(_STEPS)
            rng.shuffle(dirs)
            return iter(dirs)

        stack = [(1, 1, enter(1, 1))]
        while stack:
            r, c, dirs = stack[-1]
            for dr, dc in dirs:
                nr, nc = r + dr, c + dc
                if 0 < nr < rows - 1 and 0 < nc < cols - 1 and grid[nr][nc] == WALL:
                    grid[r + dr // 2][c + dc // 2] = PATH
                    stack.append((nr, nc, enter(nr, nc)))
                    break
            else:
                stack.pop()

        for line in grid:
            line[0] = WALL
            line[-1] = WALL
        grid[0] = [WALL] * cols
        grid[-1] = [WALL] * cols

        candidates = [r for r in range(1, rows - 1) if grid[r][cols - 2] == PATH]
        if candidates:
            self.exit_row = candidates[rng.randrange(len(candidates))]
            grid[self.exit_row][cols - 1] = PATH

        return ["".join(line) for line in grid]

    def build_maze(self, maze, length: int, width: int, build_start: Coordinate) -> None:
        """Place the maze in the world, recording every block it replaces."""
        y = build_start.y
        for row, line in enumerate(maze[:width]):
            for col, cell in enumerate(line[:length]):
                ground = build_start + Coordinate(col, 0, row)
                is_wall = cell == WALL
                floor = Coordinate(ground.x, y - 1, ground.z)
                self._save_block_change(floor)
                self.world.set_block(floor, Block.ACACIA_WOOD_PLANK if is_wall else Block.GRASS)

                for h in range(MAZE_HEIGHT):
                    pos = Coordinate(ground.x, y + h, ground.z)
                    self._save_block_change(pos)
                    self.world.set_block(pos, Block.ACACIA_WOOD_PLANK if is_wall else Block.AIR)
                    if cell == PATH and col == length - 1 and row == self.exit_row and h == 0:
                        self.world.set_block(ground, Block.BLUE_CARPET)

    def teleport_player_to_random_dot(self, maze, build_start: Coordinate) -> None:
        """Teleport the player onto a random path tile of the maze."""
        walkable = [
            Coordinate(build_start.x + x, build_start.y + 1, build_start.z + z)
            for z, line in enumerate(maze)
            for x, cell in enumerate(line)
            if cell == PATH
        ]
        if not walkable:
            print("No walkable tiles found to teleport to.")
            return
        chosen = self._rng.choice(walkable)
        self.world.do_command(f"tp @a {chosen.x} {chosen.y} {chosen.z}")