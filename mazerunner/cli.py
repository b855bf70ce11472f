"""The interactive maze runner console."""

from __future__ import annotations

import argparse
import sys

from mazerunner.agent import Agent
from mazerunner.maze import Maze
from mazerunner.mazeio import MazeInputError, _stream, print_maze, read_length_width, read_maze
from mazerunner.menu import (
    print_exit_message,
    print_generate_maze_menu,
    print_main_menu,
    print_solve_maze_menu,
    print_start_text,
    print_team_info,
)
from mazerunner.world import DEFAULT_HOST, DEFAULT_PORT, Coordinate, MinecraftConnection


def _read_choice(stream) -> int | None:
    try:
        return int(stream.word())
    except ValueError:
        return None


class _Session:
    def __init__(self, world, stream):
        self.world = world
        self.stream = stream
        self.builder = Maze(world)
        self.maze: list[str] = []
        self.length = 0
        self.width = 0
        self.build_start = Coordinate()

    def generate_menu(self) -> None:
        while True:
            print_generate_maze_menu()
            choice = _read_choice(self.stream)
            if choice == 1:
                try:
                    rows, base = read_maze(self.world, self.stream)
                except MazeInputError as exc:
                    print(exc)
                    print("Error Reading Maze. Try again.")
                    continue
                print("Maze read successfully")
                print_maze(rows)
                self.maze = rows
                self.length = len(rows[0])
                self.width = len(rows)
                self.build_start = base
                return
            if choice == 2:
                self.build_start = self.world.get_player_position() + Coordinate(1, 0, 0)
                try:
                    length, width = read_length_width(self.stream)
                except MazeInputError as exc:
                    print(exc)
                    continue
                self.length, self.width = length, width
                self.maze = self.builder.generate_random_maze(width, length, True)
                print("Maze generated successfully")
                print_maze(self.maze)
                return
            if choice == 3:
                return
            print("Error. Please enter a number from 1 to 3")

    def build(self) -> None:
        if not self.maze:
            print(
                "Maze has not been created. "
                "Please generate a maze before attempting to build one."
            )
            return
        start = self.build_start
        x2 = start.x + self.length - 1
        z2 = start.z + self.width - 1
        self.world.do_command(f"tp @a {start.x} {start.y + 1} {start.z}")
        self.world.do_command(
            f"fill {start.x} {start.y} {start.z} {x2} {start.y + 2} {z2} minecraft:air"
        )
        self.builder.build_maze(self.maze, self.length, self.width, start)

    def solve_menu(self) -> None:
        if not self.maze:
            print(
                "Maze has not been created. "
                "Please generate a maze before attempting to solve one."
            )
            return
        while True:
            print_solve_maze_menu()
            choice = _read_choice(self.stream)
            if choice == 1:
                self.builder.teleport_player_to_random_dot(self.maze, self.build_start)
            elif choice == 2:
                agent = Agent(self.world, self.build_start)
                agent.initialize_player_block()
                agent.guide_to_exit()
            elif choice == 3:
                return
            else:
                print("Invalid choice. Please enter a number from 1 to 3.")


def run(world, tokens) -> list[str]:
    """Run the menu loop on input words until Exit or end of input; return the current maze."""
    session = _Session(world, _stream(tokens))
    world.do_command("time set day")
    try:
        while True:
            print_start_text()
            print_main_menu()
            choice = _read_choice(session.stream)
            if choice is None:
                print("Invalid input. Please enter a number.")
            elif choice == 1:
                session.generate_menu()
            elif choice == 2:
                session.build()
            elif choice == 3:
                session.solve_menu()
            elif choice == 4:
                print_team_info()
            elif choice == 5:
                print_exit_message()
                session.builder.undo_changes()
                break
            else:
                print("Input Error: Enter a number between 1 and 5 ....")
    except EOFError:
        pass
    return session.maze


def _stdin_lines():
    yield from sys.stdin


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="mazerunner", description="Build and solve mazes in Minecraft.")
    parser.add_argument("--host", default=DEFAULT_HOST, help="server host name")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="server port")
    args = parser.parse_args(argv)

    try:
        connection = MinecraftConnection(args.host, args.port)
    except OSError as exc:
        print(f"Cannot connect to Minecraft at {args.host}:{args.port}: {exc}", file=sys.stderr)
        return 1
    with connection:
        run(connection, _stdin_lines())
    return 0


if __name__ == "__main__":
    sys.exit(main())