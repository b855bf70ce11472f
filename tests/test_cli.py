import socket

from mazerunner.cli import main, run
from mazerunner.maze import Maze
from mazerunner.world import Block, Coordinate, MemoryWorld


def _world():
    return MemoryWorld(player_position=Coordinate(0, 0, 0), default=Block.GRASS)


def test_exit_sets_day_and_says_goodbye(capsys):
    world = _world()
    assert run(world, ["5"]) == []
    assert world.commands[0] == "time set day"
    assert "The End!" in capsys.readouterr().out


def test_invalid_main_menu_input(capsys):
    run(_world(), ["abc", "9", "5"])
    out = capsys.readouterr().out
    assert "Invalid input. Please enter a number." in out
    assert "Input Error: Enter a number between 1 and 5 ...." in out


def test_build_and_solve_need_a_maze(capsys):
    world = _world()
    run(world, ["2", "3", "5"])
    out = capsys.readouterr().out
    assert "Please generate a maze before attempting to build one." in out
    assert "Please generate a maze before attempting to solve one." in out
    assert world.commands == ["time set day"]


def test_read_maze_from_terminal(capsys):
    tokens = ["1", "1", "done", "3 3", "xxx", "x.e", "xxx", "5"]
    assert run(_world(), tokens) == ["xxx", "x.e", "xxx"]
    out = capsys.readouterr().out
    assert "Maze read successfully" in out
    assert "**Printing Maze Structure**\nxxx\nx.e\nxxx\n**End Printing Maze**" in out


def test_read_maze_error_then_back(capsys):
    tokens = ["1", "1", "done", "3 3", "xx?", "3", "5"]
    assert run(_world(), tokens) == []
    out = capsys.readouterr().out
    assert "Error Reading Maze. Try again." in out


def test_bad_size_keeps_generate_menu_open(capsys):
    assert run(_world(), ["1", "2", "4", "3", "3", "5"]) == []
    out = capsys.readouterr().out
    assert "Length and width must be odd numbers >= 3!" in out
    assert out.count("------------- GENERATE MAZE -------------") == 2


def test_generated_maze_is_the_test_mode_maze(capsys):
    maze = run(_world(), ["1", "2", "5 7", "4"])
    assert maze == Maze(MemoryWorld()).generate_random_maze(7, 5, True)
    assert "Maze generated successfully" in capsys.readouterr().out


def test_build_places_maze_and_commands():
    world = _world()
    run(world, ["1", "2", "3 3", "2"])
    assert world.commands[-1] == "fill 1 0 0 3 2 2 minecraft:air"
    assert world.commands[-2].startswith("tp @a ")
    assert world.get_block(Coordinate(1, 0, 0)) == Block.ACACIA_WOOD_PLANK
    assert Block.BLUE_CARPET in world.blocks.values()


def test_exit_undoes_build():
    world = _world()
    run(world, ["1", "2", "3 3", "2", "5"])
    assert Block.BLUE_CARPET not in world.blocks.values()
    assert Block.ACACIA_WOOD_PLANK not in world.blocks.values()
    assert world.get_block(Coordinate(1, 0, 0)) == Block.AIR


def test_escape_route_from_wall_reports_trapped(capsys):
    tokens = ["1", "2", "3", "3", "2", "3", "2", "3", "5"]
    run(_world(), tokens)
    out = capsys.readouterr().out
    assert "Sorry, no path, you are trapped!" in out


def test_invalid_solve_choice(capsys):
    run(_world(), ["1", "2", "3 3", "3", "7", "3", "5"])
    out = capsys.readouterr().out
    assert "Invalid choice. Please enter a number from 1 to 3." in out


def test_manual_solve_teleports_onto_path():
    world = _world()
    maze = run(world, ["1", "2", "3 3", "3", "1", "3"])
    command = world.commands[-1].split()
    assert command[:2] == ["tp", "@a"]
    x, y, z = (int(part) for part in command[2:])
    start = Coordinate(1, 0, 0)
    assert y == start.y + 1
    assert maze[z - start.z][x - start.x] == "."


def test_main_reports_unreachable_server(capsys):
    with socket.socket() as probe:
        probe.bind(("127.0.0.1", 0))
        port = probe.getsockname()[1]
    assert main(["--host", "127.0.0.1", "--port", str(port)]) == 1
    assert "Cannot connect" in capsys.readouterr().err