# mazerunner

mazerunner is a terminal menu for making mazes in a Minecraft world. You can type a maze in or have one generated. The tool then builds the maze out of blocks next to you, and it can lay out the way to the exit.

mazerunner needs nothing outside the Python standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

You need a Minecraft server that accepts the line-based remote API. Join that server, then run:

```
mazerunner [--host HOST] [--port PORT]
```

`--host` defaults to `localhost` and `--port` defaults to `4711`. If no connection can be made, the command prints an error and exits with status 1.

Menu choices and maze cells are read from standard input as words separated by whitespace. The program stops when you choose Exit or when input ends.

When it starts, the program sends `time set day`. The main menu then offers these choices:

1. **Generate Maze**
   - *Read Maze from terminal*:
     - Stand in the world and type `done`. The maze will start one block along +x and +z from where you stand.
     - Enter the length and width. Both must be odd numbers of at least 3.
     - Enter the cells row by row: `x` for wall, `.` for path, `e` for exit.
   - *Generate Random Maze*:
     - Enter the length and width. The maze will start one block along +x from where you stand.
     - The maze is carved by a depth-first search.
     - One opening is made in the right-hand wall.
     - The menu always uses a fixed seed, so a given size always gives the same maze.
2. **Build Maze in MineCraft**
   - Teleports you to the maze corner and fills the area with air.
   - Walls are acacia planks three blocks high over an acacia floor.
   - Paths have a grass floor.
   - The opening of a generated maze gets a blue carpet. A typed `e` cell is built as an ordinary path.
3. **Solve Maze**
   - *Solve Manually*: teleports you onto a random `.` tile.
   - *Show Escape Route*:
     - Finds the shortest route from where you stand to a blue carpet. It searches by breadth-first search through air, at your height.
     - A lime carpet then moves along the route one step per second, and each step is printed.
     - If there is no route, it prints "Sorry, no path, you are trapped!".
4. **Show Team Information**
5. **Exit**: puts back every block the builder changed, newest first. At most 10,000 changes are recorded.

## Using it as a library

### World objects

The code reaches the world through an object with four methods:

- `get_block`
- `set_block`
- `get_player_position`
- `do_command`

Two classes provide them:

- `mazerunner.world.MinecraftConnection(host, port)` talks to a live server. It can be used as a context manager.
- `mazerunner.world.MemoryWorld(player_position, default)` keeps blocks in a dictionary. It records each command in `commands`. Of those commands, only `tp` and `fill ... minecraft:air` take effect.

### Other modules

| Module | Contents |
|---|---|
| `mazerunner.world` | `Coordinate` and the `Block` types used by the code (`AIR`, `GRASS`, `ACACIA_WOOD_PLANK`, `BLUE_CARPET`, `LIME_CARPET`) |
| `mazerunner.maze` | `Maze`: generate, build, teleport and undo |
| `mazerunner.agent` | `Agent`, which finds the route, and `Orientation`, with turn and step helpers |
| `mazerunner.mazeio` | `read_base_point`, `read_length_width`, `read_maze`, `format_maze`, `print_maze`. Bad input raises `MazeInputError`. |
| `mazerunner.menu` | Menu and message printers. Each one also returns the text it printed. |
| `mazerunner.cli` | `run(world, tokens)` runs the whole menu loop against any world object. `main(argv=None)` is the command entry point. |

### Example

```python
from mazerunner.world import Coordinate, MemoryWorld
from mazerunner.maze import Maze
from mazerunner.agent import Agent

world = MemoryWorld(Coordinate(2, 4, 2))
maze = Maze(world)
maze.undo_delay = 0

rows = maze.generate_random_maze(7, 9, True)   # 7 rows, 9 columns
maze.build_maze(rows, 9, 7, Coordinate(1, 4, 1))

agent = Agent(world, Coordinate(2, 4, 2))
agent.step_delay = 0
agent.initialize_player_block()
route = agent.solve_with_bfs()     # coordinates from the first step to the exit
laid = agent.guide_to_exit()       # where the lime carpet was placed

maze.undo_changes()
```

`Maze.undo_delay` and `Agent.step_delay` are in seconds. Set them to 0 to skip the pauses.

## What it does not do

- Typed mazes are not checked beyond their characters. Nothing checks that the paths are connected or that an exit exists.
- Mazes cannot be saved to or loaded from files.
- The escape route is only shown with carpet. The player is not moved along it.
- Undo happens only when you choose Exit.