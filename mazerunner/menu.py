"""Menu and message text for the maze runner console."""

TEAM_MEMBERS = ("Team member 1", "Team member 2", "Team member 3")

_PROMPT = "Enter Menu item to continue: "


def _emit(lines: list[str]) -> str:
    """Print the lines, one per line, and return the text that was printed."""
    text = "\n".join(lines) + "\n"
    print(text, end="")
    return text


def _menu(title: str, items: list[str]) -> list[str]:
    lines = ["", f"------------- {title} -------------"]
    lines.extend(f"{number}) {item}" for number, item in enumerate(items, start=1))
    lines.extend(["", _PROMPT])
    return lines


def print_start_text() -> str:
    """Print the welcome banner and return it."""
    title = "Welcome to MineCraft MazeRunner!"
    return _emit(["", title, "-" * len(title)])


def print_main_menu() -> str:
    """Print the main menu and return it."""
    return _emit(
        _menu(
            "MAIN MENU",
            [
                "Generate Maze",
                "Build Maze in MineCraft",
                "Solve Maze",
                "Show Team Information",
                "Exit",
            ],
        )
    )


def print_generate_maze_menu() -> str:
    """Print the maze generation menu and return it."""
    return _emit(
        _menu("GENERATE MAZE", ["Read Maze from terminal", "Generate Random Maze", "Back"])
    )


def print_solve_maze_menu() -> str:
    """Print the maze solving menu and return it."""
    return _emit(_menu("SOLVE MAZE", ["Solve Manually", "Show Escape Route", "Back"]))


def print_team_info() -> str:
    """Print the team listing and return it."""
    lines = ["", "Team members:"]
    lines.extend(
        f"\t [{number}] {name}" for number, name in enumerate(TEAM_MEMBERS, start=1)
    )
    lines.append("")
    return _emit(lines)


def print_exit_message() -> str:
    """Print the farewell message and return it."""
    return _emit(["", "The End!", ""])