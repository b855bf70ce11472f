"""Coordinates, block types and access to a world, live or in memory."""

from __future__ import annotations

import math
import socket
from dataclasses import dataclass
from typing import ClassVar

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 4711


@dataclass(frozen=True)
class Coordinate:
    """A block position in the world."""

    x: int = 0
    y: int = 0
    z: int = 0

    def __add__(self, other: Coordinate) -> Coordinate:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return Coordinate(self.x + other.x, self.y + other.y, self.z + other.z)


@dataclass(frozen=True)
class Block:
    """A block type: numeric id plus data (modifier) value."""

    id: int
    mod: int = 0

    AIR: ClassVar[Block]
    GRASS: ClassVar[Block]
    ACACIA_WOOD_PLANK: ClassVar[Block]
    BLUE_CARPET: ClassVar[Block]
    LIME_CARPET: ClassVar[Block]


Block.AIR = Block(0, 0)
Block.GRASS = Block(2, 0)
Block.ACACIA_WOOD_PLANK = Block(5, 4)
Block.LIME_CARPET = Block(171, 5)
Block.BLUE_CARPET = Block(171, 11)

_NAMED_BLOCKS = {"minecraft:air": Block.AIR, "air": Block.AIR}


class MemoryWorld:
    """A world kept in a dictionary, for offline use and testing."""

    def __init__(self, player_position: Coordinate = Coordinate(), default: Block = Block.AIR):
        self.player_position = player_position
        self.default = default
        self.blocks: dict[Coordinate, Block] = {}
        self.commands: list[str] = []

    def get_block(self, coord: Coordinate) -> Block:
        return self.blocks.get(coord, self.default)

    def set_block(self, coord: Coordinate, block: Block) -> None:
        self.blocks[coord] = block

    def get_player_position(self) -> Coordinate:
        return self.player_position

    def do_command(self, command: str) -> None:
        """Record a command; ``tp`` and ``fill`` with a known block take effect."""
        self.commands.append(command)
        words = command.split()
        if not words:
            return
        try:
            if words[0] == "tp" and len(words) == 5:
                x, y, z = (int(w) for w in words[2:5])
                self.player_position = Coordinate(x, y, z)
            elif words[0] == "fill" and len(words) == 8 and words[7] in _NAMED_BLOCKS:
                x1, y1, z1, x2, y2, z2 = (int(w) for w in words[1:7])
                block = _NAMED_BLOCKS[words[7]]
                for x in range(min(x1, x2), max(x1, x2) + 1):
                    for y in range(min(y1, y2), max(y1, y2) + 1):
                        for z in range(min(z1, z2), max(z1, z2) + 1):
                            self.blocks[Coordinate(x, y, z)] = block
        except ValueError:
            pass


class MinecraftConnection:
    """A line-based text connection to a running Minecraft server."""

    def __init__(self, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT):
        self._sock = socket.create_connection((host, port))
        self._reader = self._sock.makefile("r", encoding="utf-8", newline="\n")

    def __enter__(self) -> MinecraftConnection:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _send(self, method: str, *args) -> None:
        line = f"{method}({','.join(str(arg) for arg in args)})\n"
        self._sock.sendall(line.encode("utf-8"))

    def _request(self, method: str, *args) -> str:
        self._send(method, *args)
        reply = self._reader.readline()
        if not reply:
            raise ConnectionError("connection closed by server")
        reply = reply.rstrip("\r\n")
        if reply == "Fail":
            raise ConnectionError(f"server failed to handle {method}")
        return reply

    def get_block(self, coord: Coordinate) -> Block:
        reply = self._request("world.getBlockWithData", coord.x, coord.y, coord.z)
        try:
            block_id, _, mod = reply.partition(",")
            return Block(int(block_id), int(mod) if mod else 0)
        except ValueError as exc:
            raise ConnectionError(f"malformed block reply: {reply!r}") from exc

    def set_block(self, coord: Coordinate, block: Block) -> None:
        self._send("world.setBlock", coord.x, coord.y, coord.z, block.id, block.mod)

    def get_player_position(self) -> Coordinate:
        reply = self._request("player.getPos")
        try:
            x, y, z = (math.floor(float(part)) for part in reply.split(","))
        except ValueError as exc:
            raise ConnectionError(f"malformed position reply: {reply!r}") from exc
        return Coordinate(x, y, z)

    def do_command(self, command: str) -> None:
        self._send("player.doCommand", command)

    def close(self) -> None:
        self._reader.close()
        self._sock.close()