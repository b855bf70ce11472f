import socket
import threading

import pytest

from mazerunner.world import Block, Coordinate, MemoryWorld, MinecraftConnection


def _serve(replies):
    listener = socket.create_server(("127.0.0.1", 0))
    port = listener.getsockname()[1]
    received = []

    def handle():
        conn, _ = listener.accept()
        with conn, conn.makefile("r", encoding="utf-8", newline="\n") as reader:
            for line in reader:
                line = line.rstrip("\n")
                received.append(line)
                for prefix, reply in replies.items():
                    if line.startswith(prefix):
                        conn.sendall((reply + "\n").encode("utf-8"))
        listener.close()

    thread = threading.Thread(target=handle, daemon=True)
    thread.start()
    return port, received, thread


def test_coordinate_addition_identity_and_commutative():
    a = Coordinate(3, -4, 7)
    b = Coordinate(-1, 2, 5)
    assert a + Coordinate() == a
    assert a + b == b + a
    assert (a + b).y == a.y + b.y


def test_coordinate_is_hashable():
    assert len({Coordinate(1, 2, 3), Coordinate(1, 2, 3)}) == 1


def test_block_constants():
    assert Block.AIR == Block(0, 0)
    assert Block.BLUE_CARPET.id == Block.LIME_CARPET.id
    assert Block.BLUE_CARPET != Block.LIME_CARPET


def test_memory_world_default_and_set():
    stone = Block(1)
    world = MemoryWorld(Coordinate(0, 0, 0), stone)
    spot = Coordinate(4, 5, 6)
    assert world.get_block(spot) == stone
    world.set_block(spot, Block.GRASS)
    assert world.get_block(spot) == Block.GRASS
    assert world.get_block(Coordinate(4, 5, 7)) == stone


def test_memory_world_tp_moves_player():
    world = MemoryWorld(Coordinate(0, 0, 0))
    world.do_command("tp @a 10 64 -3")
    assert world.get_player_position() == Coordinate(10, 64, -3)
    assert world.commands == ["tp @a 10 64 -3"]


def test_memory_world_fill_air():
    world = MemoryWorld(Coordinate(), Block(1))
    world.do_command("fill 0 0 0 1 1 1 minecraft:air")
    assert world.get_block(Coordinate(1, 1, 1)) == Block.AIR
    assert world.get_block(Coordinate(0, 0, 0)) == Block.AIR
    assert world.get_block(Coordinate(2, 0, 0)) == Block(1)


def test_memory_world_records_other_commands():
    world = MemoryWorld()
    world.do_command("time set day")
    assert world.commands == ["time set day"]
    assert world.get_player_position() == Coordinate()


def test_connection_round_trip():
    port, received, thread = _serve(
        {"world.getBlockWithData": "5,4", "player.getPos": "1.5,64.0,-2.5"}
    )
    with MinecraftConnection("127.0.0.1", port) as conn:
        conn.set_block(Coordinate(1, 2, 3), Block.ACACIA_WOOD_PLANK)
        assert conn.get_block(Coordinate(1, 2, 3)) == Block(5, 4)
        assert conn.get_player_position() == Coordinate(1, 64, -3)
        conn.do_command("time set day")
    thread.join(timeout=5)
    assert received[0] == "world.setBlock(1,2,3,5,4)"
    assert received[-1] == "player.doCommand(time set day)"
    assert len(received) == 4


def test_connection_fail_reply_raises():
    port, _, thread = _serve({"world.getBlockWithData": "Fail"})
    conn = MinecraftConnection("127.0.0.1", port)
    with pytest.raises(ConnectionError):
        conn.get_block(Coordinate(0, 0, 0))
    conn.close()
    thread.join(timeout=5)