from hexcube import Hex, linedraw, spiral_path

start = Hex(0, 0)
target = Hex(5, -2)

blocked = {Hex(1, 0), Hex(2, -1), Hex(3, -1)}


def has_line_of_sight(a: Hex, b: Hex) -> bool:
    return not any(h in blocked for h in linedraw(a, b))


def nearest_open(center: Hex, max_radius: int) -> Hex | None:
    for h in spiral_path(center, max_radius):
        if h not in blocked:
            return h
    return None


if __name__ == "__main__":
    print("line:", [str(h) for h in linedraw(start, target)])
    print("line of sight:", has_line_of_sight(start, target))
    print("nearest open to [1,0]:", nearest_open(Hex(1, 0), 3))
