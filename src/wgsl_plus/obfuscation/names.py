DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    result = ""
    while value:
        value, remainder = divmod(value, 36)
        result = DIGITS[remainder] + result
    return result


class NameGenerator:
    """
    Hands out `_0`, `_1`, ... `_a`, ... `_10` in order.
    Every obfuscation run owns one, so concurrent runs never share a counter.
    """

    prefix: str
    index: int

    def __init__(self, prefix: str = "_") -> None:
        self.prefix = prefix
        self.index = 0

    def next(self) -> str:
        name = self.prefix + to_base36(self.index)
        self.index += 1
        return name

    def reset(self):
        self.index = 0
