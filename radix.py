from enum import Enum


MAX_VALUE = 2**64 - 1


class InvariantError(RuntimeError):
    """Raised when a buffer holds text that is not valid for its base."""


class Base(Enum):
    BINARY = (2, "bin", "01")
    OCTAL = (8, "oct", "01234567")
    DECIMAL = (10, "dec", "0123456789")
    HEXADECIMAL = (16, "hex", "0123456789abcdef")

    def __init__(self, radix, label, digits):
        self.radix = radix
        self.label = label
        self.digits = digits

    @classmethod
    def ordered(cls) -> list["Base"]:
        return list(cls)

    @classmethod
    def from_label(cls, label):
        if not isinstance(label, str):
            return None
        wanted = label.strip().lower()
        for base in cls:
            if wanted in (base.label, base.name.lower()):
                return base
        return None

    def is_valid_digit(self, ch: str) -> bool:
        if not isinstance(ch, str) or len(ch) != 1:
            return False
        return ch.lower() in self.digits

    def prev(self) -> "Base":
        order = Base.ordered()
        return order[max(0, order.index(self) - 1)]

    def next(self) -> "Base":
        order = Base.ordered()
        return order[min(len(order) - 1, order.index(self) + 1)]


def parse(text: str, base: Base) -> int:
    if not text:
        return 0
    # int() would also accept signs, whitespace and underscores
    for ch in text:
        if not base.is_valid_digit(ch):
            raise InvariantError(f"{text!r} is not a valid {base.label} number")
    return int(text, base.radix)


def format_value(value: int, base: Base) -> str:
    if value < 0:
        raise InvariantError(f"negative value {value}")
    if value == 0:
        return ""
    if base is Base.BINARY:
        return format(value, "b")
    if base is Base.OCTAL:
        return format(value, "o")
    if base is Base.HEXADECIMAL:
        return format(value, "X")
    return str(value)


def derive_buffers(text: str, base: Base) -> dict[Base, str]:
    value = parse(text, base)
    return {b: format_value(value, b) for b in Base.ordered()}
