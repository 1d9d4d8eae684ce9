"""Shared runtime definitions: commands, flags, limits and the binary header."""

from __future__ import annotations

import enum
import struct
import sys
from dataclasses import dataclass
from typing import ClassVar

INK_BIN_VERSION = 0

INVALID_HASH = 0

# Runtime limits. A negative value means the storage grows dynamically,
# starting with the absolute value as its initial size.
LIMIT_GLOBAL_VARIABLES = -50
LIMIT_THREAD_DEPTH = -10
LIMIT_EVAL_STACK_DEPTH = -20
LIMIT_CONTAINER_DEPTH = -20
LIMIT_ACTIVE_TAGS = 10
LIMIT_RUNTIME_STACK = -20
LIMIT_REFERENCE_STACK = -20
LIMIT_OUTPUT_SIZE = 200
MAX_CHOICES = 10
MAX_LIST_TYPES = -20
MAX_FLAGS = -200
MAX_LISTS = -50


class InkError(RuntimeError):
    """Raised when the runtime detects an invalid operation or state."""


class Command(enum.IntEnum):
    """Instruction opcodes of a compiled story."""

    # Value commands
    STR = 0
    INT = 1
    BOOL = 2
    FLOAT = 3
    VALUE_POINTER = 4
    DIVERT_VAL = 5
    LIST = 6
    NEWLINE = 7
    GLUE = 8
    VOID = 9
    TAG = 10

    # Diverts
    DIVERT = 11
    DIVERT_TO_VARIABLE = 12
    TUNNEL = 13
    FUNCTION = 14

    # Terminal commands
    DONE = 15
    END = 16
    TUNNEL_RETURN = 17
    FUNCTION_RETURN = 18

    # Variable definitions
    DEFINE_TEMP = 19
    SET_VARIABLE = 20

    # Evaluation stack
    START_EVAL = 21
    END_EVAL = 22
    OUTPUT = 23
    POP = 24
    DUPLICATE = 25
    PUSH_VARIABLE_VALUE = 26
    VISIT = 27
    READ_COUNT = 28
    SEQUENCE = 29
    SEED = 30

    # String stack
    START_STR = 31
    END_STR = 32

    # Choices
    CHOICE = 33

    # Threading
    THREAD = 34

    # Ternary operators
    LIST_RANGE = 35
    OP_BEGIN = 35
    TERNARY_OPERATORS_START = 35
    TERNARY_OPERATORS_END = 35

    # Binary operators
    ADD = 36
    BINARY_OPERATORS_START = 36
    SUBTRACT = 37
    DIVIDE = 38
    MULTIPLY = 39
    MOD = 40
    RANDOM = 41
    IS_EQUAL = 42
    GREATER_THAN = 43
    LESS_THAN = 44
    GREATER_THAN_EQUALS = 45
    LESS_THAN_EQUALS = 46
    NOT_EQUAL = 47
    AND = 48
    OR = 49
    MIN = 50
    MAX = 51
    HAS = 52
    HASNT = 53
    INTERSECTION = 54
    LIST_INT = 55
    BINARY_OPERATORS_END = 55

    # Unary operators
    NOT = 56
    UNARY_OPERATORS_START = 56
    NEGATE = 57
    LIST_COUNT = 58
    LIST_MIN = 59
    LIST_MAX = 60
    READ_COUNT_VAR = 61
    TURNS = 62
    LRND = 63
    FLOOR = 64
    CEILING = 65
    INT_CAST = 66
    LIST_ALL = 67
    LIST_INVERT = 68
    LIST_VALUE = 69
    UNARY_OPERATORS_END = 69

    CHOICE_COUNT = 70
    OP_END = 71

    # Container tracking
    START_CONTAINER_MARKER = 71
    END_CONTAINER_MARKER = 72

    # Function calls
    CALL_EXTERNAL = 73

    NUM_COMMANDS = 74


class CommandFlag(enum.IntFlag):
    """Modifier bits attached to a command; meaning depends on the command."""

    NO_FLAGS = 0

    CHOICE_HAS_CONDITION = 1 << 0
    CHOICE_HAS_START_CONTENT = 1 << 1
    CHOICE_HAS_CHOICE_ONLY_CONTENT = 1 << 2
    CHOICE_IS_INVISIBLE_DEFAULT = 1 << 3
    CHOICE_IS_ONCE_ONLY = 1 << 4

    DIVERT_HAS_CONDITION = 1 << 0
    DIVERT_IS_FALLTHROUGH = 1 << 1

    CONTAINER_MARKER_TRACK_VISITS = 1 << 0
    CONTAINER_MARKER_TRACK_TURNS = 1 << 1

    ASSIGNMENT_IS_REDEFINE = 1 << 0

    FUNCTION_TO_VARIABLE = 1 << 0
    TUNNEL_TO_VARIABLE = 1 << 0


def command_num_args(cmd: Command | int) -> int:
    """Return how many stack arguments an operator command consumes."""
    cmd = Command(cmd)
    if Command.TERNARY_OPERATORS_START <= cmd <= Command.TERNARY_OPERATORS_END:
        return 3
    if Command.BINARY_OPERATORS_START <= cmd <= Command.BINARY_OPERATORS_END:
        return 2
    if Command.UNARY_OPERATORS_START <= cmd <= Command.UNARY_OPERATORS_END:
        return 1
    return 0


@dataclass(frozen=True)
class ListFlag:
    """Identifies one flag of one list definition."""

    list_id: int
    flag: int


NULL_FLAG = ListFlag(-1, -1)
EMPTY_FLAG = ListFlag(-1, 0)


def is_whitespace(text: str, include_newline: bool = True) -> bool:
    """Return True if ``text`` holds only spaces and tabs (and newlines if allowed)."""
    allowed = {" ", "\t", "\n"} if include_newline else {" ", "\t"}
    return all(ch in allowed for ch in text)


def is_part_of_word(character: str) -> bool:
    """Return True for ASCII letters and digits."""
    return len(character) == 1 and character.isascii() and character.isalnum()


def swap_bytes(value: int, size: int) -> int:
    """Reverse the byte order of an unsigned integer of ``size`` bytes."""
    mask = (1 << (8 * size)) - 1
    return int.from_bytes((value & mask).to_bytes(size, "little"), "big")


class Endian(enum.IntEnum):
    """Byte-order marker of a compiled story relative to this machine."""

    NONE = 0
    SAME = 0x0001
    DIFFER = 0x0100


@dataclass
class Header:
    """Header of a compiled story file."""

    endian: Endian = Endian.NONE
    ink_version_number: int = 0
    ink_bin_version_number: int = 0

    SIZE: ClassVar[int] = 2 + 2 * 4

    def read_list_flag(self, data: bytes, offset: int = 0) -> tuple[ListFlag, int]:
        """Read a list flag at ``offset``; return it with the offset after it."""
        if self.endian is Endian.DIFFER:
            order = ">" if sys.byteorder == "little" else "<"
        else:
            order = "="
        try:
            list_id, flag = struct.unpack_from(order + "hh", data, offset)
        except struct.error as exc:
            raise InkError("not enough data to read a list flag") from exc
        return ListFlag(list_id, flag), offset + struct.calcsize("=hh")