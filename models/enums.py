"""Closed tag sets used to select transforms."""

from enum import Enum

from models.errors import InvalidArgumentError


class _TaggedEnum(Enum):

    @classmethod
    def parse(cls, tag):
        """Map a textual tag (or an existing member) onto a member."""
        if isinstance(tag, cls):
            return tag
        key = str(tag).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise InvalidArgumentError(f"Unknown {cls.__name__} tag: {tag!r}")


class ColorChannel(_TaggedEnum):
    RED = 'red'
    GREEN = 'green'
    BLUE = 'blue'

    @property
    def index(self) -> int:
        return ('red', 'green', 'blue').index(self.value)


class SplitKind(_TaggedEnum):
    BLUR = 'blur'
    SHARPEN = 'sharpen'
    GREYSCALE = 'greyscale'
    SEPIA = 'sepia'
    COLOR_CORRECT = 'color-correct'
    LEVELS_ADJUST = 'levels-adjust'
