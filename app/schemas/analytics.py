from enum import Enum
from typing import NamedTuple


class Order(str, Enum):
    ascending = "asc"
    descending = "dsc"

    @classmethod
    def parse(cls, value):
        """Query/CLI value to Order: absent means ascending, anything but 'asc' descending."""
        if value is None or value == cls.ascending.value:
            return cls.ascending
        return cls.descending


# Plain tuple rather than a pydantic model: words may carry surrogate
# escapes for undecodable bytes.
class WordFrequency(NamedTuple):
    count: int
    word: str
