from enum import Enum


class ResultSymbol(str, Enum):
    WIN = "W"
    DRAW = "D"
    LOSS = "L"


class Venue(str, Enum):
    HOME = "H"
    AWAY = "A"
