from enum import Enum, unique


@unique
class MediaType(str, Enum):
    MOVIE = "movie"
    TV = "tv"
