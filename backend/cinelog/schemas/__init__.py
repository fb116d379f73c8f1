from .review import *
from .watchlist import *
from .user import *

# ReviewPublic doubles as the on-disk shape of anonymous reviews, so make sure
# nested models are fully resolved before the first TypeAdapter is built.
ReviewPublic.model_rebuild()
WatchlistItemPublic.model_rebuild()
