"""
Per-browser storage of reviews and watchlist items for visitors without an
account. Nothing here talks to the database; every operation takes the
browser's key-value storage as an explicit argument.
"""
