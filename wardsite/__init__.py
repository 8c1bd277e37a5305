"""Ward Site — congregation calendar and posts API."""
