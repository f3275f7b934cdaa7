class TagError(Exception):
    pass
