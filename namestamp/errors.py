class StampError(Exception):
    """

    Base for anything that stops the config file being stamped.

    """

    def __init__(self, msg, path=None):
        super().__init__(msg)
        self.path = path


class ReadWriteError(StampError):
    """

    File missing, unreadable or unwritable.

    """


class ParseError(StampError):
    """

    Not a single valid YAML document with a mapping at its root, or not serializable back to YAML.

    """


class ShapeError(StampError):
    """

    The `name` field is absent or is not a string.

    """
