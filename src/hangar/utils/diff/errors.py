"""
Errors raised while rendering configuration diffs.
"""


class SerializationError(Exception):
    """A snapshot could not be turned into an ordered field list"""


class WriteError(Exception):
    """The output sink rejected a write"""
