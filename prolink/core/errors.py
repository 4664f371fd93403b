"""
Error taxonomy shared by the store layer and the feed services.

StoreError is raised by store implementations for any failed call.
Services catch it at their stage boundary and re-raise it as
QueryFailure (reads) or MutationFailure (writes), each carrying a
message suitable for showing to the caller.
"""


class StoreError(Exception):
    """A store call failed (connection, constraint, unknown table, ...)"""


class FeedError(Exception):
    """Base class for failures surfaced to callers of the feed services"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class QueryFailure(FeedError):
    """A read failed or timed out; the whole fetch cycle is aborted"""


class MutationFailure(FeedError):
    """An insert, update or delete failed"""
