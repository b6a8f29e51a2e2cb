"""Exception taxonomy for MenuTreeLib.

Every error raised by the library derives from MenuTreeError and from the
closest builtin exception, so callers can catch either the library-specific
type or the generic one.

NotSupportedError is the only error the library treats as ordinary control
flow: capability-probing consumers (filters, collectors) interpret it as
"this node does not take part" and move on. All other errors abort the
operation that raised them and reach the caller unchanged.
"""


class MenuTreeError(Exception):
    """Base class for all MenuTreeLib errors."""
    pass


class NotSupportedError(MenuTreeError, NotImplementedError):
    """Raised when a node variant does not offer the requested capability.

    Examples: asking a Category whether it is vegetarian, adding a child to
    an Item, or calling remove() on a depth-first iterator.
    """

    def __init__(self, capability: str, target: object = None):
        self.capability = capability
        self.target = target
        if target is None:
            message = f"{capability} is not supported"
        else:
            message = f"{capability} is not supported by {target!r}"
        super().__init__(message)


class EndOfSequenceError(MenuTreeError, LookupError):
    """Raised when next() is called on an exhausted iterator."""
    pass


class InvalidStructureError(MenuTreeError, ValueError):
    """Raised when an add() would break the tree shape.

    Covers adding a category to itself or to one of its descendants, and
    adding a node that is still owned by another category.
    """
    pass


class IndexOutOfRangeError(MenuTreeError, IndexError):
    """Raised by Category.child_at() for an index outside the child list."""
    pass


class NotFoundError(MenuTreeError, LookupError):
    """Raised by Category.remove() when the node is not a direct child."""
    pass


class ConcurrentModificationError(MenuTreeError, RuntimeError):
    """Raised when a subtree changes structurally while an iterator is live."""
    pass


class CapabilityMismatchError(MenuTreeError, ValueError):
    """Raised when a traversal configuration cannot be executed."""
    pass
