"""Domain exceptions for graph documents and edits."""


class PipeworkError(Exception):
    """Base exception for graph, document and rendering errors."""

    pass


class ValidationError(PipeworkError):
    """Raised when a submitted field is malformed."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class EmptyIdentifierError(ValidationError):
    """Raised when a name is empty after trimming."""

    def __init__(self, field: str = "Name"):
        super().__init__(field, "must not be empty")


class InvalidIdentifierError(ValidationError):
    """Raised when a channel-bearing name does not match the identifier grammar."""

    def __init__(self, value: str, field: str = "Name"):
        self.value = value
        super().__init__(field, f"invalid identifier {value!r}")


class InvalidCapacityError(ValidationError):
    """Raised when a channel capacity is negative or not an integer."""

    def __init__(self, value: object, field: str = "Cap"):
        self.value = value
        super().__init__(field, f"capacity must be a non-negative integer, got {value!r}")


class ReferentialError(PipeworkError):
    """Raised when an operation would leave a dangling node reference."""

    pass


class UnknownNodeError(ReferentialError):
    """Raised when a name does not refer to a node in the graph."""

    def __init__(self, node: str, field: str | None = None):
        self.node = node
        self.field = field
        prefix = f"{field}: " if field else ""
        super().__init__(f"{prefix}unknown node {node!r}")


class UnknownEdgeError(ReferentialError):
    """Raised when a name does not refer to an edge in the graph."""

    def __init__(self, edge: str):
        self.edge = edge
        super().__init__(f"unknown edge {edge!r}")


class NameConflictError(PipeworkError):
    """Raised when a rename target is already taken."""

    def __init__(self, name: str, kind: str = "node"):
        self.name = name
        self.kind = kind
        super().__init__(f"{kind} name {name!r} is already in use")


class DecodeError(PipeworkError):
    """Raised when a document does not have the expected shape."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


class UnknownPartTypeError(DecodeError):
    """Raised when a part type tag is not in the registry."""

    def __init__(self, part_type: str):
        self.part_type = part_type
        super().__init__(f"unknown part type {part_type!r}")


class TemplateError(PipeworkError):
    """Raised when rendered output cannot be composed."""

    pass


class DocumentLoadError(PipeworkError):
    """Raised when a document file cannot be read or parsed."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class EditorSetupError(Exception):
    """Raised when a part's editor view cannot be associated at startup."""

    pass
