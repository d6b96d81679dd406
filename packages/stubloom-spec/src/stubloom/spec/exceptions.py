from typing import Any, Hashable


class StubloomError(Exception):
    pass


class MissingTypeDescriptorError(StubloomError):
    """
    A methods block names an identity key for which no class or enum shape
    was registered. This is a producer-side bug, never a user input error.
    """

    def __init__(self, identity_key: Hashable):
        self.identity_key = identity_key
        super().__init__(
            f"Missing class/enum descriptor for methods block with identity key {identity_key!r}"
        )


class DuplicateVariableError(StubloomError):
    def __init__(self, module: str, name: str):
        self.module = module
        self.name = name
        super().__init__(f"Variable '{name}' registered twice in module '{module}'")


class UnknownTypeReferenceError(StubloomError, TypeError):
    def __init__(self, reference: Any):
        self.reference = reference
        super().__init__(f"Cannot resolve a stub type for {reference!r}")
