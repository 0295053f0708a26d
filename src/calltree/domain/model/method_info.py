"""Method identity value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class MethodInfo:
    """Logical method targeted by call nodes.

    Immutable value object with FAIL-FIRST validation.
    Compared by value: two engines reporting the same method
    produce equal targets.

    Attributes:
        module: Module (or class owner) name (e.g., "app.services")
        name: Qualified name inside the module (e.g., "Dashboard.render")
    """

    module: str
    name: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module:
            raise ValueError("module must not be empty")
        if not self.name:
            raise ValueError("name must not be empty")

    @property
    def full_name(self) -> str:
        """Fully qualified name: module.name."""
        return f"{self.module}.{self.name}"

    def __str__(self) -> str:
        return self.full_name
