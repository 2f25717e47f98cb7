"""Domain entity representing a registered hub module."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Module:
    """Module able to raise notifications, with its menu metadata."""

    name: str
    root: str
    menu_icon: str
    menu_text: str

    @property
    def default_url(self) -> str:
        """Return the dashboard path of the module."""

        return f"/modules/{self.name}"


__all__ = ["Module"]
