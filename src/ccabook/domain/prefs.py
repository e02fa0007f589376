"""User preferences: window settings and where the address book is stored."""

from dataclasses import dataclass
from pathlib import Path

DEFAULT_ADDRESS_BOOK_PATH = Path("data") / "addressbook.json"


@dataclass(frozen=True)
class GuiSettings:
    window_width: float = 740.0
    window_height: float = 600.0
    window_x: int | None = None
    window_y: int | None = None

    def __post_init__(self):
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError("Window dimensions must be positive.")


class UserPrefs:
    """Mutable holder of GuiSettings and the address book file path."""

    def __init__(self, other: "UserPrefs | None" = None) -> None:
        self._gui_settings = GuiSettings()
        self._address_book_file_path = DEFAULT_ADDRESS_BOOK_PATH
        if other is not None:
            self.reset_data(other)

    def reset_data(self, other: "UserPrefs") -> None:
        if other is None:
            raise TypeError("user prefs must not be None")
        self.gui_settings = other.gui_settings
        self.address_book_file_path = other.address_book_file_path

    @property
    def gui_settings(self) -> GuiSettings:
        return self._gui_settings

    @gui_settings.setter
    def gui_settings(self, settings: GuiSettings) -> None:
        if settings is None:
            raise TypeError("gui settings must not be None")
        self._gui_settings = settings

    @property
    def address_book_file_path(self) -> Path:
        return self._address_book_file_path

    @address_book_file_path.setter
    def address_book_file_path(self, path: Path | str) -> None:
        if path is None:
            raise TypeError("address book file path must not be None")
        self._address_book_file_path = Path(path)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UserPrefs):
            return NotImplemented
        return (
            self._gui_settings == other._gui_settings
            and self._address_book_file_path == other._address_book_file_path
        )

    def __repr__(self) -> str:
        return (
            f"UserPrefs(gui_settings={self._gui_settings!r}, "
            f"address_book_file_path={str(self._address_book_file_path)!r})"
        )
