from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from intern_tracker.core.exceptions import InvalidArgumentError

DEFAULT_INTERNSHIP_FILE_PATH = Path("data") / "internshipbook.json"


@dataclass(frozen=True)
class GuiSettings:
    """
    Window geometry remembered between runs. x/y are None until the window has been placed once.
    """
    window_width: float = 740.0
    window_height: float = 600.0
    window_x: Optional[int] = None
    window_y: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GuiSettings:
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"gui_settings must be an object, got {type(data).__name__}")
        return cls(
            window_width=float(data.get("window_width", 740.0)),
            window_height=float(data.get("window_height", 600.0)),
            window_x=data.get("window_x"),
            window_y=data.get("window_y"),
        )


@dataclass
class UserPrefs:
    """
    User preferences: where the internship book lives and how the window was laid out.
    Opaque to the model manager, which only passes it through.
    """
    gui_settings: GuiSettings = field(default_factory=GuiSettings)
    internship_file_path: Path = DEFAULT_INTERNSHIP_FILE_PATH

    def reset_data(self, other: UserPrefs) -> None:
        if other is None:
            raise InvalidArgumentError("user prefs must not be None")
        self.gui_settings = other.gui_settings
        self.internship_file_path = Path(other.internship_file_path)

    def set_gui_settings(self, gui_settings: GuiSettings) -> None:
        if gui_settings is None:
            raise InvalidArgumentError("gui settings must not be None")
        self.gui_settings = gui_settings

    def set_internship_file_path(self, path: Path) -> None:
        if path is None:
            raise InvalidArgumentError("internship file path must not be None")
        self.internship_file_path = Path(path)

    def copy(self) -> UserPrefs:
        return UserPrefs(gui_settings=self.gui_settings, internship_file_path=self.internship_file_path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "gui_settings": asdict(self.gui_settings),
            "internship_file_path": self.internship_file_path.as_posix(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> UserPrefs:
        if not isinstance(data, dict):
            raise InvalidArgumentError(f"user prefs must be an object, got {type(data).__name__}")
        gui_settings = data.get("gui_settings")
        return cls(
            gui_settings=GuiSettings.from_dict(gui_settings if gui_settings is not None else {}),
            internship_file_path=Path(data.get("internship_file_path") or DEFAULT_INTERNSHIP_FILE_PATH),
        )
