"""Output colors for findr.

Matching paths are colored by entry type when stdout is a terminal.
Colors are Rich style strings read from the ``[colors]`` table of
``~/.config/findr/config.toml``; keys left out keep their defaults::

    [colors]
    directory = "bold blue"
    symlink = "italic cyan"
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.errors import StyleSyntaxError
from rich.style import Style
from rich.theme import Theme

from findr.core.paths import get_config_path
from findr.search.models import EntryType

logger = logging.getLogger(__name__)

# Style name used for entries without an EntryType (FIFOs, sockets, devices)
SPECIAL_STYLE = "path.special"


def path_style(entry_type: EntryType | None) -> str:
    """Get the theme style name for an entry type."""
    if entry_type is None:
        return SPECIAL_STYLE
    return f"path.{entry_type.value}"


class OutputColors(BaseModel):
    """Styles for paths by entry type and for diagnostics.

    Attributes:
        directory: Style of directory paths.
        file: Style of regular file paths.
        symlink: Style of symbolic link paths.
        special: Style of FIFOs, sockets and device nodes.
        warning: Style of non-fatal traversal errors.
        error: Style of the fatal error prefix.
        muted: Style of the ``findr:`` diagnostic prefix.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    directory: str = "bold #0e8ac8"
    file: str = "default"
    symlink: str = "#0ec1c8"
    special: str = "#d44ebc"
    warning: str = "#f5b332"
    error: str = "bold #f53263"
    muted: str = "#b2bec3"

    @field_validator("*", mode="before")
    @classmethod
    def validate_style(cls, v: object, info: Any) -> str:
        """Reject values Rich cannot parse as a style."""
        if not isinstance(v, str):
            msg = f"{info.field_name}: style must be a string"
            raise ValueError(msg)
        style = v.strip()
        try:
            Style.parse(style)
        except StyleSyntaxError as e:
            msg = f"{info.field_name}: invalid style '{style}' ({e})"
            raise ValueError(msg) from None
        return style

    def to_theme(self) -> Theme:
        """Build the Rich theme used by the findr consoles."""
        return Theme(
            {
                path_style(EntryType.DIRECTORY): self.directory,
                path_style(EntryType.FILE): self.file,
                path_style(EntryType.SYMLINK): self.symlink,
                SPECIAL_STYLE: self.special,
                "warning": self.warning,
                "error": self.error,
                "muted": self.muted,
            }
        )


def load_colors(path: Path | None = None) -> OutputColors:
    """Load output colors from the user configuration file.

    A missing file gives the defaults. An unreadable or invalid file is
    logged and also gives the defaults; colors never stop a search.

    Args:
        path: Configuration file. If None, uses the default config path.

    Returns:
        Validated OutputColors.
    """
    config_path = path or get_config_path()

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return OutputColors()
    except (tomllib.TOMLDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable config %s: %s", config_path, e)
        return OutputColors()

    try:
        return OutputColors.model_validate(data.get("colors", {}))
    except ValidationError as e:
        logger.warning("Invalid colors in %s, using defaults: %s", config_path, e)
        return OutputColors()
