"""Configuration models for todoplus.yml."""

from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.datetime import DEFAULT_TIMESTAMP_FORMAT


def _validate_color(v: str) -> str:
    """Validate color is a hex code."""
    if not v.startswith("#"):
        raise ValueError(f"Color '{v}' must be a hex code (e.g., #fff or #ffffff)")
    hex_part = v[1:]
    if len(hex_part) not in (3, 6):
        raise ValueError("Hex color must be 3 or 6 characters (e.g., #fff or #ffffff)")
    if not all(c in "0123456789abcdefABCDEF" for c in hex_part):
        raise ValueError("Invalid hex color code")
    return v


class SymbolsConfig(BaseModel):
    """Glyphs written when a todo changes status."""

    box: str = Field(default="☐", min_length=1)
    done: str = Field(default="✔", min_length=1)
    cancelled: str = Field(default="✘", min_length=1)
    tag: str = Field(default="@", min_length=1, max_length=1)


class TagsConfig(BaseModel):
    """Priority tag vocabulary.

    Names are ranked by position (first = most important) and index into
    ``colors.tag_backgrounds``.
    """

    names: list[str] = Field(
        default_factory=lambda: ["critical", "high", "medium", "low", "today"],
        min_length=1,
    )

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Priority names must be unique bare words."""
        for name in v:
            if not name or not all(c.isalnum() or c in "_-" for c in name):
                raise ValueError(f"Tag name '{name}' must be alphanumeric")
        if len(v) != len(set(v)):
            raise ValueError("Tag names must be unique")
        return v

    def rank(self, name: str) -> int | None:
        """Position of a priority name in the vocabulary, or None."""
        try:
            return self.names.index(name)
        except ValueError:
            return None


class ColorsConfig(BaseModel):
    """Colors used by the HTML export."""

    project: str = "#66d9ef"
    done: str = "#a6e25b"
    cancelled: str = "#f92672"
    tag: str = "#e6db74"
    tag_backgrounds: list[str] = Field(
        default_factory=lambda: ["#e54545", "#e59345", "#e5d545", "#4596e5", "#8e45e5"],
        min_length=1,
    )

    @field_validator("project", "done", "cancelled", "tag")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate color is a hex code."""
        return _validate_color(v)

    @field_validator("tag_backgrounds")
    @classmethod
    def validate_backgrounds(cls, v: list[str]) -> list[str]:
        """Validate every palette entry."""
        return [_validate_color(c) for c in v]


class TimekeepingConfig(BaseModel):
    """Which time tags are written by state transitions."""

    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    finished_enabled: bool = True
    elapsed_enabled: bool = True


class ArchiveConfig(BaseModel):
    """Settings for the archive command."""

    name: str = Field(default="Archive", min_length=1)
    project_tag: bool = True
    project_separator: str = "."


class FileConfig(BaseModel):
    """Todo file discovery and creation."""

    names: list[str] = Field(
        default_factory=lambda: ["TODO", "todo.todo", "TODO.todo", "todo.taskpaper"],
        min_length=1,
    )
    extensions: list[str] = Field(default_factory=lambda: [".todo", ".taskpaper"])
    default_content: str = "\nProject:\n  ☐ Item\n"

    @property
    def default_name(self) -> str:
        """Name used when creating a new todo file."""
        return self.names[0]


class TodoPlusConfig(BaseModel):
    """Root configuration model for todoplus.yml."""

    version: int = 1
    indentation: str = Field(default="  ", min_length=1)
    symbols: SymbolsConfig = Field(default_factory=SymbolsConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)
    colors: ColorsConfig = Field(default_factory=ColorsConfig)
    timekeeping: TimekeepingConfig = Field(default_factory=TimekeepingConfig)
    archive: ArchiveConfig = Field(default_factory=ArchiveConfig)
    file: FileConfig = Field(default_factory=FileConfig)

    @field_validator("indentation")
    @classmethod
    def validate_indentation(cls, v: str) -> str:
        """Indentation must be whitespace only."""
        if v.strip():
            raise ValueError("Indentation must be spaces or a tab")
        return v

    @model_validator(mode="after")
    def validate_palette_size(self) -> "TodoPlusConfig":
        """Every priority name needs a background color."""
        if len(self.colors.tag_backgrounds) < len(self.tags.names):
            raise ValueError(
                f"colors.tag_backgrounds has {len(self.colors.tag_backgrounds)} entries "
                f"but tags.names has {len(self.tags.names)}"
            )
        return self

    def tag_background(self, name: str) -> str | None:
        """Background color for a priority tag name, or None if unknown."""
        rank = self.tags.rank(name)
        if rank is None:
            return None
        return self.colors.tag_backgrounds[rank]

    @classmethod
    def default(cls) -> "TodoPlusConfig":
        """Create default configuration."""
        return cls()
