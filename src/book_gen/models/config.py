"""Book configuration stored in book.toml."""

import tomllib
from pathlib import Path
from typing import Annotated

import tomli_w
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationError

from book_gen.errors import ConfigLoadError

CONFIG_FILE = "book.toml"


def _relative(value: Path) -> Path:
    if value.is_absolute():
        raise ValueError(f"must be a path relative to the book root, got {value}")
    return value


RelativePath = Annotated[Path, AfterValidator(_relative)]


class BookSection(BaseModel):
    """The [book] table."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: str | None = None
    authors: list[str] = Field(default_factory=list)
    description: str | None = None
    language: str | None = "en"
    multilingual: bool = False
    src: RelativePath = Path("src")


class BuildSection(BaseModel):
    """The [build] table."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    build_dir: RelativePath = Field(default=Path("book"), alias="build-dir")
    create_missing: bool = Field(default=True, alias="create-missing")


class HtmlConfig(BaseModel):
    """The [output.html] table."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    theme: Path | None = None


class OutputSection(BaseModel):
    """The [output] table, one sub-table per renderer."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    html: HtmlConfig | None = None


class Config(BaseModel):
    """Complete book configuration.

    Usage:
        config = Config.load(root / "book.toml")
        config.book.src              # Path("src")
        config.build.build_dir       # Path("book")
        config.html_config()         # HtmlConfig or None
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    book: BookSection = Field(default_factory=BookSection)
    build: BuildSection = Field(default_factory=BuildSection)
    output: OutputSection = Field(default_factory=OutputSection)

    def html_config(self) -> HtmlConfig | None:
        return self.output.html

    def to_toml(self) -> str:
        """Serialize to TOML text.

        Raises:
            TypeError: If a value has no TOML representation
        """
        data = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        if not data["output"]:
            del data["output"]
        return tomli_w.dumps(data)

    @classmethod
    def from_toml(cls, text: str, path: Path | None = None) -> "Config":
        """Parse TOML text into a Config."""
        try:
            data = tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            raise ConfigLoadError(path, f"invalid TOML: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(path, str(e)) from e

    @classmethod
    def load(cls, path: Path) -> "Config":
        """Load book.toml, falling back to defaults when it doesn't exist."""
        if not path.exists():
            return cls()
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(path, str(e)) from e
        return cls.from_toml(text, path)
