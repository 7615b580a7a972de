"""Run configuration built from the command line."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from website_compressor.utils.textio import DEFAULT_CHARSET, resolve_charset


class Configuration(BaseModel):
    """Options shared by every compressor during one run."""

    model_config = ConfigDict(frozen=True)

    charset: str = Field(DEFAULT_CHARSET, description="Encoding used to read and write files")
    line_break: int = Field(-1, description="Column after which a line break is inserted, -1 for none")
    compress_css: bool = False
    compress_js: bool = False
    disable_optimizations: bool = False
    nomunge: bool = False
    preserve_comments: bool = False
    preserve_intertag_spaces: bool = False
    preserve_line_breaks: bool = False
    preserve_multi_spaces: bool = False
    preserve_quotes: bool = False
    preserve_semi: bool = False

    @field_validator("charset", mode="before")
    @classmethod
    def fallback_charset(cls, value: str | None) -> str:
        return resolve_charset(value)

    @property
    def munge(self) -> bool:
        return not self.nomunge
