"""Configuration of the tag cloud."""

from pydantic import BaseModel, Field


class FontSizeConfig(BaseModel):
    """Range of font size classes used in the tag cloud.

    Stylesheet `tagcloud.css` defines classes `f11` to `f48`.
    """

    minimum: int = 11
    """Font size class of the least frequent word."""

    maximum: int = 48
    """Font size class of the most frequent word."""


class TagCloudConfig(BaseModel):
    """Configuration of one tag cloud generation run."""

    input_path: str
    """Path to the input text file."""

    output_path: str
    """Path to the output HTML file. It is created or truncated."""

    size: int = Field(ge=0)
    """Number of words to include in the tag cloud."""

    escape: bool = True
    """Whether words should be HTML-escaped.

    If false, words are written as is, so words with `<` or `&` break the
    document.
    """

    font_size: FontSizeConfig = FontSizeConfig()
    """Range of font size classes."""
