"""Book catalog and translator directory models."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A catalog entry for a corpus book (the Qur'an or a Hadith collection)."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: int
    slug: str
    type: Literal["scripture", "hadith"]
    title: str
    unwan: str  # Arabic title
    author: str | None = None  # scripture has no author
    ref_template: str = Field(alias="refTemplate")  # e.g. "https://…/{{page}}"


class BooksManifest(BaseModel):
    """Contents of ``books.json``."""

    books: list[Book] = Field(default_factory=list)


class Translator(BaseModel):
    """A translator referenced by excerpt and heading ``translator`` ids."""

    id: int
    name: str
    img: str | None = None


class TranslatorsManifest(BaseModel):
    translators: list[Translator] = Field(default_factory=list)
