from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CompletionItem(BaseModel):
    """
    One completion candidate. Serialized with `by_alias=True` it takes the
    camelCase shape the popup widget consumes:
    `{label, insertText, kind, typeInfo, isUnknown, sortOrder}`.
    """

    model_config = ConfigDict(populate_by_name=True)

    label: str
    insert_text: str = Field(alias="insertText")
    kind: str
    type_info: Optional[str] = Field(default=None, alias="typeInfo")
    is_unknown: bool = Field(default=False, alias="isUnknown")
    sort_order: int = Field(default=0, alias="sortOrder")
    # Where to put the cursor inside insert_text after insertion (CSS `prop: ;`).
    cursor_offset: Optional[int] = Field(default=None, alias="cursorOffset")
    is_snippet: bool = Field(default=False, alias="isSnippet")
