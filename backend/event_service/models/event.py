# -*- coding: utf-8 -*-
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class Event(BaseModel):
    """イベント1件。title/description も含め、渡された値は型を問わずそのまま保持する。"""

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None  # ストアが採番する
    title: Optional[Any] = None
    description: Optional[Any] = None
