"""Decoded bearer-token payload"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, FiniteFloat


class Claims(BaseModel):
    """JWT claims; unknown claims are kept as extra fields"""

    sub: Optional[str] = None
    # json.loads accepts NaN/Infinity, which would never compare as expired
    exp: Optional[FiniteFloat] = None

    model_config = ConfigDict(extra="allow", frozen=True)
