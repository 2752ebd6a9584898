from typing import Optional
from pydantic import BaseModel, model_validator


class ShareLinkResponse(BaseModel):
    token: str
    url: str


class ShareImportRequest(BaseModel):
    """Either a full share URL (or its fragment) or the bare token."""
    url: Optional[str] = None
    token: Optional[str] = None

    @model_validator(mode="after")
    def _one_of(self):
        if not self.url and not self.token:
            raise ValueError("Provide either url or token")
        return self
