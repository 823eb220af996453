from pydantic import BaseModel
from typing import Optional, Dict, List


class ErrorResponse(BaseModel):
    message: str
    details: Optional[str] = None
    errors: Optional[Dict[str, List[str]]] = None
