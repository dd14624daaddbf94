from pydantic import BaseModel, RootModel
from typing import List

class RomanizedText(BaseModel):
    text: str       # input exactly as given
    romanized: str  # NFKC-normalized Latin rendering

class RomanizedBatch(RootModel[List[RomanizedText]]):
    pass
