from pydantic import BaseModel

class TrendingTag(BaseModel):
    tag: str
    count: int
