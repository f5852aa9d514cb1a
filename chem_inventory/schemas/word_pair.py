from pydantic import BaseModel


class WordPairRead(BaseModel):
    first: str
    second: str
    as_pascal_case: str
    as_lower_case: str
