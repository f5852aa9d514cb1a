from typing import Any

from fastapi import APIRouter, Depends

from chem_inventory.schemas.word_pair import WordPairRead
from chem_inventory.services.word_pair_service import WordPairService

router = APIRouter()
word_pair_service = WordPairService()


def get_word_pair_service() -> WordPairService:
    return word_pair_service


@router.get("/random", response_model=WordPairRead)
async def random_word_pair(
    service: WordPairService = Depends(get_word_pair_service),
) -> Any:
    """
    Get a random pair of words.
    """
    first, second = service.random_pair()
    return WordPairRead(
        first=first,
        second=second,
        as_pascal_case=service.as_pascal_case(first, second),
        as_lower_case=service.as_lower_case(first, second),
    )
