from fastapi import APIRouter

from chem_inventory.api.v1.endpoints import chemicals, word_pairs

api_router = APIRouter()

# Include chemical inventory endpoints
api_router.include_router(
    chemicals.router, prefix="/chemicals", tags=["chemicals"])

# Include the random word pair demo
api_router.include_router(
    word_pairs.router, prefix="/word-pairs", tags=["word-pairs"])
