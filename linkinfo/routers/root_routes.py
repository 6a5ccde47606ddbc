from fastapi import APIRouter

from linkinfo import __version__

router = APIRouter()


@router.get("/")
def read_root():
    return {"message": "LinkInfo is running!", "version": __version__}
